"""
Tests for DataSource: loading, column access, and failure modes.
"""

import numpy as np
import pandas as pd
import pytest

from ttestflow import DataSource
from ttestflow.core.capabilities import (
    CAPABILITY_CATEGORICAL,
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
)
from ttestflow.core.exceptions import ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestFromFile:

    def test_csv_columns(self, two_group_csv):
        ds = DataSource.from_file(two_group_csv)
        assert ds.keys() == frozenset({"crab", "site", "weight"})
        assert ds.n_observations == 12
        assert ds.metadata["source_path"] == str(two_group_csv)

    def test_numeric_column(self, two_group_csv, site_samples):
        ds = DataSource.from_file(two_group_csv)
        a, b = site_samples
        np.testing.assert_allclose(ds.numeric("weight"), np.concatenate([a, b]))
        assert ds.numeric("weight").dtype == np.float64

    def test_label_column(self, two_group_csv):
        ds = DataSource.from_file(two_group_csv)
        assert ds.labels("site").tolist() == ["north"] * 6 + ["south"] * 6

    def test_selected_columns(self, two_group_csv):
        ds = DataSource.from_file(two_group_csv, columns=["weight"])
        assert ds.keys() == frozenset({"weight"})

    def test_tsv(self, tmp_path):
        path = tmp_path / "data.tsv"
        path.write_text("x\tg\n1.5\ta\n2.5\tb\n")
        ds = DataSource.from_file(path)
        np.testing.assert_allclose(ds.numeric("x"), [1.5, 2.5])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DataSource.from_file(tmp_path / "nope.csv")

    def test_unknown_suffix(self, tmp_path):
        path = tmp_path / "data.xlsx"
        path.write_text("")
        with pytest.raises(ValidationError, match="Unknown file format"):
            DataSource.from_file(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(ValidationError, match="empty"):
            DataSource.from_file(path)

    def test_missing_requested_column(self, two_group_csv):
        with pytest.raises(ValidationError):
            DataSource.from_file(two_group_csv, columns=["length"])


class TestFromDataframe:

    def test_mixed_columns(self):
        df = pd.DataFrame({"x": [1, 2, 3], "g": ["a", "b", "a"]})
        ds = DataSource.from_dataframe(df)
        assert ds["x"].dtype == np.float64
        assert ds["g"].dtype == object
        assert ds.supports(CAPABILITY_CATEGORICAL)

    def test_all_numeric_not_categorical(self):
        ds = DataSource.from_dataframe(pd.DataFrame({"x": [1.0, 2.0]}))
        assert ds.supports(CAPABILITY_MATERIALIZED)
        assert ds.supports(CAPABILITY_REPEATABLE)
        assert not ds.supports(CAPABILITY_CATEGORICAL)

    def test_bool_column_is_categorical(self):
        ds = DataSource.from_dataframe(pd.DataFrame({"x": [1.0, 2.0], "b": [True, False]}))
        assert ds.labels("b").tolist() == ["True", "False"]


class TestFromArrays:

    def test_named_arrays(self):
        ds = DataSource.from_arrays(weight=[1.0, 2.0, 3.0], site=["a", "b", "a"])
        assert ds.n_observations == 3
        assert ds.labels("site").tolist() == ["a", "b", "a"]

    def test_inconsistent_lengths(self):
        with pytest.raises(ValidationError, match="inconsistent lengths"):
            DataSource.from_arrays(x=[1.0, 2.0], y=[1.0])

    def test_requires_arrays(self):
        with pytest.raises(ValidationError):
            DataSource.from_arrays()

    def test_2d_rejected(self):
        with pytest.raises(ValidationError, match="1D"):
            DataSource.from_arrays(x=np.zeros((2, 2)))


# ═══════════════════════════════════════════════════════════════════════
# Access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_unknown_column_lists_available(self):
        ds = DataSource.from_arrays(x=[1.0])
        with pytest.raises(KeyError, match="Available"):
            ds["y"]

    def test_contains(self):
        ds = DataSource.from_arrays(x=[1.0])
        assert "x" in ds
        assert "y" not in ds

    def test_getitem_returns_copy(self):
        ds = DataSource.from_arrays(x=[1.0, 2.0])
        col = ds["x"]
        col[0] = 99.0
        assert ds["x"][0] == 1.0

    def test_numeric_rejects_labels(self):
        ds = DataSource.from_arrays(x=[1.0, 2.0], g=["a", "b"])
        with pytest.raises(ValidationError, match="categorical"):
            ds.numeric("g")

    def test_integer_codes_as_labels(self):
        ds = DataSource.from_arrays(g=[1, 2, 2])
        assert ds.labels("g").tolist() == ["1", "2", "2"]

    def test_unknown_capability_false(self):
        ds = DataSource.from_arrays(x=[1.0])
        assert ds.supports("streaming") is False

    def test_repr(self):
        ds = DataSource.from_arrays(x=[1.0, 2.0])
        assert "n_observations=2" in repr(ds)
