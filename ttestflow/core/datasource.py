"""
Universal DataSource for ttestflow.

DataSource is the "I have data" abstraction: it loads a table of named
columns and hands them out. It knows nothing about t-tests or residuals.
Every later stage takes arrays pulled from a DataSource as explicit inputs
and returns a new value, so the table itself is never reassigned or mutated
between steps.

Usage:
    from ttestflow import DataSource

    ds = DataSource.from_file("crabs.csv")
    ds = DataSource.from_dataframe(df)
    ds = DataSource.from_arrays(weight=w, site=labels)

    ds.keys()               # frozenset({'weight', 'site'})
    w = ds.numeric('weight')
    site = ds.labels('site')
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from ttestflow.core.exceptions import ValidationError
from ttestflow.core.validation import check_labels
from ttestflow.core.capabilities import (
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
    CAPABILITY_CATEGORICAL,
)

if TYPE_CHECKING:
    import pandas as pd


def _is_numeric_column(values: Any) -> bool:
    arr = np.asarray(values)
    return np.issubdtype(arr.dtype, np.number) and arr.dtype != np.bool_


@dataclass(frozen=True)
class DataSource:
    """
    Read-only table of named 1D columns.

    Numeric columns are stored as float64 arrays; every other column is
    stored as an object array of its raw labels.

    Construct via factory classmethods, not directly.
    """
    _data: dict[str, NDArray[Any]]
    _capabilities: frozenset[str]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Column Access ===

    def keys(self) -> frozenset[str]:
        """
        Return the names of all available columns.

        Example:
            >>> ds = DataSource.from_arrays(weight=[1.0, 2.0], site=['a', 'b'])
            >>> ds.keys()
            frozenset({'weight', 'site'})
        """
        return frozenset(self._data.keys())

    def __getitem__(self, key: str) -> NDArray[Any]:
        """
        Access a named column (a copy, so callers cannot mutate the source).

        Raises:
            KeyError: If key not found, with a message listing available columns
        """
        if key not in self._data:
            available = sorted(self.keys())
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {available}"
            )
        return self._data[key].copy()

    def __contains__(self, key: str) -> bool:
        """Check if a column exists."""
        return key in self._data

    def numeric(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Return a numeric column as float64.

        Raises:
            KeyError: If the column does not exist
            ValidationError: If the column holds categorical labels
        """
        column = self[key]
        if not _is_numeric_column(column):
            raise ValidationError(
                f"column '{key}' is categorical, expected numeric measurements"
            )
        return column.astype(np.float64)

    def labels(self, key: str) -> NDArray[np.str_]:
        """Return a column as an array of string labels."""
        column = self[key]
        if _is_numeric_column(column):
            # Integer-valued codes read as floats (1.0) should label as '1'
            as_float = column.astype(np.float64)
            if np.all(np.isfinite(as_float)) and np.all(as_float == np.round(as_float)):
                return check_labels(as_float.astype(np.int64), key)
        return check_labels(column, key)

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of rows."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata.copy()

    def supports(self, capability: str) -> bool:
        """
        Check if this DataSource supports a capability.

        Unknown capabilities return False, never raise.
        """
        return capability in self._capabilities

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, **named_arrays: Any) -> DataSource:
        """Construct from array-likes of equal length."""
        if not named_arrays:
            raise ValidationError("from_arrays requires at least one named array")

        storage: dict[str, NDArray[Any]] = {}
        categorical = False
        for name, values in named_arrays.items():
            arr = np.asarray(values)
            if arr.ndim != 1:
                raise ValidationError(
                    f"column '{name}': expected 1D array, got shape {arr.shape}"
                )
            if _is_numeric_column(arr):
                storage[name] = arr.astype(np.float64)
            else:
                storage[name] = arr.astype(object)
                categorical = True

        lengths = {name: len(arr) for name, arr in storage.items()}
        if len(set(lengths.values())) > 1:
            raise ValidationError(f"columns have inconsistent lengths: {lengths}")

        return cls(
            _data=storage,
            _capabilities=_capabilities_for(categorical),
            _metadata={
                'n_observations': next(iter(lengths.values())),
                'source': 'arrays',
                'columns': list(storage.keys()),
            },
        )

    @classmethod
    def from_file(cls, path: str | Path, *, columns: list[str] | None = None) -> DataSource:
        """
        Construct from a delimited text file (.csv or .tsv).

        Raises:
            FileNotFoundError: If the file does not exist
            ValidationError: Unknown suffix, unparsable content, or a
                requested column that is absent
        """
        import pandas as pd

        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in ('.csv', '.tsv'):
            raise ValidationError(f"Unknown file format: {suffix!r} (expected .csv or .tsv)")
        if not path.exists():
            raise FileNotFoundError(f"No such data file: {path}")

        sep = '\t' if suffix == '.tsv' else ','
        try:
            df = pd.read_csv(path, sep=sep, usecols=columns)
        except pd.errors.EmptyDataError as e:
            raise ValidationError(f"{path}: file is empty") from e
        except pd.errors.ParserError as e:
            raise ValidationError(f"{path}: cannot parse: {e}") from e
        except ValueError as e:
            # pandas reports missing usecols entries as ValueError
            raise ValidationError(f"{path}: {e}") from e

        return cls.from_dataframe(df, source_path=str(path))

    @classmethod
    def from_dataframe(cls, df: 'pd.DataFrame', *, source_path: str | None = None) -> DataSource:
        """Construct from a pandas DataFrame."""
        import pandas as pd

        storage: dict[str, NDArray[Any]] = {}
        categorical = False
        for col in df.columns:
            series = df[col]
            if pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
                storage[str(col)] = series.to_numpy(dtype=np.float64)
            else:
                storage[str(col)] = series.to_numpy(dtype=object)
                categorical = True

        metadata: dict[str, Any] = {
            'n_observations': len(df),
            'source': 'dataframe',
            'columns': list(storage.keys()),
        }
        if source_path:
            metadata['source_path'] = source_path

        return cls(
            _data=storage,
            _capabilities=_capabilities_for(categorical),
            _metadata=metadata,
        )

    def __repr__(self) -> str:
        return (
            f"DataSource(n_observations={self.n_observations}, "
            f"columns={list(self._data.keys())})"
        )


def _capabilities_for(categorical: bool) -> frozenset[str]:
    caps = {CAPABILITY_MATERIALIZED, CAPABILITY_REPEATABLE}
    if categorical:
        caps.add(CAPABILITY_CATEGORICAL)
    return frozenset(caps)
