"""
Tests for analyze() and WorkflowReport.
"""

import json

import numpy as np
import pytest
from numpy.testing import assert_allclose

from ttestflow import DataSource, analyze, run_test
from ttestflow.core.exceptions import ValidationError
from ttestflow.workflow import WorkflowReport


class TestTwoGroupWorkflow:

    def test_matches_direct_test(self, two_group_csv, site_samples):
        north, south = site_samples
        report = analyze(two_group_csv, "weight", group="site")
        direct = run_test(north, south)
        assert isinstance(report, WorkflowReport)
        assert report.test.statistic == pytest.approx(direct.statistic, rel=1e-12)
        assert report.test.p_value == pytest.approx(direct.p_value, rel=1e-12)
        assert report.test.data_name == "north and south"

    def test_welch(self, two_group_csv, site_samples):
        north, south = site_samples
        report = analyze(two_group_csv, "weight", group="site", equal_variance=False)
        direct = run_test(north, south, equal_variance=False)
        assert report.test.df == pytest.approx(direct.df, rel=1e-12)

    def test_residuals_about_group_means(self, two_group_csv, site_samples):
        north, south = site_samples
        report = analyze(two_group_csv, "weight", group="site")
        assert_allclose(
            report.residuals.values,
            np.concatenate([north - north.mean(), south - south.mean()]),
            atol=1e-12,
        )
        assert report.residuals.grouped

    def test_normality_on_residuals(self, two_group_csv):
        report = analyze(two_group_csv, "weight", group="site")
        assert report.normality.applicable
        assert report.normality.n == 12
        assert len(report.normality.qq_pairs) == 12

    def test_group_summary(self, two_group_csv, site_samples):
        north, _ = site_samples
        report = analyze(two_group_csv, "weight", group="site")
        assert report.groups.labels == ("north", "south")
        assert report.groups.row("north")["mean"] == pytest.approx(north.mean())

    def test_accepts_datasource(self, site_samples):
        north, south = site_samples
        ds = DataSource.from_arrays(
            weight=np.concatenate([north, south]),
            site=["north"] * 6 + ["south"] * 6,
        )
        report = analyze(ds, "weight", group="site")
        assert report.test.method == "Two Sample t-test"


class TestPairedWorkflow:

    def test_long_format_with_ids(self, paired_long_csv, paired_samples):
        before, after = paired_samples
        report = analyze(paired_long_csv, "height", group="time", ids="plant", paired=True)
        direct = run_test(after, before, paired=True)
        assert report.test.method == "Paired t-test"
        assert report.test.statistic == pytest.approx(direct.statistic, rel=1e-12)
        assert report.test.p_value == pytest.approx(direct.p_value, rel=1e-12)

    def test_residuals_are_centred_differences(self, paired_long_csv, paired_samples):
        before, after = paired_samples
        report = analyze(paired_long_csv, "height", group="time", ids="plant", paired=True)
        d = after - before
        assert_allclose(np.sort(report.residuals.values), np.sort(d - d.mean()), atol=1e-12)
        assert not report.residuals.grouped
        assert report.normality.n == 7

    def test_wide_format(self, wide_csv, paired_samples):
        before, after = paired_samples
        report = analyze(wide_csv, "after", second="before", paired=True)
        direct = run_test(after, before, paired=True)
        assert report.test.statistic == pytest.approx(direct.statistic, rel=1e-12)
        assert report.groups.labels == ("after", "before")

    def test_wide_format_unpaired(self, wide_csv, paired_samples):
        before, after = paired_samples
        report = analyze(wide_csv, "after", second="before")
        direct = run_test(after, before)
        assert report.test.statistic == pytest.approx(direct.statistic, rel=1e-12)
        assert len(report.residuals) == 14
        assert report.residuals.grouped


class TestOneSampleWorkflow:

    def test_one_sample(self, wide_csv, paired_samples):
        before, _ = paired_samples
        report = analyze(wide_csv, "before", null_mean=12.0)
        direct = run_test(before, null_mean=12.0)
        assert report.test.statistic == pytest.approx(direct.statistic, rel=1e-12)
        assert report.groups.labels == ("all",)
        assert_allclose(report.residuals.values, before - before.mean(), atol=1e-12)

    def test_small_sample_normality_inapplicable(self, tmp_path):
        path = tmp_path / "tiny.csv"
        path.write_text("x\n1.5\n2.5\n")
        report = analyze(path, "x")
        assert not report.normality.applicable
        assert any("not applicable" in w for w in report.warnings)


class TestWorkflowErrors:

    def test_group_and_second(self, wide_csv):
        with pytest.raises(ValidationError, match="not both"):
            analyze(wide_csv, "after", group="plant", second="before")

    def test_ids_without_paired(self, paired_long_csv):
        with pytest.raises(ValidationError, match="ids"):
            analyze(paired_long_csv, "height", group="time", ids="plant")

    def test_paired_without_partner(self, wide_csv):
        with pytest.raises(ValidationError, match="paired"):
            analyze(wide_csv, "after", paired=True)

    def test_unknown_column(self, wide_csv):
        with pytest.raises(KeyError, match="Available"):
            analyze(wide_csv, "weight")

    def test_categorical_value_column(self, wide_csv):
        with pytest.raises(ValidationError, match="categorical"):
            analyze(wide_csv, "plant")

    def test_too_many_groups(self, tmp_path):
        path = tmp_path / "three.csv"
        path.write_text("g,y\na,1\na,2\nb,3\nb,4\nc,5\nc,6\n")
        with pytest.raises(ValidationError, match="exactly 2 groups"):
            analyze(path, "y", group="g")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            analyze(tmp_path / "nope.csv", "y")


class TestReportOutput:

    def test_summary_sections(self, two_group_csv):
        s = analyze(two_group_csv, "weight", group="site").summary()
        assert "Two Sample t-test" in s
        assert "Group summary:" in s
        assert "Residual normality:" in s
        assert "Shapiro-Wilk normality test" in s

    def test_to_dict_is_json_serialisable(self, two_group_csv):
        d = analyze(two_group_csv, "weight", group="site").to_dict()
        restored = json.loads(json.dumps(d))
        assert restored["columns"]["group"] == "site"
        assert restored["test"]["method"] == "Two Sample t-test"
        assert restored["normality"]["applicable"] is True
        assert set(restored["groups"]) == {"north", "south"}

    def test_warnings_collected(self, tmp_path):
        path = tmp_path / "gaps.csv"
        path.write_text("g,y\na,1\na,\na,3\nb,4\nb,6\nb,5\n")
        with pytest.warns(RuntimeWarning, match="removed 1"):
            report = analyze(path, "y", group="g")
        assert any("removed 1" in w for w in report.warnings)
        assert len(report.residuals) == 5

    def test_repr(self, two_group_csv):
        assert repr(analyze(two_group_csv, "weight", group="site")).startswith("WorkflowReport(")
