"""
ttestflow: assumption-checked t-tests for small tabular datasets.

The workflow has four stages, each a pure function of the previous
stage's output:

    DataSource          load a CSV into named columns
    run_test            one-sample, paired, pooled or Welch t-test
    compute_residuals   residuals about group means
    check_normality     QQ pairs plus the Shapiro-Wilk test

plus mean_se_plot / qq_plot for figures and analyze() to run everything
in one call.

Submodules:
    hypothesis: t-tests
    diagnostics: residuals, QQ pairs, Shapiro-Wilk
    descriptive: per-group summary statistics
    plotting: matplotlib figures
    workflow: the end-to-end analyze() call
"""

__version__ = "0.1.0"

from ttestflow.core.datasource import DataSource
from ttestflow.hypothesis import run_test, run_grouped_test
from ttestflow.diagnostics import (
    compute_residuals,
    normal_qq,
    shapiro_wilk,
    check_normality,
)
from ttestflow.descriptive import group_summary
from ttestflow.workflow import analyze

__all__ = [
    "__version__",
    "DataSource",
    "run_test",
    "run_grouped_test",
    "compute_residuals",
    "normal_qq",
    "shapiro_wilk",
    "check_normality",
    "group_summary",
    "analyze",
]
