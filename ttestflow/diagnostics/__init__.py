"""
Assumption diagnostics module.

Public API:
    compute_residuals(x, groups)  - residuals about group (or grand) means
    normal_qq(r)                  - normal QQ pairs
    shapiro_wilk(r)               - Shapiro-Wilk W and p-value
    check_normality(r)            - QQ pairs plus Shapiro-Wilk when applicable
"""

from ttestflow.diagnostics.solvers import (
    compute_residuals,
    normal_qq,
    shapiro_wilk,
    check_normality,
)
from ttestflow.diagnostics._common import (
    ResidualParams,
    NormalityParams,
    QQPairs,
    SHAPIRO_MIN_N,
    SHAPIRO_MAX_N,
)
from ttestflow.diagnostics.solution import ResidualSet, NormalityAssessment

__all__ = [
    "compute_residuals",
    "normal_qq",
    "shapiro_wilk",
    "check_normality",
    "ResidualParams",
    "NormalityParams",
    "QQPairs",
    "ResidualSet",
    "NormalityAssessment",
    "SHAPIRO_MIN_N",
    "SHAPIRO_MAX_N",
]
