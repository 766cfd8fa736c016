"""
Shapiro-Wilk test of normality.

The statistic and p-value come from scipy.stats.shapiro (Royston's
algorithm). This module owns the applicability rules: the test is only
defined for SHAPIRO_MIN_N <= n <= SHAPIRO_MAX_N and for data that are not
all identical.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from ttestflow.core.exceptions import InapplicableTestError
from ttestflow.diagnostics._common import SHAPIRO_MIN_N, SHAPIRO_MAX_N

METHOD = "Shapiro-Wilk normality test"


def applicability(x: NDArray[np.floating[Any]]) -> str | None:
    """Return why the test cannot run on x, or None if it can."""
    n = len(x)
    if n < SHAPIRO_MIN_N:
        return f"sample size must be at least {SHAPIRO_MIN_N}, got {n}"
    if n > SHAPIRO_MAX_N:
        return f"sample size must be at most {SHAPIRO_MAX_N}, got {n}"
    if np.ptp(x) <= 10.0 * np.finfo(np.float64).eps * np.max(np.abs(x)):
        return "all values are identical"
    return None


def shapiro_impl(x: NDArray[np.floating[Any]]) -> tuple[float, float]:
    """
    Compute the W statistic and its p-value.

    Raises:
        InapplicableTestError: If the sample is outside the test's domain
    """
    reason = applicability(x)
    if reason is not None:
        raise InapplicableTestError(
            f"Shapiro-Wilk test is inapplicable: {reason}",
            test_name="Shapiro-Wilk",
            n=len(x),
            min_n=SHAPIRO_MIN_N,
            max_n=SHAPIRO_MAX_N,
        )
    res = sp_stats.shapiro(x)
    return float(res.statistic), float(min(1.0, res.pvalue))
