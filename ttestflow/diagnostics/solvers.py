"""
Assumption-checking entry points.

    compute_residuals(sample, group_labels)  - residuals about group means
    normal_qq(residuals)                     - (theoretical, sample) pairs
    shapiro_wilk(residuals)                  - formal test; raises if inapplicable
    check_normality(residuals)               - QQ pairs plus the test when it applies
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from ttestflow.core.compute.timing import Timer
from ttestflow.core.result import Result
from ttestflow.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_labels,
    check_consistent_length,
    check_min_samples,
)
from ttestflow.diagnostics._common import ResidualParams, NormalityParams, QQPairs
from ttestflow.diagnostics._residuals import residuals_impl
from ttestflow.diagnostics._qq import qq_impl
from ttestflow.diagnostics._shapiro import METHOD, applicability, shapiro_impl
from ttestflow.diagnostics.solution import ResidualSet, NormalityAssessment

BACKEND_NAME = 'cpu_diagnostics'


def _as_residual_array(residuals: ArrayLike | ResidualSet) -> NDArray[np.floating[Any]]:
    if isinstance(residuals, ResidualSet):
        return residuals.values
    arr = check_array(residuals, "residuals")
    check_1d(arr, "residuals")
    check_finite(arr, "residuals")
    check_min_samples(arr, 1, "residuals")
    return arr.astype(np.float64)


def compute_residuals(
    sample: ArrayLike,
    group_labels: ArrayLike | None = None,
) -> ResidualSet:
    """
    Residuals about the group means.

    Parameters
    ----------
    sample : array-like
        1D observations. Must be finite.
    group_labels : array-like or None
        Group of every observation. None compares every observation to
        the grand mean.

    Returns
    -------
    ResidualSet
        Residuals in input order; within each group they sum to ~0.
    """
    x = check_array(sample, "sample")
    check_1d(x, "sample")
    check_finite(x, "sample")
    check_min_samples(x, 1, "sample")

    labels = None
    if group_labels is not None:
        labels = check_labels(group_labels, "group_labels")
        check_consistent_length(x, labels, names=("sample", "group_labels"))

    timer = Timer()
    timer.start()
    with timer.section('residuals'):
        params = residuals_impl(x.astype(np.float64), labels)
    timer.stop()

    return ResidualSet(Result(
        params=params,
        info={'n_groups': len(params.group_means)},
        timing=timer.result(),
        backend_name=BACKEND_NAME,
    ))


def normal_qq(residuals: ArrayLike | ResidualSet) -> QQPairs:
    """
    Pair sorted residuals with standard-normal quantiles.

    Rank i of n is paired with the normal quantile at (i - 0.5) / n. The
    result depends only on the multiset of values, not on their order.
    """
    return qq_impl(_as_residual_array(residuals))


def shapiro_wilk(residuals: ArrayLike | ResidualSet) -> NormalityAssessment:
    """
    Shapiro-Wilk test of normality.

    Raises
    ------
    InapplicableTestError
        n < 3, n > 5000, or all residuals identical.
    """
    x = _as_residual_array(residuals)

    timer = Timer()
    timer.start()
    with timer.section('shapiro_wilk'):
        w, p = shapiro_impl(x)
    with timer.section('qq'):
        qq = qq_impl(x)
    timer.stop()

    params = NormalityParams(
        method=METHOD,
        n=len(x),
        statistic=w,
        p_value=p,
        applicable=True,
        reason=None,
        qq=qq,
    )
    return NormalityAssessment(Result(
        params=params,
        info={'test': 'shapiro_wilk'},
        timing=timer.result(),
        backend_name=BACKEND_NAME,
    ))


def check_normality(residuals: ArrayLike | ResidualSet) -> NormalityAssessment:
    """
    Gather the evidence for judging residual normality.

    Always returns the QQ pairs. Runs the Shapiro-Wilk test when it is
    defined for the sample; otherwise the assessment is marked
    inapplicable with the reason, and nothing is raised.
    """
    x = _as_residual_array(residuals)
    reason = applicability(x)
    if reason is None:
        return shapiro_wilk(x)

    timer = Timer()
    timer.start()
    with timer.section('qq'):
        qq = qq_impl(x)
    timer.stop()

    params = NormalityParams(
        method=METHOD,
        n=len(x),
        statistic=None,
        p_value=None,
        applicable=False,
        reason=reason,
        qq=qq,
    )
    return NormalityAssessment(Result(
        params=params,
        info={'test': 'shapiro_wilk'},
        timing=timer.result(),
        backend_name=BACKEND_NAME,
        warnings=(f"Shapiro-Wilk test not applicable: {reason}",),
    ))
