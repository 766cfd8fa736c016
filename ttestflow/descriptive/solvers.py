"""
Descriptive statistics per group.

group_summary() computes the n, mean, standard deviation and standard
error of the mean for each group. The mean/SE plot and the workflow
report both draw from it.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ttestflow.core.compute.timing import Timer
from ttestflow.core.result import Result
from ttestflow.core.validation import (
    check_array,
    check_1d,
    check_labels,
    check_consistent_length,
    check_min_samples,
)
from ttestflow.descriptive.solution import GroupSummary, GroupSummaryParams

UNGROUPED_LABEL = "all"


def group_summary(
    values: ArrayLike,
    groups: ArrayLike | None = None,
) -> GroupSummary:
    """
    n, mean, sd and standard error per group.

    Parameters
    ----------
    values : array-like
        1D measurements. NaN values are dropped (with their labels).
    groups : array-like or None
        Group label of every value. None summarises all values as a
        single group named 'all'.

    Returns
    -------
    GroupSummary
        Groups in sorted label order.
    """
    x = check_array(values, "values")
    check_1d(x, "values")

    if groups is None:
        labels = np.full(len(x), UNGROUPED_LABEL)
    else:
        labels = check_labels(groups, "groups")
        check_consistent_length(x, labels, names=("values", "groups"))

    keep = ~np.isnan(x)
    x, labels = x[keep].astype(np.float64), labels[keep]
    check_min_samples(x, 1, "values")

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []
    if not keep.all():
        warnings_list.append(f"removed {int((~keep).sum())} missing values")

    with timer.section('group_summary'):
        levels = tuple(sorted(set(labels.tolist())))
        n = np.array([np.sum(labels == level) for level in levels], dtype=np.int64)
        mean = np.array([np.mean(x[labels == level]) for level in levels])
        sd = np.full(len(levels), np.nan)
        for i, level in enumerate(levels):
            if n[i] > 1:
                sd[i] = np.std(x[labels == level], ddof=1)
            else:
                warnings_list.append(
                    f"group {level!r} has a single observation; sd and se are undefined"
                )
        se = sd / np.sqrt(n)
    timer.stop()

    return GroupSummary(Result(
        params=GroupSummaryParams(labels=levels, n=n, mean=mean, sd=sd, se=se),
        info={'n_groups': len(levels)},
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
    ))
