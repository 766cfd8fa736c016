"""
Residuals about group means.

Each observation is compared against the mean of its own group, which is
the fitted value of the model behind a two-sample t-test. Without groups
every observation is compared against the grand mean.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from ttestflow.diagnostics._common import ResidualParams

UNGROUPED_LABEL = "all"


def residuals_impl(
    x: NDArray[np.floating[Any]],
    labels: NDArray[np.str_] | None,
) -> ResidualParams:
    """
    Subtract per-group means.

    Args:
        x: 1D finite observations
        labels: 1D string labels (same length as x), or None

    Returns:
        ResidualParams with residuals in input order
    """
    if labels is None:
        mean = float(np.mean(x))
        fitted = np.full_like(x, mean)
        return ResidualParams(
            residuals=_snap_to_zero(x - fitted, mean, len(x)),
            fitted=fitted,
            labels=None,
            group_means={UNGROUPED_LABEL: mean},
        )

    fitted = np.empty_like(x)
    residuals = np.empty_like(x)
    group_means: dict[str, float] = {}
    for level in sorted(set(labels.tolist())):
        mask = labels == level
        mean = float(np.mean(x[mask]))
        fitted[mask] = mean
        residuals[mask] = _snap_to_zero(x[mask] - mean, mean, int(mask.sum()))
        group_means[level] = mean

    return ResidualParams(
        residuals=residuals,
        fitted=fitted,
        labels=labels.copy(),
        group_means=group_means,
    )


def _snap_to_zero(
    r: NDArray[np.floating[Any]],
    mean: float,
    n: int,
) -> NDArray[np.floating[Any]]:
    """Zero residuals that are rounding error in the mean of n values."""
    tol = n * np.finfo(np.float64).eps * abs(mean)
    return np.where(np.abs(r) <= tol, 0.0, r)
