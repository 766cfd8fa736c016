"""
Common types for assumption diagnostics.

Defines the payloads for residual computation and normality assessment,
and the sample-size bounds of the Shapiro-Wilk test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray


SHAPIRO_MIN_N = 3
SHAPIRO_MAX_N = 5000


@dataclass(frozen=True)
class ResidualParams:
    """
    Payload for compute_residuals().

    Attributes
    ----------
    residuals : ndarray
        Observation minus its group mean, in input order.
    fitted : ndarray
        The group mean each observation was compared against.
    labels : ndarray or None
        Group label of every observation; None when ungrouped.
    group_means : dict
        Mean per group label ('all' when ungrouped).
    """
    residuals: NDArray[np.floating[Any]]
    fitted: NDArray[np.floating[Any]]
    labels: NDArray[np.str_] | None
    group_means: dict[str, float]


@dataclass(frozen=True)
class QQPairs:
    """
    Normal QQ pairs, ordered by rank.

    Behaves as a sequence of (theoretical_quantile, sample_quantile)
    tuples while keeping both columns available as arrays for plotting.
    """
    theoretical: NDArray[np.floating[Any]]
    sample: NDArray[np.floating[Any]]

    def __len__(self) -> int:
        return len(self.sample)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for t, s in zip(self.theoretical, self.sample):
            yield float(t), float(s)

    def __getitem__(self, i: int | slice) -> tuple[float, float] | QQPairs:
        """One pair by index, or a QQPairs for a slice."""
        if isinstance(i, slice):
            return QQPairs(theoretical=self.theoretical[i], sample=self.sample[i])
        return float(self.theoretical[i]), float(self.sample[i])

    def as_array(self) -> NDArray[np.floating[Any]]:
        """Pairs as an (n, 2) array: column 0 theoretical, column 1 sample."""
        return np.column_stack([self.theoretical, self.sample])


@dataclass(frozen=True)
class NormalityParams:
    """
    Payload for a normality assessment.

    `statistic` and `p_value` are None exactly when `applicable` is False;
    `reason` then says why the formal test could not run. The QQ pairs are
    always present.
    """
    method: str
    n: int
    statistic: float | None
    p_value: float | None
    applicable: bool
    reason: str | None
    qq: QQPairs
