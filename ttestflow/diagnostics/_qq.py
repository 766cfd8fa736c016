"""
Normal quantile-quantile pairs.

Rank i of n (1-based) is paired with the standard-normal quantile at
probability (i - 0.5) / n.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from ttestflow.diagnostics._common import QQPairs


def plotting_positions(n: int) -> NDArray[np.floating[Any]]:
    """Probabilities (i - 0.5) / n for i = 1..n."""
    return (np.arange(1, n + 1, dtype=np.float64) - 0.5) / n


def qq_impl(x: NDArray[np.floating[Any]]) -> QQPairs:
    """Sort x and pair it with theoretical normal quantiles."""
    sample = np.sort(x)
    theoretical = sp_stats.norm.ppf(plotting_positions(len(sample)))
    return QQPairs(theoretical=theoretical, sample=sample)
