"""
Descriptive statistics solution types.

Contains the per-group payload and its user-facing wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from ttestflow.core.result import Result

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class GroupSummaryParams:
    """
    Per-group summary statistics, one entry per group in sorted label order.

    sd and se are NaN for a group with a single observation.
    """
    labels: tuple[str, ...]
    n: NDArray[np.integer[Any]]
    mean: NDArray[np.floating[Any]]
    sd: NDArray[np.floating[Any]]
    se: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class GroupSummary:
    """
    User-facing group summary.

    Wraps Result[GroupSummaryParams] and provides per-group lookup.
    """
    _result: Result[GroupSummaryParams]

    @property
    def labels(self) -> tuple[str, ...]:
        return self._result.params.labels

    @property
    def n(self) -> NDArray[np.integer[Any]]:
        return self._result.params.n

    @property
    def mean(self) -> NDArray[np.floating[Any]]:
        return self._result.params.mean

    @property
    def sd(self) -> NDArray[np.floating[Any]]:
        return self._result.params.sd

    @property
    def se(self) -> NDArray[np.floating[Any]]:
        """Standard error of each group mean: sd / sqrt(n)."""
        return self._result.params.se

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def row(self, label: str) -> dict[str, float]:
        """Statistics of one group."""
        p = self._result.params
        if label not in p.labels:
            raise KeyError(f"No group {label!r}. Available: {list(p.labels)}")
        i = p.labels.index(label)
        return {
            'n': int(p.n[i]),
            'mean': float(p.mean[i]),
            'sd': float(p.sd[i]),
            'se': float(p.se[i]),
        }

    def to_frame(self) -> 'pd.DataFrame':
        """The summary as a DataFrame indexed by group label."""
        import pandas as pd

        p = self._result.params
        return pd.DataFrame(
            {'n': p.n, 'mean': p.mean, 'sd': p.sd, 'se': p.se},
            index=pd.Index(p.labels, name='group'),
        )

    def summary(self) -> str:
        p = self._result.params
        width = max(len("group"), *(len(label) for label in p.labels))
        lines = [f"{'group':<{width}} {'n':>5} {'mean':>12} {'sd':>12} {'se':>12}"]
        for i, label in enumerate(p.labels):
            lines.append(
                f"{label:<{width}} {int(p.n[i]):>5d} {p.mean[i]:>12.6g} "
                f"{p.sd[i]:>12.6g} {p.se[i]:>12.6g}"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GroupSummary(groups={list(self.labels)})"
