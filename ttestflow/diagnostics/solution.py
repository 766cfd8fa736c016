"""
Diagnostic solution types.

ResidualSet wraps Result[ResidualParams]; NormalityAssessment wraps
Result[NormalityParams]. Neither turns the evidence into a verdict: the
decision whether the normality assumption is acceptable stays with the
analyst.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from ttestflow.core.result import Result
from ttestflow.diagnostics._common import ResidualParams, NormalityParams, QQPairs
from ttestflow.hypothesis.solution import format_pvalue


@dataclass(frozen=True)
class ResidualSet:
    """One residual per observation, with the group means behind them."""
    _result: Result[ResidualParams]

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Residuals in input order."""
        return self._result.params.residuals

    @property
    def fitted(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted

    @property
    def labels(self) -> NDArray[np.str_] | None:
        return self._result.params.labels

    @property
    def group_means(self) -> dict[str, float]:
        return self._result.params.group_means

    @property
    def grouped(self) -> bool:
        return self._result.params.labels is not None

    def by_group(self) -> dict[str, NDArray[np.floating[Any]]]:
        """Residuals split by group label (a single 'all' group if ungrouped)."""
        p = self._result.params
        if p.labels is None:
            (label,) = p.group_means
            return {label: p.residuals.copy()}
        return {level: p.residuals[p.labels == level] for level in p.group_means}

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    def __len__(self) -> int:
        return len(self._result.params.residuals)

    def __array__(self, dtype=None, copy=None) -> NDArray[np.floating[Any]]:
        arr = self._result.params.residuals
        return arr.astype(dtype) if dtype is not None else arr.copy()

    def __repr__(self) -> str:
        return (
            f"ResidualSet(n={len(self)}, "
            f"groups={list(self._result.params.group_means)})"
        )


@dataclass(frozen=True)
class NormalityAssessment:
    """
    Evidence about the normality of a set of residuals.

    Holds the Shapiro-Wilk W statistic and p-value (when the test is
    applicable) together with the QQ pairs for a diagnostic plot. A low
    p-value is evidence against normality; what to do about it is the
    caller's decision.
    """
    _result: Result[NormalityParams]

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def statistic(self) -> float | None:
        """Shapiro-Wilk W, or None if inapplicable."""
        return self._result.params.statistic

    @property
    def p_value(self) -> float | None:
        return self._result.params.p_value

    @property
    def applicable(self) -> bool:
        return self._result.params.applicable

    @property
    def reason(self) -> str | None:
        """Why the formal test could not run, if it could not."""
        return self._result.params.reason

    @property
    def qq_pairs(self) -> QQPairs:
        return self._result.params.qq

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        p = self._result.params
        lines = [f"\t{p.method}", "", f"n = {p.n}"]
        if p.applicable:
            lines.append(f"W = {p.statistic:.5g}, p-value = {format_pvalue(p.p_value)}")
        else:
            lines.append(f"not applicable: {p.reason}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        if not p.applicable:
            return f"NormalityAssessment(n={p.n}, applicable=False, reason={p.reason!r})"
        return (
            f"NormalityAssessment(n={p.n}, W={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g})"
        )
