"""
t-test solution type.

TTestSolution wraps Result[TTestParams] and renders the textual test
report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from ttestflow.core.result import Result
from ttestflow.hypothesis._common import TTestParams

if TYPE_CHECKING:
    from ttestflow.hypothesis.design import TTestDesign


@dataclass(frozen=True)
class TTestSolution:
    """
    User-facing t-test results.

    Wraps Result[TTestParams]; every field of the payload is available as
    a property, and summary() formats the classic test report.
    """
    _result: Result[TTestParams]
    _design: 'TTestDesign | None'

    # --- Test fields ---

    @property
    def statistic(self) -> float:
        """The t statistic."""
        return self._result.params.statistic

    @property
    def df(self) -> float:
        """Degrees of freedom (fractional for Welch)."""
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def conf_int(self) -> NDArray[np.floating[Any]]:
        """Confidence interval, shape (2,)."""
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def estimate(self) -> dict[str, float]:
        """Point estimate(s): one mean, two means, or the mean difference."""
        return self._result.params.estimate

    @property
    def null_value(self) -> dict[str, float]:
        return self._result.params.null_value

    @property
    def standard_error(self) -> float:
        return self._result.params.standard_error

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def design(self) -> 'TTestDesign | None':
        return self._design

    # --- Metadata ---

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

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    # --- Formatting ---

    def to_dict(self) -> dict[str, Any]:
        """Plain-Python view of the numeric results."""
        p = self._result.params
        return {
            'method': p.method,
            'statistic': p.statistic,
            'df': p.df,
            'p_value': p.p_value,
            'conf_int': [float(v) for v in p.conf_int],
            'conf_level': p.conf_level,
            'estimate': dict(p.estimate),
            'null_value': dict(p.null_value),
            'alternative': p.alternative,
        }

    def summary(self) -> str:
        """
        Format the test report.

        Produces output like:
            Welch Two Sample t-test

        data:  control and treated
        t = 2.2345, df = 17.43, p-value = 0.03891
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         0.1234567  4.5678901
        sample estimates:
             mean of x      mean of y
              5.123456       2.789012
        """
        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]

        lines.append(
            f"t = {p.statistic:.5g}, df = {p.df:.5g}, "
            f"p-value = {format_pvalue(p.p_value)}"
        )

        nv_name, nv_val = next(iter(p.null_value.items()))
        relation = {
            "two-sided": "is not equal to",
            "less": "is less than",
            "greater": "is greater than",
        }[p.alternative]
        lines.append(f"alternative hypothesis: true {nv_name} {relation} {nv_val:g}")

        lines.append(f"{p.conf_level * 100:g} percent confidence interval:")
        lo, hi = p.conf_int
        lines.append(f" {_format_number(lo)}  {_format_number(hi)}")

        lines.append("sample estimates:")
        lines.append(" ".join(f"{n:>14s}" for n in p.estimate))
        lines.append(" ".join(f"{v:14.7g}" for v in p.estimate.values()))

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TTestSolution(method={p.method!r}, t={p.statistic:.4g}, "
            f"df={p.df:.4g}, p_value={p.p_value:.4g})"
        )


def format_pvalue(p: float) -> str:
    """Format a p-value for reports."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
