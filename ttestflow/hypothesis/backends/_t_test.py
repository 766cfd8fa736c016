"""
t-test implementations.

Supports one-sample, paired (one-sample on differences), and two-sample
tests with pooled or Welch standard errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np
from scipy import stats as sp_stats

from ttestflow.core.exceptions import DegenerateSampleError
from ttestflow.hypothesis._common import TTestParams

if TYPE_CHECKING:
    from ttestflow.hypothesis.design import TTestDesign

_DEGENERATE_EPS = 10.0 * np.finfo(np.float64).eps


def t_one_sample(design: TTestDesign) -> tuple[TTestParams, list[str]]:
    """One-sample t-test: H0: mean(x) = null_mean."""
    return _location_test(
        design,
        method="One Sample t-test",
        estimate_name="mean of x",
        null_name="mean",
    )


def t_paired(design: TTestDesign) -> tuple[TTestParams, list[str]]:
    """Paired t-test: H0: mean(x - y) = null_mean.

    design.x already holds the paired differences, so this is exactly the
    one-sample test on those differences.
    """
    return _location_test(
        design,
        method="Paired t-test",
        estimate_name="mean difference",
        null_name="mean difference",
    )


def t_two_sample(design: TTestDesign) -> tuple[TTestParams, list[str]]:
    """Two-sample t-test: pooled (Student) or Welch."""
    x = design.x
    y = design.y
    mu = design.null_mean
    alternative = design.alternative
    conf_level = design.conf_level
    warnings_list = _dropped_warning(design)

    n1, n2 = len(x), len(y)
    mean1, mean2 = np.mean(x), np.mean(y)
    var1, var2 = np.var(x, ddof=1), np.var(y, ddof=1)
    diff = float(mean1 - mean2)

    if design.equal_variance:
        df = float(n1 + n2 - 2)
        sp2 = ((n1 - 1) * var1 + (n2 - 1) * var2) / df
        se = float(np.sqrt(sp2 * (1.0 / n1 + 1.0 / n2)))
        _check_se(se, n1 + n2, max(abs(mean1), abs(mean2)))
        method = "Two Sample t-test"
    else:
        v1 = var1 / n1
        v2 = var2 / n2
        se = float(np.sqrt(v1 + v2))
        _check_se(se, n1 + n2, max(abs(mean1), abs(mean2)))
        # Welch-Satterthwaite degrees of freedom (fractional, do not round)
        df = float((v1 + v2) ** 2 / (v1 ** 2 / (n1 - 1) + v2 ** 2 / (n2 - 1)))
        method = "Welch Two Sample t-test"

    t_stat = (diff - mu) / se

    return TTestParams(
        statistic=float(t_stat),
        df=df,
        p_value=_t_pvalue(t_stat, df, alternative),
        conf_int=_t_conf_int(diff, se, df, conf_level, alternative),
        conf_level=conf_level,
        estimate={"mean of x": float(mean1), "mean of y": float(mean2)},
        null_value={"difference in means": mu},
        standard_error=se,
        alternative=alternative,
        method=method,
        data_name=design.data_name,
    ), warnings_list


# --- Helpers ---

def _location_test(
    design: TTestDesign,
    *,
    method: str,
    estimate_name: str,
    null_name: str,
) -> tuple[TTestParams, list[str]]:
    x = design.x
    mu = design.null_mean
    alternative = design.alternative
    conf_level = design.conf_level
    warnings_list = _dropped_warning(design)

    n = len(x)
    mean_x = float(np.mean(x))
    se = float(np.sqrt(np.var(x, ddof=1) / n))
    df = float(n - 1)

    _check_se(se, n, abs(mean_x))
    t_stat = (mean_x - mu) / se

    return TTestParams(
        statistic=float(t_stat),
        df=df,
        p_value=_t_pvalue(t_stat, df, alternative),
        conf_int=_t_conf_int(mean_x, se, df, conf_level, alternative),
        conf_level=conf_level,
        estimate={estimate_name: mean_x},
        null_value={null_name: mu},
        standard_error=se,
        alternative=alternative,
        method=method,
        data_name=design.data_name,
    ), warnings_list


def _check_se(se: float, n: int, scale: float) -> None:
    # Below the float resolution of the means, se is rounding noise
    if not np.isfinite(se) or se <= _DEGENERATE_EPS * scale:
        raise DegenerateSampleError(
            f"standard error is {se}: the data are essentially constant, "
            f"so the t statistic is undefined",
            n=n,
            standard_error=se,
        )


def _dropped_warning(design: TTestDesign) -> list[str]:
    if design.n_dropped:
        unit = "pairs" if design.paired else "observations"
        return [f"removed {design.n_dropped} {unit} with missing values"]
    return []


def _t_pvalue(t_stat: float, df: float, alternative: str) -> float:
    """Compute p-value from the Student-t distribution."""
    if alternative == "two-sided":
        p = 2.0 * sp_stats.t.sf(abs(t_stat), df)
    elif alternative == "less":
        p = sp_stats.t.cdf(t_stat, df)
    else:  # greater
        p = sp_stats.t.sf(t_stat, df)
    return float(min(1.0, p))


def _t_conf_int(
    estimate: float,
    se: float,
    df: float,
    conf_level: float,
    alternative: str,
) -> np.ndarray:
    """Compute confidence interval for the estimate."""
    alpha = 1.0 - conf_level

    if alternative == "two-sided":
        t_crit = sp_stats.t.ppf(1.0 - alpha / 2.0, df)
        return np.array([estimate - t_crit * se, estimate + t_crit * se])
    elif alternative == "less":
        t_crit = sp_stats.t.ppf(1.0 - alpha, df)
        return np.array([-np.inf, estimate + t_crit * se])
    else:  # greater
        t_crit = sp_stats.t.ppf(1.0 - alpha, df)
        return np.array([estimate - t_crit * se, np.inf])
