"""
Common types for t-tests.

Defines TTestParams, the payload every t-test variant returns, and the
set of valid alternative hypotheses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray


Alternative = Literal["two-sided", "less", "greater"]
VALID_ALTERNATIVES = ("two-sided", "less", "greater")


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for t-tests.

    One-sample, paired, pooled and Welch tests all return this structure.

    Attributes
    ----------
    statistic : float
        The t statistic.
    df : float
        Degrees of freedom. Fractional for the Welch correction.
    p_value : float
        p-value under the chosen alternative, in [0, 1].
    conf_int : ndarray
        Confidence interval for the estimate, shape (2,). One-sided
        alternatives give an infinite bound.
    conf_level : float
        Confidence level (e.g. 0.95).
    estimate : dict
        Point estimate(s), e.g. {"mean of x": 5.1, "mean of y": 3.2}.
    null_value : dict
        Hypothesised value under H0, e.g. {"difference in means": 0.0}.
    standard_error : float
        Standard error of the estimate that the statistic is scaled by.
    alternative : str
        "two-sided", "less", or "greater".
    method : str
        Human-readable method name, e.g. "Welch Two Sample t-test".
    data_name : str
        Description of the data, e.g. "x and y".
    """
    statistic: float
    df: float
    p_value: float
    conf_int: NDArray[np.floating[Any]]
    conf_level: float
    estimate: dict[str, float]
    null_value: dict[str, float]
    standard_error: float
    alternative: str
    method: str
    data_name: str
