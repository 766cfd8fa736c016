"""
Solver dispatch for t-tests.

run_test() is the array-level entry point; run_grouped_test() accepts a
value column plus a two-level grouping column.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from ttestflow.hypothesis._common import Alternative
from ttestflow.hypothesis.design import TTestDesign
from ttestflow.hypothesis.solution import TTestSolution
from ttestflow.hypothesis.backends.cpu import CPUTTestBackend


def run_test(
    sample_a: ArrayLike | TTestDesign,
    sample_b: ArrayLike | None = None,
    paired: bool = False,
    equal_variance: bool = True,
    alternative: Alternative = "two-sided",
    null_mean: float = 0.0,
    confidence_level: float = 0.95,
) -> TTestSolution:
    """
    Student's t-test.

    Parameters
    ----------
    sample_a : array-like or TTestDesign
        First sample, or a pre-built design (other arguments are then
        ignored).
    sample_b : array-like or None
        Second sample. If None, a one-sample test against `null_mean`.
    paired : bool
        Test the element-wise differences sample_a - sample_b. Both
        samples must have the same length.
    equal_variance : bool
        If True (default), pooled-variance Student test. If False, Welch
        standard error and Welch-Satterthwaite degrees of freedom.
    alternative : str
        "two-sided" (default), "less", or "greater".
    null_mean : float
        Hypothesised mean (one-sample), mean difference (paired) or
        difference in means (two-sample). Default 0.
    confidence_level : float
        Confidence level for the interval. Default 0.95.

    Returns
    -------
    TTestSolution
        statistic, df, p_value, conf_int, estimate, ...

    Raises
    ------
    ValidationError
        Fewer than 2 observations in a sample, unknown alternative, or
        confidence level outside (0, 1).
    DimensionError
        Paired samples of different lengths.
    DegenerateSampleError
        All observations (or differences) identical.
    """
    if isinstance(sample_a, TTestDesign):
        design = sample_a
    else:
        design = TTestDesign.for_t_test(
            sample_a, sample_b,
            paired=paired,
            equal_variance=equal_variance,
            alternative=alternative,
            null_mean=null_mean,
            confidence_level=confidence_level,
        )

    result = CPUTTestBackend().solve(design)
    return TTestSolution(_result=result, _design=design)


def run_grouped_test(
    values: ArrayLike,
    groups: ArrayLike,
    *,
    ids: ArrayLike | None = None,
    paired: bool = False,
    equal_variance: bool = True,
    alternative: Alternative = "two-sided",
    null_mean: float = 0.0,
    confidence_level: float = 0.95,
) -> TTestSolution:
    """
    Two-sample or paired t-test on long-format data.

    The two levels of `groups` are taken in sorted order and the first
    level plays the role of sample_a, so the estimate is
    mean(first) - mean(second). With paired=True, `ids` aligns
    observations across groups by individual.
    """
    design = TTestDesign.from_groups(
        values, groups,
        ids=ids,
        paired=paired,
        equal_variance=equal_variance,
        alternative=alternative,
        null_mean=null_mean,
        confidence_level=confidence_level,
    )
    return run_test(design)
