"""
Hypothesis testing module.

Public API:
    run_test(a, b)                 - one-sample, paired, pooled or Welch t-test
    run_grouped_test(values, grp)  - the same, from a value and a group column
"""

from ttestflow.hypothesis.solvers import run_test, run_grouped_test
from ttestflow.hypothesis.design import TTestDesign
from ttestflow.hypothesis._common import TTestParams, VALID_ALTERNATIVES
from ttestflow.hypothesis.solution import TTestSolution

__all__ = [
    "run_test",
    "run_grouped_test",
    "TTestDesign",
    "TTestParams",
    "TTestSolution",
    "VALID_ALTERNATIVES",
]
