"""
Descriptive statistics module.

Public API:
    group_summary(values, groups)  - n, mean, sd, se per group
"""

from ttestflow.descriptive.solvers import group_summary
from ttestflow.descriptive.solution import GroupSummary, GroupSummaryParams

__all__ = [
    "group_summary",
    "GroupSummary",
    "GroupSummaryParams",
]
