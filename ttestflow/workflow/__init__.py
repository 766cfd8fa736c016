"""
Workflow module.

Public API:
    analyze(source, value, ...)  - load, test, check residuals, summarise
"""

from ttestflow.workflow.solvers import analyze
from ttestflow.workflow.solution import WorkflowReport

__all__ = [
    "analyze",
    "WorkflowReport",
]
