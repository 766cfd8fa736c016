"""
Core infrastructure for ttestflow.

Shared abstractions used by every stage of the workflow.

Key components:
    datasource: DataSource, the CSV/DataFrame loader
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from ttestflow.core.datasource import DataSource
from ttestflow.core.protocols import Backend
from ttestflow.core.result import Result
from ttestflow.core.exceptions import (
    TTestFlowError,
    ValidationError,
    DimensionError,
    NumericalError,
    DegenerateSampleError,
    InapplicableTestError,
)

__all__ = [
    "DataSource",
    "Backend",
    "Result",
    "TTestFlowError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DegenerateSampleError",
    "InapplicableTestError",
]
