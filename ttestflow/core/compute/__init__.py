"""
Shared compute infrastructure for ttestflow.

Domain backends live in {domain}/backends/. This module only holds
infrastructure shared across them.

Submodules:
    timing: Execution timing utilities
"""

from ttestflow.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
