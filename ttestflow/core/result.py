"""
Generic result container for all ttestflow computations.

The Result class provides a standardized envelope that every stage of the
workflow uses. This enables shared tooling for timing, warnings and
reproducibility while each stage defines its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test type, group levels)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the libraries that produced a result."""
    import numpy
    import scipy
    from ttestflow import __version__

    return {
        'ttestflow_version': __version__,
        'numpy_version': numpy.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The stage-specific parameter payload type

    Attributes:
        params: Stage-specific parameters (statistic, residuals, W, ...)
        info: Structured metadata (test type, group levels)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions at the time of computation

    Examples:
        >>> Result(
        ...     params=TTestParams(...),
        ...     info={'test_type': 't_one_sample'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_ttest'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
