"""
Core protocols for ttestflow.

Structural interfaces that stage-specific implementations satisfy. We use
Protocol (structural typing) rather than ABC so that backends need not
inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

from ttestflow.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D]):
    """
    Protocol for computational backends.

    A backend takes a validated, immutable design and produces a Result
    envelope. Backends are stateless: all configuration arrives with the
    design, which makes them easy to test and swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_ttest'.
        """
        ...

    def solve(self, design: D) -> Result:
        """
        Execute the statistical computation.

        Raises:
            DegenerateSampleError: If the statistic is undefined for the data
            ValidationError: If design is invalid for this backend
        """
        ...
