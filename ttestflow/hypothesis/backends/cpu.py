"""
CPU backend for t-tests.

Dispatches to the variant-specific implementation based on
design.test_type.
"""

from __future__ import annotations

import warnings

from ttestflow.core.result import Result
from ttestflow.core.compute.timing import Timer
from ttestflow.hypothesis._common import TTestParams
from ttestflow.hypothesis.design import TTestDesign
from ttestflow.hypothesis.backends._t_test import (
    t_one_sample,
    t_paired,
    t_two_sample,
)

_DISPATCH = {
    "t_one_sample": t_one_sample,
    "t_paired": t_paired,
    "t_two_sample": t_two_sample,
}


class CPUTTestBackend:
    """CPU reference backend for t-tests."""

    @property
    def name(self) -> str:
        return 'cpu_ttest'

    def solve(self, design: TTestDesign) -> Result[TTestParams]:
        """Dispatch to the t-test variant named by design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type
        if test_type not in _DISPATCH:
            raise ValueError(f"Unknown test_type: {test_type!r}")

        with timer.section(test_type):
            params, warnings_list = _DISPATCH[test_type](design)

        timer.stop()

        for message in warnings_list:
            warnings.warn(message, RuntimeWarning, stacklevel=3)

        info = {'test_type': test_type, 'n_dropped': design.n_dropped}
        if design.group_levels is not None:
            info['group_levels'] = design.group_levels

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
