"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from statengine.core.result import Result
from statengine.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result:
        """Dispatch to test-specific implementation based on design.test_type."""
        test_type = design.test_type

        if test_type == "t_two_sample":
            from statengine.hypothesis.backends._t_test import t_two_sample
            params, warnings_list = t_two_sample(design)
        elif test_type == "cor_pearson":
            from statengine.hypothesis.backends._cor_test import cor_pearson
            params, warnings_list = cor_pearson(design)
        else:
            raise ValueError(f"Unknown test_type: {test_type!r}")

        return Result(
            params=params,
            info={'test_type': test_type, 'backend': self.name, 'alpha': design.alpha},
            warnings=tuple(warnings_list),
        )
