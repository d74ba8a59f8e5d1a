"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, TYPE_CHECKING

from statengine.core.result import Result

if TYPE_CHECKING:
    from statengine.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Summary row for one variable.

    sd is Bessel-corrected (divisor n - 1) and 0 when n < 2. Location and
    spread fields are 0 for an empty sample.
    """
    variable: str
    n: int
    mean: float
    sd: float
    min: float
    max: float
    range: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign | None' = None

    @property
    def variable(self) -> str:
        return self._result.params.variable

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def sd(self) -> float:
        """Sample standard deviation (n - 1 divisor)."""
        return self._result.params.sd

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def to_dict(self) -> dict[str, Any]:
        """Flat record of the summary row."""
        return asdict(self._result.params)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(variable={p.variable!r}, n={p.n}, "
            f"mean={p.mean:.4g}, sd={p.sd:.4g})"
        )
