"""
Hypothesis test solution types.

TTestSolution and CorrelationSolution wrap Result[...Params] and expose
every payload field as a read-only property. They carry numbers,
booleans and short labels only; narrating the result is left to the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, TYPE_CHECKING

from statengine.core.result import Result
from statengine.hypothesis._common import TTestParams, CorrelationParams

if TYPE_CHECKING:
    from statengine.hypothesis.design import HypothesisDesign


@dataclass
class _HTestSolutionBase:
    """Metadata accessors shared by the hypothesis test solutions."""
    _result: Result
    _design: 'HypothesisDesign | None'

    @property
    def p_value(self) -> float:
        """Two-tailed p-value."""
        return self._result.params.p_value

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def to_dict(self) -> dict[str, Any]:
        """Flat record of the payload fields."""
        return asdict(self._result.params)


@dataclass
class TTestSolution(_HTestSolutionBase):
    """User-facing results of t_test()."""
    _result: Result[TTestParams]

    @property
    def t_statistic(self) -> float:
        return self._result.params.t_statistic

    @property
    def df(self) -> int:
        """Degrees of freedom, n1 + n2 - 2."""
        return self._result.params.df

    @property
    def mean1(self) -> float:
        return self._result.params.mean1

    @property
    def mean2(self) -> float:
        return self._result.params.mean2

    @property
    def sd1(self) -> float:
        return self._result.params.sd1

    @property
    def sd2(self) -> float:
        return self._result.params.sd2

    @property
    def n1(self) -> int:
        return self._result.params.n1

    @property
    def n2(self) -> int:
        return self._result.params.n2

    @property
    def cohens_d(self) -> float:
        """Standardized mean difference using the pooled sd."""
        return self._result.params.cohens_d

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TTestSolution(t={p.t_statistic:.4g}, df={p.df}, "
            f"p_value={p.p_value:.4g})"
        )


@dataclass
class CorrelationSolution(_HTestSolutionBase):
    """User-facing results of cor_test()."""
    _result: Result[CorrelationParams]

    @property
    def coefficient(self) -> float:
        """Pearson's r."""
        return self._result.params.coefficient

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def interpretation(self) -> str:
        return self._result.params.interpretation

    @property
    def t_statistic(self) -> float:
        return self._result.params.t_statistic

    @property
    def df(self) -> int:
        return self._result.params.df

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"CorrelationSolution(r={p.coefficient:.4g}, n={p.n}, "
            f"p_value={p.p_value:.4g})"
        )
