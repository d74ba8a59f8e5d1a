"""
User-facing ANOVA solution type.

Wraps a Result[AnovaParams] and provides convenient accessors.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any

from statengine.core.result import Result
from statengine.anova._common import AnovaParams, GroupSummary


@dataclass
class AnovaSolution:
    """
    User-facing result for one-way ANOVA.

    Produced by anova_oneway().
    """
    _result: Result[AnovaParams]

    @property
    def f_statistic(self) -> float:
        return self._result.params.f_statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def between_df(self) -> int:
        """k - 1, with k the number of groups in the test."""
        return self._result.params.between_df

    @property
    def within_df(self) -> int:
        """N - k."""
        return self._result.params.within_df

    @property
    def between_ss(self) -> float:
        return self._result.params.between_ss

    @property
    def within_ss(self) -> float:
        return self._result.params.within_ss

    @property
    def total_ss(self) -> float:
        return self._result.params.total_ss

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def group_means(self) -> tuple[GroupSummary, ...]:
        return self._result.params.group_means

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def to_dict(self) -> dict[str, Any]:
        """Flat record; group_means becomes a list of dicts."""
        record = asdict(self._result.params)
        record['group_means'] = list(record['group_means'])
        return record

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"AnovaSolution(F={p.f_statistic:.4g}, "
            f"df=({p.between_df}, {p.within_df}), p_value={p.p_value:.4g})"
        )
