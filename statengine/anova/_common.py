"""
Common data types for one-way ANOVA.

Contains the Group input type and the frozen parameter payloads that go
inside Result[P] envelopes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from numpy.typing import ArrayLike

from statengine.core.validation import as_sample


@dataclass(frozen=True)
class Group:
    """
    A named sample.

    values is converted to a 1D float64 array with NaN removed.
    """
    name: str
    values: ArrayLike = field(compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'name', str(self.name))
        object.__setattr__(self, 'values', as_sample(self.values, f"group {self.name!r}"))

    @property
    def n(self) -> int:
        return int(self.values.shape[0])


@dataclass(frozen=True)
class GroupSummary:
    """Descriptive row for one group; sd is 0 when n < 2, mean 0 when n = 0."""
    group: str
    mean: float
    sd: float
    n: int


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way ANOVA.

    group_means lists every input group in input order, including groups
    too small to take part in the F test.
    """
    f_statistic: float
    p_value: float
    between_df: int
    within_df: int
    between_ss: float
    within_ss: float
    total_ss: float
    eta_squared: float
    significant: bool
    group_means: tuple[GroupSummary, ...]
