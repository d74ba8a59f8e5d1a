"""
One-way Analysis of Variance (ANOVA).

Public API:
    anova_oneway(groups, ...) -> AnovaSolution
    group_by(y, labels) -> tuple[Group, ...]
    Group(name, values)
"""

from statengine.anova._common import AnovaParams, Group, GroupSummary
from statengine.anova.design import AnovaDesign, group_by
from statengine.anova.solvers import anova_oneway
from statengine.anova.solution import AnovaSolution

__all__ = [
    "anova_oneway",
    "group_by",
    "Group",
    "GroupSummary",
    "AnovaDesign",
    "AnovaParams",
    "AnovaSolution",
]
