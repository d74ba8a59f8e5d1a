"""
One-way ANOVA solver.

Public API:
    anova_oneway(groups, ...) -> AnovaSolution
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from statengine.core.compute.tolerances import SIGNIFICANCE_LEVEL, negligible_spread
from statengine.core.result import Result
from statengine.descriptive.solvers import mean, sd
from statengine.distributions import f_upper_p_value
from statengine.anova._common import AnovaParams, Group, GroupSummary
from statengine.anova.design import AnovaDesign, MIN_GROUP_SIZE
from statengine.anova.solution import AnovaSolution

logger = logging.getLogger(__name__)


def _summarize(group: Group) -> GroupSummary:
    return GroupSummary(
        group=group.name,
        mean=mean(group.values),
        sd=sd(group.values),
        n=group.n,
    )


def anova_oneway(
    groups: Mapping[str, ArrayLike] | Sequence[Any] | AnovaDesign,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
) -> AnovaSolution:
    """
    One-way Analysis of Variance.

    Tests whether the means of two or more groups are equal. Only groups
    with at least 2 observations take part; the rest are still listed in
    group_means.

    Args:
        groups: Group objects, (name, values) pairs, {'name', 'values'}
            mappings, a {name: values} mapping, or a prepared AnovaDesign
        alpha: Significance level for the `significant` flag. Default 0.05.
            Ignored when an AnovaDesign is passed.

    Returns:
        AnovaSolution. With fewer than 2 usable groups the result is
        neutral (F = 0, p = 1, sums of squares and df 0). Zero within-group
        variance also gives F = 0 and p = 1, with a warning.

    Examples:
        >>> result = anova_oneway({'A': [10, 12, 14], 'B': [20, 22, 19]})
        >>> result.between_df, result.within_df
        (1, 4)
    """
    if isinstance(groups, AnovaDesign):
        design = groups
    else:
        design = AnovaDesign.for_groups(groups, alpha=alpha)

    group_means = tuple(_summarize(g) for g in design.groups)
    valid = design.valid_groups
    excluded = [g.name for g in design.groups if g.n < MIN_GROUP_SIZE]
    info: dict[str, Any] = {
        'design_type': 'oneway',
        'n_groups': len(design.groups),
        'excluded_groups': excluded,
        'alpha': design.alpha,
    }
    warnings_list: list[str] = []
    if excluded:
        warnings_list.append(
            f"groups with fewer than {MIN_GROUP_SIZE} observations excluded: "
            + ", ".join(excluded)
        )

    if len(valid) < 2:
        warnings_list.append(
            f"need at least 2 groups with {MIN_GROUP_SIZE}+ observations, got {len(valid)}"
        )
        logger.debug("anova_oneway fell back to a neutral result: %s", warnings_list[-1])
        params = AnovaParams(
            f_statistic=0.0,
            p_value=1.0,
            between_df=0,
            within_df=0,
            between_ss=0.0,
            within_ss=0.0,
            total_ss=0.0,
            eta_squared=0.0,
            significant=False,
            group_means=group_means,
        )
        return AnovaSolution(
            _result=Result(params=params, info=info, warnings=tuple(warnings_list))
        )

    all_values = np.concatenate([g.values for g in valid])
    grand_mean = float(np.mean(all_values))
    k = len(valid)
    n_total = int(all_values.shape[0])

    between_ss = 0.0
    within_ss = 0.0
    for g in valid:
        group_mean = float(np.mean(g.values))
        between_ss += g.n * (group_mean - grand_mean) ** 2
        within_ss += float(np.sum((g.values - group_mean) ** 2))
    total_ss = between_ss + within_ss

    between_df = k - 1
    within_df = n_total - k

    scale = float(np.max(np.abs(all_values)))
    if negligible_spread(within_ss, n_total, scale):
        warnings_list.append("within-group variance is zero; F is undefined")
        logger.debug("anova_oneway fell back to a neutral result: %s", warnings_list[-1])
        f_stat = 0.0
        p_value = 1.0
        eta_squared = 0.0
    else:
        between_ms = between_ss / between_df
        within_ms = within_ss / within_df
        f_stat = between_ms / within_ms
        p_value = f_upper_p_value(f_stat, between_df, within_df)
        eta_squared = between_ss / total_ss if total_ss > 0 else 0.0

    info['grand_mean'] = grand_mean
    info['n_obs'] = n_total

    params = AnovaParams(
        f_statistic=f_stat,
        p_value=p_value,
        between_df=between_df,
        within_df=within_df,
        between_ss=between_ss,
        within_ss=within_ss,
        total_ss=total_ss,
        eta_squared=eta_squared,
        significant=p_value < design.alpha,
        group_means=group_means,
    )
    return AnovaSolution(
        _result=Result(params=params, info=info, warnings=tuple(warnings_list))
    )
