"""
Independent two-sample t-test with pooled variance.

Welch's unequal-variance form is not offered; df is always n1 + n2 - 2.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from statengine.core.compute.tolerances import negligible_spread
from statengine.descriptive.solvers import mean, sd
from statengine.distributions import t_two_tailed_p_value
from statengine.hypothesis._common import TTestParams

if TYPE_CHECKING:
    from statengine.hypothesis.design import HypothesisDesign


def t_two_sample(design: HypothesisDesign) -> tuple[TTestParams, list[str]]:
    """Pooled two-sample t-test: H0: mean(x) = mean(y)."""
    x = design.x
    y = design.y
    warnings_list: list[str] = []

    n1, n2 = len(x), len(y)
    mean1, mean2 = mean(x), mean(y)

    if n1 < 2 or n2 < 2:
        warnings_list.append(
            f"need at least 2 observations per group, got n1={n1}, n2={n2}"
        )
        return TTestParams(
            t_statistic=0.0,
            df=0,
            p_value=1.0,
            mean1=mean1,
            mean2=mean2,
            sd1=0.0,
            sd2=0.0,
            n1=n1,
            n2=n2,
            cohens_d=0.0,
            significant=False,
        ), warnings_list

    sd1, sd2 = sd(x), sd(y)
    df = n1 + n2 - 2
    pooled_ss = (n1 - 1) * sd1 ** 2 + (n2 - 1) * sd2 ** 2
    pooled_sd = float(np.sqrt(pooled_ss / df))
    diff = mean1 - mean2
    scale = max(float(np.max(np.abs(x))), float(np.max(np.abs(y))))

    if negligible_spread(pooled_ss, n1 + n2, scale):
        warnings_list.append("data are essentially constant")
        t_stat = 0.0
        p_value = 1.0
        cohens_d = 0.0
    else:
        se = pooled_sd * np.sqrt(1.0 / n1 + 1.0 / n2)
        t_stat = float(diff / se)
        p_value = t_two_tailed_p_value(t_stat, df)
        cohens_d = abs(diff) / pooled_sd

    return TTestParams(
        t_statistic=t_stat,
        df=df,
        p_value=p_value,
        mean1=mean1,
        mean2=mean2,
        sd1=sd1,
        sd2=sd2,
        n1=n1,
        n2=n2,
        cohens_d=cohens_d,
        significant=p_value < design.alpha,
    ), warnings_list
