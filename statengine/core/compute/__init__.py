"""
Shared numeric settings for statengine.

Submodules:
    tolerances: significance level, continued-fraction settings and
        tolerance tiers, negligible_spread
"""

from statengine.core.compute.tolerances import (
    CF_EPSILON,
    CF_MAX_ITERATIONS,
    SIGNIFICANCE_LEVEL,
    SPREAD_EPS_FACTOR,
    ToleranceTier,
    EXACT,
    T_TAIL,
    P_VALUE,
    negligible_spread,
)

__all__ = [
    "CF_EPSILON",
    "CF_MAX_ITERATIONS",
    "SIGNIFICANCE_LEVEL",
    "SPREAD_EPS_FACTOR",
    "ToleranceTier",
    "EXACT",
    "T_TAIL",
    "P_VALUE",
    "negligible_spread",
]
