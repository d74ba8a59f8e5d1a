"""
Numerical constants and tolerance tiers.

Holds every fixed number the engine depends on so that none of them is
scattered through the algorithms:

- SIGNIFICANCE_LEVEL: default threshold for the `significant` flag
- CF_EPSILON / CF_MAX_ITERATIONS: Lentz continued-fraction settings
- SPREAD_EPS_FACTOR / negligible_spread: when a sum of squared deviations
  is float64 rounding noise
- ToleranceTier records: precision expectations used by the test suite
"""

import math
from dataclasses import dataclass

import numpy as np


SIGNIFICANCE_LEVEL = 0.05

# Lentz's algorithm for the incomplete beta continued fraction.
# The iteration cap guarantees termination on pathological inputs.
CF_EPSILON = 3e-7
CF_MAX_ITERATIONS = 100


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance tier for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form arithmetic (means, sums of squares, OLS coefficients)
EXACT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='exact',
    description='float64 closed-form arithmetic',
)

# Series-based t tail probabilities
T_TAIL = ToleranceTier(
    rtol=1e-8,
    atol=1e-12,
    name='t_tail',
    description='parity series for the Student t distribution',
)

# Continued-fraction F tail probabilities, bounded by CF_EPSILON
P_VALUE = ToleranceTier(
    rtol=1e-5,
    atol=1e-8,
    name='p_value',
    description='incomplete beta via Lentz continued fraction (eps 3e-7)',
)

# Multiplier on n * eps * scale below which a spread counts as zero.
SPREAD_EPS_FACTOR = 10.0


def negligible_spread(ss: float, n: int, scale: float) -> bool:
    """
    Check whether a sum of squared deviations is only rounding noise.

    Constant float data such as [0.1, 0.1, 0.1] leaves deviations of about
    eps * |x| after the mean is subtracted. The root of `ss` is compared
    against SPREAD_EPS_FACTOR * n * eps * scale, the same form as a QR
    rank tolerance.

    Args:
        ss: Sum of squared deviations (or residuals)
        n: Number of observations that went into `ss`
        scale: Largest absolute data value

    Returns:
        True if the spread is indistinguishable from zero
    """
    tol = SPREAD_EPS_FACTOR * max(n, 1) * np.finfo(np.float64).eps * abs(scale)
    return math.sqrt(max(ss, 0.0)) <= tol
