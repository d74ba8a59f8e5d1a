"""
Special functions: log-gamma and the regularized incomplete beta.

Scalar routines built on the math module. The log-gamma series and the
Lentz continued fraction follow the classic Numerical Recipes forms
(gammln, betai, betacf).

Only the distribution tail routines call into this module; they guard
the domain before calling, so out-of-domain arguments here are
programmer errors and raise ValidationError.
"""

from __future__ import annotations

import math

from statengine.core.exceptions import ValidationError
from statengine.core.compute.tolerances import CF_EPSILON, CF_MAX_ITERATIONS


LANCZOS_COEFFICIENTS = (
    76.18009172947146,
    -86.50532032941677,
    24.01409824083091,
    -1.231739572450155,
    0.001208650973866179,
    -0.000005395239384953,
)
LANCZOS_SERIES_BASE = 1.000000000190015
SQRT_TWO_PI = 2.5066282746310005


def log_gamma(x: float) -> float:
    """
    Natural log of the Gamma function for x > 0.

    Six-term Lanczos-style series; absolute error below 2e-10 over the
    positive reals.

    Raises:
        ValidationError: If x is not a finite positive number
    """
    if not (math.isfinite(x) and x > 0):
        raise ValidationError(f"log_gamma: x must be a finite positive number, got {x}")

    y = x
    tmp = x + 5.5
    tmp -= (x + 0.5) * math.log(tmp)
    ser = LANCZOS_SERIES_BASE
    for coef in LANCZOS_COEFFICIENTS:
        y += 1.0
        ser += coef / y
    return -tmp + math.log(SQRT_TWO_PI * ser / x)


def beta_continued_fraction(
    x: float,
    a: float,
    b: float,
    *,
    return_iterations: bool = False,
) -> float | tuple[float, int]:
    """
    Continued fraction for the incomplete beta function (modified Lentz).

    Converges fastest for x < (a + 1) / (a + b + 2); incomplete_beta
    uses the symmetry relation to stay in that region. Stops after
    CF_MAX_ITERATIONS even if not converged and returns the current
    approximant.

    Args:
        x: Evaluation point in (0, 1)
        a, b: Positive shape parameters
        return_iterations: Also return the number of iterations used

    Returns:
        The continued fraction value, or (value, iterations)
    """
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0

    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < CF_EPSILON:
        d = CF_EPSILON
    d = 1.0 / d
    h = d

    iterations = CF_MAX_ITERATIONS
    for m in range(1, CF_MAX_ITERATIONS + 1):
        m2 = 2 * m

        # Even step
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < CF_EPSILON:
            d = CF_EPSILON
        c = 1.0 + aa / c
        if abs(c) < CF_EPSILON:
            c = CF_EPSILON
        d = 1.0 / d
        h *= d * c

        # Odd step
        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < CF_EPSILON:
            d = CF_EPSILON
        c = 1.0 + aa / c
        if abs(c) < CF_EPSILON:
            c = CF_EPSILON
        d = 1.0 / d
        delta = d * c
        h *= delta

        if abs(delta - 1.0) < CF_EPSILON:
            iterations = m
            break

    if return_iterations:
        return h, iterations
    return h


def incomplete_beta(x: float, a: float, b: float) -> float:
    """
    Regularized incomplete beta function I_x(a, b).

    Args:
        x: Upper integration limit; values outside [0, 1] are clipped
        a, b: Positive shape parameters

    Returns:
        I_x(a, b) in [0, 1]

    Raises:
        ValidationError: If a or b is not positive
    """
    if not (a > 0 and b > 0):
        raise ValidationError(
            f"incomplete_beta: shape parameters must be positive, got a={a}, b={b}"
        )
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0

    bt = math.exp(
        log_gamma(a + b) - log_gamma(a) - log_gamma(b)
        + a * math.log(x) + b * math.log(1.0 - x)
    )

    if x < (a + 1.0) / (a + b + 2.0):
        return bt * beta_continued_fraction(x, a, b) / a
    return 1.0 - bt * beta_continued_fraction(1.0 - x, b, a) / b
