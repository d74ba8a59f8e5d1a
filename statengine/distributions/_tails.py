"""
Tail probabilities for the Student t and F distributions.

Two independent routines:

- t_two_tailed_p_value: finite series in cos^2(theta) whose form depends
  on the parity of the (integer) degrees of freedom, Abramowitz & Stegun
  26.7.3 (odd df) and 26.7.4 (even df). Does not use the incomplete beta.
- f_upper_p_value: upper tail of F via the regularized incomplete beta.

Both clamp their output to [0, 1].

t p-values feed the t-test and the correlation test; F p-values feed
ANOVA and regression. For integer df the two agree (t^2 ~ F(1, df)) to
within the continued-fraction tolerance.
"""

from __future__ import annotations

import math

from statengine.core.exceptions import ValidationError
from statengine.distributions._special import incomplete_beta


def _clamp_probability(p: float) -> float:
    return min(max(p, 0.0), 1.0)


def t_two_tailed_p_value(t_stat: float, df: float) -> float:
    """
    Two-tailed p-value P(|T| >= |t|) for Student's t with integer df.

    With theta = atan(|t| / sqrt(df)) and a = cos^2(theta) = df / (df + t^2),
    the central probability A = P(|T| < |t|) is

        even df: sin(theta) * (1 + 1/2 a + (1*3)/(2*4) a^2 + ...)
        odd df:  2/pi * (theta + sin(theta) cos(theta) * (1 + 2/3 a + ...))

    with floor(df / 2) series terms, and the p-value is 1 - A.

    Args:
        t_stat: Test statistic; the sign is ignored, +/-inf gives 0
        df: Degrees of freedom. Values below 1 return 1.

    Raises:
        ValidationError: If df >= 1 is not a whole number
    """
    if math.isnan(t_stat) or df < 1:
        return 1.0
    if df != math.floor(df):
        raise ValidationError(
            f"t_two_tailed_p_value: df must be a whole number, got {df}"
        )
    df = int(df)

    t = abs(t_stat)
    a = df / (df + t * t)
    sin_theta = math.sqrt(1.0 - a)

    if df % 2 == 0:
        term = 1.0
        series = 1.0
        for i in range(2, df - 1, 2):
            term *= a * (i - 1) / i
            series += term
        p = 1.0 - sin_theta * series
    else:
        theta = math.atan(t / math.sqrt(df))
        if df == 1:
            p = 1.0 - (2.0 / math.pi) * theta
        else:
            term = 1.0
            series = 1.0
            for i in range(3, df - 1, 2):
                term *= a * (i - 1) / i
                series += term
            p = 1.0 - (2.0 / math.pi) * (theta + sin_theta * math.sqrt(a) * series)

    return _clamp_probability(p)


def f_upper_p_value(f: float, df1: float, df2: float) -> float:
    """
    Upper-tail p-value P(F >= f) for the F distribution.

    Uses P(F >= f) = I_x(df2/2, df1/2) with x = df2 / (df2 + df1 * f).

    Args:
        f: F statistic; f <= 0 (or NaN) gives 1, +inf gives 0
        df1: Numerator degrees of freedom
        df2: Denominator degrees of freedom

    Returns:
        p-value in [0, 1]; 1 when either df is not positive
    """
    if math.isnan(f) or f <= 0 or df1 <= 0 or df2 <= 0:
        return 1.0
    if math.isinf(f):
        return 0.0

    x = df2 / (df2 + df1 * f)
    return _clamp_probability(incomplete_beta(x, df2 / 2.0, df1 / 2.0))
