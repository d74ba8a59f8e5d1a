"""
Special functions and distribution tail probabilities.

Public API:
    log_gamma(x)                      - ln Gamma(x), Lanczos-style series
    incomplete_beta(x, a, b)          - regularized I_x(a, b)
    beta_continued_fraction(x, a, b)  - Lentz continued fraction behind it
    t_two_tailed_p_value(t, df)       - two-tailed Student t p-value
    f_upper_p_value(f, df1, df2)      - upper-tail F p-value
"""

from statengine.distributions._special import (
    log_gamma,
    incomplete_beta,
    beta_continued_fraction,
)
from statengine.distributions._tails import (
    t_two_tailed_p_value,
    f_upper_p_value,
)

__all__ = [
    "log_gamma",
    "incomplete_beta",
    "beta_continued_fraction",
    "t_two_tailed_p_value",
    "f_upper_p_value",
]
