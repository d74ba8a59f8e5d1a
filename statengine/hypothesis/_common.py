"""
Common types for hypothesis testing.

Defines the frozen payloads for the two-sample t-test and the Pearson
correlation test, and the correlation strength labels.
"""

from __future__ import annotations

from dataclasses import dataclass


INSUFFICIENT_DATA = "Insufficient data"
INSUFFICIENT_VARIANCE = "Insufficient variance"

# |r| below each bound gets the label; anything else is "strong"
CORRELATION_STRENGTHS = (
    (0.3, "weak"),
    (0.7, "moderate"),
)


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for the independent-samples t-test.

    Attributes
    ----------
    t_statistic : float
        Pooled-variance t statistic (0 for degenerate input).
    df : int
        n1 + n2 - 2 (0 for degenerate input).
    p_value : float
        Two-tailed p-value.
    mean1, mean2 : float
        Group means (0 for an empty group).
    sd1, sd2 : float
        Bessel-corrected group standard deviations.
    n1, n2 : int
        Group sizes after removing missing values.
    cohens_d : float
        |mean1 - mean2| / pooled sd.
    significant : bool
        p_value < alpha.
    """
    t_statistic: float
    df: int
    p_value: float
    mean1: float
    mean2: float
    sd1: float
    sd2: float
    n1: int
    n2: int
    cohens_d: float
    significant: bool


@dataclass(frozen=True)
class CorrelationParams:
    """
    Parameter payload for the Pearson correlation test.

    interpretation is a strength x direction label such as
    "moderate negative", or "Insufficient data" when n < 3.
    t_statistic and df are those of the t-test on r.
    """
    coefficient: float
    p_value: float
    n: int
    significant: bool
    interpretation: str
    t_statistic: float = 0.0
    df: int = 0


def interpret_correlation(r: float) -> str:
    """Label |r| as weak / moderate / strong and append the direction."""
    abs_r = abs(r)
    strength = "strong"
    for bound, label in CORRELATION_STRENGTHS:
        if abs_r < bound:
            strength = label
            break
    direction = "negative" if r < 0 else "positive"
    return f"{strength} {direction}"
