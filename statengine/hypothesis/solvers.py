"""
Hypothesis test solvers.

Public API:
    t_test(x, y)    - Independent two-sample t-test (pooled variance)
    cor_test(x, y)  - Pearson correlation with a t-based significance test
"""

from __future__ import annotations

import logging

from numpy.typing import ArrayLike

from statengine.core.compute.tolerances import SIGNIFICANCE_LEVEL
from statengine.hypothesis.design import HypothesisDesign
from statengine.hypothesis.solution import TTestSolution, CorrelationSolution
from statengine.hypothesis.backends.cpu import CPUHypothesisBackend

logger = logging.getLogger(__name__)


def t_test(
    x: ArrayLike,
    y: ArrayLike,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
) -> TTestSolution:
    """
    Independent-samples t-test with pooled variance.

    Parameters
    ----------
    x, y : array-like
        The two samples. NaN values are removed from each.
    alpha : float
        Significance level for the `significant` flag. Default 0.05.

    Returns
    -------
    TTestSolution
        If either sample has fewer than 2 observations, or both samples
        are constant, the result is neutral (t = 0, p = 1,
        significant = False) and carries a warning.

    Examples
    --------
    >>> result = t_test([10, 12, 14, 12, 13], [20, 22, 19, 21, 23])
    >>> result.df
    8
    >>> result.significant
    True
    """
    design = HypothesisDesign.for_t_test(x, y, alpha=alpha)
    result = CPUHypothesisBackend().solve(design)
    if result.warnings:
        logger.debug("t_test fell back to a neutral result: %s", result.warnings[0])
    return TTestSolution(_result=result, _design=design)


def cor_test(
    x: ArrayLike,
    y: ArrayLike,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
) -> CorrelationSolution:
    """
    Pearson correlation with a test of H0: rho = 0.

    Parameters
    ----------
    x, y : array-like
        Paired observations. Pairs with a NaN on either side are removed.
    alpha : float
        Significance level for the `significant` flag. Default 0.05.

    Returns
    -------
    CorrelationSolution
        With fewer than 3 pairs (or mismatched lengths) the coefficient is
        0, p is 1 and interpretation is "Insufficient data".
    """
    design = HypothesisDesign.for_cor_test(x, y, alpha=alpha)
    result = CPUHypothesisBackend().solve(design)
    if result.warnings:
        logger.debug("cor_test fell back to a neutral result: %s", result.warnings[0])
    return CorrelationSolution(_result=result, _design=design)
