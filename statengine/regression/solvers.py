"""
Simple linear regression solver.

Public API:
    linear_regression(x, y) -> RegressionSolution
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import ArrayLike

from statengine.core.compute.tolerances import SIGNIFICANCE_LEVEL, negligible_spread
from statengine.core.result import Result
from statengine.distributions import f_upper_p_value
from statengine.regression._common import RegressionParams
from statengine.regression.design import RegressionDesign
from statengine.regression.solution import RegressionSolution

logger = logging.getLogger(__name__)


def _zero_params(n: int) -> RegressionParams:
    return RegressionParams(
        slope=0.0,
        intercept=0.0,
        r_squared=0.0,
        f_statistic=0.0,
        p_value=1.0,
        standard_error=0.0,
        n=n,
        significant=False,
    )


def _fit(design: RegressionDesign) -> tuple[RegressionParams, list[str]]:
    x = design.x
    y = design.y
    n = design.n
    warnings_list: list[str] = []

    if not design.same_length:
        warnings_list.append(
            f"x and y must have the same length, got {len(x)} and {len(y)}"
        )
        return _zero_params(n), warnings_list
    if n < 3:
        warnings_list.append(f"need at least 3 complete pairs, got {n}")
        return _zero_params(n), warnings_list

    x_mean = float(np.mean(x))
    y_mean = float(np.mean(y))
    xc = x - x_mean
    sxx = float(np.dot(xc, xc))
    if negligible_spread(sxx, n, float(np.max(np.abs(x)))):
        warnings_list.append("predictor x is constant; slope is undefined")
        return _zero_params(n), warnings_list

    sst = float(np.sum((y - y_mean) ** 2))
    y_scale = float(np.max(np.abs(y)))
    y_constant = negligible_spread(sst, n, y_scale)
    if y_constant:
        slope = 0.0
    else:
        slope = float(np.dot(xc, y - y_mean)) / sxx
    intercept = y_mean - slope * x_mean

    fitted = slope * x + intercept
    sse = float(np.sum((y - fitted) ** 2))
    df_residual = n - 2
    mse = sse / df_residual
    standard_error = math.sqrt(mse)

    if y_constant:
        warnings_list.append("response y is constant; R-squared is undefined")
        r_squared = 0.0
        f_stat = 0.0
        p_value = 1.0
    elif negligible_spread(sse, n, y_scale):
        r_squared = 1.0
        f_stat = math.inf
        p_value = 0.0
    else:
        r_squared = 1.0 - sse / sst
        msr = sst - sse
        f_stat = msr / mse
        p_value = f_upper_p_value(f_stat, 1, df_residual)

    return RegressionParams(
        slope=slope,
        intercept=intercept,
        r_squared=r_squared,
        f_statistic=f_stat,
        p_value=p_value,
        standard_error=standard_error,
        n=n,
        significant=p_value < design.alpha,
        df_residual=df_residual,
        sst=sst,
        sse=sse,
    ), warnings_list


def linear_regression(
    x: ArrayLike | RegressionDesign,
    y: ArrayLike | None = None,
    *,
    alpha: float = SIGNIFICANCE_LEVEL,
) -> RegressionSolution:
    """
    Fit y = slope * x + intercept by ordinary least squares.

    Args:
        x: Predictor values, or a prepared RegressionDesign (then y is omitted)
        y: Response values, same length as x
        alpha: Significance level for the `significant` flag. Default 0.05.

    Returns:
        RegressionSolution. With fewer than 3 pairs, mismatched lengths or a
        constant predictor every statistic is 0 and p_value is 1.

    Examples:
        >>> result = linear_regression([1, 2, 3, 4], [5, 7, 9, 11])
        >>> result.slope, result.intercept, result.r_squared
        (2.0, 3.0, 1.0)
    """
    if isinstance(x, RegressionDesign):
        design = x
    else:
        if y is None:
            raise TypeError("linear_regression() missing required argument: 'y'")
        design = RegressionDesign.from_arrays(x, y, alpha=alpha)

    params, warnings_list = _fit(design)
    if warnings_list:
        logger.debug("linear_regression: %s", warnings_list[0])

    result = Result(
        params=params,
        info={'method': 'ols', 'n_predictors': 1, 'alpha': design.alpha},
        warnings=tuple(warnings_list),
    )
    return RegressionSolution(_result=result, _design=design)
