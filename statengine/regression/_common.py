"""
Common data types for simple linear regression.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegressionParams:
    """
    Parameter payload for simple (one-predictor) linear regression.

    This is the immutable data computed by the solver.

    Attributes:
        slope, intercept: OLS coefficients of y = slope * x + intercept
        r_squared: 1 - SSE / SST
        f_statistic: (SST - SSE) / MSE on (1, n - 2) degrees of freedom
        p_value: Upper-tail F p-value
        standard_error: Residual standard error, sqrt(SSE / (n - 2))
        n: Number of complete pairs
        significant: p_value < alpha
        df_residual: n - 2 (0 for degenerate input)
        sst, sse: Total and residual sums of squares
    """
    slope: float
    intercept: float
    r_squared: float
    f_statistic: float
    p_value: float
    standard_error: float
    n: int
    significant: bool
    df_residual: int = 0
    sst: float = 0.0
    sse: float = 0.0
