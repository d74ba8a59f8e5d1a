"""
Simple linear regression.

Public API:
    linear_regression(x, y) -> RegressionSolution
"""

from statengine.regression.design import RegressionDesign
from statengine.regression._common import RegressionParams
from statengine.regression.solution import RegressionSolution
from statengine.regression.solvers import linear_regression

__all__ = [
    "linear_regression",
    "RegressionDesign",
    "RegressionParams",
    "RegressionSolution",
]
