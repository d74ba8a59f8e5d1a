"""
Hypothesis testing module.

Public API:
    t_test(x, y)    - Independent two-sample t-test (pooled variance)
    cor_test(x, y)  - Pearson correlation test
"""

from statengine.hypothesis.solvers import t_test, cor_test
from statengine.hypothesis.design import HypothesisDesign
from statengine.hypothesis._common import TTestParams, CorrelationParams
from statengine.hypothesis.solution import TTestSolution, CorrelationSolution

__all__ = [
    "t_test",
    "cor_test",
    "HypothesisDesign",
    "TTestParams",
    "CorrelationParams",
    "TTestSolution",
    "CorrelationSolution",
]
