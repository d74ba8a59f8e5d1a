"""
statengine: a small statistical hypothesis-testing engine.

Descriptive statistics plus four classical tests, each returning an
immutable result with a test statistic, degrees of freedom and an exact
two-tailed p-value computed from first principles.

Submodules:
    descriptive: mean, sd, min, max, range, describe
    hypothesis: independent-samples t-test, Pearson correlation test
    anova: one-way ANOVA
    regression: simple linear regression
    distributions: log-gamma, incomplete beta, t and F tail probabilities
"""

__version__ = "0.1.0"

from statengine import descriptive
from statengine import distributions
from statengine import hypothesis
from statengine import anova
from statengine import regression

from statengine.descriptive import describe
from statengine.hypothesis import t_test, cor_test
from statengine.anova import anova_oneway, group_by, Group
from statengine.regression import linear_regression

__all__ = [
    "__version__",
    "descriptive",
    "distributions",
    "hypothesis",
    "anova",
    "regression",
    "describe",
    "t_test",
    "cor_test",
    "anova_oneway",
    "group_by",
    "Group",
    "linear_regression",
]
