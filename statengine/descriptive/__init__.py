"""
Descriptive statistics module.

Public API:
    describe(x)      - Summary row (n, mean, sd, min, max, range)
    mean(x)          - Arithmetic mean
    sd(x)            - Sample standard deviation (Bessel-corrected)
    minimum(x)       - Smallest value
    maximum(x)       - Largest value
    value_range(x)   - max - min
"""

from statengine.descriptive.design import DescriptiveDesign
from statengine.descriptive.solution import DescriptiveParams, DescriptiveSolution
from statengine.descriptive.solvers import (
    describe,
    mean,
    sd,
    minimum,
    maximum,
    value_range,
)

__all__ = [
    "describe",
    "mean",
    "sd",
    "minimum",
    "maximum",
    "value_range",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
