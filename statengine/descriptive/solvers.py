"""
Descriptive statistics.

Leaf utilities used standalone and by every test module:
mean(), sd(), minimum(), maximum(), value_range(), plus describe() which
bundles them into a DescriptiveSolution.

All functions accept any 1D array-like, drop NaN, and never raise on
small samples: an empty sample gives 0 for every statistic and sd is 0
whenever n < 2.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from statengine.core.result import Result
from statengine.core.validation import as_sample
from statengine.descriptive.design import DescriptiveDesign
from statengine.descriptive.solution import DescriptiveParams, DescriptiveSolution

logger = logging.getLogger(__name__)


def mean(x: ArrayLike) -> float:
    """Arithmetic mean; 0.0 for an empty sample."""
    arr = as_sample(x)
    if arr.size == 0:
        return 0.0
    return float(np.mean(arr))


def sd(x: ArrayLike) -> float:
    """
    Sample standard deviation with Bessel's correction.

    Divides the sum of squared deviations by n - 1, not n. Returns 0.0
    for n < 2.

    Examples:
        >>> sd([2, 4, 4, 4, 5, 5, 7, 9])   # population sd would be 2.0
        2.138089935299395
    """
    arr = as_sample(x)
    if arr.size < 2:
        return 0.0
    return float(np.std(arr, ddof=1))


def minimum(x: ArrayLike) -> float:
    """Smallest value; 0.0 for an empty sample."""
    arr = as_sample(x)
    if arr.size == 0:
        return 0.0
    return float(np.min(arr))


def maximum(x: ArrayLike) -> float:
    """Largest value; 0.0 for an empty sample."""
    arr = as_sample(x)
    if arr.size == 0:
        return 0.0
    return float(np.max(arr))


def value_range(x: ArrayLike) -> float:
    """max - min; 0.0 for an empty sample."""
    arr = as_sample(x)
    if arr.size == 0:
        return 0.0
    return float(np.max(arr) - np.min(arr))


def describe(
    data: ArrayLike | DescriptiveDesign,
    *,
    name: str = "x",
) -> DescriptiveSolution:
    """
    Compute the summary row for one variable.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        1D numeric sample. NaN entries are treated as missing.
    name : str
        Variable label, ignored when a DescriptiveDesign is passed.

    Returns
    -------
    DescriptiveSolution with n, mean, sd, min, max and range.
    """
    if isinstance(data, DescriptiveDesign):
        design = data
    else:
        design = DescriptiveDesign.from_array(data, name=name)

    x = design.data
    warnings_list: list[str] = []
    if design.n == 0:
        warnings_list.append("no non-missing observations")
    elif design.n < 2:
        warnings_list.append("fewer than 2 observations; sd reported as 0")
    if warnings_list:
        logger.debug("describe(%s): %s", design.name, warnings_list[0])

    params = DescriptiveParams(
        variable=design.name,
        n=design.n,
        mean=mean(x),
        sd=sd(x),
        min=minimum(x),
        max=maximum(x),
        range=value_range(x),
    )

    result = Result(
        params=params,
        info={'method': 'describe'},
        warnings=tuple(warnings_list),
    )
    return DescriptiveSolution(_result=result, _design=design)
