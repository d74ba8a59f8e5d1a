"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.

The factories accept samples of any size; too few observations produce
a neutral result in the backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.compute.tolerances import SIGNIFICANCE_LEVEL
from statengine.core.validation import as_sample, as_paired_samples, check_alpha


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Do not construct directly; use factory classmethods.
    """
    test_type: str
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _alpha: float = SIGNIFICANCE_LEVEL
    _same_length: bool = True

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def same_length(self) -> bool:
        """For paired designs: whether x and y had matching lengths."""
        return self._same_length

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alpha: float = SIGNIFICANCE_LEVEL,
    ) -> HypothesisDesign:
        """Build design for t_test(). NaN values are removed per sample."""
        return cls(
            test_type="t_two_sample",
            _x=as_sample(x, "x"),
            _y=as_sample(y, "y"),
            _alpha=check_alpha(alpha),
        )

    @classmethod
    def for_cor_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alpha: float = SIGNIFICANCE_LEVEL,
    ) -> HypothesisDesign:
        """Build design for cor_test(). Pairs with a NaN on either side are removed."""
        x_arr, y_arr, same_length = as_paired_samples(x, y)
        return cls(
            test_type="cor_pearson",
            _x=x_arr,
            _y=y_arr,
            _alpha=check_alpha(alpha),
            _same_length=same_length,
        )
