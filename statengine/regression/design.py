"""
RegressionDesign: validated input for simple linear regression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statengine.core.compute.tolerances import SIGNIFICANCE_LEVEL
from statengine.core.validation import as_paired_samples, check_alpha


@dataclass(frozen=True)
class RegressionDesign:
    """
    Predictor and response for y = slope * x + intercept.

    Pairs with a NaN on either side are dropped. Mismatched lengths are
    kept as-is and flagged; the solver turns them into a zero result.

    Construction:
        RegressionDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _same_length: bool
    _alpha: float = SIGNIFICANCE_LEVEL

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alpha: float = SIGNIFICANCE_LEVEL,
    ) -> RegressionDesign:
        """Build design from predictor x and response y."""
        x_arr, y_arr, same_length = as_paired_samples(x, y)
        return cls(
            _x=x_arr,
            _y=y_arr,
            _same_length=same_length,
            _alpha=check_alpha(alpha),
        )

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def n(self) -> int:
        """Number of observations in x."""
        return int(self._x.shape[0])

    @property
    def same_length(self) -> bool:
        return self._same_length

    @property
    def alpha(self) -> float:
        return self._alpha
