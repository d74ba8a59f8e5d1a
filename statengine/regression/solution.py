"""
Regression solution types.

Contains the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statengine.core.result import Result
from statengine.regression._common import RegressionParams

if TYPE_CHECKING:
    from statengine.regression.design import RegressionDesign


@dataclass
class RegressionSolution:
    """
    User-facing regression results.

    Wraps the Result and provides accessors for the fitted line, fit
    quality and the F test on the slope.
    """
    _result: Result[RegressionParams]
    _design: 'RegressionDesign'

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def f_statistic(self) -> float:
        return self._result.params.f_statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def standard_error(self) -> float:
        """Residual standard error."""
        return self._result.params.standard_error

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def significant(self) -> bool:
        return self._result.params.significant

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def sst(self) -> float:
        return self._result.params.sst

    @property
    def sse(self) -> float:
        return self._result.params.sse

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Points on the fitted line, e.g. for drawing it over a scatterplot."""
        x_arr = np.asarray(x, dtype=np.float64)
        return self.slope * x_arr + self.intercept

    def to_dict(self) -> dict[str, Any]:
        """Flat record of the payload fields."""
        return asdict(self._result.params)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"RegressionSolution(slope={p.slope:.4g}, intercept={p.intercept:.4g}, "
            f"r_squared={p.r_squared:.4f}, n={p.n})"
        )
