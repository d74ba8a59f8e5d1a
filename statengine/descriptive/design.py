"""
DescriptiveDesign: data wrapper for descriptive statistics.

Wraps a single numeric variable and provides validation and metadata for
the descriptive pipeline. Follows the statengine Design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.validation import as_sample


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics on one variable.

    Missing values (NaN) are dropped at construction. Empty samples are
    allowed; the statistics degrade to 0. Immutable after construction.

    Construction:
        DescriptiveDesign.from_array(data, name='deterrence')
    """
    _data: NDArray[np.floating[Any]]
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = "x") -> DescriptiveDesign:
        """
        Build DescriptiveDesign from 1D array-like data.

        Parameters
        ----------
        data : array-like
            Numeric sample. pandas Series (anything with .values) is accepted.
        name : str
            Variable label carried through to the result.
        """
        if hasattr(data, 'values') and not isinstance(data, dict):
            data = data.values
        return cls(_data=as_sample(data, name), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Sample values with missing entries removed."""
        return self._data

    @property
    def n(self) -> int:
        return int(self._data.shape[0])

    @property
    def name(self) -> str:
        return self._name
