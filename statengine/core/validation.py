"""
Input validation utilities for statengine.

These validators follow the "fail fast, fail loud" principle for
malformed input only: non-numeric data, infinite values and arrays
of the wrong shape raise immediately. Small or constant samples are
NOT rejected here; the test modules turn them into neutral results.

Design principles:
    - No silent type coercion beyond np.asarray to float64
    - NaN means "missing" and is dropped, infinities are rejected
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from statengine.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    if isinstance(array, (str, bytes)):
        raise ValidationError(f"{name}: expected numeric data, got {type(array).__name__}")

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Empty lists come back as float64 already; bool is accepted as 0/1
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_no_inf(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no infinite values. NaN is allowed (missing).

    Raises:
        ValidationError: If array contains +/-Inf
    """
    inf_mask = np.isinf(array)
    if np.any(inf_mask):
        first = int(np.flatnonzero(inf_mask)[0])
        raise ValidationError(
            f"{name}: contains {int(inf_mask.sum())} infinite value(s) "
            f"(first at index {first})"
        )


def as_sample(x: ArrayLike, name: str = "x") -> NDArray[np.floating[Any]]:
    """
    Convert to a 1D float64 sample with missing (NaN) values removed.

    Raises:
        ValidationError: Non-numeric or infinite data
        DimensionError: Input is not 1D
    """
    arr = check_array(x, name)
    if arr.ndim == 0:
        raise DimensionError(f"{name}: expected 1D array, got a scalar")
    check_1d(arr, name)
    check_no_inf(arr, name)
    return arr[~np.isnan(arr)]


def as_paired_samples(
    x: ArrayLike,
    y: ArrayLike,
    names: tuple[str, str] = ("x", "y"),
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], bool]:
    """
    Convert two parallel sequences to 1D float64 arrays.

    When the lengths agree, any pair with a NaN on either side is dropped.
    Mismatched lengths are returned untouched with the flag set to False
    so the caller can produce its degenerate result.

    Returns:
        (x, y, same_length)
    """
    x_name, y_name = names
    x_arr = check_array(x, x_name)
    y_arr = check_array(y, y_name)
    for arr, name in ((x_arr, x_name), (y_arr, y_name)):
        if arr.ndim == 0:
            raise DimensionError(f"{name}: expected 1D array, got a scalar")
        check_1d(arr, name)
        check_no_inf(arr, name)

    if x_arr.shape[0] != y_arr.shape[0]:
        return x_arr, y_arr, False

    keep = ~(np.isnan(x_arr) | np.isnan(y_arr))
    return x_arr[keep], y_arr[keep], True


def check_alpha(alpha: float) -> float:
    """
    Validate a significance level is in (0, 1).

    Raises:
        ValidationError: If alpha is outside the open unit interval
    """
    if not (0.0 < alpha < 1.0):
        raise ValidationError(f"alpha must be in (0, 1), got {alpha}")
    return float(alpha)
