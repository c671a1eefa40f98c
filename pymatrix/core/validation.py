"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError, DimensionError


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify that a nested Python sequence has rows of equal length.

    numpy refuses ragged input with an opaque message; this check runs
    first so the error names the offending row. Arrays and non-sequence
    inputs are left to check_array.

    Args:
        rows: Candidate nested sequence
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows have different lengths
    """
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        return
    lengths = []
    for row in rows:
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            return
        lengths.append(len(row))
    if len(set(lengths)) > 1:
        first_bad = next(i for i, n in enumerate(lengths) if n != lengths[0])
        raise DimensionError(
            f"{name}: ragged rows, row 0 has {lengths[0]} columns "
            f"but row {first_bad} has {lengths[first_bad]}"
        )


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Object-dtype
    input made only of real numbers (e.g. Python ints beyond int64) is
    converted to float64; any other object-dtype input is rejected, as is
    a non-numeric dtype (strings, booleans, datetimes).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        result = _real_objects_to_float(result, name)

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def _real_objects_to_float(result: NDArray, name: str) -> NDArray:
    cells = result.ravel().tolist()
    if not all(
        isinstance(v, numbers.Real) and not isinstance(v, (bool, np.bool_))
        for v in cells
    ):
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    try:
        return result.astype(np.float64)
    except OverflowError as e:
        raise ValidationError(f"{name}: value too large for float64: {e}") from e


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_has_columns(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array with rows also has at least one column.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If the array has rows but zero columns
    """
    n_rows, n_cols = array.shape
    if n_rows > 0 and n_cols == 0:
        raise DimensionError(
            f"{name}: {n_rows} row(s) with zero columns; every row needs at least one cell"
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Convert value to int and verify it is strictly positive.

    Accepts ints, integral floats and numeric strings such as "3".

    Args:
        value: Candidate value
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not a positive whole number
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected a positive integer, got {value!r}")
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a positive integer, got {value!r}") from e
    if not np.isfinite(number) or number != int(number) or number <= 0:
        raise ValidationError(f"{name}: expected a positive integer, got {value!r}")
    return int(number)
