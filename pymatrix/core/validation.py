"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No clamping or wrapping of indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator
from decimal import Decimal

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and ragged nested sequences. Object arrays made only of real numbers
    (Fraction, Decimal, Python ints) are converted to float64.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        if result.size and all(_is_real(v) for v in result.flat):
            # Fraction / Decimal entries convert as float() would
            try:
                return result.astype(np.float64)
            except OverflowError as e:
                raise ValidationError(f"{name}: {e}") from e
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


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
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            expected=2,
            actual=array.ndim,
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array has as many rows as columns.

    Raises:
        DimensionError: If array is not square
    """
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {array.shape}",
            expected=(n_rows, n_rows),
            actual=array.shape,
        )


def check_size(size: Any, name: str = "size") -> int:
    """
    Validate a matrix size N.

    Accepts any non-bool integer (including numpy integers) >= 0.

    Returns:
        The size as a plain int

    Raises:
        ValidationError: If size is not a non-negative integer
    """
    if isinstance(size, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected a non-negative integer, got bool {size!r}")
    try:
        n = operator.index(size)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(size).__name__} {size!r}"
        ) from e
    if n < 0:
        raise ValidationError(f"{name}: must be >= 0, got {n}")
    return n


def _is_real(value: Any) -> bool:
    """True for real numbers other than bools, including Decimal."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a single real scalar.

    Accepts any numbers.Real (int, float, Fraction, numpy scalars),
    Decimal, or a 0-d numeric array. Bools and strings are rejected.

    Raises:
        ValidationError: If value is not a real number
    """
    if _is_real(value):
        try:
            return float(value)
        except OverflowError as e:
            raise ValidationError(f"{name}: {e}") from e
    if isinstance(value, (str, bytes, bool, np.bool_)):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    arr = check_array(value, name)
    if arr.ndim != 0:
        raise ValidationError(f"{name}: expected a scalar, got shape {arr.shape}")
    return float(arr)


def check_index(key: Any, size: int) -> tuple[int, int]:
    """
    Validate a (row, col) element key against a matrix of size N.

    Args:
        key: Indexing key, must be a 2-tuple of integers
        size: Matrix size N

    Returns:
        (row, col) as plain ints

    Raises:
        ValidationError: If key is not a pair of integers
        MatrixIndexError: If either index is outside [0, size)
    """
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValidationError(
            f"index: expected a (row, col) pair, got {key!r}"
        )

    indices = []
    for label, raw in zip(("row", "col"), key):
        if isinstance(raw, (bool, np.bool_)):
            raise ValidationError(f"index: {label} must be an integer, got bool {raw!r}")
        try:
            indices.append(operator.index(raw))
        except TypeError as e:
            raise ValidationError(
                f"index: {label} must be an integer, got {type(raw).__name__} {raw!r}"
            ) from e

    row, col = indices
    if not (0 <= row < size and 0 <= col < size):
        raise MatrixIndexError(
            f"index ({row}, {col}) out of range for {size}x{size} matrix",
            row=row,
            col=col,
            size=size,
        )
    return row, col
