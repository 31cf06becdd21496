"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except int/float grids to float64)
    - No clamping of indices, no negative-index wraparound
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidShapeError,
    ValidationError,
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a declared matrix dimension.

    Args:
        value: Declared number of rows or columns
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        InvalidShapeError: If value is not an integer or is less than 1
    """
    if not _is_integer(value):
        raise InvalidShapeError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    value = int(value)
    if value < 1:
        raise InvalidShapeError(f"{name}: must be at least 1, got {value}")
    return value


def check_rectangular(grid: Any, name: str) -> tuple[int, int]:
    """
    Verify a nested sequence is a non-empty rectangle.

    The first row fixes the column count; every other row must match it.

    Args:
        grid: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (rows, cols) of the grid

    Raises:
        InvalidShapeError: If grid is empty, has an empty first row, has a
            row that is not a sequence, or has rows of differing length
    """
    try:
        n_rows = len(grid)
    except TypeError as e:
        raise InvalidShapeError(
            f"{name}: expected a sequence of rows, got {type(grid).__name__}"
        ) from e
    if n_rows == 0:
        raise InvalidShapeError(f"{name}: grid has no rows", shape=(0, 0))

    lengths = []
    for i, row in enumerate(grid):
        try:
            lengths.append(len(row))
        except TypeError as e:
            raise InvalidShapeError(
                f"{name}: row {i} is not a sequence ({type(row).__name__})"
            ) from e

    n_cols = lengths[0]
    if n_cols == 0:
        raise InvalidShapeError(f"{name}: first row is empty", shape=(n_rows, 0))

    jagged = [i for i, length in enumerate(lengths) if length != n_cols]
    if jagged:
        details = ", ".join(f"row {i} has {lengths[i]}" for i in jagged)
        raise InvalidShapeError(
            f"{name}: jagged grid, expected {n_cols} columns per row ({details})"
        )
    return n_rows, n_cols


def check_numeric(array: NDArray, name: str) -> None:
    """
    Verify an array holds real numeric data.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If the dtype is object, complex or non-numeric
    """
    if array.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if not np.issubdtype(array.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {array.dtype}, expected real numbers"
        )
    if np.issubdtype(array.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {array.dtype}, expected real numbers"
        )


def check_grid(
    grid: ArrayLike,
    name: str = "grid",
    *,
    stacklevel: int = 3,
) -> NDArray[np.float64]:
    """
    Validate a grid and return it as a 2D float64 array.

    A writeable 2D float64 ndarray is returned without copying, so the
    caller's handle and the returned array share storage. Any other input
    is converted into a fresh, writeable float64 array; an ndarray input
    that needs that conversion (other dtype, or read-only such as a
    broadcast view) triggers a UserWarning because the caller's handle will
    no longer alias the result.

    Args:
        grid: ndarray or nested sequence of rows
        name: Parameter name for error messages
        stacklevel: Frame the copy warning points at, counting this
            function as 1

    Returns:
        numpy.ndarray of shape (rows, cols) and dtype float64

    Raises:
        InvalidShapeError: If the grid is empty, jagged or not 2D
        ValidationError: If the grid is not real numeric data
    """
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise InvalidShapeError(
                f"{name}: expected 2D array, got {grid.ndim}D with shape {grid.shape}"
            )
        if grid.shape[0] < 1 or grid.shape[1] < 1:
            raise InvalidShapeError(
                f"{name}: both dimensions must be at least 1, got shape {grid.shape}",
                shape=(int(grid.shape[0]), int(grid.shape[1])),
            )
        check_numeric(grid, name)
        if grid.dtype != np.float64:
            reason = f"{grid.dtype} array copied to float64"
        elif not grid.flags.writeable:
            reason = "read-only array copied"
        else:
            return np.asarray(grid)
        warnings.warn(
            f"{name}: {reason}; "
            f"writes through the original array will not reach the matrix",
            UserWarning,
            stacklevel=stacklevel,
        )
        return np.array(grid, dtype=np.float64)

    check_rectangular(grid, name)
    try:
        array = np.asarray(grid)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    if array.ndim != 2:
        raise InvalidShapeError(
            f"{name}: expected rows of scalars, got {array.ndim}D data with shape {array.shape}"
        )
    check_numeric(array, name)
    return array.astype(np.float64)


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> None:
    """
    Verify (row, col) addresses a cell of a matrix with the given shape.

    Args:
        row: Zero-based row index
        col: Zero-based column index
        shape: (rows, cols) of the matrix

    Raises:
        ValidationError: If either index is not an integer
        IndexOutOfBoundsError: If the position is outside [0, rows) x [0, cols)
    """
    for label, value in (("row", row), ("col", col)):
        if not _is_integer(value):
            raise ValidationError(
                f"{label}: index must be an integer, got {type(value).__name__} {value!r}"
            )
    n_rows, n_cols = shape
    if row < 0 or col < 0 or row >= n_rows or col >= n_cols:
        raise IndexOutOfBoundsError(
            f"index ({row}, {col}) out of bounds for matrix of shape {n_rows}x{n_cols}",
            index=(int(row), int(col)),
            shape=shape,
        )


def check_value(value: Any, name: str = "value") -> float:
    """
    Validate a cell value and return it as a float.

    Follows the same dtype rules as check_numeric: bool and complex are
    not real numbers here.

    Args:
        value: Value to store
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number or does not fit in a float64
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(
            f"{name}: {type(value).__name__} too large for float64"
        ) from e


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes (elementwise operations).

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes differ, {left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimension(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str = "multiply",
) -> None:
    """
    Verify left cols equals right rows (matrix product).

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions differ, "
            f"{left[0]}x{left[1]} @ {right[0]}x{right[1]} "
            f"(left has {left[1]} columns, right has {right[0]} rows)",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )
