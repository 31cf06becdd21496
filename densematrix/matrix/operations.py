"""
Functional entry points for matrix arithmetic.

add(), subtract() and multiply() take Matrix instances or raw grids and
return a new Matrix. Raw grids are validated like Matrix.from_grid(), so a
writeable float64 ndarray operand is wrapped without copying (and is still
never mutated).
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from densematrix.core.validation import check_grid
from densematrix.matrix.matrix import Matrix


def _ensure_matrix(data: Matrix | ArrayLike, name: str) -> Matrix:
    """Convert raw grid to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    # check_grid, this function, the public wrapper, then the caller
    return Matrix._adopt(check_grid(data, name, stacklevel=4))


def add(left: Matrix | ArrayLike, right: Matrix | ArrayLike) -> Matrix:
    """
    Elementwise sum of two same-shape matrices.

    Raises:
        InvalidShapeError: If a raw grid operand is empty or jagged
        DimensionMismatchError: If the shapes differ
    """
    left_matrix = _ensure_matrix(left, 'left')
    right_matrix = _ensure_matrix(right, 'right')
    return left_matrix._apply(right_matrix, 'add', stacklevel=4)


def subtract(left: Matrix | ArrayLike, right: Matrix | ArrayLike) -> Matrix:
    """
    Elementwise difference left - right of two same-shape matrices.

    Raises:
        InvalidShapeError: If a raw grid operand is empty or jagged
        DimensionMismatchError: If the shapes differ
    """
    left_matrix = _ensure_matrix(left, 'left')
    right_matrix = _ensure_matrix(right, 'right')
    return left_matrix._apply(right_matrix, 'subtract', stacklevel=4)


def multiply(left: Matrix | ArrayLike, right: Matrix | ArrayLike) -> Matrix:
    """
    Matrix product left @ right.

    Raises:
        InvalidShapeError: If a raw grid operand is empty or jagged
        DimensionMismatchError: If left.cols != right.rows
    """
    left_matrix = _ensure_matrix(left, 'left')
    right_matrix = _ensure_matrix(right, 'right')
    return left_matrix._apply(right_matrix, 'multiply', stacklevel=4)
