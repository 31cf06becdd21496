"""
Matrix: dense float64 matrix value type.

Shape is fixed at construction; cell values are mutable through set().
Arithmetic never mutates an operand, it returns a new Matrix.

Storage contract:
    The backing grid is a 2D float64 numpy array that is shared, not copied,
    in both directions. from_grid() adopts a float64 ndarray as-is, and
    to_grid() hands back the backing array itself, so writes through either
    handle are visible through the other. Callers sharing a grid coordinate
    their own access; nothing here is thread-safe.

Construction:
    Matrix(rows, cols) / Matrix.create(rows, cols)   - zero-filled
    Matrix.from_grid(grid)                           - wrap existing data
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import DimensionMismatchError, ValidationError
from densematrix.core.tolerances import FP64, ToleranceTier, select_tolerance
from densematrix.core.validation import (
    check_dimension,
    check_grid,
    check_index,
    check_inner_dimension,
    check_same_shape,
    check_value,
)
from densematrix.matrix._arithmetic import add_grids, product_grid, subtract_grids


_KERNELS = {
    'add': add_grids,
    'subtract': subtract_grids,
    'multiply': product_grid,
}


class Matrix:
    """
    Rectangular grid of double-precision values.

    Invariants:
        rows >= 1 and cols >= 1
        every row has exactly cols elements
        (rows, cols) never changes after construction

    Examples:
        >>> a = Matrix.from_grid([[1, 2], [3, 4]])
        >>> b = Matrix.from_grid([[5, 6], [7, 8]])
        >>> a.multiply(b).to_grid().tolist()
        [[19.0, 22.0], [43.0, 50.0]]
    """

    __slots__ = ('_values', '_rows', '_cols')

    def __init__(self, rows: int, cols: int):
        """
        Create a zero-filled matrix.

        Args:
            rows: Number of rows, at least 1
            cols: Number of columns, at least 1

        Raises:
            InvalidShapeError: If rows or cols is not an integer >= 1
        """
        self._rows = check_dimension(rows, 'rows')
        self._cols = check_dimension(cols, 'cols')
        self._values = np.zeros((self._rows, self._cols), dtype=np.float64)

    @classmethod
    def create(cls, rows: int, cols: int) -> Matrix:
        """Zero-filled matrix of the given shape; same as Matrix(rows, cols)."""
        return cls(rows, cols)

    @classmethod
    def from_grid(cls, grid: ArrayLike) -> Matrix:
        """
        Wrap existing data as a matrix.

        The shape is taken from the grid: the number of rows, and the length
        of the first row, which every other row must match.

        A writeable 2D float64 ndarray is adopted without copying, so the
        caller's array and the matrix stay in sync. Nested lists, other
        dtypes and read-only arrays are converted into a new float64 array
        (with a UserWarning when an ndarray had to be converted).

        Args:
            grid: 2D ndarray or sequence of equal-length rows of real numbers

        Returns:
            Matrix backed by the grid

        Raises:
            InvalidShapeError: If the grid is empty, jagged or not 2D
            ValidationError: If the grid does not hold real numbers
        """
        return cls._adopt(check_grid(grid, 'grid'))

    @classmethod
    def _adopt(cls, values: NDArray[np.float64]) -> Matrix:
        # values is already validated: 2D, float64, both dimensions >= 1
        matrix = cls.__new__(cls)
        matrix._values = values
        matrix._rows = int(values.shape[0])
        matrix._cols = int(values.shape[1])
        return matrix

    # -----------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def values(self) -> NDArray[np.float64]:
        """The backing grid (shared, not a copy). Same as to_grid()."""
        return self._values

    def get(self, row: int, col: int) -> float:
        """
        Value at a zero-based position.

        Raises:
            IndexOutOfBoundsError: If row/col is negative or past the last row/column
        """
        check_index(row, col, self.shape)
        return float(self._values[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        """
        Overwrite the value at a zero-based position, in place.

        The write lands in the shared backing grid, so it is visible through
        any array handle obtained from to_grid() or passed to from_grid().

        Raises:
            IndexOutOfBoundsError: If row/col is negative or past the last row/column
            ValidationError: If value is not a real number (bool excluded)
                or is too large for float64
        """
        check_index(row, col, self.shape)
        self._values[row, col] = check_value(value)

    def to_grid(self) -> NDArray[np.float64]:
        """
        The backing grid itself, not a copy.

        Writes through the returned array change this matrix, and set()
        calls on this matrix show up in the returned array.
        """
        return self._values

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._unpack_key(key)
        self.set(row, col, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"Matrix indices must be a (row, col) pair, got {key!r}"
            )
        return key

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum as a new matrix.

        Raises:
            DimensionMismatchError: If other is not a Matrix of the same shape
        """
        return self._apply(other, 'add', stacklevel=4)

    def subtract(self, other: Matrix) -> Matrix:
        """
        Elementwise difference self - other as a new matrix.

        Raises:
            DimensionMismatchError: If other is not a Matrix of the same shape
        """
        return self._apply(other, 'subtract', stacklevel=4)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other as a new (self.rows, other.cols) matrix.

        Each cell is summed left to right over the inner index, starting
        from 0.0, so results are reproducible bit for bit.

        Raises:
            DimensionMismatchError: If other is not a Matrix or
                self.cols != other.rows
        """
        return self._apply(other, 'multiply', stacklevel=4)

    def _apply(self, other: Any, operation: str, *, stacklevel: int) -> Matrix:
        """
        Validate operands and run the kernel for operation.

        stacklevel counts the kernel as 1; pass 4 from any function that is
        called directly by user code.
        """
        if not isinstance(other, Matrix):
            raise DimensionMismatchError(
                f"{operation}: right operand must be a Matrix, got {type(other).__name__}",
                operation=operation,
                left_shape=self.shape,
            )
        if operation == 'multiply':
            check_inner_dimension(self.shape, other.shape, operation)
        else:
            check_same_shape(self.shape, other.shape, operation)
        kernel = _KERNELS[operation]
        return Matrix._adopt(kernel(self._values, other._values, stacklevel=stacklevel))

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._apply(other, 'add', stacklevel=4)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._apply(other, 'subtract', stacklevel=4)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._apply(other, 'multiply', stacklevel=4)

    # -----------------------------------------------------------------
    # Comparison
    # -----------------------------------------------------------------

    def equals(self, other: Matrix) -> bool:
        """Same shape and identical values (NaN never compares equal)."""
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected a Matrix, got {type(other).__name__}"
            )
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    def allclose(
        self,
        other: Matrix,
        tolerance: ToleranceTier | str = FP64,
    ) -> bool:
        """
        Same shape and values equal within a tolerance tier.

        Args:
            other: Matrix to compare against
            tolerance: ToleranceTier or its name ('exact', 'fp64', 'fp64_loose')

        Returns:
            False on shape mismatch, otherwise the elementwise comparison

        Raises:
            ValidationError: If other is not a Matrix or the tier is unknown
        """
        tier = select_tolerance(tolerance)
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected a Matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._values, other._values, rtol=tier.rtol, atol=tier.atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable contents

    # -----------------------------------------------------------------
    # Debug rendering (not a parseable format)
    # -----------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, cols={self._cols}, "
            f"values={self._values.tolist()!r})"
        )

    def __str__(self) -> str:
        cells = [[repr(float(v)) for v in row] for row in self._values]
        width = max(len(c) for row in cells for c in row)
        lines = ["[" + "  ".join(c.rjust(width) for c in row) + "]" for row in cells]
        return "\n".join(lines)
