"""
Tests for bounds-checked element access: get(), set(), [row, col].
"""

import numpy as np
import pytest

from densematrix import Matrix
from densematrix.core.exceptions import IndexOutOfBoundsError, ValidationError


OUT_OF_BOUNDS = [(2, 2), (1, 3), (-1, 0), (0, -1), (2, 0), (0, 3)]


class TestGet:

    def test_returns_grid_values(self, matrix, values):
        for i in range(matrix.rows):
            for j in range(matrix.cols):
                assert matrix.get(i, j) == values[i][j]

    def test_returns_python_float(self, matrix):
        assert type(matrix.get(0, 0)) is float

    @pytest.mark.parametrize("row,col", OUT_OF_BOUNDS)
    def test_out_of_bounds(self, matrix, row, col):
        with pytest.raises(IndexOutOfBoundsError):
            matrix.get(row, col)

    def test_negative_index_does_not_wrap(self, matrix):
        """-1 is an error, not the last row."""
        with pytest.raises(IndexOutOfBoundsError):
            matrix.get(-1, -1)

    def test_repeated_reads_are_stable(self, matrix):
        assert matrix.get(1, 2) == matrix.get(1, 2) == 1.0


class TestSet:

    def test_set_then_get(self, matrix, values):
        for i in range(matrix.rows):
            for j in range(matrix.cols):
                matrix.set(i, j, values[i][j] * 2)
                assert matrix.get(i, j) == values[i][j] * 2

    def test_accepts_int_and_numpy_scalars(self, matrix):
        matrix.set(0, 0, 5)
        matrix.set(0, 1, np.float32(0.5))
        assert matrix.get(0, 0) == 5.0
        assert matrix.get(0, 1) == 0.5

    @pytest.mark.parametrize("row,col", OUT_OF_BOUNDS)
    def test_out_of_bounds(self, matrix, row, col):
        with pytest.raises(IndexOutOfBoundsError):
            matrix.set(row, col, 0.0)

    def test_out_of_bounds_leaves_matrix_unchanged(self, matrix, values):
        with pytest.raises(IndexOutOfBoundsError):
            matrix.set(-1, 0, 42.0)
        np.testing.assert_array_equal(matrix.to_grid(), values)

    @pytest.mark.parametrize("value", ["1.5", None, 1 + 1j, [1.0], True, np.False_])
    def test_non_real_value_rejected(self, matrix, value):
        with pytest.raises(ValidationError, match="real number"):
            matrix.set(0, 0, value)

    def test_huge_int_rejected(self, matrix, values):
        with pytest.raises(ValidationError, match="too large for float64"):
            matrix.set(0, 0, 10 ** 400)
        np.testing.assert_array_equal(matrix.to_grid(), values)

    def test_shape_unchanged(self, matrix):
        matrix.set(1, 1, 9.0)
        assert matrix.shape == (2, 3)


class TestSubscript:

    def test_getitem(self, matrix):
        assert matrix[1, 0] == 3.0

    def test_setitem(self, matrix):
        matrix[0, 2] = -1.0
        assert matrix.get(0, 2) == -1.0

    def test_bounds_apply(self, matrix):
        with pytest.raises(IndexOutOfBoundsError):
            matrix[2, 0]
        with pytest.raises(IndexOutOfBoundsError):
            matrix[0, -1] = 1.0

    @pytest.mark.parametrize("key", [0, (0,), (0, 0, 0), slice(None)])
    def test_requires_pair(self, matrix, key):
        with pytest.raises(TypeError, match=r"\(row, col\) pair"):
            matrix[key]


class TestShape:

    def test_properties(self):
        m = Matrix(3, 4)
        assert (m.rows, m.cols) == (3, 4)
        assert m.shape == (3, 4)

    def test_shape_is_read_only(self):
        m = Matrix(3, 4)
        with pytest.raises(AttributeError):
            m.rows = 5
