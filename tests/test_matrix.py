"""Tests for Matrix."""
import numpy as np
import pandas as pd
import pytest

from Ndcore import Matrix, Vector, dot, transpose
from Ndcore.exceptions import ShapeMismatchError


@pytest.fixture
def square():
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def wide():
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


class TestConstruction:
    def test_square(self):
        m = Matrix(2)
        assert m.size == (2, 2)
        assert m[1, 1] == 0.0

    def test_rectangular(self):
        m = Matrix(2, 3, 1.0)
        assert m.size == (2, 3)
        assert m.nrows == 2
        assert m.ncols == 3
        assert all(x == 1.0 for row in m for x in row)

    def test_empty(self):
        assert Matrix().size == (0, 0)
        assert Matrix().to_numpy().shape == (0, 0)

    def test_ragged_rows(self):
        with pytest.raises(ShapeMismatchError):
            Matrix.from_rows([[1, 2], [3]])

    def test_from_numpy_requires_2d(self):
        with pytest.raises(ValueError):
            Matrix.from_numpy(np.zeros(3))

    def test_dataframe_round_trip(self, wide):
        df = wide.to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert df.shape == (2, 3)
        assert Matrix.from_dataframe(df) == wide


class TestItemAccess:
    def test_rows_and_elements(self, wide):
        assert wide[1] == Vector.from_iterable([4, 5, 6])
        assert wide[1, 2] == 6.0

    def test_set_element(self, wide):
        wide[0, 1] = 9
        assert wide[0][1] == 9.0

    def test_set_row(self, wide):
        wide[0] = [7, 8, 9]
        assert wide[0] == Vector.from_iterable([7, 8, 9])

    def test_set_row_wrong_length(self, wide):
        with pytest.raises(ShapeMismatchError):
            wide[0] = [1, 2]


class TestArithmetic:
    def test_matrix_operators(self, square):
        other = Matrix.from_rows([[1, 1], [2, 2]])
        assert square + other == Matrix.from_rows([[2, 3], [5, 6]])
        assert square - other == Matrix.from_rows([[0, 1], [1, 2]])
        assert square * other == Matrix.from_rows([[1, 2], [6, 8]])
        assert square / other == Matrix.from_rows([[1, 2], [1.5, 2]])

    def test_size_mismatch(self, square, wide):
        with pytest.raises(ShapeMismatchError):
            square += wide
        assert square == Matrix.from_rows([[1, 2], [3, 4]])

    def test_vector_applies_to_every_row(self, square):
        v = Vector.from_iterable([10, 20])
        assert square + v == Matrix.from_rows([[11, 22], [13, 24]])
        assert square * v == Matrix.from_rows([[10, 40], [30, 80]])
        assert square - v == Matrix.from_rows([[-9, -18], [-7, -16]])
        assert v - square == Matrix.from_rows([[9, 18], [7, 16]])
        assert v + square == square + v

    def test_vector_length_mismatch(self, wide):
        with pytest.raises(ShapeMismatchError):
            wide += Vector(2)

    def test_scalar_operators(self, square):
        assert square - 1 == Matrix.from_rows([[0, 1], [2, 3]])
        assert 1 - square == Matrix.from_rows([[0, -1], [-2, -3]])
        assert 2 * square == square + square
        assert -square == Matrix.from_rows([[-1, -2], [-3, -4]])

    def test_in_place_returns_same_object(self, square):
        original = square
        square /= 2
        assert square is original
        assert square[1, 1] == 2.0

    def test_division_by_zero_leaves_matrix_unchanged(self, square):
        with pytest.raises(ZeroDivisionError):
            square /= 0
        assert square == Matrix.from_rows([[1, 2], [3, 4]])

    def test_copy_is_independent(self, square):
        other = square.copy()
        other[0, 0] = 100
        assert square[0, 0] == 1.0


class TestProducts:
    def test_matrix_product(self, square):
        other = Matrix.from_rows([[5, 6], [7, 8]])
        expected = Matrix.from_rows([[19, 22], [43, 50]])
        assert square.dot(other) == expected
        assert square @ other == expected
        assert dot(square, other) == expected

    def test_matrix_product_of_rectangles(self, wide):
        result = wide.dot(wide.T)
        assert result == Matrix.from_rows([[14, 32], [32, 77]])

    def test_matrix_product_mismatch(self, wide):
        with pytest.raises(ShapeMismatchError):
            wide.dot(wide)

    def test_matrix_vector_product(self, wide):
        v = Vector.from_iterable([1, 1, 1])
        assert wide.dot(v) == Vector.from_iterable([6, 15])
        assert wide @ v == Vector.from_iterable([6, 15])

    def test_matrix_vector_mismatch(self, wide):
        with pytest.raises(ShapeMismatchError):
            wide.dot(Vector(2))

    def test_transpose(self, wide):
        t = wide.transpose()
        assert t.size == (3, 2)
        assert t == Matrix.from_rows([[1, 4], [2, 5], [3, 6]])
        assert transpose(wide) == t
        assert wide.T.T == wide
