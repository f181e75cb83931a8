"""
Dense matrix of floats stored as a list of row vectors.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self, overload

import numpy as np
import pandas as pd

from ._typing import Scalar
from .exceptions import ShapeMismatchError
from .vector import Vector


class Matrix:
    """A rectangular table of floats.

    Arithmetic with a `Vector` applies the vector to every row, so its size
    must equal the number of columns.

    Parameters
    ----------
    rows: int, optional (default=0)
        Number of rows.
    cols: int, optional
        Number of columns. If not given, the matrix is square.
    value: float, optional (default=0.0)
        Initial value of every element.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: int = 0, cols: int | None = None, value: Scalar = 0.0):
        if cols is None:
            cols = rows
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix size must be non-negative, not ({rows}, {cols})")
        self._rows: list[Vector] = [Vector(cols, value) for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Scalar]]) -> Self:
        """Matrix from an iterable of rows of equal length."""
        vectors = [Vector.from_iterable(row) for row in rows]
        for row in vectors[1:]:
            if len(row) != len(vectors[0]):
                raise ShapeMismatchError((len(vectors[0]),), (len(row),), "from_rows")
        obj = cls()
        obj._rows = vectors
        return obj

    @classmethod
    def from_numpy(cls, array: Any) -> Self:
        """Matrix from a two dimensional numpy array."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {array.shape}")
        return cls.from_rows(array.tolist())

    @classmethod
    def from_dataframe(cls, dataframe: pd.DataFrame) -> Self:
        """Matrix from the values of a dataframe, labels are dropped."""
        return cls.from_numpy(dataframe.to_numpy(dtype=np.float64))

    def to_numpy(self) -> np.ndarray:
        return np.asarray(
            [list(row) for row in self._rows], dtype=np.float64
        ).reshape(self.size)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a dataframe with a default integer index and columns."""
        return pd.DataFrame(self.to_numpy())

    @property
    def nrows(self) -> int:
        return len(self._rows)

    @property
    def ncols(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def size(self) -> tuple[int, int]:
        """Number of rows and columns."""
        return self.nrows, self.ncols

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._rows)

    @overload
    def __getitem__(self, key: int) -> Vector: ...

    @overload
    def __getitem__(self, key: tuple[int, int]) -> float: ...

    def __getitem__(self, key: int | tuple[int, int]) -> Vector | float:
        if isinstance(key, tuple):
            i, j = key
            return self._rows[i][j]
        return self._rows[key]

    def __setitem__(self, key: int | tuple[int, int], value: Any) -> None:
        if isinstance(key, tuple):
            i, j = key
            self._rows[i][j] = value
            return

        row = Vector.from_iterable(value)
        if len(row) != self.ncols:
            raise ShapeMismatchError((self.ncols,), (len(row),), "set row")
        self._rows[key] = row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]})"

    def copy(self) -> Self:
        return self.__class__.from_rows(self._rows)

    __copy__ = copy

    def _apply(
        self,
        other: Any,
        op: Callable[[Any, Any], Any],
        name: str,
        reflected: bool = False,
    ) -> Self:
        if isinstance(other, Matrix):
            if self.size != other.size:
                raise ShapeMismatchError(self.size, other.size, name)
            rows = [op(a, b) for a, b in zip(self._rows, other._rows)]
        elif isinstance(other, Vector):
            if len(other) != self.ncols:
                raise ShapeMismatchError(self.size, (len(other),), name)
            if reflected:
                rows = [op(other, row) for row in self._rows]
            else:
                rows = [op(row, other) for row in self._rows]
        elif isinstance(other, Iterable):
            return NotImplemented
        elif reflected:
            rows = [op(other, row) for row in self._rows]
        else:
            rows = [op(row, other) for row in self._rows]

        self._rows[:] = rows
        return self

    def __iadd__(self, other: Matrix | Vector | Scalar) -> Self:
        return self._apply(other, operator.add, "add")

    def __isub__(self, other: Matrix | Vector | Scalar) -> Self:
        return self._apply(other, operator.sub, "subtract")

    def __imul__(self, other: Matrix | Vector | Scalar) -> Self:
        return self._apply(other, operator.mul, "multiply")

    def __itruediv__(self, other: Matrix | Vector | Scalar) -> Self:
        return self._apply(other, operator.truediv, "divide")

    def __add__(self, other: Matrix | Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.add, "add")

    def __sub__(self, other: Matrix | Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.sub, "subtract")

    def __mul__(self, other: Matrix | Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.mul, "multiply")

    def __truediv__(self, other: Matrix | Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.truediv, "divide")

    def __radd__(self, other: Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.add, "add", reflected=True)

    def __rsub__(self, other: Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.sub, "subtract", reflected=True)

    def __rmul__(self, other: Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.mul, "multiply", reflected=True)

    def __rtruediv__(self, other: Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.truediv, "divide", reflected=True)

    def __neg__(self) -> Self:
        return self.__class__.from_rows(-row for row in self._rows)

    def __pos__(self) -> Self:
        return self.copy()

    @overload
    def dot(self, other: Matrix) -> Matrix: ...

    @overload
    def dot(self, other: Vector) -> Vector: ...

    def dot(self, other: Matrix | Vector) -> Matrix | Vector:
        """Matrix product with a matrix or a column vector.

        Raises
        ------
        ShapeMismatchError
            If the number of columns differs from the number of rows of
            `other` (or from the size of a vector).
        """
        if isinstance(other, Matrix):
            if self.ncols != other.nrows:
                raise ShapeMismatchError(self.size, other.size, "dot")
            return Matrix.from_rows(row.dot(other) for row in self._rows)

        if isinstance(other, Vector):
            if self.ncols != len(other):
                raise ShapeMismatchError(self.size, (len(other),), "dot")
            return Vector.from_iterable(row.dot(other) for row in self._rows)

        raise TypeError(f"Cannot compute dot product with {type(other)}")

    def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.dot(other)

    def transpose(self) -> Matrix:
        """Matrix with rows and columns swapped."""
        return Matrix.from_rows(zip(*self._rows))

    @property
    def T(self) -> Matrix:
        return self.transpose()


def dot(a: Vector | Matrix, b: Vector | Matrix) -> float | Vector | Matrix:
    """Dot product of two vectors, or matrix product involving a matrix."""
    return a.dot(b)


def transpose(m: Matrix) -> Matrix:
    return m.transpose()
