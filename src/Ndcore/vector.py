"""
Dense vector of floats.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Self, overload

import numpy as np

from ._typing import Scalar
from .exceptions import ShapeMismatchError

if TYPE_CHECKING:
    from .matrix import Matrix


class Vector:
    """A sequence of floats with elementwise arithmetic.

    ``*`` between two vectors is the elementwise product, use `dot` for
    the inner product.

    Parameters
    ----------
    n: int, optional (default=0)
        Number of elements.
    value: float, optional (default=0.0)
        Initial value of every element.
    """

    __slots__ = ("_values",)

    def __init__(self, n: int = 0, value: Scalar = 0.0):
        if n < 0:
            raise ValueError(f"Vector size must be non-negative, not {n}")
        self._values: list[float] = [float(value)] * n

    @classmethod
    def from_iterable(cls, values: Iterable[Scalar]) -> Self:
        obj = cls()
        obj._values = [float(v) for v in values]
        return obj

    @classmethod
    def from_numpy(cls, array: Any) -> Self:
        """Vector from a one dimensional numpy array."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 1:
            raise ValueError(f"Expected a 1D array, got shape {array.shape}")
        return cls.from_iterable(array.tolist())

    def to_numpy(self) -> np.ndarray:
        return np.asarray(self._values, dtype=np.float64)

    @property
    def size(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, i: int) -> float:
        return self._values[i]

    def __setitem__(self, i: int, value: Scalar) -> None:
        self._values[i] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._values})"

    def copy(self) -> Self:
        return self.__class__.from_iterable(self._values)

    __copy__ = copy

    def _check_same_size(self, other: Vector, operation: str) -> None:
        if len(self) != len(other):
            raise ShapeMismatchError((len(self),), (len(other),), operation)

    def _apply(
        self,
        other: Any,
        op: Callable[[float, float], float],
        name: str,
        reflected: bool = False,
    ) -> Self:
        if isinstance(other, Vector):
            self._check_same_size(other, name)
            values = [op(x, y) for x, y in zip(self._values, other._values)]
        elif isinstance(other, Iterable):
            # Matrix operands are handled by the reflected Matrix operator.
            return NotImplemented
        elif reflected:
            values = [op(other, x) for x in self._values]
        else:
            values = [op(x, other) for x in self._values]

        self._values[:] = values
        return self

    def _reject_matrix(self, other: Any, name: str) -> None:
        from .matrix import Matrix

        if isinstance(other, Matrix):
            raise TypeError(f"Cannot {name} a Matrix into a Vector in place")

    def __iadd__(self, other: Vector | Scalar) -> Self:
        self._reject_matrix(other, "add")
        return self._apply(other, operator.add, "add")

    def __isub__(self, other: Vector | Scalar) -> Self:
        self._reject_matrix(other, "subtract")
        return self._apply(other, operator.sub, "subtract")

    def __imul__(self, other: Vector | Scalar) -> Self:
        self._reject_matrix(other, "multiply")
        return self._apply(other, operator.mul, "multiply")

    def __itruediv__(self, other: Vector | Scalar) -> Self:
        self._reject_matrix(other, "divide")
        return self._apply(other, operator.truediv, "divide")

    def __add__(self, other: Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.add, "add")

    def __sub__(self, other: Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.sub, "subtract")

    def __mul__(self, other: Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.mul, "multiply")

    def __truediv__(self, other: Vector | Scalar) -> Self:
        return self.copy()._apply(other, operator.truediv, "divide")

    def __radd__(self, other: Scalar) -> Self:
        return self.copy()._apply(other, operator.add, "add", reflected=True)

    def __rsub__(self, other: Scalar) -> Self:
        return self.copy()._apply(other, operator.sub, "subtract", reflected=True)

    def __rmul__(self, other: Scalar) -> Self:
        return self.copy()._apply(other, operator.mul, "multiply", reflected=True)

    def __rtruediv__(self, other: Scalar) -> Self:
        return self.copy()._apply(other, operator.truediv, "divide", reflected=True)

    def __neg__(self) -> Self:
        return self.__class__.from_iterable(-x for x in self._values)

    def __pos__(self) -> Self:
        return self.copy()

    @overload
    def dot(self, other: Vector) -> float: ...

    @overload
    def dot(self, other: Matrix) -> Vector: ...

    def dot(self, other: Vector | Matrix) -> float | Vector:
        """Inner product with a vector, or row vector times matrix.

        Raises
        ------
        ShapeMismatchError
            If `other` is a vector of another size, or a matrix whose number
            of rows differs from the size of this vector.
        """
        from .matrix import Matrix

        if isinstance(other, Matrix):
            if len(self) != other.nrows:
                raise ShapeMismatchError((len(self),), other.size, "dot")
            return Vector.from_iterable(
                sum((x * row[j] for x, row in zip(self._values, other)), 0.0)
                for j in range(other.ncols)
            )

        if not isinstance(other, Vector):
            raise TypeError(f"Cannot compute dot product with {type(other)}")

        self._check_same_size(other, "dot")
        return sum((x * y for x, y in zip(self._values, other._values)), 0.0)

    def __matmul__(self, other: Vector | Matrix) -> float | Vector:
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.dot(other)
