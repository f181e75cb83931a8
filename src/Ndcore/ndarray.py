"""
Generic multi-dimensional array stored as a flat row-major sequence.

The array owns a list of elements and a shape. The last dimension varies
fastest, so the element at indices ``(i0, ..., in)`` lives at offset
``((i0 * d1 + i1) * d2 + i2) ...``.

Dimensions of size 1 are squeezed out whenever a shape is committed.
"""

from __future__ import annotations

import copy
import logging
import numbers
import operator
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self, TextIO

import numpy as np

from . import config
from ._typing import Index, Shape, ShapeLike
from .exceptions import (
    IndexOutOfRangeError,
    NDArrayError,
    RankMismatchError,
    ReshapeSizeMismatchError,
    ShapeMismatchError,
)
from .matrix import Matrix
from .util import as_shape, format_shape, product, squeeze

logger = logging.getLogger(__name__)


class NDArray[T]:
    """Multi-dimensional array of elements of type T.

    An array is either empty (no elements, shape ``()``) or shaped
    (a non-empty shape whose product is the number of elements).

    Elementwise operations between two arrays require identical shapes;
    there is no broadcasting. Compound operators (``+=``, ...) modify the
    array in place, binary operators (``+``, ...) work on a copy.

    Examples
    --------
    >>> a = NDArray.filled([2, 3, 4], 1)
    >>> a[1, 2, 3]
    1
    >>> a.reshape([2, 12]).shape
    (2, 12)
    """

    __slots__ = ("_data", "_shape")

    def __init__(self) -> None:
        self._data: list[T] = []
        self._shape: Shape = ()

    # Construction

    @classmethod
    def filled(cls, shape: ShapeLike, value: Any = 0) -> Self:
        """Array of the given shape with every element equal to `value`.

        Parameters
        ----------
        shape: sequence of int
            Positive dimension sizes. Sizes equal to 1 are squeezed out.
            An empty shape gives an empty array.
        value: T, optional (default=0)
            Fill value.
        """
        dims = as_shape(shape)
        obj = cls()
        if not dims:
            return obj

        obj._data = [copy.deepcopy(value) for _ in range(product(dims))]
        obj.reshape(dims)
        logger.debug("Created NDArray of shape %s", format_shape(obj._shape))
        return obj

    @classmethod
    def from_flat(cls, data: Iterable[T]) -> Self:
        """One dimensional array holding a copy of `data`."""
        obj = cls()
        obj._data = [copy.deepcopy(x) for x in data]
        if obj._data:
            obj._shape = (len(obj._data),)
        return obj

    @classmethod
    def from_numpy(cls, array: Any) -> Self:
        """Array with the elements and shape of a numpy array.

        Elements are converted to Python scalars and read in C order.
        """
        array = np.asarray(array)
        obj = cls.from_flat(array.ravel(order="C").tolist())
        if obj._data and array.ndim > 1:
            obj.reshape(array.shape)
        return obj

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Self:
        """Two dimensional array holding the values of `matrix`."""
        obj = cls.from_flat(value for row in matrix for value in row)
        if obj._data:
            obj.reshape(matrix.size)
        return obj

    def to_numpy(self) -> np.ndarray:
        """Numpy array with the same shape and elements."""
        if not self._shape:
            return np.asarray(self._data)
        return np.asarray(self._data).reshape(self._shape)

    def to_matrix(self) -> Matrix:
        """Matrix holding a 2D array, or a single row for a 1D array."""
        match self.dim:
            case 0:
                return Matrix()
            case 1:
                return Matrix.from_rows([self._data])
            case 2:
                rows, cols = self._shape
                return Matrix.from_rows(
                    self._data[i * cols : (i + 1) * cols] for i in range(rows)
                )
            case _:
                raise NDArrayError(
                    f"Only 1D and 2D arrays can be converted to a Matrix, not {self.dim}D."
                )

    # Indexing

    def _offset(self, indices: Index | int) -> int:
        if isinstance(indices, numbers.Integral):
            indices = (indices,)
        indices = tuple(operator.index(index) for index in indices)

        if len(indices) != len(self._shape):
            raise RankMismatchError(indices, self._shape)

        offset = 0
        for axis, (index, dim) in enumerate(zip(indices, self._shape)):
            if not 0 <= index < dim:
                raise IndexOutOfRangeError(indices, self._shape, axis)
            offset = offset * dim + index
        return offset

    def get(self, indices: Index) -> T:
        """Element at the given per-dimension indices."""
        return self._data[self._offset(indices)]

    def set(self, indices: Index, value: T) -> None:
        """Replace the element at the given per-dimension indices."""
        self._data[self._offset(indices)] = value

    def __getitem__(self, indices: Index | int) -> T:
        return self._data[self._offset(indices)]

    def __setitem__(self, indices: Index | int, value: T) -> None:
        self._data[self._offset(indices)] = value

    # Shape

    def reshape(self, shape: ShapeLike) -> Self:
        """Reinterpret the elements under a new shape.

        Dimensions of size 1 are removed before validation. The elements
        are never reordered.

        Raises
        ------
        ReshapeSizeMismatchError
            If the new shape does not hold exactly `size` elements.
            The array is left unchanged.
        """
        requested = as_shape(shape)
        dims = squeeze(requested)
        if product(dims) != len(self._data):
            raise ReshapeSizeMismatchError(requested, len(self._data))

        logger.debug(
            "Reshape NDArray from %s to %s",
            format_shape(self._shape) or "()",
            format_shape(dims),
        )
        self._shape = dims
        return self

    def clear(self) -> None:
        """Discard elements and shape."""
        logger.debug("Clear NDArray of shape %s", format_shape(self._shape) or "()")
        self._data = []
        self._shape = ()

    @property
    def dim(self) -> int:
        """Number of dimensions."""
        return len(self._shape)

    @property
    def size(self) -> int:
        """Number of elements."""
        return len(self._data)

    @property
    def shape(self) -> Shape:
        return self._shape

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def copy(self) -> Self:
        """Deep copy of elements and shape."""
        obj = self.__class__()
        obj._data = copy.deepcopy(self._data)
        obj._shape = self._shape
        return obj

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NDArray):
            return NotImplemented
        return self._shape == other._shape and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    # numpy defers to the reflected operators below.
    __array_ufunc__ = None

    # Arithmetic

    def _apply(
        self,
        other: Any,
        op: Callable[[Any, Any], Any],
        name: str,
        reflected: bool = False,
    ) -> Self:
        if isinstance(other, NDArray):
            if self._shape != other._shape:
                raise ShapeMismatchError(self._shape, other._shape, name)
            data = [op(x, y) for x, y in zip(self._data, other._data)]
        elif isinstance(other, np.ndarray):
            return NotImplemented
        elif reflected:
            data = [op(other, x) for x in self._data]
        else:
            data = [op(x, other) for x in self._data]

        # Commit only once every element is computed.
        self._data[:] = data
        return self

    def __iadd__(self, other: NDArray[T] | T) -> Self:
        return self._apply(other, operator.add, "add")

    def __isub__(self, other: NDArray[T] | T) -> Self:
        return self._apply(other, operator.sub, "subtract")

    def __imul__(self, other: NDArray[T] | T) -> Self:
        return self._apply(other, operator.mul, "multiply")

    def __itruediv__(self, other: NDArray[T] | T) -> Self:
        return self._apply(other, operator.truediv, "divide")

    def __add__(self, other: NDArray[T] | T) -> Self:
        return self.copy()._apply(other, operator.add, "add")

    def __sub__(self, other: NDArray[T] | T) -> Self:
        return self.copy()._apply(other, operator.sub, "subtract")

    def __mul__(self, other: NDArray[T] | T) -> Self:
        return self.copy()._apply(other, operator.mul, "multiply")

    def __truediv__(self, other: NDArray[T] | T) -> Self:
        return self.copy()._apply(other, operator.truediv, "divide")

    def __radd__(self, other: T) -> Self:
        return self.copy()._apply(other, operator.add, "add", reflected=True)

    def __rsub__(self, other: T) -> Self:
        return self.copy()._apply(other, operator.sub, "subtract", reflected=True)

    def __rmul__(self, other: T) -> Self:
        return self.copy()._apply(other, operator.mul, "multiply", reflected=True)

    def __rtruediv__(self, other: T) -> Self:
        return self.copy()._apply(other, operator.truediv, "divide", reflected=True)

    def __neg__(self) -> Self:
        obj = self.copy()
        obj._data[:] = [-x for x in obj._data]
        return obj

    def __pos__(self) -> Self:
        return self.copy()

    # Rendering

    def __str__(self) -> str:
        options = config.get_render_options()

        header = (
            f"NDArray({self.dim}D, {self.size} elements, "
            f"shape: {format_shape(self._shape)})"
        )

        edge = options.edgeitems
        if (
            options.threshold is not None
            and self.size > options.threshold
            and self.size > 2 * edge
        ):
            items = (
                [str(x) for x in self._data[:edge]]
                + ["..."]
                + [str(x) for x in self._data[-edge:]]
            )
        else:
            items = [str(x) for x in self._data]

        return header + "\n" + options.separator.join(items)

    __repr__ = __str__

    def write(self, stream: TextIO | None = None) -> None:
        """Write the rendered array followed by a newline to `stream`.

        Parameters
        ----------
        stream: text file, optional
            Defaults to ``sys.stdout``.
        """
        if stream is None:
            stream = sys.stdout
        stream.write(str(self))
        stream.write("\n")
