"""
Errors raised by arrays, vectors and matrices.

Every error is raised before the target object is mutated, so a caller
that catches one still holds a valid object.
"""

from __future__ import annotations

from collections.abc import Sequence


class NDArrayError(ValueError):
    """Base class of all Ndcore errors."""

    #: Label of the error in the taxonomy.
    kind: str = "NDArrayError"


class RankMismatchError(NDArrayError):
    """Number of indices does not match the dimensionality of the array."""

    kind = "RankMismatch"

    def __init__(self, indices: Sequence[int], shape: Sequence[int]):
        self.indices = tuple(indices)
        self.shape = tuple(shape)
        super().__init__(
            f"Number of indices ({len(self.indices)}) does not match "
            f"dimension of NDArray ({len(self.shape)})."
        )


class IndexOutOfRangeError(NDArrayError, IndexError):
    """An index exceeds the bound of its dimension."""

    kind = "IndexOutOfRange"

    def __init__(self, indices: Sequence[int], shape: Sequence[int], axis: int):
        self.indices = tuple(indices)
        self.shape = tuple(shape)
        self.axis = axis
        super().__init__(
            f"Index {self.indices[axis]} is out of range for axis {axis} "
            f"with size {self.shape[axis]}."
        )


class ReshapeSizeMismatchError(NDArrayError):
    """Requested shape does not hold the current number of elements."""

    kind = "ReshapeSizeMismatch"

    def __init__(self, requested: Sequence[int], size: int):
        self.requested = tuple(requested)
        self.size = size
        super().__init__(
            f"Cannot reshape NDArray of {size} elements to shape {self.requested}."
        )


class ShapeMismatchError(NDArrayError):
    """Operands of an elementwise operation do not have the same shape."""

    kind = "ShapeMismatch"

    def __init__(self, left: Sequence[int], right: Sequence[int], operation: str = ""):
        self.left = tuple(left)
        self.right = tuple(right)
        self.operation = operation
        what = f"{operation}: " if operation else ""
        super().__init__(f"{what}shapes {self.left} and {self.right} do not match.")


class InvalidShapeError(NDArrayError):
    """A shape contains something other than positive integers."""

    kind = "InvalidShape"

    def __init__(self, shape: Sequence[object]):
        self.shape = tuple(shape)
        super().__init__(
            f"Shape {self.shape} must only contain positive integer dimensions."
        )
