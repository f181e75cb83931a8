"""
Shape helpers shared by arrays, vectors and matrices.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable

from ._typing import Shape, ShapeLike
from .exceptions import InvalidShapeError


def as_shape(shape: ShapeLike) -> Shape:
    """Validate a shape and return it as a tuple of ints.

    Raises
    ------
    InvalidShapeError
        If an entry is not an integer or is smaller than 1.
    """
    dims = tuple(shape)
    for dim in dims:
        if (
            isinstance(dim, bool)
            or not isinstance(dim, numbers.Integral)
            or dim < 1
        ):
            raise InvalidShapeError(dims)
    return tuple(int(dim) for dim in dims)


def product(shape: Iterable[int]) -> int:
    """Number of elements held by a shape. The empty shape holds one."""
    return math.prod(shape)


def squeeze(shape: Shape) -> Shape:
    """Remove the dimensions of size 1.

    A shape made only of ones is reduced to ``(1,)`` rather than to the
    empty shape, which is reserved for empty arrays.
    """
    squeezed = tuple(dim for dim in shape if dim != 1)
    if not squeezed and shape:
        return (1,)
    return squeezed


def format_shape(shape: Iterable[int]) -> str:
    """Join dimensions with ``x``, e.g. ``2x3x4``."""
    return "x".join(str(dim) for dim in shape)
