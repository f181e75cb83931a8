"""
Ndcore
~~~~~~

Multi-dimensional arrays with flat row-major storage, plus dense
vectors and matrices.


"""

import logging

from . import config, io, visualization
from .exceptions import (
    IndexOutOfRangeError,
    InvalidShapeError,
    NDArrayError,
    RankMismatchError,
    ReshapeSizeMismatchError,
    ShapeMismatchError,
)
from .matrix import Matrix, dot, transpose
from .ndarray import NDArray
from .vector import Vector

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "config",
    "io",
    "visualization",
    "NDArray",
    "Vector",
    "Matrix",
    "dot",
    "transpose",
    "NDArrayError",
    "RankMismatchError",
    "IndexOutOfRangeError",
    "ReshapeSizeMismatchError",
    "ShapeMismatchError",
    "InvalidShapeError",
]
