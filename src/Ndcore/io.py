"""
Functions to read and write arrays and matrices.
"""

from __future__ import annotations

import logging
import pathlib

import numpy as np
import pandas as pd

from .matrix import Matrix
from .ndarray import NDArray

logger = logging.getLogger(__name__)


def save_npy(array: NDArray, path: pathlib.Path | str):
    """Write an array to a numpy ``.npy`` file.

    Parameters
    ----------
    array: NDArray
        Array to write. Its elements must be convertible to a numpy dtype
        other than object.
    path: str, or path object
        Destination file. numpy appends ``.npy`` if the suffix is missing.

    See Also
    --------
    load_npy: Read an array from a ``.npy`` file.
    """
    logger.debug("Saving NDArray of shape %s to %s", array.shape, path)
    np.save(path, array.to_numpy(), allow_pickle=False)


def load_npy(path: pathlib.Path | str) -> NDArray:
    """Read an array from a numpy ``.npy`` file.

    Dimensions of size 1 found in the file are squeezed out.

    Parameters
    ----------
    path: str, or path object

    Returns
    -------
    NDArray
        An array with the elements and shape stored in the file.

    See Also
    --------
    save_npy: Write an array to a ``.npy`` file.
    """
    logger.debug("Loading NDArray from %s", path)
    return NDArray.from_numpy(np.load(path, allow_pickle=False))


def read_csv(path: pathlib.Path | str) -> Matrix:
    """Read a matrix from a csv file without header nor index column.

    Parameters
    ----------
    path: str, or path object
        Any valid string path is acceptable.

    Returns
    -------
    Matrix
        A Matrix with one row per line of the file.

    See Also
    --------
    write_csv: Write a matrix to a csv file.
    """
    logger.debug("Reading Matrix from %s", path)
    df = pd.read_csv(path, header=None)
    return Matrix.from_dataframe(df)


def write_csv(matrix: Matrix, path: pathlib.Path | str):
    """Write a matrix to a csv file without header nor index column.

    See Also
    --------
    read_csv: Read a matrix from a csv file.
    """
    logger.debug("Writing Matrix of size %s to %s", matrix.size, path)
    matrix.to_dataframe().to_csv(path, header=False, index=False)
