"""
Functions to visualize vectors, matrices and arrays.
"""

from __future__ import annotations

from matplotlib import figure
from matplotlib import pyplot as plt

from .matrix import Matrix
from .ndarray import NDArray
from .vector import Vector

SIZE_SCALING = 2


def plot_vector(vector: Vector, ax: figure.Axes | None = None) -> figure.Figure:
    """Plot the elements of a vector against their index."""

    if ax is None:
        fig, ax = plt.subplots(
            layout="tight", figsize=(11.69 / SIZE_SCALING, 8.27 / SIZE_SCALING)
        )
    else:
        fig = ax.figure

    ax.plot(range(len(vector)), vector.to_numpy(), marker=".")
    ax.set_xlabel("Index")
    ax.set_ylabel("Value")

    return fig


def plot_matrix(matrix: Matrix, ax: figure.Axes | None = None) -> figure.Figure:
    """Plot a matrix as a heat map with a colorbar."""

    if ax is None:
        fig, ax = plt.subplots(
            layout="tight", figsize=(11.69 / SIZE_SCALING, 8.27 / SIZE_SCALING)
        )
    else:
        fig = ax.figure

    image = ax.imshow(matrix.to_numpy(), cmap=plt.cm.viridis, aspect="auto")
    fig.colorbar(image, ax=ax, orientation="vertical")
    ax.set_xlabel("Column")
    ax.set_ylabel("Row")

    return fig


def plot_ndarray(array: NDArray, ax: figure.Axes | None = None) -> figure.Figure:
    """Plot a 1D array as a line or a 2D array as a heat map."""

    match array.dim:
        case 1:
            fig = plot_vector(Vector.from_iterable(array), ax)
        case 2:
            fig = plot_matrix(array.to_matrix(), ax)
        case _:
            raise ValueError(f"Only 1D and 2D arrays can be plotted, not {array.dim}D")

    fig.suptitle(f"shape: {'x'.join(str(dim) for dim in array.shape)}")
    return fig
