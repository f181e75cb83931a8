"""Pytest configuration and shared fixtures."""
import matplotlib

matplotlib.use("Agg")

import pytest

from Ndcore import NDArray, config


@pytest.fixture(autouse=True)
def restore_render_options():
    """Give every test the default render options back."""
    previous = config.set_render_options()
    yield
    config.set_render_options(previous)


@pytest.fixture
def cube():
    """
    Provide the 2x3x4 integer array filled with ones.

    Returns:
        NDArray: A new array of shape (2, 3, 4).
    """
    return NDArray.filled([2, 3, 4], 1)


@pytest.fixture
def counting():
    """
    Provide a 2x3x4 array whose elements are their own linear offset.

    Returns:
        NDArray: Elements 0 to 23 in row-major order.
    """
    return NDArray.from_flat(range(24)).reshape([2, 3, 4])
