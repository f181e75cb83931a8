"""
Module-wide options controlling how arrays are rendered.
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
import tomllib
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class RenderOptions:
    """Options used by ``str(NDArray)``.

    Parameters
    ----------
    threshold: int or None
        Above this number of elements, only ``edgeitems`` elements are shown
        at each end of the body with ``...`` in between.
        None renders every element.
    edgeitems: int
        Number of elements kept at each end of an abbreviated body.
    separator: str
        Text placed between two rendered elements.
    """

    threshold: int | None = None
    edgeitems: int = 3
    separator: str = " "

    def __post_init__(self):
        if self.threshold is not None and self.threshold < 0:
            raise ValueError(f"threshold must be non-negative or None, not {self.threshold}")
        if self.edgeitems < 1:
            raise ValueError(f"edgeitems must be at least 1, not {self.edgeitems}")

    @classmethod
    def load(cls, config_path: str | os.PathLike[str]) -> "RenderOptions":
        """
        Load render options from a TOML file.

        Parameters
        ----------
        config_path : str or path object
            Filesystem path to a TOML file containing a "render" table.

        Returns
        -------
        RenderOptions
            Instance populated from the "render" table; missing keys keep
            their defaults.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        render_data = data.get("render", {})
        return cls(**render_data)


_options = RenderOptions()


def get_render_options() -> RenderOptions:
    return _options


def set_render_options(options: RenderOptions | None = None, **changes: Any) -> RenderOptions:
    """Replace the module-wide render options.

    Either a full ``RenderOptions`` is given, or keyword changes applied to
    the current options. Returns the previous options.
    """
    global _options

    previous = _options
    base = options if options is not None else _options
    _options = dataclasses.replace(base, **changes)
    return previous


@contextlib.contextmanager
def render_options(**changes: Any) -> Iterator[RenderOptions]:
    """Temporarily change the render options."""
    previous = set_render_options(**changes)
    try:
        yield _options
    finally:
        set_render_options(previous)
