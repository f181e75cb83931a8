"""
Walk through reshaping and arithmetic on a small integer array.

Run with ``python -m Ndcore``.
"""

import logging

from .log import setup_logging
from .ndarray import NDArray

logger = logging.getLogger(__name__)


def main():
    setup_logging()

    a = NDArray.filled([2, 3, 4], 1)
    a.write()

    a.reshape([2, 12])
    a.write()

    a += 1
    a.write()

    a -= NDArray.filled([2, 12], 1)
    a.write()

    logger.info("Done")


if __name__ == "__main__":
    main()
