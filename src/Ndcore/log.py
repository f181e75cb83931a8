import logging
import sys


def setup_logging(level: int = logging.INFO):
    """
    Configure the root logger for command line use.

    Records are formatted as "timestamp - logger name - level - message" and written to stdout.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
