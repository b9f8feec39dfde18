import sys

from loguru import logger

FORMAT = "[{level}] {message}"


def configure_logging(level: str = "DEBUG", sink=sys.stderr) -> None:
    """Sends the package's log messages to `sink`.

    The library is silent by default. This replaces loguru's handlers with a
    single one at `level` and turns the package's messages on.
    """
    logger.remove()
    logger.add(sink, format=FORMAT, level=level)
    logger.enable("intervalsets")
