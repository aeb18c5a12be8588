import os
import sys

from loguru import logger

DEFAULT_LEVEL = os.environ.get("INFSET_LOG_LEVEL", "DEBUG")

# a library stays quiet until the host asks for it
logger.disable("infset")


def enable_logging(level: str | int = DEFAULT_LEVEL, sink=sys.stderr) -> int:
    """Turn on the package's loguru output and return the handler id."""
    logger.enable("infset")
    return logger.add(
        sink,
        level=level,
        format="[{level}] {message}",
        filter="infset",
    )


def disable_logging(handler_id: int | None = None) -> None:
    if handler_id is not None:
        logger.remove(handler_id)
    logger.disable("infset")
