"""
Design (logging.py)
- Purpose: One place that installs the loguru sink; modules only ask for a bound logger.
- Side effects: configure_logging() replaces every loguru handler.
"""

import sys

from loguru import logger

from .config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = None) -> None:
    """Install the stderr sink at `level` (default: get_config().log_level).

    The sink looks up sys.stderr on every message, so a swapped stream (pytest capture,
    redirection inside the process) still receives diagnostics.
    """
    logger.remove()
    logger.add(
        sink=lambda msg: print(msg, end="", file=sys.stderr),
        level=(level or get_config().log_level).upper(),
        format=LOG_FORMAT,
    )


def get_logger(name: str = None):
    """Get the application logger, bound to `name` when given. Leaves sinks alone."""
    if name:
        return logger.bind(name=name)
    return logger
