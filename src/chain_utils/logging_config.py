"""
Logging configuration for chain_utils
"""

import logging
import sys
from typing import IO, Optional, Union

LOG_FORMAT = "%(asctime)s - %(levelname)-8s %(name)s %(filename)s:%(lineno)d %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "chain_utils"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    logger_name: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach a console handler with timestamp, file and line number information

    Args:
        level: Logging level, numeric or by name (e.g. "DEBUG")
        logger_name: Logger to configure; None configures the root logger
        stream: Output stream (default: stdout)

    Returns:
        The configured logger
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")

    target = logging.getLogger(logger_name)
    target.setLevel(level)

    # Repeated calls replace the handler instead of duplicating output
    for handler in target.handlers[:]:
        target.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    target.addHandler(handler)
    return target


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Get a logger instance (typically called with __name__)"""
    return logging.getLogger(name)
