"""
Logging setup for the callcache command line.

Library modules only create named loggers; handlers are attached here, once,
by the application entry point.
"""

import logging

from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure the root logger to render through Rich.

    Args:
        level: Level name such as "DEBUG" or "info" (case-insensitive).
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
