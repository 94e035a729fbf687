"""Logging utilities for the People Data Labs MCP server."""

import logging
import sys

_LOGGER_NAME = "pdlmcp"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance for the package.

    Args:
        name: Optional sub-logger name. If None, returns the package logger.
    """
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def setup_logging(level: int | str = logging.INFO, format_str: str = LOG_FORMAT) -> None:
    """Attach a stderr handler to the package logger.

    stdout belongs to the stdio transport, so log records must never go there.

    Args:
        level: Logging level, either numeric or a name such as "DEBUG".
        format_str: Log format string.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    # Avoid adding multiple handlers if called multiple times
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_str))
    logger.addHandler(handler)


# Set default NullHandler to avoid "No handler found" warnings
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
