"""Logging utilities for the LM Studio MCP server."""

import logging
import sys
from typing import IO, Optional, Union

_LOGGER_NAME = "lmstudio_mcp"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance for the package.

    Args:
        name: Optional sub-logger name. If None, returns the root package logger.

    Returns:
        The requested logger.
    """
    if name:
        if name == _LOGGER_NAME or name.startswith(f"{_LOGGER_NAME}."):
            return logging.getLogger(name)
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_str: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream: Optional[IO[str]] = None,
) -> None:
    """Setup default logging configuration for the server process.

    This adds a StreamHandler writing to stderr to the package's root logger.
    Stdout carries the MCP protocol, so diagnostics must never be written there.

    Args:
        level: Logging level (number or name such as "DEBUG").
        format_str: Log format string.
        stream: Target stream. Defaults to ``sys.stderr``.
    """
    logger = logging.getLogger(_LOGGER_NAME)

    # Avoid adding multiple handlers if called multiple times
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    formatter = logging.Formatter(format_str)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)


# Set default NullHandler to avoid "No handler found" warnings
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
