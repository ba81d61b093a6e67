"""
Logging configuration.

stdout carries the MCP protocol stream, so all log output goes to stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "jj_mcp"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Route jj_mcp log records to a rich handler on stderr.

    Args:
        level: Log level name

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_jj_mcp_handler", False):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    handler._jj_mcp_handler = True
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
