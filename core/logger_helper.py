"""
logger_helper.py - Logging Helpers

Modules log through logging.getLogger(__name__); only the entry point
configures handlers.
"""

import logging
from typing import Optional

LOG_FORMAT = "[%(levelname)s] %(message)s"

# Console handler installed by configure_logging
_console_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Returns a logger with the given name, or the package logger if None

    Args:
        name: Optional logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or "core")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure console logging for the command line

    Args:
        verbose: DEBUG when True, WARNING otherwise

    Returns:
        Root logger
    """
    global _console_handler

    root = logging.getLogger()
    level = logging.DEBUG if verbose else logging.WARNING
    root.setLevel(level)

    if _console_handler is None:
        _console_handler = logging.StreamHandler()
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _console_handler not in root.handlers:
        root.addHandler(_console_handler)
    _console_handler.setLevel(level)

    return root
