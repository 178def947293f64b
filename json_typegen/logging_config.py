"""
Logging configuration and utilities.

All package loggers live under the ``json_typegen`` namespace. The library
itself never installs handlers; the command line front-end calls
``setup_logging`` once at startup.
"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMESPACE = "json_typegen"
LOG_LEVEL_ENV = "JSON_TYPEGEN_LOG_LEVEL"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the json_typegen package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # Diagnostics go to stderr; stdout carries generated code
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance inside the package namespace
    """
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
