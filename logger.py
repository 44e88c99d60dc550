"""Logging configuration for Spendwise.

Diagnostics go to a date-named file under the configured log directory. The
console handler doubles as the CLI's output channel, so it uses a bare format.
"""

import logging
from datetime import date
from pathlib import Path
from config import Config

LOGGER_NAME = "spendwise"

_DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_CONSOLE_FORMAT = "%(message)s"


def _file_handler(log_dir: Path, level: str) -> logging.Handler:
    """Create the file handler for spendwise-{date}.log."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = log_dir / f"{LOGGER_NAME}-{date.today().isoformat()}.log"

    handler = logging.FileHandler(log_file_path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_DETAILED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(config: Config, console: bool = True) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.
        console: Whether to also log to the console.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    logger.addHandler(_file_handler(config.log_dir, config.log_level))

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(config.log_level)
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The spendwise logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
