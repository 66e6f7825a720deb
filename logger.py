"""Logging configuration for flatbank.

The console is the bank's interactive screen: ordinary results are shown as
plain text and only warnings and errors carry a level prefix. The dated log
file keeps the full detail of every record for later inspection.
"""

import logging
from datetime import date
from typing import Optional
from config import Config

LOGGER_NAME = "flatbank"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ConsoleFormatter(logging.Formatter):
    """Formats records for the interactive console.

    Records below WARNING are shown as the bare message; WARNING and above
    are prefixed with their level name, e.g. ``ERROR: PIN incorrect.``.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            return f"{record.levelname}: {message}"
        return message


def log_file_path(config: Config, day: Optional[date] = None):
    """Get the path of the log file for a given day (today by default)."""
    day = day or date.today()
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Drop handlers left by an earlier call
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file_path(config), encoding="utf-8")
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(
        logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(ConsoleFormatter("%(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The flatbank logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
