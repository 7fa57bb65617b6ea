"""
Logging setup for healing-locators.

Only the library's own logger ("healing_locators") is configured, so test
suites that already set up logging keep their root handlers. Attempts log
at DEBUG, healing and learning at INFO, store problems at WARNING.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from healing_locators.config.settings import LoggingSettings

LOGGER_NAME = "healing_locators"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the healing_locators logger.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        json_format: Write one JSON object per line to the log file
        fmt: Format string for the log file when json_format is off
        
    Returns:
        The configured logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)
    
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(JSON_FORMAT if json_format else fmt))
        logger.addHandler(file_handler)
    
    return logger


def setup_logging_from_settings(settings: LoggingSettings) -> logging.Logger:
    """Configure logging from a LoggingSettings block."""
    return setup_logging(
        level=settings.level,
        log_file=settings.file,
        json_format=settings.json_format,
        fmt=settings.format,
    )
