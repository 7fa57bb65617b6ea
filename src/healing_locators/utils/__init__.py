"""
Utilities module - Common utility functions.
"""

from healing_locators.utils.logging import setup_logging, setup_logging_from_settings
from healing_locators.utils.timing import Deadline, with_timeout

__all__ = [
    "setup_logging",
    "setup_logging_from_settings",
    "Deadline",
    "with_timeout",
]
