"""
Exceptions module - Custom exception hierarchy.

This module defines all custom exceptions used throughout healing-locators.
Only ElementNotFoundError and ElementActionError reach callers of the
resolver; the others are raised at construction time or handled internally.
"""

from healing_locators.exceptions.base import (
    LocatorHealingError,
    ConfigurationError,
    InvalidStrategyError,
)
from healing_locators.exceptions.store import StoreIOError
from healing_locators.exceptions.locator import (
    StrategyFailure,
    ElementNotFoundError,
    ElementActionError,
)

__all__ = [
    # Base exceptions
    "LocatorHealingError",
    "ConfigurationError",
    "InvalidStrategyError",
    # Store exceptions
    "StoreIOError",
    # Resolution exceptions
    "StrategyFailure",
    "ElementNotFoundError",
    "ElementActionError",
]
