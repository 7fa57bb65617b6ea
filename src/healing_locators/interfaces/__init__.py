"""
Interfaces module - Abstract base classes for pluggable drivers.
"""

from healing_locators.interfaces.driver import IDriver, IElement

__all__ = [
    "IDriver",
    "IElement",
]
