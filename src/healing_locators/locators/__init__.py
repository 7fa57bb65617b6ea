"""
Locators module - strategies, the persisted store and alternative generation.
"""

from healing_locators.locators.strategy import LocatorKind, LocatorStrategy
from healing_locators.locators.store import LocatorStore
from healing_locators.locators.alternatives import AlternativeGenerator, generate_alternatives
from healing_locators.locators.validation import is_well_formed

__all__ = [
    "LocatorKind",
    "LocatorStrategy",
    "LocatorStore",
    "AlternativeGenerator",
    "generate_alternatives",
    "is_well_formed",
]
