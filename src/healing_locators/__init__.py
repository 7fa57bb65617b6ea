"""
healing-locators - Self-healing element locator resolution for browser tests.

Elements are looked up by a logical name and an ordered list of locator
strategies. The strategy that worked last is remembered in a JSON store and
tried first next time; when it stops working the resolver falls back through
the candidates (and alternatives generated from them) and records whichever
strategy succeeds.

Example:
    >>> from healing_locators import LocatorStore, LocatorStrategy, SelfHealingResolver
    >>> store = LocatorStore("config/element-locators.json")
    >>> resolver = SelfHealingResolver(driver, store)
    >>> await resolver.click("addToCartButton", [
    ...     LocatorStrategy.css(".buy-btn"),
    ...     LocatorStrategy.xpath("//button[contains(text(),'Add')]"),
    ... ])
"""

__version__ = "0.1.0"
__author__ = "Suhaib Bin Younis"

# Public API exports
from healing_locators.config.settings import Settings
from healing_locators.locators import (
    LocatorKind,
    LocatorStrategy,
    LocatorStore,
    AlternativeGenerator,
    generate_alternatives,
)
from healing_locators.engine import (
    StrategyResolver,
    SelfHealingResolver,
    create_resolver,
)
from healing_locators.exceptions import ElementNotFoundError, ElementActionError

__all__ = [
    "Settings",
    "LocatorKind",
    "LocatorStrategy",
    "LocatorStore",
    "AlternativeGenerator",
    "generate_alternatives",
    "StrategyResolver",
    "SelfHealingResolver",
    "create_resolver",
    "ElementNotFoundError",
    "ElementActionError",
    "__version__",
]
