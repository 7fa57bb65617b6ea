"""
Resolution and interaction exceptions.
"""

from typing import TYPE_CHECKING, List, Optional

from healing_locators.exceptions.base import LocatorHealingError

if TYPE_CHECKING:
    from healing_locators.engine.strategy_resolver import StrategyAttempt
    from healing_locators.locators.strategy import LocatorStrategy


class StrategyFailure(LocatorHealingError):
    """
    A single strategy attempt failed.
    
    Expected and internal: it moves resolution on to the next candidate
    and is only ever seen by callers inside ElementNotFoundError.faults.
    """
    
    def __init__(
        self,
        message: str,
        strategy: Optional["LocatorStrategy"] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, {"strategy": str(strategy) if strategy else None})
        self.strategy = strategy
        self.cause = cause


class ElementNotFoundError(LocatorHealingError):
    """
    No strategy located the element.
    
    Raised once the cached strategy, every candidate and every generated
    alternative have been exhausted.
    
    Attributes:
        name: Logical element name
        attempts: Ordered attempt records, one per strategy tried
    """
    
    def __init__(self, name: str, attempts: List["StrategyAttempt"]):
        self.name = name
        self.attempts = list(attempts)
        super().__init__(
            f"Could not find element: {name}",
            {"attempted": [str(s) for s in self.attempted_strategies]},
        )
    
    @property
    def attempted_strategies(self) -> List["LocatorStrategy"]:
        """Strategies in the order they were tried."""
        return [a.strategy for a in self.attempts]
    
    @property
    def faults(self) -> List[Optional[StrategyFailure]]:
        """Underlying fault for each attempted strategy."""
        return [a.fault for a in self.attempts]
    
    @property
    def last_fault(self) -> Optional[StrategyFailure]:
        """The fault of the final attempt, if any attempt was made."""
        return self.attempts[-1].fault if self.attempts else None


class ElementActionError(LocatorHealingError):
    """
    The element was found but the driver action on it failed.
    
    Actions are not retried against other strategies because they may
    already have had side effects.
    """
    
    def __init__(
        self,
        message: str,
        name: str,
        action: str,
        strategy: Optional["LocatorStrategy"] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, {"name": name, "action": action, "strategy": str(strategy) if strategy else None})
        self.name = name
        self.action = action
        self.strategy = strategy
        self.cause = cause
