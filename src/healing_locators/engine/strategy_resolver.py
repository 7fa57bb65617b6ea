"""
Strategy Resolver - Find the first strategy in a list that locates an element.

One pass, in input order, no waiting between attempts. Every driver fault
is recorded against the strategy that caused it and the pass moves on; the
caller decides what an unresolved result means and how long to wait.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Union

from healing_locators.exceptions import StrategyFailure
from healing_locators.interfaces.driver import IDriver, IElement
from healing_locators.locators.strategy import LocatorStrategy
from healing_locators.utils.timing import Deadline, with_timeout

logger = logging.getLogger(__name__)


class AttemptSource(Enum):
    """Where a strategy in the attempt list came from."""
    CACHED = "cached"
    CANDIDATE = "candidate"
    GENERATED = "generated"


@dataclass(frozen=True)
class Candidate:
    """A strategy to try, tagged with its origin."""
    strategy: LocatorStrategy
    source: AttemptSource = AttemptSource.CANDIDATE


@dataclass
class StrategyAttempt:
    """
    Outcome of trying one strategy.

    Attributes:
        strategy: The strategy tried
        source: Whether it was cached, supplied, or generated
        fault: Why it failed (None on success)
        elapsed_ms: Time spent on the attempt
        skipped: True when the deadline expired before it could run
    """
    strategy: LocatorStrategy
    source: AttemptSource = AttemptSource.CANDIDATE
    fault: Optional[StrategyFailure] = None
    elapsed_ms: float = 0.0
    skipped: bool = False

    @property
    def succeeded(self) -> bool:
        return self.fault is None and not self.skipped


@dataclass
class LocateResult:
    """
    Result of one locate() pass.

    An unresolved result is the not-found outcome; its attempts carry the
    fault of every strategy that was tried.
    """
    element: Optional[IElement] = None
    strategy: Optional[LocatorStrategy] = None
    source: Optional[AttemptSource] = None
    attempts: List[StrategyAttempt] = field(default_factory=list)

    @property
    def is_resolved(self) -> bool:
        return self.element is not None

    @property
    def faults(self) -> List[Optional[StrategyFailure]]:
        return [a.fault for a in self.attempts]


class StrategyResolver:
    """
    Drive an IDriver through an ordered list of strategies.

    Usage:
        resolver = StrategyResolver(driver)
        result = await resolver.locate(
            [LocatorStrategy.css(".buy-btn"), LocatorStrategy.xpath("//button")],
            attempt_timeout=5.0,
        )
        if result.is_resolved:
            await result.element.click()
    """

    def __init__(self, driver: IDriver):
        self.driver = driver

    async def locate(
        self,
        strategies: Sequence[Union[LocatorStrategy, Candidate]],
        attempt_timeout: Optional[float] = None,
        deadline: Optional[Deadline] = None,
    ) -> LocateResult:
        """
        Try each strategy in order and return the first that resolves.

        Args:
            strategies: Strategies (or tagged candidates) in priority order
            attempt_timeout: Upper bound in seconds for each attempt
            deadline: Aggregate bound shared with the caller's other passes

        Returns:
            LocateResult, resolved or not. Never raises for driver faults.
        """
        deadline = deadline or Deadline.never()
        result = LocateResult()

        for item in strategies:
            candidate = item if isinstance(item, Candidate) else Candidate(item)
            strategy = candidate.strategy

            if deadline.expired:
                result.attempts.append(StrategyAttempt(
                    strategy=strategy,
                    source=candidate.source,
                    fault=StrategyFailure("Resolution deadline exceeded", strategy=strategy),
                    skipped=True,
                ))
                continue

            started = time.monotonic()
            try:
                element = await with_timeout(
                    self.driver.find_element(strategy),
                    deadline.bound(attempt_timeout),
                    error_message=f"Timed out locating {strategy}",
                )
            except asyncio.TimeoutError as e:
                fault = StrategyFailure(str(e), strategy=strategy, cause=e)
            except Exception as e:
                fault = StrategyFailure(f"{type(e).__name__}: {e}", strategy=strategy, cause=e)
            else:
                if element is None:
                    fault = StrategyFailure("Driver returned no element", strategy=strategy)
                else:
                    result.attempts.append(StrategyAttempt(
                        strategy=strategy,
                        source=candidate.source,
                        elapsed_ms=(time.monotonic() - started) * 1000,
                    ))
                    result.element = element
                    result.strategy = strategy
                    result.source = candidate.source
                    logger.debug(f"Located element with {strategy}")
                    return result

            result.attempts.append(StrategyAttempt(
                strategy=strategy,
                source=candidate.source,
                fault=fault,
                elapsed_ms=(time.monotonic() - started) * 1000,
            ))
            logger.debug(f"Strategy {strategy} failed: {fault.message}")

        return result
