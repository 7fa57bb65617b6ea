"""
Self-Healing Resolver - Locate elements by name, learning which strategy works.

Each resolve() call moves through these states:

    CACHE_LOOKUP -> CACHE_TRY   (the store has an entry for the name)
    CACHE_LOOKUP -> FALLBACK    (no entry)
    CACHE_TRY    -> SUCCESS     (cached strategy still works, no write)
    CACHE_TRY    -> FALLBACK    (cached strategy is stale)
    FALLBACK     -> SUCCESS     (a candidate worked, store updated)
    FALLBACK     -> FAILED      (everything exhausted)

Example:
    store = LocatorStore("config/element-locators.json")
    resolver = SelfHealingResolver(driver, store)

    await resolver.click("addToCartButton", [
        LocatorStrategy.css(".buy-btn"),
        LocatorStrategy.xpath("//button[contains(text(),'Add')]"),
    ])
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Sequence

from healing_locators.config import ResolverSettings, Settings, get_settings
from healing_locators.exceptions import ElementActionError, ElementNotFoundError
from healing_locators.interfaces.driver import IDriver, IElement
from healing_locators.locators.alternatives import AlternativeGenerator
from healing_locators.locators.store import LocatorStore
from healing_locators.locators.strategy import LocatorStrategy
from healing_locators.locators.validation import is_well_formed
from healing_locators.engine.strategy_resolver import (
    AttemptSource,
    Candidate,
    StrategyAttempt,
    StrategyResolver,
)
from healing_locators.utils.timing import Deadline

logger = logging.getLogger(__name__)


class ResolutionState(Enum):
    """States of a single resolve() call."""
    CACHE_LOOKUP = "cache_lookup"
    CACHE_TRY = "cache_try"
    FALLBACK = "fallback"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class Resolution:
    """
    Detailed outcome of a successful resolve.

    Attributes:
        element: The located element
        strategy: Strategy that located it
        healed: True when a stale cached strategy was replaced
        learned: True when the store was written
        states: States visited, ending in SUCCESS
        attempts: Every attempt made, in order
    """
    element: IElement
    strategy: LocatorStrategy
    healed: bool = False
    learned: bool = False
    states: List[ResolutionState] = field(default_factory=list)
    attempts: List[StrategyAttempt] = field(default_factory=list)

    @property
    def from_cache(self) -> bool:
        return ResolutionState.CACHE_TRY in self.states and not self.learned


class SelfHealingResolver:
    """
    Resolve named elements through a cached strategy and ordered fallbacks.

    The store is injected so that one store, loaded once per session, can
    be shared by several resolvers (for example one per driver session).
    """

    def __init__(
        self,
        driver: IDriver,
        store: LocatorStore,
        settings: Optional[ResolverSettings] = None,
        generator: Optional[AlternativeGenerator] = None,
    ):
        self.driver = driver
        self.store = store
        self.settings = settings or ResolverSettings()
        self.generator = generator or AlternativeGenerator()
        self._resolver = StrategyResolver(driver)

    async def resolve(
        self,
        name: str,
        candidates: Sequence[LocatorStrategy],
        expand: Optional[bool] = None,
    ) -> IElement:
        """
        Locate the element registered under `name`.

        Args:
            name: Logical element name
            candidates: Strategies to fall back to, in priority order
            expand: Expand candidates with generated alternatives
                (defaults to settings.expand_alternatives)

        Returns:
            The located element

        Raises:
            ElementNotFoundError: If no strategy located the element
        """
        resolution = await self.resolve_with_details(name, candidates, expand=expand)
        return resolution.element

    async def resolve_with_details(
        self,
        name: str,
        candidates: Sequence[LocatorStrategy],
        expand: Optional[bool] = None,
    ) -> Resolution:
        """Same as resolve() but returns the full Resolution trace."""
        deadline = Deadline.after(self.settings.resolve_timeout)
        attempt_timeout = self.settings.attempt_timeout
        states = [ResolutionState.CACHE_LOOKUP]
        attempts: List[StrategyAttempt] = []

        cached = self.store.get(name)
        if cached is not None:
            states.append(ResolutionState.CACHE_TRY)
            result = await self._resolver.locate(
                [Candidate(cached, AttemptSource.CACHED)],
                attempt_timeout=attempt_timeout,
                deadline=deadline,
            )
            attempts.extend(result.attempts)
            if result.is_resolved:
                states.append(ResolutionState.SUCCESS)
                return Resolution(
                    element=result.element,
                    strategy=cached,
                    states=states,
                    attempts=attempts,
                )
            logger.info(f"Saved locator for {name} failed ({cached}), trying alternatives")

        states.append(ResolutionState.FALLBACK)
        fallback = self._expand(candidates, expand, exclude=cached)
        result = await self._resolver.locate(
            fallback,
            attempt_timeout=attempt_timeout,
            deadline=deadline,
        )
        attempts.extend(result.attempts)

        if not result.is_resolved:
            states.append(ResolutionState.FAILED)
            logger.debug(f"Could not find {name} after {len(attempts)} attempts")
            raise ElementNotFoundError(name, attempts)

        self.store.put(name, result.strategy)
        if cached is not None:
            logger.info(f"Healed locator for {name}: {cached} -> {result.strategy}")
        else:
            logger.info(f"Learned locator for {name}: {result.strategy}")

        states.append(ResolutionState.SUCCESS)
        return Resolution(
            element=result.element,
            strategy=result.strategy,
            healed=cached is not None,
            learned=True,
            states=states,
            attempts=attempts,
        )

    async def click(self, name: str, candidates: Sequence[LocatorStrategy]) -> None:
        """Resolve the element and click it."""
        await self._act(name, candidates, "click", lambda element: element.click())

    async def send_keys(self, name: str, candidates: Sequence[LocatorStrategy], text: str) -> None:
        """Resolve the element and type text into it."""
        await self._act(name, candidates, "send_keys", lambda element: element.send_keys(text))

    async def get_text(self, name: str, candidates: Sequence[LocatorStrategy]) -> str:
        """Resolve the element and return its text."""
        return await self._act(name, candidates, "get_text", lambda element: element.get_text())

    async def exists(self, name: str, candidates: Sequence[LocatorStrategy]) -> bool:
        """
        Check whether the element can be located.

        Returns:
            True if any strategy located it, False otherwise
        """
        try:
            await self.resolve(name, candidates)
            return True
        except ElementNotFoundError:
            return False

    async def _act(
        self,
        name: str,
        candidates: Sequence[LocatorStrategy],
        action: str,
        perform: Callable[[IElement], Awaitable[Any]],
    ) -> Any:
        resolution = await self.resolve_with_details(name, candidates)
        try:
            return await perform(resolution.element)
        except Exception as e:
            raise ElementActionError(
                f"{action} failed on {name}: {e}",
                name=name,
                action=action,
                strategy=resolution.strategy,
                cause=e,
            ) from e

    def _expand(
        self,
        candidates: Sequence[LocatorStrategy],
        expand: Optional[bool],
        exclude: Optional[LocatorStrategy] = None,
    ) -> List[Candidate]:
        """Build the ordered, de-duplicated fallback list."""
        if expand is None:
            expand = self.settings.expand_alternatives

        seen = {exclude} if exclude is not None else set()
        fallback: List[Candidate] = []

        for primary in candidates:
            if expand:
                generated = self.generator.generate(primary)
            else:
                generated = [primary]

            for strategy in generated:
                if strategy in seen:
                    continue
                is_primary = strategy == primary
                if (
                    not is_primary
                    and self.settings.validate_alternatives
                    and not is_well_formed(strategy)
                ):
                    logger.debug(f"Skipping malformed alternative {strategy}")
                    continue
                seen.add(strategy)
                source = AttemptSource.CANDIDATE if is_primary else AttemptSource.GENERATED
                fallback.append(Candidate(strategy, source))

        return fallback


def create_resolver(
    driver: IDriver,
    settings: Optional[Settings] = None,
    store: Optional[LocatorStore] = None,
) -> SelfHealingResolver:
    """
    Build a resolver (and its store) from settings.

    Args:
        driver: The automation session to resolve against
        settings: Settings to use (defaults to get_settings())
        store: An existing store to share between resolvers

    Returns:
        A ready SelfHealingResolver
    """
    settings = settings or get_settings()
    if store is None:
        store = LocatorStore(
            settings.store.path,
            create_if_missing=settings.store.create_if_missing,
        )
    return SelfHealingResolver(driver, store, settings=settings.resolver)
