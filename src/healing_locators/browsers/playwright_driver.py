"""
Playwright Driver - IDriver adapter over a Playwright async Page.

Each LocatorKind is translated to a Playwright selector string and looked
up with page.query_selector.
"""

from typing import Any, Callable, Dict
import logging

from healing_locators.exceptions import StrategyFailure
from healing_locators.interfaces.driver import IDriver, IElement
from healing_locators.locators.strategy import LocatorKind, LocatorStrategy

logger = logging.getLogger(__name__)


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


_SELECTORS: Dict[LocatorKind, Callable[[str], str]] = {
    LocatorKind.CSS: lambda expression: f"css={expression}",
    LocatorKind.XPATH: lambda expression: f"xpath={expression}",
    LocatorKind.ID: lambda expression: f'css=[id="{_quote(expression)}"]',
    LocatorKind.NAME: lambda expression: f'css=[name="{_quote(expression)}"]',
    LocatorKind.CLASS: lambda expression: f'css=[class~="{_quote(expression)}"]',
    LocatorKind.TAG: lambda expression: f"css={expression}",
}


def to_playwright_selector(strategy: LocatorStrategy) -> str:
    """Translate a strategy into a Playwright selector string."""
    return _SELECTORS[strategy.kind](strategy.expression)


class PlaywrightElement(IElement):
    """
    Playwright implementation of IElement.
    
    Wraps a Playwright ElementHandle.
    """
    
    def __init__(self, element: Any, selector: str):
        """
        Initialize the element wrapper.
        
        Args:
            element: Playwright ElementHandle
            selector: The selector used to find this element
        """
        self._element = element
        self._selector = selector
    
    async def click(self) -> None:
        """Click on this element."""
        await self._element.click()
    
    async def send_keys(self, text: str) -> None:
        """Type text into this element."""
        await self._element.type(text)
    
    async def get_text(self) -> str:
        """Get visible text."""
        return await self._element.inner_text() or ""


class PlaywrightDriver(IDriver):
    """
    Playwright implementation of IDriver.
    
    Example:
        >>> async with async_playwright() as p:
        ...     browser = await p.chromium.launch()
        ...     page = await browser.new_page()
        ...     driver = PlaywrightDriver(page)
    """
    
    def __init__(self, page: Any):
        """
        Initialize the driver wrapper.
        
        Args:
            page: Playwright Page object
        """
        self._page = page
    
    async def find_element(self, strategy: LocatorStrategy) -> IElement:
        """Find the first element matching the strategy."""
        selector = to_playwright_selector(strategy)
        element = await self._page.query_selector(selector)
        if element is None:
            raise StrategyFailure(f"No element matches {selector}", strategy=strategy)
        return PlaywrightElement(element, selector)
