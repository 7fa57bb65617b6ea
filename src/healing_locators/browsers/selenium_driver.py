"""
Selenium Driver - IDriver adapter over a Selenium WebDriver.

Selenium's API is blocking, so every call runs in a worker thread to keep
the event loop (and per-attempt timeouts) responsive. A timed-out call
cannot be interrupted, so the session stays busy until its thread returns
and the next call waits for it.
"""

from typing import Any, Callable, Dict
import asyncio
import logging

from selenium.webdriver.common.by import By

from healing_locators.interfaces.driver import IDriver, IElement
from healing_locators.locators.strategy import LocatorKind, LocatorStrategy

logger = logging.getLogger(__name__)


SELENIUM_BY: Dict[LocatorKind, str] = {
    LocatorKind.CSS: By.CSS_SELECTOR,
    LocatorKind.XPATH: By.XPATH,
    LocatorKind.ID: By.ID,
    LocatorKind.NAME: By.NAME,
    LocatorKind.CLASS: By.CLASS_NAME,
    LocatorKind.TAG: By.TAG_NAME,
}


class SeleniumElement(IElement):
    """Selenium implementation of IElement."""
    
    def __init__(self, element: Any, strategy: LocatorStrategy, session: "SeleniumDriver"):
        self._element = element
        self._strategy = strategy
        self._session = session
    
    async def click(self) -> None:
        await self._session.run(self._element.click)
    
    async def send_keys(self, text: str) -> None:
        await self._session.run(self._element.send_keys, text)
    
    async def get_text(self) -> str:
        return await self._session.run(lambda: self._element.text or "")


class SeleniumDriver(IDriver):
    """
    Selenium implementation of IDriver.
    
    Raises Selenium's own NoSuchElementException and friends on failure;
    the resolver records them as failed attempts.
    """
    
    def __init__(self, driver: Any):
        """
        Initialize the driver wrapper.
        
        Args:
            driver: Selenium WebDriver instance
        """
        self._driver = driver
        self._busy = asyncio.Lock()
    
    async def run(self, func: Callable[..., Any], *args: Any) -> Any:
        """
        Run a blocking WebDriver call, one at a time per session.
        
        The session lock is released when the worker thread finishes, not
        when the caller stops waiting.
        """
        await self._busy.acquire()
        call = asyncio.ensure_future(asyncio.to_thread(func, *args))
        call.add_done_callback(self._release)
        return await asyncio.shield(call)
    
    def _release(self, call: "asyncio.Future[Any]") -> None:
        self._busy.release()
        if call.cancelled():
            return
        error = call.exception()
        if error is not None:
            logger.debug(f"WebDriver call finished with {type(error).__name__}: {error}")
    
    async def find_element(self, strategy: LocatorStrategy) -> IElement:
        """Find the first element matching the strategy."""
        by = SELENIUM_BY[strategy.kind]
        element = await self.run(self._driver.find_element, by, strategy.expression)
        return SeleniumElement(element, strategy, self)
