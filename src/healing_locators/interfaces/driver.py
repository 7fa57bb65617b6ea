"""
Driver Interface - Abstract base classes for the automation session.

The resolver never talks to a browser directly. It needs one lookup
capability from the session and three actions from the elements it
returns; adapters for Playwright and Selenium live in
healing_locators.browsers, and tests plug in in-memory fakes.

Example:
    >>> from healing_locators.browsers import PlaywrightDriver
    >>> driver = PlaywrightDriver(page)
    >>> element = await driver.find_element(LocatorStrategy.css("#search"))
    >>> await element.send_keys("shoes")
"""

from abc import ABC, abstractmethod

from healing_locators.locators.strategy import LocatorStrategy


class IElement(ABC):
    """
    Abstract interface for interacting with a located element.
    
    Any of these methods may fail with a driver-specific exception.
    """

    @abstractmethod
    async def click(self) -> None:
        """Click on this element."""
        ...

    @abstractmethod
    async def send_keys(self, text: str) -> None:
        """
        Type text into this element.
        
        Args:
            text: The text to type
        """
        ...

    @abstractmethod
    async def get_text(self) -> str:
        """
        Get the visible text of this element.
        
        Returns:
            The element text (empty string when it has none)
        """
        ...


class IDriver(ABC):
    """
    Abstract interface for single-strategy element lookup.
    """

    @abstractmethod
    async def find_element(self, strategy: LocatorStrategy) -> IElement:
        """
        Find the first element matching one strategy.
        
        Args:
            strategy: The strategy to look up
            
        Returns:
            The located element
            
        Raises:
            Exception: Any driver-specific not-found or stale-element fault
        """
        ...
