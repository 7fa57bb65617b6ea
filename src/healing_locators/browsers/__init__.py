"""
Browsers module - IDriver adapters for browser automation libraries.

Neither adapter launches a browser; they wrap a session the caller owns.
The Selenium adapter is imported lazily so Playwright-only installs work.
"""

from healing_locators.browsers.playwright_driver import (
    PlaywrightDriver,
    PlaywrightElement,
    to_playwright_selector,
)

__all__ = [
    "PlaywrightDriver",
    "PlaywrightElement",
    "SeleniumDriver",
    "to_playwright_selector",
]


def __getattr__(name: str):
    if name == "SeleniumDriver":
        from healing_locators.browsers.selenium_driver import SeleniumDriver
        return SeleniumDriver
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
