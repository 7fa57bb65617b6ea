"""
Locator store exceptions.
"""

from pathlib import Path
from typing import Optional, Union

from healing_locators.exceptions.base import LocatorHealingError


class StoreIOError(LocatorHealingError):
    """
    The persisted locator store could not be read or written.
    
    Never escapes the store: it is logged and the store keeps working
    from memory for the rest of the session.
    """
    
    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, {"path": str(path) if path else None, "cause": repr(cause) if cause else None})
        self.path = path
        self.cause = cause
