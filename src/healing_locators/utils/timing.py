"""
Timing utilities - per-attempt timeouts and aggregate deadlines.
"""

import asyncio
import time
from typing import Any, Optional


class Deadline:
    """
    An absolute point in time measured on the monotonic clock.
    
    Shared by every attempt of one resolve() call so that falling back
    through many candidates stays bounded.
    
    Example:
        >>> deadline = Deadline.after(30.0)
        >>> deadline.remaining()
        29.99...
    """
    
    def __init__(self, expires_at: Optional[float]):
        self.expires_at = expires_at
    
    @classmethod
    def after(cls, seconds: Optional[float]) -> "Deadline":
        """Create a deadline `seconds` from now (None means unbounded)."""
        if seconds is None:
            return cls(None)
        return cls(time.monotonic() + seconds)
    
    @classmethod
    def never(cls) -> "Deadline":
        return cls(None)
    
    def remaining(self) -> Optional[float]:
        """Seconds left, clamped at zero, or None when unbounded."""
        if self.expires_at is None:
            return None
        return max(0.0, self.expires_at - time.monotonic())
    
    @property
    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0
    
    def bound(self, timeout: Optional[float]) -> Optional[float]:
        """Clamp a per-attempt timeout to what is left of this deadline."""
        remaining = self.remaining()
        if remaining is None:
            return timeout
        if timeout is None:
            return remaining
        return min(timeout, remaining)


async def with_timeout(
    coro: Any,
    timeout_seconds: Optional[float],
    error_message: str = "Operation timed out",
) -> Any:
    """
    Execute a coroutine with a timeout.
    
    Args:
        coro: Coroutine to execute
        timeout_seconds: Timeout in seconds (None waits indefinitely)
        error_message: Message for timeout error
        
    Returns:
        Coroutine result
        
    Raises:
        asyncio.TimeoutError if timeout is exceeded
    """
    try:
        return await asyncio.wait_for(coro, timeout=timeout_seconds)
    except asyncio.TimeoutError:
        raise asyncio.TimeoutError(error_message)
