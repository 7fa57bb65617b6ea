"""
Base exceptions for healing-locators.
"""


class LocatorHealingError(Exception):
    """
    Base exception for all healing-locators errors.
    
    All custom exceptions inherit from this class, making it easy
    to catch any error from the library.
    
    Attributes:
        message: Human-readable error message
        details: Optional additional error details
    """
    
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(LocatorHealingError):
    """
    Error in configuration.
    
    Raised when there's an issue with settings, environment variables,
    or configuration files.
    """
    pass


class InvalidStrategyError(LocatorHealingError, ValueError):
    """
    A locator strategy could not be constructed.
    
    Raised for an unknown locator kind or an empty expression, so a bad
    strategy fails where it is built rather than during resolution.
    """
    
    def __init__(self, message: str, kind: str | None = None, expression: str | None = None):
        super().__init__(message, {"kind": kind, "expression": expression})
        self.kind = kind
        self.expression = expression
