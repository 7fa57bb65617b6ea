"""
Locator strategies - the (kind, expression) pairs used to find one element.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from healing_locators.exceptions import InvalidStrategyError


class LocatorKind(str, Enum):
    """Supported identification schemes."""
    CSS = "css"
    XPATH = "xpath"
    ID = "id"
    NAME = "name"
    CLASS = "class"
    TAG = "tag"

    @classmethod
    def parse(cls, value: Union[str, "LocatorKind"]) -> "LocatorKind":
        """
        Parse a kind from its persisted name.
        
        Raises:
            InvalidStrategyError: If the value is not one of the six kinds
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidStrategyError(f"Unsupported locator kind: {value!r}", kind=str(value))


@dataclass(frozen=True)
class LocatorStrategy:
    """
    One way of identifying a UI element.
    
    Immutable and hashable, so strategies can be compared to detect
    whether a newly successful one differs from the cached one.
    
    Attributes:
        kind: Identification scheme
        expression: Selector, XPath, id, name, class name or tag name
    """
    kind: LocatorKind
    expression: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", LocatorKind.parse(self.kind))
        if not isinstance(self.expression, str) or not self.expression.strip():
            raise InvalidStrategyError(
                "Locator expression must be a non-empty string",
                kind=self.kind.value,
                expression=self.expression if isinstance(self.expression, str) else None,
            )

    def __str__(self) -> str:
        return f"{self.kind.value}={self.expression}"

    @classmethod
    def css(cls, expression: str) -> "LocatorStrategy":
        return cls(LocatorKind.CSS, expression)

    @classmethod
    def xpath(cls, expression: str) -> "LocatorStrategy":
        return cls(LocatorKind.XPATH, expression)

    @classmethod
    def id(cls, expression: str) -> "LocatorStrategy":
        return cls(LocatorKind.ID, expression)

    @classmethod
    def name(cls, expression: str) -> "LocatorStrategy":
        return cls(LocatorKind.NAME, expression)

    @classmethod
    def class_name(cls, expression: str) -> "LocatorStrategy":
        return cls(LocatorKind.CLASS, expression)

    @classmethod
    def tag(cls, expression: str) -> "LocatorStrategy":
        return cls(LocatorKind.TAG, expression)

    def to_dict(self) -> Dict[str, str]:
        """Serialize to the persisted {by, value} shape."""
        return {"by": self.kind.value, "value": self.expression}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LocatorStrategy":
        """
        Build a strategy from a {by, value} mapping.
        
        Raises:
            InvalidStrategyError: If the mapping is malformed
        """
        if not isinstance(data, dict) or "by" not in data or "value" not in data:
            raise InvalidStrategyError(f"Expected {{by, value}} mapping, got {data!r}")
        return cls(data["by"], data["value"])
