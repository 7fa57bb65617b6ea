"""
Cheap syntactic checks for generated locator expressions.

This is not a CSS or XPath parser. It only rejects expressions that no
driver could accept, such as unbalanced brackets or an id containing
whitespace, so obviously broken rewrites are not sent to the browser.
"""

import re
from typing import Callable, Dict

from healing_locators.locators.strategy import LocatorKind, LocatorStrategy

_PAIRS = {")": "(", "]": "["}
_TAG_NAME = re.compile(r"^[A-Za-z][\w-]*$")


def _balanced(expression: str) -> bool:
    stack = []
    quote = None
    for char in expression:
        if quote:
            if char == quote:
                quote = None
            continue
        if char in ("'", '"'):
            quote = char
        elif char in "([":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return quote is None and not stack


def _single_token(expression: str) -> bool:
    return not any(c.isspace() for c in expression.strip())


_CHECKS: Dict[LocatorKind, Callable[[str], bool]] = {
    LocatorKind.CSS: _balanced,
    LocatorKind.XPATH: _balanced,
    LocatorKind.ID: _single_token,
    LocatorKind.NAME: lambda expression: bool(expression.strip()),
    LocatorKind.CLASS: _single_token,
    LocatorKind.TAG: lambda expression: bool(_TAG_NAME.match(expression.strip())),
}


def is_well_formed(strategy: LocatorStrategy) -> bool:
    """Return False when the expression cannot be valid for its kind."""
    if not strategy.expression.strip():
        return False
    return _CHECKS[strategy.kind](strategy.expression)
