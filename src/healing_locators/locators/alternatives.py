"""
Alternative Generator - Derive extra candidate strategies from a primary one.

These are purely syntactic rewrites of the primary expression. A generated
candidate may not match anything, or may not even be a valid selector for
malformed input; it is only trusted once it has located an element.

Example:
    >>> generate_alternatives(LocatorStrategy.css("button.buy-btn"))
    [css=button.buy-btn,
     css=[class*="buy-btn"],
     xpath=//*[contains(@class, "buy-btn")]]
"""

import re
from typing import Callable, Dict, List

from healing_locators.locators.strategy import LocatorKind, LocatorStrategy

_CSS_CLASS = re.compile(r"\.(-?[A-Za-z_][\w-]*)")
_CSS_ID = re.compile(r"#(-?[A-Za-z_][\w-]*)")
_XPATH_ID = re.compile(r"""@id\s*=\s*['"]([^'"]+)['"]""")
_XPATH_CLASS = re.compile(r"""@class\s*=\s*['"]([^'"]+)['"]""")


def _from_css(primary: LocatorStrategy) -> List[LocatorStrategy]:
    alternatives = []

    class_match = _CSS_CLASS.search(primary.expression)
    if class_match:
        class_name = class_match.group(1)
        alternatives.append(LocatorStrategy.css(f'[class*="{class_name}"]'))
        alternatives.append(LocatorStrategy.xpath(f'//*[contains(@class, "{class_name}")]'))

    id_match = _CSS_ID.search(primary.expression)
    if id_match:
        element_id = id_match.group(1)
        alternatives.append(LocatorStrategy.id(element_id))
        alternatives.append(LocatorStrategy.xpath(f'//*[@id="{element_id}"]'))

    return alternatives


def _from_xpath(primary: LocatorStrategy) -> List[LocatorStrategy]:
    alternatives = []

    id_match = _XPATH_ID.search(primary.expression)
    if id_match:
        element_id = id_match.group(1)
        alternatives.append(LocatorStrategy.css(f"#{element_id}"))
        alternatives.append(LocatorStrategy.id(element_id))

    class_match = _XPATH_CLASS.search(primary.expression)
    if class_match:
        class_value = class_match.group(1).strip()
        if class_value:
            alternatives.append(LocatorStrategy.css("." + class_value.replace(" ", ".")))

    return alternatives


def _none(primary: LocatorStrategy) -> List[LocatorStrategy]:
    return []


_GENERATORS: Dict[LocatorKind, Callable[[LocatorStrategy], List[LocatorStrategy]]] = {
    LocatorKind.CSS: _from_css,
    LocatorKind.XPATH: _from_xpath,
    LocatorKind.ID: _none,
    LocatorKind.NAME: _none,
    LocatorKind.CLASS: _none,
    LocatorKind.TAG: _none,
}

if set(_GENERATORS) != set(LocatorKind):
    raise RuntimeError("Alternative generators must cover every LocatorKind")


def generate_alternatives(primary: LocatorStrategy) -> List[LocatorStrategy]:
    """
    Generate candidate strategies for a primary strategy.

    Deterministic: the same primary always yields the same list in the
    same order. The primary is always first and duplicates are dropped.

    Args:
        primary: The strategy to derive alternatives from

    Returns:
        Ordered candidates, starting with the primary
    """
    candidates = [primary] + _GENERATORS[primary.kind](primary)

    unique: List[LocatorStrategy] = []
    for candidate in candidates:
        if candidate not in unique:
            unique.append(candidate)
    return unique


class AlternativeGenerator:
    """
    Callable wrapper around generate_alternatives.

    Exists so a resolver can be given a different generator in tests or
    by callers with site-specific rewrite rules.
    """

    def generate(self, primary: LocatorStrategy) -> List[LocatorStrategy]:
        return generate_alternatives(primary)

    def __call__(self, primary: LocatorStrategy) -> List[LocatorStrategy]:
        return self.generate(primary)
