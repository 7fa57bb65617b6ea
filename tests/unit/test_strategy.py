"""
Tests for LocatorKind and LocatorStrategy.
"""

import pytest

from healing_locators.exceptions import InvalidStrategyError
from healing_locators.locators.strategy import LocatorKind, LocatorStrategy


class TestLocatorKind:
    """Test kind parsing."""
    
    def test_parse_all_kinds(self):
        """Every persisted kind name parses."""
        for name in ["css", "xpath", "id", "name", "class", "tag"]:
            assert LocatorKind.parse(name).value == name
    
    def test_parse_is_case_insensitive(self):
        assert LocatorKind.parse(" XPath ") is LocatorKind.XPATH
    
    def test_unknown_kind_rejected(self):
        with pytest.raises(InvalidStrategyError) as exc_info:
            LocatorKind.parse("linkText")
        assert exc_info.value.kind == "linkText"


class TestLocatorStrategy:
    """Test the strategy value type."""
    
    def test_construct_from_string_kind(self):
        strategy = LocatorStrategy("css", ".buy-btn")
        assert strategy.kind is LocatorKind.CSS
        assert strategy == LocatorStrategy.css(".buy-btn")
    
    def test_unknown_kind_fails_at_construction(self):
        with pytest.raises(InvalidStrategyError):
            LocatorStrategy("link", "Buy")
    
    def test_empty_expression_rejected(self):
        with pytest.raises(InvalidStrategyError):
            LocatorStrategy.css("   ")
    
    def test_invalid_strategy_error_is_value_error(self):
        with pytest.raises(ValueError):
            LocatorStrategy.id("")
    
    def test_immutable(self):
        strategy = LocatorStrategy.id("search")
        with pytest.raises(AttributeError):
            strategy.expression = "other"
    
    def test_hashable(self):
        strategies = {LocatorStrategy.id("a"), LocatorStrategy("id", "a"), LocatorStrategy.name("a")}
        assert len(strategies) == 2
    
    def test_to_dict(self):
        strategy = LocatorStrategy.xpath("//button[contains(text(),'Add')]")
        assert strategy.to_dict() == {"by": "xpath", "value": "//button[contains(text(),'Add')]"}
    
    def test_from_dict(self):
        strategy = LocatorStrategy.from_dict({"by": "class", "value": "buy-btn"})
        assert strategy == LocatorStrategy.class_name("buy-btn")
    
    def test_from_dict_missing_value(self):
        with pytest.raises(InvalidStrategyError):
            LocatorStrategy.from_dict({"by": "css"})
    
    def test_str(self):
        assert str(LocatorStrategy.tag("button")) == "tag=button"
