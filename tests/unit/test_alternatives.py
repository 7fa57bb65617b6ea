"""
Tests for alternative locator generation.
"""

import pytest

from healing_locators.locators.alternatives import AlternativeGenerator, generate_alternatives
from healing_locators.locators.strategy import LocatorKind, LocatorStrategy


class TestCssAlternatives:
    """Rewrites of CSS selectors."""
    
    def test_class_token(self):
        result = generate_alternatives(LocatorStrategy.css(".buy-btn"))
        
        assert result == [
            LocatorStrategy.css(".buy-btn"),
            LocatorStrategy.css('[class*="buy-btn"]'),
            LocatorStrategy.xpath('//*[contains(@class, "buy-btn")]'),
        ]
    
    def test_id_token(self):
        result = generate_alternatives(LocatorStrategy.css("#checkout"))
        
        assert result == [
            LocatorStrategy.css("#checkout"),
            LocatorStrategy.id("checkout"),
            LocatorStrategy.xpath('//*[@id="checkout"]'),
        ]
    
    def test_class_and_id(self):
        result = generate_alternatives(LocatorStrategy.css("form#login .submit"))
        
        assert result[0] == LocatorStrategy.css("form#login .submit")
        assert LocatorStrategy.css('[class*="submit"]') in result
        assert LocatorStrategy.id("login") in result
        # Class variants come before id variants
        assert result.index(LocatorStrategy.css('[class*="submit"]')) < result.index(LocatorStrategy.id("login"))
    
    def test_plain_tag_selector(self):
        assert generate_alternatives(LocatorStrategy.css("button")) == [LocatorStrategy.css("button")]


class TestXpathAlternatives:
    """Rewrites of XPath expressions."""
    
    def test_id_predicate(self):
        result = generate_alternatives(LocatorStrategy.xpath('//input[@id="search"]'))
        
        assert result == [
            LocatorStrategy.xpath('//input[@id="search"]'),
            LocatorStrategy.css("#search"),
            LocatorStrategy.id("search"),
        ]
    
    def test_id_predicate_single_quotes(self):
        result = generate_alternatives(LocatorStrategy.xpath("//input[@id='search']"))
        assert LocatorStrategy.id("search") in result
    
    def test_class_predicate_spaces_become_dots(self):
        result = generate_alternatives(LocatorStrategy.xpath('//button[@class="btn btn-primary"]'))
        
        assert result == [
            LocatorStrategy.xpath('//button[@class="btn btn-primary"]'),
            LocatorStrategy.css(".btn.btn-primary"),
        ]
    
    def test_text_predicate_has_no_alternatives(self):
        primary = LocatorStrategy.xpath("//button[contains(text(),'Add')]")
        assert generate_alternatives(primary) == [primary]


class TestOtherKinds:
    """Kinds without rewrites."""
    
    @pytest.mark.parametrize("kind", [LocatorKind.ID, LocatorKind.NAME, LocatorKind.CLASS, LocatorKind.TAG])
    def test_primary_only(self, kind):
        primary = LocatorStrategy(kind, "thing")
        assert generate_alternatives(primary) == [primary]


class TestDeterminism:
    """Generation is a pure function."""
    
    def test_repeated_calls_match(self):
        primary = LocatorStrategy.css("div#cart .item .price")
        first = generate_alternatives(primary)
        
        for _ in range(5):
            assert generate_alternatives(primary) == first
    
    def test_primary_first_and_unique(self):
        result = generate_alternatives(LocatorStrategy.css(".a#b"))
        assert result[0] == LocatorStrategy.css(".a#b")
        assert len(result) == len(set(result))
    
    def test_generator_object(self):
        generator = AlternativeGenerator()
        primary = LocatorStrategy.css("#x")
        assert generator.generate(primary) == generator(primary) == generate_alternatives(primary)
