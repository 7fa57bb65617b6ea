"""
Pytest configuration and fixtures.
"""

import pytest

from tests.fakes import FakeDriver


@pytest.fixture
def driver():
    """Provide an empty fake driver."""
    return FakeDriver()


@pytest.fixture
def store_path(tmp_path):
    """Path for a locator store file inside the test's temp dir."""
    return tmp_path / "config" / "element-locators.json"


@pytest.fixture
def store(store_path):
    """Provide a fresh locator store."""
    from healing_locators.locators.store import LocatorStore
    
    return LocatorStore(store_path)


@pytest.fixture
def resolver_settings():
    """Resolver settings with short timeouts for tests."""
    from healing_locators.config import ResolverSettings
    
    return ResolverSettings(attempt_timeout_ms=200, resolve_timeout_ms=2000)


@pytest.fixture
def resolver(driver, store, resolver_settings):
    """Provide a self-healing resolver over the fake driver."""
    from healing_locators.engine.self_healing import SelfHealingResolver
    
    return SelfHealingResolver(driver, store, settings=resolver_settings)
