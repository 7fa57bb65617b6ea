"""
Configuration module - Centralized settings management.

This module provides type-safe configuration management using Pydantic,
supporting environment variables, YAML files, and keyword overrides.

Usage:
    from healing_locators.config import get_settings, load_config
    
    # Get global settings (loaded once)
    settings = get_settings()
    
    # Or load fresh settings with overrides
    settings = load_config(store={"path": "/tmp/locators.json"})

Environment Variables:
    HEALING_LOCATORS__STORE__PATH=config/element-locators.json
    HEALING_LOCATORS__RESOLVER__ATTEMPT_TIMEOUT_MS=2000
    HEALING_LOCATORS__LOGGING__LEVEL=DEBUG
"""

from healing_locators.config.settings import (
    Settings,
    StoreSettings,
    ResolverSettings,
    LoggingSettings,
)
from healing_locators.config.loader import ConfigLoader, load_config

# Global settings singleton
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).
    
    Settings are loaded once from environment variables and config files.
    Call reset_settings() to reload.
    
    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Reset the global settings (forces reload on next get_settings())."""
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "StoreSettings",
    "ResolverSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_config",
    "get_settings",
    "reset_settings",
]
