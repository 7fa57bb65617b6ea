"""
Settings - Pydantic models for type-safe configuration.

This module defines all configuration settings as Pydantic models,
providing validation, type hints, and automatic environment variable loading.

Example:
    >>> from healing_locators.config import Settings, load_config
    >>> settings = load_config()  # Loads from env, yaml, and defaults
    >>> print(settings.store.path)
    'config/element-locators.json'
"""

import copy
from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, EnvSettingsSource, SettingsConfigDict


def deep_merge(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    """Merge nested mappings from `updates` into `base` in place."""
    for key, value in updates.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class StoreSettings(BaseModel):
    """
    Persisted locator store settings.
    
    Attributes:
        path: JSON file holding the name -> strategy mapping
        create_if_missing: Write an empty mapping when the file does not exist
    """
    path: str = "config/element-locators.json"
    create_if_missing: bool = True


class ResolverSettings(BaseModel):
    """
    Resolution timing and candidate expansion settings.
    
    Attributes:
        attempt_timeout_ms: Upper bound for a single strategy attempt
        resolve_timeout_ms: Aggregate bound for one resolve() call
        expand_alternatives: Expand each candidate with generated alternatives
        validate_alternatives: Drop generated alternatives that are not well-formed
    """
    attempt_timeout_ms: int = Field(default=5000, ge=50, le=120000)
    resolve_timeout_ms: int = Field(default=30000, ge=100, le=600000)
    expand_alternatives: bool = True
    validate_alternatives: bool = True
    
    @property
    def attempt_timeout(self) -> float:
        """Per-attempt timeout in seconds."""
        return self.attempt_timeout_ms / 1000
    
    @property
    def resolve_timeout(self) -> float:
        """Aggregate resolve timeout in seconds."""
        return self.resolve_timeout_ms / 1000


class LoggingSettings(BaseModel):
    """
    Logging configuration.
    
    Attributes:
        level: Log level
        format: Format string for the log file
        file: Log file path (None for console only)
        json_format: Write JSON lines to the log file instead of `format`
    """
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    json_format: bool = False


class Settings(BaseSettings):
    """
    Root settings container - single source of truth for all configuration.
    
    Settings are loaded in this priority order (highest to lowest):
    1. Explicit values passed to constructor
    2. Environment variables (prefixed with HEALING_LOCATORS__)
    3. Config file values given to from_file_config()
    4. Default values
    
    Example:
        >>> settings = Settings()  # Load from env vars
        >>> settings = Settings(resolver=ResolverSettings(expand_alternatives=False))
    """
    
    model_config = SettingsConfigDict(
        env_prefix="HEALING_LOCATORS__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )
    
    store: StoreSettings = Field(default_factory=StoreSettings)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    
    def merge_with(self, overrides: dict) -> "Settings":
        """
        Create a new Settings instance with overrides applied.
        
        Args:
            overrides: Dictionary of values to override
            
        Returns:
            New Settings instance with overrides applied
        """
        merged = deep_merge(self.model_dump(), overrides)
        return Settings(**merged)
    
    @classmethod
    def from_file_config(cls, file_config: Dict[str, Any]) -> "Settings":
        """
        Build settings from config file values, letting the environment win.
        
        Constructor values normally outrank environment variables, so the
        environment layer is read first and merged over the file values.
        
        Args:
            file_config: Mapping loaded from a YAML config file
            
        Returns:
            Settings with defaults < file < environment
        """
        env_config = EnvSettingsSource(cls)()
        merged = deep_merge(copy.deepcopy(file_config), env_config)
        return cls(**merged)
