"""Global configuration for docreflect.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class ReflectorConfig(BaseSettings):
    """docreflect configuration settings.

    Values can be overridden via environment variables with DOCREFLECT_ prefix.
    Example: DOCREFLECT_MIXED_TYPE=any overrides mixed_type.
    """

    # Docblock parsing
    return_marker: str = Field(
        default=" * @return",
        min_length=1,
        description="Exact substring introducing the return type declaration",
    )

    # Conformance wildcards
    mixed_type: str = Field(
        default="mixed",
        description="Declared type that matches any value",
    )
    object_type: str = Field(
        default="object",
        description="Declared type that matches any object value",
    )

    # Doc discovery
    interface_fallback: bool = Field(
        default=True,
        description="Search implemented interfaces when a method has no docstring",
    )

    model_config = {
        "env_prefix": "DOCREFLECT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> ReflectorConfig:
    """Get cached configuration instance.

    Returns:
        ReflectorConfig singleton instance.
    """
    return ReflectorConfig()


def reload_config() -> ReflectorConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh ReflectorConfig instance.
    """
    get_config.cache_clear()
    return get_config()
