"""Configuration management for polyfollow.

This module provides configuration management using Pydantic models.

Key classes:
- GeometryConfig: Tolerances for duplicate suppression and boundary tests
- TraceConfig: Traversal tracing settings
- LoggingConfig: Logging settings
- FollowerSettings: Main settings
"""

from polyfollow.config.settings import (
    FollowerSettings,
    GeometryConfig,
    LoggingConfig,
    TraceConfig,
    get_default_settings,
)

__all__ = [
    "FollowerSettings",
    "GeometryConfig",
    "LoggingConfig",
    "TraceConfig",
    "get_default_settings",
]
