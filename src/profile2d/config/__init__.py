"""Configuration management for profile2d.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CornerConfig: Corner modification settings
- OutputConfig: Output formatting settings
- LoggingConfig: Logging settings
- Profile2DSettings: Main application settings
"""

from profile2d.config.settings import (
    CornerConfig,
    CornerStyle,
    LoggingConfig,
    OutputConfig,
    Profile2DSettings,
    get_default_settings,
)

__all__ = [
    "CornerConfig",
    "CornerStyle",
    "LoggingConfig",
    "OutputConfig",
    "Profile2DSettings",
    "get_default_settings",
]
