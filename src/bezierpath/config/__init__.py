"""Configuration management for bezierpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Tolerances for geometric tests
- OutputConfig: Number formatting and sampling for the CLI
- LoggingConfig: Logging settings
- BezierPathSettings: Main application settings
"""

from bezierpath.config.settings import (
    BezierPathSettings,
    GeometryConfig,
    LoggingConfig,
    OutputConfig,
    get_default_settings,
)

__all__ = [
    "BezierPathSettings",
    "GeometryConfig",
    "LoggingConfig",
    "OutputConfig",
    "get_default_settings",
]
