"""Configuration settings for bezierpath."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometric tests."""

    linear_tolerance: float = Field(
        default=1e-4,
        gt=0.0,
        le=1.0,
        description="Maximum distance of a control point from the chord for a curve to count as linear",
    )


class OutputConfig(BaseModel):
    """Configuration for CLI output."""

    precision: int = Field(
        default=4,
        ge=0,
        le=15,
        description="Decimal places used when printing numbers",
    )
    samples: int = Field(
        default=11,
        ge=2,
        le=1000,
        description="Number of evenly spaced samples along a path",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BezierPathSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BezierPathSettings:
    """Get default application settings."""
    return BezierPathSettings()
