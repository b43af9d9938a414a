"""Configuration settings for profile2d."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CornerStyle(str, Enum):
    """Transition curve placed at a corner."""

    FILLET = "fillet"
    CHAMFER = "chamfer"
    DOGBONE = "dogbone"


class CornerConfig(BaseModel):
    """Configuration for corner modification."""

    size: float = Field(
        default=1.0,
        gt=0.0,
        description="Fillet/dogbone radius or chamfer size",
    )
    style: CornerStyle = Field(
        default=CornerStyle.FILLET,
        description="Corner style",
    )


class OutputConfig(BaseModel):
    """Configuration for written documents and console reports."""

    decimals: int = Field(
        default=6,
        ge=0,
        le=12,
        description="Decimals kept for coordinates in output",
    )
    indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="JSON indentation (0 = compact)",
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


class Profile2DSettings(BaseModel):
    """Main application settings."""

    corner: CornerConfig = Field(default_factory=CornerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> Profile2DSettings:
    """Get default application settings."""
    return Profile2DSettings()
