"""Configuration settings for polyfollow."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for the geometric helpers.

    Both tolerances are absolute, in the coordinate units of the input.
    """

    point_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        description="Max per-axis distance at which two consecutive output points count as duplicates (0 = exact)",
    )
    boundary_tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        le=1.0,
        description="Distance from a ring edge within which a point is on the boundary, hence not within",
    )


class TraceConfig(BaseModel):
    """Configuration for traversal tracing."""

    log_branches: bool = Field(
        default=False,
        description="Route every classification branch to the structured logger when no trace callable is given",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = console only)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FollowerSettings(BaseModel):
    """Main follower settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    trace: TraceConfig = Field(default_factory=TraceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FollowerSettings:
    """Get default follower settings."""
    return FollowerSettings()
