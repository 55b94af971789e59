"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (ACTOR_INPUT_*, ACTOR_INPUT_OTEL_*)
3. Defaults (lowest priority)
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class OpenTelemetrySettings(BaseSettings):
    """Settings for OpenTelemetry tracing."""

    enabled: bool = Field(
        default=False,
        description="Enable tracing",
    )
    service_name: str = Field(
        default="actor-input",
        description="Service name reported on spans",
    )
    endpoint: str = Field(
        default="",
        description="OTLP gRPC endpoint (empty = console exporter only)",
    )

    model_config = {"env_prefix": "ACTOR_INPUT_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )
    grammar_file: Path | None = Field(
        default=None,
        description="Grammar JSON used when --grammar is not given",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="OpenTelemetry settings",
    )

    model_config = {"env_prefix": "ACTOR_INPUT_"}

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings(otel=OpenTelemetrySettings())
