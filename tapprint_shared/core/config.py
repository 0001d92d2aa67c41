"""
Configuration management for TapPrint shared contracts.

Provides centralized, validated configuration from environment variables
with proper type checking and defaults.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TRUTHY = ("1", "true", "yes", "y")


def _parse_flag(v):
    if isinstance(v, str):
        return v.strip().lower() in _TRUTHY
    return bool(v)


class ValidationConfig(BaseSettings):
    """Boundary validation policy."""

    # Check the invariants the wire types leave to convention
    enforce_conventions: bool = Field(default=False, alias="TAPPRINT_ENFORCE_CONVENTIONS")
    # A successful ApiResponse must carry data
    require_response_data: bool = Field(default=True, alias="TAPPRINT_REQUIRE_RESPONSE_DATA")

    @field_validator("enforce_conventions", "require_response_data", mode="before")
    @classmethod
    def parse_flags(cls, v):
        return _parse_flag(v)

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")


class Settings(BaseSettings):
    """Main settings."""

    # Environment
    environment: str = Field(default="production", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_json: bool = Field(default=False, alias="LOG_JSON")

    # Paths
    schema_dir: str = Field(default="schema", alias="TAPPRINT_SCHEMA_DIR")
    fixtures_dir: str = Field(default="fixtures", alias="TAPPRINT_FIXTURES_DIR")

    # Component configurations
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    @field_validator("debug", "log_json", mode="before")
    @classmethod
    def parse_flags(cls, v):
        return _parse_flag(v)

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global settings
    settings = None


def print_configuration_summary():
    """Print a summary of the current configuration for debugging."""
    config = get_settings()
    print("=== TapPrint Contracts Configuration ===")
    print(f"Environment: {config.environment}")
    print(f"Debug Mode: {config.debug}")
    print(f"JSON Logs: {config.log_json}")
    print(f"Schema Dir: {config.schema_dir}")
    print(f"Fixtures Dir: {config.fixtures_dir}")
    print()
    print("Validation:")
    print(f"  Enforce Conventions: {'✓' if config.validation.enforce_conventions else '✗'}")
    print(f"  Require Response Data: {'✓' if config.validation.require_response_data else '✗'}")
    print("=" * 40)
