"""Configuration management for the Learnix code execution gateway.

This module provides a flat Settings class read from the environment,
with grouped views for the individual concerns.

Usage:
    from learnix_gateway.config import settings

    # Access grouped settings
    settings.runner.base_url

    # Or the flat fields
    settings.runner_timeout_seconds
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .languages import (
    LANGUAGES,
    LanguageProfile,
    get_language,
    get_supported_languages,
    is_shimmed_language,
    is_supported_language,
    resolve_language,
)
from .logging import LoggingConfig
from .runner import RunnerConfig


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # API Configuration
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000, ge=1, le=65535)
    api_debug: bool = Field(default=False)
    api_reload: bool = Field(default=False)

    # Authentication Configuration (exercise submissions)
    api_key: str = Field(default="learnix-dev-api-key", min_length=16)
    api_keys: str | None = Field(default=None)
    api_key_header: str = Field(default="x-api-key")

    # Runner Configuration
    runner_base_url: str = Field(
        default="https://emkc.org/api/v2/piston",
        description="Base URL of the Piston-compatible execution service",
    )
    runner_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=600,
        description="Timeout for a single Runner call; user code may loop forever",
    )
    enable_module_mocks: bool = Field(
        default=True,
        description="Inject the sandboxed module shim (mock Express) into JS/TS sources",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    log_file: str | None = Field(default=None)
    log_max_size_mb: int = Field(default=100, ge=1)
    log_backup_count: int = Field(default=5, ge=1)
    enable_access_logs: bool = Field(default=True)

    # Development Configuration
    enable_cors: bool = Field(default=False)
    cors_origins: list[str] = Field(default_factory=list)
    enable_docs: bool = Field(default=True)

    # ========================================================================
    # VALIDATORS
    # ========================================================================

    @field_validator("api_keys", mode="before")
    @classmethod
    def parse_api_keys(cls, v):
        """Normalize comma-separated API keys."""
        if not v:
            return None
        return ",".join(key.strip() for key in v.split(",") if key.strip()) or None

    @field_validator("runner_base_url")
    @classmethod
    def validate_runner_base_url(cls, v):
        """Ensure the Runner URL has a scheme and no trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Runner base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Only JSON and console rendering are supported."""
        if v.lower() not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return v.lower()

    # ========================================================================
    # GROUPED CONFIG ACCESS
    # ========================================================================

    @property
    def runner(self) -> RunnerConfig:
        """Access Runner configuration group."""
        return RunnerConfig(
            runner_base_url=self.runner_base_url,
            runner_timeout_seconds=self.runner_timeout_seconds,
            enable_module_mocks=self.enable_module_mocks,
        )

    @property
    def logging(self) -> LoggingConfig:
        """Access logging configuration group."""
        return LoggingConfig(
            log_level=self.log_level,
            log_format=self.log_format,
            log_file=self.log_file,
            log_max_size_mb=self.log_max_size_mb,
            log_backup_count=self.log_backup_count,
            enable_access_logs=self.enable_access_logs,
        )

    # ========================================================================
    # HELPER METHODS
    # ========================================================================

    def get_valid_api_keys(self) -> list[str]:
        """Get all valid API keys including the primary key."""
        keys = [self.api_key]
        if self.api_keys:
            keys.extend(k.strip() for k in self.api_keys.split(",") if k.strip())
        return list(set(keys))


# Global settings instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    # Grouped configs
    "RunnerConfig",
    "LoggingConfig",
    # Language registry
    "LANGUAGES",
    "LanguageProfile",
    "get_language",
    "get_supported_languages",
    "is_shimmed_language",
    "is_supported_language",
    "resolve_language",
]
