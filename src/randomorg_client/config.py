"""Configuration system for randomorg-client.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (RANDOMORG_*) -> .env file -> field defaults.

Overrides for a single client are applied via resolve_config(), which creates
a new config instance without mutating the defaults.

Constructing RandomOrgConfig directly with a bad value raises pydantic's
ValidationError; resolve_config() (and so RandomOrgClient) re-raises it as
ConfigValidationError.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from randomorg_client.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})


class RandomOrgConfig(BaseSettings):
    """Configuration for randomorg-client.

    Resolution order: init kwargs -> env vars (RANDOMORG_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="RANDOMORG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Transport ---

    base_url: str = Field(
        default="https://www.random.org",
        description="Scheme and host of the random.org service (no trailing slash)",
    )
    timeout_s: float = Field(
        default=10.0,
        description="HTTP timeout in seconds, enforced by the transport",
    )
    user_agent: str = Field(
        default="randomorg-client",
        description="User-Agent header; random.org asks clients to identify themselves",
    )

    # --- Quota ---

    quota_minimum: int = Field(
        default=500,
        description="Bits that must remain before a checked request is sent",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Request logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all request records in memory for analysis",
    )

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got {value!r}")
        return value.rstrip("/")

    @field_validator("timeout_s")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"timeout_s must be positive, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return value


_ALL_FIELDS: frozenset[str] = frozenset(RandomOrgConfig.model_fields.keys())


def resolve_config(
    defaults: RandomOrgConfig | None,
    overrides: dict[str, Any] | None,
) -> RandomOrgConfig:
    """Create a config instance merging defaults with explicit overrides.

    Args:
        defaults: The base configuration, or ``None`` to load one from the
            environment.
        overrides: Field values to replace. Unknown keys are rejected.

    Returns:
        *defaults* itself when there is nothing to override, otherwise a new
        validated RandomOrgConfig.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails
            validation.
    """
    try:
        base = defaults if defaults is not None else RandomOrgConfig()
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc

    if not overrides:
        return base

    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: {key!r}")

    # model_copy(update=...) skips validation; model_validate runs it.
    merged = base.model_dump()
    merged.update(overrides)
    try:
        return RandomOrgConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
