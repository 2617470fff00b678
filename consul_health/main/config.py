"""
Check Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values. Command line
options are layered on top with ``apply_overrides``.
"""

from typing import Any, Dict, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from consul_health.shared import (
    ALL_DATACENTERS,
    DEFAULT_CONSUL_URL,
    DEFAULT_CRITICAL_PERCENT,
    DEFAULT_SERVICE,
    DEFAULT_WARNING_PERCENT,
    EnumEnvironment,
    EnumLogLevel,
)
from consul_health.shared.env import load_secret_file_variables  # noqa: F401


def normalize_consul_url(value: str) -> str:
    """Accept ``host:port`` addresses the way the consul CLI does."""

    value = value.strip().rstrip("/")
    if "://" not in value:
        value = f"http://{value}"
    return value


class ConsulSettings(BaseSettings):
    """Consul agent connection settings."""

    url: str = Field(
        default=DEFAULT_CONSUL_URL,
        validation_alias=AliasChoices("CONSUL_HTTP_ADDR", "CONSUL_URL"),
        description="Consul HTTP API address",
    )
    token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("CONSUL_HTTP_TOKEN", "CONSUL_TOKEN"),
        description="ACL token sent as X-Consul-Token",
    )
    timeout: float = Field(
        default=5.0,
        gt=0,
        validation_alias=AliasChoices("CONSUL_TIMEOUT"),
        description="HTTP timeout in seconds",
    )

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    @field_validator("url")
    @classmethod
    def _normalize_url(cls, value: str) -> str:
        return normalize_consul_url(value)


class CheckSettings(BaseSettings):
    """What to check and when to alert."""

    service: str = Field(
        default=DEFAULT_SERVICE, description="Service managed by consul"
    )
    datacenter: str = Field(
        default=ALL_DATACENTERS,
        description="Datacenter to query, 'all' queries every datacenter",
    )
    critical: float = Field(
        default=DEFAULT_CRITICAL_PERCENT,
        ge=0,
        le=100,
        description="Critical threshold for the passing percentage",
    )
    warning: float = Field(
        default=DEFAULT_WARNING_PERCENT,
        ge=0,
        le=100,
        description="Warning threshold for the passing percentage",
    )

    model_config = SettingsConfigDict(
        env_prefix="CHECK_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(
        default=EnumLogLevel.WARNING, description="Logging level"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to stderr only)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Runtime environment"
    )

    consul: ConsulSettings = Field(default_factory=ConsulSettings)
    check: CheckSettings = Field(default_factory=CheckSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get settings instance Factory.

    Used to be mocked in tests, allowing different settings per environment.
    """
    return AppSettings()


def apply_overrides(
    settings: AppSettings,
    *,
    consul_url: Optional[str] = None,
    datacenter: Optional[str] = None,
    service: Optional[str] = None,
    critical: Optional[float] = None,
    warning: Optional[float] = None,
) -> AppSettings:
    """Return a copy of ``settings`` with the given non-None values applied."""

    consul_updates: Dict[str, Any] = {}
    if consul_url is not None:
        consul_updates["url"] = normalize_consul_url(consul_url)

    check_updates: Dict[str, Any] = {
        key: value
        for key, value in (
            ("datacenter", datacenter),
            ("service", service),
            ("critical", critical),
            ("warning", warning),
        )
        if value is not None
    }

    return settings.model_copy(
        update={
            "consul": settings.consul.model_copy(update=consul_updates),
            "check": settings.check.model_copy(update=check_updates),
        }
    )
