"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used by every layer of the checks.
It must not depend on Infrastructure or the composition root.
"""

from .consts import (
    ALL_DATACENTERS,
    DEFAULT_CONSUL_URL,
    DEFAULT_CRITICAL_PERCENT,
    DEFAULT_SERVICE,
    DEFAULT_WARNING_PERCENT,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "ALL_DATACENTERS",
    "DEFAULT_CONSUL_URL",
    "DEFAULT_CRITICAL_PERCENT",
    "DEFAULT_SERVICE",
    "DEFAULT_WARNING_PERCENT",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
