"""Immutable options describing a single check invocation."""

from __future__ import annotations

from dataclasses import dataclass

from consul_health.shared.consts import (
    ALL_DATACENTERS,
    DEFAULT_CRITICAL_PERCENT,
    DEFAULT_SERVICE,
    DEFAULT_WARNING_PERCENT,
)


@dataclass(frozen=True)
class CheckOptions:
    """Subset of configuration consumed by the check use cases."""

    service: str = DEFAULT_SERVICE
    datacenter: str = ALL_DATACENTERS
    critical: float = DEFAULT_CRITICAL_PERCENT
    warning: float = DEFAULT_WARNING_PERCENT
