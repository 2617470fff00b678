"""
Health domain entities.

Value objects describing the health-check records Consul reports for a
service and the outcome of classifying them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class CheckStatus(str, Enum):
    """Check states recognised by Consul's health endpoint."""

    PASSING = "passing"
    WARNING = "warning"
    CRITICAL = "critical"


class Severity(str, Enum):
    """Verdict levels consumed by the monitoring framework."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class HealthCheckRecord:
    """One reported check for one service instance on one node."""

    node: str
    service_name: str
    service_id: str
    status: str
    notes: str = ""
    datacenter: Optional[str] = None

    def has_status(self, status: CheckStatus) -> bool:
        return self.status == status.value


@dataclass(frozen=True, slots=True)
class ClassificationOutcome:
    """Verdict produced for a service, with the data that explains it."""

    severity: Severity
    message: str
    service: str
    percent: Optional[float] = None
    threshold: Optional[float] = None
    records: Tuple[HealthCheckRecord, ...] = ()
