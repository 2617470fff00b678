"""Domain service abstraction for classifying service health."""

from __future__ import annotations

from typing import ClassVar, Protocol, Sequence

from consul_health.domain.entities.health import (
    ClassificationOutcome,
    HealthCheckRecord,
    Severity,
)


class IStatusClassifier(Protocol):
    """Turns the aggregated check records of a service into a verdict."""

    missing_service_severity: ClassVar[Severity]

    def classify(
        self, service: str, records: Sequence[HealthCheckRecord]
    ) -> ClassificationOutcome:
        """Classify a non-empty sequence of records."""
        ...
