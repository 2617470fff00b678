"""Classification policies turning check records into a service verdict.

Two policies exist: thresholding on the share of passing checks, and
reporting the worst status any check is in. Both expect a non-empty
record sequence; the missing-service case is resolved by the caller with
``missing_service_severity`` because the two policies disagree on it.
"""

from __future__ import annotations

from typing import ClassVar, Dict, List, Sequence

from consul_health.domain.entities.health import (
    CheckStatus,
    ClassificationOutcome,
    HealthCheckRecord,
    Severity,
)
from consul_health.shared.consts import (
    DEFAULT_CRITICAL_PERCENT,
    DEFAULT_WARNING_PERCENT,
)


def passing_percent(records: Sequence[HealthCheckRecord]) -> float:
    """Share of passing records, counted per record rather than per node."""

    if not records:
        raise ValueError("Cannot compute a percentage over zero records")
    passing = sum(1 for record in records if record.has_status(CheckStatus.PASSING))
    return round(passing * 100 / len(records), 2)


class PercentageClassifier:
    """Compare the passing share against critical and warning thresholds."""

    missing_service_severity: ClassVar[Severity] = Severity.CRITICAL

    def __init__(
        self,
        critical: float = DEFAULT_CRITICAL_PERCENT,
        warning: float = DEFAULT_WARNING_PERCENT,
    ) -> None:
        self._critical = float(critical)
        self._warning = float(warning)

    @property
    def critical(self) -> float:
        return self._critical

    @property
    def warning(self) -> float:
        return self._warning

    def classify(
        self, service: str, records: Sequence[HealthCheckRecord]
    ) -> ClassificationOutcome:
        percent = passing_percent(records)

        # Critical first so a value under both thresholds reports critical
        for severity, threshold in (
            (Severity.CRITICAL, self._critical),
            (Severity.WARNING, self._warning),
        ):
            if percent < threshold:
                return ClassificationOutcome(
                    severity=severity,
                    message=(
                        f"Service {service} health is {percent}% "
                        f"below {threshold:g}%"
                    ),
                    service=service,
                    percent=percent,
                    threshold=threshold,
                )

        return ClassificationOutcome(
            severity=Severity.OK,
            message=f"Service {service} health is {percent}%",
            service=service,
            percent=percent,
        )


class WorstStatusClassifier:
    """Report the most severe status any check is in."""

    missing_service_severity: ClassVar[Severity] = Severity.UNKNOWN

    _PRECEDENCE = (
        (CheckStatus.CRITICAL, Severity.CRITICAL),
        (CheckStatus.WARNING, Severity.WARNING),
        (CheckStatus.PASSING, Severity.OK),
    )

    def classify(
        self, service: str, records: Sequence[HealthCheckRecord]
    ) -> ClassificationOutcome:
        buckets = self.partition(records)

        for status, severity in self._PRECEDENCE:
            bucket = buckets[status]
            if bucket:
                return ClassificationOutcome(
                    severity=severity,
                    message=(
                        f"Service {service} has {len(bucket)} "
                        f"{status.value} check(s)"
                    ),
                    service=service,
                    records=tuple(bucket),
                )

        return ClassificationOutcome(
            severity=Severity.UNKNOWN,
            message=f"Service {service} state is unknown",
            service=service,
        )

    @staticmethod
    def partition(
        records: Sequence[HealthCheckRecord],
    ) -> Dict[CheckStatus, List[HealthCheckRecord]]:
        """Bucket records by exact status; unrecognised statuses are dropped."""

        buckets: Dict[CheckStatus, List[HealthCheckRecord]] = {
            status: [] for status in CheckStatus
        }
        for record in records:
            for status in CheckStatus:
                if record.has_status(status):
                    buckets[status].append(record)
                    break
        return buckets
