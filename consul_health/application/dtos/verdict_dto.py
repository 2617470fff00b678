"""DTOs for check verdicts."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from consul_health.domain.entities.health import (
    ClassificationOutcome,
    HealthCheckRecord,
    Severity,
)


class HealthCheckRecordDTO(BaseModel):
    """Serializable representation of a single service check."""

    node: str = Field(description="Node running the service instance")
    service: str = Field(description="Consul service name")
    service_id: str = Field(description="Consul service instance identifier")
    notes: str = Field(default="", description="Free-text notes of the check")
    datacenter: Optional[str] = Field(
        default=None, description="Datacenter the record was read from"
    )

    @classmethod
    def from_domain(cls, record: HealthCheckRecord) -> "HealthCheckRecordDTO":
        return cls(
            node=record.node,
            service=record.service_name,
            service_id=record.service_id,
            notes=record.notes,
            datacenter=record.datacenter,
        )


class VerdictDTO(BaseModel):
    """Single verdict emitted by a check run."""

    severity: Severity = Field(description="Verdict level")
    exit_code: int = Field(description="Process exit code for the verdict")
    message: str = Field(description="Human readable summary")
    service: str = Field(description="Service the verdict is about")
    percent: Optional[float] = Field(
        default=None, description="Passing percentage, percentage checks only"
    )
    threshold: Optional[float] = Field(
        default=None, description="Breached threshold, if any"
    )
    records: List[HealthCheckRecordDTO] = Field(
        default_factory=list,
        description="Checks explaining a worst-status verdict",
    )

    @classmethod
    def from_domain(
        cls, outcome: ClassificationOutcome, exit_code: int
    ) -> "VerdictDTO":
        return cls(
            severity=outcome.severity,
            exit_code=exit_code,
            message=outcome.message,
            service=outcome.service,
            percent=outcome.percent,
            threshold=outcome.threshold,
            records=[HealthCheckRecordDTO.from_domain(r) for r in outcome.records],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "severity": "critical",
                "exit_code": 2,
                "message": "Service web has 1 critical check(s)",
                "service": "web",
                "percent": None,
                "threshold": None,
                "records": [
                    {
                        "node": "node-1",
                        "service": "web",
                        "service_id": "web-1",
                        "notes": "",
                        "datacenter": "dc1",
                    }
                ],
            }
        }
    }
