from __future__ import annotations

import dataclasses

import pytest

from consul_health.domain.entities.health import (
    CheckStatus,
    ClassificationOutcome,
    HealthCheckRecord,
    Severity,
)


def test_record_status_matching_is_exact() -> None:
    record = HealthCheckRecord(
        node="n1", service_name="web", service_id="web-1", status="passing"
    )
    assert record.has_status(CheckStatus.PASSING)
    assert not record.has_status(CheckStatus.WARNING)

    upper = dataclasses.replace(record, status="PASSING")
    assert not upper.has_status(CheckStatus.PASSING)


def test_record_defaults_and_immutability() -> None:
    record = HealthCheckRecord(
        node="n1", service_name="web", service_id="web-1", status="critical"
    )
    assert record.notes == ""
    assert record.datacenter is None

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.status = "passing"  # type: ignore[misc]


def test_outcome_defaults() -> None:
    outcome = ClassificationOutcome(
        severity=Severity.OK, message="fine", service="web"
    )
    assert outcome.records == ()
    assert outcome.percent is None
    assert outcome.threshold is None
