from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import pytest

from consul_health.domain.entities.errors import ConsulConnectivityError
from consul_health.domain.entities.health import HealthCheckRecord
from consul_health.domain.gateways.consul_gateway import IConsulGateway

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


RecordFactory = Callable[..., HealthCheckRecord]


def build_record(
    status: str = "passing",
    *,
    node: str = "node-1",
    service: str = "web",
    service_id: Optional[str] = None,
    notes: str = "",
    datacenter: Optional[str] = "dc1",
) -> HealthCheckRecord:
    return HealthCheckRecord(
        node=node,
        service_name=service,
        service_id=service_id or f"{service}-{node}",
        status=status,
        notes=notes,
        datacenter=datacenter,
    )


def build_records(*statuses: str, service: str = "web") -> List[HealthCheckRecord]:
    return [
        build_record(status, node=f"node-{idx}", service=service)
        for idx, status in enumerate(statuses, start=1)
    ]


@pytest.fixture()
def make_record() -> RecordFactory:
    return build_record


@pytest.fixture()
def make_records() -> Callable[..., List[HealthCheckRecord]]:
    return build_records


class FakeConsulGateway(IConsulGateway):
    """In-memory Consul gateway recording the queries it receives."""

    def __init__(
        self,
        datacenters: Sequence[str] = ("dc1",),
        checks: Optional[Dict[str, Sequence[HealthCheckRecord]]] = None,
        *,
        datacenter_error: Optional[Exception] = None,
        check_errors: Optional[Dict[str, Exception]] = None,
    ) -> None:
        self.datacenters = list(datacenters)
        self.checks = {dc: list(records) for dc, records in (checks or {}).items()}
        self.datacenter_error = datacenter_error
        self.check_errors = check_errors or {}
        self.datacenter_calls = 0
        self.queried: List[tuple[str, str]] = []

    async def list_datacenters(self) -> List[str]:
        self.datacenter_calls += 1
        if self.datacenter_error is not None:
            raise self.datacenter_error
        return list(self.datacenters)

    async def get_service_checks(
        self, service: str, *, datacenter: str
    ) -> List[HealthCheckRecord]:
        self.queried.append((service, datacenter))
        error = self.check_errors.get(datacenter)
        if error is not None:
            raise error
        return [
            record
            for record in self.checks.get(datacenter, [])
            if record.service_name == service
        ]


@pytest.fixture()
def fake_gateway() -> FakeConsulGateway:
    return FakeConsulGateway(
        datacenters=("dc1", "dc2"),
        checks={
            "dc1": [
                build_record("passing", node="a", datacenter="dc1"),
                build_record("passing", node="b", datacenter="dc1"),
            ],
            "dc2": [
                build_record("passing", node="c", datacenter="dc2"),
                build_record("critical", node="d", datacenter="dc2"),
            ],
        },
    )


@pytest.fixture()
def unreachable_gateway() -> FakeConsulGateway:
    return FakeConsulGateway(
        datacenters=("dc1", "dc2"),
        datacenter_error=ConsulConnectivityError("ConnectError: connection refused"),
        check_errors={
            "dc1": ConsulConnectivityError("ConnectError: connection refused"),
            "dc2": ConsulConnectivityError("ConnectError: connection refused"),
        },
    )
