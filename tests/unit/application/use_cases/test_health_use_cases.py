from __future__ import annotations

import pytest

from consul_health.application.models import CheckOptions
from consul_health.application.use_cases.datacenter_use_cases import (
    ResolveDatacentersUseCase,
)
from consul_health.application.use_cases.health_use_cases import (
    CheckServiceHealthUseCase,
    CollectServiceHealthUseCase,
)
from consul_health.domain.entities.errors import (
    ConsulConnectivityError,
    ConsulUnexpectedError,
)
from consul_health.domain.entities.health import Severity
from consul_health.domain.entities.result import FailureKind
from consul_health.domain.services.classifiers import (
    PercentageClassifier,
    WorstStatusClassifier,
)


def _check_use_case(gateway, classifier) -> CheckServiceHealthUseCase:
    return CheckServiceHealthUseCase(
        resolve_datacenters_use_case=ResolveDatacentersUseCase(gateway),
        collect_service_health_use_case=CollectServiceHealthUseCase(gateway),
        classifier=classifier,
    )


@pytest.mark.asyncio
async def test_collect_concatenates_in_datacenter_order(fake_gateway) -> None:
    use_case = CollectServiceHealthUseCase(consul_gateway=fake_gateway)

    result = await use_case.execute("web", ("dc1", "dc2"))

    assert result.ok
    assert [record.node for record in result.value] == ["a", "b", "c", "d"]
    assert fake_gateway.queried == [("web", "dc1"), ("web", "dc2")]


@pytest.mark.asyncio
async def test_collect_empty_result_is_success(fake_gateway) -> None:
    use_case = CollectServiceHealthUseCase(consul_gateway=fake_gateway)

    result = await use_case.execute("missing", ("dc1", "dc2"))

    assert result.ok
    assert result.value == ()


@pytest.mark.asyncio
async def test_collect_connectivity_failure_short_circuits(fake_gateway) -> None:
    fake_gateway.check_errors["dc1"] = ConsulConnectivityError("ConnectError: down")
    use_case = CollectServiceHealthUseCase(consul_gateway=fake_gateway)

    result = await use_case.execute("web", ("dc1", "dc2"))

    assert result.failure.kind is FailureKind.CONNECTIVITY
    assert result.value is None
    assert fake_gateway.queried == [("web", "dc1")]


@pytest.mark.asyncio
async def test_collect_unexpected_failure_discards_partial_records(
    fake_gateway,
) -> None:
    fake_gateway.check_errors["dc2"] = ConsulUnexpectedError("HTTP 500")
    use_case = CollectServiceHealthUseCase(consul_gateway=fake_gateway)

    result = await use_case.execute("web", ("dc1", "dc2"))

    assert result.failure.kind is FailureKind.UNEXPECTED
    assert result.failure.message == (
        "Exception occurred when checking consul service: HTTP 500"
    )
    assert result.value is None


@pytest.mark.asyncio
async def test_check_all_datacenters_unions_records(fake_gateway) -> None:
    use_case = _check_use_case(fake_gateway, PercentageClassifier(50, 75))

    outcome = await use_case.execute(CheckOptions(service="web", datacenter="all"))

    assert fake_gateway.queried == [("web", "dc1"), ("web", "dc2")]
    assert outcome.severity is Severity.OK
    assert outcome.percent == 75.0


@pytest.mark.asyncio
async def test_check_worst_status_over_all_datacenters(fake_gateway) -> None:
    use_case = _check_use_case(fake_gateway, WorstStatusClassifier())

    outcome = await use_case.execute(CheckOptions(service="web"))

    assert outcome.severity is Severity.CRITICAL
    assert [record.node for record in outcome.records] == ["d"]
    assert outcome.records[0].datacenter == "dc2"


@pytest.mark.asyncio
async def test_check_single_datacenter(fake_gateway) -> None:
    use_case = _check_use_case(fake_gateway, WorstStatusClassifier())

    outcome = await use_case.execute(CheckOptions(service="web", datacenter="dc1"))

    assert fake_gateway.datacenter_calls == 0
    assert fake_gateway.queried == [("web", "dc1")]
    assert outcome.severity is Severity.OK


@pytest.mark.asyncio
async def test_missing_service_percentage_is_critical(fake_gateway) -> None:
    use_case = _check_use_case(fake_gateway, PercentageClassifier())

    outcome = await use_case.execute(CheckOptions(service="ghost"))

    assert outcome.severity is Severity.CRITICAL
    assert outcome.message == "Could not find service ghost. Are checks defined?"


@pytest.mark.asyncio
async def test_missing_service_worst_status_is_unknown(fake_gateway) -> None:
    use_case = _check_use_case(fake_gateway, WorstStatusClassifier())

    outcome = await use_case.execute(CheckOptions(service="ghost"))

    assert outcome.severity is Severity.UNKNOWN
    assert outcome.message == "Could not find service ghost. Are checks defined?"


@pytest.mark.asyncio
async def test_connectivity_failure_yields_single_warning(fake_gateway) -> None:
    fake_gateway.check_errors["dc1"] = ConsulConnectivityError("ConnectError: down")
    use_case = _check_use_case(fake_gateway, PercentageClassifier())

    outcome = await use_case.execute(CheckOptions(service="web"))

    assert outcome.severity is Severity.WARNING
    assert outcome.message == "Connection error occurred: ConnectError: down"
    assert outcome.percent is None
    assert fake_gateway.queried == [("web", "dc1")]


@pytest.mark.asyncio
async def test_datacenter_listing_failure_stops_before_fetching(
    unreachable_gateway,
) -> None:
    use_case = _check_use_case(unreachable_gateway, WorstStatusClassifier())

    outcome = await use_case.execute(CheckOptions(service="web"))

    assert outcome.severity is Severity.WARNING
    assert unreachable_gateway.queried == []


@pytest.mark.asyncio
async def test_unexpected_failure_yields_unknown(fake_gateway) -> None:
    fake_gateway.datacenter_error = ConsulUnexpectedError("bad payload")
    use_case = _check_use_case(fake_gateway, PercentageClassifier())

    outcome = await use_case.execute(CheckOptions(service="web"))

    assert outcome.severity is Severity.UNKNOWN
    assert "bad payload" in outcome.message
