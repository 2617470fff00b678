"""Use cases collecting and classifying the health of a Consul service."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from consul_health.application.models import CheckOptions
from consul_health.application.use_cases.datacenter_use_cases import (
    ResolveDatacentersUseCase,
)
from consul_health.domain.entities.errors import ConsulConnectivityError
from consul_health.domain.entities.health import (
    ClassificationOutcome,
    HealthCheckRecord,
)
from consul_health.domain.entities.result import (
    FailureKind,
    FetchFailure,
    FetchResult,
)
from consul_health.domain.gateways.consul_gateway import IConsulGateway
from consul_health.domain.ports.status_classifier import IStatusClassifier
from consul_health.shared import get_logger

logger = get_logger(__name__)


class CollectServiceHealthUseCase:
    """Gather the check records of a service across datacenters."""

    def __init__(self, consul_gateway: IConsulGateway) -> None:
        self._consul_gateway = consul_gateway

    async def execute(
        self, service: str, datacenters: Sequence[str]
    ) -> FetchResult[Tuple[HealthCheckRecord, ...]]:
        """Fetch datacenters one after another, stopping at the first failure.

        A partial aggregate is never returned: if any datacenter cannot be
        read, the whole collection is reported as failed.
        """

        records: List[HealthCheckRecord] = []

        for datacenter in datacenters:
            try:
                checks = await self._consul_gateway.get_service_checks(
                    service, datacenter=datacenter
                )
            except ConsulConnectivityError as exc:
                logger.warning(
                    "consul.health.connection_error",
                    service=service,
                    datacenter=datacenter,
                    error=str(exc),
                )
                return FetchResult.failed(
                    FailureKind.CONNECTIVITY, f"Connection error occurred: {exc}"
                )
            except Exception as exc:
                logger.error(
                    "consul.health.unexpected_error",
                    service=service,
                    datacenter=datacenter,
                    error=str(exc),
                )
                return FetchResult.failed(
                    FailureKind.UNEXPECTED,
                    f"Exception occurred when checking consul service: {exc}",
                )

            logger.debug(
                "consul.health.collected",
                service=service,
                datacenter=datacenter,
                count=len(checks),
            )
            records.extend(checks)

        return FetchResult.success(tuple(records))


class CheckServiceHealthUseCase:
    """Resolve, collect and classify: one verdict per invocation."""

    def __init__(
        self,
        resolve_datacenters_use_case: ResolveDatacentersUseCase,
        collect_service_health_use_case: CollectServiceHealthUseCase,
        classifier: IStatusClassifier,
    ) -> None:
        self._resolve_datacenters = resolve_datacenters_use_case
        self._collect_service_health = collect_service_health_use_case
        self._classifier = classifier

    async def execute(self, options: CheckOptions) -> ClassificationOutcome:
        service = options.service

        datacenters = await self._resolve_datacenters.execute(options.datacenter)
        if datacenters.failure is not None:
            return self._from_failure(service, datacenters.failure)

        collected = await self._collect_service_health.execute(
            service, datacenters.value or ()
        )
        if collected.failure is not None:
            return self._from_failure(service, collected.failure)

        records = collected.value or ()
        if not records:
            logger.info("check.service.not_found", service=service)
            return ClassificationOutcome(
                severity=self._classifier.missing_service_severity,
                message=f"Could not find service {service}. Are checks defined?",
                service=service,
            )

        outcome = self._classifier.classify(service, records)
        logger.info(
            "check.service.classified",
            service=service,
            severity=outcome.severity.value,
            records=len(records),
        )
        return outcome

    def _from_failure(
        self, service: str, failure: FetchFailure
    ) -> ClassificationOutcome:
        return ClassificationOutcome(
            severity=failure.severity,
            message=failure.message,
            service=service,
        )
