"""Use case resolving which datacenters a check has to query."""

from __future__ import annotations

from typing import Tuple

from consul_health.domain.entities.errors import ConsulConnectivityError
from consul_health.domain.entities.result import FailureKind, FetchResult
from consul_health.domain.gateways.consul_gateway import IConsulGateway
from consul_health.shared import ALL_DATACENTERS, get_logger

logger = get_logger(__name__)


class ResolveDatacentersUseCase:
    """Expand the datacenter selector into concrete datacenter names."""

    def __init__(self, consul_gateway: IConsulGateway) -> None:
        self._consul_gateway = consul_gateway

    async def execute(self, requested: str) -> FetchResult[Tuple[str, ...]]:
        if requested != ALL_DATACENTERS:
            # Unknown names surface later as an empty or failing fetch
            return FetchResult.success((requested,))

        try:
            datacenters = await self._consul_gateway.list_datacenters()
        except ConsulConnectivityError as exc:
            logger.warning("consul.datacenters.connection_error", error=str(exc))
            return FetchResult.failed(
                FailureKind.CONNECTIVITY, f"Connection error occurred: {exc}"
            )
        except Exception as exc:
            logger.error("consul.datacenters.unexpected_error", error=str(exc))
            return FetchResult.failed(
                FailureKind.UNEXPECTED,
                f"Exception occurred when getting consul datacenters: {exc}",
            )

        logger.debug("consul.datacenters.resolved", datacenters=datacenters)
        return FetchResult.success(tuple(datacenters))
