"""Consul gateway interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from consul_health.domain.entities.health import HealthCheckRecord


class IConsulGateway(ABC):
    """Read-only operations required against a Consul cluster."""

    @abstractmethod
    async def list_datacenters(self) -> List[str]:
        """Return every datacenter known to the cluster."""
        raise NotImplementedError

    @abstractmethod
    async def get_service_checks(
        self,
        service: str,
        *,
        datacenter: str,
    ) -> List[HealthCheckRecord]:
        """Return the health-check records of a service in one datacenter.

        Raises:
            ConsulConnectivityError: Consul could not be reached.
            ConsulUnexpectedError: Any other failure, including bad payloads.
        """
        raise NotImplementedError
