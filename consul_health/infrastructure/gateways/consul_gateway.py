"""Consul HTTP API gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from consul_health.domain.entities.errors import (
    ConsulConnectivityError,
    ConsulUnexpectedError,
)
from consul_health.domain.entities.health import HealthCheckRecord
from consul_health.domain.gateways.consul_gateway import IConsulGateway
from consul_health.shared import get_logger

logger = get_logger(__name__)

TOKEN_HEADER = "X-Consul-Token"


class _ConsulCheckPayload(BaseModel):
    """Entry of ``GET /v1/health/checks/:service`` (see Consul health API)."""

    node: str = Field(alias="Node")
    service_name: str = Field(default="", alias="ServiceName")
    service_id: str = Field(default="", alias="ServiceID")
    status: str = Field(alias="Status")
    notes: Optional[str] = Field(default="", alias="Notes")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_domain(self, datacenter: str) -> HealthCheckRecord:
        return HealthCheckRecord(
            node=self.node,
            service_name=self.service_name,
            service_id=self.service_id,
            status=self.status,
            notes=self.notes or "",
            datacenter=datacenter,
        )


_checks_adapter = TypeAdapter(List[_ConsulCheckPayload])
_datacenters_adapter = TypeAdapter(List[str])


class ConsulGateway(IConsulGateway):
    """Read-only HTTP client for the Consul agent API."""

    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        timeout: float = 5.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout

    async def list_datacenters(self) -> List[str]:
        """Return the datacenters known to the Consul catalog."""

        url = f"{self._base_url}/v1/catalog/datacenters"
        logger.debug("consul.datacenters.request", url=url)

        payload = await self._get_json(url, event="consul.datacenters")
        try:
            return _datacenters_adapter.validate_python(payload)
        except ValidationError as exc:
            logger.error("consul.datacenters.invalid_payload", error=str(exc))
            raise ConsulUnexpectedError(
                f"Unexpected datacenter listing from Consul: {exc}"
            ) from exc

    async def get_service_checks(
        self,
        service: str,
        *,
        datacenter: str,
    ) -> List[HealthCheckRecord]:
        """Return the health-check records of ``service`` in ``datacenter``."""

        url = f"{self._base_url}/v1/health/checks/{quote(service, safe='')}"
        logger.debug(
            "consul.health.request", url=url, service=service, datacenter=datacenter
        )

        payload = await self._get_json(
            url, event="consul.health", params={"dc": datacenter}
        )
        try:
            checks = _checks_adapter.validate_python(payload)
        except ValidationError as exc:
            logger.error(
                "consul.health.invalid_payload",
                service=service,
                datacenter=datacenter,
                error=str(exc),
            )
            raise ConsulUnexpectedError(
                f"Unexpected health checks payload for {service} in {datacenter}: "
                f"{exc}"
            ) from exc

        return [check.to_domain(datacenter) for check in checks]

    async def _get_json(
        self,
        url: str,
        *,
        event: str,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    url, params=params, headers=self._build_headers()
                )
                response.raise_for_status()
                return response.json()
        except (httpx.ConnectError, httpx.ConnectTimeout, httpx.NetworkError) as exc:
            logger.warning(f"{event}.connect_error", url=url, error=str(exc))
            raise ConsulConnectivityError(
                f"{type(exc).__name__}: {exc}", details={"url": url}
            ) from exc
        except httpx.TransportError as exc:
            # Read, write and pool timeouts, protocol and scheme errors
            logger.error(f"{event}.transport_error", url=url, error=str(exc))
            raise ConsulUnexpectedError(
                f"{type(exc).__name__}: {exc}", details={"url": url}
            ) from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                f"{event}.http_error",
                url=url,
                status_code=exc.response.status_code,
                response_text=exc.response.text,
            )
            raise ConsulUnexpectedError(
                f"Consul responded with HTTP {exc.response.status_code}: "
                f"{exc.response.text}",
                details={"url": url, "status_code": exc.response.status_code},
            ) from exc
        except ValueError as exc:
            logger.error(f"{event}.decode_error", url=url, error=str(exc))
            raise ConsulUnexpectedError(
                f"Invalid JSON received from Consul: {exc}", details={"url": url}
            ) from exc

    def _build_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Accept": "application/json"}
        if self._token:
            headers[TOKEN_HEADER] = self._token
        return headers
