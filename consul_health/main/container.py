"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
wiring the Consul gateway, the use cases and the two checks.
"""

from dependency_injector import containers, providers

from consul_health.application.models import CheckOptions
from consul_health.application.use_cases import (
    CheckServiceHealthUseCase,
    CollectServiceHealthUseCase,
    ResolveDatacentersUseCase,
)
from consul_health.domain.services import PercentageClassifier, WorstStatusClassifier
from consul_health.infrastructure.gateways import ConsulGateway
from consul_health.presentation import VerdictEmitter
from consul_health.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)

SERVICE_HEALTH_CHECK_NAME = "CheckConsulServiceHealth"
SERVICE_HEALTH_PERCENT_CHECK_NAME = "CheckConsulServiceHealthPercent"


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    # Settings
    config = providers.Configuration()

    check_options = providers.Singleton(
        CheckOptions,
        service=config.check.service,
        datacenter=config.check.datacenter,
        critical=config.check.critical,
        warning=config.check.warning,
    )

    # Infrastructure
    consul_gateway = providers.Singleton(
        ConsulGateway,
        base_url=config.consul.url,
        token=config.consul.token,
        timeout=config.consul.timeout,
    )

    # Domain services
    percentage_classifier = providers.Factory(
        PercentageClassifier,
        critical=check_options.provided.critical,
        warning=check_options.provided.warning,
    )

    worst_status_classifier = providers.Factory(WorstStatusClassifier)

    # Application (use cases)
    resolve_datacenters_use_case = providers.Factory(
        ResolveDatacentersUseCase,
        consul_gateway=consul_gateway,
    )

    collect_service_health_use_case = providers.Factory(
        CollectServiceHealthUseCase,
        consul_gateway=consul_gateway,
    )

    service_health_use_case = providers.Factory(
        CheckServiceHealthUseCase,
        resolve_datacenters_use_case=resolve_datacenters_use_case,
        collect_service_health_use_case=collect_service_health_use_case,
        classifier=worst_status_classifier,
    )

    service_health_percent_use_case = providers.Factory(
        CheckServiceHealthUseCase,
        resolve_datacenters_use_case=resolve_datacenters_use_case,
        collect_service_health_use_case=collect_service_health_use_case,
        classifier=percentage_classifier,
    )

    # Presentation
    service_health_emitter = providers.Factory(
        VerdictEmitter,
        check_name=SERVICE_HEALTH_CHECK_NAME,
    )

    service_health_percent_emitter = providers.Factory(
        VerdictEmitter,
        check_name=SERVICE_HEALTH_PERCENT_CHECK_NAME,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with the given settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.debug(
        "container.initialized",
        consul_url=settings.consul.url,
        service=settings.check.service,
        datacenter=settings.check.datacenter,
    )
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
