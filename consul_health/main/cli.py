"""
Command line entry points - Main Layer

Two checks share one skeleton:

    check-consul-service-health --consul http://my-consul:8500 -s influxdb
    check-consul-service-health -d dc1 -s nginx
    check-consul-service-health-percent -s influxdb -w 75 -c 50

Each invocation prints exactly one verdict line on stdout and exits with
the verdict's code (0 ok, 1 warning, 2 critical, 3 unknown).
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

import click

from consul_health.domain.entities.health import ClassificationOutcome, Severity
from consul_health.presentation import VerdictEmitter
from consul_health.shared import (
    DEFAULT_SERVICE,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

from .config import apply_overrides, get_settings
from .container import (
    SERVICE_HEALTH_CHECK_NAME,
    SERVICE_HEALTH_PERCENT_CHECK_NAME,
    AppContainer,
    init_container,
)

logger = get_logger(__name__)


def _consul_options(func: Callable) -> Callable:
    func = click.option(
        "-s",
        "--service",
        default=None,
        help="A service managed by consul (default: consul)",
    )(func)
    func = click.option(
        "-d",
        "--datacenter",
        default=None,
        help="Consul datacenter to query (query all datacenters by default)",
    )(func)
    func = click.option(
        "--consul",
        "consul_url",
        metavar="SERVER",
        default=None,
        help="Consul server (default: http://localhost:8500)",
    )(func)
    return func


def _run_check(
    *,
    percent: bool,
    consul_url: Optional[str],
    datacenter: Optional[str],
    service: Optional[str],
    critical: Optional[float] = None,
    warning: Optional[float] = None,
) -> None:
    configure_logging()
    emitter = VerdictEmitter(
        SERVICE_HEALTH_PERCENT_CHECK_NAME if percent else SERVICE_HEALTH_CHECK_NAME
    )
    service_name = service or DEFAULT_SERVICE

    # Invalid settings or wiring must still end in a single verdict line
    try:
        settings = apply_overrides(
            get_settings(),
            consul_url=consul_url,
            datacenter=datacenter,
            service=service,
            critical=critical,
            warning=warning,
        )
        update_logging_from_settings(settings)

        container: AppContainer = init_container(settings)
        options = container.check_options()
        service_name = options.service
        if percent:
            use_case = container.service_health_percent_use_case()
            emitter = container.service_health_percent_emitter()
        else:
            use_case = container.service_health_use_case()
            emitter = container.service_health_emitter()

        outcome = asyncio.run(use_case.execute(options))
    except Exception as exc:
        logger.exception("check.run.failed", service=service_name)
        reason = " ".join(str(exc).split())
        outcome = ClassificationOutcome(
            severity=Severity.UNKNOWN,
            message=f"Check failed to run: {reason}",
            service=service_name,
        )

    verdict = emitter.emit(outcome)
    click.echo(emitter.render(verdict))
    raise SystemExit(verdict.exit_code)


@click.command("service-health")
@_consul_options
def service_health_cmd(
    consul_url: Optional[str], datacenter: Optional[str], service: Optional[str]
) -> None:
    """Report the worst check status of a Consul service."""
    _run_check(
        percent=False,
        consul_url=consul_url,
        datacenter=datacenter,
        service=service,
    )


@click.command("service-health-percent")
@_consul_options
@click.option(
    "-c",
    "--critical",
    type=click.FloatRange(0, 100),
    default=None,
    help="Critical threshold for service (default: 50)",
)
@click.option(
    "-w",
    "--warning",
    type=click.FloatRange(0, 100),
    default=None,
    help="Warning threshold for service (default: 75)",
)
def service_health_percent_cmd(
    consul_url: Optional[str],
    datacenter: Optional[str],
    service: Optional[str],
    critical: Optional[float],
    warning: Optional[float],
) -> None:
    """Check which percent of a Consul service is healthy."""
    _run_check(
        percent=True,
        consul_url=consul_url,
        datacenter=datacenter,
        service=service,
        critical=critical,
        warning=warning,
    )


@click.group()
def cli() -> None:
    """Consul service health checks."""


cli.add_command(service_health_cmd)
cli.add_command(service_health_percent_cmd)


def main() -> None:
    cli(prog_name="consul-health")
