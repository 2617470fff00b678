"""
Logging Configuration - Shared Layer

Every record is rendered by structlog, either from a structlog logger or
through the stdlib ``logging`` bridge. The console handler writes the
rendered event to stderr, keeping stdout free for the check verdict. An
optional log file gets the same event wrapped in the ``LOG_FORMAT`` line
template (timestamp, logger name, level), so it can be tailed alongside
other Sensu plugin logs.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from consul_health.shared.consts import EnumEnvironment

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TIMESTAMPER = structlog.processors.TimeStamper(fmt="iso", utc=True)

# Applied to records that come from plain stdlib loggers
_FOREIGN_PRE_CHAIN: List[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    _TIMESTAMPER,
]


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def _build_formatter(
    renderer: Processor, fmt: Optional[str] = None
) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_FOREIGN_PRE_CHAIN,
        fmt=fmt,
    )


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Route stdlib logging and structlog through the same handlers.

    Explicit arguments win over ``LOG_LEVEL``, ``LOG_FORMAT`` and
    ``LOG_FILE_PATH``; the bootstrap call in the CLI passes none of them.

    Args:
        level: Log level name, unknown names fall back to WARNING.
        format_string: ``logging`` line template for the log file.
        file_path: Log file to append to, in addition to stderr.
        environment: ``production`` renders JSON, anything else key=value.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL
    log_format = format_string or os.environ.get("LOG_FORMAT") or DEFAULT_LOG_FORMAT
    log_file = file_path or os.environ.get("LOG_FILE_PATH")

    renderer = _select_renderer(environment)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(_build_formatter(renderer))
    handlers: List[logging.Handler] = [console_handler]

    file_error: Optional[Exception] = None
    if log_file:
        try:
            file_formatter = _build_formatter(renderer, fmt=log_format)
            file_handler = logging.FileHandler(log_file)
        except (OSError, ValueError) as exc:
            file_error = exc
        else:
            file_handler.setFormatter(file_formatter)
            handlers.append(file_handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _TIMESTAMPER,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    if file_error is not None:
        get_logger(__name__).warning(
            "logging.file.unavailable", file_path=log_file, error=str(file_error)
        )


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from the ``logging`` and ``environment`` settings."""

    section = settings.logging
    configure_logging(
        level=getattr(section.level, "value", section.level),
        format_string=section.format,
        file_path=section.file_path,
        environment=getattr(settings.environment, "value", settings.environment),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the checks."""
    return structlog.get_logger(name)
