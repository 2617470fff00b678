"""
Domain Entities Package

Records, outcomes, errors and result types shared by every layer.
"""

from .errors import ConsulConnectivityError, ConsulUnexpectedError, DomainError
from .health import CheckStatus, ClassificationOutcome, HealthCheckRecord, Severity
from .result import FailureKind, FetchFailure, FetchResult

__all__ = [
    "CheckStatus",
    "ClassificationOutcome",
    "ConsulConnectivityError",
    "ConsulUnexpectedError",
    "DomainError",
    "FailureKind",
    "FetchFailure",
    "FetchResult",
    "HealthCheckRecord",
    "Severity",
]
