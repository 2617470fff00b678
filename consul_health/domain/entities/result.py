"""Explicit success/failure values returned by the resolver and collector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from consul_health.domain.entities.health import Severity

T = TypeVar("T")


class FailureKind(str, Enum):
    CONNECTIVITY = "connectivity"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """Why a query against Consul could not be completed."""

    kind: FailureKind
    message: str

    @property
    def severity(self) -> Severity:
        # Network trouble is operator-actionable, anything else is indeterminate
        if self.kind is FailureKind.CONNECTIVITY:
            return Severity.WARNING
        return Severity.UNKNOWN


@dataclass(frozen=True, slots=True)
class FetchResult(Generic[T]):
    """Either the fetched value or the failure that prevented it."""

    value: Optional[T] = None
    failure: Optional[FetchFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failed(cls, kind: FailureKind, message: str) -> "FetchResult[T]":
        return cls(failure=FetchFailure(kind=kind, message=message))
