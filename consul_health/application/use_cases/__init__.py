"""
Use Cases Package - Application Layer

Use cases orchestrate the Consul gateway and the domain classifiers:
resolve datacenters, collect check records, classify them.
"""

from .datacenter_use_cases import ResolveDatacentersUseCase
from .health_use_cases import CheckServiceHealthUseCase, CollectServiceHealthUseCase

__all__ = [
    "ResolveDatacentersUseCase",
    "CollectServiceHealthUseCase",
    "CheckServiceHealthUseCase",
]
