"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .consul_gateway import IConsulGateway

__all__ = ["IConsulGateway"]
