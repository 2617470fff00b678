"""
Domain Layer Package

This package contains the core health-classification rules. It defines
entities, gateway contracts and classifiers without dependencies on
external frameworks or infrastructure concerns.
"""

# Re-export submodules
from consul_health.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
