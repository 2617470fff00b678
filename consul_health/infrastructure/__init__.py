"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the Consul HTTP API.
"""

from consul_health.infrastructure import gateways

__all__ = ["gateways"]
