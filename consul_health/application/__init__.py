"""
Application Layer Package

This package contains the check use cases. They orchestrate the flow of
data from the Consul gateway to the domain classifiers and shape the
result for the presentation layer.
"""

# Re-export submodules
from consul_health.application import dtos, models, use_cases

__all__ = ["dtos", "models", "use_cases"]
