"""
Consul service health checks.

Layer Structure:
- Domain: Check records, outcomes and the two classification policies
- Application: Resolve / collect / check use cases and DTOs
- Infrastructure: Consul HTTP API gateway
- Presentation: Verdict emitter (exit codes and output line)
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, settings and command line entry points
"""

__version__ = "1.0.0"
