"""
Presentation Layer Package

Turns classification outcomes into the verdict line and exit code
expected by Sensu/Nagios style monitoring frameworks.
"""

from .verdict_emitter import EXIT_CODES, VerdictEmitter

__all__ = ["EXIT_CODES", "VerdictEmitter"]
