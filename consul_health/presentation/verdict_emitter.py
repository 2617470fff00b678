"""Map classification outcomes onto the monitoring framework's convention.

Checks print ``<CheckName> <SEVERITY>: <text>`` on stdout and exit with
0 (ok), 1 (warning), 2 (critical) or 3 (unknown).
"""

from __future__ import annotations

import json
from typing import Dict

from consul_health.application.dtos import VerdictDTO
from consul_health.domain.entities.health import ClassificationOutcome, Severity

EXIT_CODES: Dict[Severity, int] = {
    Severity.OK: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
    Severity.UNKNOWN: 3,
}


class VerdictEmitter:
    """Expose one outcome as a verdict for a named check."""

    def __init__(self, check_name: str) -> None:
        self._check_name = check_name

    @property
    def check_name(self) -> str:
        return self._check_name

    def emit(self, outcome: ClassificationOutcome) -> VerdictDTO:
        return VerdictDTO.from_domain(outcome, exit_code=EXIT_CODES[outcome.severity])

    def render(self, verdict: VerdictDTO) -> str:
        if verdict.records:
            text = json.dumps(
                [record.model_dump() for record in verdict.records],
                separators=(",", ":"),
            )
        else:
            text = verdict.message
        return f"{self._check_name} {verdict.severity.value.upper()}: {text}"
