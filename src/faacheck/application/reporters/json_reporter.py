"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from faacheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from faacheck.domain.model.audit_report import AuditReport
    from faacheck.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs audit reports as JSON for CI/CD integration or
    parsing by other tools. Key order is fixed, so identical
    reports serialize to identical bytes.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, report: AuditReport) -> None:
        """Report audit results as JSON.

        Args:
            report: Complete audit report
        """
        json.dump(report_to_dict(report), self._output, indent=self._indent, ensure_ascii=False)
        self._output.write("\n")


def report_to_dict(report: AuditReport) -> dict[str, object]:
    """Convert AuditReport to JSON-serializable dict.

    Shape: {verdict, violations: [{kind, from, to, message, suggestion}],
    cycles, stats}.
    """
    return {
        "verdict": report.verdict.value,
        "violations": [_violation_to_dict(v) for v in report.violations],
        "cycles": [list(cycle) for cycle in report.cycles],
        "stats": {
            "modules_audited": report.stats.modules_audited,
            "edges_audited": report.stats.edges_audited,
            "violation_count": report.violation_count,
            "by_kind": {kind.value: count for kind, count in report.stats.by_kind.items()},
        },
    }


def _violation_to_dict(violation: Violation) -> dict[str, object]:
    """Convert Violation to JSON-serializable dict."""
    return {
        "kind": violation.kind.value,
        "from": violation.source,
        "to": violation.target,
        "message": violation.message,
        "suggestion": violation.suggestion,
    }
