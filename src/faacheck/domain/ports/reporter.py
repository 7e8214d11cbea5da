"""Reporter protocol for output formatting.

Users extend faacheck by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from faacheck.domain.model.audit_report import AuditReport


class ReporterProtocol(Protocol):
    """Contract for reporters.

    faacheck provides PlainTextReporter, JSONReporter and ConsoleReporter.
    Users can implement SARIF, JUnit XML, etc.

    Example:
        class CountReporter:
            def report(self, report: AuditReport) -> None:
                print(f"{report.verdict.value}: {report.violation_count} violation(s)")
    """

    def report(self, report: AuditReport) -> None:
        """Report audit results.

        Implementation decides output format and destination.

        Args:
            report: Complete audit report
        """
        ...
