"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from faacheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from faacheck.domain.model.audit_report import AuditReport
    from faacheck.domain.model.violation import Violation


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, report: AuditReport) -> None:
        """Report audit results as plain text.

        Args:
            report: Complete audit report
        """
        self._report_header()
        self._report_summary(report)

        if report.violations:
            self._report_violations(report.violations)

        if report.cycles:
            self._report_cycles(report.cycles)

        self._report_footer(report)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self) -> None:
        """Print report header."""
        self._write("=" * 70)
        self._write("Layer Audit Results")
        self._write("=" * 70)

    def _report_summary(self, report: AuditReport) -> None:
        """Print summary section."""
        self._write()
        self._write("Summary:")
        self._write(f"  Modules: {report.stats.modules_audited}")
        self._write(f"  Edges: {report.stats.edges_audited}")
        self._write(f"  Violations: {report.violation_count}")
        for kind, count in report.stats.by_kind.items():
            self._write(f"    {kind.value}: {count}")
        self._write(f"  Cycles: {len(report.cycles)}")
        self._write(f"  Verdict: {report.verdict.value.upper()}")

    def _report_violations(self, violations: tuple[Violation, ...]) -> None:
        """Print violations section."""
        self._write()
        self._write("-" * 70)
        self._write(f"Violations ({len(violations)}):")
        self._write("-" * 70)

        for i, violation in enumerate(violations, start=1):
            self._write()
            self._write(f"{i}. [{violation.kind.value}] {violation.source} → {violation.target}")
            self._write(f"   {violation.message}")
            if violation.suggestion:
                self._write(f"   Suggestion: {violation.suggestion}")

    def _report_cycles(self, cycles: tuple[tuple[str, ...], ...]) -> None:
        """Print cycles section."""
        self._write()
        self._write("-" * 70)
        self._write(f"Import cycles ({len(cycles)}, informational):")
        self._write("-" * 70)

        for i, cycle in enumerate(cycles, start=1):
            self._write(f"{i}. {', '.join(cycle)}")

    def _report_footer(self, report: AuditReport) -> None:
        """Print report footer."""
        self._write()
        self._write("=" * 70)
        status = "PASSED" if report.passed else "FAILED"
        self._write(f"Result: {status}")
        self._write("=" * 70)
