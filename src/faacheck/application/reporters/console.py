"""Console reporter: AuditReport → rich formatted output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from faacheck.application.reporters._base import BaseReporter
from faacheck.domain.model.enums import ViolationKind

if TYPE_CHECKING:
    from faacheck.domain.model.audit_report import AuditReport

_KIND_STYLES = {
    ViolationKind.UPWARD_IMPORT: "bold red",
    ViolationKind.HORIZONTAL_IMPORT: "red",
    ViolationKind.PRIVATE_BOUNDARY_BREACH: "yellow",
    ViolationKind.MISSING_PUBLIC_SURFACE: "magenta",
}


class ConsoleReporter(BaseReporter):
    """Console reporter: renders the report with rich tables and colors.

    Output goes to the given Console. Pass
    Console(file=StringIO(), force_terminal=True) to capture it.
    """

    def __init__(self, console: Console | None = None, *, show_suggestions: bool = True) -> None:
        """Initialize reporter.

        Args:
            console: Target console (default: stdout console)
            show_suggestions: Add a suggestion column to the violations table
        """
        self._console = console if console is not None else Console()
        self._show_suggestions = show_suggestions

    def report(self, report: AuditReport) -> None:
        """Render audit report.

        Args:
            report: Complete audit report
        """
        console = self._console

        console.print()
        console.rule("[bold]LAYER AUDIT[/bold]")
        console.print()
        console.print(
            f"[bold]Modules:[/bold] {report.stats.modules_audited}  "
            f"[bold]Edges:[/bold] {report.stats.edges_audited}  "
            f"[bold]Violations:[/bold] {report.violation_count}"
        )
        console.print()

        if report.violations:
            self._render_violations(report)

        if report.cycles:
            self._render_cycles(report)

        if report.passed:
            console.print("[bold green]PASS[/bold green]")
        else:
            console.print(f"[bold red]FAIL[/bold red] ({report.violation_count} violation(s))")
        console.print()

    def _render_violations(self, report: AuditReport) -> None:
        """Render violations table."""
        table = Table(title="Violations", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind")
        table.add_column("From")
        table.add_column("To")
        table.add_column("Message")
        if self._show_suggestions:
            table.add_column("Suggestion", style="dim")

        for i, violation in enumerate(report.violations, start=1):
            style = _KIND_STYLES[violation.kind]
            row = [
                str(i),
                f"[{style}]{violation.kind.value}[/{style}]",
                escape(violation.source),
                escape(violation.target),
                escape(violation.message),
            ]
            if self._show_suggestions:
                row.append(escape(violation.suggestion or ""))
            table.add_row(*row)

        self._console.print(table)
        self._console.print()

    def _render_cycles(self, report: AuditReport) -> None:
        """Render import cycles (informational)."""
        self._console.print(f"[bold yellow]IMPORT CYCLES[/bold yellow] ({len(report.cycles)})")
        for cycle in report.cycles:
            self._console.print(f"  {escape(' ↔ '.join(cycle))}")
        self._console.print()
