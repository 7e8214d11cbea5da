"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from faacheck.domain.model.audit_report import AuditReport


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.

    Example:
        class MyReporter(BaseReporter):
            def report(self, report: AuditReport) -> None:
                print(f"Violations: {report.violation_count}")
    """

    @abstractmethod
    def report(self, report: AuditReport) -> None:
        """Report audit results.

        Implementation decides output format and destination.

        Args:
            report: Complete audit report
        """
