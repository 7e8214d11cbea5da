"""Assertion helpers for architecture tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from faacheck.domain.exceptions.violation import ArchitectureViolationError

if TYPE_CHECKING:
    from faacheck.domain.model.audit_report import AuditReport


def assert_architecture(report: AuditReport) -> None:
    """Fail with every violation if the report did not pass.

    Args:
        report: Audit report to check

    Raises:
        ArchitectureViolationError: Report has violations
    """
    if not report.passed:
        raise ArchitectureViolationError(report.violations)
