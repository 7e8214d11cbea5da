"""Audit report aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from faacheck.domain.model.audit_stats import AuditStats
from faacheck.domain.model.enums import Verdict, ViolationKind
from faacheck.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class AuditReport:
    """Result of auditing one module graph.

    Immutable aggregate. Used by ReporterProtocol.report().

    Attributes:
        violations: All violations, in input edge order
        stats: Audit statistics
        cycles: Import cycles (sorted module ids each). Informational,
            never affect the verdict.
    """

    violations: tuple[Violation, ...]
    stats: AuditStats
    cycles: tuple[tuple[str, ...], ...] = ()

    @property
    def verdict(self) -> Verdict:
        """PASS iff there are no violations."""
        return Verdict.FAIL if self.violations else Verdict.PASS

    @property
    def passed(self) -> bool:
        """Check if audit passed (no violations)."""
        return len(self.violations) == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    def of_kind(self, kind: ViolationKind) -> tuple[Violation, ...]:
        """Violations of one kind, in report order."""
        return tuple(v for v in self.violations if v.kind is kind)

    @classmethod
    def empty(cls) -> AuditReport:
        """Create empty report (passed, no violations)."""
        return cls(violations=(), stats=AuditStats.empty())
