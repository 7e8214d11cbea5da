"""Audit statistics."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from faacheck.domain.model.enums import ViolationKind


@dataclass(frozen=True, slots=True)
class AuditStats:
    """Statistics from one audit run.

    Immutable value object tracking audit metrics.

    Attributes:
        modules_audited: Number of modules in the input
        edges_audited: Number of edges checked
        by_kind: Violation count per kind (kinds with zero omitted)
    """

    modules_audited: int
    edges_audited: int
    by_kind: Mapping[ViolationKind, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.modules_audited < 0:
            raise ValueError(f"modules_audited must be >= 0, got {self.modules_audited}")
        if self.edges_audited < 0:
            raise ValueError(f"edges_audited must be >= 0, got {self.edges_audited}")
        for kind, count in self.by_kind.items():
            if count < 1:
                raise ValueError(f"count for {kind.value} must be >= 1, got {count}")

    def count(self, kind: ViolationKind) -> int:
        """Number of violations of one kind."""
        return self.by_kind.get(kind, 0)

    @classmethod
    def empty(cls) -> AuditStats:
        """Create empty audit stats."""
        return cls(modules_audited=0, edges_audited=0)
