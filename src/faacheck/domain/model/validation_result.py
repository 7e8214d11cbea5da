"""Outcome of checking one edge against one rule step."""

from __future__ import annotations

from dataclasses import dataclass

from faacheck.domain.model.enums import ViolationKind


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of a single rule step for one edge.

    Attributes:
        kind: Violated rule, None if the edge is allowed
        reason: Why the edge was allowed or rejected
        crosses_boundary: Edge goes strictly downward and still needs
            the public-surface check
    """

    kind: ViolationKind | None
    reason: str
    crosses_boundary: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.reason:
            raise ValueError("reason must not be empty")
        if self.kind is not None and self.crosses_boundary:
            raise ValueError("rejected edge cannot require a boundary check")

    @property
    def allowed(self) -> bool:
        """Edge passed this step."""
        return self.kind is None

    @classmethod
    def allow(cls, reason: str, *, crosses_boundary: bool = False) -> ValidationResult:
        """Create an allowing result."""
        return cls(kind=None, reason=reason, crosses_boundary=crosses_boundary)

    @classmethod
    def reject(cls, kind: ViolationKind, reason: str) -> ValidationResult:
        """Create a rejecting result."""
        return cls(kind=kind, reason=reason)
