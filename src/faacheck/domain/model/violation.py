"""Rule violation entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from faacheck.domain.model.enums import ViolationKind


@dataclass(frozen=True, slots=True)
class Violation:
    """One forbidden edge.

    Attributes:
        kind: Which rule was broken
        source: Importing module id
        target: Imported module id
        message: Human-readable explanation
        suggestion: Fix suggestion
    """

    kind: ViolationKind
    source: str
    target: str
    message: str
    suggestion: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("source must not be empty")
        if not self.target:
            raise ValueError("target must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format violation for display."""
        lines = [
            f"[{self.kind.value}] {self.source} → {self.target}",
            f"  {self.message}",
        ]
        if self.suggestion:
            lines.append(f"  suggestion: {self.suggestion}")
        return "\n".join(lines)
