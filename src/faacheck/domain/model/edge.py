"""Import edge value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed "imports" reference between two modules.

    The edge set of a graph may contain cycles.

    Attributes:
        source: Id of the importing module
        target: Id of the imported module
    """

    source: str
    target: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("edge source must not be empty")
        if not self.target:
            raise ValueError("edge target must not be empty")

    def __str__(self) -> str:
        """Format as source → target."""
        return f"{self.source} → {self.target}"
