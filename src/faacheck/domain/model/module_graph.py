"""Module graph as supplied by a front-end."""

from __future__ import annotations

from dataclasses import dataclass

from faacheck.domain.model.edge import Edge
from faacheck.domain.model.module import Module, ModuleMetadata


@dataclass(frozen=True, slots=True)
class ModuleGraph:
    """Input of one audit run.

    A front-end may send modules already classified, or only their paths
    (plus optional overrides) for faacheck to classify.

    Attributes:
        modules: Pre-classified modules
        entries: (path, metadata) pairs still to classify
        edges: Import edges in report order
    """

    modules: tuple[Module, ...] = ()
    entries: tuple[tuple[str, ModuleMetadata | None], ...] = ()
    edges: tuple[Edge, ...] = ()

    @property
    def module_count(self) -> int:
        """Number of module records (before de-duplication)."""
        return len(self.modules) + len(self.entries)
