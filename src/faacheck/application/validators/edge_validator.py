"""Layer direction validator.

Decides whether an import edge respects the layer order
App > Feature > Entity > Shared and slice isolation inside a layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from faacheck.domain.model.enums import ViolationKind
from faacheck.domain.model.validation_result import ValidationResult

if TYPE_CHECKING:
    from faacheck.domain.model.edge import Edge
    from faacheck.domain.model.module import Module


class EdgeValidator:
    """Layer direction validator.

    Decision table:
        source rank < target rank          → UpwardImport
        same sliced layer, same slice      → allowed
        same sliced layer, other slice     → HorizontalImport
        source rank > target rank          → allowed, boundary check needed
        App → App, Shared → Shared         → allowed

    Stateless; safe to share between threads.
    """

    def validate(self, edge: Edge, source: Module, target: Module) -> ValidationResult:
        """Validate one edge.

        Args:
            edge: Edge being checked
            source: Classified importing module
            target: Classified imported module

        Returns:
            Allowed (possibly with crosses_boundary) or UpwardImport /
            HorizontalImport rejection

        Raises:
            ValueError: If modules do not match the edge ends
        """
        if edge.source != source.id or edge.target != target.id:
            raise ValueError(f"modules {source.id!r}, {target.id!r} do not match edge {edge}")

        if source.rank < target.rank:
            return ValidationResult.reject(
                ViolationKind.UPWARD_IMPORT,
                f"{source.layer.value} module '{source.id}' imports "
                f"{target.layer.value} module '{target.id}'; "
                "imports must point down (app → feature → entity → shared)",
            )

        if source.rank > target.rank:
            return ValidationResult.allow(
                f"downward import {source.layer.value} → {target.layer.value}",
                crosses_boundary=True,
            )

        if not source.layer.is_sliced:
            return ValidationResult.allow(f"{source.layer.value} modules share one space")

        if source.slice_key == target.slice_key:
            return ValidationResult.allow(f"inside {source.layer.value} slice '{source.slice}'")

        return ValidationResult.reject(
            ViolationKind.HORIZONTAL_IMPORT,
            f"{source.layer.value} slice '{source.slice}' imports sibling "
            f"{target.layer.value} slice '{target.slice}' ('{source.id}' → '{target.id}')",
        )
