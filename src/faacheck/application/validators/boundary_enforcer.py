"""Public surface enforcer.

A slice is only reachable from outside through its public surface.
Applied to downward edges whose target lives in a Feature or Entity slice.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from faacheck.domain.model.enums import ViolationKind
from faacheck.domain.model.validation_result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from faacheck.domain.model.module import Module, SliceKey


class BoundaryEnforcer:
    """Public surface enforcer.

    Outcome for an edge into a sliced layer:
        target public                      → allowed
        target private, same slice         → allowed
        target private, slice has no
        public module at all               → MissingPublicSurface
        target private otherwise           → PrivateBoundaryBreach

    Attributes:
        _public_slices: Slices with at least one public module
    """

    def __init__(self, public_slices: frozenset[SliceKey]) -> None:
        """Initialize with the slices that declare a public surface.

        Args:
            public_slices: (layer, slice) keys with at least one public module
        """
        if public_slices is None:
            raise TypeError("public_slices must not be None")
        self._public_slices = public_slices

    @classmethod
    def from_modules(cls, modules: Iterable[Module]) -> Self:
        """Create enforcer from the full module set of a run."""
        return cls(
            frozenset(
                module.slice_key
                for module in modules
                if module.slice_key is not None and module.is_public
            )
        )

    def has_public_surface(self, key: SliceKey) -> bool:
        """Check if slice exposes at least one public module."""
        return key in self._public_slices

    def check_boundary(self, source: Module, target: Module) -> ValidationResult:
        """Check that source reaches target through its public surface.

        Args:
            source: Importing module
            target: Imported module

        Returns:
            Allowed, PrivateBoundaryBreach or MissingPublicSurface
        """
        target_key = target.slice_key
        if target_key is None:
            return ValidationResult.allow(f"{target.layer.value} has no private modules")

        if target.is_public:
            return ValidationResult.allow(f"'{target.id}' is public in slice '{target.slice}'")

        if source.slice_key == target_key:
            return ValidationResult.allow(f"inside {target.layer.value} slice '{target.slice}'")

        if not self.has_public_surface(target_key):
            return ValidationResult.reject(
                ViolationKind.MISSING_PUBLIC_SURFACE,
                f"{target.layer.value} slice '{target.slice}' declares no public surface, "
                f"yet '{source.id}' imports '{target.id}'",
            )

        return ValidationResult.reject(
            ViolationKind.PRIVATE_BOUNDARY_BREACH,
            f"'{source.id}' reaches into internal module '{target.id}' "
            f"of {target.layer.value} slice '{target.slice}'",
        )
