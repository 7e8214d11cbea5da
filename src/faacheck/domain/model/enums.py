"""Domain enumerations."""

from __future__ import annotations

from enum import Enum


class Layer(Enum):
    """Architecture layer, ordered App > Feature > Entity > Shared.

    Imports may only point to a lower-ranked layer (or stay inside the
    same slice / the same unsliced layer).
    """

    APP = "app"
    FEATURE = "feature"
    ENTITY = "entity"
    SHARED = "shared"

    @property
    def rank(self) -> int:
        """Position in the layer order. Higher ranks may import lower ones."""
        return _RANKS[self]

    @property
    def is_sliced(self) -> bool:
        """Whether modules of this layer belong to an isolated slice."""
        return self in (Layer.FEATURE, Layer.ENTITY)

    @classmethod
    def parse(cls, value: str) -> Layer:
        """Parse layer name. Accepts singular and plural forms, any case.

        Raises:
            ValueError: If value names no layer
        """
        layer = _ALIASES.get(value.strip().lower())
        if layer is None:
            raise ValueError(f"unknown layer {value!r}, expected one of {sorted(_ALIASES)}")
        return layer


_RANKS = {
    Layer.APP: 3,
    Layer.FEATURE: 2,
    Layer.ENTITY: 1,
    Layer.SHARED: 0,
}

_ALIASES = {
    "app": Layer.APP,
    "feature": Layer.FEATURE,
    "features": Layer.FEATURE,
    "entity": Layer.ENTITY,
    "entities": Layer.ENTITY,
    "shared": Layer.SHARED,
}


class ViolationKind(Enum):
    """Rule violation kind. Values are the names used in reports."""

    UPWARD_IMPORT = "UpwardImport"  # lower layer imports higher layer
    HORIZONTAL_IMPORT = "HorizontalImport"  # sibling slices at one layer
    PRIVATE_BOUNDARY_BREACH = "PrivateBoundaryBreach"  # reaches past the public surface
    MISSING_PUBLIC_SURFACE = "MissingPublicSurface"  # imported slice exposes nothing


class Verdict(Enum):
    """Audit verdict."""

    PASS = "Pass"
    FAIL = "Fail"
