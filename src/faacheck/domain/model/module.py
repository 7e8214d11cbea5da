"""Classified module entity."""

from __future__ import annotations

from dataclasses import dataclass

from faacheck.domain.model.enums import Layer

type SliceKey = tuple[Layer, str]


@dataclass(frozen=True, slots=True)
class Module:
    """One compilable unit (file or package) of the audited project.

    Attributes:
        id: Unique path-like identifier
        layer: Layer the module belongs to
        slice: Feature or entity name (None for App and Shared)
        is_public: Part of its slice's public surface
    """

    id: str
    layer: Layer
    slice: str | None = None
    is_public: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("module id must not be empty")
        if not isinstance(self.layer, Layer):
            raise TypeError(f"layer must be Layer, got {type(self.layer).__name__}")

        if self.layer.is_sliced:
            if not self.slice:
                raise ValueError(f"{self.layer.value} module '{self.id}' must have a slice")
        else:
            if self.slice is not None:
                raise ValueError(f"{self.layer.value} module '{self.id}' must not have a slice")
            if not self.is_public:
                raise ValueError(f"{self.layer.value} module '{self.id}' is always public")

    @property
    def rank(self) -> int:
        """Rank of the module's layer."""
        return self.layer.rank

    @property
    def slice_key(self) -> SliceKey | None:
        """Slice identity (layer, slice), None for unsliced layers.

        The layer is part of the key: feature 'user' and entity 'user'
        are different slices.
        """
        if self.slice is None:
            return None
        return (self.layer, self.slice)

    def __str__(self) -> str:
        """Format as id [layer/slice]."""
        if self.slice is None:
            return f"{self.id} [{self.layer.value}]"
        return f"{self.id} [{self.layer.value}/{self.slice}]"


@dataclass(frozen=True, slots=True)
class ModuleMetadata:
    """Classification overrides supplied by the graph front-end.

    None = derive from the path.

    Attributes:
        layer: Explicit layer
        slice: Explicit slice name
        is_public: Explicit public-surface flag
    """

    layer: Layer | None = None
    slice: str | None = None
    is_public: bool | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.slice is not None and not self.slice:
            raise ValueError("slice override must not be empty")

    @property
    def is_empty(self) -> bool:
        """No override set."""
        return self.layer is None and self.slice is None and self.is_public is None
