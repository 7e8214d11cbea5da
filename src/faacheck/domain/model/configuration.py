"""Checker configuration.

Project layout (where each layer lives, what counts as a public surface)
and audit options. Defaults follow the conventional FAA directory names.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from faacheck.domain.model.enums import Layer

DEFAULT_LAYER_ROOTS: Mapping[Layer, tuple[str, ...]] = {
    Layer.APP: ("app",),
    Layer.FEATURE: ("features",),
    Layer.ENTITY: ("entities",),
    Layer.SHARED: ("shared",),
}

# Barrel / package entry file stems across ecosystems
DEFAULT_PUBLIC_NAMES = frozenset({"index", "__init__", "mod", "public", "api"})

# Files that make a directory a slice (as opposed to a slice group)
DEFAULT_SLICE_MARKERS = frozenset(
    {
        "action.*",
        "actions.*",
        "*.action",
        "*.action.*",
        "*_action.*",
        "handler.*",
        "handlers.*",
        "*.handler",
        "*.handler.*",
        "*_handler.*",
    }
)

# Conventional segment directories inside a slice; never slices or groups themselves
DEFAULT_SEGMENT_NAMES = frozenset(
    {
        "api",
        "action",
        "actions",
        "handler",
        "handlers",
        "lib",
        "model",
        "ui",
        "config",
        "internal",
    }
)


def split_path(path: str) -> tuple[str, ...]:
    """Split a path-like string into normalized segments.

    Backslashes count as separators; empty and "." segments are dropped.
    """
    return tuple(part for part in path.replace("\\", "/").split("/") if part and part != ".")


def file_stem(name: str) -> str:
    """File name without its final extension.

    Examples:
        "index.ts" → "index"
        "__init__.py" → "__init__"
        "index.test.ts" → "index.test"
        "ui" → "ui"
    """
    stem, dot, _ = name.rpartition(".")
    return stem if dot and stem else name


def _is_prefix(prefix: tuple[str, ...], parts: tuple[str, ...]) -> bool:
    return len(prefix) <= len(parts) and parts[: len(prefix)] == prefix


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Directory layout of the audited project.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        layer_roots: Layer → path roots, checked in App, Feature, Entity,
            Shared order. Roots are relative to source_root.
        source_root: Prefix stripped from module paths before matching
            (e.g. "src"). Empty = none.
        public_names: File stems that mark a slice's public surface when
            the file sits directly in the slice directory.
        slice_groups: Directories (root included, e.g. "features/admin")
            that only group nested slices.
        slice_markers: Glob patterns for file names that mark a directory
            as a slice during group discovery. Public-surface files
            count as markers too.
        segment_names: Directory names that split one slice into
            segments (api, model, ui, ...). Discovery never treats them
            as slices or groups.
    """

    layer_roots: Mapping[Layer, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_LAYER_ROOTS)
    )
    source_root: str = ""
    public_names: frozenset[str] = DEFAULT_PUBLIC_NAMES
    slice_groups: frozenset[str] = frozenset()
    slice_markers: frozenset[str] = DEFAULT_SLICE_MARKERS
    segment_names: frozenset[str] = DEFAULT_SEGMENT_NAMES

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        missing = [layer.value for layer in Layer if not self.layer_roots.get(layer)]
        if missing:
            raise ValueError(f"layer_roots missing roots for: {missing}")

        seen: dict[tuple[str, ...], Layer] = {}
        for layer in Layer:
            for root in self.layer_roots[layer]:
                parts = split_path(root)
                if not parts:
                    raise ValueError(f"empty root for layer '{layer.value}'")
                for other, other_layer in seen.items():
                    if _is_prefix(other, parts) or _is_prefix(parts, other):
                        raise ValueError(
                            f"root '{root}' of '{layer.value}' overlaps "
                            f"root '{'/'.join(other)}' of '{other_layer.value}'"
                        )
                seen[parts] = layer

        if not self.public_names:
            raise ValueError("public_names must not be empty")

        for group in self.slice_groups:
            if not split_path(group):
                raise ValueError("slice group must not be empty")

    def roots_of(self, layer: Layer) -> tuple[tuple[str, ...], ...]:
        """Root paths of a layer as segment tuples."""
        return tuple(split_path(root) for root in self.layer_roots[layer])

    @property
    def source_root_parts(self) -> tuple[str, ...]:
        """Source root as segments."""
        return split_path(self.source_root)

    def relative_parts(self, path: str) -> tuple[str, ...]:
        """Path segments with the source root removed (if present)."""
        parts = split_path(path)
        root = self.source_root_parts
        if root and _is_prefix(root, parts):
            return parts[len(root) :]
        return parts

    def match_layer(self, parts: tuple[str, ...]) -> tuple[Layer, tuple[str, ...]] | None:
        """First layer whose root prefixes the path, with that root.

        Layers are tried in App, Feature, Entity, Shared order.
        """
        for layer in Layer:
            for root in self.roots_of(layer):
                if _is_prefix(root, parts):
                    return layer, root
        return None

    @property
    def group_parts(self) -> frozenset[tuple[str, ...]]:
        """Slice groups as segment tuples."""
        return frozenset(split_path(group) for group in self.slice_groups)

    def with_slice_groups(self, groups: frozenset[str]) -> LayoutConfig:
        """Copy with additional slice groups."""
        return LayoutConfig(
            layer_roots=self.layer_roots,
            source_root=self.source_root,
            public_names=self.public_names,
            slice_groups=self.slice_groups | groups,
            slice_markers=self.slice_markers,
            segment_names=self.segment_names,
        )


@dataclass(frozen=True, slots=True)
class AuditConfig:
    """Audit run configuration.

    Attributes:
        layout: Project layout used when classifying by path
        max_workers: Threads for edge validation. 1 = serial.
        detect_cycles: List import cycles in the report
    """

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    max_workers: int = 1
    detect_cycles: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
