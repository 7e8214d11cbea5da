"""Module classifier.

Assigns each module path to a layer and, for Feature/Entity modules, to a
slice, and decides whether the module is part of its slice's public surface.
Pure: the same path, metadata and layout always give the same Module.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from faacheck.application.discovery import discover_slice_groups
from faacheck.domain.exceptions.audit import AuditError
from faacheck.domain.exceptions.classification import ClassificationError
from faacheck.domain.model.configuration import LayoutConfig, file_stem, split_path
from faacheck.domain.model.enums import Layer
from faacheck.domain.model.module import Module, ModuleMetadata

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


class ModuleClassifier:
    """Classifies module paths against a project layout.

    Example:
        classifier = ModuleClassifier(LayoutConfig(source_root="src"))
        module = classifier.classify("src/features/auth/index.ts")
        # Module(id="src/features/auth/index.ts", layer=FEATURE, slice="auth", is_public=True)
    """

    def __init__(self, layout: LayoutConfig | None = None) -> None:
        """Initialize classifier.

        Args:
            layout: Project layout (default: conventional FAA directories)
        """
        self._layout = layout if layout is not None else LayoutConfig()
        self._groups = self._layout.group_parts

    @classmethod
    def for_paths(cls, paths: Iterable[str], layout: LayoutConfig | None = None) -> Self:
        """Create classifier whose slice groups are discovered from paths.

        Args:
            paths: Every module path of the project
            layout: Base layout; discovered groups are added to its own

        Returns:
            Classifier aware of nested feature/entity groups
        """
        layout = layout if layout is not None else LayoutConfig()
        groups = discover_slice_groups(paths, layout)
        if groups:
            logger.debug("discovered slice groups: %s", sorted(groups))
        return cls(layout.with_slice_groups(groups))

    @property
    def layout(self) -> LayoutConfig:
        """Layout used for classification."""
        return self._layout

    def classify(self, path: str, metadata: ModuleMetadata | None = None) -> Module:
        """Classify one module.

        Args:
            path: Path-like module identifier
            metadata: Explicit overrides (layer, slice, public flag)

        Returns:
            Classified Module; its id is the normalized path

        Raises:
            ClassificationError: Path matches no layer root, or a
                Feature/Entity path names no slice
        """
        parts = split_path(path)
        if not parts:
            raise ClassificationError(path, "empty path")

        module_id = "/".join(parts)
        meta = metadata if metadata is not None else ModuleMetadata()
        relative = self._layout.relative_parts(module_id)
        match = self._layout.match_layer(relative)

        layer = meta.layer
        if layer is None:
            if match is None:
                roots = sorted(
                    root
                    for layer_roots in self._layout.layer_roots.values()
                    for root in layer_roots
                )
                raise ClassificationError(path, f"matches no layer root {roots}")
            layer = match[0]

        if not layer.is_sliced:
            if meta.is_public is False:
                logger.debug(
                    "%s: ignoring is_public=False, %s is always public", module_id, layer.value
                )
            if meta.slice is not None:
                logger.debug(
                    "%s: ignoring slice=%r, %s has no slices", module_id, meta.slice, layer.value
                )
            return Module(id=module_id, layer=layer)

        slice_name, inside = self._extract_slice(path, layer, relative, match, meta)

        if meta.is_public is not None:
            is_public = meta.is_public
        else:
            is_public = self._is_public_surface(inside)

        return Module(id=module_id, layer=layer, slice=slice_name, is_public=is_public)

    def _extract_slice(
        self,
        path: str,
        layer: Layer,
        relative: tuple[str, ...],
        match: tuple[Layer, tuple[str, ...]] | None,
        meta: ModuleMetadata,
    ) -> tuple[str, tuple[str, ...]]:
        """Find slice name and the module's location inside the slice.

        Returns:
            (slice name, path segments below the slice directory)
        """
        if match is None or match[0] is not layer:
            # Layer came from metadata, the path says nothing about the slice
            if meta.slice is None:
                raise ClassificationError(path, f"{layer.value} module needs an explicit slice")
            return meta.slice, relative[-1:]

        root = match[1]
        rest = relative[len(root) :]
        if not rest:
            if meta.slice is not None:
                return meta.slice, ()
            raise ClassificationError(path, f"path is the {layer.value} root, not a slice")

        # Descend through group directories to the leaf slice
        depth = 1
        while root + rest[:depth] in self._groups:
            if depth == len(rest):
                raise ClassificationError(path, "path is a slice group, not a slice")
            depth += 1

        slice_parts = rest[:depth]
        inside = rest[depth:]

        if not inside and "." in slice_parts[-1] and meta.slice is None:
            raise ClassificationError(path, f"file sits directly under the {layer.value} root")

        slice_name = meta.slice if meta.slice is not None else "/".join(slice_parts)
        return slice_name, inside

    def _is_public_surface(self, inside: tuple[str, ...]) -> bool:
        """Check if a location inside a slice belongs to its public surface.

        Public: the slice directory itself, a public-name file directly in
        it ("index.ts"), or a file directly in a public-name directory at
        the slice root ("api/handler.ts").
        """
        public_names = self._layout.public_names
        match inside:
            case ():
                return True
            case (name,):
                return file_stem(name) in public_names
            case (directory, _):
                return directory in public_names
            case _:
                return False


def classify(
    path: str,
    metadata: ModuleMetadata | None = None,
    *,
    layout: LayoutConfig | None = None,
) -> Module:
    """Classify one module path with the given (or default) layout.

    Args:
        path: Path-like module identifier
        metadata: Explicit overrides
        layout: Project layout (default: conventional FAA directories)

    Returns:
        Classified Module

    Raises:
        ClassificationError: Path cannot be classified
    """
    return ModuleClassifier(layout).classify(path, metadata)


def classify_modules(
    entries: Iterable[tuple[str, ModuleMetadata | None]],
    classifier: ModuleClassifier,
) -> Mapping[str, Module]:
    """Classify many modules, each id exactly once.

    A repeated entry with the same metadata reuses the first result.

    Args:
        entries: (path, metadata) pairs
        classifier: Classifier to use

    Returns:
        Module id → Module, in first-seen order

    Raises:
        ClassificationError: Any path cannot be classified
        AuditError: Same id given twice with different metadata
    """
    modules: dict[str, Module] = {}
    seen_metadata: dict[str, ModuleMetadata | None] = {}

    for path, metadata in entries:
        module_id = "/".join(split_path(path))
        if module_id in modules:
            if seen_metadata[module_id] != metadata:
                raise AuditError(module_id, "module listed twice with different metadata")
            continue

        module = classifier.classify(path, metadata)
        modules[module.id] = module
        seen_metadata[module.id] = metadata

    logger.debug("classified %d module(s)", len(modules))
    return modules
