"""Slice group discovery from module paths."""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING

from faacheck.domain.model.configuration import file_stem

if TYPE_CHECKING:
    from collections.abc import Iterable

    from faacheck.domain.model.configuration import LayoutConfig

type _Dir = tuple[str, ...]


def discover_slice_groups(paths: Iterable[str], layout: LayoutConfig) -> frozenset[str]:
    """Discover grouping directories inside Feature/Entity roots.

    A directory is a slice group when it holds no files of its own, none of
    its subdirectories is a segment directory (see
    LayoutConfig.segment_names), and at least one subdirectory is a slice
    (holds a marker file, see LayoutConfig.slice_markers) or another group.
    A feature split into "api/" and "actions/" is therefore one slice. Only chains of groups
    starting right below a layer root count; directories inside a slice
    are never groups.

    Args:
        paths: Every module path of the project
        layout: Project layout

    Returns:
        Frozenset of group paths relative to the source root
        (e.g. "features/admin")

    Example:
        >>> discover_slice_groups(
        ...     ["features/admin/users/index.ts", "features/admin/roles/index.ts"],
        ...     LayoutConfig(),
        ... )
        frozenset({'features/admin'})
    """
    files: dict[_Dir, set[str]] = {}
    subdirs: dict[_Dir, set[str]] = {}
    roots: set[_Dir] = set()

    for path in paths:
        parts = layout.relative_parts(path)
        match = layout.match_layer(parts)
        if match is None or not match[0].is_sliced:
            continue

        root = match[1]
        if len(parts) <= len(root):
            continue

        roots.add(root)
        for depth in range(len(root), len(parts) - 1):
            subdirs.setdefault(parts[:depth], set()).add(parts[depth])
        files.setdefault(parts[:-1], set()).add(parts[-1])

    markers = layout.slice_markers
    public_names = layout.public_names

    def is_marker(name: str) -> bool:
        if file_stem(name) in public_names:
            return True
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in markers)

    def is_slice(directory: _Dir) -> bool:
        return any(is_marker(name) for name in files.get(directory, ()))

    segment_names = layout.segment_names
    cache: dict[_Dir, bool] = {}

    def is_group(directory: _Dir) -> bool:
        if directory not in cache:
            names = sorted(subdirs.get(directory, ()))
            cache[directory] = (
                not files.get(directory)
                and not any(name in segment_names for name in names)
                and any(
                    is_slice(directory + (name,)) or is_group(directory + (name,))
                    for name in names
                )
            )
        return cache[directory]

    groups: set[str] = set()
    pending = [root + (name,) for root in sorted(roots) for name in sorted(subdirs.get(root, ()))]
    while pending:
        directory = pending.pop()
        if is_group(directory):
            groups.add("/".join(directory))
            pending.extend(directory + (name,) for name in subdirs.get(directory, ()))

    return frozenset(groups)
