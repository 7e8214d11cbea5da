"""JSON module graph loader.

Document shape:

    {
      "modules": [
        {"id": "features/auth/index.ts", "layer": "feature", "slice": "auth", "public": true},
        {"path": "entities/user/dal.ts"},
        "shared/lib/http.ts"
      ],
      "edges": [
        {"from": "features/auth/index.ts", "to": "entities/user/dal.ts"},
        ["entities/user/dal.ts", "shared/lib/http.ts"]
      ]
    }

A module record with "layer" is pre-classified. Any other record (or a
bare string) is a path to classify, optionally with "slice" / "public"
overrides.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from faacheck.domain.exceptions.parsing import GraphFormatError
from faacheck.domain.model.edge import Edge
from faacheck.domain.model.enums import Layer
from faacheck.domain.model.module import Module, ModuleMetadata
from faacheck.domain.model.module_graph import ModuleGraph

logger = logging.getLogger(__name__)


def load_graph(path: Path) -> ModuleGraph:
    """Load module graph from a JSON file.

    Raises:
        FileNotFoundError: If path does not exist
        GraphFormatError: If the file is not UTF-8 or the document is malformed
    """
    if not path.is_file():
        raise FileNotFoundError(f"module graph not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise GraphFormatError(str(path), f"not valid UTF-8: {e}") from e

    graph = loads_graph(text, source=str(path))
    logger.debug(
        "loaded %s: %d module record(s), %d edge(s)", path, graph.module_count, len(graph.edges)
    )
    return graph


def loads_graph(text: str, *, source: str = "<string>") -> ModuleGraph:
    """Parse module graph from a JSON string.

    Raises:
        GraphFormatError: If text is not JSON or the document is malformed
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphFormatError(source, f"invalid JSON: {e}") from e
    return parse_graph(data, source=source)


def parse_graph(data: object, *, source: str = "<data>") -> ModuleGraph:
    """Build ModuleGraph from decoded JSON data.

    Args:
        data: Decoded document
        source: Name used in error messages

    Raises:
        GraphFormatError: If the document is malformed
    """
    if not isinstance(data, dict):
        raise GraphFormatError(source, f"document must be an object, got {type(data).__name__}")

    raw_modules = data.get("modules", [])
    raw_edges = data.get("edges", [])
    if not isinstance(raw_modules, list):
        raise GraphFormatError(source, "'modules' must be a list")
    if not isinstance(raw_edges, list):
        raise GraphFormatError(source, "'edges' must be a list")

    modules: list[Module] = []
    entries: list[tuple[str, ModuleMetadata | None]] = []
    for i, record in enumerate(raw_modules):
        where = f"modules[{i}]"
        if isinstance(record, str):
            entries.append((record, None))
            continue
        if not isinstance(record, dict):
            raise GraphFormatError(source, f"{where}: expected object or string")

        if "layer" in record:
            modules.append(_parse_module(record, source, where))
        else:
            entries.append(_parse_entry(record, source, where))

    edges = tuple(_parse_edge(record, source, f"edges[{i}]") for i, record in enumerate(raw_edges))

    return ModuleGraph(modules=tuple(modules), entries=tuple(entries), edges=edges)


def _module_id(record: dict[str, object], source: str, where: str) -> str:
    """Id of a module record ("id" or "path")."""
    module_id = record.get("id", record.get("path"))
    if not isinstance(module_id, str) or not module_id:
        raise GraphFormatError(source, f"{where}: 'id' (or 'path') must be a non-empty string")
    return module_id


def _optional_slice(record: dict[str, object], source: str, where: str) -> str | None:
    slice_name = record.get("slice")
    if slice_name is not None and (not isinstance(slice_name, str) or not slice_name):
        raise GraphFormatError(source, f"{where}: 'slice' must be a non-empty string")
    return slice_name


def _optional_public(record: dict[str, object], source: str, where: str) -> bool | None:
    public = record.get("public", record.get("isPublic"))
    if public is not None and not isinstance(public, bool):
        raise GraphFormatError(source, f"{where}: 'public' must be a boolean")
    return public


def _parse_module(record: dict[str, object], source: str, where: str) -> Module:
    """Pre-classified record. Sliced modules default to private."""
    module_id = _module_id(record, source, where)
    layer_name = record["layer"]
    if not isinstance(layer_name, str):
        raise GraphFormatError(source, f"{where}: 'layer' must be a string")

    try:
        layer = Layer.parse(layer_name)
    except ValueError as e:
        raise GraphFormatError(source, f"{where}: {e}") from e

    public = _optional_public(record, source, where)
    if public is None:
        public = not layer.is_sliced

    try:
        return Module(
            id=module_id,
            layer=layer,
            slice=_optional_slice(record, source, where),
            is_public=public,
        )
    except ValueError as e:
        raise GraphFormatError(source, f"{where}: {e}") from e


def _parse_entry(
    record: dict[str, object],
    source: str,
    where: str,
) -> tuple[str, ModuleMetadata | None]:
    """Path record to classify, with optional overrides."""
    module_id = _module_id(record, source, where)
    metadata = ModuleMetadata(
        slice=_optional_slice(record, source, where),
        is_public=_optional_public(record, source, where),
    )
    return module_id, None if metadata.is_empty else metadata


def _parse_edge(record: object, source: str, where: str) -> Edge:
    """Edge as {"from", "to"} object or [from, to] pair."""
    match record:
        case {"from": str(src), "to": str(dst)} | {"source": str(src), "target": str(dst)}:
            pass
        case [str(src), str(dst)]:
            pass
        case _:
            raise GraphFormatError(
                source, f"{where}: expected {{'from': str, 'to': str}} or [from, to]"
            )

    try:
        return Edge(source=src, target=dst)
    except ValueError as e:
        raise GraphFormatError(source, f"{where}: {e}") from e
