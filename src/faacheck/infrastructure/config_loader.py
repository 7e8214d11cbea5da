"""Configuration loading from pyproject.toml.

    [tool.faacheck]
    source-root = "src"
    public-names = ["index", "__init__"]
    slice-groups = ["features/admin"]
    segment-names = ["api", "model", "ui"]
    max-workers = 4
    detect-cycles = true

    [tool.faacheck.layers]
    app = ["app"]
    features = ["features", "modules"]
    entities = ["entities"]
    shared = ["shared", "lib"]
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path

from faacheck.domain.exceptions.validation import ConfigError
from faacheck.domain.model.configuration import DEFAULT_LAYER_ROOTS, AuditConfig, LayoutConfig
from faacheck.domain.model.enums import Layer

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(
    {
        "source-root",
        "public-names",
        "slice-groups",
        "slice-markers",
        "segment-names",
        "max-workers",
        "detect-cycles",
        "layers",
    }
)


def load_config(path: Path) -> AuditConfig:
    """Load AuditConfig from the [tool.faacheck] table of a pyproject.toml.

    Missing table → default configuration.

    Raises:
        FileNotFoundError: If path does not exist
        ConfigError: If the file is not TOML or a value is invalid
    """
    if not path.is_file():
        raise FileNotFoundError(f"config file not found: {path}")

    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(str(path), f"invalid TOML: {e}") from e

    tool = document.get("tool", {})
    if not isinstance(tool, Mapping):
        raise ConfigError("tool", "must be a table")

    table = tool.get("faacheck")
    if table is None:
        logger.debug("%s has no [tool.faacheck] table, using defaults", path)
        return AuditConfig()

    return config_from_table(table)


def config_from_table(table: Mapping[str, object]) -> AuditConfig:
    """Build AuditConfig from a [tool.faacheck]-shaped mapping.

    Raises:
        ConfigError: If table is not a mapping, a key is unknown or a value
            is invalid
    """
    if not isinstance(table, Mapping):
        raise ConfigError("tool.faacheck", "must be a table")

    unknown = sorted(set(table) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(unknown[0], f"unknown key, expected one of {sorted(_KNOWN_KEYS)}")

    layout_kwargs: dict[str, object] = {}

    if "source-root" in table:
        layout_kwargs["source_root"] = _string(table, "source-root")
    if "public-names" in table:
        layout_kwargs["public_names"] = frozenset(_string_list(table, "public-names"))
    if "slice-groups" in table:
        layout_kwargs["slice_groups"] = frozenset(_string_list(table, "slice-groups"))
    if "slice-markers" in table:
        layout_kwargs["slice_markers"] = frozenset(_string_list(table, "slice-markers"))
    if "segment-names" in table:
        layout_kwargs["segment_names"] = frozenset(_string_list(table, "segment-names"))
    if "layers" in table:
        layout_kwargs["layer_roots"] = _layer_roots(table["layers"])

    try:
        layout = LayoutConfig(**layout_kwargs)  # type: ignore[arg-type]
    except ValueError as e:
        raise ConfigError("tool.faacheck", str(e)) from e

    max_workers = table.get("max-workers", 1)
    if not isinstance(max_workers, int) or isinstance(max_workers, bool):
        raise ConfigError("max-workers", "must be an integer")

    detect = table.get("detect-cycles", True)
    if not isinstance(detect, bool):
        raise ConfigError("detect-cycles", "must be a boolean")

    try:
        return AuditConfig(layout=layout, max_workers=max_workers, detect_cycles=detect)
    except ValueError as e:
        raise ConfigError("max-workers", str(e)) from e


def _string(table: Mapping[str, object], key: str) -> str:
    value = table[key]
    if not isinstance(value, str):
        raise ConfigError(key, "must be a string")
    return value


def _string_list(table: Mapping[str, object], key: str) -> list[str]:
    value = table[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(key, "must be a list of strings")
    return value


def _layer_roots(value: object) -> dict[Layer, tuple[str, ...]]:
    """Parse [tool.faacheck.layers]. Layers not listed keep default roots."""
    if not isinstance(value, Mapping):
        raise ConfigError("layers", "must be a table")

    roots = dict(DEFAULT_LAYER_ROOTS)
    for name, layer_roots in value.items():
        try:
            layer = Layer.parse(name)
        except ValueError as e:
            raise ConfigError(f"layers.{name}", str(e)) from e

        if isinstance(layer_roots, str):
            layer_roots = [layer_roots]
        if not isinstance(layer_roots, list) or not all(isinstance(r, str) for r in layer_roots):
            raise ConfigError(f"layers.{name}", "must be a string or list of strings")
        roots[layer] = tuple(layer_roots)

    return roots
