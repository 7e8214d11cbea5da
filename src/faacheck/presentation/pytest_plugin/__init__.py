"""pytest plugin for faacheck.

Provides fixtures for architecture tests:
    faa_config: Audit configuration (override in conftest.py)
    faa_auditor: GraphAuditor built from faa_config
    faa_graph: Module graph loaded from the faa_graph ini option
    faa_report: Audit report of faa_graph

Configuration (pytest.ini or pyproject.toml):
    faa_graph: Module graph JSON file, relative to rootdir
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from faacheck.presentation.pytest_plugin.fixtures import (
    faa_auditor,
    faa_config,
    faa_graph,
    faa_report,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "faa_auditor",
    "faa_config",
    "faa_graph",
    "faa_report",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("faa_graph", "Module graph JSON file for faacheck fixtures", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "faa: mark test as architecture layering test",
    )
