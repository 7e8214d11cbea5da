"""pytest fixtures for architecture layering tests.

User overrides faa_config in their conftest.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from faacheck.application.services import GraphAuditor
from faacheck.domain.model.configuration import AuditConfig
from faacheck.infrastructure.adapters.graph_loader import load_graph
from faacheck.infrastructure.config_loader import load_config

if TYPE_CHECKING:
    from faacheck.domain.model.audit_report import AuditReport
    from faacheck.domain.model.module_graph import ModuleGraph


@pytest.fixture(scope="session")
def faa_config(request: pytest.FixtureRequest) -> AuditConfig:
    """Audit configuration.

    Reads [tool.faacheck] from the rootdir pyproject.toml when present.
    Override this fixture in conftest.py for a custom configuration.
    """
    pyproject = request.config.rootpath / "pyproject.toml"
    if pyproject.is_file():
        return load_config(pyproject)
    return AuditConfig()


@pytest.fixture(scope="session")
def faa_auditor(faa_config: AuditConfig) -> GraphAuditor:
    """GraphAuditor configured with faa_config."""
    return GraphAuditor(faa_config)


@pytest.fixture(scope="session")
def faa_graph(request: pytest.FixtureRequest) -> ModuleGraph:
    """Module graph from the faa_graph ini option.

    Raises:
        FileNotFoundError: Option not set or file missing
    """
    name = str(request.config.getini("faa_graph"))
    if not name:
        raise FileNotFoundError(
            "faa_graph is not configured. Set faa_graph in pytest.ini or pyproject.toml."
        )
    return load_graph(request.config.rootpath / name)


@pytest.fixture(scope="session")
def faa_report(faa_auditor: GraphAuditor, faa_graph: ModuleGraph) -> AuditReport:
    """Audit report of faa_graph."""
    return faa_auditor.audit_graph(faa_graph)
