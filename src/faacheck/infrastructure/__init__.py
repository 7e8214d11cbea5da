"""Infrastructure: reading graph documents and configuration files."""

from faacheck.infrastructure.adapters.graph_loader import load_graph, loads_graph, parse_graph
from faacheck.infrastructure.config_loader import config_from_table, load_config

__all__ = [
    "load_graph",
    "loads_graph",
    "parse_graph",
    "load_config",
    "config_from_table",
]
