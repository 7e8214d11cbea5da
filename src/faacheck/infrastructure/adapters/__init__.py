"""Adapters for external input formats."""

from faacheck.infrastructure.adapters.graph_loader import load_graph, loads_graph, parse_graph

__all__ = [
    "load_graph",
    "loads_graph",
    "parse_graph",
]
