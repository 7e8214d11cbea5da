"""Application services.

GraphAuditor is the main entry point for auditing a module graph.
"""

from faacheck.application.services.auditor import GraphAuditor, audit

__all__ = [
    "GraphAuditor",
    "audit",
]
