"""Domain ports (protocols)."""

from faacheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "ReporterProtocol",
]
