"""faacheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, collections.abc
"""

from faacheck.domain.exceptions import (
    ArchitectureViolationError,
    AuditError,
    ClassificationError,
    ConfigError,
    FaaCheckError,
    GraphFormatError,
)
from faacheck.domain.model import (
    AuditConfig,
    AuditReport,
    AuditStats,
    Edge,
    Layer,
    LayoutConfig,
    Module,
    ModuleMetadata,
    ModuleGraph,
    ValidationResult,
    Verdict,
    Violation,
    ViolationKind,
)
from faacheck.domain.ports import ReporterProtocol

__all__ = [
    # Exceptions
    "FaaCheckError",
    "ClassificationError",
    "AuditError",
    "GraphFormatError",
    "ConfigError",
    "ArchitectureViolationError",
    # Enums
    "Layer",
    "Verdict",
    "ViolationKind",
    # Entities
    "Module",
    "ModuleMetadata",
    "ModuleGraph",
    "Edge",
    # Results
    "ValidationResult",
    "Violation",
    "AuditReport",
    "AuditStats",
    # Configuration
    "LayoutConfig",
    "AuditConfig",
    # Ports
    "ReporterProtocol",
]
