"""faacheck - layer boundary checker for Feature-Action Architecture projects."""

__version__ = "0.1.0"

from faacheck.application.classification import ModuleClassifier, classify
from faacheck.application.services import GraphAuditor, audit
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
    Edge,
    Layer,
    LayoutConfig,
    Module,
    ModuleGraph,
    ModuleMetadata,
    Verdict,
    Violation,
    ViolationKind,
)
from faacheck.presentation.api import assert_architecture

__all__ = [
    "__version__",
    # Entry points
    "audit",
    "classify",
    "assert_architecture",
    "GraphAuditor",
    "ModuleClassifier",
    # Model
    "Layer",
    "Module",
    "ModuleMetadata",
    "ModuleGraph",
    "Edge",
    "Violation",
    "ViolationKind",
    "Verdict",
    "AuditReport",
    # Configuration
    "AuditConfig",
    "LayoutConfig",
    # Exceptions
    "FaaCheckError",
    "ClassificationError",
    "AuditError",
    "GraphFormatError",
    "ConfigError",
    "ArchitectureViolationError",
]
