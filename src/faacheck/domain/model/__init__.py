"""Domain model entities."""

from faacheck.domain.model.audit_report import AuditReport
from faacheck.domain.model.audit_stats import AuditStats
from faacheck.domain.model.configuration import AuditConfig, LayoutConfig
from faacheck.domain.model.edge import Edge
from faacheck.domain.model.enums import Layer, Verdict, ViolationKind
from faacheck.domain.model.graph import DiGraph, detect_cycles
from faacheck.domain.model.module import Module, ModuleMetadata, SliceKey
from faacheck.domain.model.module_graph import ModuleGraph
from faacheck.domain.model.validation_result import ValidationResult
from faacheck.domain.model.violation import Violation

__all__ = [
    # Enums
    "Layer",
    "Verdict",
    "ViolationKind",
    # Entities
    "Module",
    "ModuleMetadata",
    "SliceKey",
    "Edge",
    "ModuleGraph",
    # Results
    "ValidationResult",
    "Violation",
    "AuditReport",
    "AuditStats",
    # Configuration
    "LayoutConfig",
    "AuditConfig",
    # Graph
    "DiGraph",
    "detect_cycles",
]
