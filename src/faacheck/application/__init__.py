"""Application layer.

Components:
- classification: path + metadata → Module
- discovery: slice group discovery
- validators: EdgeValidator, BoundaryEnforcer
- services: GraphAuditor facade
- reporters: output formatting (PlainText, JSON, rich Console)
"""

from faacheck.application.classification import (
    ModuleClassifier,
    classify,
    classify_modules,
)
from faacheck.application.discovery import discover_slice_groups
from faacheck.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from faacheck.application.services import GraphAuditor, audit
from faacheck.application.validators import BoundaryEnforcer, EdgeValidator

__all__ = [
    # Classification
    "ModuleClassifier",
    "classify",
    "classify_modules",
    # Discovery
    "discover_slice_groups",
    # Validators
    "EdgeValidator",
    "BoundaryEnforcer",
    # Services
    "GraphAuditor",
    "audit",
    # Reporters
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleReporter",
]
