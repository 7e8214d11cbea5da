"""Domain exceptions."""

from faacheck.domain.exceptions.audit import AuditError
from faacheck.domain.exceptions.base import FaaCheckError
from faacheck.domain.exceptions.classification import ClassificationError
from faacheck.domain.exceptions.parsing import GraphFormatError
from faacheck.domain.exceptions.validation import ConfigError
from faacheck.domain.exceptions.violation import ArchitectureViolationError

__all__ = [
    "FaaCheckError",
    "ClassificationError",
    "AuditError",
    "GraphFormatError",
    "ConfigError",
    "ArchitectureViolationError",
]
