"""Module classification: path + metadata → Module."""

from faacheck.application.classification.classifier import (
    ModuleClassifier,
    classify,
    classify_modules,
)

__all__ = [
    "ModuleClassifier",
    "classify",
    "classify_modules",
]
