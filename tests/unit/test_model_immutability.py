"""Immutability checks across the domain model."""

from __future__ import annotations

import dataclasses

import pytest

from faacheck.domain.model.audit_report import AuditReport
from faacheck.domain.model.audit_stats import AuditStats
from faacheck.domain.model.configuration import AuditConfig, LayoutConfig
from faacheck.domain.model.edge import Edge
from faacheck.domain.model.enums import Layer, ViolationKind
from faacheck.domain.model.graph import DiGraph
from faacheck.domain.model.module import Module, ModuleMetadata
from faacheck.domain.model.module_graph import ModuleGraph
from faacheck.domain.model.validation_result import ValidationResult
from faacheck.domain.model.violation import Violation

FROZEN_OBJECTS = [
    Module(id="features/auth/index.ts", layer=Layer.FEATURE, slice="auth"),
    ModuleMetadata(is_public=True),
    Edge(source="a", target="b"),
    Violation(kind=ViolationKind.UPWARD_IMPORT, source="a", target="b", message="up"),
    ValidationResult.allow("ok"),
    AuditStats.empty(),
    AuditReport.empty(),
    LayoutConfig(),
    AuditConfig(),
    ModuleGraph(),
    DiGraph.empty(),
]


class TestFrozen:
    """No domain object can be mutated after construction."""

    @pytest.mark.parametrize("obj", FROZEN_OBJECTS, ids=lambda obj: type(obj).__name__)
    def test_frozen(self, obj: object) -> None:
        first_field = dataclasses.fields(obj)[0].name
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(obj, first_field, None)

