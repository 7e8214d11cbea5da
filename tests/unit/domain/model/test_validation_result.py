"""Tests for domain/model/validation_result.py."""

import pytest

from faacheck.domain.model.enums import ViolationKind
from faacheck.domain.model.validation_result import ValidationResult


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_allow(self) -> None:
        result = ValidationResult.allow("same slice")
        assert result.allowed
        assert result.kind is None
        assert not result.crosses_boundary

    def test_allow_crossing_boundary(self) -> None:
        assert ValidationResult.allow("downward", crosses_boundary=True).crosses_boundary

    def test_reject(self) -> None:
        result = ValidationResult.reject(ViolationKind.HORIZONTAL_IMPORT, "sibling slice")
        assert not result.allowed
        assert result.kind is ViolationKind.HORIZONTAL_IMPORT

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason"):
            ValidationResult.allow("")

    def test_rejected_cannot_cross_boundary(self) -> None:
        with pytest.raises(ValueError, match="boundary check"):
            ValidationResult(
                kind=ViolationKind.UPWARD_IMPORT,
                reason="up",
                crosses_boundary=True,
            )
