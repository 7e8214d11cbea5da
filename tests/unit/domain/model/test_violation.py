"""Tests for domain/model/violation.py."""

import pytest

from faacheck.domain.model.enums import ViolationKind
from faacheck.domain.model.violation import Violation


def make_minimal_violation(**kwargs: object) -> Violation:
    """Create a minimal valid Violation."""
    defaults: dict[str, object] = {
        "kind": ViolationKind.UPWARD_IMPORT,
        "source": "entities/user/dal.ts",
        "target": "features/auth/index.ts",
        "message": "entity module imports feature module",
    }
    defaults.update(kwargs)
    return Violation(**defaults)  # type: ignore[arg-type]


class TestViolationCreation:
    """Tests for valid Violation creation."""

    def test_minimal_valid(self) -> None:
        v = make_minimal_violation()
        assert v.kind is ViolationKind.UPWARD_IMPORT
        assert v.source == "entities/user/dal.ts"
        assert v.target == "features/auth/index.ts"
        assert v.suggestion is None

    def test_equal_by_value(self) -> None:
        assert make_minimal_violation() == make_minimal_violation()


class TestViolationInvariants:
    """FAIL-FIRST validation."""

    @pytest.mark.parametrize("field", ["source", "target", "message"])
    def test_empty_field_raises(self, field: str) -> None:
        with pytest.raises(ValueError, match=f"{field} must not be empty"):
            make_minimal_violation(**{field: ""})


class TestViolationStr:
    """Tests for Violation.__str__."""

    def test_includes_kind_and_ends(self) -> None:
        text = str(make_minimal_violation())
        assert "[UpwardImport]" in text
        assert "entities/user/dal.ts → features/auth/index.ts" in text

    def test_includes_suggestion(self) -> None:
        text = str(make_minimal_violation(suggestion="invert the dependency"))
        assert "suggestion: invert the dependency" in text
