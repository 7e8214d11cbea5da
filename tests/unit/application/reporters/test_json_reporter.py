"""Tests for application/reporters/json_reporter.py."""

import json
from io import StringIO

from faacheck.application.reporters import JSONReporter, report_to_dict
from faacheck.domain.model.audit_report import AuditReport
from faacheck.domain.model.audit_stats import AuditStats
from faacheck.domain.model.enums import ViolationKind
from faacheck.domain.model.violation import Violation


def make_report() -> AuditReport:
    violation = Violation(
        kind=ViolationKind.HORIZONTAL_IMPORT,
        source="features/auth/index.ts",
        target="features/cart/index.ts",
        message="sibling slice",
    )
    return AuditReport(
        violations=(violation,),
        stats=AuditStats(
            modules_audited=2,
            edges_audited=1,
            by_kind={ViolationKind.HORIZONTAL_IMPORT: 1},
        ),
    )


class TestReportToDict:
    """Tests for report_to_dict()."""

    def test_shape(self) -> None:
        data = report_to_dict(make_report())
        assert data["verdict"] == "Fail"
        assert data["violations"] == [
            {
                "kind": "HorizontalImport",
                "from": "features/auth/index.ts",
                "to": "features/cart/index.ts",
                "message": "sibling slice",
                "suggestion": None,
            }
        ]
        assert data["cycles"] == []
        assert data["stats"] == {
            "modules_audited": 2,
            "edges_audited": 1,
            "violation_count": 1,
            "by_kind": {"HorizontalImport": 1},
        }

    def test_empty_report(self) -> None:
        data = report_to_dict(AuditReport.empty())
        assert data["verdict"] == "Pass"
        assert data["violations"] == []


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_writes_valid_json(self) -> None:
        output = StringIO()
        JSONReporter(output).report(make_report())
        assert json.loads(output.getvalue()) == report_to_dict(make_report())

    def test_compact(self) -> None:
        output = StringIO()
        JSONReporter(output, indent=None).report(AuditReport.empty())
        assert output.getvalue().count("\n") == 1

    def test_stable_output(self) -> None:
        first, second = StringIO(), StringIO()
        JSONReporter(first).report(make_report())
        JSONReporter(second).report(make_report())
        assert first.getvalue() == second.getvalue()
