"""Tests for expocheck.validation.models."""

import dataclasses

import pytest

from expocheck.validation import (
    Check,
    CheckResult,
    CheckSeverity,
    Outcome,
    Report,
    ReportStatus,
    Verdict,
)


def _result(outcome: Outcome, check_id: str = "x") -> CheckResult:
    return CheckResult(check_id=check_id, outcome=outcome, message="msg")


def _check(severity: CheckSeverity) -> Check:
    return Check(id="c", severity=severity, description="c", predicate=lambda p: [])


class TestCheckOutcome:
    """Tests for mapping verdicts onto outcomes."""

    def test_ok_is_pass_for_any_severity(self):
        for severity in CheckSeverity:
            assert _check(severity).outcome_for(Verdict(True, "ok")) == Outcome.PASS

    def test_required_failure_is_fail(self):
        assert _check(CheckSeverity.REQUIRED).outcome_for(Verdict(False, "no")) == Outcome.FAIL

    def test_optional_failure_is_warn(self):
        assert _check(CheckSeverity.OPTIONAL).outcome_for(Verdict(False, "no")) == Outcome.WARN

    def test_explicit_outcome_wins(self):
        verdict = Verdict(False, "legacy", outcome=Outcome.WARN)
        assert _check(CheckSeverity.REQUIRED).outcome_for(verdict) == Outcome.WARN


class TestReport:
    """Tests for derived report totals."""

    def test_counts_derived_from_entries(self):
        report = Report(results=(
            _result(Outcome.PASS),
            _result(Outcome.FAIL),
            _result(Outcome.WARN),
            _result(Outcome.WARN),
            _result(Outcome.FAIL),
        ))

        assert report.error_count == 2
        assert report.warning_count == 2
        assert report.passed_count == 1
        assert len(report.errors) == 2
        assert len(report.warnings) == 2

    def test_clean_report(self):
        report = Report(results=(_result(Outcome.PASS),))

        assert report.passed
        assert report.clean
        assert report.status == ReportStatus.PASSED
        assert report.exit_code == 0

    def test_warnings_only_still_passes(self):
        report = Report(results=(_result(Outcome.PASS), _result(Outcome.WARN)))

        assert report.passed
        assert not report.clean
        assert report.status == ReportStatus.PASSED_WITH_WARNINGS
        assert report.exit_code == 0

    def test_exit_code_is_error_count(self):
        report = Report(results=tuple(_result(Outcome.FAIL) for _ in range(3)))

        assert report.status == ReportStatus.FAILED
        assert report.exit_code == 3

    def test_exit_code_never_wraps_to_zero(self):
        report = Report(results=tuple(_result(Outcome.FAIL) for _ in range(256)))

        assert report.exit_code == 255

    def test_summary(self):
        report = Report(results=(_result(Outcome.PASS), _result(Outcome.WARN)))

        assert report.summary() == "PASSED with warnings: 1/2 checks passed (0 errors, 1 warnings)"

    def test_report_is_immutable(self):
        report = Report(results=(_result(Outcome.PASS),))

        with pytest.raises(dataclasses.FrozenInstanceError):
            report.results = ()

    def test_to_dict(self):
        report = Report(results=(_result(Outcome.FAIL, "entry-point"),))
        data = report.to_dict()

        assert data["status"] == "failed"
        assert data["error_count"] == 1
        assert data["results"][0] == {
            "id": "entry-point",
            "outcome": "fail",
            "message": "msg",
            "details": [],
        }

    def test_result_passed(self):
        assert _result(Outcome.PASS).passed
        assert not _result(Outcome.WARN).passed
        assert not _result(Outcome.FAIL).passed

    def test_result_str(self):
        assert str(_result(Outcome.WARN, "layout")) == "[WARN] layout: msg"
