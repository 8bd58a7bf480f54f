"""Tests for reconciliation against the exclusions."""
from __future__ import annotations

from io import StringIO

import pytest

from dash_license_check.analysis.reconciliation import reconcile, report_reconciliation
from dash_license_check.exceptions import UnhandledDependenciesError
from dash_license_check.models.summary import SummaryEntry
from dash_license_check.output.reporter import Reporter


def _restricted(*dependencies: str) -> list[SummaryEntry]:
    return [
        SummaryEntry(dependency=d, license="GPL-2.0", status="restricted", source="s")
        for d in dependencies
    ]


class TestReconcile:
    """Tests for reconcile function."""

    def test_partial_coverage(self) -> None:
        """Test restricted {A, B, C} against exclusions {A, D}."""
        result = reconcile(_restricted("A", "B", "C"), {"A": None, "D": None})

        assert [e.dependency for e in result.excluded] == ["A"]
        assert [e.dependency for e in result.unhandled] == ["B", "C"]
        assert result.unmatched_exclusions == ["D"]
        assert result.passed is False

    def test_full_coverage(self) -> None:
        """Test restricted {A, B} against exclusions {A, B}."""
        result = reconcile(_restricted("A", "B"), {"A": None, "B": "reviewed"})

        assert result.unhandled == []
        assert result.unmatched_exclusions == []
        assert result.passed is True

    def test_no_restricted_entries(self) -> None:
        """Test that nothing restricted passes regardless of exclusions."""
        result = reconcile([], {"A": None})

        assert result.passed is True
        assert result.unmatched_exclusions == ["A"]

    def test_missing_exclusions_file(self) -> None:
        """Test that without exclusions every entry is unhandled."""
        restricted = _restricted("A", "B")

        result = reconcile(restricted, None)

        assert result.unhandled == restricted
        assert result.excluded == []
        assert result.unmatched_exclusions == []

    def test_unmatched_keep_exclusion_order(self) -> None:
        """Test that unmatched exclusions keep the file order."""
        result = reconcile(_restricted("B"), {"Z": None, "B": None, "A": None})

        assert result.unmatched_exclusions == ["Z", "A"]

    def test_entry_without_dependency_is_unhandled(self) -> None:
        """Test that a malformed entry is never considered excluded."""
        entry = SummaryEntry(status="restricted")

        result = reconcile([entry], {"A": None})

        assert result.unhandled == [entry]


class TestReportReconciliation:
    """Tests for report_reconciliation function."""

    def test_passes_silently(
        self, reporter: Reporter, console_output: StringIO, error_output: StringIO
    ) -> None:
        """Test that a fully covered result prints nothing."""
        exclusions = {"A": None}
        result = reconcile(_restricted("A"), exclusions)

        report_reconciliation(result, exclusions, reporter)

        assert console_output.getvalue() == ""
        assert error_output.getvalue() == ""

    def test_unmatched_are_warnings_only(
        self, reporter: Reporter, console_output: StringIO, error_output: StringIO
    ) -> None:
        """Test that stale exclusions are listed but do not fail."""
        exclusions = {"A": None, "D": {"ticket": "#42"}}
        result = reconcile(_restricted("A"), exclusions)

        report_reconciliation(result, exclusions, reporter)

        assert "> D" in console_output.getvalue()
        errors = error_output.getvalue()
        assert "did not match anything" in errors
        assert '"ticket": "#42"' in errors

    def test_unhandled_raise(self, reporter: Reporter) -> None:
        """Test that unhandled entries raise with the entries attached."""
        exclusions = {"A": None}
        result = reconcile(_restricted("A", "B"), exclusions)

        with pytest.raises(UnhandledDependenciesError) as exc_info:
            report_reconciliation(result, exclusions, reporter)
        assert "aren't part of the exclusions" in str(exc_info.value)
        assert [e.dependency for e in exc_info.value.entries] == ["B"]

    def test_unhandled_without_exclusions_file(self, reporter: Reporter) -> None:
        """Test the message when there is no exclusions file."""
        result = reconcile(_restricted("A"), None)

        with pytest.raises(UnhandledDependenciesError) as exc_info:
            report_reconciliation(result, None, reporter)
        assert "Found unhandled restricted dependencies!" in str(exc_info.value)
