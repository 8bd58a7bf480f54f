"""Tests for command-line flag parsing."""
from __future__ import annotations

from io import StringIO

from dash_license_check.config.flags import FLAG_SPECS, match_flag, parse_cli_args
from dash_license_check.output.reporter import Reporter


class TestMatchFlag:
    """Tests for match_flag function."""

    def test_value_flags_capture_value(self) -> None:
        """Test that value-bearing flags capture their value."""
        assert match_flag("--inputFile=package-lock.json") == (
            "inputFile",
            "package-lock.json",
        )
        assert match_flag("--exclusions=deps/exclusions.json") == (
            "exclusions",
            "deps/exclusions.json",
        )
        assert match_flag("--project=ecd.theia") == ("project", "ecd.theia")
        assert match_flag("--summary=out.txt") == ("summary", "out.txt")
        assert match_flag("--configFile=cfg.json") == ("configFile", "cfg.json")

    def test_numeric_flags_capture_digits(self) -> None:
        """Test that batch and timeout capture digits."""
        assert match_flag("--batch=20") == ("batch", "20")
        assert match_flag("--timeout=5") == ("timeout", "5")

    def test_numeric_flags_reject_non_digits(self) -> None:
        """Test that non-numeric batch/timeout values do not match."""
        assert match_flag("--batch=many") is None
        assert match_flag("--timeout=") is None

    def test_switch_flags_are_true(self) -> None:
        """Test that presence-only flags yield True."""
        assert match_flag("--review") == ("review", True)
        assert match_flag("--dryRun") == ("dryRun", True)

    def test_switch_flags_need_the_whole_token(self) -> None:
        """Test that longer tokens sharing a switch prefix do not match."""
        assert match_flag("--reviewer") is None
        assert match_flag("--dryRunning") is None
        assert match_flag("--review=false") is None

    def test_empty_value_does_not_match(self) -> None:
        """Test that a value flag without a value is not recognized."""
        assert match_flag("--project=") is None

    def test_unknown_token(self) -> None:
        """Test that unknown tokens do not match."""
        assert match_flag("--verbose") is None
        assert match_flag("yarn.lock") is None

    def test_specs_declared_order(self) -> None:
        """Test that configFile is tried first and timeout last."""
        names = [spec.name for spec in FLAG_SPECS]
        assert names[0] == "configFile"
        assert names[-1] == "timeout"
        assert len(names) == 9


class TestParseCliArgs:
    """Tests for parse_cli_args function."""

    def test_parses_all_recognized_flags(self, reporter: Reporter) -> None:
        """Test parsing a full command line."""
        result = parse_cli_args(
            [
                "--batch=10",
                "--dryRun",
                "--exclusions=ex.json",
                "--inputFile=yarn.lock",
                "--project=ecd.cdt-cloud",
                "--review",
                "--summary=summary.txt",
                "--timeout=30",
            ],
            reporter,
        )

        assert result == {
            "batch": "10",
            "dryRun": True,
            "exclusions": "ex.json",
            "inputFile": "yarn.lock",
            "project": "ecd.cdt-cloud",
            "review": True,
            "summary": "summary.txt",
            "timeout": "30",
        }

    def test_empty_args(self, reporter: Reporter) -> None:
        """Test that no arguments yield an empty mapping."""
        assert parse_cli_args([], reporter) == {}

    def test_unrecognized_token_warns_and_continues(
        self, reporter: Reporter, error_output: StringIO
    ) -> None:
        """Test that unknown tokens are warned about and skipped."""
        result = parse_cli_args(["--bogus", "--review"], reporter)

        assert result == {"review": True}
        output = error_output.getvalue()
        assert 'WARN: The following CLI argument was not parsed successfully: "--bogus"' in output
        assert "supported CLI configurations" in output
        assert "--configFile=(\\\\S+)" in output

    def test_no_supported_list_without_failures(
        self, reporter: Reporter, error_output: StringIO
    ) -> None:
        """Test that the supported flags are only listed after a failure."""
        parse_cli_args(["--review"], reporter)

        assert "supported CLI configurations" not in error_output.getvalue()

    def test_last_occurrence_wins(self, reporter: Reporter) -> None:
        """Test that a repeated flag keeps its last value."""
        result = parse_cli_args(["--project=a", "--project=b"], reporter)

        assert result == {"project": "b"}

    def test_prints_parsed_arguments(
        self, reporter: Reporter, error_output: StringIO
    ) -> None:
        """Test that the parsed values are printed."""
        parse_cli_args(["--project=ecd.theia"], reporter)

        output = error_output.getvalue()
        assert "INFO: Parsed CLI arguments:" in output
        assert '"project": "ecd.theia"' in output
