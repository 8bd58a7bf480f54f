"""CLI entry point for dash-license-check."""

from __future__ import annotations

import locale
import sys
from pathlib import Path
from typing import Mapping, Optional, Sequence

import click
from rich.console import Console

from dash_license_check import __version__
from dash_license_check.analysis.reconciliation import reconcile, report_reconciliation
from dash_license_check.config import resolve_config
from dash_license_check.constants import EXIT_SUCCESS
from dash_license_check.exceptions import (
    InputFileError,
    LicenseCheckError,
    ProcessLaunchError,
    ScanError,
    UnhandledDependenciesError,
)
from dash_license_check.models.summary import ReconciliationResult
from dash_license_check.output.reporter import Reporter
from dash_license_check.process import pretty_command
from dash_license_check.readers.exclusions import ExclusionMap, read_exclusions
from dash_license_check.readers.summary import get_restricted_dependencies
from dash_license_check.scanner import (
    JAVA_BIN,
    backup_summary,
    build_scanner_args,
    default_jar_path,
    ensure_scanner_jar,
    resolve_review_mode,
    run_scanner,
)

# Module-level console for consistent output
_console = Console()
# Separate console for diagnostics (writes to stderr)
_error_console = Console(stderr=True)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    }
)
@click.version_option(version=__version__)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args: tuple[str, ...]) -> None:
    """Check third-party licenses with Eclipse dash-licenses.

    Runs dash-licenses against a dependency manifest and fails when it
    reports "restricted" dependencies that are not listed in the exclusions
    file. Parameters are read from dashLicensesConfig.json (or the file
    given with --configFile=) and can be overridden on the command line.

    \b
    Options:
        --configFile=<path>   Config file (JSON, or YAML by suffix)
        --inputFile=<path>    Dependency manifest (default: yarn.lock)
        --exclusions=<path>   Exclusions file (JSON list or object)
        --summary=<path>      Summary file written by dash-licenses
        --project=<name>      Eclipse Foundation project, e.g. ecd.theia
        --batch=<n>           Batch size (default: 50)
        --timeout=<n>         Timeout in minutes (default: 240)
        --review              Open IP review tickets (needs DASH_TOKEN)
        --dryRun              Stop before launching dash-licenses

    \b
    Examples:
        dash-license-check
        dash-license-check --inputFile=package-lock.json --project=ecd.theia
        dash-license-check --configFile=ci/dashLicensesConfig.json --review
    """
    reporter = Reporter(console=_console, error_console=_error_console)

    # Summary entries are sorted with the user's locale collation
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        reporter.warn(f"Cannot use the locale from the environment ({e})")

    try:
        _run_check(args, reporter)
    except LicenseCheckError as e:
        _display_error(e, reporter)
        sys.exit(e.exit_code)
    sys.exit(EXIT_SUCCESS)


def _run_check(
    argv: Sequence[str],
    reporter: Reporter,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[ReconciliationResult]:
    """Execute the license check.

    Args:
        argv: Command-line arguments, without the program name.
        reporter: Where to print diagnostics and results.
        environ: Environment to read; defaults to os.environ.

    Returns:
        The reconciliation of restricted dependencies, or None when
        dash-licenses was not run (dry-run) or found nothing restricted.

    Raises:
        LicenseCheckError: On any condition that fails the run.
    """
    config = resolve_config(argv, reporter)

    if not Path(config.input_file).exists():
        raise InputFileError(
            f"Input file not found: {config.input_file}. "
            'Please provide it using "--inputFile=" CLI option'
        )
    reporter.info(f"Using input file: {config.input_file}")

    review = resolve_review_mode(config, reporter, environ)
    jar_path = ensure_scanner_jar(default_jar_path(environ), reporter)

    summary_path = Path(config.summary).resolve()
    backup_summary(summary_path, reporter)

    args = build_scanner_args(config, jar_path, summary_path, review)
    if review:
        reporter.info(f'Using "review" mode for project: {config.project}')

    if config.dry_run:
        reporter.info("Dry-run mode enabled - exiting before launching dash-licenses")
        reporter.info(f"Command: {pretty_command(JAVA_BIN, args)}")
        return None

    run_scanner(args, reporter)

    if not summary_path.exists():
        raise ScanError(f"dash-licenses did not produce a summary: {summary_path}")

    restricted = get_restricted_dependencies(summary_path)
    result: Optional[ReconciliationResult] = None
    if restricted:
        exclusions: Optional[ExclusionMap] = None
        exclusions_path = Path(config.exclusions)
        if exclusions_path.exists():
            reporter.info("Checking results against the exclusions...")
            exclusions = read_exclusions(exclusions_path)
        result = reconcile(restricted, exclusions)
        report_reconciliation(result, exclusions, reporter)

    reporter.info("Done.")
    return result


def _display_error(error: LicenseCheckError, reporter: Reporter) -> None:
    """Display error message to user.

    Args:
        error: The exception that occurred.
        reporter: Where to print it.
    """
    if isinstance(error, ProcessLaunchError):
        reporter.error(f"Command: {error.command}")
    reporter.error(str(error))
    if isinstance(error, UnhandledDependenciesError):
        reporter.restricted_entries(error.entries)


if __name__ == "__main__":
    main()
