"""Shared fixtures for dash-license-check tests."""

from io import StringIO

import pytest
from click.testing import CliRunner
from rich.console import Console

from dash_license_check.output.reporter import Reporter


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def console_output() -> StringIO:
    """Buffer capturing the reporter's result output."""
    return StringIO()


@pytest.fixture
def error_output() -> StringIO:
    """Buffer capturing the reporter's diagnostics."""
    return StringIO()


@pytest.fixture
def reporter(console_output: StringIO, error_output: StringIO) -> Reporter:
    """Provide a Reporter writing to in-memory buffers, without colors."""
    return Reporter(
        console=Console(file=console_output, width=200, no_color=True),
        error_console=Console(file=error_output, width=200, no_color=True),
    )
