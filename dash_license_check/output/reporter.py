"""Diagnostic and result output using Rich."""
from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, Optional

from rich.console import Console

from dash_license_check.models.summary import SummaryEntry

# ANSI 9x "bright" colors
INFO_STYLE = "bright_cyan"
WARN_STYLE = "bright_yellow"
ERROR_STYLE = "bright_red"
UNMATCHED_STYLE = "bright_magenta"

RULE = "-------------------------------------"


def format_json(data: Any) -> str:
    """Render data as indented JSON for diagnostic output."""
    return json.dumps(data, indent=2, default=str)


class Reporter:
    """Write prefixed diagnostics and run results to the terminal.

    Diagnostics (``INFO:``, ``WARN:``, ``ERROR:``) go to the error console;
    listings of dependencies go to the output console. Rich disables colors
    when the ``NO_COLOR`` environment variable is set.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        """Initialize the reporter.

        Args:
            console: Console for results (defaults to stdout).
            error_console: Console for diagnostics (defaults to stderr).
        """
        self._console = console if console is not None else Console()
        self._error_console = (
            error_console if error_console is not None else Console(stderr=True)
        )

    def info(self, text: str) -> None:
        self._emit(self._error_console, f"INFO: {text}", INFO_STYLE)

    def warn(self, text: str) -> None:
        self._emit(self._error_console, f"WARN: {text}", WARN_STYLE)

    def error(self, text: str) -> None:
        self._emit(self._error_console, f"ERROR: {text}", ERROR_STYLE)

    def config_block(
        self, title: str, parameters: Mapping[str, Any], origin: Optional[str] = None
    ) -> None:
        """Print one stage of the configuration resolution.

        Args:
            title: Heading, e.g. "Parsed CLI arguments:".
            parameters: Parameter names and values of that stage.
            origin: Optional description of where the values came from.
        """
        self.info(title)
        if origin:
            self.info(f"({origin})")
        self.info(RULE)
        self.info(format_json(dict(parameters)))
        self.info(f"{RULE}\n")

    def restricted_entries(self, entries: Iterable[SummaryEntry]) -> None:
        """List restricted dependencies with their license."""
        for entry in entries:
            self._emit(
                self._console, f"X {entry.dependency}, {entry.license}", ERROR_STYLE
            )

    def unmatched_exclusion(self, dependency: str, annotation: Any = None) -> None:
        """List an exclusion entry that matched no restricted dependency."""
        self._emit(self._console, f"> {dependency}", UNMATCHED_STYLE)
        if annotation:
            self._emit(
                self._error_console, f"{dependency}: {format_json(annotation)}", None
            )

    @staticmethod
    def _emit(console: Console, text: str, style: Optional[str]) -> None:
        # Markup off: dependency ids and JSON contain square brackets
        console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)
