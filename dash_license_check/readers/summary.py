"""Reader for the dash-licenses summary file."""
from __future__ import annotations

import locale
from pathlib import Path
from typing import Iterator, Optional, Union

from dash_license_check.constants import SUMMARY_DELIMITER
from dash_license_check.exceptions import ScanError
from dash_license_check.models.summary import SummaryEntry

SUMMARY_FIELDS = ("dependency", "license", "status", "source")


def parse_summary_line(line: str) -> SummaryEntry:
    """Parse one summary line into its four positional fields.

    This is a plain split on ", ": quoting is not handled. Missing fields
    are None and anything after the fourth field is ignored.

    Args:
        line: A line of the summary file, without the line terminator.

    Returns:
        The parsed SummaryEntry.
    """
    parts = line.split(SUMMARY_DELIMITER)
    values: list[Optional[str]] = [*parts[: len(SUMMARY_FIELDS)]]
    values += [None] * (len(SUMMARY_FIELDS) - len(values))
    return SummaryEntry(**dict(zip(SUMMARY_FIELDS, values)))


def read_summary_lines(summary: Union[str, Path]) -> Iterator[SummaryEntry]:
    """Lazily read each entry of a summary file, in file order.

    Bytes that are not valid UTF-8 are replaced with U+FFFD.

    Args:
        summary: Path to the summary file.

    Yields:
        One SummaryEntry per line.

    Raises:
        ScanError: If the summary file cannot be read.
    """
    try:
        with open(summary, encoding="utf-8", errors="replace") as f:
            for line in f:
                yield parse_summary_line(line.rstrip("\r\n"))
    except OSError as e:
        raise ScanError(f"Cannot read summary file '{summary}': {e}") from e


def sort_by_dependency(entries: list[SummaryEntry]) -> list[SummaryEntry]:
    """Sort entries by dependency using the current locale's collation."""
    return sorted(entries, key=lambda e: locale.strxfrm(e.dependency or ""))


def get_restricted_dependencies(summary: Union[str, Path]) -> list[SummaryEntry]:
    """Collect the restricted entries of a summary file.

    Args:
        summary: Path to the summary file.

    Returns:
        Entries whose status is "restricted" (case-insensitive), sorted
        by dependency.
    """
    restricted = [entry for entry in read_summary_lines(summary) if entry.is_restricted]
    return sort_by_dependency(restricted)
