"""Readers for the files exchanged with dash-licenses."""

from dash_license_check.readers.exclusions import ExclusionMap, read_exclusions
from dash_license_check.readers.summary import (
    get_restricted_dependencies,
    parse_summary_line,
    read_summary_lines,
    sort_by_dependency,
)

__all__ = [
    "ExclusionMap",
    "get_restricted_dependencies",
    "parse_summary_line",
    "read_exclusions",
    "read_summary_lines",
    "sort_by_dependency",
]
