"""Reconciliation of restricted dependencies against the exclusions."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from dash_license_check.exceptions import UnhandledDependenciesError
from dash_license_check.models.summary import ReconciliationResult, SummaryEntry
from dash_license_check.output.reporter import Reporter


def reconcile(
    restricted: Sequence[SummaryEntry],
    exclusions: Optional[Mapping[str, Any]],
) -> ReconciliationResult:
    """Partition restricted entries into excluded and unhandled ones.

    Args:
        restricted: Restricted summary entries, already sorted.
        exclusions: Dependency identifier to annotation map, or None when
            there is no exclusions file (every entry is then unhandled).

    Returns:
        ReconciliationResult. Unmatched exclusions keep the order of the
        exclusions file.
    """
    if exclusions is None:
        return ReconciliationResult(unhandled=list(restricted))

    excluded: list[SummaryEntry] = []
    unhandled: list[SummaryEntry] = []
    matched: set[str] = set()

    for entry in restricted:
        if entry.dependency is not None and entry.dependency in exclusions:
            matched.add(entry.dependency)
            excluded.append(entry)
        else:
            unhandled.append(entry)

    return ReconciliationResult(
        excluded=excluded,
        unhandled=unhandled,
        unmatched_exclusions=[key for key in exclusions if key not in matched],
    )


def report_reconciliation(
    result: ReconciliationResult,
    exclusions: Optional[Mapping[str, Any]],
    reporter: Reporter,
) -> None:
    """Print the reconciliation outcome and fail on unhandled entries.

    Unmatched exclusions are only warned about: they are likely stale
    entries that can be removed from the exclusions file.

    Args:
        result: The reconciliation to report.
        exclusions: The map the result was computed from, or None.
        reporter: Where to print the outcome.

    Raises:
        UnhandledDependenciesError: If any restricted entry is unhandled.
    """
    if result.unmatched_exclusions and exclusions is not None:
        reporter.warn(
            "Some entries in the exclusions did not match anything from "
            "dash-licenses output:"
        )
        reporter.warn("(perhaps these entries are no longer required?)")
        for dependency in result.unmatched_exclusions:
            reporter.unmatched_exclusion(dependency, exclusions.get(dependency))

    if result.passed:
        return

    if exclusions is None:
        message = "Found unhandled restricted dependencies!"
    else:
        message = "Found results that aren't part of the exclusions!"
    raise UnhandledDependenciesError(message, entries=result.unhandled)
