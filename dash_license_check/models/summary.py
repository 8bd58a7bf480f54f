"""Models for dash-licenses summary entries and their reconciliation."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from dash_license_check.constants import RESTRICTED_STATUS


class SummaryEntry(BaseModel):
    """One line of the dash-licenses summary file.

    Fields missing from a malformed line are None.
    """

    model_config = {"extra": "forbid", "frozen": True}

    dependency: Optional[str] = Field(
        default=None, description="Dependency identifier, e.g. npm/npmjs/-/a/1.0"
    )
    license: Optional[str] = Field(default=None, description="License expression")
    status: Optional[str] = Field(
        default=None, description="Compliance status, e.g. approved or restricted"
    )
    source: Optional[str] = Field(
        default=None, description="Where the license information came from"
    )

    @property
    def is_restricted(self) -> bool:
        """Check if the entry status is "restricted" (case-insensitive)."""
        if self.status is None:
            return False
        return self.status.casefold() == RESTRICTED_STATUS


class ReconciliationResult(BaseModel):
    """Restricted entries partitioned against the exclusions.

    Attributes:
        excluded: Restricted entries covered by an exclusion.
        unhandled: Restricted entries not covered by any exclusion.
        unmatched_exclusions: Exclusion identifiers that matched nothing.
    """

    model_config = {"extra": "forbid", "frozen": True}

    excluded: list[SummaryEntry] = Field(default_factory=list)
    unhandled: list[SummaryEntry] = Field(default_factory=list)
    unmatched_exclusions: list[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Check if every restricted entry is covered by an exclusion."""
        return not self.unhandled
