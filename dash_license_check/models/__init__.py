"""Pydantic data models for dash-license-check."""

from dash_license_check.models.config import EffectiveConfig
from dash_license_check.models.process import ProcessStatus
from dash_license_check.models.summary import ReconciliationResult, SummaryEntry

__all__ = [
    "EffectiveConfig",
    "ProcessStatus",
    "ReconciliationResult",
    "SummaryEntry",
]
