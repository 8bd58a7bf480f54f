"""Analysis of dash-licenses results."""
from dash_license_check.analysis.reconciliation import reconcile, report_reconciliation

__all__ = [
    "reconcile",
    "report_reconciliation",
]
