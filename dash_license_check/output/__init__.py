"""Console output for dash-license-check."""

from dash_license_check.output.reporter import Reporter

__all__ = ["Reporter"]
