"""dash-license-check - gate builds on Eclipse dash-licenses findings."""

__version__ = "0.1.0"
