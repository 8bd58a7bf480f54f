"""Configuration handling for dash-license-check."""
from __future__ import annotations

from dash_license_check.config.defaults import DEFAULT_CONFIG_FILE, get_default_config
from dash_license_check.config.flags import FLAG_SPECS, FlagSpec, parse_cli_args
from dash_license_check.config.loader import load_config_file
from dash_license_check.config.resolver import merge_parameters, resolve_config
from dash_license_check.models.config import EffectiveConfig

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "EffectiveConfig",
    "FLAG_SPECS",
    "FlagSpec",
    "get_default_config",
    "load_config_file",
    "merge_parameters",
    "parse_cli_args",
    "resolve_config",
]
