"""Default configuration values for dash-license-check."""

from __future__ import annotations

from dash_license_check.models.config import EffectiveConfig

# Config file looked up in the working directory when --configFile is absent
DEFAULT_CONFIG_FILE: str = EffectiveConfig.model_fields["config_file"].default

# Suffixes of config files read as YAML instead of JSON
YAML_SUFFIXES = (".yaml", ".yml")


def get_default_config() -> EffectiveConfig:
    """Get the default configuration.

    Returns:
        EffectiveConfig with every parameter at its built-in default.
    """
    return EffectiveConfig()
