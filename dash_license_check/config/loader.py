"""Configuration file loading for dash-license-check."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from dash_license_check.config.defaults import YAML_SUFFIXES
from dash_license_check.exceptions import ConfigurationError
from dash_license_check.models.config import EffectiveConfig
from dash_license_check.output.reporter import Reporter


def _parse_content(path: Path, content: str) -> Any:
    """Parse config file content as JSON, or YAML for .yaml/.yml files."""
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON syntax in '{path}': {e}") from e


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def load_config_file(path: Path, reporter: Reporter) -> dict[str, Any]:
    """Load the parameters defined in a configuration file.

    A missing file is not an error: a warning is printed and no parameters
    are returned. Unknown keys, blank values and values of the wrong type
    are warned about and ignored.

    Args:
        path: Path to the configuration file.
        reporter: Where to print warnings and the loaded parameters.

    Returns:
        Mapping of recognized parameter names to their raw values.

    Raises:
        ConfigurationError: If the file cannot be read, cannot be parsed,
            or its root is not a mapping.
    """
    config_path = path.resolve()
    if not config_path.exists():
        reporter.warn(f"Config file not found: {config_path} - ignoring it")
        return {}

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{config_path}': {e}"
        ) from e

    # Empty files (or YAML with only comments) define nothing
    data = _parse_content(config_path, content) if content.strip() else None
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{config_path}': "
            f"expected an object at root level, got {type(data).__name__}"
        )

    known = set(EffectiveConfig.parameter_names())
    parameters: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            reporter.warn(f'Unknown config file entry: "{key}" - ignoring it')
            continue
        if _is_blank(value):
            reporter.warn(
                f'({config_path.name}) - config file entry "{key}" is undefined '
                "- ignoring it"
            )
            continue
        problem = EffectiveConfig.check_parameter(key, value)
        if problem is not None:
            reporter.warn(
                f'({config_path.name}) - config file entry "{key}" has an invalid '
                f"value ({problem}) - ignoring it"
            )
            continue
        parameters[key] = value

    reporter.config_block(
        "Parsed config file arguments: ",
        parameters,
        origin=f"From file: {config_path}",
    )
    return parameters
