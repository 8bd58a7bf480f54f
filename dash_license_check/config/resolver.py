"""Resolution of the effective configuration from all sources."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Sequence

from pydantic import ValidationError

from dash_license_check.config.defaults import DEFAULT_CONFIG_FILE
from dash_license_check.config.flags import FlagValue, parse_cli_args
from dash_license_check.config.loader import load_config_file
from dash_license_check.exceptions import ConfigurationError
from dash_license_check.models.config import EffectiveConfig
from dash_license_check.output.reporter import Reporter


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def merge_parameters(
    cli_parameters: Mapping[str, Any],
    file_parameters: Mapping[str, Any],
) -> dict[str, Any]:
    """Merge parameter sources by precedence: CLI, then config file.

    Parameters absent from both sources are left out so the model default
    applies. Presence decides, so an explicit ``false`` in the config file
    is kept.

    Args:
        cli_parameters: Parameters parsed from the command line.
        file_parameters: Parameters loaded from the config file.

    Returns:
        Mapping of parameter name to the winning value.
    """
    merged: dict[str, Any] = {}
    for name in EffectiveConfig.parameter_names():
        if name in cli_parameters:
            merged[name] = cli_parameters[name]
        elif name in file_parameters:
            merged[name] = file_parameters[name]
    return merged


def _check_cli_values(parameters: Mapping[str, FlagValue]) -> None:
    """Reject CLI values that cannot override the config file.

    Raises:
        ConfigurationError: On the first invalid value, e.g. ``--batch=0``.
    """
    for name, value in parameters.items():
        problem = EffectiveConfig.check_parameter(name, value)
        if problem is not None:
            raise ConfigurationError(
                f'CLI argument "--{name}" has an invalid value: {problem}'
            )


def resolve_config(argv: Sequence[str], reporter: Reporter) -> EffectiveConfig:
    """Figure out the effective value of every parameter.

    In order of priority (highest to lowest): CLI, config file, defaults.
    A ``--configFile=`` flag selects the config file; otherwise the default
    file name in the working directory is used.

    Args:
        argv: Command-line arguments, without the program name.
        reporter: Where to print each stage of the resolution.

    Returns:
        The immutable effective configuration.

    Raises:
        ConfigurationError: If a CLI value is invalid or the config file
            cannot be used.
    """
    cli_parameters = parse_cli_args(argv, reporter)
    _check_cli_values(cli_parameters)

    if "configFile" in cli_parameters:
        config_path = Path(str(cli_parameters["configFile"])).resolve()
    else:
        config_path = Path(DEFAULT_CONFIG_FILE)

    file_parameters = load_config_file(config_path, reporter)

    try:
        config = EffectiveConfig.model_validate(
            merge_parameters(cli_parameters, file_parameters)
        )
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {_format_validation_errors(e)}"
        ) from e

    reporter.config_block("Effective configuration: ", config.to_parameters())
    return config
