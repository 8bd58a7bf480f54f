"""Parsing of the wrapper's command-line flags."""
from __future__ import annotations

import re
from typing import NamedTuple, Sequence, Union

from dash_license_check.output.reporter import Reporter, format_json

FlagValue = Union[str, bool]


class FlagSpec(NamedTuple):
    """Shape of one recognized command-line flag.

    Attributes:
        name: Parameter name the flag sets.
        pattern: Regular expression matched against the start of a token.
        takes_value: Whether the flag carries a ``=value`` part.
    """

    name: str
    pattern: re.Pattern[str]
    takes_value: bool


def _value_flag(name: str, value_pattern: str = r"\S+") -> FlagSpec:
    return FlagSpec(name, re.compile(rf"--{name}=({value_pattern})"), True)


def _switch_flag(name: str) -> FlagSpec:
    # Whole token only: "--reviewer" is not "--review"
    return FlagSpec(name, re.compile(rf"--{name}$"), False)


# Order matters: the first matching flag wins
FLAG_SPECS: tuple[FlagSpec, ...] = (
    _value_flag("configFile"),
    _value_flag("batch", r"\d+"),
    _switch_flag("dryRun"),
    _value_flag("exclusions"),
    _value_flag("inputFile"),
    _value_flag("project"),
    _switch_flag("review"),
    _value_flag("summary"),
    _value_flag("timeout", r"\d+"),
)


def match_flag(token: str) -> tuple[str, FlagValue] | None:
    """Match a single token against the recognized flags.

    Args:
        token: One command-line argument, e.g. "--batch=20".

    Returns:
        (parameter name, value) for the first matching flag, or None.
        Switch flags have the value True.
    """
    for spec in FLAG_SPECS:
        match = spec.pattern.match(token)
        if match is None:
            continue
        if spec.takes_value:
            return spec.name, match.group(1)
        return spec.name, True
    return None


def parse_cli_args(
    tokens: Sequence[str], reporter: Reporter
) -> dict[str, FlagValue]:
    """Parse command-line tokens into parameter values.

    Unrecognized tokens are reported as warnings and skipped; parsing
    carries on with the remaining tokens.

    Args:
        tokens: Command-line arguments, without the program name.
        reporter: Where to print warnings and the parsed values.

    Returns:
        Mapping of parameter name to its string value (or True for switches).
    """
    parsed: dict[str, FlagValue] = {}
    failed = False

    for token in tokens:
        result = match_flag(token)
        if result is None:
            failed = True
            reporter.warn(
                f'The following CLI argument was not parsed successfully: "{token}"'
            )
            continue
        name, value = result
        parsed[name] = value

    if failed:
        reporter.warn(
            "Here are the supported CLI configurations and the Regular "
            "Expressions used to parse them:"
        )
        reporter.warn(
            format_json({spec.name: spec.pattern.pattern for spec in FLAG_SPECS})
        )

    reporter.config_block("Parsed CLI arguments: ", parsed)
    return parsed
