"""Reader for the exclusions (baseline) file."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from dash_license_check.exceptions import ExclusionsFormatError

ExclusionMap = dict[str, Any]


def read_exclusions(exclusions: Union[str, Path]) -> ExclusionMap:
    """Read the exclusions file into a map of dependency to annotation.

    Two formats are accepted:

    - a list of dependency identifiers, e.g. ``["npm/npmjs/-/a/1.0"]``;
      every annotation is None.
    - an object keyed by dependency identifier; the values (any JSON) are
      kept as annotations, e.g. a link to the IP review ticket.

    Args:
        exclusions: Path to an existing exclusions JSON file.

    Returns:
        Mapping of dependency identifier to its annotation.

    Raises:
        ExclusionsFormatError: If the file is not valid JSON, its root is
            neither a list nor an object, or a list element is not a string.
    """
    try:
        data = json.loads(Path(exclusions).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ExclusionsFormatError(f'Cannot read "{exclusions}": {e}') from e

    if isinstance(data, list):
        invalid = [element for element in data if not isinstance(element, str)]
        if invalid:
            raise ExclusionsFormatError(
                f'Invalid format for "{exclusions}": '
                f"list entries must be strings, got {invalid!r}"
            )
        return {element: None for element in data}

    if isinstance(data, dict):
        return dict(data)

    raise ExclusionsFormatError(f'Invalid format for "{exclusions}"')
