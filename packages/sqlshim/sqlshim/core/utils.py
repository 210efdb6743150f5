"""sqlshim: Core Utilities
---------------------------------------------------------
Shared helpers for configuration handling: YAML loading with typed errors and
deep dictionary merging for the override chain.

Public API
----------
``load_yaml_file`` : Load a YAML mapping with error handling
``deep_merge_dicts`` : Recursive dictionary merge, override wins
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .errors import SqlShimConfigError, SqlShimIOError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file whose top level is a mapping.

    Parameters
    ----------
    path : Path
        Path to the YAML file

    Returns
    -------
    dict[str, Any]
        Loaded data; an empty file yields an empty dict.

    Raises
    ------
    SqlShimIOError
        - [100] The file does not exist.
    SqlShimConfigError
        - [501] The file cannot be parsed or is not a mapping.

    """
    if not path.exists():
        raise SqlShimIOError(f"[100] File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SqlShimConfigError(f"[501] Failed to parse YAML file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SqlShimConfigError(
            f"[501] Expected a mapping at the top of {path}, got {type(data).__name__}"
        )
    return data


def deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override values taking precedence."""
    result = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
