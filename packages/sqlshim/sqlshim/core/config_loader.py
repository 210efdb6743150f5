"""Configuration loading utilities.

This module loads the system configuration from the packaged ``system.yaml``
and the user and environment overrides layered on top of it, and can render
the effective configuration back to YAML for display.
"""

from __future__ import annotations

import importlib.resources as ilr
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import SqlShimConfigError, SqlShimError, get_logger
from .system_config import SystemConfig
from .utils import deep_merge_dicts, load_yaml_file

logger = get_logger()

ENV_VAR = "SQLSHIM_SYSTEM_CONFIG"

# Cache for system config
_SYSTEM_CONFIG_CACHE: SystemConfig | None = None


def load_system_config(
    *, force_reload: bool = False, config_path: str | Path | None = None
) -> SystemConfig:
    """Load system configuration with override chain.

    Search order (later overrides earlier):
    1. Package default (sqlshim.core/system.yaml)
    2. ~/.sqlshim/config.yaml (User-specific)
    3. SQLSHIM_SYSTEM_CONFIG environment variable
    4. Explicitly provided config_path

    Parameters
    ----------
    force_reload : bool
        If True, ignore cache and reload
    config_path : str or Path, optional
        Path to specific config file to override everything else

    Returns
    -------
    SystemConfig
        Loaded system configuration

    Raises
    ------
    SqlShimConfigError
        - [502] The merged configuration fails validation, or the explicit
          ``config_path`` cannot be loaded.

    """
    global _SYSTEM_CONFIG_CACHE

    if _SYSTEM_CONFIG_CACHE is not None and not force_reload and config_path is None:
        return _SYSTEM_CONFIG_CACHE

    # 1. Package default
    try:
        system_yaml_path = ilr.files("sqlshim.core").joinpath("system.yaml")
        config_dict = load_yaml_file(Path(str(system_yaml_path)))
    except SqlShimError:
        logger.warning("Could not load default system.yaml from package")
        config_dict = {}

    # 2. User config
    user_path = Path.home() / ".sqlshim" / "config.yaml"
    if user_path.exists():
        try:
            config_dict = deep_merge_dicts(config_dict, load_yaml_file(user_path))
        except SqlShimError as e:
            logger.warning(f"Failed to load user config {user_path}: {e}")

    # 3. Environment variable
    env_path = os.environ.get(ENV_VAR)
    if env_path:
        path = Path(env_path)
        if path.exists():
            try:
                config_dict = deep_merge_dicts(config_dict, load_yaml_file(path))
            except SqlShimError as e:
                logger.warning(f"Failed to load env config {path}: {e}")

    # 4. Explicit path
    if config_path:
        path = Path(config_path)
        try:
            explicit_dict = load_yaml_file(path)
        except SqlShimError as e:
            raise SqlShimConfigError(
                f"[502] Failed to load explicit config {path}: {e}"
            ) from e
        config_dict = deep_merge_dicts(config_dict, explicit_dict)

    try:
        config = SystemConfig(**config_dict)
    except ValidationError as e:
        raise SqlShimConfigError(f"[502] Invalid system configuration: {e}") from e

    if config_path is None:
        _SYSTEM_CONFIG_CACHE = config
    return config


def get_system_param(
    path: str, default: Any = None, *, config: SystemConfig | None = None
) -> Any:
    """Get a specific system parameter by dot-separated path.

    Reads from ``config`` when given, otherwise from ``load_system_config()``.
    """
    if config is None:
        config = load_system_config()
    current: Any = config.model_dump()

    for segment in path.split("."):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default

    return current


def dump_system_config(config: SystemConfig) -> str:
    """Render a configuration as YAML text."""
    return yaml.safe_dump(
        config.model_dump(exclude_none=True), sort_keys=False, default_flow_style=False
    )
