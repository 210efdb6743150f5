"""sqlshim: Configuration CLI Commands
---------------------------------------------------------
Implements the ``sqlshim config`` command group for inspecting the effective
system configuration after all overrides have been applied.

Public API
----------
``show`` : Print the effective configuration, or one value of it, as YAML
"""

from __future__ import annotations

import typer
import yaml

from sqlshim.core.config_loader import (
    dump_system_config,
    get_system_param,
    load_system_config,
)
from sqlshim.core.errors import SqlShimError, get_logger

app = typer.Typer()

_MISSING = object()


@app.command()
def show(
    config_path: str | None = typer.Option(
        None, "--config", help="Explicit system configuration file"
    ),
    key: str | None = typer.Option(
        None,
        "--key",
        "-k",
        help="Dot-separated parameter to show, e.g. capabilities.SQL.module",
    ),
):
    """Show the effective system configuration."""
    log = get_logger()
    try:
        system_cfg = load_system_config(force_reload=True, config_path=config_path)
    except SqlShimError as e:
        log.error(str(e))
        raise typer.Exit(code=1) from e

    if key is None:
        typer.echo(dump_system_config(system_cfg), nl=False)
        return

    value = get_system_param(key, _MISSING, config=system_cfg)
    if value is _MISSING:
        log.error(f"Unknown configuration key: {key}")
        raise typer.Exit(code=1)
    if isinstance(value, (dict, list)):
        typer.echo(yaml.safe_dump(value, sort_keys=False), nl=False)
    else:
        typer.echo(value)
