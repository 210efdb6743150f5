"""sqlshim: Capability Check Command
---------------------------------------------------------
Implements ``sqlshim check``: resolves a capability into a fresh namespace,
exactly as a program would on first use, and reports where it came from. A
missing capability is logged and turned into a non-zero exit code.
"""

from __future__ import annotations

import types

import typer

from sqlshim.core.config_loader import load_system_config
from sqlshim.core.errors import (
    CapabilityUnavailable,
    SqlShimError,
    configure_logging,
    get_logger,
)
from sqlshim.core.namespace import SharedNamespace
from sqlshim.core.resolver import require


def check_command(
    name: str | None = typer.Argument(
        None, help="Capability to resolve (defaults to the configured default)"
    ),
    config_path: str | None = typer.Option(
        None, "--config", help="Explicit system configuration file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    log_file: str | None = typer.Option(None, help="Write logs to file path"),
    log_json: bool = typer.Option(False, help="Log in JSON format"),
    suppress_warnings: bool = typer.Option(False, help="Suppress warnings output"),
):
    """Check that a capability can be found or loaded.

    Examples
    --------
        sqlshim check
        sqlshim check SQL --verbose
        sqlshim check --config ./system.yaml

    """
    log = get_logger()

    try:
        configure_logging(
            verbose=verbose,
            log_file=log_file,
            as_json=log_json,
            suppress_warnings=suppress_warnings,
        )
        system_cfg = load_system_config(force_reload=True, config_path=config_path)
        target = name or system_cfg.default_capability
        ref = require(target, namespace=SharedNamespace(), config=system_cfg)
    except CapabilityUnavailable as e:
        log.error(str(e))
        if e.__cause__ is not None:
            log.debug(f"Caused by: {e.__cause__!r}")
        raise typer.Exit(code=1) from e
    except SqlShimError as e:
        log.error(str(e))
        raise typer.Exit(code=1) from e

    typer.echo(f"OK: {target} -> {_describe(ref)}")


def _describe(ref: object) -> str:
    if isinstance(ref, types.ModuleType):
        return ref.__name__
    module = getattr(ref, "__module__", None)
    qualname = getattr(ref, "__qualname__", type(ref).__qualname__)
    return f"{module}.{qualname}" if module else qualname
