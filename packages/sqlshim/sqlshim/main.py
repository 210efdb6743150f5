"""sqlshim: CLI Entry Point
---------------------------------------------------------
The entry point for the ``sqlshim`` console script. It builds the main Typer
application and attaches the diagnostic commands used to check whether a
capability can be resolved in the current environment.

Public API
----------
``app`` : The main Typer application instance.
"""

from __future__ import annotations

import typer

from . import __version__
from .commands import config as config_cmd
from .commands.check import check_command

app = typer.Typer(help="sqlshim CLI")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sqlshim {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """sqlshim command line interface."""
    pass


app.command("check")(check_command)

app.add_typer(config_cmd.app, name="config", help="Inspect system configuration")
