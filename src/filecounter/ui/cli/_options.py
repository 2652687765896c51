"""Shared Typer argument and option definitions."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from filecounter.version import get_version


STORAGE_PANEL = "Storage"
DIAGNOSTICS_PANEL = "Diagnostics"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


PathArgument = Annotated[
    Path,
    typer.Argument(
        metavar="PATH",
        help="File storing the counter value. Created if missing, overwritten on every change.",
        dir_okay=False,
        show_default=False,
    ),
]

StartValueArgument = Annotated[
    int | None,
    typer.Argument(
        metavar="[START_VALUE]",
        help=(
            "Start from this value instead of the file content. "
            "Pass negative values after '--', e.g. 'counter tally.txt -- -5'."
        ),
        show_default=False,
    ),
]

NoSyncOption = Annotated[
    bool,
    typer.Option(
        "--no-sync",
        "-n",
        help="Skip fsync after each write (faster, less durable).",
        rich_help_panel=STORAGE_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks and debug logs when something goes wrong.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

VersionOption = Annotated[
    bool | None,
    typer.Option(
        "--version",
        help="Show the installed version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "DIAGNOSTICS_PANEL",
    "STORAGE_PANEL",
    "DebugOption",
    "NoSyncOption",
    "PathArgument",
    "StartValueArgument",
    "VerboseOption",
    "VersionOption",
]
