"""Schema command implementation."""

from __future__ import annotations

from typing import Annotated

import typer

from wavefit.core.record import FitResultRecord
from wavefit.ui import console, print_schema


def schema_command(
    leaflist: Annotated[
        bool,
        typer.Option(
            "--leaflist",
            "-l",
            help="Print the compact leaf-list string instead of a table",
        ),
    ] = False,
) -> None:
    """Show the column layout of a fit result row.

    Examples
    --------
      Table of columns:
        $ wavefit schema

      Leaf list (name/type pairs):
        $ wavefit schema --leaflist
    """
    if leaflist:
        # Plain print so the string can be piped
        typer.echo(FitResultRecord().describe_schema())
        return

    print_schema(FitResultRecord.fields())
    console.print("[dim]I = int32, F = float32[/dim]")
