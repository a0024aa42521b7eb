"""Typer callbacks for CLI."""

import typer

from wavefit.ui import VERSION, console


def version_callback(value: bool | None) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"WaveFit version {VERSION}")
        raise typer.Exit
