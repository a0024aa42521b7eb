"""Main Typer application for WaveFit."""

from typing import Annotated

import typer

from wavefit.cli.callbacks import version_callback
from wavefit.cli.commands import info_command, init_command, schema_command, show_command

app = typer.Typer(
    name="wavefit",
    help="WaveFit - Waveform fit results in columnar tables",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """WaveFit - Waveform fit results in columnar tables.

    Inspect the fit result layout and the HDF5 files written with it.
    """


app.command(name="schema")(schema_command)
app.command(name="init")(init_command)
app.command(name="show")(show_command)
app.command(name="info")(info_command)
