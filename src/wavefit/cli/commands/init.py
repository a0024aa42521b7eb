"""Write a starter configuration for writing and inspecting fit results."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from wavefit.io.config import generate_default_config
from wavefit.models import StorageConfig
from wavefit.ui import error, info, success


def init_command(
    path: Annotated[
        Path,
        typer.Argument(
            help="Configuration file to create",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = Path("wavefit.toml"),
    table_name: Annotated[
        str,
        typer.Option("--table", "-t", help="Table node that results are stored under"),
    ] = "fits",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Replace an existing configuration"),
    ] = False,
) -> None:
    """Create a configuration with [storage] and [logging] sections.

    The file is read by ``wavefit show --config`` and by ``HDF5Table`` through
    ``load_config``; edit compression and the session log there.

    Examples
    --------
      Configuration for the default "fits" table:
        $ wavefit init

      One file per run, then inspect results with it:
        $ wavefit init run2.toml --table run2
        $ wavefit show scan.h5 --config run2.toml
    """
    try:
        StorageConfig(table_name=table_name)
    except ValidationError as e:
        error(f"Invalid table name {table_name!r}: must be a Python identifier")
        raise typer.Exit(1) from e

    if path.exists() and not force:
        error(f"Configuration already exists: [path]{path}[/path]")
        info("Pass [code]--force[/code] to replace it")
        raise typer.Exit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_default_config(table_name))
    success(f"Wrote configuration for table '{table_name}': [path]{path}[/path]")
    info(f"Inspect results with: [code]wavefit show RESULTS.h5 --config {path}[/code]")
