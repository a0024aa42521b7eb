"""Show command implementation."""

from __future__ import annotations

import tomllib
from itertools import islice
from pathlib import Path
from typing import Annotated

import numpy as np
import typer
from pydantic import ValidationError

from wavefit.core.exceptions import WaveFitError
from wavefit.core.record import FIELDS, FitResultRecord, iter_records
from wavefit.io.config import load_config
from wavefit.models import WaveFitConfig
from wavefit.storage import HDF5Table
from wavefit.ui import (
    close_logging,
    error,
    info,
    print_records,
    print_summary,
    setup_logging,
    warning,
)


def _load(config_path: Path | None) -> WaveFitConfig:
    if config_path is None:
        return WaveFitConfig()
    try:
        return load_config(config_path)
    except (FileNotFoundError, tomllib.TOMLDecodeError, ValidationError) as e:
        error(f"Invalid configuration {config_path}: {e}")
        raise typer.Exit(1) from e


def show_command(
    results: Annotated[
        Path,
        typer.Argument(
            help="HDF5 file holding fit results",
            dir_okay=False,
        ),
    ],
    table_name: Annotated[
        str | None,
        typer.Option("--table", "-t", help="Table node name (default from config)"),
    ] = None,
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", min=0, help="Maximum number of rows to print (0 = none)"),
    ] = 20,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="TOML configuration file", dir_okay=False),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Print log records on the console"),
    ] = False,
) -> None:
    """Print the fit results stored in an HDF5 file.

    Examples
    --------
      First 20 rows:
        $ wavefit show scan.h5

      Summary only, custom table:
        $ wavefit show scan.h5 --table run2 --limit 0
    """
    config = _load(config_path)
    setup_logging(
        config.logging.log_file,
        verbose=verbose or config.logging.verbose,
        log_format=config.logging.log_format,
    )

    try:
        with HDF5Table(results, "r", name=table_name, config=config.storage) as table:
            names = [spec.name for spec in FIELDS]
            record = FitResultRecord()
            record.bind_for_read(table)
            rows = [row.as_dict() for row in islice(iter_records(table, record), limit)]

            data = table.read()
            n_pulses = int(np.count_nonzero(data["haswf"]))
            n_failed = int(np.count_nonzero(data["fitstat"]))

            print_summary(
                {
                    "File": results,
                    "Table": table.name,
                    "Title": table.title,
                    "Entries": table.num_entries,
                    "With pulse": n_pulses,
                    "Failed fits": n_failed,
                },
                title="Fit results",
            )
    except WaveFitError as e:
        error(str(e))
        raise typer.Exit(1) from e
    finally:
        close_logging()

    if table.num_entries == 0:
        warning(f"Table '{table.name}' holds no entries")
    elif rows:
        print_records(names, rows)
        if len(rows) < table.num_entries:
            info(f"Showing {len(rows)} of {table.num_entries} entries (use --limit)")
