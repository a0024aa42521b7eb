"""Info command implementation."""

from __future__ import annotations

import sys

import numpy as np
import tables

from wavefit.ui import VERSION, console


def info_command() -> None:
    """Show version information for WaveFit and its storage stack."""
    console.print("[bold]WaveFit System Information[/bold]\n")
    console.print(f"[green]WaveFit version:[/green] {VERSION}")
    console.print(f"[green]Python version:[/green] {sys.version.split()[0]}")
    console.print(f"[green]NumPy version:[/green] {np.__version__}")
    console.print(f"[green]PyTables version:[/green] {tables.__version__}")
    console.print(f"[green]HDF5 version:[/green] {tables.hdf5_version}")
