"""CLI command modules for WaveFit.

Each module exports one command function; app.py registers them.
"""

from wavefit.cli.commands.info import info_command
from wavefit.cli.commands.init import init_command
from wavefit.cli.commands.schema import schema_command
from wavefit.cli.commands.show import show_command

__all__ = [
    "info_command",
    "init_command",
    "schema_command",
    "show_command",
]
