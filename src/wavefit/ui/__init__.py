"""UI and terminal output styling for WaveFit.

Submodules:
- console: Theme and console instance
- logging: Logging setup and the ``log`` helper
- messages: Status messages (success, error, warning, info)
- tables: Table display utilities
"""

from wavefit.ui.console import VERSION, WAVEFIT_THEME, console, icon
from wavefit.ui.logging import close_logging, log, setup_logging
from wavefit.ui.messages import error, info, success, warning
from wavefit.ui.tables import create_table, print_records, print_schema, print_summary

__all__ = [
    "VERSION",
    "WAVEFIT_THEME",
    "close_logging",
    "console",
    "create_table",
    "error",
    "icon",
    "info",
    "log",
    "print_records",
    "print_schema",
    "print_summary",
    "setup_logging",
    "success",
    "warning",
]
