"""Console configuration and theme for WaveFit UI.

This module provides the central console instance and theme used throughout
the application for consistent styling.
"""

import os
import sys
from importlib import metadata

from rich.console import Console
from rich.theme import Theme

try:
    _PKG_VERSION = metadata.version("wavefit")
except metadata.PackageNotFoundError:
    _PKG_VERSION = "dev"

WAVEFIT_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        "neutral": "dim white",
        # --- UI Structure ---
        "header": "bold cyan",
        "subheader": "bold white",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "path": "blue underline",
        "code": "bold magenta",
        "dim": "dim",
    }
)

# Single console instance for entire application
console = Console(theme=WAVEFIT_THEME)

VERSION = _PKG_VERSION

_EMOJI_DISABLED = os.getenv("WAVEFIT_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_emoji() -> bool:
    """Best-effort detection if the terminal supports Unicode symbols."""
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a UI icon string based on terminal capabilities.

    Names: check, warn, error, info, bullet
    """
    use_emoji = _supports_emoji()
    mapping = {
        "check": "✓" if use_emoji else "+",
        "warn": "⚠" if use_emoji else "!",
        "error": "✗" if use_emoji else "x",
        "info": "▸" if use_emoji else ">",
        "bullet": "‣" if use_emoji else "-",
    }
    return mapping.get(name, mapping["bullet"])


__all__ = [
    "VERSION",
    "WAVEFIT_THEME",
    "console",
    "icon",
]
