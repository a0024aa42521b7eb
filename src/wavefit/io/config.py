"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w

from wavefit.models import WaveFitConfig


def load_config(path: Path) -> WaveFitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        WaveFitConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    return WaveFitConfig.model_validate(data)


def save_config(config: WaveFitConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: Configuration object to save.
        path: Path where to save the TOML file.
    """
    # TOML has no null; unset options are left out
    data = config.model_dump(mode="json", exclude_none=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config(table_name: str = "fits") -> str:
    """Generate a default configuration file as a string.

    Args:
        table_name: Table node name written into the storage section.

    Returns:
        str: TOML-formatted default configuration.
    """
    return f"""# WaveFit Configuration File
# Generated automatically - edit as needed

[storage]
# table node name inside the HDF5 file
table_name = "{table_name}"
title = "Waveform fit results"
complevel = 5                   # 0 (off) to 9
complib = "zlib"                # zlib, blosc, lzo, bzip2
expected_rows = 10000

[logging]
# log_file = "wavefit.log"      # Uncomment to write a session log (.json for structured)
log_format = "text"             # text or json
verbose = false
"""
