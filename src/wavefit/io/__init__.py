"""I/O module for WaveFit.

Handles configuration file loading/saving (TOML).
"""

from wavefit.io.config import generate_default_config, load_config, save_config

__all__ = [
    "generate_default_config",
    "load_config",
    "save_config",
]
