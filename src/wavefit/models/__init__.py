"""Pydantic models for WaveFit configuration."""

from wavefit.models.config import (
    CompressionLibrary,
    LogFormat,
    LoggingConfig,
    StorageConfig,
    WaveFitConfig,
)

__all__ = [
    "CompressionLibrary",
    "LogFormat",
    "LoggingConfig",
    "StorageConfig",
    "WaveFitConfig",
]
