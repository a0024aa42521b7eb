"""WaveFit - storage of waveform fit results in columnar tables.

Public API:
    - FitResultRecord: one waveform fit outcome, bindable to table rows
    - MemoryTable, HDF5Table: columnar tables
    - iter_records: iterate the stored rows of a table

Configuration:
    - WaveFitConfig: Main configuration object
    - StorageConfig, LoggingConfig: Sub-configurations
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from wavefit.core.exceptions import (  # noqa: E402
    DataIOError,
    SchemaError,
    TableStateError,
    WaveFitError,
)
from wavefit.core.record import FitResultRecord, iter_records  # noqa: E402
from wavefit.models import LoggingConfig, StorageConfig, WaveFitConfig  # noqa: E402
from wavefit.storage import HDF5Table, MemoryTable  # noqa: E402

__all__ = [
    "__version__",
    # Record
    "FitResultRecord",
    "iter_records",
    # Tables
    "HDF5Table",
    "MemoryTable",
    # Configuration
    "LoggingConfig",
    "StorageConfig",
    "WaveFitConfig",
    # Errors
    "DataIOError",
    "SchemaError",
    "TableStateError",
    "WaveFitError",
]
