"""Core module for WaveFit - the fit result record and error types."""

from wavefit.core.exceptions import (
    DataIOError,
    SchemaError,
    TableStateError,
    WaveFitError,
)
from wavefit.core.record import FIELDS, FitResultRecord, iter_records

__all__ = [
    "FIELDS",
    "DataIOError",
    "FitResultRecord",
    "SchemaError",
    "TableStateError",
    "WaveFitError",
    "iter_records",
]
