"""Exception taxonomy for WaveFit.

Table facilities raise these so callers can tell a schema problem from a
storage problem. Records never catch them; they surface unchanged.
"""

from __future__ import annotations


class WaveFitError(Exception):
    """Base class for all WaveFit-specific exceptions."""


class SchemaError(WaveFitError):
    """Column declaration errors (name collisions, unknown types, missing columns)."""


class TableStateError(WaveFitError):
    """Operation not allowed in the table's current state (read-only, finalized, closed)."""


class DataIOError(WaveFitError):
    """Data loading/saving errors (files, table nodes, permissions)."""


__all__ = [
    "DataIOError",
    "SchemaError",
    "TableStateError",
    "WaveFitError",
]
