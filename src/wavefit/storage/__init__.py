"""Columnar tables a FitResultRecord can be bound to.

- MemoryTable: rows kept in memory, exported as numpy structured arrays
- HDF5Table: rows stored in a PyTables table node
"""

from wavefit.storage.base import BoundTable, ColumnarTable
from wavefit.storage.columns import ColumnSpec, TypeCode, make_leaflist, parse_leaflist
from wavefit.storage.hdf5 import HDF5Table
from wavefit.storage.memory import MemoryTable

__all__ = [
    "BoundTable",
    "ColumnSpec",
    "ColumnarTable",
    "HDF5Table",
    "MemoryTable",
    "TypeCode",
    "make_leaflist",
    "parse_leaflist",
]
