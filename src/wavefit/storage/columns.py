"""Column types shared by every columnar table.

Two storage types exist: 32-bit signed integers (``I``) and single
precision floats (``F``). The one-letter codes are the ones used in leaf
lists such as ``scanpt/I:x/F``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
import tables

from wavefit.core.exceptions import SchemaError

LEAF_SEPARATOR = ":"
TYPE_SEPARATOR = "/"


class TypeCode(str, Enum):
    """Storage type of a column."""

    INT = "I"  # int32
    FLOAT = "F"  # float32

    @property
    def dtype(self) -> np.dtype:
        """Numpy dtype used to hold values of this type."""
        return np.dtype(np.int32) if self is TypeCode.INT else np.dtype(np.float32)

    @classmethod
    def parse(cls, code: TypeCode | str) -> TypeCode:
        """Return the TypeCode for ``code``, raising SchemaError when unknown."""
        try:
            return cls(code)
        except ValueError:
            msg = f"Unknown column type code: {code!r} (expected 'I' or 'F')"
            raise SchemaError(msg) from None

    @classmethod
    def from_dtype(cls, dtype: np.dtype | str) -> TypeCode:
        """Map a stored numpy dtype back to its type code."""
        dtype = np.dtype(dtype)
        if dtype == np.int32:
            return cls.INT
        if dtype == np.float32:
            return cls.FLOAT
        msg = f"Unsupported column dtype: {dtype}"
        raise SchemaError(msg)


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """Name, type and meaning of one column."""

    name: str
    type_code: TypeCode
    description: str = ""

    @property
    def dtype(self) -> np.dtype:
        return self.type_code.dtype

    @property
    def leaf(self) -> str:
        """Leaf-list entry, e.g. ``"scanpt/I"``."""
        return f"{self.name}{TYPE_SEPARATOR}{self.type_code.value}"

    def coerce(self, value: object) -> int | float:
        """Convert ``value`` to the nearest value representable in this column.

        Raises
        ------
            TypeError, ValueError, OverflowError: if numpy cannot convert it
        """
        if self.type_code is TypeCode.INT:
            return int(np.int32(value))
        return float(np.float32(value))

    def pytables_col(self, pos: int) -> tables.Col:
        """PyTables column descriptor at position ``pos``."""
        if self.type_code is TypeCode.INT:
            return tables.Int32Col(pos=pos)
        return tables.Float32Col(pos=pos)


def make_leaflist(columns: list[ColumnSpec] | tuple[ColumnSpec, ...]) -> str:
    """Join column specs into a leaf-list string."""
    return LEAF_SEPARATOR.join(column.leaf for column in columns)


def parse_leaflist(leaflist: str) -> list[ColumnSpec]:
    """Split a leaf-list string back into column specs.

    Raises
    ------
        SchemaError: on malformed entries, unknown type codes or duplicate names
    """
    columns: list[ColumnSpec] = []
    seen: set[str] = set()
    for entry in leaflist.split(LEAF_SEPARATOR):
        name, sep, code = entry.partition(TYPE_SEPARATOR)
        if not sep or not name:
            msg = f"Malformed leaf-list entry: {entry!r}"
            raise SchemaError(msg)
        if name in seen:
            msg = f"Duplicate column in leaf list: {name!r}"
            raise SchemaError(msg)
        seen.add(name)
        columns.append(ColumnSpec(name, TypeCode.parse(code)))
    return columns


__all__ = [
    "ColumnSpec",
    "TypeCode",
    "make_leaflist",
    "parse_leaflist",
]
