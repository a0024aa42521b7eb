"""Columnar table interface and shared binding logic.

A table holds named, typed columns. Records bind to it in one of two
directions:

- write: ``branch`` ties a column to ``record.<name>``; every ``fill`` appends
  the current attribute values as one row.
- read: ``set_branch_address`` ties a column to ``record.<name>``; every
  ``get_entry`` copies the stored row into the attribute.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from wavefit.core.exceptions import SchemaError, TableStateError
from wavefit.storage.columns import ColumnSpec, TypeCode, make_leaflist
from wavefit.ui.logging import log

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence


@runtime_checkable
class ColumnarTable(Protocol):
    """Protocol for tables a FitResultRecord can bind to."""

    def branch(self, name: str, type_code: TypeCode | str, record: Any) -> None:
        """Declare a write column bound to ``record.<name>``."""
        ...

    def set_branch_address(self, name: str, type_code: TypeCode | str, record: Any) -> None:
        """Bind ``record.<name>`` as the read destination of an existing column."""
        ...

    def fill(self) -> int:
        """Append one row from the write bindings and return the entry count."""
        ...

    def get_entry(self, index: int) -> None:
        """Copy row ``index`` into the read bindings."""
        ...

    @property
    def num_entries(self) -> int:
        """Number of stored rows."""
        ...


class BoundTable(ABC):
    """Binding bookkeeping shared by the concrete tables.

    Subclasses provide storage through ``_append_row``, ``_read_row`` and
    ``num_entries``.
    """

    def __init__(self, name: str, *, readonly: bool = False) -> None:
        self.name = name
        self.readonly = readonly
        self._columns: dict[str, ColumnSpec] = {}
        self._writers: dict[str, Any] = {}
        self._readers: dict[str, Any] = {}
        self._frozen = False
        self._closed = False

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        """Declared columns in declaration order."""
        return tuple(self._columns.values())

    @property
    def column_names(self) -> list[str]:
        return list(self._columns)

    @property
    def leaflist(self) -> str:
        """Leaf-list string describing the declared columns."""
        return make_leaflist(self.columns)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def finalized(self) -> bool:
        """True once the schema can no longer grow."""
        return self._frozen

    def branch(self, name: str, type_code: TypeCode | str, record: Any) -> None:
        """Declare a write column bound to ``record.<name>``.

        Binding the same record again re-registers it. An existing column
        without a writer (loaded from storage) can be attached to if the
        types match.

        Raises
        ------
            TableStateError: table closed, read-only, or schema already frozen
            SchemaError: unknown type code, type mismatch, or name collision
        """
        self._check_open()
        if self.readonly:
            msg = f"Table '{self.name}' is read-only; cannot declare column {name!r}"
            raise TableStateError(msg)

        code = TypeCode.parse(type_code)
        existing = self._columns.get(name)

        if existing is None:
            if self._frozen:
                msg = f"Table '{self.name}' schema is finalized; cannot add column {name!r}"
                raise TableStateError(msg)
            self._columns[name] = ColumnSpec(name, code)
            self._writers[name] = record
            log(f"Table '{self.name}': declared column {name}/{code.value}", level="debug")
            return

        if existing.type_code is not code:
            msg = (
                f"Column {name!r} in table '{self.name}' is {existing.type_code.value}, "
                f"cannot bind as {code.value}"
            )
            raise SchemaError(msg)

        writer = self._writers.get(name)
        if writer is not None and writer is not record:
            msg = f"Column {name!r} already exists in table '{self.name}'"
            raise SchemaError(msg)
        self._writers[name] = record

    def set_branch_address(self, name: str, type_code: TypeCode | str, record: Any) -> None:
        """Bind ``record.<name>`` as the read destination of column ``name``.

        Raises
        ------
            TableStateError: table closed
            SchemaError: unknown type code, missing column, or type mismatch
        """
        self._check_open()
        code = TypeCode.parse(type_code)
        existing = self._columns.get(name)
        if existing is None:
            msg = f"Table '{self.name}' has no column {name!r}"
            raise SchemaError(msg)
        if existing.type_code is not code:
            msg = (
                f"Column {name!r} in table '{self.name}' is {existing.type_code.value}, "
                f"cannot read it as {code.value}"
            )
            raise SchemaError(msg)
        self._readers[name] = record

    def reset_branch_addresses(self) -> None:
        """Drop every read binding."""
        self._readers.clear()

    def finalize(self) -> None:
        """Freeze the schema; further ``branch`` calls may only re-bind.

        Raises
        ------
            SchemaError: no column has been declared
        """
        self._check_open()
        if not self._frozen:
            if not self._columns:
                msg = f"Table '{self.name}' has no columns"
                raise SchemaError(msg)
            self._frozen = True
            self._on_finalize()

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def fill(self) -> int:
        """Append one row built from the write bindings.

        Returns
        -------
            The number of entries after the fill
        """
        self._check_open()
        if self.readonly:
            msg = f"Table '{self.name}' is read-only"
            raise TableStateError(msg)
        if not self._columns:
            msg = f"Table '{self.name}' has no columns to fill"
            raise SchemaError(msg)

        values: dict[str, int | float] = {}
        for name, spec in self._columns.items():
            record = self._writers.get(name)
            if record is None:
                msg = f"Column {name!r} in table '{self.name}' has no write binding"
                raise SchemaError(msg)
            values[name] = spec.coerce(getattr(record, name))

        self.finalize()
        self._append_row(values)
        return self.num_entries

    def get_entry(self, index: int) -> None:
        """Copy row ``index`` into every read-bound record.

        Negative indices count from the end.

        Raises
        ------
            IndexError: index out of range
        """
        self._check_open()
        n = self.num_entries
        if index < 0:
            index += n
        if not 0 <= index < n:
            msg = f"Entry {index} out of range for table '{self.name}' with {n} entries"
            raise IndexError(msg)

        row = self._read_row(index)
        for name, record in self._readers.items():
            setattr(record, name, self._columns[name].coerce(row[name]))

    def __iter__(self) -> Iterator[int]:
        """Load each entry in turn, yielding its index."""
        for index in range(self.num_entries):
            self.get_entry(index)
            yield index

    def __len__(self) -> int:
        return self.num_entries

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self._closed:
            return
        self._on_close()
        self._closed = True
        self._writers.clear()
        self._readers.clear()

    def __enter__(self) -> BoundTable:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            msg = f"Table '{self.name}' is closed"
            raise TableStateError(msg)

    def _declare_stored_columns(self, columns: Sequence[ColumnSpec]) -> None:
        """Register columns that already exist in storage, unbound and frozen."""
        self._columns = {column.name: column for column in columns}
        self._frozen = True

    # ------------------------------------------------------------------
    # Storage hooks
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def num_entries(self) -> int:
        """Number of stored rows."""

    @abstractmethod
    def _append_row(self, values: Mapping[str, int | float]) -> None:
        """Store one row of already coerced values."""

    @abstractmethod
    def _read_row(self, index: int) -> Mapping[str, Any]:
        """Return stored row ``index`` keyed by column name."""

    def _on_finalize(self) -> None:  # noqa: B027
        """Hook run once when the schema freezes."""

    def _on_close(self) -> None:  # noqa: B027
        """Hook run once when the table closes."""


__all__ = ["BoundTable", "ColumnarTable"]
