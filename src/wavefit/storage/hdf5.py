"""HDF5 columnar table backed by PyTables.

The table node is created lazily: columns are declared through ``branch``
and the on-disk description is built when the schema freezes (first
``fill``, ``finalize`` or ``close``). Column positions follow declaration
order.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

import tables

from wavefit.core.exceptions import DataIOError, SchemaError, WaveFitError
from wavefit.models import StorageConfig
from wavefit.storage.base import BoundTable
from wavefit.storage.columns import ColumnSpec, TypeCode, make_leaflist, parse_leaflist
from wavefit.ui.logging import log

if TYPE_CHECKING:
    from collections.abc import Mapping

    import numpy as np

OpenMode = Literal["r", "a", "w"]

LEAFLIST_ATTR = "leaflist"


def _columns_from_table(table: tables.Table) -> list[ColumnSpec]:
    """Read the column layout of an existing PyTables table."""
    return [
        ColumnSpec(name, TypeCode.from_dtype(table.coldtypes[name])) for name in table.colnames
    ]


class HDF5Table(BoundTable):
    """Columnar table stored as a PyTables ``Table`` node.

    Modes:
        - ``"w"``: create a new file (truncating any existing one)
        - ``"a"``: open or create a file and append to its table
        - ``"r"``: read an existing table

    Use as a context manager, or call ``close()`` to flush and release the file.
    """

    def __init__(
        self,
        path: Path | str,
        mode: OpenMode = "r",
        *,
        name: str | None = None,
        config: StorageConfig | None = None,
    ) -> None:
        """Open the file and, for ``"r"``/``"a"``, the existing table.

        Args:
            path: HDF5 file path
            mode: Open mode (``"r"``, ``"a"`` or ``"w"``)
            name: Table node name (defaults to ``config.table_name``)
            config: Storage settings (compression, title, expected rows)

        Raises
        ------
            ValueError: unknown mode
            DataIOError: file or table node missing in read mode
            SchemaError: stored columns cannot be mapped onto record fields
        """
        if mode not in ("r", "a", "w"):
            msg = f"Invalid mode {mode!r}; expected 'r', 'a' or 'w'"
            raise ValueError(msg)

        self.config = config or StorageConfig()
        self.path = Path(path)
        self.mode = mode
        super().__init__(name or self.config.table_name, readonly=mode == "r")

        if mode == "r" and not self.path.exists():
            msg = f"Results file not found: {self.path}"
            raise DataIOError(msg)
        if mode != "r":
            self.path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._h5 = tables.open_file(str(self.path), mode=mode)
        except (OSError, tables.HDF5ExtError) as exc:
            msg = f"Cannot open {self.path}: {exc}"
            raise DataIOError(msg) from exc

        self._table: tables.Table | None = None
        self._n_entries = 0
        self._dirty = False

        node_path = f"/{self.name}"
        if mode != "w" and node_path in self._h5:
            try:
                self._attach(self._h5.get_node(node_path))
            except WaveFitError:
                self._h5.close()
                raise
        elif mode == "r":
            self._h5.close()
            msg = f"No table '{self.name}' in {self.path}"
            raise DataIOError(msg)

        log(f"Opened {self.path} [{mode}] table '{self.name}' ({self._n_entries} entries)")

    def _attach(self, node: tables.Node) -> None:
        """Adopt an existing table node and its stored column layout.

        Raises
        ------
            DataIOError: node is not a table
            SchemaError: unsupported column type, or the stored leaf list
                disagrees with the table description
        """
        if not isinstance(node, tables.Table):
            msg = f"Node {node._v_pathname} in {self.path} is not a table"
            raise DataIOError(msg)
        columns = _columns_from_table(node)
        if LEAFLIST_ATTR in node.attrs:
            stored = parse_leaflist(str(node.get_attr(LEAFLIST_ATTR)))
            if [(c.name, c.type_code) for c in stored] != [(c.name, c.type_code) for c in columns]:
                msg = (
                    f"Leaf list of '{self.name}' in {self.path} does not match its columns: "
                    f"{make_leaflist(stored)} != {make_leaflist(columns)}"
                )
                raise SchemaError(msg)
        self._table = node
        self._n_entries = node.nrows
        self._declare_stored_columns(columns)

    @property
    def num_entries(self) -> int:
        return self._n_entries

    @property
    def title(self) -> str:
        """Title of the on-disk table (empty until it exists)."""
        return self._table.title if self._table is not None else ""

    def read(self) -> np.ndarray:
        """Return all rows as a structured array."""
        self._check_open()
        if self._table is None:
            msg = f"Table '{self.name}' has not been written yet"
            raise DataIOError(msg)
        self._flush()
        return self._table.read()

    def _on_finalize(self) -> None:
        if self._table is not None:
            return
        description = {spec.name: spec.pytables_col(pos) for pos, spec in enumerate(self.columns)}
        filters = tables.Filters(complevel=self.config.complevel, complib=self.config.complib)
        self._table = self._h5.create_table(
            "/",
            self.name,
            description=description,
            title=self.config.title,
            filters=filters,
            expectedrows=self.config.expected_rows,
        )
        self._table.set_attr(LEAFLIST_ATTR, self.leaflist)
        log(f"Created table '{self.name}' in {self.path}: {self.leaflist}", level="debug")

    def _append_row(self, values: Mapping[str, int | float]) -> None:
        assert self._table is not None
        row = self._table.row
        for name, value in values.items():
            row[name] = value
        row.append()
        self._n_entries += 1
        self._dirty = True

    def _read_row(self, index: int) -> Mapping[str, Any]:
        assert self._table is not None
        self._flush()
        stored = self._table[index]
        return {name: stored[name] for name in self._columns}

    def _flush(self) -> None:
        if self._dirty and self._table is not None:
            self._table.flush()
            self._dirty = False

    def _on_close(self) -> None:
        if not self.readonly and self._table is None and self._columns:
            self._on_finalize()
        self._flush()
        self._h5.close()
        log(f"Closed {self.path} ({self._n_entries} entries in '{self.name}')")


__all__ = ["HDF5Table"]
