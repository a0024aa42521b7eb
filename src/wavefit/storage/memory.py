"""In-memory columnar table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from wavefit.storage.base import BoundTable

if TYPE_CHECKING:
    from collections.abc import Mapping


class MemoryTable(BoundTable):
    """Columnar table kept in memory, one Python list per column.

    Example:
        >>> table = MemoryTable("fits")
        >>> record = FitResultRecord()
        >>> record.bind_for_write(table)
        >>> record.amp = 88.1
        >>> table.fill()
        1
    """

    def __init__(self, name: str = "fits") -> None:
        super().__init__(name)
        self._data: dict[str, list[int | float]] = {}
        self._n_entries = 0

    @property
    def num_entries(self) -> int:
        return self._n_entries

    def column(self, name: str) -> np.ndarray:
        """Return the stored values of one column as a typed array."""
        spec = self._columns[name]
        return np.asarray(self._data.get(name, []), dtype=spec.dtype)

    def to_numpy(self) -> np.ndarray:
        """Return all rows as a structured array in column order."""
        dtype = np.dtype([(spec.name, spec.dtype) for spec in self.columns])
        array = np.zeros(self._n_entries, dtype=dtype)
        for spec in self.columns:
            array[spec.name] = self.column(spec.name)
        return array

    def _append_row(self, values: Mapping[str, int | float]) -> None:
        for name, value in values.items():
            self._data.setdefault(name, []).append(value)
        self._n_entries += 1

    def _read_row(self, index: int) -> Mapping[str, Any]:
        return {name: self._data[name][index] for name in self._columns}


__all__ = ["MemoryTable"]
