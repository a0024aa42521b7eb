"""Fit result of a single digitized waveform.

A FitResultRecord is a flat value type: scan-point identification and
position, pedestal, timing, amplitude, a damped-sinusoid "ringing" term and
fit-quality statistics. It is laid out so that it maps one-to-one onto a row
of a columnar table:

    record = FitResultRecord()
    record.bind_for_write(table)
    for result in fitter_output:
        record.scanpt = ...
        table.fill()

Reading goes the other way:

    record.bind_for_read(table)
    for _ in table:
        print(record.amp)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wavefit.core.exceptions import SchemaError
from wavefit.storage.columns import ColumnSpec, TypeCode, make_leaflist

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from wavefit.storage.base import BoundTable, ColumnarTable

I = TypeCode.INT  # noqa: E741
F = TypeCode.FLOAT

# Column layout, in declaration order
FIELDS: tuple[ColumnSpec, ...] = (
    ColumnSpec("scanpt", I, "scan point number"),
    ColumnSpec("wavenum", I, "waveform number in scan"),
    ColumnSpec("nwaves", I, "number of waveforms in this scan point"),
    ColumnSpec("x", F, "x location of this scan point"),
    ColumnSpec("y", F, "y location of this scan point"),
    ColumnSpec("z", F, "z location of this scan point"),
    ColumnSpec("ped", F, "pedestal value of waveform"),
    ColumnSpec("ped_err", F, "fit uncertainty in pedestal value"),
    ColumnSpec("mean", F, "mean time of waveform"),
    ColumnSpec("mean_err", F, "fit uncertainty in mean time"),
    ColumnSpec("sigma", F, "sigma in time of waveform"),
    ColumnSpec("sigma_err", F, "fit uncertainty in sigma"),
    ColumnSpec("amp", F, "amplitude of waveform"),
    ColumnSpec("amp_err", F, "fit uncertainty in amplitude"),
    ColumnSpec("sinamp", F, "ringing amplitude"),
    ColumnSpec("sinamp_err", F, "fit uncertainty in ringing amplitude"),
    ColumnSpec("sinw", F, "ringing frequency (rad/s)"),
    ColumnSpec("sinw_err", F, "fit uncertainty in ringing frequency"),
    ColumnSpec("sinphi", F, "ringing phase offset (rad)"),
    ColumnSpec("sinphi_err", F, "fit uncertainty in ringing phase"),
    ColumnSpec("chi2", F, "fit chi2"),
    ColumnSpec("ndof", F, "fit ndof"),
    ColumnSpec("prob", F, "fit p-value"),
    ColumnSpec("fitstat", I, "0 is good, any other number is an error in fit"),
    ColumnSpec("haswf", I, "1 if has a pulse, 0 if not"),
)

_FIELD_INDEX: dict[str, ColumnSpec] = {spec.name: spec for spec in FIELDS}


@dataclass(slots=True, init=False)
class FitResultRecord:
    """Outcome of fitting one waveform at one scan point.

    Values are held at storage precision: float fields keep the nearest
    float32 value and integer fields an int32, so a record written to a
    table and read back compares equal to the original.

    The fit status is an opaque code from the fitter; only ``0`` (success)
    has a meaning here.
    """

    scanpt: int = 0
    wavenum: int = 0
    nwaves: int = 0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    ped: float = 0.0
    ped_err: float = 0.0
    mean: float = 0.0
    mean_err: float = 0.0
    sigma: float = 0.0
    sigma_err: float = 0.0
    amp: float = 0.0
    amp_err: float = 0.0
    sinamp: float = 0.0
    sinamp_err: float = 0.0
    sinw: float = 0.0
    sinw_err: float = 0.0
    sinphi: float = 0.0
    sinphi_err: float = 0.0
    chi2: float = 0.0
    ndof: float = 0.0
    prob: float = 0.0
    fitstat: int = 0
    haswf: int = 0

    def __init__(self, **values: Any) -> None:
        """Build a zeroed record, then apply any keyword overrides.

        Raises
        ------
            TypeError: unknown field name
        """
        self.reset()
        for name, value in values.items():
            if name not in _FIELD_INDEX:
                msg = f"FitResultRecord has no field {name!r}"
                raise TypeError(msg)
            setattr(self, name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        spec = _FIELD_INDEX.get(name)
        if spec is not None:
            value = spec.coerce(value)
        object.__setattr__(self, name, value)

    @classmethod
    def fields(cls) -> tuple[ColumnSpec, ...]:
        """Column layout of the record in declaration order."""
        return FIELDS

    def reset(self) -> None:
        """Set every field to zero."""
        for spec in FIELDS:
            object.__setattr__(self, spec.name, spec.coerce(0))

    def describe_schema(self) -> str:
        """Return the leaf list, e.g. ``"scanpt/I:wavenum/I:...:haswf/I"``."""
        return make_leaflist(FIELDS)

    def bind_for_write(self, table: ColumnarTable) -> None:
        """Declare one column per field on ``table``, bound to this record.

        Every later ``table.fill()`` stores the current field values as a row.
        Errors from the table (collisions, type mismatches, finalized or
        read-only tables) propagate unchanged.
        """
        for spec in FIELDS:
            table.branch(spec.name, spec.type_code, self)

    def bind_for_read(self, table: ColumnarTable) -> None:
        """Make this record the destination of ``table``'s columns.

        Every later ``table.get_entry(i)`` copies row ``i`` into the fields.
        """
        for spec in FIELDS:
            table.set_branch_address(spec.name, spec.type_code, self)

    @property
    def fit_ok(self) -> bool:
        return self.fitstat == 0

    @property
    def has_pulse(self) -> bool:
        return self.haswf != 0

    def as_dict(self) -> dict[str, int | float]:
        """Field values keyed by name, in declaration order."""
        return {spec.name: getattr(self, spec.name) for spec in FIELDS}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> FitResultRecord:
        """Build a record from a mapping; missing fields stay zero.

        Raises
        ------
            SchemaError: mapping holds a key that is not a field
        """
        unknown = [key for key in mapping if key not in _FIELD_INDEX]
        if unknown:
            msg = f"Unknown fit result fields: {', '.join(sorted(unknown))}"
            raise SchemaError(msg)
        return cls(**mapping)

    def copy(self) -> FitResultRecord:
        return FitResultRecord(**self.as_dict())


def iter_records(
    table: BoundTable, record: FitResultRecord | None = None
) -> Iterator[FitResultRecord]:
    """Bind ``record`` for read and yield it once per stored row.

    The same record instance is refilled on every step; call ``copy()`` to
    keep a row.
    """
    record = record if record is not None else FitResultRecord()
    record.bind_for_read(table)
    for _ in table:
        yield record


def _check_layout() -> None:
    declared = [field.name for field in dataclasses.fields(FitResultRecord)]
    if declared != [spec.name for spec in FIELDS]:
        msg = "FitResultRecord attributes do not match its column layout"
        raise SchemaError(msg)


_check_layout()


__all__ = ["FIELDS", "FitResultRecord", "iter_records"]
