"""Tests for the PyTables-backed table."""

import numpy as np
import pytest
import tables

from wavefit.core.exceptions import DataIOError, SchemaError, TableStateError
from wavefit.core.record import FIELDS, FitResultRecord, iter_records
from wavefit.models import StorageConfig
from wavefit.storage import ColumnarTable, HDF5Table
from wavefit.storage.hdf5 import LEAFLIST_ATTR


class TestWriteAndRead:
    """Round trips through an HDF5 file."""

    def test_example_round_trip(self, tmp_path, example_record):
        """A written row reads back bit-identical."""
        path = tmp_path / "fits.h5"
        with HDF5Table(path, "w") as table:
            example_record.bind_for_write(table)
            assert table.fill() == 1

        restored = FitResultRecord()
        with HDF5Table(path, "r") as table:
            assert isinstance(table, ColumnarTable)
            restored.bind_for_read(table)
            table.get_entry(0)

        assert restored == example_record
        for spec in FIELDS:
            assert getattr(restored, spec.name) == getattr(example_record, spec.name)

    def test_read_before_close(self, tmp_path, distinct_record):
        """Rows appended in the same session are readable."""
        with HDF5Table(tmp_path / "fits.h5", "w") as table:
            distinct_record.bind_for_write(table)
            table.fill()
            reader = FitResultRecord()
            reader.bind_for_read(table)
            table.get_entry(0)
            assert reader == distinct_record

    def test_on_disk_layout(self, results_file):
        with tables.open_file(str(results_file)) as h5:
            node = h5.root.fits
            assert node.colnames == [spec.name for spec in FIELDS]
            assert node.coldtypes["scanpt"] == np.int32
            assert node.coldtypes["prob"] == np.float32
            assert node.nrows == 3
            assert node.get_attr(LEAFLIST_ATTR) == FitResultRecord().describe_schema()
            assert node.title == "Waveform fit results"

    def test_read_all(self, results_file):
        with HDF5Table(results_file, "r") as table:
            array = table.read()
        np.testing.assert_array_equal(array["wavenum"], [0, 1, 2])
        np.testing.assert_array_equal(array["amp"], [10.0, 20.0, 30.0])

    def test_iterate(self, results_file):
        with HDF5Table(results_file, "r") as table:
            rows = [record.copy() for record in iter_records(table)]
        assert [r.wavenum for r in rows] == [0, 1, 2]
        assert [r.has_pulse for r in rows] == [True, False, True]
        assert [r.fit_ok for r in rows] == [True, True, False]
        assert all(r.x == 5.0 and r.y == -2.5 for r in rows)

    def test_empty_table_is_created_on_close(self, tmp_path):
        path = tmp_path / "empty.h5"
        with HDF5Table(path, "w") as table:
            FitResultRecord().bind_for_write(table)

        with HDF5Table(path, "r") as table:
            assert table.num_entries == 0
            assert table.leaflist == FitResultRecord().describe_schema()


class TestAppend:
    """Tests for append mode."""

    def test_append_rows(self, results_file):
        record = FitResultRecord(scanpt=8, wavenum=0)
        with HDF5Table(results_file, "a") as table:
            assert table.num_entries == 3
            record.bind_for_write(table)
            assert table.fill() == 4

        with HDF5Table(results_file, "r") as table:
            reader = FitResultRecord()
            reader.bind_for_read(table)
            table.get_entry(-1)
            assert reader.scanpt == 8

    def test_append_requires_binding(self, results_file):
        with HDF5Table(results_file, "a") as table, pytest.raises(SchemaError, match="no write"):
            table.fill()

    def test_cannot_add_columns(self, results_file):
        class Extra:
            extra = 1

        with HDF5Table(results_file, "a") as table, pytest.raises(TableStateError):
            table.branch("extra", "I", Extra())

    def test_append_creates_missing_file(self, tmp_path):
        path = tmp_path / "sub" / "new.h5"
        with HDF5Table(path, "a") as table:
            FitResultRecord().bind_for_write(table)
            table.fill()
        assert path.exists()


class TestErrors:
    """Tests for error handling."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIOError, match="not found"):
            HDF5Table(tmp_path / "missing.h5", "r")

    def test_missing_table(self, results_file):
        with pytest.raises(DataIOError, match="No table 'other'"):
            HDF5Table(results_file, "r", name="other")

    def test_node_is_not_a_table(self, tmp_path):
        path = tmp_path / "group.h5"
        with tables.open_file(str(path), "w") as h5:
            h5.create_group("/", "fits")
        with pytest.raises(DataIOError, match="not a table"):
            HDF5Table(path, "r")

    def test_invalid_mode(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid mode"):
            HDF5Table(tmp_path / "x.h5", "x")

    def test_read_only(self, results_file):
        with HDF5Table(results_file, "r") as table:
            with pytest.raises(TableStateError, match="read-only"):
                FitResultRecord().bind_for_write(table)
            with pytest.raises(TableStateError, match="read-only"):
                table.fill()

    def test_closed(self, results_file):
        table = HDF5Table(results_file, "r")
        table.close()
        table.close()
        with pytest.raises(TableStateError, match="closed"):
            table.get_entry(0)

    def test_unsupported_column_releases_file(self, tmp_path):
        path = tmp_path / "double.h5"
        with tables.open_file(str(path), "w") as h5:
            h5.create_table("/", "fits", {"amp": tables.Float64Col(pos=0)})
        with pytest.raises(SchemaError, match="float64"):
            HDF5Table(path, "r")
        # still opened read-only would make write access fail
        with tables.open_file(str(path), "a") as h5:
            assert "/fits" in h5

    def test_leaflist_mismatch(self, results_file):
        with tables.open_file(str(results_file), "a") as h5:
            h5.get_node("/fits").set_attr(LEAFLIST_ATTR, "scanpt/I:amp/F")
        with pytest.raises(SchemaError, match="does not match"):
            HDF5Table(results_file, "r")
        with tables.open_file(str(results_file), "a") as h5:
            assert "/fits" in h5

    def test_malformed_leaflist(self, results_file):
        with tables.open_file(str(results_file), "a") as h5:
            h5.get_node("/fits").set_attr(LEAFLIST_ATTR, "scanpt:amp/F")
        with pytest.raises(SchemaError, match="Malformed"):
            HDF5Table(results_file, "r")

    def test_finalize_without_columns(self, tmp_path):
        path = tmp_path / "bare.h5"
        with HDF5Table(path, "w") as table:
            with pytest.raises(SchemaError, match="no columns"):
                table.finalize()
            assert not table.finalized
        with tables.open_file(str(path), "r") as h5:
            assert "/fits" not in h5


class TestConfig:
    """Tests for storage settings."""

    def test_custom_name_and_filters(self, tmp_path):
        config = StorageConfig(table_name="run2", title="Scan 2", complevel=1, complib="zlib")
        path = tmp_path / "fits.h5"
        with HDF5Table(path, "w", config=config) as table:
            FitResultRecord().bind_for_write(table)
            table.fill()
            assert table.title == "Scan 2"

        with tables.open_file(str(path)) as h5:
            node = h5.get_node("/run2")
            assert node.filters.complevel == 1
            assert node.filters.complib == "zlib"

        with HDF5Table(path, "r", config=config) as table:
            assert table.name == "run2"
            assert table.num_entries == 1

    def test_name_overrides_config(self, tmp_path):
        path = tmp_path / "fits.h5"
        with HDF5Table(path, "w", name="custom") as table:
            FitResultRecord().bind_for_write(table)
        with tables.open_file(str(path)) as h5:
            assert "/custom" in h5
