"""Pytest fixtures for WaveFit tests."""

import pytest

from wavefit.core.record import FIELDS, FitResultRecord
from wavefit.storage import HDF5Table


@pytest.fixture
def example_record():
    """Record from a typical good fit with a pulse (unset fields stay zero)."""
    return FitResultRecord(
        scanpt=3,
        wavenum=1,
        nwaves=5,
        x=1.0,
        y=2.0,
        z=0.0,
        ped=10.5,
        mean=120.3,
        sigma=4.2,
        amp=88.1,
        chi2=12.0,
        ndof=45,
        prob=0.99,
        fitstat=0,
        haswf=1,
    )


@pytest.fixture
def distinct_record():
    """Record where every field holds a different non-zero value."""
    values = {}
    for i, spec in enumerate(FIELDS, start=1):
        values[spec.name] = i if spec.type_code.value == "I" else i + 0.1 * i
    return FitResultRecord(**values)


@pytest.fixture
def sample_config_file(tmp_path):
    """Create a sample configuration file."""
    config_content = """
[storage]
table_name = "run2"
title = "Test scan"
complevel = 1
complib = "zlib"

[logging]
log_format = "json"
verbose = true
"""
    config_path = tmp_path / "wavefit.toml"
    config_path.write_text(config_content)
    return config_path


@pytest.fixture
def results_file(tmp_path):
    """HDF5 file holding three fit results (scan point 7, waveforms 0-2)."""
    path = tmp_path / "scan.h5"
    record = FitResultRecord(scanpt=7, nwaves=3, x=5.0, y=-2.5)
    with HDF5Table(path, "w") as table:
        record.bind_for_write(table)
        for wavenum in range(3):
            record.wavenum = wavenum
            record.amp = 10.0 * (wavenum + 1)
            record.haswf = 1 if wavenum != 1 else 0
            record.fitstat = 0 if wavenum != 2 else 4
            table.fill()
    return path
