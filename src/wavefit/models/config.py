"""Configuration models for WaveFit."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

CompressionLibrary = Literal["zlib", "blosc", "lzo", "bzip2"]
LogFormat = Literal["text", "json"]


class StorageConfig(BaseModel):
    """Settings for the HDF5 results table.

    Example TOML:
        [storage]
        table_name = "fits"
        complevel = 5
        complib = "zlib"
    """

    model_config = ConfigDict(extra="forbid")

    table_name: str = Field(default="fits", description="Name of the table node in the HDF5 file.")
    title: str = Field(
        default="Waveform fit results",
        description="Human-readable title stored with the table.",
    )
    complevel: Annotated[int, Field(ge=0, le=9)] = Field(
        default=5,
        description="Compression level (0 disables compression).",
    )
    complib: CompressionLibrary = Field(default="zlib", description="Compression library.")
    expected_rows: Annotated[int, Field(gt=0)] = Field(
        default=10000,
        description="Expected number of rows, used by PyTables to size chunks.",
    )

    @field_validator("table_name")
    @classmethod
    def validate_table_name(cls, v: str) -> str:
        """Table names must be valid Python identifiers (PyTables natural naming)."""
        if not v.isidentifier():
            msg = f"table_name must be a valid identifier, got {v!r}"
            raise ValueError(msg)
        return v


class LoggingConfig(BaseModel):
    """Settings for the session log file."""

    model_config = ConfigDict(extra="forbid")

    log_file: Path | None = Field(default=None, description="Log file path; no file log if unset.")
    log_format: LogFormat = Field(
        default="text",
        description="Format for log file: text (human-readable) or json (structured).",
    )
    verbose: bool = Field(default=False, description="Mirror log records to the console.")


class WaveFitConfig(BaseModel):
    """Top-level WaveFit configuration.

    Example TOML configuration:
        [storage]
        table_name = "fits"
        complevel = 5

        [logging]
        log_file = "wavefit.log"
        log_format = "text"
    """

    model_config = ConfigDict(extra="forbid")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
