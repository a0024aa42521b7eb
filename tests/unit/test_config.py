"""Test configuration loading and saving."""

import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

from wavefit.io.config import generate_default_config, load_config, save_config
from wavefit.models import LoggingConfig, StorageConfig, WaveFitConfig


class TestConfigLoading:
    """Tests for configuration file loading."""

    def test_load_valid_config(self, sample_config_file):
        """Should load valid TOML configuration."""
        config = load_config(sample_config_file)
        assert config.storage.table_name == "run2"
        assert config.storage.title == "Test scan"
        assert config.storage.complevel == 1
        assert config.logging.log_format == "json"
        assert config.logging.verbose is True

    def test_load_nonexistent_file(self, tmp_path):
        """Should raise error for nonexistent file."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "does_not_exist.toml")

    def test_load_invalid_toml(self, tmp_path):
        """Should raise error for invalid TOML syntax."""
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("not valid toml {{{")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(invalid_file)

    def test_load_minimal_config(self, tmp_path):
        """Should load minimal config with defaults."""
        minimal_file = tmp_path / "minimal.toml"
        minimal_file.write_text("")
        config = load_config(minimal_file)
        assert config.storage.table_name == "fits"
        assert config.storage.complevel == 5
        assert config.logging.log_file is None

    def test_unknown_option_rejected(self, tmp_path):
        """Unknown keys are configuration errors."""
        path = tmp_path / "extra.toml"
        path.write_text("[storage]\ncompression = 3\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestConfigValidation:
    """Tests for value validation."""

    @pytest.mark.parametrize("level", [-1, 10])
    def test_complevel_range(self, level):
        with pytest.raises(ValidationError):
            StorageConfig(complevel=level)

    def test_complib_choices(self):
        with pytest.raises(ValidationError):
            StorageConfig(complib="gzip")

    def test_table_name_must_be_identifier(self):
        with pytest.raises(ValidationError, match="identifier"):
            StorageConfig(table_name="my table")

    def test_expected_rows_positive(self):
        with pytest.raises(ValidationError):
            StorageConfig(expected_rows=0)

    def test_log_format_choices(self):
        with pytest.raises(ValidationError):
            LoggingConfig(log_format="xml")


class TestConfigSaving:
    """Tests for configuration file saving."""

    def test_save_and_load_roundtrip(self, tmp_path):
        """Should save config that can be loaded back."""
        config = WaveFitConfig(
            storage=StorageConfig(table_name="scan", complevel=9, complib="blosc"),
            logging=LoggingConfig(log_file=Path("logs/run.json"), log_format="json"),
        )

        save_path = tmp_path / "roundtrip.toml"
        save_config(config, save_path)
        assert save_path.exists()

        loaded = load_config(save_path)
        assert loaded == config

    def test_save_without_log_file(self, tmp_path):
        """Unset optional values are omitted from the TOML."""
        save_path = tmp_path / "output.toml"
        save_config(WaveFitConfig(), save_path)

        content = save_path.read_text()
        assert "[storage]" in content
        assert "log_file" not in content


class TestDefaultConfigGeneration:
    """Tests for default config generation."""

    def test_generate_default_config_format(self):
        content = generate_default_config()
        assert "[storage]" in content
        assert "[logging]" in content
        assert "#" in content

    def test_generated_config_matches_defaults(self, tmp_path):
        """Generated config should load back to the model defaults."""
        config_path = tmp_path / "generated.toml"
        config_path.write_text(generate_default_config())
        assert load_config(config_path) == WaveFitConfig()
