"""Tests for configuration models and loading."""

import pytest
from pydantic import ValidationError

from chaintable import HashMap
from chaintable.config import (
    LoggingSettings,
    Settings,
    TableSettings,
    get_config,
    load_settings,
    reload_config,
)
from chaintable.shared.errors import ConfigurationError, ErrorCode


class TestTableSettings:
    """Test hash table configuration validation."""

    def test_defaults(self):
        """Test defaults match the documented sizing policy."""
        settings = TableSettings()

        assert settings.default_capacity == 16
        assert settings.load_factor == 0.75
        assert settings.hash_seed == 31
        assert settings.hash_multiplier == 17

    def test_zero_capacity_allowed(self):
        """Test a zero default capacity is valid."""
        assert TableSettings(default_capacity=0).default_capacity == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"default_capacity": -1},
            {"load_factor": 0.0},
            {"load_factor": 1.5},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            TableSettings(**overrides)


class TestSettingsLoading:
    """Test Settings sources and the loader."""

    def test_defaults_without_sources(self):
        """Test loading with no file and no environment gives defaults."""
        settings = load_settings()

        assert settings.table == TableSettings()
        assert settings.logging == LoggingSettings()

    def test_environment_override(self, monkeypatch):
        """Test nested environment variables override table settings."""
        monkeypatch.setenv("CHAINTABLE_TABLE__DEFAULT_CAPACITY", "64")
        monkeypatch.setenv("CHAINTABLE_TABLE__LOAD_FACTOR", "0.5")

        settings = load_settings()

        assert settings.table.default_capacity == 64
        assert settings.table.load_factor == 0.5

    def test_invalid_environment(self, monkeypatch):
        """Test invalid environment values surface as ConfigurationError."""
        monkeypatch.setenv("CHAINTABLE_TABLE__LOAD_FACTOR", "2.0")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()

        assert exc_info.value.code == ErrorCode.INVALID_CONFIG
        assert isinstance(exc_info.value.original_error, ValidationError)

    def test_toml_file(self, tmp_path):
        """Test settings load from an explicit TOML file."""
        config_file = tmp_path / "custom.toml"
        config_file.write_text(
            '[table]\ndefault_capacity = 8\n\n[logging]\nlevel = "DEBUG"\nformat = "%(message)s"\n',
            encoding="utf-8",
        )

        settings = load_settings(config_file)

        assert settings.table.default_capacity == 8
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format_string == "%(message)s"

    def test_default_file_location(self, tmp_path):
        """Test config/config.toml in the working directory is picked up."""
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[table]\nload_factor = 0.6\n", encoding="utf-8")

        assert load_settings().table.load_factor == 0.6

    def test_missing_file(self, tmp_path):
        """Test a missing explicit file is a CONFIG_MISSING error."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(tmp_path / "absent.toml")

        assert exc_info.value.code == ErrorCode.CONFIG_MISSING
        assert exc_info.value.context.file_path == str(tmp_path / "absent.toml")

    def test_malformed_file(self, tmp_path):
        """Test invalid TOML is reported with the original error chained."""
        config_file = tmp_path / "broken.toml"
        config_file.write_text("[table\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(config_file)

        assert exc_info.value.code == ErrorCode.INVALID_CONFIG
        assert exc_info.value.__cause__ is exc_info.value.original_error

    def test_invalid_file_values(self, tmp_path):
        """Test out-of-range file values are a ConfigurationError."""
        config_file = tmp_path / "invalid.toml"
        config_file.write_text("[table]\ndefault_capacity = -4\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_settings(config_file)

    def test_round_trip_through_file(self, tmp_path):
        """Test saved settings load back unchanged."""
        settings = Settings(table=TableSettings(default_capacity=128, load_factor=0.9))
        config_file = tmp_path / "saved" / "config.toml"

        settings.to_toml_file(config_file)

        assert load_settings(config_file) == settings


class TestGlobalConfig:
    """Test the cached process-wide settings."""

    def test_get_config_is_cached(self):
        """Test get_config returns the same instance until reloaded."""
        first = get_config()

        assert get_config() is first
        assert reload_config() is not first

    def test_reload_picks_up_environment(self, monkeypatch):
        """Test reload_config sees new environment values."""
        assert get_config().table.default_capacity == 16
        monkeypatch.setenv("CHAINTABLE_TABLE__DEFAULT_CAPACITY", "32")

        assert get_config().table.default_capacity == 16
        assert reload_config().table.default_capacity == 32

    def test_table_opts_in_to_global_config(self, monkeypatch):
        """Test a table follows the global settings only when passed them."""
        monkeypatch.setenv("CHAINTABLE_TABLE__DEFAULT_CAPACITY", "64")
        reload_config()

        assert HashMap(settings=get_config().table).capacity == 64
        assert HashMap(4, settings=get_config().table).capacity == 4
        assert HashMap().capacity == 16


class TestDefaultTableIgnoresConfig:
    """Test default construction never reads files or the environment."""

    def test_foreign_config_file_does_not_change_defaults(self, tmp_path):
        """Test a config.toml in the cwd leaves HashMap() at 16 and 0.75."""
        (tmp_path / "config.toml").write_text(
            "[table]\ndefault_capacity = 4\nload_factor = 0.5\n", encoding="utf-8"
        )

        table = HashMap()

        assert table.capacity == 16
        assert table.load_factor == 0.75

    def test_malformed_config_file_does_not_break_construction(self, tmp_path):
        """Test an unrelated, invalid config.toml cannot make HashMap() fail."""
        (tmp_path / "config.toml").write_text('logging = "debug"\n', encoding="utf-8")

        with pytest.raises(ConfigurationError):
            reload_config()
        table = HashMap()

        assert table.capacity == 16
        assert table.load_factor == 0.75

    def test_environment_does_not_change_defaults(self, monkeypatch):
        """Test CHAINTABLE_ variables only affect the opt-in settings."""
        monkeypatch.setenv("CHAINTABLE_TABLE__DEFAULT_CAPACITY", "64")

        assert HashMap().capacity == 16
