"""Tests for configuration loading."""

import os

import pytest
from pydantic import ValidationError

from mission_control.core.config import Config, load_config, load_config_or_default
from mission_control.core.config.loader import check_unexpanded_vars, expand_env_vars


class TestExpandEnvVars:
    """Tests for ${VAR} expansion."""

    def test_expands_known_var(self, monkeypatch):
        """Known variables are substituted."""
        monkeypatch.setenv("MC_TEST_DB", "/var/lib/mc.db")
        assert expand_env_vars("${MC_TEST_DB}") == "/var/lib/mc.db"

    def test_unknown_var_left_in_place(self, monkeypatch):
        """Unknown variables are left for check_unexpanded_vars to report."""
        monkeypatch.delenv("MC_TEST_MISSING", raising=False)
        assert expand_env_vars("${MC_TEST_MISSING}") == "${MC_TEST_MISSING}"

    def test_fallback_used_when_unset(self, monkeypatch):
        """${VAR:-fallback} yields the fallback for unset variables."""
        monkeypatch.delenv("MC_TEST_MISSING", raising=False)
        assert expand_env_vars("${MC_TEST_MISSING:-mission_control.db}") == "mission_control.db"

    def test_fallback_used_when_empty(self, monkeypatch):
        """An empty variable also falls back."""
        monkeypatch.setenv("MC_TEST_EMPTY", "")
        assert expand_env_vars("${MC_TEST_EMPTY:-board.db}") == "board.db"

    def test_set_var_wins_over_fallback(self, monkeypatch):
        """A set variable ignores the fallback."""
        monkeypatch.setenv("MC_TEST_DB", "real.db")
        assert expand_env_vars("data/${MC_TEST_DB:-board.db}") == "data/real.db"


class TestCheckUnexpandedVars:
    """Tests for unresolved ${VAR} pattern detection."""

    def test_no_vars_passes(self):
        """Fully expanded config raises nothing."""
        check_unexpanded_vars({"database": {"path": "mc.db"}, "api": {"port": 8000}}, source="test.yaml")

    def test_nested_var_reported_with_source(self):
        """Unresolved var in a nested dict names the variable and the file."""
        data = {"database": {"path": "${MISSING_DB}"}}
        with pytest.raises(ValueError, match="MISSING_DB") as exc_info:
            check_unexpanded_vars(data, source="config.yaml")
        assert "config.yaml" in str(exc_info.value)

    def test_list_detection(self):
        """Unresolved var in list is detected."""
        data = {"api": {"cors_origins": ["http://localhost:3000", "${DASHBOARD_ORIGIN}"]}}
        with pytest.raises(ValueError, match="DASHBOARD_ORIGIN"):
            check_unexpanded_vars(data, source="test.yaml")


class TestLoadConfig:
    """Tests for YAML config loading."""

    def test_load_full_file(self, tmp_path, monkeypatch):
        """Every section is parsed and env vars are expanded."""
        monkeypatch.setenv("MC_TEST_DB", str(tmp_path / "board.db"))
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "database:\n"
            "  path: ${MC_TEST_DB}\n"
            "api:\n"
            "  host: 0.0.0.0\n"
            "  port: 9000\n"
            "  cors_origins:\n"
            "    - http://localhost:3000\n"
            "logging:\n"
            "  level: debug\n"
        )

        config = load_config(config_file)

        assert config.database.path == str(tmp_path / "board.db")
        assert config.api.host == "0.0.0.0"
        assert config.api.port == 9000
        assert config.api.cors_origins == ["http://localhost:3000"]
        assert config.logging.level == "DEBUG"
        assert config.logging.directory == "logs"

    def test_dotenv_next_to_config_is_loaded(self, tmp_path, monkeypatch):
        """A .env beside the config supplies variables for expansion."""
        monkeypatch.delenv("MC_DOTENV_DB", raising=False)
        (tmp_path / ".env").write_text("MC_DOTENV_DB=from-dotenv.db\n")
        config_file = tmp_path / "config.yaml"
        config_file.write_text("database:\n  path: ${MC_DOTENV_DB}\n")

        try:
            config = load_config(config_file)
        finally:
            os.environ.pop("MC_DOTENV_DB", None)

        assert config.database.path == "from-dotenv.db"

    def test_unresolved_var_raises(self, tmp_path, monkeypatch):
        """A reference to an unset variable is a configuration error."""
        monkeypatch.delenv("MC_TEST_MISSING", raising=False)
        config_file = tmp_path / "config.yaml"
        config_file.write_text("database:\n  path: ${MC_TEST_MISSING}\n")

        with pytest.raises(ValueError, match="MC_TEST_MISSING"):
            load_config(config_file)

    def test_missing_file_raises(self, tmp_path):
        """load_config requires the file to exist."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file_gives_defaults(self, tmp_path):
        """An empty YAML file yields the default configuration."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_config(config_file) == Config()

    def test_invalid_logging_level(self, tmp_path):
        """Unknown logging levels are rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: LOUD\n")

        with pytest.raises(ValidationError, match="Invalid logging level"):
            load_config(config_file)


class TestLoadConfigOrDefault:
    """Tests for the optional config path used by the CLI."""

    def test_missing_file_returns_defaults(self, tmp_path):
        """A missing file falls back to defaults."""
        config = load_config_or_default(tmp_path / "config.yaml")

        assert config.database.path == "mission_control.db"
        assert config.api.host == "127.0.0.1"
        assert config.api.port == 8000
        assert config.api.cors_origins == ["*"]
        assert config.logging.level == "INFO"

    def test_none_uses_working_directory(self, tmp_path, monkeypatch):
        """No path reads config.yaml from the working directory."""
        monkeypatch.delenv("MISSION_CONTROL_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)
        assert load_config_or_default(None) == Config()

        (tmp_path / "config.yaml").write_text("api:\n  port: 8124\n")
        assert load_config_or_default(None).api.port == 8124

    def test_none_uses_env_path(self, tmp_path, monkeypatch):
        """MISSION_CONTROL_CONFIG points at the config when no path is given."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("api:\n  port: 8125\n")
        monkeypatch.setenv("MISSION_CONTROL_CONFIG", str(config_file))

        assert load_config_or_default(None).api.port == 8125

    def test_existing_file_is_loaded(self, tmp_path):
        """An existing file is parsed."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("api:\n  port: 8123\n")

        assert load_config_or_default(config_file).api.port == 8123
