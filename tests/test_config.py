"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from discord_router.config import Config
from discord_router.exceptions import ConfigurationError, ErrorCategory


@pytest.fixture
def no_token_env(monkeypatch):
    # setenv first so delenv restores "unset" even if a .env sets it later
    monkeypatch.setenv("DISCORD_TOKEN", "placeholder")
    monkeypatch.delenv("DISCORD_TOKEN")


def _bare_config(settings):
    with patch.object(Config, "__init__", lambda self, **kw: None):
        config = Config.__new__(Config)
        config.settings = settings
        return config


class TestConfigDefaults:

    def test_command_prefix_default(self):
        assert _bare_config({}).command_prefix == "!"

    def test_command_prefix_from_settings(self):
        assert _bare_config({"command_prefix": "?"}).command_prefix == "?"

    def test_commands_dir_unset(self):
        assert _bare_config({}).commands_dir is None

    def test_commands_dir_expands_user(self):
        config = _bare_config({"commands_dir": "~/bot/commands"})
        assert config.commands_dir == Path("~/bot/commands").expanduser()

    def test_reply_errors_default_false(self):
        assert _bare_config({}).reply_errors is False

    def test_logging_defaults(self):
        config = _bare_config({})
        assert config.log_dir is None
        assert config.logging_level == "INFO"
        assert config.logging_max_file_size_mb == 10
        assert config.logging_backup_count == 5

    def test_logging_from_settings(self):
        config = _bare_config({"logging": {"level": "DEBUG", "backup_count": 2}})
        assert config.logging_level == "DEBUG"
        assert config.logging_backup_count == 2


class TestToken:

    def test_env_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("DISCORD_TOKEN", "from-env")
        assert _bare_config({"token": "from-yaml"}).token == "from-env"

    def test_falls_back_to_settings(self, no_token_env):
        assert _bare_config({"token": "from-yaml"}).token == "from-yaml"

    def test_missing_token_raises(self, no_token_env):
        with pytest.raises(ConfigurationError) as exc_info:
            _ = _bare_config({}).token
        assert exc_info.value.setting_name == "DISCORD_TOKEN"
        assert exc_info.value.category == ErrorCategory.INFRASTRUCTURE

    def test_validate_requires_token(self, no_token_env):
        with pytest.raises(ConfigurationError):
            _bare_config({}).validate()


class TestConfigFiles:

    def test_loads_settings_yaml(self, tmp_path):
        (tmp_path / "settings.yaml").write_text(
            "command_prefix: '$'\nreply_errors: true\n"
        )
        config = Config(config_dir=tmp_path)
        assert config.command_prefix == "$"
        assert config.reply_errors is True

    def test_missing_files_give_empty_settings(self, tmp_path):
        assert Config(config_dir=tmp_path).settings == {}

    def test_loads_dotenv(self, tmp_path, no_token_env):
        (tmp_path / ".env").write_text("DISCORD_TOKEN=dotenv-token\n")
        assert Config(config_dir=tmp_path).token == "dotenv-token"

    def test_invalid_yaml_raises(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("key: [unclosed\n")
        with pytest.raises(ConfigurationError, match="settings.yaml"):
            Config(config_dir=tmp_path)

    def test_non_mapping_yaml_raises(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            Config(config_dir=tmp_path)


class TestGetEnvVar:

    def test_present(self, monkeypatch):
        monkeypatch.setenv("DR_TEST_VAR", "value")
        assert Config.get_env_var("DR_TEST_VAR") == "value"

    def test_missing(self, monkeypatch):
        monkeypatch.delenv("DR_TEST_VAR", raising=False)
        with pytest.raises(ConfigurationError, match="DR_TEST_VAR"):
            Config.get_env_var("DR_TEST_VAR")
