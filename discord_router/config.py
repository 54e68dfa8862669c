"""Configuration management for discord_router.

Loads environment variables (.env) and optional YAML settings
(settings.yaml) from a config directory into a Config object.
Property getters give safe access with sensible defaults; the bot
token is the only setting without one.

Key classes:
    Config: Central configuration manager.

Key functions:
    get_config: Singleton accessor for the global Config instance.
"""

import os
from pathlib import Path
from typing import Optional

import structlog
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

logger = structlog.get_logger("discord_router.bot")


class Config:
    """Central configuration manager for discord_router.

    The DISCORD_TOKEN environment variable takes precedence over
    settings.yaml so the secret never has to live in YAML.

    Args:
        config_dir: Path to the config directory. Defaults to
            ``<repo_root>/config/``.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            config_dir = Path(__file__).parent.parent / "config"
        self.config_dir = Path(config_dir)

        env_file = self.config_dir / ".env"
        if env_file.exists():
            load_dotenv(env_file)

        self.settings = self._load_yaml("settings.yaml")

    def _load_yaml(self, filename: str) -> dict:
        """Load a YAML configuration file."""
        filepath = self.config_dir / filename
        if not filepath.exists():
            return {}
        try:
            with open(filepath, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Cannot parse {filename}: {e}", setting_name=filename,
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{filename} must contain a mapping", setting_name=filename,
            )
        return data

    @staticmethod
    def get_env_var(key: str) -> str:
        """Read a required environment variable.

        Raises:
            ConfigurationError: If the variable is unset or empty.
        """
        value = os.environ.get(key)
        if not value:
            raise ConfigurationError(
                f"Expected environment variable {key}", setting_name=key,
            )
        return value

    @property
    def token(self) -> str:
        """Bot token. Env var DISCORD_TOKEN takes precedence."""
        token = os.environ.get("DISCORD_TOKEN") or self.settings.get("token")
        if not token:
            raise ConfigurationError(
                "No bot token: set DISCORD_TOKEN in the environment or config/.env",
                setting_name="DISCORD_TOKEN",
            )
        return token

    @property
    def command_prefix(self) -> str:
        """Prefix prepended to discovered command names (default "!")."""
        return self.settings.get("command_prefix", "!")

    @property
    def commands_dir(self) -> Optional[Path]:
        """Directory of user command files, if configured."""
        configured = self.settings.get("commands_dir")
        if configured:
            return Path(configured).expanduser()
        return None

    @property
    def reply_errors(self) -> bool:
        """Whether failed commands report the error back to the channel."""
        return bool(self.settings.get("reply_errors", False))

    @property
    def log_dir(self) -> Optional[Path]:
        """Log directory. None means console-only logging."""
        configured = self.settings.get("log_dir")
        if configured:
            return Path(configured).expanduser()
        return None

    @property
    def logging_level(self) -> str:
        """Global log level (default INFO)."""
        log_config = self.settings.get("logging", {})
        return log_config.get("level", "INFO")

    @property
    def logging_max_file_size_mb(self) -> int:
        """Max size per log file in MB before rotation (default 10)."""
        log_config = self.settings.get("logging", {})
        return log_config.get("max_file_size_mb", 10)

    @property
    def logging_backup_count(self) -> int:
        """Number of rotated log files to keep (default 5)."""
        log_config = self.settings.get("logging", {})
        return log_config.get("backup_count", 5)

    def validate(self):
        """Check critical settings at startup.

        Raises ConfigurationError for a missing token; logs warnings for
        settings that are merely suspicious.
        """
        _ = self.token
        commands_dir = self.commands_dir
        if commands_dir is not None and not commands_dir.is_dir():
            logger.warning("commands_dir_missing", path=str(commands_dir))
        if not self.command_prefix:
            logger.warning("empty_command_prefix")


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
