"""Tests for log sanitization and setup."""

import logging
import logging.handlers
from unittest.mock import MagicMock

from discord_router.logging_config import LOGGER_PREFIX, sanitize_secrets, setup_logging

# Shaped like a bot token, not a real one
FAKE_TOKEN = "MTIzNDU2Nzg5MDEyMzQ1Njc4.GabCdE.abcdefghijklmnopqrstuvwxyz0123"


def test_redacts_bare_token():
    event = sanitize_secrets(None, "info", {"event": "x", "token": FAKE_TOKEN})
    assert FAKE_TOKEN not in event["token"]
    assert "REDACTED" in event["token"]


def test_redacts_authorization_values():
    event = sanitize_secrets(
        None, "info", {"event": "x", "header": "Authorization: Bot abcdefghijklmnopqrstuvwxyz"}
    )
    assert "abcdefghijklmnopqrstuvwxyz" not in event["header"]
    assert event["header"].startswith("Authorization: ")


def test_walks_lists_and_dicts():
    event = sanitize_secrets(None, "info", {
        "items": [FAKE_TOKEN, 3],
        "headers": {"auth": f"Bearer {FAKE_TOKEN}", "n": 1},
    })
    assert FAKE_TOKEN not in event["items"][0]
    assert event["items"][1] == 3
    assert FAKE_TOKEN not in event["headers"]["auth"]
    assert event["headers"]["n"] == 1


def test_leaves_ordinary_text_alone():
    event = sanitize_secrets(None, "info", {"event": "command_dispatch", "args": "!ping hello"})
    assert event == {"event": "command_dispatch", "args": "!ping hello"}


def test_setup_logging_with_file_handler(tmp_path):
    config = MagicMock()
    config.log_dir = tmp_path / "logs"
    config.logging_level = "debug"
    config.logging_max_file_size_mb = 1
    config.logging_backup_count = 1

    setup_logging(config)
    try:
        pkg_logger = logging.getLogger(LOGGER_PREFIX)
        assert pkg_logger.level == logging.DEBUG
        assert (tmp_path / "logs").is_dir()
        assert any(
            isinstance(h, logging.handlers.RotatingFileHandler)
            for h in pkg_logger.handlers
        )
    finally:
        for handler in logging.getLogger(LOGGER_PREFIX).handlers:
            handler.close()
        setup_logging()


def test_setup_logging_defaults_console_only():
    setup_logging()
    assert logging.getLogger(LOGGER_PREFIX).handlers == []
    assert logging.getLogger().handlers
