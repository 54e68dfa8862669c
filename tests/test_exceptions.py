"""Tests for the exception hierarchy."""

import pytest

from discord_router.exceptions import (
    CommandArgumentError,
    CommandLoadError,
    CommandNotFoundError,
    ConfigurationError,
    DiscordAPIError,
    ErrorCategory,
    RouterError,
)


def test_command_not_found_carries_trigger():
    err = CommandNotFoundError("!pong")
    assert err.trigger == "!pong"
    assert "Command not found: !pong" in str(err)
    assert err.module == "router"
    assert not err.is_retryable


@pytest.mark.parametrize("cls", [
    CommandNotFoundError,
    CommandArgumentError,
    CommandLoadError,
    DiscordAPIError,
    ConfigurationError,
])
def test_all_errors_share_base(cls):
    assert issubclass(cls, RouterError)


@pytest.mark.parametrize("status,category", [
    (400, ErrorCategory.PERMANENT),
    (404, ErrorCategory.PERMANENT),
    (429, ErrorCategory.TRANSIENT),
    (502, ErrorCategory.TRANSIENT),
])
def test_discord_api_error_category(status, category):
    assert DiscordAPIError(status=status).category == category


def test_discord_api_error_explicit_category_wins():
    err = DiscordAPIError(status=500, category=ErrorCategory.PERMANENT)
    assert not err.is_retryable


def test_str_includes_module_and_context():
    err = CommandArgumentError("Nothing to echo", command="echo")
    assert str(err) == "Nothing to echo [module=commands] (command=echo)"


def test_repr():
    err = ConfigurationError("missing", setting_name="DISCORD_TOKEN")
    assert repr(err) == "ConfigurationError('missing', category='infrastructure', module='config')"
