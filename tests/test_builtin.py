"""Tests for the builtin commands."""

from unittest.mock import AsyncMock, MagicMock, call, patch

import pytest

from discord_router.builtin.echo import Echo
from discord_router.builtin.ping import Ping
from discord_router.builtin.react import React
from discord_router.exceptions import CommandArgumentError


@pytest.mark.asyncio
async def test_ping_replies_pong():
    session = MagicMock()
    with patch("discord_router.builtin.ping.send_message", new_callable=AsyncMock) as send:
        await Ping().execute(session, "tok", "chan", "")
    send.assert_awaited_once_with(session, "tok", "chan", "Pong!")


@pytest.mark.asyncio
async def test_echo_repeats_args():
    session = MagicMock()
    with patch("discord_router.builtin.echo.send_message", new_callable=AsyncMock) as send:
        await Echo().execute(session, "tok", "chan", "  hello there ")
    send.assert_awaited_once_with(session, "tok", "chan", "hello there")


@pytest.mark.asyncio
async def test_echo_without_args_fails():
    with patch("discord_router.builtin.echo.send_message", new_callable=AsyncMock) as send:
        with pytest.raises(CommandArgumentError, match="Nothing to echo"):
            await Echo().execute(MagicMock(), "tok", "chan", "   ")
    send.assert_not_awaited()


@pytest.mark.asyncio
async def test_react_adds_each_emoji_in_order():
    session = MagicMock()
    with patch("discord_router.builtin.react.create_reaction", new_callable=AsyncMock) as react:
        await React().execute(session, "tok", "chan", "m1  👍\t🎉")
    assert react.await_args_list == [
        call(session, "tok", "chan", "m1", "👍"),
        call(session, "tok", "chan", "m1", "🎉"),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("args", ["", "m1", "   m1  "])
async def test_react_needs_message_and_emoji(args):
    with patch("discord_router.builtin.react.create_reaction", new_callable=AsyncMock) as react:
        with pytest.raises(CommandArgumentError, match="Usage"):
            await React().execute(MagicMock(), "tok", "chan", args)
    react.assert_not_awaited()
