"""Tests for the message loop."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from discord_router.bot import process_messages
from discord_router.commands import Command, SharedRouter


class Recorder(Command):
    def __init__(self):
        self.seen = []

    async def execute(self, client, token, channel_id, args):
        self.seen.append((channel_id, args))


class Broken(Command):
    async def execute(self, client, token, channel_id, args):
        raise RuntimeError("handler exploded")


async def _stream(*pairs):
    for pair in pairs:
        yield pair


async def _make_router():
    shared = SharedRouter()
    recorder = Recorder()
    await shared.register_command("!rec", recorder)
    await shared.register_command("!broken", Broken())
    return shared, recorder


@pytest.mark.asyncio
async def test_loop_continues_past_errors():
    shared, recorder = await _make_router()
    messages = _stream(
        ("c1", "!rec first"),
        ("c1", "!unknown"),
        ("c2", "!broken"),
        ("c2", "!rec second"),
    )

    stats = await process_messages(shared, MagicMock(), "tok", messages)

    assert recorder.seen == [("c1", "first"), ("c2", "second")]
    assert (stats.handled, stats.unknown, stats.failed) == (2, 1, 1)
    assert stats.total == 4


@pytest.mark.asyncio
async def test_reply_errors_reports_failures_only():
    shared, _ = await _make_router()
    session = MagicMock()
    with patch("discord_router.bot.send_error_message", new_callable=AsyncMock) as send_error:
        await process_messages(
            shared, session, "tok",
            _stream(("c1", "!broken"), ("c1", "!unknown"), ("c1", "!rec x")),
            reply_errors=True,
        )
    send_error.assert_awaited_once_with(session, "tok", "c1", "handler exploded")


@pytest.mark.asyncio
async def test_failed_error_reply_does_not_stop_loop():
    shared, recorder = await _make_router()
    with patch(
        "discord_router.bot.send_error_message",
        new_callable=AsyncMock,
        side_effect=ConnectionError("offline"),
    ):
        stats = await process_messages(
            shared, MagicMock(), "tok",
            _stream(("c1", "!broken"), ("c1", "!rec after")),
            reply_errors=True,
        )
    assert recorder.seen == [("c1", "after")]
    assert stats.failed == 1
    assert stats.handled == 1


@pytest.mark.asyncio
async def test_cancellation_propagates():
    shared = SharedRouter()
    started = asyncio.Event()

    class Hang(Command):
        async def execute(self, client, token, channel_id, args):
            started.set()
            await asyncio.Event().wait()

    await shared.register_command("!hang", Hang())
    task = asyncio.create_task(
        process_messages(shared, MagicMock(), "tok", _stream(("c", "!hang")))
    )
    await asyncio.wait_for(started.wait(), timeout=1)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
