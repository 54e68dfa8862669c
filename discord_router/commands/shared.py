"""Concurrency wrapper around CommandRouter.

SharedRouter puts a CommandRouter behind a ReadWriteLock so one task
can register commands while many others dispatch. Dispatch holds the
shared lock only while looking up the command; the command itself runs
after the lock is released, so slow handlers never hold up
registration or each other.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator, Optional

import structlog

from ..rwlock import ReadWriteLock
from .base import Command, CommandRouter

if TYPE_CHECKING:
    import aiohttp

logger = structlog.get_logger("discord_router.router")


class SharedRouter:
    """CommandRouter guarded for concurrent readers and a single writer.

    Args:
        router: Router to wrap. A new empty one is created if omitted.
    """

    def __init__(self, router: Optional[CommandRouter] = None):
        self._router = router if router is not None else CommandRouter()
        self._lock = ReadWriteLock()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[CommandRouter]:
        """Yield the router while holding the shared lock."""
        async with self._lock.reader():
            yield self._router

    @asynccontextmanager
    async def write(self) -> AsyncIterator[CommandRouter]:
        """Yield the router while holding the exclusive lock."""
        async with self._lock.writer():
            yield self._router

    async def register_command(self, trigger: str, command: Command) -> None:
        """Register a command under the exclusive lock."""
        async with self.write() as router:
            router.register_command(trigger, command)

    async def unregister_command(self, trigger: str) -> bool:
        """Remove a trigger under the exclusive lock."""
        async with self.write() as router:
            return router.unregister_command(trigger)

    async def dispatch(
        self,
        client: "aiohttp.ClientSession",
        token: str,
        channel_id: str,
        content: str,
    ) -> None:
        """Look up the command under the shared lock, then run it unlocked.

        The command reference taken during lookup keeps the instance alive
        even if the trigger is replaced while the command runs.

        Raises:
            CommandNotFoundError: If the leading token is not registered.
            Exception: Whatever the command itself raises, unchanged.
        """
        async with self.read() as router:
            command, args = router.resolve(content)
        logger.debug(
            "command_dispatch",
            command=type(command).__name__,
            channel_id=channel_id,
            has_args=bool(args),
        )
        await command.execute(client, token, channel_id, args)

    async def command_names(self) -> frozenset:
        async with self.read() as router:
            return router.command_names
