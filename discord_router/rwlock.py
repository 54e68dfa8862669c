"""Reader/writer lock for asyncio tasks.

Many readers may hold the lock at once; a writer holds it alone. Once a
writer is waiting, new readers queue behind it so registration cannot be
starved by a busy dispatch loop.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Shared/exclusive lock built on a single asyncio.Condition."""

    def __init__(self):
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        """Number of tasks currently holding the shared lock."""
        return self._readers

    @property
    def writer_active(self) -> bool:
        """Whether a task currently holds the exclusive lock."""
        return self._writer

    async def acquire_read(self) -> None:
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and self._writers_waiting == 0
            )
            self._readers += 1

    async def release_read(self) -> None:
        async with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    async def acquire_write(self) -> None:
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and self._readers == 0
                )
            except BaseException:
                # Readers parked behind this writer must be woken on cancel
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer = True

    async def release_write(self) -> None:
        async with self._cond:
            self._writer = False
            self._cond.notify_all()

    # Releases re-take the condition lock and may wait for it. They are
    # shielded so a cancellation arriving at that point cannot leave the
    # lock held.

    @asynccontextmanager
    async def reader(self) -> AsyncIterator[None]:
        """Hold the shared lock for the duration of the block."""
        await self.acquire_read()
        try:
            yield
        finally:
            await asyncio.shield(self.release_read())

    @asynccontextmanager
    async def writer(self) -> AsyncIterator[None]:
        """Hold the exclusive lock for the duration of the block."""
        await self.acquire_write()
        try:
            yield
        finally:
            await asyncio.shield(self.release_write())
