"""Main entry point for discord_router.

Initializes logging in two phases (defaults then config-driven), builds
the router from builtin and user command files, and feeds messages read
from stdin through it until EOF or SIGTERM/SIGINT.

Each stdin line is ``<channel_id> <message text>``; blank lines and
lines without message text are ignored.

Key functions:
    main: Async entry point.
    run: Synchronous wrapper for the ``discord-router`` console script.
"""

import asyncio
import os
import signal
import stat
import sys
from typing import AsyncIterator, Optional, Set, Tuple

import aiohttp
import structlog

from .logging_config import setup_logging

# Strong references so stdin feeder tasks are not garbage collected
_feeder_tasks: Set[asyncio.Task] = set()


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Parse ``<channel_id> <content>``. Returns None for unusable lines."""
    parts = line.strip().split(maxsplit=1)
    if len(parts) < 2:
        return None
    return parts[0], parts[1]


def _is_pollable(stream) -> bool:
    """Whether the event loop can watch ``stream`` directly."""
    mode = os.fstat(stream.fileno()).st_mode
    return stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode) or stat.S_ISCHR(mode)


async def _feed_lines(reader: asyncio.StreamReader, stream) -> None:
    """Copy lines from a blocking stream into ``reader`` until EOF."""
    source = getattr(stream, "buffer", stream)
    try:
        while True:
            line = await asyncio.to_thread(source.readline)
            if not line:
                break
            if isinstance(line, str):
                line = line.encode("utf-8")
            reader.feed_data(line)
    finally:
        reader.feed_eof()


async def open_stdin() -> asyncio.StreamReader:
    """Wrap stdin in a non-blocking StreamReader.

    Pipes, sockets and ttys are registered with the event loop. Regular
    files (``discord-router < messages.txt``) cannot be polled, so their
    lines are read in a worker thread and fed into the reader.
    """
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    if _is_pollable(sys.stdin):
        protocol = asyncio.StreamReaderProtocol(reader)
        await loop.connect_read_pipe(lambda: protocol, sys.stdin)
    else:
        task = asyncio.create_task(_feed_lines(reader, sys.stdin))
        _feeder_tasks.add(task)
        task.add_done_callback(_feeder_tasks.discard)
    return reader


async def read_messages(
    reader: asyncio.StreamReader,
) -> AsyncIterator[Tuple[str, str]]:
    """Yield (channel_id, content) pairs from a line stream until EOF."""
    async for raw in reader:
        parsed = parse_line(raw.decode("utf-8", errors="replace"))
        if parsed is not None:
            yield parsed


async def run_until_shutdown(
    loop_task: asyncio.Task, shutdown_event: asyncio.Event
) -> None:
    """Wait for the message loop to finish or for a shutdown request.

    On shutdown the loop task is cancelled and awaited. If the loop ends
    first, its exception (if any) is re-raised.
    """
    shutdown_task = asyncio.create_task(shutdown_event.wait())
    done, _ = await asyncio.wait(
        {loop_task, shutdown_task}, return_when=asyncio.FIRST_COMPLETED
    )
    shutdown_task.cancel()
    if loop_task in done:
        loop_task.result()
        return
    loop_task.cancel()
    try:
        await loop_task
    except asyncio.CancelledError:
        pass


async def main():
    """Main async entry point."""
    # Phase 1: defaults, cache_logger_on_first_use=False
    setup_logging()
    logger = structlog.get_logger("discord_router.bot")

    from . import __version__
    from .bot import process_messages
    from .command_loader import load_commands, register_builtin_commands
    from .commands import CommandRouter, SharedRouter
    from .config import get_config

    logger.info("discord_router_starting", version=__version__)

    config = get_config()
    config.validate()

    # Phase 2: reconfigure with real config
    setup_logging(config)

    router = CommandRouter()
    register_builtin_commands(router, prefix=config.command_prefix)
    if config.commands_dir is not None:
        load_commands(router, config.commands_dir, prefix=config.command_prefix)
    shared = SharedRouter(router)
    logger.info("commands_registered", commands=sorted(router.command_names))

    loop = asyncio.get_running_loop()
    shutdown_event = asyncio.Event()

    def handle_shutdown(sig):
        logger.info("shutdown_signal_received", signal=sig.name)
        shutdown_event.set()

    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            loop.add_signal_handler(sig, handle_shutdown, sig)
        except NotImplementedError:
            # Windows: add_signal_handler not supported
            if sig == signal.SIGINT:
                signal.signal(
                    signal.SIGINT,
                    lambda s, f: handle_shutdown(signal.SIGINT),
                )

    async with aiohttp.ClientSession() as session:
        loop_task = asyncio.create_task(process_messages(
            shared,
            session,
            config.token,
            read_messages(await open_stdin()),
            reply_errors=config.reply_errors,
        ))
        await run_until_shutdown(loop_task, shutdown_event)

    logger.info("discord_router_stopped")


def run():
    """Synchronous entry point for the ``discord-router`` console script."""
    from .exceptions import ConfigurationError

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
    except ConfigurationError as e:
        sys.exit(f"discord-router: {e}")


if __name__ == "__main__":
    run()
