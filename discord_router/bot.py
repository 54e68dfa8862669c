"""Message loop that feeds inbound messages through a SharedRouter.

The loop is transport-agnostic: it consumes ``(channel_id, content)``
pairs from any async iterable. Each message is dispatched on its own;
an unknown trigger or a failing command is logged and the loop moves on
to the next message.

Key classes:
    DispatchStats: Counters returned by process_messages.

Key functions:
    process_messages: Dispatch a stream of messages until it ends.
"""

from dataclasses import dataclass
from typing import AsyncIterable, Tuple

import aiohttp
import structlog

from .api.messages import send_error_message
from .commands.shared import SharedRouter
from .exceptions import CommandNotFoundError

logger = structlog.get_logger("discord_router.bot")


@dataclass
class DispatchStats:
    """Outcome counters for one run of process_messages."""
    handled: int = 0
    unknown: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.handled + self.unknown + self.failed


async def _report_failure(
    session: aiohttp.ClientSession, token: str, channel_id: str, error: Exception
) -> None:
    """Best-effort error reply; a failure here is logged, not raised."""
    try:
        await send_error_message(session, token, channel_id, str(error))
    except Exception as e:
        logger.warning(
            "error_reply_failed",
            channel_id=channel_id,
            error=str(e),
            error_type=type(e).__name__,
        )


async def process_messages(
    shared: SharedRouter,
    session: aiohttp.ClientSession,
    token: str,
    messages: AsyncIterable[Tuple[str, str]],
    *,
    reply_errors: bool = False,
) -> DispatchStats:
    """Dispatch every message from an async stream, one at a time.

    Messages are handled sequentially, which preserves per-channel order.

    Args:
        shared: Router to dispatch through.
        session: Shared HTTP session passed to every command.
        token: Bot token passed to every command.
        messages: Async iterable of (channel_id, content) pairs.
        reply_errors: Post failed commands' errors back to the channel.

    Returns:
        Counters of handled, unknown and failed messages.
    """
    stats = DispatchStats()
    async for channel_id, content in messages:
        try:
            await shared.dispatch(session, token, channel_id, content)
        except CommandNotFoundError as e:
            stats.unknown += 1
            logger.info("command_not_found", trigger=e.trigger, channel_id=channel_id)
            continue
        except Exception as e:
            stats.failed += 1
            logger.error(
                "command_failed",
                channel_id=channel_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            if reply_errors:
                await _report_failure(session, token, channel_id, e)
            continue
        stats.handled += 1
    logger.info(
        "message_stream_ended",
        handled=stats.handled,
        unknown=stats.unknown,
        failed=stats.failed,
    )
    return stats
