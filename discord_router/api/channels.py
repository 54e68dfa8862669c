"""Channel helpers: channel info, message history, reactions, typing,
invites and threads.
"""

from typing import Any, Optional, Sequence
from urllib.parse import quote

import aiohttp

from ..exceptions import CommandArgumentError
from .http import API_BASE, request

# Discord accepts 2 to 100 message ids per bulk delete
BULK_DELETE_MIN = 2
BULK_DELETE_MAX = 100


def _encode_emoji(emoji: str) -> str:
    # Unicode emoji and "name:id" custom emoji both go in the path
    return quote(emoji, safe="")


async def fetch_channel_info(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", f"/channels/{channel_id}", api_base=api_base,
    )


async def get_channel_messages(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    *,
    limit: Optional[int] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Fetch recent messages. Discord caps limit at 100."""
    params = None
    if limit is not None:
        params = {"limit": str(max(1, min(limit, 100)))}
    return await request(
        session, token, "GET", f"/channels/{channel_id}/messages",
        params=params, api_base=api_base,
    )


async def get_channel_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", f"/channels/{channel_id}/messages/{message_id}",
        api_base=api_base,
    )


async def get_pinned_messages(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", f"/channels/{channel_id}/pins", api_base=api_base,
    )


async def create_reaction(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    emoji: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "PUT",
        f"/channels/{channel_id}/messages/{message_id}"
        f"/reactions/{_encode_emoji(emoji)}/@me",
        api_base=api_base,
    )


async def delete_own_reaction(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    emoji: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE",
        f"/channels/{channel_id}/messages/{message_id}"
        f"/reactions/{_encode_emoji(emoji)}/@me",
        api_base=api_base,
    )


async def trigger_typing_indicator(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    *,
    api_base: str = API_BASE,
) -> None:
    """Show "Bot is typing..." in the channel for a few seconds."""
    await request(
        session, token, "POST", f"/channels/{channel_id}/typing", api_base=api_base,
    )


async def bulk_delete_messages(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_ids: Sequence[str],
    *,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> None:
    """Delete 2 to 100 messages in one call.

    Raises:
        CommandArgumentError: If the number of ids is out of range.
    """
    if not BULK_DELETE_MIN <= len(message_ids) <= BULK_DELETE_MAX:
        raise CommandArgumentError(
            f"Bulk delete takes {BULK_DELETE_MIN}-{BULK_DELETE_MAX} messages, "
            f"got {len(message_ids)}",
            count=len(message_ids),
        )
    await request(
        session, token, "POST", f"/channels/{channel_id}/messages/bulk-delete",
        json={"messages": list(message_ids)}, reason=reason, api_base=api_base,
    )


async def get_channel_invites(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", f"/channels/{channel_id}/invites", api_base=api_base,
    )


async def create_channel_invite(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    *,
    max_age: Optional[int] = None,
    max_uses: Optional[int] = None,
    temporary: bool = False,
    unique: bool = False,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Create an invite. Unset limits use Discord's defaults (24h, unlimited)."""
    payload = {"temporary": temporary, "unique": unique}
    if max_age is not None:
        payload["max_age"] = max_age
    if max_uses is not None:
        payload["max_uses"] = max_uses
    return await request(
        session, token, "POST", f"/channels/{channel_id}/invites",
        json=payload, reason=reason, api_base=api_base,
    )


async def start_thread_from_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    name: str,
    *,
    auto_archive_duration: Optional[int] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    payload = {"name": name}
    if auto_archive_duration is not None:
        payload["auto_archive_duration"] = auto_archive_duration
    return await request(
        session, token, "POST",
        f"/channels/{channel_id}/messages/{message_id}/threads",
        json=payload, api_base=api_base,
    )


async def start_thread_without_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    name: str,
    *,
    private: bool = False,
    auto_archive_duration: Optional[int] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Start a standalone thread (type 12 when private, 11 otherwise)."""
    payload = {"name": name, "type": 12 if private else 11}
    if auto_archive_duration is not None:
        payload["auto_archive_duration"] = auto_archive_duration
    return await request(
        session, token, "POST", f"/channels/{channel_id}/threads",
        json=payload, api_base=api_base,
    )


async def join_thread(
    session: aiohttp.ClientSession,
    token: str,
    thread_id: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "PUT", f"/channels/{thread_id}/thread-members/@me",
        api_base=api_base,
    )


async def add_thread_member(
    session: aiohttp.ClientSession,
    token: str,
    thread_id: str,
    user_id: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "PUT", f"/channels/{thread_id}/thread-members/{user_id}",
        api_base=api_base,
    )


async def remove_thread_member(
    session: aiohttp.ClientSession,
    token: str,
    thread_id: str,
    user_id: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE", f"/channels/{thread_id}/thread-members/{user_id}",
        api_base=api_base,
    )


async def list_thread_members(
    session: aiohttp.ClientSession,
    token: str,
    thread_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", f"/channels/{thread_id}/thread-members",
        api_base=api_base,
    )
