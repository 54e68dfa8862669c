"""User helpers: the bot account, DMs and member moderation."""

from typing import Any, Optional

import aiohttp

from .http import API_BASE, request

MAX_BAN_DELETE_SECONDS = 7 * 24 * 60 * 60


async def get_current_user(
    session: aiohttp.ClientSession,
    token: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Fetch the bot's own user object. Useful as a token check."""
    return await request(session, token, "GET", "/users/@me", api_base=api_base)


async def get_user(
    session: aiohttp.ClientSession,
    token: str,
    user_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(session, token, "GET", f"/users/{user_id}", api_base=api_base)


async def get_current_user_guilds(
    session: aiohttp.ClientSession,
    token: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(session, token, "GET", "/users/@me/guilds", api_base=api_base)


async def leave_guild(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE", f"/users/@me/guilds/{guild_id}", api_base=api_base,
    )


async def create_dm(
    session: aiohttp.ClientSession,
    token: str,
    recipient_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Open (or reuse) a DM channel. Send to it with its returned ``id``."""
    return await request(
        session, token, "POST", "/users/@me/channels",
        json={"recipient_id": recipient_id}, api_base=api_base,
    )


async def kick_user(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    user_id: str,
    *,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE", f"/guilds/{guild_id}/members/{user_id}",
        reason=reason, api_base=api_base,
    )


async def ban_user(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    user_id: str,
    *,
    delete_message_seconds: int = 0,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> None:
    """Ban a member, optionally deleting up to 7 days of their messages."""
    seconds = max(0, min(delete_message_seconds, MAX_BAN_DELETE_SECONDS))
    await request(
        session, token, "PUT", f"/guilds/{guild_id}/bans/{user_id}",
        json={"delete_message_seconds": seconds}, reason=reason, api_base=api_base,
    )


async def unban_user(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    user_id: str,
    *,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE", f"/guilds/{guild_id}/bans/{user_id}",
        reason=reason, api_base=api_base,
    )
