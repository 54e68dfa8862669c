"""Guild role helpers: grant, revoke and inspect roles."""

from typing import Any, Optional

import aiohttp

from .http import API_BASE, request


async def add_role(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    user_id: str,
    role_id: str,
    *,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "PUT",
        f"/guilds/{guild_id}/members/{user_id}/roles/{role_id}",
        reason=reason, api_base=api_base,
    )


async def remove_role(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    user_id: str,
    role_id: str,
    *,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE",
        f"/guilds/{guild_id}/members/{user_id}/roles/{role_id}",
        reason=reason, api_base=api_base,
    )


async def get_guild_roles(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", f"/guilds/{guild_id}/roles", api_base=api_base,
    )


async def fetch_role_info(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    role_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", f"/guilds/{guild_id}/roles/{role_id}",
        api_base=api_base,
    )
