"""Webhook helpers.

Management calls (create, list, modify, delete by id) need the bot
token. Calls addressed by ``webhook_token`` are authorized by that
token alone; the bot token is still sent, which Discord ignores.
"""

from typing import Any, Optional

import aiohttp

from .http import API_BASE, request


def _webhook_path(webhook_id: str, webhook_token: Optional[str] = None) -> str:
    if webhook_token is None:
        return f"/webhooks/{webhook_id}"
    return f"/webhooks/{webhook_id}/{webhook_token}"


async def create_webhook(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    name: str,
    *,
    avatar: Optional[str] = None,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Create a channel webhook. ``avatar`` is a data URI image."""
    payload = {"name": name}
    if avatar is not None:
        payload["avatar"] = avatar
    return await request(
        session, token, "POST", f"/channels/{channel_id}/webhooks",
        json=payload, reason=reason, api_base=api_base,
    )


async def get_channel_webhooks(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", f"/channels/{channel_id}/webhooks", api_base=api_base,
    )


async def get_guild_webhooks(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", f"/guilds/{guild_id}/webhooks", api_base=api_base,
    )


async def get_webhook(
    session: aiohttp.ClientSession,
    token: str,
    webhook_id: str,
    *,
    webhook_token: Optional[str] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET", _webhook_path(webhook_id, webhook_token),
        api_base=api_base,
    )


async def modify_webhook(
    session: aiohttp.ClientSession,
    token: str,
    webhook_id: str,
    changes: dict,
    *,
    webhook_token: Optional[str] = None,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Update name, avatar or (by id only) channel_id of a webhook."""
    return await request(
        session, token, "PATCH", _webhook_path(webhook_id, webhook_token),
        json=changes, reason=reason, api_base=api_base,
    )


async def delete_webhook(
    session: aiohttp.ClientSession,
    token: str,
    webhook_id: str,
    *,
    webhook_token: Optional[str] = None,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE", _webhook_path(webhook_id, webhook_token),
        reason=reason, api_base=api_base,
    )


async def execute_webhook(
    session: aiohttp.ClientSession,
    token: str,
    webhook_id: str,
    webhook_token: str,
    payload: dict,
    *,
    wait: bool = False,
    flavor: Optional[str] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Post a message through a webhook.

    Args:
        payload: Message body (content, embeds, username, ...).
        wait: Ask Discord to return the created message.
        flavor: None for Discord's own format, or "slack" / "github" for
            the compatible endpoints, which take those services' payloads.

    Raises:
        ValueError: If flavor is not recognized.
    """
    path = _webhook_path(webhook_id, webhook_token)
    if flavor is not None:
        if flavor not in ("slack", "github"):
            raise ValueError(f"Unknown webhook flavor: {flavor}")
        path = f"{path}/{flavor}"
    params = {"wait": "true"} if wait else None
    return await request(
        session, token, "POST", path, json=payload, params=params, api_base=api_base,
    )


async def get_webhook_message(
    session: aiohttp.ClientSession,
    token: str,
    webhook_id: str,
    webhook_token: str,
    message_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "GET",
        f"{_webhook_path(webhook_id, webhook_token)}/messages/{message_id}",
        api_base=api_base,
    )


async def edit_webhook_message(
    session: aiohttp.ClientSession,
    token: str,
    webhook_id: str,
    webhook_token: str,
    message_id: str,
    changes: dict,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "PATCH",
        f"{_webhook_path(webhook_id, webhook_token)}/messages/{message_id}",
        json=changes, api_base=api_base,
    )


async def delete_webhook_message(
    session: aiohttp.ClientSession,
    token: str,
    webhook_id: str,
    webhook_token: str,
    message_id: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE",
        f"{_webhook_path(webhook_id, webhook_token)}/messages/{message_id}",
        api_base=api_base,
    )
