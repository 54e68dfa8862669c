"""Message helpers: send, edit, delete, pin and unpin channel messages."""

from typing import Any, Optional

import aiohttp

from .embeds import Embed
from .http import API_BASE, request


async def send_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    content: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Post a text message to a channel. Returns the created message."""
    return await request(
        session, token, "POST", f"/channels/{channel_id}/messages",
        json={"content": content}, api_base=api_base,
    )


async def send_error_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    error_message: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Post an "Error: ..." message to a channel."""
    return await send_message(
        session, token, channel_id, f"Error: {error_message}", api_base=api_base,
    )


async def send_embed_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    title: str,
    description: str,
    *,
    color: Optional[int] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Post a single-embed message to a channel."""
    embed = Embed(title=title, description=description, color=color)
    return await request(
        session, token, "POST", f"/channels/{channel_id}/messages",
        json={"embeds": [embed.to_payload()]}, api_base=api_base,
    )


async def edit_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    new_content: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    return await request(
        session, token, "PATCH", f"/channels/{channel_id}/messages/{message_id}",
        json={"content": new_content}, api_base=api_base,
    )


async def delete_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE", f"/channels/{channel_id}/messages/{message_id}",
        api_base=api_base,
    )


async def pin_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "PUT", f"/channels/{channel_id}/pins/{message_id}",
        api_base=api_base,
    )


async def unpin_message(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    *,
    api_base: str = API_BASE,
) -> None:
    await request(
        session, token, "DELETE", f"/channels/{channel_id}/pins/{message_id}",
        api_base=api_base,
    )
