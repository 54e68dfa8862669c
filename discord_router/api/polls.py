"""Poll helpers."""

from typing import Any, Optional

import aiohttp

from .http import API_BASE, request


async def get_answer_voters(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    answer_id: int,
    *,
    after: Optional[str] = None,
    limit: Optional[int] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """List users who voted for one poll answer. Discord caps limit at 100."""
    params = {}
    if after is not None:
        params["after"] = after
    if limit is not None:
        params["limit"] = str(max(1, min(limit, 100)))
    return await request(
        session, token, "GET",
        f"/channels/{channel_id}/polls/{message_id}/answers/{answer_id}",
        params=params or None, api_base=api_base,
    )


async def end_poll(
    session: aiohttp.ClientSession,
    token: str,
    channel_id: str,
    message_id: str,
    *,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Close a poll early. Returns the updated message."""
    return await request(
        session, token, "POST",
        f"/channels/{channel_id}/polls/{message_id}/expire",
        api_base=api_base,
    )
