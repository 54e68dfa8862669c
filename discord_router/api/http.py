"""Low-level Discord REST request helper.

Every helper in this package funnels through request(), which builds
the URL, attaches the bot token, and turns non-2xx responses into
DiscordAPIError. Connection failures (aiohttp.ClientError) propagate
unchanged so callers can tell "Discord said no" apart from "Discord
was unreachable".
"""

from typing import Any, Optional
from urllib.parse import quote

import aiohttp
import structlog

from ..exceptions import DiscordAPIError

logger = structlog.get_logger("discord_router.api")

API_BASE = "https://discord.com/api/v10"

AUDIT_LOG_REASON_HEADER = "X-Audit-Log-Reason"

# Response bodies are truncated before going into exceptions and logs
_MAX_ERROR_BODY = 500


def auth_headers(token: str) -> dict:
    """Build the Authorization header for a bot token."""
    return {"Authorization": f"Bot {token}"}


async def request(
    session: aiohttp.ClientSession,
    token: str,
    method: str,
    path: str,
    *,
    json: Optional[Any] = None,
    params: Optional[dict] = None,
    reason: Optional[str] = None,
    api_base: str = API_BASE,
) -> Optional[Any]:
    """Perform an authenticated Discord REST call.

    Args:
        session: Shared HTTP session.
        token: Bot token.
        method: HTTP method ("GET", "POST", ...).
        path: Path below the API base, starting with "/".
        json: Optional JSON request body.
        params: Optional query string parameters.
        reason: Optional audit log reason for moderation actions.
        api_base: API root URL.

    Returns:
        Decoded JSON body, or None for empty (204) responses.

    Raises:
        DiscordAPIError: If Discord answers with a non-2xx status.
    """
    url = f"{api_base.rstrip('/')}{path}"
    headers = auth_headers(token)
    if reason:
        # Discord expects the reason URL-encoded in a header, not the body
        headers[AUDIT_LOG_REASON_HEADER] = quote(reason)
    async with session.request(
        method,
        url,
        headers=headers,
        json=json,
        params=params,
    ) as resp:
        if not 200 <= resp.status < 300:
            body = (await resp.text())[:_MAX_ERROR_BODY]
            logger.warning(
                "discord_request_failed",
                method=method,
                path=path,
                status=resp.status,
                body=body[:200],
            )
            raise DiscordAPIError(
                f"{method} {path} failed with status {resp.status}",
                status=resp.status,
                method=method,
                url=url,
                body=body,
            )
        if resp.status == 204:
            return None
        text = await resp.text()
        if not text:
            return None
        return await resp.json(content_type=None)
