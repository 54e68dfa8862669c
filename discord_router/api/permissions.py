"""Permission checks for guild members.

Discord does not report a member's effective permissions on the member
object. check_permission() computes them from the member's roles: the
permission bitsets of @everyone (whose id equals the guild id) and of
every role the member holds are OR-ed together. ADMINISTRATOR implies
every other permission. Channel overwrites and guild ownership are not
taken into account.
"""

from enum import IntFlag
from typing import Iterable, Union

import aiohttp

from .http import API_BASE, request


class Permission(IntFlag):
    """Subset of Discord permission bits used by commands."""
    CREATE_INSTANT_INVITE = 1 << 0
    KICK_MEMBERS = 1 << 1
    BAN_MEMBERS = 1 << 2
    ADMINISTRATOR = 1 << 3
    MANAGE_CHANNELS = 1 << 4
    MANAGE_GUILD = 1 << 5
    ADD_REACTIONS = 1 << 6
    VIEW_CHANNEL = 1 << 10
    SEND_MESSAGES = 1 << 11
    MANAGE_MESSAGES = 1 << 13
    EMBED_LINKS = 1 << 14
    READ_MESSAGE_HISTORY = 1 << 16
    MENTION_EVERYONE = 1 << 17
    MANAGE_ROLES = 1 << 28
    MANAGE_WEBHOOKS = 1 << 29
    MANAGE_THREADS = 1 << 34
    MODERATE_MEMBERS = 1 << 40


def compute_permissions(
    guild_id: str, member_role_ids: Iterable[str], roles: Iterable[dict]
) -> int:
    """OR together @everyone and the member's role permission bitsets."""
    wanted = set(member_role_ids)
    wanted.add(guild_id)
    total = 0
    for role in roles:
        if role.get("id") in wanted:
            total |= int(role.get("permissions", "0"))
    return total


def has_permission(granted: int, permission: Union[Permission, int]) -> bool:
    if granted & Permission.ADMINISTRATOR:
        return True
    return (granted & permission) == permission


async def check_permission(
    session: aiohttp.ClientSession,
    token: str,
    guild_id: str,
    user_id: str,
    permission: Union[Permission, int],
    *,
    api_base: str = API_BASE,
) -> bool:
    """Whether a guild member's roles grant ``permission``.

    Args:
        session: Shared HTTP session.
        token: Bot token.
        guild_id: Guild to check in.
        user_id: Member to check.
        permission: One or more Permission flags; all must be granted.
        api_base: API root URL.

    Raises:
        DiscordAPIError: If the member or the guild roles cannot be fetched.
    """
    member = await request(
        session, token, "GET", f"/guilds/{guild_id}/members/{user_id}",
        api_base=api_base,
    )
    roles = await request(
        session, token, "GET", f"/guilds/{guild_id}/roles", api_base=api_base,
    )
    granted = compute_permissions(guild_id, (member or {}).get("roles", []), roles or [])
    return has_permission(granted, permission)
