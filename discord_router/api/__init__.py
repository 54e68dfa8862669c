"""Thin Discord REST helpers used by commands to produce their side effects."""

from .channels import (
    add_thread_member,
    bulk_delete_messages,
    create_channel_invite,
    create_reaction,
    delete_own_reaction,
    fetch_channel_info,
    get_channel_invites,
    get_channel_message,
    get_channel_messages,
    get_pinned_messages,
    join_thread,
    list_thread_members,
    remove_thread_member,
    start_thread_from_message,
    start_thread_without_message,
    trigger_typing_indicator,
)
from .embeds import Embed
from .http import API_BASE, auth_headers, request
from .messages import (
    delete_message,
    edit_message,
    pin_message,
    send_embed_message,
    send_error_message,
    send_message,
    unpin_message,
)
from .permissions import Permission, check_permission
from .polls import end_poll, get_answer_voters
from .roles import add_role, fetch_role_info, get_guild_roles, remove_role
from .users import (
    ban_user,
    create_dm,
    get_current_user,
    get_current_user_guilds,
    get_user,
    kick_user,
    leave_guild,
    unban_user,
)
from .webhooks import (
    create_webhook,
    delete_webhook,
    delete_webhook_message,
    edit_webhook_message,
    execute_webhook,
    get_channel_webhooks,
    get_guild_webhooks,
    get_webhook,
    get_webhook_message,
    modify_webhook,
)

__all__ = [
    "API_BASE",
    "Embed",
    "auth_headers",
    "request",
    # Messages
    "send_message",
    "send_error_message",
    "send_embed_message",
    "edit_message",
    "delete_message",
    "pin_message",
    "unpin_message",
    # Channels
    "fetch_channel_info",
    "get_channel_messages",
    "get_channel_message",
    "get_pinned_messages",
    "create_reaction",
    "delete_own_reaction",
    "trigger_typing_indicator",
    "bulk_delete_messages",
    "get_channel_invites",
    "create_channel_invite",
    "start_thread_from_message",
    "start_thread_without_message",
    "join_thread",
    "add_thread_member",
    "remove_thread_member",
    "list_thread_members",
    # Users
    "get_current_user",
    "get_user",
    "get_current_user_guilds",
    "leave_guild",
    "create_dm",
    "kick_user",
    "ban_user",
    "unban_user",
    # Roles and permissions
    "add_role",
    "remove_role",
    "get_guild_roles",
    "fetch_role_info",
    "Permission",
    "check_permission",
    # Polls
    "get_answer_voters",
    "end_poll",
    # Webhooks
    "create_webhook",
    "get_channel_webhooks",
    "get_guild_webhooks",
    "get_webhook",
    "modify_webhook",
    "delete_webhook",
    "execute_webhook",
    "get_webhook_message",
    "edit_webhook_message",
    "delete_webhook_message",
]
