"""discord_router: route chat-bot commands to async handlers.

Register Command implementations on a CommandRouter under trigger
strings, wrap it in a SharedRouter for concurrent use, and dispatch
raw message text to the matching command.
"""

from .commands import Command, CommandRouter, SharedRouter, split_command
from .exceptions import (
    CommandArgumentError,
    CommandLoadError,
    CommandNotFoundError,
    ConfigurationError,
    DiscordAPIError,
    ErrorCategory,
    RouterError,
)

__version__ = "0.3.0"

__all__ = [
    "Command",
    "CommandRouter",
    "SharedRouter",
    "split_command",
    # Errors
    "ErrorCategory",
    "RouterError",
    "CommandNotFoundError",
    "CommandArgumentError",
    "CommandLoadError",
    "DiscordAPIError",
    "ConfigurationError",
]
