"""Command routing framework for discord_router.

Provides the Command ABC, the CommandRouter registry, and the
SharedRouter wrapper for concurrent registration and dispatch.
"""

from .base import Command, CommandRouter, split_command
from .shared import SharedRouter

__all__ = [
    "Command",
    "CommandRouter",
    "SharedRouter",
    "split_command",
]
