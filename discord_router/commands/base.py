"""Base classes for the command routing framework.

Defines the contract every bot command implements and the registry
that maps trigger strings to command instances.

Key classes:
    Command: ABC that every handler implements.
    CommandRouter: Maps triggers to commands and dispatches message text.

Key functions:
    split_command: Split message text into (trigger, args).
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Optional, Tuple

import structlog

from ..exceptions import CommandNotFoundError

if TYPE_CHECKING:
    import aiohttp

logger = structlog.get_logger("discord_router.router")

_FIRST_SEPARATOR = re.compile(r"\s+")


def split_command(content: str) -> Tuple[str, str]:
    """Split message text on its first whitespace run.

    Returns (trigger, args). Without any whitespace the whole text is
    the trigger and args is empty.
    """
    match = _FIRST_SEPARATOR.search(content)
    if match is None:
        return content, ""
    return content[:match.start()], content[match.end():]


class Command(ABC):
    """Abstract base class for bot commands.

    Subclasses implement execute() to perform their side effect (usually
    a reply through the REST helpers in discord_router.api). Returning
    normally signals success; raising signals failure, and the exception
    reaches the dispatch caller unchanged.

    Attributes:
        trigger: Optional explicit trigger, used by the command loader
            instead of the one derived from the module name.
        description: One-line help text.
    """

    trigger: Optional[str] = None
    description: str = ""

    @abstractmethod
    async def execute(
        self,
        client: "aiohttp.ClientSession",
        token: str,
        channel_id: str,
        args: str,
    ) -> None:
        """Run the command.

        Args:
            client: Shared HTTP session. Borrowed, never closed here.
            token: Bot token for authentication.
            channel_id: ID of the channel where the command was invoked.
            args: Message text after the trigger, possibly empty.
        """
        ...


class CommandRouter:
    """Maps triggers to commands and dispatches message text to them.

    Registration is last-write-wins. dispatch() never mutates the
    mapping, so it only needs shared access when the router sits behind
    a SharedRouter.
    """

    def __init__(self):
        self._commands: Dict[str, Command] = {}

    def register_command(self, trigger: str, command: Command) -> None:
        """Register a command, replacing any previous one for the trigger.

        Args:
            trigger: Exact leading token to match (e.g. "!ping").
            command: Command instance to invoke.
        """
        previous = self._commands.get(trigger)
        if previous is not None and previous is not command:
            logger.warning(
                "command_replaced",
                trigger=trigger,
                old=type(previous).__name__,
                new=type(command).__name__,
            )
        self._commands[trigger] = command

    def unregister_command(self, trigger: str) -> bool:
        """Remove a trigger. Returns True if it was registered."""
        return self._commands.pop(trigger, None) is not None

    def get(self, trigger: str) -> Optional[Command]:
        """Look up the command for a trigger."""
        return self._commands.get(trigger)

    def resolve(self, content: str) -> Tuple[Command, str]:
        """Split message text and look up its command.

        Raises:
            CommandNotFoundError: If the leading token is not registered.
        """
        trigger, args = split_command(content)
        command = self._commands.get(trigger)
        if command is None:
            raise CommandNotFoundError(trigger)
        return command, args

    async def dispatch(
        self,
        client: "aiohttp.ClientSession",
        token: str,
        channel_id: str,
        content: str,
    ) -> None:
        """Route message text to its command and run it.

        Raises:
            CommandNotFoundError: If the leading token is not registered.
            Exception: Whatever the command itself raises, unchanged.
        """
        command, args = self.resolve(content)
        logger.debug(
            "command_dispatch",
            command=type(command).__name__,
            channel_id=channel_id,
            has_args=bool(args),
        )
        await command.execute(client, token, channel_id, args)

    @property
    def command_names(self) -> frozenset:
        """All registered triggers."""
        return frozenset(self._commands.keys())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, trigger: object) -> bool:
        return trigger in self._commands
