"""React to a message: ``!react <message_id> <emoji> [<emoji> ...]``."""

import aiohttp

from ..api.channels import create_reaction
from ..arguments import parse_arguments
from ..commands.base import Command
from ..exceptions import CommandArgumentError


class React(Command):
    description = "Add one or more reactions to a message"

    async def execute(
        self, client: aiohttp.ClientSession, token: str, channel_id: str, args: str
    ) -> None:
        parts = parse_arguments(args)
        if len(parts) < 2:
            raise CommandArgumentError(
                "Usage: !react <message_id> <emoji> [<emoji> ...]", command="react"
            )
        message_id, emojis = parts[0], parts[1:]
        # Reactions appear in the order given, so add them one at a time
        for emoji in emojis:
            await create_reaction(client, token, channel_id, message_id, emoji)
