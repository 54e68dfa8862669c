"""Repeat the argument text back to the channel."""

import aiohttp

from ..api.messages import send_message
from ..commands.base import Command
from ..exceptions import CommandArgumentError


class Echo(Command):
    description = "Repeat the given text"

    async def execute(
        self, client: aiohttp.ClientSession, token: str, channel_id: str, args: str
    ) -> None:
        text = args.strip()
        if not text:
            raise CommandArgumentError("Nothing to echo", command="echo")
        await send_message(client, token, channel_id, text)
