"""Liveness check: replies "Pong!"."""

import aiohttp

from ..api.messages import send_message
from ..commands.base import Command


class Ping(Command):
    description = "Reply with Pong!"

    async def execute(
        self, client: aiohttp.ClientSession, token: str, channel_id: str, args: str
    ) -> None:
        await send_message(client, token, channel_id, "Pong!")
