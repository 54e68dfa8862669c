"""Embed model for rich Discord messages."""

from typing import Optional

from pydantic import BaseModel, Field


class Embed(BaseModel):
    """A single Discord embed.

    Only the fields bot commands commonly fill are modelled; unset
    optional fields are dropped from the wire payload.
    """

    title: str = Field(max_length=256)
    description: str = Field(default="", max_length=4096)
    url: Optional[str] = None
    color: Optional[int] = Field(default=None, ge=0, le=0xFFFFFF)

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)
