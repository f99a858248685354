"""Shared response schemas."""

from pydantic import BaseModel


class Message(BaseModel):
    """Plain confirmation message."""

    message: str
