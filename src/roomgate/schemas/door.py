# src/roomgate/schemas/door.py
"""Door-related Pydantic schemas."""

from pydantic import BaseModel, Field


class DoorCommandAck(BaseModel):
    """Acknowledgement returned once a command was handed to the channel."""

    message: str
    topic: str
    receivers: int = Field(..., description="Controllers subscribed when the command was published")
