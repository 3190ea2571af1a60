# src/roomgate/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .door import DoorCommandAck
from .reservation import ReservationResponse
from .room import RoomGrantResponse, ShareRoomRequest

__all__ = [
    "DoorCommandAck",
    "ReservationResponse",
    "RoomGrantResponse", "ShareRoomRequest",
]
