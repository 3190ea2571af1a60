# src/roomgate/schemas/room.py
"""Room sharing Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ShareRoomRequest(BaseModel):
    """Schema for sharing one room of a reservation with another guest."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    reservation_id: str = Field(..., alias="reservationID")
    room_id: int = Field(..., alias="roomID")


class RoomGrantResponse(BaseModel):
    """Schema describing a persisted room grant."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    email: str
    reservation_id: str = Field(..., serialization_alias="reservationID")
    room_id: int = Field(..., serialization_alias="roomID")
