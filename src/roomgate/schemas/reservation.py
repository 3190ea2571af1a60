# src/roomgate/schemas/reservation.py
"""Reservation Pydantic schemas."""

import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReservationResponse(BaseModel):
    """Schema describing a reservation's stay window and recorded arrival."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    guest_id: str = Field(..., serialization_alias="guestID")
    check_in: datetime.date = Field(..., serialization_alias="checkIn")
    check_out: datetime.date = Field(..., serialization_alias="checkOut")
    check_in_enter_time: datetime.datetime | None = Field(None, serialization_alias="checkInTime")
    check_out_exit_time: datetime.datetime | None = Field(None, serialization_alias="checkOutTime")
