# src/roomgate/models/room.py
"""SQLAlchemy models for rooms and room-sharing grants."""
from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from roomgate.db.session import Base


class Room(Base):
    """Physical room with its own door controller topic."""

    __tablename__ = "room"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[str] = mapped_column(Text, nullable=False, default="standard")


class GuestReservationRoom(Base):
    """Grant letting a second guest, identified by email, enter one room of a reservation.

    Duplicate grants for the same triple are tolerated.
    """

    __tablename__ = "guest_reservation_room"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    reservation_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("reservation.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_id: Mapped[int] = mapped_column(Integer, ForeignKey("room.id"), nullable=False)
