# src/roomgate/models/reservation.py
"""SQLAlchemy models for reservations and their assigned rooms."""
from __future__ import annotations

import datetime
import uuid

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roomgate.db.session import Base

reservation_room = Table(
    "reservation_room",
    Base.metadata,
    Column("reservation_id", String(36), ForeignKey("reservation.id", ondelete="CASCADE"), primary_key=True),
    Column("room_id", Integer, ForeignKey("room.id"), primary_key=True),
)


class Reservation(Base):
    """A guest's stay: owner, date window, actual arrival/departure and rooms."""

    __tablename__ = "reservation"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    guest_id: Mapped[str] = mapped_column(String(36), ForeignKey("guest.id"), nullable=False, index=True)
    check_in: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    check_out: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    check_in_enter_time: Mapped[datetime.datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    check_out_exit_time: Mapped[datetime.datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    special_requests: Mapped[str | None] = mapped_column(Text, nullable=True)

    guest: Mapped["Guest"] = relationship("Guest", back_populates="reservations")  # noqa: F821
    rooms: Mapped[list["Room"]] = relationship(  # noqa: F821
        "Room",
        secondary=reservation_room,
        order_by="Room.id",
    )

    def covers(self, day: datetime.date) -> bool:
        """Return True if ``day`` falls within the check-in/check-out window."""
        return self.check_in <= day <= self.check_out

    @property
    def is_occupied(self) -> bool:
        """True once the guest has arrived and has not yet left."""
        return self.check_in_enter_time is not None and self.check_out_exit_time is None
