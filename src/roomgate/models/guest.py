# src/roomgate/models/guest.py
"""SQLAlchemy model for guests."""
from __future__ import annotations

import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roomgate.db.session import Base


class Guest(Base):
    """Registered guest. Owns reservations and may receive shared rooms by email."""

    __tablename__ = "guest"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    firstname: Mapped[str] = mapped_column(Text, nullable=False, default="")
    lastname: Mapped[str] = mapped_column(Text, nullable=False, default="")
    national_id: Mapped[str | None] = mapped_column(String(32), nullable=True)

    reservations: Mapped[list["Reservation"]] = relationship(  # noqa: F821
        "Reservation",
        back_populates="guest",
    )
