# src/roomgate/models/staff.py
"""SQLAlchemy model for staff accounts."""
from __future__ import annotations

import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from roomgate.db.session import Base


class Staff(Base):
    """Front-desk or maintenance staff member allowed to mint door codes."""

    __tablename__ = "staff"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # bcrypt hash written by the identity provider; never read here.
    password: Mapped[str] = mapped_column(Text, nullable=False)
    firstname: Mapped[str] = mapped_column(Text, nullable=False, default="")
    lastname: Mapped[str] = mapped_column(Text, nullable=False, default="")
    national_id: Mapped[str | None] = mapped_column(String(32), nullable=True)
