"""Data access helpers for staff records."""
from __future__ import annotations

from typing import Protocol

from sqlalchemy.orm import Session

from roomgate.models.staff import Staff

__all__ = ["StaffLookup", "StaffRepository"]


class StaffLookup(Protocol):
    """Capability consumed by the door access service."""

    def find_by_id(self, staff_id: str) -> Staff | None: ...


class StaffRepository:
    """Thin wrapper around database access for staff entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def find_by_id(self, staff_id: str) -> Staff | None:
        """Return a staff member by identifier."""
        return self.session.get(Staff, staff_id)
