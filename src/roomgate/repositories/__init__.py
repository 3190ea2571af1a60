"""Repository implementations backed by SQLAlchemy sessions."""

from .reservation_repo import GrantRepository, GrantStore, ReservationLookup, ReservationRepository
from .staff_repo import StaffLookup, StaffRepository

__all__ = [
    "GrantRepository",
    "GrantStore",
    "ReservationLookup",
    "ReservationRepository",
    "StaffLookup",
    "StaffRepository",
]
