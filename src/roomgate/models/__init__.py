# src/roomgate/models/__init__.py
"""SQLAlchemy models for the Roomgate application."""

from .guest import Guest
from .reservation import Reservation, reservation_room
from .room import GuestReservationRoom, Room
from .staff import Staff

__all__ = [
    "Guest",
    "Reservation", "reservation_room",
    "GuestReservationRoom", "Room",
    "Staff",
]
