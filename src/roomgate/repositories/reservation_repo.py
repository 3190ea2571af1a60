"""Data access helpers for reservations and room-sharing grants."""
from __future__ import annotations

import datetime
from typing import Protocol

from sqlalchemy import exists, or_, select
from sqlalchemy.orm import Session, selectinload

from roomgate.models.reservation import Reservation
from roomgate.models.room import GuestReservationRoom

__all__ = [
    "GrantRepository",
    "GrantStore",
    "ReservationLookup",
    "ReservationRepository",
]


class ReservationLookup(Protocol):
    """Reservation queries consumed by the room permission evaluator."""

    def find_by_id(self, reservation_id: str) -> Reservation | None: ...

    def find_reservation_in(
        self, guest_id: str, email: str, on: datetime.date
    ) -> Reservation | None: ...

    def room_ids(self, reservation_id: str) -> list[int]: ...


class GrantStore(Protocol):
    """Room grant persistence consumed by the room permission evaluator."""

    def create(self, email: str, reservation_id: str, room_id: int) -> GuestReservationRoom: ...

    def find(self, email: str, reservation_id: str) -> GuestReservationRoom | None: ...


class ReservationRepository:
    """Thin wrapper around database access for reservations."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def find_by_id(self, reservation_id: str) -> Reservation | None:
        """Return a reservation by identifier."""
        return self.session.get(Reservation, reservation_id)

    def find_reservation_in(
        self, guest_id: str, email: str, on: datetime.date
    ) -> Reservation | None:
        """Return the first reservation covering ``on`` that the guest owns or shares.

        Reservations are ordered by check-in date then identifier, so a guest
        holding several active reservations always resolves to the earliest.
        """
        shared = exists().where(
            GuestReservationRoom.reservation_id == Reservation.id,
            GuestReservationRoom.email == email,
        )
        stmt = (
            select(Reservation)
            .options(selectinload(Reservation.rooms))
            .where(
                Reservation.check_in <= on,
                Reservation.check_out >= on,
                or_(Reservation.guest_id == guest_id, shared),
            )
            .order_by(Reservation.check_in, Reservation.id)
            .limit(1)
        )
        return self.session.execute(stmt).scalars().first()

    def room_ids(self, reservation_id: str) -> list[int]:
        """Return the IDs of every room assigned to a reservation."""
        reservation = self.find_by_id(reservation_id)
        if reservation is None:
            return []
        return [room.id for room in reservation.rooms]

    def record_arrival(self, reservation: Reservation, at: datetime.datetime) -> Reservation:
        """Persist the arrival time on a reservation."""
        reservation.check_in_enter_time = at
        self.session.commit()
        self.session.refresh(reservation)
        return reservation


class GrantRepository:
    """Persistence for room-sharing grants."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, email: str, reservation_id: str, room_id: int) -> GuestReservationRoom:
        """Insert a grant and return the persisted row."""
        grant = GuestReservationRoom(email=email, reservation_id=reservation_id, room_id=room_id)
        self.session.add(grant)
        self.session.commit()
        self.session.refresh(grant)
        return grant

    def find(self, email: str, reservation_id: str) -> GuestReservationRoom | None:
        """Return the oldest grant for ``email`` on a reservation."""
        stmt = (
            select(GuestReservationRoom)
            .where(
                GuestReservationRoom.email == email,
                GuestReservationRoom.reservation_id == reservation_id,
            )
            .order_by(GuestReservationRoom.id)
            .limit(1)
        )
        return self.session.execute(stmt).scalars().first()
