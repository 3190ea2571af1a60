# src/roomgate/services/room_permission.py
"""Room-entry permission evaluation and room sharing.

A guest standing on a reservation is evaluated fresh on every request:

1. find a reservation covering the date that the guest owns or was shared into;
2. owners may enter every room of that reservation;
3. anyone else may enter only the single room granted to their email.
"""

from __future__ import annotations

import datetime
import logging

from roomgate.models.reservation import Reservation
from roomgate.models.room import GuestReservationRoom
from roomgate.repositories.reservation_repo import GrantStore, ReservationLookup
from roomgate.services.errors import BadInputError, ForbiddenError, NotCheckedInError

logger = logging.getLogger(__name__)


class RoomPermissionService:
    """Service deciding which rooms a guest may open."""

    def __init__(
        self,
        reservation_repository: ReservationLookup,
        grant_repository: GrantStore,
    ) -> None:
        self.reservation_repository = reservation_repository
        self.grant_repository = grant_repository

    def find_reservation_in(self, guest_id: str, email: str, on: datetime.date) -> Reservation:
        """Return the reservation the guest is staying on at ``on``.

        Raises:
            NotCheckedInError: If no owned or shared reservation covers ``on``.
        """
        reservation = self.reservation_repository.find_reservation_in(guest_id, email, on)
        if reservation is None:
            raise NotCheckedInError("Not checked in.")
        return reservation

    def is_reservation_owner(self, guest_id: str, reservation_id: str) -> bool:
        """Return True if ``guest_id`` made the reservation.

        Raises:
            BadInputError: If the reservation does not exist.
        """
        reservation = self.reservation_repository.find_by_id(reservation_id)
        if reservation is None:
            raise BadInputError("Invalid reservation id.")
        return reservation.guest_id == guest_id

    def rooms_in_reservation(self, reservation_id: str) -> list[int]:
        """Return the IDs of every room on a reservation, ascending; empty if unknown."""
        return self.reservation_repository.room_ids(reservation_id)

    def room_shared(self, email: str, reservation_id: str) -> int:
        """Return the room shared with ``email`` on a reservation.

        Raises:
            ForbiddenError: If no grant exists for that email.
        """
        grant = self.grant_repository.find(email, reservation_id)
        if grant is None:
            raise ForbiddenError("No permission to enter this room.")
        return grant.room_id

    def find_rooms_that_can_enter(
        self, guest_id: str, email: str, on: datetime.date
    ) -> list[int]:
        """List the rooms the guest may enter on ``on``."""
        reservation = self.find_reservation_in(guest_id, email, on)
        if reservation.guest_id == guest_id:
            return self.rooms_in_reservation(reservation.id)
        return [self.room_shared(email, reservation.id)]

    def has_permission_to_enter_room(
        self,
        guest_id: str,
        email: str,
        on: datetime.date,
        room_id: int,
    ) -> bool:
        """Return True if the guest may open ``room_id`` on ``on``."""
        reservation = self.find_reservation_in(guest_id, email, on)
        if reservation.guest_id == guest_id:
            allowed = room_id in self.rooms_in_reservation(reservation.id)
        else:
            allowed = self.room_shared(email, reservation.id) == room_id
        logger.debug(
            "Room %s permission for guest %s on reservation %s: %s",
            room_id,
            guest_id,
            reservation.id,
            allowed,
        )
        return allowed

    def share_room(
        self,
        owner_id: str,
        email: str,
        reservation_id: str,
        room_id: int,
    ) -> GuestReservationRoom:
        """Let the guest at ``email`` enter one room of the owner's reservation.

        Raises:
            BadInputError: If the reservation is unknown or the room is not part of it.
            ForbiddenError: If ``owner_id`` did not make the reservation.
        """
        if not self.is_reservation_owner(owner_id, reservation_id):
            raise ForbiddenError("Can not share room. You did not make this reservation.")
        if room_id not in self.rooms_in_reservation(reservation_id):
            raise BadInputError("Room is not part of this reservation.")
        grant = self.grant_repository.create(email, reservation_id, room_id)
        logger.info("Reservation %s shared room %s", reservation_id, room_id)
        return grant
