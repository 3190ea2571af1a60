# src/roomgate/services/check_in.py
"""Front-desk check-in: records the guest's arrival on a reservation.

The access gate only lets a guest actuate doors once an arrival is recorded
here and no departure has been recorded yet.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable
from typing import Protocol

from roomgate.db.time import utcnow
from roomgate.models.reservation import Reservation
from roomgate.services.errors import BadInputError, NotFoundError

logger = logging.getLogger(__name__)


class ArrivalStore(Protocol):
    """Reservation persistence consumed by the check-in service."""

    def find_by_id(self, reservation_id: str) -> Reservation | None: ...

    def record_arrival(self, reservation: Reservation, at: datetime.datetime) -> Reservation: ...


class CheckInService:
    """Service marking reservations as occupied."""

    def __init__(
        self,
        reservation_repository: ArrivalStore,
        *,
        clock: Callable[[], datetime.datetime] = utcnow,
    ) -> None:
        self.reservation_repository = reservation_repository
        self.clock = clock

    def check_in(self, reservation_id: str, on: datetime.date) -> Reservation:
        """Record the arrival for a reservation whose check-in date is ``on``.

        Raises:
            NotFoundError: If the reservation does not exist.
            BadInputError: If ``on`` is not the check-in date, or the guest
                already arrived.
        """
        reservation = self.reservation_repository.find_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found.")
        if on != reservation.check_in:
            raise BadInputError(f"Can not check in on {on.isoformat()}.")
        if reservation.check_in_enter_time is not None:
            raise BadInputError("Reservation is already checked in.")

        updated = self.reservation_repository.record_arrival(reservation, self.clock())
        logger.info("Reservation %s checked in", reservation_id)
        return updated
