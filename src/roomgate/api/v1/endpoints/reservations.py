# src/roomgate/api/v1/endpoints/reservations.py
"""Front-desk reservation endpoints for the Roomgate API."""

from __future__ import annotations

import datetime
from typing import Annotated

from fastapi import APIRouter, Query

from roomgate.api.v1.dependencies import CheckInServiceDep, CurrentStaffDep, EvaluationDateDep
from roomgate.schemas.reservation import ReservationResponse

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post(
    "/{reservation_id}/check-in",
    response_model=ReservationResponse,
    summary="Record a guest's arrival",
)
def check_in(
    reservation_id: str,
    staff: CurrentStaffDep,
    check_in_service: CheckInServiceDep,
    today: EvaluationDateDep,
    on: Annotated[datetime.date | None, Query(alias="date")] = None,
) -> ReservationResponse:
    """Mark the reservation occupied. ``date`` must equal its check-in date."""
    reservation = check_in_service.check_in(reservation_id, on or today)
    return ReservationResponse.model_validate(reservation)
