# src/roomgate/api/v1/endpoints/rooms.py
"""Room sharing and room listing endpoints for the Roomgate API."""

from __future__ import annotations

import datetime
from typing import Annotated

from fastapi import APIRouter, Query, status

from roomgate.api.v1.dependencies import CurrentGuestDep, EvaluationDateDep, RoomPermissionDep
from roomgate.schemas.room import RoomGrantResponse, ShareRoomRequest

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.post(
    "/share",
    response_model=RoomGrantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Share one room of your reservation with another guest",
)
def share_room(
    payload: ShareRoomRequest,
    guest: CurrentGuestDep,
    permissions: RoomPermissionDep,
) -> RoomGrantResponse:
    """Create a grant letting the guest at ``email`` open ``roomID``."""
    grant = permissions.share_room(
        guest.id,
        str(payload.email),
        payload.reservation_id,
        payload.room_id,
    )
    return RoomGrantResponse.model_validate(grant)


@router.get("/enterable", summary="List the rooms you may enter")
def enterable_rooms(
    guest: CurrentGuestDep,
    permissions: RoomPermissionDep,
    today: EvaluationDateDep,
    on: Annotated[datetime.date | None, Query(alias="date")] = None,
) -> list[int]:
    """Return the IDs of rooms the guest may open on ``date`` (default: today)."""
    return permissions.find_rooms_that_can_enter(guest.id, guest.email, on or today)
