# src/roomgate/api/v1/endpoints/door.py
"""Door code and door actuation endpoints for the Roomgate API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from roomgate.api.v1.dependencies import (
    CurrentStaffDep,
    DispatcherDep,
    DoorAccessServiceDep,
    PathRoomAccessDep,
    QueryRoomAccessDep,
)
from roomgate.schemas.door import DoorCommandAck
from roomgate.services.actuation import DoorCommand, PublishResult
from roomgate.services.errors import ForbiddenError

router = APIRouter(prefix="/door", tags=["door"])


def _acknowledge(result: PublishResult) -> DoorCommandAck:
    result.raise_for_failure()
    return DoorCommandAck(
        message=f"{result.command.value} command sent.",
        topic=result.topic,
        receivers=result.receivers,
    )


@router.get("/generate", summary="Issue a time-limited door code for a staff member")
def generate_code(
    staff: CurrentStaffDep,
    door_access: DoorAccessServiceDep,
    subject_id: Annotated[str | None, Query(alias="subjectID")] = None,
    room_id: Annotated[str | None, Query(alias="roomID")] = None,
) -> str:
    """Return the encoded payload ``subject|room|document|code``.

    Codes are bound to the calling staff member; ``subjectID`` may only name
    the caller. ``roomID`` binds the code to a room; without it the placeholder
    room is used.
    """
    if subject_id is not None and subject_id != staff.id:
        raise ForbiddenError("Can not issue a code for another staff member.")
    return door_access.issue_encoded(staff.id, room_id)


@router.get("/verify", summary="Check whether an encoded door code is currently valid")
def verify_code(
    door_access: DoorAccessServiceDep,
    encoded: Annotated[str, Query()],
) -> bool:
    return door_access.verify(encoded)


@router.post(
    "/rooms/{room_id}/unlock",
    response_model=DoorCommandAck,
    summary="Unlock the guest's own room",
)
def unlock_room(access: PathRoomAccessDep, dispatcher: DispatcherDep) -> DoorCommandAck:
    """Publish ``unlock`` on the room's own topic once the access gate passes."""
    return _acknowledge(dispatcher.send_to_room(access.room_id, DoorCommand.UNLOCK))


@router.post(
    "/staff/{command}",
    response_model=DoorCommandAck,
    summary="Send a door command as staff",
)
def staff_actuate(
    command: DoorCommand,
    staff: CurrentStaffDep,
    dispatcher: DispatcherDep,
    room_id: Annotated[int | None, Query(alias="roomID")] = None,
) -> DoorCommandAck:
    """Staff bypass per-room permission; ``roomID`` narrows the command to one door."""
    if room_id is None:
        return _acknowledge(dispatcher.broadcast(command))
    return _acknowledge(dispatcher.send_to_room(room_id, command))


@router.post("/{command}", response_model=DoorCommandAck, summary="Send a door command")
def actuate(
    command: DoorCommand,
    access: QueryRoomAccessDep,
    dispatcher: DispatcherDep,
) -> DoorCommandAck:
    """Publish a lock, unlock or sound command on the global ``door`` topic."""
    return _acknowledge(dispatcher.broadcast(command))
