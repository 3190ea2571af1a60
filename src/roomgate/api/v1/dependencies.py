"""Shared API dependencies: identities, services and the door access gate.

Every door actuation requested by a guest passes three guards, in order:

1. authenticated: a valid guest bearer token for an existing guest;
2. in-room: the permission evaluator allows the guest to open the target room today;
3. checked-in: the guest's active reservation has a recorded, unfinished stay.

Each guard raises before the next one runs, so a failed request never reaches
the dispatcher.
"""

import datetime
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Path, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from roomgate.core.security import JWTError, Role, decode_access_token
from roomgate.db.session import get_db
from roomgate.db.time import local_today
from roomgate.models import Guest, Reservation, Staff
from roomgate.repositories import GrantRepository, ReservationRepository, StaffRepository
from roomgate.services.actuation import ActuationDispatcher, get_actuation_dispatcher
from roomgate.services.check_in import CheckInService
from roomgate.services.door_access import DoorAccessService
from roomgate.services.errors import DoorAccessError
from roomgate.services.room_permission import RoomPermissionService

logger = logging.getLogger(__name__)

# HTTP Bearer scheme; missing credentials are reported as 401 by the guards below.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]
CredentialsDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


def _unauthorized(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _decode_subject(credentials: HTTPAuthorizationCredentials | None, role: Role) -> str:
    """Return the token subject if the token is valid and carries ``role``.

    Raises:
        HTTPException: 401 if credentials are missing, invalid or for another role.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as err:
        raise _unauthorized() from err

    subject = payload.get("sub")
    if not subject or payload.get("role") != role:
        raise _unauthorized()
    return str(subject)


def get_current_guest(credentials: CredentialsDep, db: SessionDep) -> Guest:
    """Resolve the authenticated guest from the bearer token."""
    guest = db.get(Guest, _decode_subject(credentials, "guest"))
    if guest is None:
        raise _unauthorized("Guest not found")
    return guest


def get_current_staff(credentials: CredentialsDep, db: SessionDep) -> Staff:
    """Resolve the authenticated staff member from the bearer token."""
    staff = db.get(Staff, _decode_subject(credentials, "staff"))
    if staff is None:
        raise _unauthorized("Staff not found")
    return staff


CurrentGuestDep = Annotated[Guest, Depends(get_current_guest)]
CurrentStaffDep = Annotated[Staff, Depends(get_current_staff)]


def get_door_access_service(db: SessionDep) -> DoorAccessService:
    """Build the door access service for this request."""
    return DoorAccessService(StaffRepository(db))


def get_room_permission_service(db: SessionDep) -> RoomPermissionService:
    """Build the room permission evaluator for this request."""
    return RoomPermissionService(ReservationRepository(db), GrantRepository(db))


def get_check_in_service(db: SessionDep) -> CheckInService:
    """Build the front-desk check-in service for this request."""
    return CheckInService(ReservationRepository(db))


def get_actuation_dispatcher_dep() -> ActuationDispatcher:
    """Return the shared door command dispatcher."""
    return get_actuation_dispatcher()


def get_evaluation_date() -> datetime.date:
    """Return the date permissions are evaluated against."""
    return local_today()


DoorAccessServiceDep = Annotated[DoorAccessService, Depends(get_door_access_service)]
RoomPermissionDep = Annotated[RoomPermissionService, Depends(get_room_permission_service)]
DispatcherDep = Annotated[ActuationDispatcher, Depends(get_actuation_dispatcher_dep)]
CheckInServiceDep = Annotated[CheckInService, Depends(get_check_in_service)]
EvaluationDateDep = Annotated[datetime.date, Depends(get_evaluation_date)]


@dataclass(frozen=True)
class RoomAccess:
    """Result of a passed access gate."""

    guest: Guest
    room_id: int
    reservation: Reservation | None = None


def room_from_query(room_id: Annotated[int, Query(alias="roomID")]) -> int:
    """Target room given as the ``roomID`` query parameter."""
    return room_id


def room_from_path(room_id: Annotated[int, Path()]) -> int:
    """Target room given as the ``room_id`` path segment."""
    return room_id


def _forbidden(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def access_gate(resolve_room: Callable[..., int]) -> Callable[..., RoomAccess]:
    """Build the authenticated -> in-room -> checked-in guard chain.

    Args:
        resolve_room: Dependency extracting the target room from the request.

    Returns:
        A dependency yielding ``RoomAccess`` once all three guards pass.
    """

    def require_room_permission(
        guest: CurrentGuestDep,
        room_id: Annotated[int, Depends(resolve_room)],
        permissions: RoomPermissionDep,
        today: EvaluationDateDep,
    ) -> RoomAccess:
        try:
            allowed = permissions.has_permission_to_enter_room(guest.id, guest.email, today, room_id)
        except DoorAccessError as err:
            logger.info("Access gate denied guest %s on room %s: %s", guest.id, room_id, err.detail)
            raise _forbidden(err.detail) from err
        if not allowed:
            logger.info("Access gate denied guest %s on room %s: not permitted", guest.id, room_id)
            raise _forbidden("No permission to enter this room.")
        return RoomAccess(guest=guest, room_id=room_id)

    def require_checked_in(
        access: Annotated[RoomAccess, Depends(require_room_permission)],
        permissions: RoomPermissionDep,
        today: EvaluationDateDep,
    ) -> RoomAccess:
        guest = access.guest
        try:
            reservation = permissions.find_reservation_in(guest.id, guest.email, today)
        except DoorAccessError as err:
            raise _forbidden("Not checked in.") from err
        if not reservation.covers(today) or not reservation.is_occupied:
            logger.info("Access gate denied guest %s: reservation %s not occupied", guest.id, reservation.id)
            raise _forbidden("Not checked in.")
        return RoomAccess(guest=guest, room_id=access.room_id, reservation=reservation)

    return require_checked_in


QueryRoomAccessDep = Annotated[RoomAccess, Depends(access_gate(room_from_query))]
PathRoomAccessDep = Annotated[RoomAccess, Depends(access_gate(room_from_path))]
