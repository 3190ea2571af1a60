# src/roomgate/services/__init__.py
"""Business logic services for the Roomgate application."""

from .actuation import ActuationDispatcher, DoorCommand, PublishResult
from .check_in import CheckInService
from .door_access import DoorAccessService, IssuedCode
from .errors import (
    BadInputError,
    DoorAccessError,
    ForbiddenError,
    NotCheckedInError,
    NotFoundError,
    PublishError,
)
from .room_permission import RoomPermissionService

__all__ = [
    "ActuationDispatcher",
    "DoorCommand",
    "PublishResult",
    "CheckInService",
    "DoorAccessService",
    "IssuedCode",
    "RoomPermissionService",
    "DoorAccessError",
    "NotFoundError",
    "ForbiddenError",
    "BadInputError",
    "NotCheckedInError",
    "PublishError",
]
