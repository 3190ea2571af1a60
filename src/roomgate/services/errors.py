"""Domain exceptions raised by the door-access services.

The API layer maps each class to a client error status; none of them is retried.
"""
from __future__ import annotations

from fastapi import status


class DoorAccessError(RuntimeError):
    """Base exception for door-access failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFoundError(DoorAccessError):
    """Raised when a staff member, reservation or grant does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(DoorAccessError):
    """Raised when a guest acts on a reservation or room they do not control."""

    status_code = status.HTTP_403_FORBIDDEN


class BadInputError(DoorAccessError):
    """Raised for malformed payloads, dates or identifiers."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotCheckedInError(BadInputError):
    """Raised when no reservation covers the evaluation date for the guest."""


class PublishError(DoorAccessError):
    """Raised when a door command could not be handed to the message channel."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
