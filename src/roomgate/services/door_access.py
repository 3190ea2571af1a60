# src/roomgate/services/door_access.py
"""Issuing and verifying time-limited door codes for staff."""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Callable
from dataclasses import dataclass

from roomgate.core.otp import acceptable_counters, counter_code, format_code, time_code
from roomgate.core.settings import settings
from roomgate.repositories.staff_repo import StaffLookup
from roomgate.services import codec
from roomgate.services.codec import IdentityTriple
from roomgate.services.errors import NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedCode:
    """A freshly derived code together with the identity it is bound to."""

    identity: IdentityTriple
    code: str

    def encode(self) -> str:
        """Return the wire payload for this code."""
        return codec.encode(self.identity, self.code)


class DoorAccessService:
    """Service deriving door codes from a staff identity.

    Codes are never stored. Verification recomputes every code inside the
    tolerance band and compares against the presented one.
    """

    def __init__(
        self,
        staff_repository: StaffLookup,
        *,
        clock: Callable[[], float] = time.time,
        window_offset: int | None = None,
        lookbehind: int | None = None,
        lookahead: int | None = None,
    ) -> None:
        self.staff_repository = staff_repository
        self.clock = clock
        self.window_offset = (
            settings.door_code_window_offset if window_offset is None else window_offset
        )
        default_behind, default_ahead = settings.door_code_band
        self.lookbehind = default_behind if lookbehind is None else lookbehind
        self.lookahead = default_ahead if lookahead is None else lookahead

    def build_identity(
        self,
        subject_id: str,
        room_id: str | None = None,
        document_id: str | None = None,
    ) -> IdentityTriple:
        """Resolve the identity triple for a staff member.

        Room and document fall back to the configured placeholders unless the
        caller binds real identifiers explicitly.

        Raises:
            NotFoundError: If ``subject_id`` is not a known staff member.
        """
        if self.staff_repository.find_by_id(subject_id) is None:
            raise NotFoundError("Request failed. Staff ID is invalid.")
        return IdentityTriple(
            subject_id=subject_id,
            room_id=room_id or settings.door_placeholder_room_id,
            document_id=document_id or settings.door_placeholder_document_id,
        )

    def issue_code(
        self,
        subject_id: str,
        room_id: str | None = None,
        document_id: str | None = None,
    ) -> IssuedCode:
        """Derive the code for a staff member, ``window_offset`` seconds ahead."""
        identity = self.build_identity(subject_id, room_id, document_id)
        code = time_code(identity.secret, self.window_offset, now=self.clock())
        logger.info("Issued door code for staff %s on room %s", subject_id, identity.room_id)
        return IssuedCode(identity=identity, code=format_code(code))

    def issue_encoded(
        self,
        subject_id: str,
        room_id: str | None = None,
        document_id: str | None = None,
    ) -> str:
        """Issue a code and return it in wire form."""
        return self.issue_code(subject_id, room_id, document_id).encode()

    def verify(self, encoded: str) -> bool:
        """Return True if the presented payload carries a code valid right now.

        Raises:
            BadInputError: If the payload cannot be decoded.
        """
        identity, presented = codec.decode(encoded)
        secret = identity.secret
        valid = False
        for counter in acceptable_counters(self.clock(), self.lookbehind, self.lookahead):
            expected = format_code(counter_code(secret, counter))
            # No early exit: the whole band is always scanned.
            if secrets.compare_digest(expected, presented):
                valid = True
        logger.info(
            "Door code verification for subject %s on room %s: %s",
            identity.subject_id,
            identity.room_id,
            "accepted" if valid else "rejected",
        )
        return valid
