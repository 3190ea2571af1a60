"""Wire format for door access codes.

A payload is ``subject|room|document|code``: four pipe-delimited fields with no
escaping. Identity fields containing the delimiter are rejected when encoding,
since they could not be decoded unambiguously.
"""
from __future__ import annotations

from dataclasses import dataclass

from roomgate.core.otp import CODE_DIGITS
from roomgate.services.errors import BadInputError

DELIMITER = "|"
FIELD_COUNT = 4


@dataclass(frozen=True)
class IdentityTriple:
    """Identity fields a door code is bound to."""

    subject_id: str
    room_id: str
    document_id: str

    @property
    def secret(self) -> bytes:
        """HMAC key derived by concatenating the three fields."""
        return f"{self.subject_id}{self.room_id}{self.document_id}".encode()


def _check_code(code: str) -> None:
    if len(code) != CODE_DIGITS or not (code.isascii() and code.isdigit()):
        raise BadInputError(f"Access code must be exactly {CODE_DIGITS} digits.")


def encode(triple: IdentityTriple, code: str) -> str:
    """Serialize an identity triple and its code into the wire payload."""
    fields = (triple.subject_id, triple.room_id, triple.document_id)
    for field in fields:
        if DELIMITER in field:
            raise BadInputError(f"Identity fields must not contain '{DELIMITER}'.")
    _check_code(code)
    return DELIMITER.join((*fields, code))


def decode(payload: str) -> tuple[IdentityTriple, str]:
    """Parse a wire payload back into its identity triple and code.

    Raises:
        BadInputError: If the payload does not hold exactly four fields or the
            code is not six digits.
    """
    parts = payload.split(DELIMITER)
    if len(parts) != FIELD_COUNT:
        raise BadInputError("Malformed access code payload.")
    subject_id, room_id, document_id, code = parts
    _check_code(code)
    return IdentityTriple(subject_id, room_id, document_id), code
