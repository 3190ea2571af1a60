"""Bearer token helpers for staff and guest identities.

Registration and login live outside this service; the identity provider issues
JWTs signed with the shared ``SECRET_KEY``. These helpers mint and decode those
tokens so that the API guards and development tooling agree on the claims.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any, Literal

from jose import JWTError, jwt

from roomgate.core.settings import settings

Role = Literal["staff", "guest"]
ROLE_CLAIM = "role"


def create_access_token(
    subject: str,
    role: Role,
    extra_claims: dict[str, str] | None = None,
    expires_minutes: int | None = None,
) -> str:
    """Create a JWT access token for a staff member or guest."""
    to_encode: dict[str, object] = {"sub": subject, ROLE_CLAIM: role}
    if extra_claims:
        to_encode.update(extra_claims)
    minutes = settings.access_token_expire_minutes if expires_minutes is None else expires_minutes
    to_encode["exp"] = datetime.now(UTC) + timedelta(minutes=minutes)
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT access token.

    Raises:
        JWTError: If the token is malformed, expired or signed with another key.
    """
    return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])


__all__ = ["JWTError", "Role", "create_access_token", "decode_access_token"]
