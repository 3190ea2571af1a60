"""Tests for bearer token helpers."""

import pytest
from jose import jwt

from roomgate.core.security import JWTError, create_access_token, decode_access_token
from roomgate.core.settings import settings


def test_token_carries_subject_and_role() -> None:
    payload = decode_access_token(create_access_token("g-1", "guest"))
    assert payload["sub"] == "g-1"
    assert payload["role"] == "guest"
    assert "exp" in payload


def test_extra_claims_are_included() -> None:
    token = create_access_token("s1", "staff", extra_claims={"desk": "lobby"})
    assert decode_access_token(token)["desk"] == "lobby"


def test_expired_token_is_rejected() -> None:
    token = create_access_token("g-1", "guest", expires_minutes=-1)
    with pytest.raises(JWTError):
        decode_access_token(token)


def test_token_signed_with_other_key_is_rejected() -> None:
    token = jwt.encode({"sub": "g-1", "role": "guest"}, "not-" + settings.secret_key, algorithm="HS256")
    with pytest.raises(JWTError):
        decode_access_token(token)
