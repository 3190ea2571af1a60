"""Tests for the pipe-delimited door code payload."""

import pytest

from roomgate.services.codec import IdentityTriple, decode, encode
from roomgate.services.errors import BadInputError


def test_encode_joins_fields_in_order() -> None:
    triple = IdentityTriple("s1", "9999", "1234567890123")
    assert encode(triple, "012345") == "s1|9999|1234567890123|012345"


def test_decode_splits_fields() -> None:
    triple, code = decode("s1|101|3100500123456|000042")
    assert triple == IdentityTriple("s1", "101", "3100500123456")
    assert code == "000042"


def test_decode_allows_empty_identity_fields() -> None:
    triple, _ = decode("s1||doc|123456")
    assert triple.room_id == ""


def test_secret_concatenates_fields() -> None:
    assert IdentityTriple("s1", "9999", "42").secret == b"s1999942"


@pytest.mark.parametrize(
    "payload",
    [
        "s1|9999|123456",
        "s1|9999|doc|123456|extra",
        "",
        "123456",
    ],
)
def test_decode_rejects_wrong_field_count(payload: str) -> None:
    with pytest.raises(BadInputError):
        decode(payload)


@pytest.mark.parametrize("code", ["12345", "1234567", "12a456", ""])
def test_decode_rejects_malformed_code(code: str) -> None:
    with pytest.raises(BadInputError):
        decode(f"s1|9999|doc|{code}")


def test_encode_rejects_delimiter_in_identity() -> None:
    with pytest.raises(BadInputError):
        encode(IdentityTriple("s|1", "9999", "doc"), "123456")


def test_encode_rejects_short_code() -> None:
    with pytest.raises(BadInputError):
        encode(IdentityTriple("s1", "9999", "doc"), "1234")


@pytest.mark.parametrize("code", ["١٢٣٤٥٦", "12345²", "１２３４５６"])
def test_decode_rejects_non_ascii_digits(code: str) -> None:
    with pytest.raises(BadInputError):
        decode(f"s1|9999|doc|{code}")
