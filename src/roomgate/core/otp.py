"""One-time door code derivation (RFC 4226 HOTP and its time-based variant).

Codes are a pure function of a shared secret and a counter. Time-based codes
use the current Unix second as the counter, shifted by a window offset, so a
code is never stored: issuing and verifying both recompute it.
"""
from __future__ import annotations

import hashlib
import hmac
import math
import time

CODE_DIGITS = 6
CODE_MODULUS = 10**CODE_DIGITS
COUNTER_SIZE_BYTES = 8
SHA1_DIGEST_BYTES = 20
_COUNTER_MASK = (1 << (COUNTER_SIZE_BYTES * 8)) - 1


def dynamic_truncation(digest: bytes) -> int:
    """Select a 31-bit integer from an HMAC digest.

    The low nibble of the last byte gives the offset of four bytes read as a
    big-endian integer with the most significant bit cleared.
    """
    offset = digest[-1] & 0x0F
    return (
        ((digest[offset] & 0x7F) << 24)
        | ((digest[offset + 1] & 0xFF) << 16)
        | ((digest[offset + 2] & 0xFF) << 8)
        | (digest[offset + 3] & 0xFF)
    )


def _secret_bytes(secret: bytes | str) -> bytes:
    return secret.encode("utf-8") if isinstance(secret, str) else secret


def counter_code(secret: bytes | str, counter: int) -> int:
    """Return the 6-digit HOTP value for ``counter`` keyed by ``secret``.

    Args:
        secret: HMAC key. Strings are encoded as UTF-8.
        counter: Moving factor. Packed as an unsigned 64-bit big-endian value;
            negative values wrap modulo 2**64.

    Returns:
        An integer in ``[0, 999999]``. Use ``format_code`` for the padded form.
    """
    counter_bytes = (counter & _COUNTER_MASK).to_bytes(COUNTER_SIZE_BYTES, "big")
    digest = hmac.new(_secret_bytes(secret), counter_bytes, hashlib.sha1).digest()
    return dynamic_truncation(digest) % CODE_MODULUS


def format_code(code: int) -> str:
    """Render a code as a zero-padded 6 character string."""
    return str(code).zfill(CODE_DIGITS)


def current_second(now: float | None = None) -> int:
    """Return ``floor(now)``, defaulting to the current Unix time."""
    return math.floor(time.time() if now is None else now)


def time_counter(window_offset: int = 0, now: float | None = None) -> int:
    """Return the counter of the one-second window ``window_offset`` ticks from now."""
    return current_second(now) + window_offset


def time_code(secret: bytes | str, window_offset: int = 0, now: float | None = None) -> int:
    """Return the time-based code for the window ``window_offset`` seconds ahead.

    An offset of 0 yields a code for the current second only. A positive offset
    yields the single code of that future second.
    """
    return counter_code(secret, time_counter(window_offset, now))


def acceptable_counters(now: float | None, lookbehind: int, lookahead: int) -> range:
    """Return every counter within ``[now - lookbehind, now + lookahead]``."""
    base = current_second(now)
    return range(base - max(lookbehind, 0), base + max(lookahead, 0) + 1)
