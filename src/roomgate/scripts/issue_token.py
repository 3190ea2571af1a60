# src/roomgate/scripts/issue_token.py
"""Mint a bearer token for a staff member or guest.

The production identity provider issues these tokens; this script exists for
local development and smoke tests against a running instance.
"""
from __future__ import annotations

import argparse
import sys

from roomgate.core.security import create_access_token
from roomgate.db.session import SessionLocal
from roomgate.models import Guest, Staff


def issue_token(subject_id: str, role: str, expires_minutes: int | None = None) -> str:
    """Return a token for ``subject_id`` after checking the record exists.

    Raises:
        LookupError: If no staff member or guest with that ID exists.
    """
    model = Staff if role == "staff" else Guest
    db = SessionLocal()
    try:
        if db.get(model, subject_id) is None:
            raise LookupError(f"No {role} with id {subject_id!r}")
    finally:
        db.close()
    return create_access_token(subject_id, role, expires_minutes=expires_minutes)  # type: ignore[arg-type]


def main() -> None:
    parser = argparse.ArgumentParser(description="Issue a bearer token for a staff member or guest")
    parser.add_argument("subject_id", help="Staff or guest identifier")
    parser.add_argument("--role", choices=("staff", "guest"), default="guest")
    parser.add_argument(
        "--expires-minutes",
        type=int,
        default=None,
        help="Token lifetime (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    args = parser.parse_args()

    try:
        token = issue_token(args.subject_id, args.role, args.expires_minutes)
    except LookupError as exc:
        print(f"[issue_token] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    print(token)


if __name__ == "__main__":
    main()
