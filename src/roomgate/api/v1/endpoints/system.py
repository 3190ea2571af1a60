"""System endpoints for Roomgate API."""

from __future__ import annotations

from fastapi import APIRouter

from roomgate.core.settings import settings
from roomgate.services.actuation import GLOBAL_DOOR_TOPIC, DoorCommand

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a sanitized snapshot of public runtime configuration.

    Excludes secrets and connection strings.
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
            "jwt_algorithm": settings.jwt_algorithm,
            "debug": settings.debug,
        },
        "door_codes": {
            "digits": 6,
            "window_seconds": 1,
            "issue_offset": settings.door_code_window_offset,
            "lookbehind": settings.door_code_lookbehind,
            "lookahead": settings.door_code_lookahead,
        },
        "actuation": {
            "global_topic": GLOBAL_DOOR_TOPIC,
            "room_topic": f"{GLOBAL_DOOR_TOPIC}/{{room_id}}",
            "commands": [command.value for command in DoorCommand],
        },
    }
