# src/roomgate/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import door_router, reservations_router, rooms_router, system_router

__all__ = [
    "door_router",
    "reservations_router",
    "rooms_router",
    "system_router",
]
