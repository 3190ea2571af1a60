# src/roomgate/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .door import router as door_router
from .reservations import router as reservations_router
from .rooms import router as rooms_router
from .system import router as system_router

__all__ = [
    "door_router",
    "reservations_router",
    "rooms_router",
    "system_router",
]
