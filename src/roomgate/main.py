# src/roomgate/main.py
"""Main entry point for the Roomgate application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roomgate.api.v1 import door_router, reservations_router, rooms_router, system_router
from roomgate.core.logging import configure_logging
from roomgate.core.settings import settings
from roomgate.services.errors import DoorAccessError

configure_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Roomgate API",
    description="Door access codes, room permissions and door actuation",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Include API routers
app.include_router(door_router, prefix="/api/v1")
app.include_router(reservations_router, prefix="/api/v1")
app.include_router(rooms_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


@app.exception_handler(DoorAccessError)
async def door_access_error_handler(request: Request, exc: DoorAccessError) -> JSONResponse:
    """Render domain errors as client errors with a ``detail`` message."""
    logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/ping")
async def ping() -> dict[str, str]:
    return {"message": "pong"}
