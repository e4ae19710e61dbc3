"""HTTP route handlers: the game page and read-only configuration."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from block_snake.server.models import ConfigResponse, HealthResponse

STATIC_DIR = Path(__file__).parent / "static"

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the board page."""
    return FileResponse(STATIC_DIR / "index.html")


@router.get("/config")
async def get_config(request: Request) -> ConfigResponse:
    """Return the configuration new games are created with."""
    return ConfigResponse.from_config(request.app.state.config)


@router.get("/health")
async def health() -> HealthResponse:
    return HealthResponse()
