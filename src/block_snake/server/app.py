"""FastAPI application factory."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from block_snake.config import GameConfig
from block_snake.server.routes import router
from block_snake.server.websocket import ws_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    yield
    sessions = list(app.state.sessions)
    if sessions:
        await asyncio.gather(
            *(s.close() for s in sessions), return_exceptions=True,
        )
    app.state.sessions.clear()
    logger.info("Closed %d open game sessions.", len(sessions))


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(title="Block Snake", version="0.1.0", lifespan=_lifespan)
    app.state.config = config if config is not None else GameConfig()
    app.state.sessions = set()
    app.include_router(router)
    app.include_router(ws_router)
    return app
