"""WebSocket handler: one game session per browser connection."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError
from starlette.websockets import WebSocketState

from block_snake.render import RenderUpdate
from block_snake.server.models import KeyMessage
from block_snake.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _dumps(payload: dict) -> str:
    return json.dumps(payload, separators=(",", ":"))


class WebSocketRenderer:
    """Forwards render updates and the game-over cause to the browser."""

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket

    async def render(self, update: RenderUpdate) -> None:
        await self._send({"type": "update", **update.to_dict()})

    async def game_over(self, cause: str) -> None:
        await self._send({"type": "game_over", "cause": cause})

    async def _send(self, payload: dict) -> None:
        if self.websocket.client_state == WebSocketState.CONNECTED:
            await self.websocket.send_text(_dumps(payload))


@ws_router.websocket("/play")
async def play(websocket: WebSocket) -> None:
    """Send key presses, receive cell updates each tick."""
    await websocket.accept()
    sessions: set[GameSession] = websocket.app.state.sessions
    session = GameSession(
        websocket.app.state.config, WebSocketRenderer(websocket),
    )
    sessions.add(session)
    logger.info("Player connected (%d active sessions).", len(sessions))

    await websocket.send_text(_dumps({"type": "init", **session.snapshot()}))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = KeyMessage.model_validate(json.loads(raw))
            except (json.JSONDecodeError, ValidationError):
                continue
            await session.handle_key(msg.key)
    except WebSocketDisconnect:
        logger.info("Player disconnected at tick %d.", session.engine.tick)
    finally:
        sessions.discard(session)
        await session.close()
