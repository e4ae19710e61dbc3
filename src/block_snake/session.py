"""A single game: engine, clock and renderer wired together."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from block_snake.clock import GameClock
from block_snake.config import GameConfig
from block_snake.controls import on_key
from block_snake.engine import GameEngine

if TYPE_CHECKING:
    from block_snake.render import Renderer
    from block_snake.snake import Direction

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the simulation state and serializes ticks with key events."""

    def __init__(
        self,
        config: GameConfig,
        renderer: Renderer,
        scheduled: bool = True,
    ) -> None:
        self.config = config
        self.engine = GameEngine.from_config(config)
        self.lock = asyncio.Lock()
        self.clock = GameClock(
            self.engine,
            renderer,
            tick_period_ms=config.tick_period_ms,
            lock=self.lock,
            scheduled=scheduled,
        )

    async def handle_key(self, key: str) -> Direction | None:
        """Apply a key press and start the clock.

        Every key event attempts to start the game, including keys that do
        not change direction; starting is a no-op unless the clock is idle.
        """
        async with self.lock:
            direction = on_key(key, self.engine.direction)
            if direction is not None:
                self.engine.set_direction(direction)
            self.clock.start()
        logger.debug("Key %r -> %s.", key, direction)
        return direction

    def snapshot(self) -> dict:
        """Initial render payload for a freshly connected surface."""
        state = self.engine.get_state()
        return {
            **state["grid"],
            "tick_period_ms": self.clock.tick_period_ms,
            "snake": state["snake"]["body"],
            "food": state["food"],
            "board": state["board"],
            "state": self.clock.state.value,
        }

    async def close(self) -> None:
        await self.clock.stop()
