"""Fixed-period game clock driving the engine one step at a time."""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import TYPE_CHECKING

from block_snake.collision import Collision

if TYPE_CHECKING:
    from block_snake.engine import GameEngine
    from block_snake.render import Renderer

logger = logging.getLogger(__name__)


class ClockState(str, enum.Enum):
    """Lifecycle states for a game clock."""

    IDLE = "idle"
    RUNNING = "running"
    HALTED = "halted"


class GameClock:
    """Runs :meth:`GameEngine.step` once per tick period.

    Only an ``IDLE`` clock can be started; ``HALTED`` is terminal. With
    ``scheduled=False`` no background task is created and the owner calls
    :meth:`on_tick` itself.
    """

    def __init__(
        self,
        engine: GameEngine,
        renderer: Renderer,
        tick_period_ms: int = 200,
        lock: asyncio.Lock | None = None,
        scheduled: bool = True,
    ) -> None:
        if tick_period_ms < 1:
            raise ValueError("tick_period_ms must be at least 1.")
        self.engine = engine
        self.renderer = renderer
        self.tick_period_ms = tick_period_ms
        self.lock = lock if lock is not None else asyncio.Lock()
        self.scheduled = scheduled
        self.state = ClockState.IDLE
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self.state == ClockState.RUNNING

    def start(self) -> bool:
        """Move from ``IDLE`` to ``RUNNING``. Returns False if not idle."""
        if self.state != ClockState.IDLE:
            return False
        self.state = ClockState.RUNNING
        if self.scheduled:
            self._task = asyncio.create_task(self._tick_loop())
        logger.info("Game started (tick period %d ms).", self.tick_period_ms)
        return True

    async def on_tick(self) -> Collision | None:
        """Perform one full simulation step and notify the renderer.

        Returns the step's classification, or ``None`` if the clock is not
        running.
        """
        if self.state != ClockState.RUNNING:
            return None
        result = self.engine.step()
        if result.halted:
            self.state = ClockState.HALTED
            await self.renderer.game_over(result.collision.message)
        else:
            await self.renderer.render(result.update)
        return result.collision

    async def _tick_loop(self) -> None:
        interval = self.tick_period_ms / 1000.0
        try:
            while self.state == ClockState.RUNNING:
                await asyncio.sleep(interval)
                async with self.lock:
                    await self.on_tick()
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled at tick %d.", self.engine.tick)
        except Exception:
            logger.exception("Tick loop error at tick %d.", self.engine.tick)
            self.state = ClockState.HALTED

    async def stop(self) -> None:
        """Cancel the background tick task, if any."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
