"""Step-based game engine composing grid, snake, food and collision logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from block_snake.collision import Collision, classify
from block_snake.config import GameConfig
from block_snake.food import FoodPlacer
from block_snake.grid import Coordinate, Grid
from block_snake.render import RenderUpdate
from block_snake.snake import Direction, Snake
from block_snake.snake import step as next_head

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Outcome of one call to :meth:`GameEngine.step`."""

    collision: Collision
    candidate: Coordinate | None = None
    update: RenderUpdate | None = None

    @property
    def halted(self) -> bool:
        return self.collision is not Collision.SAFE


class GameEngine:
    """Single-snake, step-based game engine.

    The engine owns the grid, snake, food and direction state. Each call to
    :meth:`step` advances the game by one tick. A collision ends the game for
    good: later calls return the same collision without touching any state.
    """

    def __init__(
        self,
        rows: int = 6,
        cols: int = 6,
        initial_head: Coordinate | None = None,
        initial_direction: Direction = Direction.RIGHT,
        seed: int | None = None,
    ) -> None:
        self.grid = Grid(rows=rows, cols=cols)
        head = initial_head if initial_head is not None else self.grid.center()
        if not self.grid.in_bounds(head):
            raise ValueError(f"Initial head {head} is outside {self.grid!r}.")

        self.rng = np.random.default_rng(seed)
        self.food_placer = FoodPlacer(rng=self.rng)
        self.snake = Snake([head])
        self.food: Coordinate | None = self.food_placer.place(self.grid, self.snake)

        self.direction = initial_direction
        self.tick = 0
        self.game_over = False
        self.collision: Collision | None = None
        self._pending_direction: Direction | None = None

    @classmethod
    def from_config(cls, config: GameConfig) -> GameEngine:
        return cls(
            rows=config.rows,
            cols=config.cols,
            initial_head=config.head,
            initial_direction=config.direction,
            seed=config.seed,
        )

    @property
    def pending_direction(self) -> Direction | None:
        return self._pending_direction

    def set_direction(self, direction: Direction) -> bool:
        """Queue *direction* for the next step unless it reverses the
        committed one. The latest accepted call before a step wins.
        """
        if direction.is_opposite(self.direction):
            return False
        self._pending_direction = direction
        return True

    def step(self) -> StepResult:
        """Advance the game by one tick."""
        if self.game_over:
            return StepResult(collision=self.collision)

        if self._pending_direction is not None:
            self.direction = self._pending_direction
            self._pending_direction = None

        candidate = next_head(self.snake.head, self.direction)
        collision = classify(self.grid, self.snake, candidate)
        if collision is not Collision.SAFE:
            self._halt(collision)
            return StepResult(collision=collision, candidate=candidate)

        ate = candidate == self.food
        vacated = self.snake.advance(candidate, grew=ate)
        eaten = None
        if ate:
            eaten = self.food
            self.food = self.food_placer.place(self.grid, self.snake)
            logger.debug("Food eaten at %s; snake length %d.", eaten, len(self.snake))

        self.tick += 1
        update = RenderUpdate(
            tick=self.tick,
            filled=list(self.snake),
            vacated=vacated,
            food=self.food,
            eaten=eaten,
        )
        return StepResult(collision=collision, candidate=candidate, update=update)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "game_over": self.game_over,
            "cause": self.collision.message if self.collision else None,
            "direction": self.direction.name.lower(),
            "grid": self.grid.to_dict(),
            "board": self.grid.board(self.snake, self.food).tolist(),
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food is not None else None,
        }

    def _halt(self, collision: Collision) -> None:
        """Mark the game as over with the given cause."""
        self.game_over = True
        self.collision = collision
        logger.info(
            "Game over at tick %d (%s) with length %d.",
            self.tick, collision.message, len(self.snake),
        )
