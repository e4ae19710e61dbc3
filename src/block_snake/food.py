"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from block_snake.grid import Coordinate, Grid
    from block_snake.snake import Snake

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Picks food cells by rejection sampling over the whole grid.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        max_attempts: int = 1000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def place(self, grid: Grid, snake: Snake) -> Coordinate | None:
        """Return a uniformly random in-bounds cell the snake does not occupy.

        Returns ``None`` when the snake covers every cell.
        """
        if len(snake) >= grid.size:
            logger.warning("No free cells available for food placement.")
            return None

        for _ in range(self.max_attempts):
            cell = (
                int(self.rng.integers(grid.rows)),
                int(self.rng.integers(grid.cols)),
            )
            if not snake.occupies(cell):
                return cell

        # Crowded board: sample among the free cells directly.
        free = [
            (r, c)
            for r in range(grid.rows)
            for c in range(grid.cols)
            if not snake.occupies((r, c))
        ]
        logger.debug(
            "Rejection sampling gave up after %d attempts; %d free cells.",
            self.max_attempts, len(free),
        )
        return free[int(self.rng.integers(len(free)))]
