"""Classification of a candidate head position."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from block_snake.grid import Coordinate, Grid
    from block_snake.snake import Snake


class Collision(enum.Enum):
    """Outcome of moving the head into a cell."""

    SAFE = "safe"
    WALL = "wall"
    SELF = "self"

    @property
    def message(self) -> str:
        """Human-readable game-over cause (empty for ``SAFE``)."""
        return _MESSAGES[self]


_MESSAGES: dict[Collision, str] = {
    Collision.SAFE: "",
    Collision.WALL: "Wall Collision!",
    Collision.SELF: "Self-Collision!",
}


def classify(grid: Grid, snake: Snake, candidate: Coordinate) -> Collision:
    """Classify *candidate* against the walls, then the current body.

    The body check uses the full chain before the tail is dropped, so moving
    into the cell the tail currently occupies counts as a self-collision.
    """
    if not grid.in_bounds(candidate):
        return Collision.WALL
    if snake.occupies(candidate):
        return Collision.SELF
    return Collision.SAFE
