"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator

from block_snake.grid import Coordinate


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def is_opposite(self, other: Direction) -> bool:
        """True when *other* would be an instant 180° reversal of this one."""
        return _OPPOSITES[self] is other

    @classmethod
    def from_name(cls, name: str | Direction) -> Direction:
        """Parse a lowercase name such as ``"right"``."""
        if isinstance(name, Direction):
            return name
        if not isinstance(name, str):
            raise ValueError(f"Unknown direction: {name!r}.")
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def step(head: Coordinate, direction: Direction) -> Coordinate:
    """Return the cell one move from *head* in *direction*."""
    dr, dc = direction.value
    r, c = head
    return r + dr, c + dc


class Snake:
    """A snake represented as an ordered deque of (row, col) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, segments: Iterable[Coordinate]) -> None:
        self.body: deque[Coordinate] = deque(
            (int(r), int(c)) for r, c in segments
        )
        if not self.body:
            raise ValueError("Snake length must be at least 1.")
        if len(set(self.body)) != len(self.body):
            raise ValueError("Snake segments must be distinct.")

    @property
    def head(self) -> Coordinate:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Coordinate:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.body)

    def __contains__(self, coord: object) -> bool:
        return coord in self.body

    def advance(self, new_head: Coordinate, grew: bool = False) -> Coordinate | None:
        """Prepend *new_head*, dropping the tail unless the snake grew.

        Returns the vacated tail cell, or ``None`` if the snake grew. The
        caller must have checked that *new_head* is not already occupied.
        """
        self.body.appendleft(new_head)
        if grew:
            return None
        return self.body.pop()

    def occupies(self, coord: Coordinate) -> bool:
        """Check whether the snake occupies a given cell."""
        return coord in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
