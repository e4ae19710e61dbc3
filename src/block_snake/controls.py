"""Keyboard mapping from browser key names to directions."""

from __future__ import annotations

from block_snake.snake import Direction

KEY_MAP: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}


def on_key(key: str, committed: Direction) -> Direction | None:
    """Map a ``KeyboardEvent.key`` value to a new direction.

    Returns ``None`` for keys that are not arrows and for presses that would
    reverse *committed*.
    """
    direction = KEY_MAP.get(key)
    if direction is None or direction.is_opposite(committed):
        return None
    return direction
