"""Renderer collaborator interface and render payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from block_snake.grid import Coordinate


@dataclass(frozen=True)
class RenderUpdate:
    """Cell changes produced by one successful step.

    ``filled`` is the whole body, head first. ``vacated`` is the dropped tail
    cell (``None`` when the snake grew). ``eaten`` is the previous food cell
    whose food mark must be cleared.
    """

    tick: int
    filled: list[Coordinate]
    vacated: Coordinate | None = None
    food: Coordinate | None = None
    eaten: Coordinate | None = None

    def to_dict(self) -> dict:
        return {
            "tick": self.tick,
            "filled": [list(c) for c in self.filled],
            "vacated": list(self.vacated) if self.vacated is not None else None,
            "food": list(self.food) if self.food is not None else None,
            "eaten": list(self.eaten) if self.eaten is not None else None,
        }


class Renderer(Protocol):
    """Presentation surface that can mark and unmark cells by coordinate."""

    async def render(self, update: RenderUpdate) -> None: ...

    async def game_over(self, cause: str) -> None: ...


@dataclass
class RecordingRenderer:
    """In-memory renderer that keeps everything it was sent."""

    updates: list[RenderUpdate] = field(default_factory=list)
    causes: list[str] = field(default_factory=list)

    async def render(self, update: RenderUpdate) -> None:
        self.updates.append(update)

    async def game_over(self, cause: str) -> None:
        self.causes.append(cause)

    @property
    def last(self) -> RenderUpdate | None:
        return self.updates[-1] if self.updates else None
