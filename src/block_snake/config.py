"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from block_snake.grid import Coordinate, Grid
from block_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board, clock and starting-position settings.

    The defaults reproduce the classic 300px board of 50px blocks (6×6)
    ticking every 200 ms. ``initial_head`` of ``None`` means the grid centre.
    """

    rows: int = 6
    cols: int = 6
    tick_period_ms: int = 200
    initial_head: Coordinate | None = None
    initial_direction: str | Direction = "right"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("rows and cols must be at least 1.")
        if self.tick_period_ms < 1:
            raise ValueError("tick_period_ms must be at least 1.")
        if self.initial_head is not None:
            head = tuple(self.initial_head)
            if len(head) != 2:
                raise ValueError("initial_head must be a (row, col) pair.")
            object.__setattr__(self, "initial_head", (int(head[0]), int(head[1])))
            if not self.grid().in_bounds(self.initial_head):
                raise ValueError(
                    f"initial_head {self.initial_head} is outside the "
                    f"{self.rows}×{self.cols} grid.",
                )
        direction = Direction.from_name(self.initial_direction)
        object.__setattr__(self, "initial_direction", direction.name.lower())

    def grid(self) -> Grid:
        return Grid(rows=self.rows, cols=self.cols)

    @property
    def head(self) -> Coordinate:
        """Starting head cell, resolving the centre default."""
        if self.initial_head is not None:
            return self.initial_head
        return self.grid().center()

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.initial_direction)

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        if d["initial_head"] is not None:
            d["initial_head"] = list(d["initial_head"])
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if raw.get("initial_head") is not None:
            raw["initial_head"] = tuple(raw["initial_head"])
        return cls(**raw)
