"""Block Snake — core game engine."""

from block_snake.clock import ClockState, GameClock
from block_snake.collision import Collision, classify
from block_snake.config import GameConfig
from block_snake.controls import on_key
from block_snake.engine import GameEngine, StepResult
from block_snake.food import FoodPlacer
from block_snake.grid import Grid
from block_snake.render import RecordingRenderer, RenderUpdate
from block_snake.session import GameSession
from block_snake.snake import Direction, Snake, step

__all__ = [
    "ClockState",
    "Collision",
    "Direction",
    "FoodPlacer",
    "GameClock",
    "GameConfig",
    "GameEngine",
    "GameSession",
    "Grid",
    "RecordingRenderer",
    "RenderUpdate",
    "Snake",
    "StepResult",
    "classify",
    "on_key",
    "step",
]
