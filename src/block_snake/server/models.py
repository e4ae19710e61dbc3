"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from block_snake.config import GameConfig


class ConfigResponse(BaseModel):
    """Active board and clock settings for GET /config."""

    rows: int = Field(ge=1)
    cols: int = Field(ge=1)
    tick_period_ms: int = Field(ge=1)
    initial_head: tuple[int, int]
    initial_direction: str

    @classmethod
    def from_config(cls, config: GameConfig) -> ConfigResponse:
        return cls(
            rows=config.rows,
            cols=config.cols,
            tick_period_ms=config.tick_period_ms,
            initial_head=config.head,
            initial_direction=config.initial_direction,
        )


class KeyMessage(BaseModel):
    """Inbound play-socket message carrying a ``KeyboardEvent.key`` value."""

    key: str


class HealthResponse(BaseModel):
    status: str = "ok"
