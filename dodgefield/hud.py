"""Heads-up display showing health and score."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dodgefield.point import Point2d, Positioned


@dataclass
class Hud(Positioned):
    """Status line drawn below the playing field."""

    position: Point2d = field(default_factory=Point2d.zero)
    score: int = 0
    health: int = 0

    def text(self) -> str:
        return f"Health: {self.health}, Score: {self.score}"

    def set(self, score: int, health: int) -> None:
        self.score = score
        self.health = health

    def update(self, game: Any) -> None:
        """Copy the current health and score from the game's player state."""
        state = game.player_state
        self.set(state.score, state.health)

    def __str__(self) -> str:
        return self.text()

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "health": self.health,
            "position": self.position.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Hud":
        return cls(
            position=Point2d.from_dict(data["position"]),
            score=data["score"],
            health=data["health"],
        )