"""Health and score of the player."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PlayerState:
    """The player's remaining health and collected score."""

    health: int = 0
    score: int = 0

    def is_alive(self) -> bool:
        return self.health > 0

    def decrease_health(self) -> None:
        """Lose one point of health, never dropping below zero."""
        self.health = max(self.health - 1, 0)

    def increase_score(self) -> None:
        self.score += 1

    def to_dict(self) -> dict:
        return {"health": self.health, "score": self.score}

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerState":
        return cls(health=data["health"], score=data["score"])