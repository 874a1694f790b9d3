"""Enemies that chase the player."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dodgefield.point import Point2d, Positioned


@dataclass
class Enemy(Positioned):
    """An enemy drifting towards the player at a fixed speed."""

    position: Point2d = field(default_factory=lambda: Point2d(0.0, 0.0))
    speed: float = 0.0

    @classmethod
    def with_speed(cls, speed: float) -> "Enemy":
        return cls(position=Point2d(0.0, 0.0), speed=speed)

    def move_towards_player(self, player_position: Point2d, elapsed: float) -> None:
        """Step towards the player's cell for ``elapsed`` seconds."""
        direction = player_position.round() - self.position.round()
        self.position = self.position + direction.normalize() * (self.speed * elapsed)

    def update(self, game: Any) -> None:
        """Chase the player and cost one health on contact."""
        self.move_towards_player(game.player_position(), game.update_interval)
        if self.position.round() == game.player_position().round():
            game.player_state.decrease_health()

    def __str__(self) -> str:
        return "⁂"

    def to_dict(self) -> dict:
        return {"position": self.position.to_dict(), "speed": self.speed}

    @classmethod
    def from_dict(cls, data: dict) -> "Enemy":
        return cls(position=Point2d.from_dict(data["position"]), speed=data["speed"])