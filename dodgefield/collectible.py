"""Hearts the player collects for points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dodgefield.point import Point2d, Positioned


@dataclass
class Collectible(Positioned):
    """A collectible item sitting on an integer grid position."""

    position: Point2d = field(default_factory=Point2d.zero)

    def randomize_position(self, game: Any) -> None:
        """Move to a random free cell that is not a wall."""
        game.randomize_position_int(self)
        while game.do_walls_collide(self.position):
            game.randomize_position_int(self)

    def update(self, game: Any) -> None:
        """Score a point and relocate when the player reaches this cell."""
        if game.player_position().round().to_int() == self.position:
            game.player_state.increase_score()
            self.randomize_position(game)

    def __str__(self) -> str:
        return "❤"

    def to_dict(self) -> dict:
        return {"position": self.position.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "Collectible":
        return cls(Point2d.from_dict(data["position"]))