"""The player-controlled arrow and its builder."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from dodgefield.point import Point2d, Positioned

_TURN_ANGLE = math.pi / 4.0
_SPEED_STEP = 0.1
_MAX_SPEED = 1.0
_MIN_SPEED = 0.0

_STILL_ICON = "•"
_ICONS = {
    (0, -1): "↑",
    (1, -1): "↗",
    (1, 0): "→",
    (1, 1): "↘",
    (0, 1): "↓",
    (-1, 1): "↙",
    (-1, 0): "←",
    (-1, -1): "↖",
}


@dataclass
class Player(Positioned):
    """The player: a position, a heading and a speed in cells per second."""

    position: Point2d = field(default_factory=lambda: Point2d(0.0, 0.0))
    direction: Point2d = field(default_factory=lambda: Point2d(0.0, 0.0))
    speed: float = 0.0

    @classmethod
    def builder(cls) -> "PlayerBuilder":
        return PlayerBuilder()

    def turn_left(self) -> None:
        self.direction = self.direction.rotate(_TURN_ANGLE)

    def turn_right(self) -> None:
        self.direction = self.direction.rotate(-_TURN_ANGLE)

    def accelerate(self) -> None:
        self.speed = min(self.speed + _SPEED_STEP, _MAX_SPEED)

    def decelerate(self) -> None:
        self.speed = max(self.speed - _SPEED_STEP, _MIN_SPEED)

    def icon(self) -> str:
        """The arrow pointing in the current heading, or a dot when standing still."""
        if self.speed == 0.0:
            return _STILL_ICON
        heading = self.direction.round().to_int()
        return _ICONS.get((heading.x, heading.y), _STILL_ICON)

    def __str__(self) -> str:
        return self.icon()

    def forward_position(self, elapsed: float) -> Point2d:
        """Where the player would be after ``elapsed`` seconds."""
        return self.position + self.direction * (self.speed * elapsed)

    def update(self, game: Any) -> None:
        """Move forward unless the next cell is a wall."""
        next_position = self.forward_position(game.update_interval)
        if not game.do_walls_collide(next_position.round().to_int()):
            self.position = next_position

    def to_dict(self) -> dict:
        return {
            "position": self.position.to_dict(),
            "direction": self.direction.to_dict(),
            "speed": self.speed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        return cls(
            position=Point2d.from_dict(data["position"]),
            direction=Point2d.from_dict(data["direction"]),
            speed=data["speed"],
        )


class PlayerBuilder:
    """Fluent construction of a :class:`Player` with sensible starting values."""

    def __init__(self) -> None:
        self._position = Point2d(1.0, 1.0)
        self._direction = Point2d(1.0, 0.0)
        self._speed = 0.0

    def position(self, x: float, y: float) -> "PlayerBuilder":
        self._position = Point2d(x, y)
        return self

    def direction(self, x: float, y: float) -> "PlayerBuilder":
        self._direction = Point2d(x, y)
        return self

    def speed(self, speed: float) -> "PlayerBuilder":
        self._speed = speed
        return self

    def build(self) -> Player:
        return Player(
            position=self._position,
            direction=self._direction,
            speed=self._speed,
        )