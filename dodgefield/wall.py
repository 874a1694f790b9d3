"""Immovable wall blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from dodgefield.point import Point2d, Positioned


@dataclass
class Wall(Positioned):
    """A single wall block on an integer grid position."""

    position: Point2d = field(default_factory=Point2d.zero)

    def to_dict(self) -> dict:
        return {"position": self.position.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "Wall":
        return cls(Point2d.from_dict(data["position"]))