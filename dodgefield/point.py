"""Two-dimensional points and the mixin for objects that have a position."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Tuple, Union

Number = Union[int, float]
Bounds = Union[range, Tuple[float, float]]

_INT_MIN = -32768
_INT_MAX = 32767


def round_half_away(value: Number) -> Number:
    """Round to the nearest whole number, with halves going away from zero.

    Integers are returned unchanged; floats stay floats.
    """
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        return value
    whole = float(math.trunc(value))
    if abs(value - whole) >= 0.5:
        whole += math.copysign(1.0, value)
    return whole


def _to_int(value: Number) -> int:
    if isinstance(value, int):
        return value
    if math.isnan(value):
        return 0
    if value >= _INT_MAX:
        return _INT_MAX
    if value <= _INT_MIN:
        return _INT_MIN
    return math.trunc(value)


@dataclass(frozen=True, eq=False)
class Point2d:
    """An immutable point or vector on the playing field.

    Two points are equal when their coordinates round to the same values.
    """

    x: Number = 0
    y: Number = 0

    @classmethod
    def zero(cls) -> "Point2d":
        return cls(0, 0)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def distance(self, other: "Point2d") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def rotate(self, angle: float) -> "Point2d":
        """Return this vector rotated by ``angle`` radians (screen y points down)."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Point2d(
            self.x * cos + self.y * sin,
            self.x * -sin + self.y * cos,
        )

    def normalize(self) -> "Point2d":
        """Return the unit vector in this direction, or a zero vector."""
        length = self.distance(Point2d.zero())
        if length == 0:
            return Point2d(0.0, 0.0)
        return Point2d(self.x / length, self.y / length)

    def round(self) -> "Point2d":
        return Point2d(round_half_away(self.x), round_half_away(self.y))

    def to_int(self) -> "Point2d":
        """Truncate both coordinates to integers, saturating at the 16-bit range."""
        return Point2d(_to_int(self.x), _to_int(self.y))

    def __add__(self, other: object) -> "Point2d":
        if not isinstance(other, Point2d):
            return NotImplemented
        return Point2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Point2d":
        if not isinstance(other, Point2d):
            return NotImplemented
        return Point2d(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: object) -> "Point2d":
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Point2d(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2d):
            return NotImplemented
        return round_half_away(self.x) == round_half_away(other.x) and round_half_away(
            self.y
        ) == round_half_away(other.y)

    def __hash__(self) -> int:
        return hash((round_half_away(self.x), round_half_away(self.y)))

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Point2d":
        return cls(data["x"], data["y"])


def _sample(rng: random.Random, bounds: Bounds) -> Number:
    if isinstance(bounds, range):
        if len(bounds) == 0:
            raise ValueError(f"cannot sample from empty range {bounds!r}")
        return rng.choice(bounds)
    low, high = bounds
    if not low < high:
        raise ValueError(f"cannot sample from empty range [{low}, {high})")
    value = low + (high - low) * rng.random()
    return value if value < high else low


class Positioned:
    """Mixin for objects carrying a ``position`` point."""

    position: Point2d

    def set_rand_position(
        self, rng: random.Random, x_range: Bounds, y_range: Bounds
    ) -> None:
        """Move to a random position inside the half-open ranges.

        A ``range`` yields integer coordinates; a ``(low, high)`` pair yields floats.
        """
        self.position = Point2d(_sample(rng, x_range), _sample(rng, y_range))