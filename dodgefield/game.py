"""The playing field, its game loop and the builder that sets it up."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

from dodgefield.collectible import Collectible
from dodgefield.controls import handle_key
from dodgefield.enemy import Enemy
from dodgefield.hud import Hud
from dodgefield.player import Player, PlayerBuilder
from dodgefield.point import Point2d, Positioned
from dodgefield.state import PlayerState
from dodgefield.ui import UI, Sprite
from dodgefield.wall import Wall

_NANOS = 1_000_000_000
_HUD_OFFSET = 10
_HUD_GAP = 2


@dataclass
class Game:
    """All units on the field plus the terminal they are shown on.

    Two games are equal when their size, units and timing are equal; state,
    HUD, random source and terminal are not compared.
    """

    height: int
    width: int
    n_random_walls: int
    update_interval: float
    enemies: List[Enemy]
    walls: List[Wall]
    collectible: Collectible
    player: Player
    player_state: PlayerState = field(compare=False)
    hud: Hud = field(compare=False)
    rng: random.Random = field(compare=False, repr=False)
    ui: UI = field(compare=False, repr=False)

    @classmethod
    def builder(cls) -> "GameBuilder":
        return GameBuilder()

    def player_position(self) -> Point2d:
        return self.player.position

    def init(self) -> None:
        """Build the border and random walls and scatter enemies and the collectible."""
        for x in range(self.width):
            self.walls.append(Wall(Point2d(x, 0)))
            self.walls.append(Wall(Point2d(x, self.height - 1)))
        for y in range(self.height):
            self.walls.append(Wall(Point2d(0, y)))
            self.walls.append(Wall(Point2d(self.width - 1, y)))

        for _ in range(self.n_random_walls):
            wall = Wall()
            self.randomize_position_int(wall)
            self.walls.append(wall)

        for enemy in self.enemies:
            self.randomize_position_float(enemy)

        self.collectible.randomize_position(self)

    def do_walls_collide(self, position: Point2d) -> bool:
        return any(wall.position == position for wall in self.walls)

    def randomize_position_int(self, item: Positioned) -> None:
        """Place ``item`` on a random interior cell."""
        item.set_rand_position(
            self.rng, range(1, self.width - 1), range(1, self.height - 1)
        )

    def randomize_position_float(self, item: Positioned) -> None:
        """Place ``item`` at a random point inside the border."""
        item.set_rand_position(
            self.rng,
            (1.0, float(self.width - 1)),
            (1.0, float(self.height - 1)),
        )

    def update(self) -> None:
        """Advance every unit by one update interval."""
        self.player.update(self)
        self.collectible.update(self)
        for enemy in self.enemies:
            enemy.update(self)
        self.hud.update(self)

    def frame(self) -> List[Sprite]:
        """Everything to show on screen, in drawing order."""
        sprites = [
            Sprite(wall.position.x, wall.position.y, str(wall_glyph), "bright_magenta")
            for wall, wall_glyph in ((w, "▓") for w in self.walls)
        ]
        sprites.append(
            Sprite(self.player.position.x, self.player.position.y, str(self.player), "blue")
        )
        sprites.extend(
            Sprite(enemy.position.x, enemy.position.y, str(enemy), "green")
            for enemy in self.enemies
        )
        sprites.append(
            Sprite(
                self.collectible.position.x,
                self.collectible.position.y,
                str(self.collectible),
                "bright_red",
            )
        )
        sprites.append(Sprite(self.hud.position.x, self.hud.position.y, self.hud.text()))
        return sprites

    def draw(self) -> None:
        self.ui.clear()
        self.ui.draw(self.frame())

    def run(self) -> int:
        """Play until the player dies or quits; return the final score."""
        self.init()
        quit_requested = False
        with self.ui:
            while self.player_state.is_alive() and not quit_requested:
                deadline = time.monotonic() + self.update_interval
                while (remaining := deadline - time.monotonic()) > 0:
                    key = self.ui.poll_key(remaining)
                    if key is not None and handle_key(key, self.player):
                        quit_requested = True
                self.update()
                self.draw()
        score = self.player_state.score
        print("\nGame over!", end="")
        print(f"  Score: {score}")
        return score

    def to_dict(self) -> dict:
        secs = int(self.update_interval)
        nanos = round((self.update_interval - secs) * _NANOS)
        return {
            "height": self.height,
            "width": self.width,
            "enemies": [enemy.to_dict() for enemy in self.enemies],
            "n_random_walls": self.n_random_walls,
            "walls": [wall.to_dict() for wall in self.walls],
            "collectible": self.collectible.to_dict(),
            "player_movement": self.player.to_dict(),
            "player_state": self.player_state.to_dict(),
            "update_interval_millis": {"secs": secs, "nanos": nanos},
            "hud": self.hud.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Game":
        interval = data["update_interval_millis"]
        return cls(
            height=data["height"],
            width=data["width"],
            n_random_walls=data["n_random_walls"],
            update_interval=interval["secs"] + interval["nanos"] / _NANOS,
            enemies=[Enemy.from_dict(item) for item in data["enemies"]],
            walls=[Wall.from_dict(item) for item in data["walls"]],
            collectible=Collectible.from_dict(data["collectible"]),
            player=Player.from_dict(data["player_movement"]),
            player_state=PlayerState.from_dict(data["player_state"]),
            hud=Hud.from_dict(data["hud"]),
            rng=random.Random(),
            ui=UI(),
        )


class GameBuilder:
    """Fluent construction of a :class:`Game` with the default field and enemies."""

    def __init__(self) -> None:
        self._height = 48
        self._width = 80
        self._player_builder = PlayerBuilder()
        self._player_health = 10
        self._n_random_walls = 0
        self._update_interval = 0.05
        self._enemies: List[Enemy] = [
            Enemy.with_speed(0.6),
            Enemy.with_speed(0.5),
            Enemy.with_speed(0.4),
        ]
        self._walls: List[Wall] = []
        self._rng: random.Random = random.Random()
        self._ui: Optional[UI] = None

    def width(self, width: int) -> "GameBuilder":
        self._width = width
        return self

    def height(self, height: int) -> "GameBuilder":
        self._height = height
        return self

    def player_starting_health(self, health: int) -> "GameBuilder":
        self._player_health = health
        return self

    def player_starting_speed(self, speed: float) -> "GameBuilder":
        self._player_builder.speed(speed)
        return self

    def n_random_walls(self, count: int) -> "GameBuilder":
        self._n_random_walls = count
        return self

    def update_interval(self, seconds: float) -> "GameBuilder":
        if seconds < 0:
            raise ValueError(f"update interval must not be negative, got {seconds}")
        self._update_interval = seconds
        return self

    def enemies(self, enemies: List[Enemy]) -> "GameBuilder":
        self._enemies = list(enemies)
        return self

    def walls(self, walls: List[Wall]) -> "GameBuilder":
        self._walls = list(walls)
        return self

    def rng(self, rng: random.Random) -> "GameBuilder":
        self._rng = rng
        return self

    def ui(self, ui: UI) -> "GameBuilder":
        self._ui = ui
        return self

    def build(self) -> Game:
        hud_x = self._width // 2 - _HUD_OFFSET
        if hud_x < 0:
            raise ValueError(f"field width {self._width} is too small for the HUD")
        return Game(
            height=self._height,
            width=self._width,
            n_random_walls=self._n_random_walls,
            update_interval=self._update_interval,
            enemies=self._enemies,
            walls=self._walls,
            collectible=Collectible(),
            player=self._player_builder.build(),
            player_state=PlayerState(self._player_health, 0),
            hud=Hud(Point2d(hud_x, self._height + _HUD_GAP)),
            rng=self._rng,
            ui=self._ui if self._ui is not None else UI(),
        )