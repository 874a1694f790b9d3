"""Command line entry point that starts a game in the terminal."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from dodgefield.enemy import Enemy
from dodgefield.game import Game


def build_game() -> Game:
    """The game as played from the command line: nine enemies of rising speed."""
    return (
        Game.builder()
        .n_random_walls(30)
        .height(40)
        .player_starting_health(10)
        .player_starting_speed(2.0)
        .enemies([Enemy.with_speed(i * 0.1) for i in range(1, 10)])
        .update_interval(0.28)
        .build()
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dodgefield",
        description="Steer with the arrow keys, collect hearts and dodge enemies. "
        "Quit with q or Escape.",
    )
    parser.parse_args(argv)
    build_game().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())