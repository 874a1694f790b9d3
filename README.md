# dodgefield

A small arcade game for the terminal. You steer an arrow around a field
enclosed by walls, pick up hearts to raise your score, and stay away from
the enemies that drift towards you. Each time an enemy shares your cell
you lose one point of health; the game ends when your health reaches zero
or when you quit.

## Installing

```
pip install .
```

## Playing

```
dodgefield
```

The command takes no options besides `--help`. It starts a 80 by 40 field
with 30 randomly placed walls, 10 points of health and nine enemies of
rising speed.

Controls:

| Key               | Action                                   |
|-------------------|------------------------------------------|
| Left / Right      | turn 45 degrees                          |
| Up                | speed up by 0.1, never above 1.0         |
| Down              | slow down by 0.1, never below 0          |
| `q`, Esc, Ctrl-C  | quit                                     |

When the game ends the terminal is restored and the line
`Game over!  Score: N` is printed.

## Using it as a library

Games are put together with a builder (`dodgefield.game.GameBuilder`):

```python
from dodgefield.game import Game
from dodgefield.enemy import Enemy

game = (
    Game.builder()
    .width(80)
    .height(40)
    .n_random_walls(30)
    .player_starting_health(10)
    .player_starting_speed(2.0)
    .enemies([Enemy.with_speed(i * 0.1) for i in range(1, 10)])
    .update_interval(0.28)
    .build()
)
score = game.run()
```

`Game.run()` plays until the player dies or quits and returns the final
score. `GameBuilder.update_interval` takes seconds and rejects negative
values; `GameBuilder.build` raises `ValueError` when the field is too
narrow to place the status line.

For tests or replays, pass a seeded `random.Random` through
`GameBuilder.rng` and step the game yourself with `Game.init()` and
`Game.update()`; `Game.frame()` returns the sprites that would be drawn,
without touching the terminal. The terminal itself is wrapped by
`dodgefield.ui.UI`, which can also be handed to the builder with
`GameBuilder.ui`.

A game's state can be turned into plain data with `Game.to_dict()` and
built back with `Game.from_dict()`. `dodgefield.json_io.JsonIo` writes such
data (or any object with a `to_dict` method, or a dataclass) to a JSON file
and reads it back as plain data.

## What it does not do

The command only starts a new game. There is no way from the command line
to save a game in progress, resume one, or keep a high-score table; saving
and loading state is available only through the library calls above.

## Running the tests

```
pip install .[test]
pytest
```