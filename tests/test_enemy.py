import json

import pytest

from dodgefield.enemy import Enemy
from dodgefield.point import Point2d
from dodgefield.state import PlayerState


class FakeGame:
    def __init__(self, player_position, interval=1.0, health=3):
        self._player_position = player_position
        self.update_interval = interval
        self.player_state = PlayerState(health=health, score=0)

    def player_position(self):
        return self._player_position


def test_with_speed_starts_at_origin():
    enemy = Enemy.with_speed(0.6)
    assert enemy.speed == 0.6
    assert (enemy.position.x, enemy.position.y) == (0.0, 0.0)


def test_move_towards_player_reduces_distance():
    enemy = Enemy(Point2d(2.0, 2.0), 0.5)
    target = Point2d(10.0, 7.0)
    before = enemy.position.distance(target)
    enemy.move_towards_player(target, 1.0)
    assert enemy.position.distance(target) < before


def test_move_covers_speed_times_time():
    enemy = Enemy(Point2d(3.0, 3.0), 0.4)
    start = enemy.position
    enemy.move_towards_player(Point2d(20.0, 9.0), 2.0)
    assert enemy.position.distance(start) == pytest.approx(0.8)


def test_move_along_axis():
    enemy = Enemy(Point2d(0.0, 0.0), 1.0)
    enemy.move_towards_player(Point2d(5.0, 0.0), 1.0)
    assert enemy.position.x == pytest.approx(1.0)
    assert enemy.position.y == pytest.approx(0.0)


def test_zero_speed_does_not_move():
    enemy = Enemy(Point2d(4.0, 4.0), 0.0)
    enemy.move_towards_player(Point2d(9.0, 1.0), 1.0)
    assert (enemy.position.x, enemy.position.y) == (4.0, 4.0)


def test_same_cell_as_player_does_not_move():
    enemy = Enemy(Point2d(4.2, 3.9), 1.0)
    enemy.move_towards_player(Point2d(3.8, 4.1), 1.0)
    assert (enemy.position.x, enemy.position.y) == (4.2, 3.9)


def test_update_on_contact_costs_health():
    game = FakeGame(Point2d(5.0, 5.0), health=3)
    enemy = Enemy(Point2d(5.1, 4.9), 0.1)
    enemy.update(game)
    assert game.player_state.health == 2


def test_update_far_away_keeps_health():
    game = FakeGame(Point2d(20.0, 20.0), health=3)
    enemy = Enemy(Point2d(1.0, 1.0), 0.5)
    start = enemy.position
    enemy.update(game)
    assert game.player_state.health == 3
    assert enemy.position.distance(start) == pytest.approx(0.5)


def test_update_health_never_negative():
    game = FakeGame(Point2d(2.0, 2.0), health=0)
    enemy = Enemy(Point2d(2.0, 2.0), 0.2)
    enemy.update(game)
    assert game.player_state.health == 0


def test_dict_round_trip():
    enemy = Enemy(Point2d(3.25, 7.5), 0.45)
    restored = Enemy.from_dict(json.loads(json.dumps(enemy.to_dict())))
    assert restored == enemy
    assert restored.position.x == 3.25
    assert restored.speed == 0.45


def test_equality_depends_on_speed():
    assert Enemy.with_speed(0.1) == Enemy.with_speed(0.1)
    assert not Enemy.with_speed(0.1) == Enemy.with_speed(0.2)