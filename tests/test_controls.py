import pytest
from blessed.keyboard import Keystroke

from dodgefield.controls import handle_key
from dodgefield.player import Player


def _player():
    return Player.builder().speed(0.5).build()


@pytest.mark.parametrize("key", ["q", "KEY_ESCAPE", "\x1b", "\x03"])
def test_quit_keys(key):
    assert handle_key(key, _player()) is True


def test_left_turns_player_left():
    player = _player()
    expected = _player()
    expected.turn_left()
    assert handle_key("KEY_LEFT", player) is False
    assert player.direction == expected.direction


def test_right_turns_player_right():
    player = _player()
    expected = _player()
    expected.turn_right()
    assert handle_key("KEY_RIGHT", player) is False
    assert player.direction == expected.direction
    assert player.direction.x == pytest.approx(expected.direction.x)


def test_up_and_down_change_speed():
    player = _player()
    expected = _player()
    expected.accelerate()
    handle_key("KEY_UP", player)
    assert player.speed == pytest.approx(expected.speed)
    expected.decelerate()
    handle_key("KEY_DOWN", player)
    assert player.speed == pytest.approx(expected.speed)


def test_keystroke_name_is_used():
    player = _player()
    expected = _player()
    expected.turn_left()
    key = Keystroke(ucs="\x1b[D", code=260, name="KEY_LEFT")
    assert handle_key(key, player) is False
    assert player.direction == expected.direction


def test_other_keys_change_nothing():
    player = _player()
    assert handle_key("x", player) is False
    assert handle_key("Q", player) is False
    assert player == _player()