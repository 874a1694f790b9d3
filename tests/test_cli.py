import pytest

from dodgefield.cli import build_game, main


def test_build_game_settings():
    game = build_game()
    assert game.height == 40
    assert game.n_random_walls == 30
    assert game.update_interval == 0.28
    assert game.player.speed == 2.0
    assert game.player_state.health == 10
    assert game.player_state.score == 0


def test_build_game_enemies_speed_up():
    game = build_game()
    speeds = [enemy.speed for enemy in game.enemies]
    assert len(speeds) == 9
    assert speeds == sorted(speeds)
    assert speeds[0] == pytest.approx(0.1)


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2