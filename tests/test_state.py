from dodgefield.state import PlayerState


def test_new_state_is_alive():
    state = PlayerState(10, 0)
    assert state.is_alive()
    assert state.health == 10
    assert state.score == 0


def test_default_state_is_dead():
    state = PlayerState()
    assert not state.is_alive()
    assert state.score == 0


def test_decrease_health_until_dead():
    state = PlayerState(2, 0)
    state.decrease_health()
    assert state.is_alive()
    state.decrease_health()
    assert not state.is_alive()
    assert state.health == 0


def test_decrease_health_saturates_at_zero():
    state = PlayerState(0, 4)
    state.decrease_health()
    state.decrease_health()
    assert state.health == 0
    assert state.score == 4


def test_increase_score():
    state = PlayerState(3, 5)
    state.increase_score()
    state.increase_score()
    assert state.score == 7
    assert state.health == 3


def test_dict_round_trip():
    state = PlayerState(9, 12)
    assert state.to_dict() == {"health": 9, "score": 12}
    assert PlayerState.from_dict(state.to_dict()) == state