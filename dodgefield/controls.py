"""Mapping key presses to player actions."""

from __future__ import annotations

from typing import Callable, Dict

from dodgefield.player import Player

_QUIT_KEYS = frozenset({"q", "KEY_ESCAPE", "\x1b", "\x03"})

_ACTIONS: Dict[str, Callable[[Player], None]] = {
    "KEY_LEFT": Player.turn_left,
    "KEY_RIGHT": Player.turn_right,
    "KEY_UP": Player.accelerate,
    "KEY_DOWN": Player.decelerate,
}


def handle_key(key: str, player: Player) -> bool:
    """Apply ``key`` to ``player`` and return whether it asks to quit.

    ``key`` is a keystroke (its ``name`` is used when set) or a key name such as
    ``"KEY_LEFT"``. Arrows steer and change speed; ``q``, Escape and Ctrl+C quit.
    """
    name = getattr(key, "name", None) or str(key)
    if name in _QUIT_KEYS:
        return True
    action = _ACTIONS.get(name)
    if action is not None:
        action(player)
    return False