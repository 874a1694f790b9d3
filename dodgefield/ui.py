"""Terminal output and keyboard input for the game."""

from __future__ import annotations

import contextlib
from typing import Iterable, NamedTuple, Optional, Union

from blessed import Terminal
from blessed.keyboard import Keystroke

from dodgefield.point import Number, round_half_away

_COORD_MAX = 65535


class Sprite(NamedTuple):
    """One piece of text to put on screen at a field position."""

    x: Number
    y: Number
    text: str
    color: Optional[str] = None


def _screen_coord(value: Number) -> int:
    rounded = round_half_away(value)
    if rounded != rounded:  # NaN
        return 0
    return max(0, min(_COORD_MAX, int(rounded)))


def render_at(x: Number, y: Number, text: str) -> str:
    """Return ``text`` prefixed with the escape sequence moving the cursor to (x, y).

    Coordinates are zero based, rounded to the nearest cell and clamped to the
    screen's unsigned 16-bit range.
    """
    column = _screen_coord(x)
    row = _screen_coord(y)
    return f"\x1b[{row + 1};{column + 1}H{text}"


class UI:
    """The terminal the game draws on and reads keys from.

    Usable as a context manager: entering prepares the terminal, leaving restores it.
    """

    def __init__(self, terminal: Optional[Terminal] = None) -> None:
        self._terminal = terminal
        self._modes: Optional[contextlib.ExitStack] = None

    @property
    def terminal(self) -> Terminal:
        if self._terminal is None:
            self._terminal = Terminal()
        return self._terminal

    @property
    def active(self) -> bool:
        """Whether the terminal is currently prepared for the game."""
        return self._modes is not None

    def _write(self, text: str, flush: bool = False) -> None:
        stream = self.terminal.stream
        stream.write(text)
        if flush:
            stream.flush()

    def prepare(self) -> None:
        """Switch to raw input, black background, cleared screen and hidden cursor."""
        if self._modes is not None:
            raise RuntimeError("terminal is already prepared")
        term = self.terminal
        modes = contextlib.ExitStack()
        modes.enter_context(term.raw())
        self._modes = modes
        self._write(term.on_black + term.clear + term.hide_cursor, flush=True)

    def clear(self) -> None:
        """Queue a screen clear; it is sent with the next flush."""
        self._write(self.terminal.clear)

    def restore(self) -> None:
        """Undo :meth:`prepare`: reset colours, clear, home and show the cursor."""
        term = self.terminal
        self._write(term.normal + term.clear + term.home + term.normal_cursor, flush=True)
        if self._modes is not None:
            modes, self._modes = self._modes, None
            modes.close()

    def _paint(self, sprite: Sprite) -> str:
        if sprite.color is None:
            return sprite.text
        return getattr(self.terminal, sprite.color)(sprite.text)

    def draw(self, frame: Iterable[Sprite]) -> None:
        """Write every sprite of ``frame`` at its position and flush."""
        output = "".join(
            render_at(sprite.x, sprite.y, self._paint(sprite)) for sprite in frame
        )
        self._write(output, flush=True)

    def poll_key(self, timeout: float) -> Optional[Union[Keystroke, str]]:
        """Wait up to ``timeout`` seconds for a key press; ``None`` if none came."""
        key = self.terminal.inkey(timeout=max(timeout, 0.0))
        return key if key else None

    def __enter__(self) -> "UI":
        self.prepare()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.restore()