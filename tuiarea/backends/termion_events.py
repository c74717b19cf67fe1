"""Conversion of termion-style terminal events into :class:`~tuiarea.keys.Input`.

termion reports keys as typed, so the Shift state is only known for arrow keys.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from tuiarea.keys import AnyKey, Char, Function, Input, Key


@dataclass(frozen=True)
class KeyEvent:
    """A key as termion reports it: a kind and, for some kinds, a character or number."""

    class Kind(enum.Enum):
        BACKSPACE = "backspace"
        LEFT = "left"
        SHIFT_LEFT = "shift_left"
        ALT_LEFT = "alt_left"
        CTRL_LEFT = "ctrl_left"
        RIGHT = "right"
        SHIFT_RIGHT = "shift_right"
        ALT_RIGHT = "alt_right"
        CTRL_RIGHT = "ctrl_right"
        UP = "up"
        SHIFT_UP = "shift_up"
        ALT_UP = "alt_up"
        CTRL_UP = "ctrl_up"
        DOWN = "down"
        SHIFT_DOWN = "shift_down"
        ALT_DOWN = "alt_down"
        CTRL_DOWN = "ctrl_down"
        HOME = "home"
        CTRL_HOME = "ctrl_home"
        END = "end"
        CTRL_END = "ctrl_end"
        PAGE_UP = "page_up"
        PAGE_DOWN = "page_down"
        BACK_TAB = "back_tab"
        DELETE = "delete"
        INSERT = "insert"
        F = "f"
        CHAR = "char"
        ALT = "alt"
        CTRL = "ctrl"
        NULL = "null"
        ESC = "esc"

    kind: "KeyEvent.Kind"
    value: Union[str, int, None] = None

    def __post_init__(self) -> None:
        kind, value = self.kind, self.value
        if kind in (KeyEvent.Kind.CHAR, KeyEvent.Kind.ALT, KeyEvent.Kind.CTRL):
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{kind.value} key needs one character, got {value!r}")
        elif kind is KeyEvent.Kind.F:
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 0xFF:
                raise ValueError(f"function key number must be in 0..255, got {value!r}")
        elif value is not None:
            raise ValueError(f"{kind.value} key carries no value, got {value!r}")

    @classmethod
    def char(cls, ch: str) -> KeyEvent:
        return cls(cls.Kind.CHAR, ch)

    @classmethod
    def ctrl(cls, ch: str) -> KeyEvent:
        return cls(cls.Kind.CTRL, ch)

    @classmethod
    def alt(cls, ch: str) -> KeyEvent:
        return cls(cls.Kind.ALT, ch)

    @classmethod
    def function(cls, number: int) -> KeyEvent:
        return cls(cls.Kind.F, number)


class MouseButton(enum.Enum):
    """Mouse buttons, wheel directions included."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"
    WHEEL_LEFT = "wheel_left"
    WHEEL_RIGHT = "wheel_right"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse press, release or hold at a terminal cell."""

    class Action(enum.Enum):
        PRESS = "press"
        RELEASE = "release"
        HOLD = "hold"

    action: "MouseEvent.Action"
    x: int
    y: int
    button: Optional[MouseButton] = None

    def __post_init__(self) -> None:
        if self.action is MouseEvent.Action.PRESS:
            if not isinstance(self.button, MouseButton):
                raise ValueError(f"a mouse press needs a button, got {self.button!r}")
        elif self.button is not None:
            raise ValueError(f"only a mouse press carries a button, got {self.button!r}")

    @classmethod
    def press(cls, button: MouseButton, x: int, y: int) -> MouseEvent:
        return cls(cls.Action.PRESS, x, y, button)

    @classmethod
    def release(cls, x: int, y: int) -> MouseEvent:
        return cls(cls.Action.RELEASE, x, y)

    @classmethod
    def hold(cls, x: int, y: int) -> MouseEvent:
        return cls(cls.Action.HOLD, x, y)


@dataclass(frozen=True)
class UnsupportedEvent:
    """An event termion could not decode, with its raw bytes."""

    data: bytes = b""


_K = KeyEvent.Kind

_CTRL_KINDS = {_K.CTRL, _K.CTRL_UP, _K.CTRL_RIGHT, _K.CTRL_DOWN, _K.CTRL_LEFT, _K.CTRL_HOME, _K.CTRL_END}
_ALT_KINDS = {_K.ALT, _K.ALT_UP, _K.ALT_RIGHT, _K.ALT_DOWN, _K.ALT_LEFT}
_SHIFT_KINDS = {_K.SHIFT_UP, _K.SHIFT_RIGHT, _K.SHIFT_DOWN, _K.SHIFT_LEFT}

_PLAIN_KEYS = {
    _K.BACKSPACE: Key.BACKSPACE,
    _K.LEFT: Key.LEFT,
    _K.CTRL_LEFT: Key.LEFT,
    _K.ALT_LEFT: Key.LEFT,
    _K.SHIFT_LEFT: Key.LEFT,
    _K.RIGHT: Key.RIGHT,
    _K.CTRL_RIGHT: Key.RIGHT,
    _K.ALT_RIGHT: Key.RIGHT,
    _K.SHIFT_RIGHT: Key.RIGHT,
    _K.UP: Key.UP,
    _K.CTRL_UP: Key.UP,
    _K.ALT_UP: Key.UP,
    _K.SHIFT_UP: Key.UP,
    _K.DOWN: Key.DOWN,
    _K.CTRL_DOWN: Key.DOWN,
    _K.ALT_DOWN: Key.DOWN,
    _K.SHIFT_DOWN: Key.DOWN,
    _K.HOME: Key.HOME,
    _K.CTRL_HOME: Key.HOME,
    _K.END: Key.END,
    _K.CTRL_END: Key.END,
    _K.PAGE_UP: Key.PAGE_UP,
    _K.PAGE_DOWN: Key.PAGE_DOWN,
    _K.BACK_TAB: Key.TAB,
    _K.DELETE: Key.DELETE,
    _K.ESC: Key.ESC,
}

_MOUSE_BUTTONS = {
    MouseButton.WHEEL_UP: Key.MOUSE_SCROLL_UP,
    MouseButton.WHEEL_DOWN: Key.MOUSE_SCROLL_DOWN,
}


def _key_of(key: KeyEvent) -> AnyKey:
    kind = key.kind
    if kind is _K.CHAR and key.value in ("\n", "\r"):
        return Key.ENTER
    if kind in (_K.CHAR, _K.CTRL, _K.ALT):
        return Char(key.value)
    if kind is _K.F:
        return Function(key.value)
    return _PLAIN_KEYS.get(kind, Key.NULL)


def key_event_to_input(key: KeyEvent) -> Input:
    """Convert a termion key; ``shift`` is set only for shifted arrow keys."""
    return Input(
        _key_of(key),
        ctrl=key.kind in _CTRL_KINDS,
        alt=key.kind in _ALT_KINDS,
        shift=key.kind in _SHIFT_KINDS,
    )


def mouse_button_to_key(button: MouseButton) -> AnyKey:
    """Map a mouse button to a key; only the vertical wheel is recognised."""
    return _MOUSE_BUTTONS.get(button, Key.NULL)


def mouse_event_to_input(mouse: MouseEvent) -> Input:
    """Convert a mouse event; only presses can produce a key."""
    if mouse.action is MouseEvent.Action.PRESS:
        return Input(mouse_button_to_key(mouse.button))
    return Input(Key.NULL)


def event_to_input(event: object) -> Input:
    """Convert any termion event; unsupported events give an empty input."""
    if isinstance(event, KeyEvent):
        return key_event_to_input(event)
    if isinstance(event, MouseEvent):
        return mouse_event_to_input(event)
    return Input()