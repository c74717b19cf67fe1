"""Conversion of crossterm-style terminal events into :class:`~tuiarea.keys.Input`."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from tuiarea.keys import AnyKey, Char, Function, Input, Key


class KeyCode(enum.Enum):
    """Key codes without a payload; characters and function keys use ``Char`` and ``Function``."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    BACK_TAB = "back_tab"
    DELETE = "delete"
    INSERT = "insert"
    NULL = "null"
    ESC = "esc"
    CAPS_LOCK = "caps_lock"
    SCROLL_LOCK = "scroll_lock"
    NUM_LOCK = "num_lock"
    PRINT_SCREEN = "print_screen"
    PAUSE = "pause"
    MENU = "menu"
    KEYPAD_BEGIN = "keypad_begin"


AnyKeyCode = Union[KeyCode, Char, Function]


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key or mouse event."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()
    HYPER = enum.auto()
    META = enum.auto()


class KeyEventKind(enum.Enum):
    """Whether a key was pressed, repeated or released."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A keyboard event."""

    code: AnyKeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


class MouseEventKind(enum.Enum):
    """What happened with the mouse."""

    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVED = "moved"
    SCROLL_DOWN = "scroll_down"
    SCROLL_UP = "scroll_up"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at a terminal cell."""

    kind: MouseEventKind
    column: int = 0
    row: int = 0
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class FocusEvent:
    """The terminal gained or lost focus."""

    gained: bool = True


_KEY_CODES = {
    KeyCode.BACKSPACE: Key.BACKSPACE,
    KeyCode.ENTER: Key.ENTER,
    KeyCode.LEFT: Key.LEFT,
    KeyCode.RIGHT: Key.RIGHT,
    KeyCode.UP: Key.UP,
    KeyCode.DOWN: Key.DOWN,
    KeyCode.TAB: Key.TAB,
    KeyCode.DELETE: Key.DELETE,
    KeyCode.HOME: Key.HOME,
    KeyCode.END: Key.END,
    KeyCode.PAGE_UP: Key.PAGE_UP,
    KeyCode.PAGE_DOWN: Key.PAGE_DOWN,
    KeyCode.ESC: Key.ESC,
}

_MOUSE_KINDS = {
    MouseEventKind.SCROLL_DOWN: Key.MOUSE_SCROLL_DOWN,
    MouseEventKind.SCROLL_UP: Key.MOUSE_SCROLL_UP,
}


def _modifier_flags(modifiers: KeyModifiers) -> dict:
    return {
        "ctrl": bool(modifiers & KeyModifiers.CONTROL),
        "alt": bool(modifiers & KeyModifiers.ALT),
        "shift": bool(modifiers & KeyModifiers.SHIFT),
    }


def key_code_to_key(code: AnyKeyCode) -> AnyKey:
    """Map a key code to a key; unsupported codes become ``Key.NULL``."""
    if isinstance(code, (Char, Function)):
        return code
    if isinstance(code, KeyCode):
        return _KEY_CODES.get(code, Key.NULL)
    raise TypeError(f"unsupported key code: {code!r}")


def key_event_to_input(event: KeyEvent) -> Input:
    """Convert a key event; key releases are ignored and give an empty input."""
    if event.kind is KeyEventKind.RELEASE:
        return Input()
    return Input(key_code_to_key(event.code), **_modifier_flags(event.modifiers))


def mouse_kind_to_key(kind: MouseEventKind) -> AnyKey:
    """Map a mouse event kind to a key; only vertical scrolling is recognised."""
    return _MOUSE_KINDS.get(kind, Key.NULL)


def mouse_event_to_input(event: MouseEvent) -> Input:
    """Convert a mouse event."""
    return Input(mouse_kind_to_key(event.kind), **_modifier_flags(event.modifiers))


def event_to_input(event: object) -> Input:
    """Convert any terminal event; events other than keys and mice give an empty input."""
    if isinstance(event, KeyEvent):
        return key_event_to_input(event)
    if isinstance(event, MouseEvent):
        return mouse_event_to_input(event)
    return Input()