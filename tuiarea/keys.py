"""Backend-agnostic key and input types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class Key(enum.Enum):
    """Keys that carry no payload. ``NULL`` is an input the text area ignores."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    TAB = "tab"
    DELETE = "delete"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ESC = "esc"
    COPY = "copy"
    CUT = "cut"
    PASTE = "paste"
    MOUSE_SCROLL_DOWN = "mouse_scroll_down"
    MOUSE_SCROLL_UP = "mouse_scroll_up"
    NULL = "null"


@dataclass(frozen=True)
class Char:
    """A normal letter key carrying the typed character."""

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"a key character must be exactly one character, got {self.char!r}")


@dataclass(frozen=True)
class Function:
    """A function key such as F1, F2, F3, ..."""

    number: int

    def __post_init__(self) -> None:
        if not isinstance(self.number, int) or not 0 <= self.number <= 0xFF:
            raise ValueError(f"function key number must be in 0..255, got {self.number!r}")


AnyKey = Union[Key, Char, Function]


@dataclass(frozen=True)
class Input:
    """A key press together with the state of its modifier keys."""

    key: AnyKey = Key.NULL
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.key, (Key, Char, Function)):
            raise TypeError(f"unsupported key: {self.key!r}")