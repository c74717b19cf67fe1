import pytest

from tuiarea.backends.crossterm_events import (
    FocusEvent,
    KeyCode,
    KeyEvent,
    KeyEventKind,
    KeyModifiers,
    MouseEvent,
    MouseEventKind,
    event_to_input,
    key_code_to_key,
    key_event_to_input,
    mouse_event_to_input,
    mouse_kind_to_key,
)
from tuiarea.keys import Char, Function, Input, Key


def key_event(code, modifiers):
    return KeyEvent(code, modifiers, KeyEventKind.PRESS)


def mouse_event(kind, modifiers):
    return MouseEvent(kind, column=1, row=1, modifiers=modifiers)


def make_input(key, ctrl, alt, shift):
    return Input(key=key, ctrl=ctrl, alt=alt, shift=shift)


@pytest.mark.parametrize(
    "event, expected",
    [
        (key_event(Char("a"), KeyModifiers.NONE), make_input(Char("a"), False, False, False)),
        (key_event(KeyCode.ENTER, KeyModifiers.NONE), make_input(Key.ENTER, False, False, False)),
        (key_event(KeyCode.LEFT, KeyModifiers.CONTROL), make_input(Key.LEFT, True, False, False)),
        (key_event(KeyCode.RIGHT, KeyModifiers.SHIFT), make_input(Key.RIGHT, False, False, True)),
        (key_event(KeyCode.HOME, KeyModifiers.ALT), make_input(Key.HOME, False, True, False)),
        (
            key_event(
                Function(1),
                KeyModifiers.ALT | KeyModifiers.CONTROL | KeyModifiers.SHIFT,
            ),
            make_input(Function(1), True, True, True),
        ),
        (key_event(KeyCode.NUM_LOCK, KeyModifiers.CONTROL), make_input(Key.NULL, True, False, False)),
    ],
)
def test_key_to_input(event, expected):
    assert key_event_to_input(event) == expected


@pytest.mark.parametrize(
    "event, expected",
    [
        (
            mouse_event(MouseEventKind.SCROLL_DOWN, KeyModifiers.NONE),
            make_input(Key.MOUSE_SCROLL_DOWN, False, False, False),
        ),
        (
            mouse_event(MouseEventKind.SCROLL_UP, KeyModifiers.CONTROL),
            make_input(Key.MOUSE_SCROLL_UP, True, False, False),
        ),
        (
            mouse_event(MouseEventKind.SCROLL_UP, KeyModifiers.SHIFT),
            make_input(Key.MOUSE_SCROLL_UP, False, False, True),
        ),
        (
            mouse_event(MouseEventKind.SCROLL_DOWN, KeyModifiers.ALT),
            make_input(Key.MOUSE_SCROLL_DOWN, False, True, False),
        ),
        (
            mouse_event(MouseEventKind.SCROLL_UP, KeyModifiers.CONTROL | KeyModifiers.ALT),
            make_input(Key.MOUSE_SCROLL_UP, True, True, False),
        ),
        (
            mouse_event(MouseEventKind.MOVED, KeyModifiers.CONTROL),
            make_input(Key.NULL, True, False, False),
        ),
    ],
)
def test_mouse_to_input(event, expected):
    assert mouse_event_to_input(event) == expected


@pytest.mark.parametrize(
    "event, expected",
    [
        (
            key_event(Char("a"), KeyModifiers.NONE),
            make_input(Char("a"), False, False, False),
        ),
        (
            mouse_event(MouseEventKind.SCROLL_DOWN, KeyModifiers.NONE),
            make_input(Key.MOUSE_SCROLL_DOWN, False, False, False),
        ),
        (FocusEvent(gained=True), make_input(Key.NULL, False, False, False)),
    ],
)
def test_event_to_input(event, expected):
    assert event_to_input(event) == expected


def test_ignore_key_release_event():
    event = KeyEvent(Char("a"), KeyModifiers.NONE, KeyEventKind.RELEASE)
    assert key_event_to_input(event) == make_input(Key.NULL, False, False, False)


def test_repeat_event_is_not_ignored():
    event = KeyEvent(Char("b"), KeyModifiers.NONE, KeyEventKind.REPEAT)
    assert key_event_to_input(event) == make_input(Char("b"), False, False, False)


def test_super_modifier_is_dropped():
    event = key_event(KeyCode.UP, KeyModifiers.SUPER)
    assert key_event_to_input(event) == make_input(Key.UP, False, False, False)


@pytest.mark.parametrize(
    "code, expected",
    [
        (KeyCode.BACKSPACE, Key.BACKSPACE),
        (KeyCode.TAB, Key.TAB),
        (KeyCode.DELETE, Key.DELETE),
        (KeyCode.END, Key.END),
        (KeyCode.PAGE_UP, Key.PAGE_UP),
        (KeyCode.PAGE_DOWN, Key.PAGE_DOWN),
        (KeyCode.ESC, Key.ESC),
        (KeyCode.BACK_TAB, Key.NULL),
        (KeyCode.INSERT, Key.NULL),
        (Function(12), Function(12)),
    ],
)
def test_key_code_to_key(code, expected):
    assert key_code_to_key(code) == expected


def test_key_code_to_key_rejects_unknown():
    with pytest.raises(TypeError):
        key_code_to_key("a")


@pytest.mark.parametrize(
    "kind, expected",
    [
        (MouseEventKind.SCROLL_DOWN, Key.MOUSE_SCROLL_DOWN),
        (MouseEventKind.SCROLL_UP, Key.MOUSE_SCROLL_UP),
        (MouseEventKind.SCROLL_LEFT, Key.NULL),
        (MouseEventKind.DOWN, Key.NULL),
        (MouseEventKind.DRAG, Key.NULL),
    ],
)
def test_mouse_kind_to_key(kind, expected):
    assert mouse_kind_to_key(kind) == expected