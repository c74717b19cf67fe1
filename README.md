# tuiarea

This package holds the editing model for a multi-line text area that runs in a terminal.
It does not depend on any terminal library. It works with plain Python values, namely
lists of strings, `(row, col)` tuples and small dataclasses. You can drive it from
whatever event loop and renderer you already have.

## Modules

- `tuiarea.keys` describes key input that works with any backend.
  - `Key` is an enum of the special keys: arrows, Home/End, PageUp/PageDown, Enter,
    Tab, Backspace, Delete, Esc, Copy/Cut/Paste, and mouse scroll up or down.
    `Key.NULL` marks an input to ignore.
  - `Char` holds a single typed character.
  - `Function` holds an F-key number in the range 0..255.
  - `Input` pairs a key with the `ctrl`, `alt` and `shift` flags. `Input()` is an
    empty input whose key is `Key.NULL`.
- `tuiarea.cursor` moves the cursor.
  - `CursorMove` covers forward and back, up and down, head and end of line, top and
    bottom of the text, word forward, word end and word back, paragraph forward and
    back, and `IN_VIEWPORT`.
  - `Jump(row, col)` moves to an absolute position, fitted to the text.
  - `move.next_cursor(cursor, lines, viewport=None)` and the function
    `next_cursor(move, cursor, lines, viewport=None)` return the new `(row, col)`. They
    return `None` when the move cannot go anywhere.
  - `IN_VIEWPORT` needs a viewport object that has a `position()` method returning
    `(row_top, col_top, row_bottom, col_bottom)`.
- `tuiarea.scrolling` scrolls a viewport.
  - `Scrolling` offers `PAGE_DOWN`, `PAGE_UP`, `HALF_PAGE_DOWN` and `HALF_PAGE_UP`.
  - `ScrollDelta(rows, cols)` scrolls by a given amount. Each value must fit in a
    signed 16-bit integer.
  - `scroll(scrolling, viewport)` also accepts a `(rows, cols)` tuple.
  - The viewport must provide `rect()`, which returns `(x, y, width, height)`, and
    `scroll(rows, cols)`.
- `tuiarea.history` records edits to a list of lines and undoes or redoes them.
  - `Pos(row, col, offset)` marks a position.
  - `EditKind` lists the kinds of edit. There are insert and delete variants for a
    character, a newline, a string and a multi-line chunk.
  - `Change(kind, text)` checks that its payload fits its kind. `apply` makes the
    change to the lines in place, and `invert` returns the change that undoes it.
  - `Edit(change, before, after)` provides `redo`, `undo`, `cursor_before` and
    `cursor_after`.
  - `History(max_items)` is a bounded history.
    - `push` drops the oldest edit when the history is full. It also discards any edits
      that could still be redone.
    - `undo` and `redo` return the cursor to restore, or `None`.
    - `History(0)` records nothing.
- `tuiarea.highlight` renders one line into styled spans.
  - `Style` and `Span` are plain frozen dataclasses.
  - `DisplayTextBuilder` expands tabs to the next tab stop, counting display width with
    `wcwidth`. It can also mask every character, for example in a password field.
  - `LineHighlighter` collects a line number (`line_number`), the cursor
    (`cursor_line`), search matches given as `(start, end)` pairs (`search`) and a
    selection (`selection`). `into_spans()` then returns the list of `Span`s. Where
    highlights overlap, the cursor wins over a search match, and a search match wins
    over the selection.
- `tuiarea.backends.crossterm_events` and `tuiarea.backends.termion_events` each define
  event dataclasses shaped like the events of those terminal libraries, and convert them
  to `Input`.
  - `event_to_input` handles any event. Events it does not know become `Input()`.
  - The crossterm converter ignores key releases.
  - The termion converter turns `"\n"` and `"\r"` into Enter. It sets `shift` only for
    shifted arrow keys.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Undo and redo:

```python
from tuiarea.history import Change, Edit, EditKind, History, Pos

lines = ["ab", "cd"]
history = History(50)

edit = Edit(Change(EditKind.INSERT_CHAR, "x"), Pos(0, 1, 1), Pos(0, 2, 2))
edit.redo(lines)
history.push(edit)
assert lines == ["axb", "cd"]

assert history.undo(lines) == (0, 1)
assert lines == ["ab", "cd"]
```

Cursor moves:

```python
from tuiarea.cursor import CursorMove, Jump

assert CursorMove.WORD_FORWARD.next_cursor((0, 0), ["aaa bbb ccc"]) == (0, 4)
assert Jump(10, 10).next_cursor((0, 0), ["aaaa", "bbbb", "cccc"]) == (2, 4)
```

Highlighting a line:

```python
from tuiarea.highlight import LineHighlighter, Span, Style

cursor, line_style, selected = Style(bg="red"), Style(bg="gray"), Style(bg="blue")
lh = LineHighlighter("a\tb", cursor, 4, None, selected)
lh.cursor_line(1, line_style)
assert lh.into_spans() == [Span("a", line_style), Span("   ", cursor), Span("b", line_style)]
```

Converting a terminal event:

```python
from tuiarea.backends.crossterm_events import KeyEvent, KeyModifiers, event_to_input
from tuiarea.keys import Char, Input

assert event_to_input(KeyEvent(Char("a"), KeyModifiers.CONTROL)) == Input(Char("a"), ctrl=True)
```

## What it does not do

This package has no text-area widget that ties the pieces together. It has no key
bindings that map an `Input` to an edit or a cursor move. It does not draw anything to a
terminal or read events from one. It does not run regular-expression searches: you
compute the matches and pass them to `LineHighlighter.search`. Viewports come from you,
as any objects with the methods named above. Event conversion covers the crossterm-style
and termion-style events defined in `tuiarea.backends`.