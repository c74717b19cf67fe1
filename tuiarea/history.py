"""Edits to a list of lines and an undo/redo history of them."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple, Union

Cursor = Tuple[int, int]


@dataclass(frozen=True)
class Pos:
    """A position in the text: ``row``, character ``col`` and string ``offset``."""

    row: int
    col: int
    offset: int


class EditKind(enum.Enum):
    """The kinds of edit that can be made to the lines of a text."""

    INSERT_CHAR = "insert_char"
    DELETE_CHAR = "delete_char"
    INSERT_NEWLINE = "insert_newline"
    DELETE_NEWLINE = "delete_newline"
    INSERT_STR = "insert_str"
    DELETE_STR = "delete_str"
    INSERT_CHUNK = "insert_chunk"
    DELETE_CHUNK = "delete_chunk"


_INVERSE = {
    EditKind.INSERT_CHAR: EditKind.DELETE_CHAR,
    EditKind.DELETE_CHAR: EditKind.INSERT_CHAR,
    EditKind.INSERT_NEWLINE: EditKind.DELETE_NEWLINE,
    EditKind.DELETE_NEWLINE: EditKind.INSERT_NEWLINE,
    EditKind.INSERT_STR: EditKind.DELETE_STR,
    EditKind.DELETE_STR: EditKind.INSERT_STR,
    EditKind.INSERT_CHUNK: EditKind.DELETE_CHUNK,
    EditKind.DELETE_CHUNK: EditKind.INSERT_CHUNK,
}

_CHAR_KINDS = {EditKind.INSERT_CHAR, EditKind.DELETE_CHAR}
_NEWLINE_KINDS = {EditKind.INSERT_NEWLINE, EditKind.DELETE_NEWLINE}
_STR_KINDS = {EditKind.INSERT_STR, EditKind.DELETE_STR}
_CHUNK_KINDS = {EditKind.INSERT_CHUNK, EditKind.DELETE_CHUNK}

Payload = Union[None, str, Tuple[str, ...]]


@dataclass(frozen=True)
class Change:
    """An edit kind with the text it inserts or deletes.

    Character edits carry one character, string edits a string without
    newlines, chunk edits two or more lines, and newline edits nothing.
    """

    kind: EditKind
    text: Payload = None

    def __post_init__(self) -> None:
        kind, text = self.kind, self.text
        if kind in _CHAR_KINDS:
            if not isinstance(text, str) or len(text) != 1:
                raise ValueError(f"{kind.value} needs exactly one character, got {text!r}")
        elif kind in _STR_KINDS:
            if not isinstance(text, str):
                raise ValueError(f"{kind.value} needs a string, got {text!r}")
        elif kind in _NEWLINE_KINDS:
            if text is not None:
                raise ValueError(f"{kind.value} carries no text, got {text!r}")
        else:
            if isinstance(text, str) or text is None:
                raise ValueError(f"{kind.value} needs a sequence of lines, got {text!r}")
            chunk = tuple(text)
            if len(chunk) <= 1 or not all(isinstance(line, str) for line in chunk):
                raise ValueError(f"chunk must hold more than one line, got {chunk!r}")
            object.__setattr__(self, "text", chunk)

    def apply(self, lines: List[str], before: Pos, after: Pos) -> None:
        """Make this change to ``lines`` in place, moving from ``before`` to ``after``."""
        kind, text = self.kind, self.text

        if kind is EditKind.INSERT_CHAR or kind is EditKind.INSERT_STR:
            line = lines[before.row]
            lines[before.row] = line[: before.offset] + text + line[before.offset :]

        elif kind is EditKind.DELETE_CHAR:
            line = lines[before.row]
            lines[before.row] = line[: after.offset] + line[after.offset + 1 :]

        elif kind is EditKind.INSERT_NEWLINE:
            line = lines[before.row]
            lines[before.row] = line[: before.offset]
            lines.insert(before.row + 1, line[before.offset :])

        elif kind is EditKind.DELETE_NEWLINE:
            if before.row <= 0:
                raise ValueError(f"cannot join the first line with a previous one: {before!r}")
            line = lines.pop(before.row)
            lines[before.row - 1] += line

        elif kind is EditKind.DELETE_STR:
            line = lines[after.row]
            lines[after.row] = line[: after.offset] + line[after.offset + len(text) :]

        elif kind is EditKind.INSERT_CHUNK:
            first_line = lines[before.row]
            rest = first_line[before.offset :]
            lines[before.row] = first_line[: before.offset] + text[0]
            next_row = before.row + 1
            lines.insert(next_row, text[-1] + rest)
            lines[next_row:next_row] = text[1:-1]

        else:  # DELETE_CHUNK
            start = after.row + 1
            stop = after.row + len(text)
            last_line = lines[stop - 1]
            del lines[start:stop]
            remaining = last_line[len(text[-1]) :]
            lines[after.row] = lines[after.row][: after.offset] + remaining

    def invert(self) -> Change:
        """Return the change that undoes this one."""
        return Change(_INVERSE[self.kind], self.text)


@dataclass(frozen=True)
class Edit:
    """A change together with the cursor positions before and after it."""

    change: Change
    before: Pos
    after: Pos

    def redo(self, lines: List[str]) -> None:
        """Apply the change to ``lines``."""
        self.change.apply(lines, self.before, self.after)

    def undo(self, lines: List[str]) -> None:
        """Revert the change in ``lines``."""
        self.change.invert().apply(lines, self.after, self.before)

    def cursor_before(self) -> Cursor:
        """The ``(row, col)`` cursor before the edit."""
        return (self.before.row, self.before.col)

    def cursor_after(self) -> Cursor:
        """The ``(row, col)`` cursor after the edit."""
        return (self.after.row, self.after.col)


class History:
    """A bounded undo/redo history of edits."""

    def __init__(self, max_items: int) -> None:
        if max_items < 0:
            raise ValueError(f"max_items must not be negative, got {max_items}")
        self._max_items = max_items
        self._index = 0
        self._edits: Deque[Edit] = deque()

    @property
    def max_items(self) -> int:
        """How many edits the history keeps at most."""
        return self._max_items

    def __len__(self) -> int:
        return len(self._edits)

    def push(self, edit: Edit) -> None:
        """Record ``edit``, dropping the oldest edit and any redoable ones."""
        if self._max_items == 0:
            return
        if len(self._edits) == self._max_items:
            self._edits.popleft()
            self._index = max(self._index - 1, 0)
        while len(self._edits) > self._index:
            self._edits.pop()
        self._index += 1
        self._edits.append(edit)

    def redo(self, lines: List[str]) -> Optional[Cursor]:
        """Reapply the next undone edit; return the cursor after it, or ``None``."""
        if self._index == len(self._edits):
            return None
        edit = self._edits[self._index]
        edit.redo(lines)
        self._index += 1
        return edit.cursor_after()

    def undo(self, lines: List[str]) -> Optional[Cursor]:
        """Revert the last edit; return the cursor before it, or ``None``."""
        if self._index == 0:
            return None
        self._index -= 1
        edit = self._edits[self._index]
        edit.undo(lines)
        return edit.cursor_before()