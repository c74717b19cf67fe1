"""Cursor movements within a text area."""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple, Union

_U16_MAX = 2**16 - 1

Cursor = Tuple[int, int]


class Viewport(Protocol):
    """What cursor movement needs from a viewport."""

    def position(self) -> Tuple[int, int, int, int]:
        """Return ``(row_top, col_top, row_bottom, col_bottom)`` of the visible area."""
        ...


class _CharClass(enum.Enum):
    SPACE = enum.auto()
    WORD = enum.auto()
    PUNCT = enum.auto()
    OTHER = enum.auto()


def _char_class(ch: str) -> _CharClass:
    if ch.isspace():
        return _CharClass.SPACE
    if ch.isalnum() or ch == "_":
        return _CharClass.WORD
    if unicodedata.category(ch).startswith(("P", "S")):
        return _CharClass.PUNCT
    return _CharClass.OTHER


def _find_word_start_forward(line: str, start_col: int) -> Optional[int]:
    """Column of the start of the next word after ``start_col`` in ``line``."""
    if start_col >= len(line):
        return None
    prev = _char_class(line[start_col])
    for col in range(start_col + 1, len(line)):
        cls = _char_class(line[col])
        if cls is not _CharClass.SPACE and cls is not prev:
            return col
        prev = cls
    return None


def _find_word_start_backward(line: str, start_col: int) -> Optional[int]:
    """Column of the start of the word before ``start_col`` in ``line``."""
    for col in range(min(start_col, len(line)) - 1, -1, -1):
        cls = _char_class(line[col])
        if cls is _CharClass.SPACE:
            continue
        if col == 0 or _char_class(line[col - 1]) is not cls:
            return col
    return None


def _find_word_inclusive_end_forward(line: str, start_col: int) -> Optional[int]:
    """Column of the last character of the word at or after ``start_col``."""
    for col in range(start_col, len(line)):
        cls = _char_class(line[col])
        if cls is _CharClass.SPACE:
            continue
        if col + 1 == len(line) or _char_class(line[col + 1]) is not cls:
            return col
    return None


def _fit_col(col: int, line: str) -> int:
    return min(col, len(line))


class CursorMove(enum.Enum):
    """How to move the cursor. Positions are ``(row, col)`` counted in characters."""

    FORWARD = "forward"
    BACK = "back"
    UP = "up"
    DOWN = "down"
    HEAD = "head"
    END = "end"
    TOP = "top"
    BOTTOM = "bottom"
    WORD_FORWARD = "word_forward"
    WORD_END = "word_end"
    WORD_BACK = "word_back"
    PARAGRAPH_FORWARD = "paragraph_forward"
    PARAGRAPH_BACK = "paragraph_back"
    IN_VIEWPORT = "in_viewport"

    def next_cursor(
        self,
        cursor: Cursor,
        lines: Sequence[str],
        viewport: Optional[Viewport] = None,
    ) -> Optional[Cursor]:
        """Return the cursor after this move, or ``None`` when it cannot move."""
        row, col = cursor
        last_row = len(lines) - 1

        if self is CursorMove.FORWARD:
            if col >= len(lines[row]):
                return (row + 1, 0) if row + 1 < len(lines) else None
            return (row, col + 1)

        if self is CursorMove.BACK:
            if col == 0:
                if row == 0:
                    return None
                return (row - 1, len(lines[row - 1]))
            return (row, col - 1)

        if self is CursorMove.UP:
            if row == 0:
                return None
            return (row - 1, _fit_col(col, lines[row - 1]))

        if self is CursorMove.DOWN:
            if row + 1 >= len(lines):
                return None
            return (row + 1, _fit_col(col, lines[row + 1]))

        if self is CursorMove.HEAD:
            return (row, 0)

        if self is CursorMove.END:
            return (row, len(lines[row]))

        if self is CursorMove.TOP:
            return (0, _fit_col(col, lines[0]))

        if self is CursorMove.BOTTOM:
            return (last_row, _fit_col(col, lines[last_row]))

        if self is CursorMove.WORD_END:
            # Skip the current position so that the cursor always advances.
            found = _find_word_inclusive_end_forward(lines[row], col + 1)
            if found is not None:
                return (row, found)
            while row != last_row:
                row += 1
                found = _find_word_inclusive_end_forward(lines[row], 0)
                if found is not None:
                    return (row, found)
            return (row, len(lines[row]))

        if self is CursorMove.WORD_FORWARD:
            found = _find_word_start_forward(lines[row], col)
            if found is not None:
                return (row, found)
            if row + 1 < len(lines):
                return (row + 1, 0)
            return (row, len(lines[row]))

        if self is CursorMove.WORD_BACK:
            found = _find_word_start_backward(lines[row], col)
            if found is not None:
                return (row, found)
            if row > 0:
                return (row - 1, len(lines[row - 1]))
            return (row, 0)

        if self is CursorMove.PARAGRAPH_FORWARD:
            prev_is_empty = lines[row] == ""
            for next_row in range(row + 1, len(lines)):
                line = lines[next_row]
                is_empty = line == ""
                if not is_empty and prev_is_empty:
                    return (next_row, _fit_col(col, line))
                prev_is_empty = is_empty
            return (last_row, _fit_col(col, lines[last_row]))

        if self is CursorMove.PARAGRAPH_BACK:
            if row == 0:
                return None
            start = row - 1
            prev_is_empty = lines[start] == ""
            for prev_row in range(start - 1, -1, -1):
                is_empty = lines[prev_row] == ""
                if is_empty and not prev_is_empty:
                    return (prev_row + 1, _fit_col(col, lines[prev_row + 1]))
                prev_is_empty = is_empty
            return (0, _fit_col(col, lines[0]))

        # IN_VIEWPORT
        if viewport is None:
            raise ValueError("moving into the viewport needs a viewport")
        row_top, col_top, row_bottom, col_bottom = viewport.position()
        row = max(row_top, min(row, row_bottom))
        row = min(row, last_row)
        col = max(col_top, min(col, col_bottom))
        return (row, _fit_col(col, lines[row]))


@dataclass(frozen=True)
class Jump:
    """Move to ``(row, col)``, fitted within the text."""

    row: int
    col: int

    def __post_init__(self) -> None:
        for name in ("row", "col"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= _U16_MAX:
                raise ValueError(f"{name} out of range: {value}")

    def next_cursor(
        self,
        cursor: Cursor,
        lines: Sequence[str],
        viewport: Optional[Viewport] = None,
    ) -> Optional[Cursor]:
        """Return the jump target clamped to the existing text."""
        row = min(self.row, len(lines) - 1)
        return (row, _fit_col(self.col, lines[row]))


AnyCursorMove = Union[CursorMove, Jump]


def next_cursor(
    move: AnyCursorMove,
    cursor: Cursor,
    lines: Sequence[str],
    viewport: Optional[Viewport] = None,
) -> Optional[Cursor]:
    """Return the cursor position after ``move``, or ``None`` if it stays put."""
    if not isinstance(move, (CursorMove, Jump)):
        raise TypeError(f"unsupported cursor move: {move!r}")
    return move.next_cursor(cursor, lines, viewport)