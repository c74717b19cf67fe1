"""Turning one line of text into styled spans for display."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple

from wcwidth import wcwidth


@dataclass(frozen=True)
class Style:
    """Colours and modifiers applied to a piece of text."""

    fg: Optional[str] = None
    bg: Optional[str] = None
    modifiers: FrozenSet[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Span:
    """A piece of display text with a single style."""

    content: str
    style: Style = field(default_factory=Style)


class _Rank(enum.IntEnum):
    # At equal offsets, boundaries are processed in ascending rank.
    END = 0
    SELECT = 1
    SEARCH = 2
    CURSOR = 3


def _char_width(ch: str) -> int:
    width = wcwidth(ch)
    return width if width > 0 else 0


class DisplayTextBuilder:
    """Expands tabs and applies a mask, tracking the display width so far."""

    def __init__(self, tab_len: int, mask: Optional[str] = None) -> None:
        if tab_len < 0:
            raise ValueError(f"tab length must not be negative, got {tab_len}")
        if mask is not None and len(mask) != 1:
            raise ValueError(f"mask must be a single character, got {mask!r}")
        self.tab_len = tab_len
        self.mask = mask
        self.width = 0

    def build(self, text: str) -> str:
        """Return ``text`` as it is displayed, continuing from the current width."""
        if self.mask is not None:
            # Width is not tracked for masked text since every character is the same.
            return self.mask * len(text)

        buf = ""
        for i, ch in enumerate(text):
            if ch == "\t":
                if not buf:
                    buf = text[:i]
                if self.tab_len > 0:
                    pad = self.tab_len - (self.width % self.tab_len)
                    buf += " " * pad
                    self.width += pad
            else:
                if buf:
                    buf += ch
                self.width += _char_width(ch)

        return buf if buf else text


class LineHighlighter:
    """Collects highlights for one line and renders them into spans.

    Offsets given to :meth:`search` and :meth:`selection` are string indices
    into the line; the cursor column is a character column.
    """

    def __init__(
        self,
        line: str,
        cursor_style: Style,
        tab_len: int,
        mask: Optional[str],
        select_style: Style,
    ) -> None:
        self.line = line
        self.cursor_style = cursor_style
        self.tab_len = tab_len
        self.mask = mask
        self.select_style = select_style
        self.style_begin = Style()
        self.cursor_at_end = False
        self.select_at_end = False
        self._spans: List[Span] = []
        self._boundaries: List[Tuple[int, _Rank, Optional[Style]]] = []

    def line_number(self, row: int, lnum_len: int, style: Style) -> None:
        """Prefix the line with its right-aligned, 1-based number."""
        number = str(row + 1)
        if lnum_len < len(number):
            raise ValueError(
                f"line number width {lnum_len} is too small for line {number}"
            )
        pad = " " * (lnum_len - len(number) + 1)
        self._spans.append(Span(f"{pad}{number} ", style))

    def cursor_line(self, cursor_col: int, style: Style) -> None:
        """Mark this line as the cursor line with the cursor at ``cursor_col``."""
        if cursor_col < len(self.line):
            self._boundaries.append((cursor_col, _Rank.CURSOR, self.cursor_style))
            self._boundaries.append((cursor_col + 1, _Rank.END, None))
        else:
            self.cursor_at_end = True
        self.style_begin = style

    def search(self, matches: Iterable[Tuple[int, int]], style: Style) -> None:
        """Highlight each non-empty ``(start, end)`` match."""
        for start, end in matches:
            if start != end:
                self._boundaries.append((start, _Rank.SEARCH, style))
                self._boundaries.append((end, _Rank.END, None))

    def selection(
        self,
        current_row: int,
        start_row: int,
        start_off: int,
        end_row: int,
        end_off: int,
    ) -> None:
        """Highlight the part of a selection that falls on ``current_row``."""
        line_len = len(self.line)
        if current_row == start_row:
            if start_row == end_row:
                start, end = start_off, end_off
            else:
                self.select_at_end = True
                start, end = start_off, line_len
        elif current_row == end_row:
            start, end = 0, end_off
        elif start_row < current_row < end_row:
            self.select_at_end = True
            start, end = 0, line_len
        else:
            return
        if start != end:
            self._boundaries.append((start, _Rank.SELECT, self.select_style))
            self._boundaries.append((end, _Rank.END, None))

    def _trailing(self, spans: List[Span]) -> None:
        if self.cursor_at_end:
            spans.append(Span(" ", self.cursor_style))
        elif self.select_at_end:
            spans.append(Span(" ", self.select_style))

    def into_spans(self) -> List[Span]:
        """Render the line and its highlights as a list of spans."""
        line = self.line
        builder = DisplayTextBuilder(self.tab_len, self.mask)
        spans = list(self._spans)

        if not self._boundaries:
            built = builder.build(line)
            if built:
                spans.append(Span(built, self.style_begin))
            self._trailing(spans)
            return spans

        boundaries = sorted(self._boundaries, key=lambda b: (b[0], b[1]))
        style = self.style_begin
        start = 0
        stack: List[Style] = []

        for offset, rank, boundary_style in boundaries:
            if start < offset:
                spans.append(Span(builder.build(line[start:offset]), style))
            if rank is _Rank.END or boundary_style is None:
                style = stack.pop() if stack else self.style_begin
            else:
                stack.append(style)
                style = boundary_style
            start = offset

        if start != len(line):
            spans.append(Span(builder.build(line[start:]), style))

        self._trailing(spans)
        return spans