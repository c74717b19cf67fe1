"""Ways of scrolling a text area's viewport."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol, Tuple, Union

_I16_MIN = -(2**15)
_I16_MAX = 2**15 - 1


class Viewport(Protocol):
    """What scrolling needs from a viewport."""

    def rect(self) -> Tuple[int, int, int, int]:
        """Return ``(x, y, width, height)`` of the visible area."""
        ...

    def scroll(self, rows: int, cols: int) -> None:
        """Move the visible area by the given amounts."""
        ...


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


class Scrolling(enum.Enum):
    """Page-wise scrolling. The cursor only moves once it leaves the viewport."""

    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    HALF_PAGE_DOWN = "half_page_down"
    HALF_PAGE_UP = "half_page_up"

    def apply(self, viewport: Viewport) -> None:
        """Scroll ``viewport`` by a page or half a page."""
        _, _, _, height = viewport.rect()
        rows = {
            Scrolling.PAGE_DOWN: height,
            Scrolling.PAGE_UP: -height,
            Scrolling.HALF_PAGE_DOWN: _trunc_div(height, 2),
            Scrolling.HALF_PAGE_UP: _trunc_div(-height, 2),
        }[self]
        viewport.scroll(rows, 0)


@dataclass(frozen=True)
class ScrollDelta:
    """Scroll by rows and columns; positive values go down and right."""

    rows: int = 0
    cols: int = 0

    def __post_init__(self) -> None:
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer, got {value!r}")
            if not _I16_MIN <= value <= _I16_MAX:
                raise ValueError(f"{name} out of range: {value}")

    def apply(self, viewport: Viewport) -> None:
        """Scroll ``viewport`` by this delta."""
        viewport.scroll(self.rows, self.cols)


ScrollLike = Union[Scrolling, ScrollDelta, Tuple[int, int]]


def _coerce(scrolling: ScrollLike) -> Union[Scrolling, ScrollDelta]:
    if isinstance(scrolling, (Scrolling, ScrollDelta)):
        return scrolling
    if isinstance(scrolling, tuple) and len(scrolling) == 2:
        rows, cols = scrolling
        return ScrollDelta(rows, cols)
    raise TypeError(f"cannot scroll by {scrolling!r}")


def scroll(scrolling: ScrollLike, viewport: Viewport) -> None:
    """Apply ``scrolling`` to ``viewport``; a ``(rows, cols)`` pair means a delta."""
    _coerce(scrolling).apply(viewport)