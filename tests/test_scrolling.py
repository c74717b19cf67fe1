import pytest

from tuiarea.scrolling import ScrollDelta, Scrolling, scroll


class FakeViewport:
    def __init__(self, height=8, width=24):
        self.height = height
        self.width = width
        self.calls = []

    def rect(self):
        return (0, 0, self.width, self.height)

    def scroll(self, rows, cols):
        self.calls.append((rows, cols))


def test_delta_and_tuple():
    vp = FakeViewport()
    scroll(ScrollDelta(rows=2, cols=0), vp)
    scroll((1, 0), vp)
    assert vp.calls == [(2, 0), (1, 0)]


def test_tuple_is_same_as_delta():
    a, b = FakeViewport(), FakeViewport()
    scroll((3, -2), a)
    ScrollDelta(3, -2).apply(b)
    assert a.calls == b.calls == [(3, -2)]


@pytest.mark.parametrize(
    "kind, expected",
    [
        (Scrolling.PAGE_DOWN, (8, 0)),
        (Scrolling.PAGE_UP, (-8, 0)),
        (Scrolling.HALF_PAGE_DOWN, (4, 0)),
        (Scrolling.HALF_PAGE_UP, (-4, 0)),
    ],
)
def test_page_scrolling_uses_viewport_height(kind, expected):
    vp = FakeViewport(height=8)
    scroll(kind, vp)
    assert vp.calls == [expected]


def test_half_page_truncates_toward_zero_for_odd_height():
    vp = FakeViewport(height=7)
    Scrolling.HALF_PAGE_DOWN.apply(vp)
    Scrolling.HALF_PAGE_UP.apply(vp)
    assert vp.calls == [(3, 0), (-3, 0)]


def test_page_down_then_up_cancel_out():
    vp = FakeViewport(height=11)
    scroll(Scrolling.PAGE_DOWN, vp)
    scroll(Scrolling.PAGE_UP, vp)
    assert sum(r for r, _ in vp.calls) == 0


def test_scroll_rejects_unknown_value():
    with pytest.raises(TypeError):
        scroll("down", FakeViewport())


def test_scroll_rejects_wrong_tuple_length():
    with pytest.raises(TypeError):
        scroll((1, 2, 3), FakeViewport())


@pytest.mark.parametrize("rows", [2**15, -(2**15) - 1])
def test_delta_out_of_range(rows):
    with pytest.raises(ValueError):
        ScrollDelta(rows, 0)


def test_delta_requires_integers():
    with pytest.raises(TypeError):
        ScrollDelta(1.5, 0)