import time

import pytest

from cslib.gevents import EventQueue, EventType
from cslib.gfigures import GLabel
from cslib.ginteractors import GButton
from cslib.gobjects import GOval, GRect, normalize_color
from cslib.gtypes import GPoint
from cslib.gwindow import GWindow, pause


@pytest.fixture
def queue():
    return EventQueue()


@pytest.fixture
def gw(queue):
    return GWindow(800, 600, queue=queue)


def test_dimensions(gw):
    assert gw.width == 800
    assert gw.height == 600
    assert gw.size.width == 800


def test_bad_dimensions_raise():
    with pytest.raises(ValueError):
        GWindow(0, 100, queue=EventQueue())


def test_hello_graphics_fill_oval(gw):
    gw.color = "ORANGE"
    gw.fill_oval(100, 150, 200, 200)
    (shape,) = gw.background
    assert isinstance(shape, GOval)
    assert shape.filled is True
    assert shape.color == normalize_color("ORANGE")
    assert shape.color == "#ffc800"
    assert (shape.x, shape.y, shape.width, shape.height) == (100, 150, 200, 200)


def test_unknown_color_raises(gw):
    gw.color = "RED"
    with pytest.raises(ValueError):
        gw.color = "not a colour"
    gw.fill_rect(0, 0, 1, 1)
    (shape,) = gw.background
    assert shape.color == normalize_color("RED")


def test_draw_rect_unfilled(gw):
    gw.draw_rect(1, 2, 3, 4)
    (shape,) = gw.background
    assert isinstance(shape, GRect)
    assert shape.filled is False


def test_draw_polar_line_returns_end(gw):
    end = gw.draw_polar_line(5, 5, 10, 0)
    assert end == GPoint(15, 5)
    up = gw.draw_polar_line(0, 0, 10, 90)
    assert up.x == pytest.approx(0, abs=1e-9)
    assert up.y == pytest.approx(-10)
    assert len(gw.background) == 2


def test_draw_is_snapshot(gw):
    rect = GRect(0, 0, 10, 10)
    gw.draw_at(rect, 7, 8)
    rect.move(100, 100)
    (shape,) = gw.background
    assert (shape.x, shape.y) == (7, 8)
    assert shape is not rect


def test_add_and_get_object_at(gw):
    back = GRect(0, 0, 50, 50)
    front = GRect(10, 10, 50, 50)
    gw.add(back)
    gw.add(front)
    assert gw.get_object_at(20, 20) is front
    assert gw.get_object_at(5, 5) is back
    assert gw.get_object_at(500, 500) is None
    front.send_to_back()
    assert gw.get_object_at(20, 20) is back


def test_add_at_moves(gw):
    rect = GRect(0, 0, 5, 5)
    gw.add_at(rect, 30, 40)
    assert rect.location == GPoint(30, 40)
    assert gw.contents == [rect]


def test_repaint_lists_visible(gw):
    gw.fill_rect(0, 0, 1, 1)
    shown = GRect(0, 0, 2, 2)
    hidden = GRect(0, 0, 3, 3)
    hidden.visible = False
    gw.add(shown)
    gw.add(hidden)
    display = gw.repaint()
    assert len(display) == 2
    assert display[1] is shown


def test_clear(gw):
    gw.draw_line(0, 0, 1, 1)
    gw.add(GRect(0, 0, 1, 1))
    gw.clear()
    assert gw.background == []
    assert gw.contents == []


def test_regions(gw):
    button = GButton("Go")
    gw.add_to_region(button, "south")
    assert gw.region_contents("SOUTH") == [button]
    gw.add_to_region(button, "NORTH")
    assert gw.region_contents("SOUTH") == []
    assert gw.region_contents("NORTH") == [button]
    gw.remove(button)
    assert gw.region_contents("NORTH") == []


def test_region_accepts_label(gw):
    label = GLabel("hi")
    gw.add_to_region(label, "EAST")
    assert gw.region_contents("EAST") == [label]


def test_region_rejects_shapes(gw):
    with pytest.raises(TypeError):
        gw.add_to_region(GRect(0, 0, 1, 1), "NORTH")


def test_bad_region_raises(gw):
    with pytest.raises(ValueError):
        gw.add_to_region(GButton("x"), "UP")


def test_region_alignment(gw):
    assert gw.region_alignment("WEST") == "CENTER"
    gw.set_region_alignment("west", "left")
    assert gw.region_alignment("WEST") == "LEFT"
    with pytest.raises(ValueError):
        gw.set_region_alignment("WEST", "MIDDLE")


def test_remove_foreground_and_missing(gw):
    rect = GRect(0, 0, 1, 1)
    gw.add(rect)
    gw.remove(rect)
    assert gw.contents == []
    assert rect.parent is None
    with pytest.raises(ValueError):
        gw.remove(rect)


def test_close_posts_event_once(gw, queue):
    gw.close()
    gw.close()
    assert gw.closed is True
    assert gw.visible is False
    event = queue.get_next_event()
    assert event.event_type == EventType.WINDOW_CLOSED
    assert event.window is gw
    assert queue.get_next_event() is None


def test_closed_window_rejects_drawing(gw):
    gw.close()
    with pytest.raises(RuntimeError):
        gw.add(GRect(0, 0, 1, 1))
    with pytest.raises(RuntimeError):
        gw.draw_line(0, 0, 1, 1)


def test_context_manager_closes(queue):
    with GWindow(100, 100, queue=queue) as window:
        assert window.closed is False
    assert window.closed is True


def test_request_focus_moves_between_windows(queue):
    first = GWindow(10, 10, queue=queue)
    second = GWindow(10, 10, queue=queue)
    first.request_focus()
    assert first.has_focus and not second.has_focus
    second.request_focus()
    assert second.has_focus and not first.has_focus


def test_pause_sleeps():
    start = time.monotonic()
    result = pause(20)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed >= 0.015


def test_pause_negative_raises():
    with pytest.raises(ValueError):
        pause(-1)