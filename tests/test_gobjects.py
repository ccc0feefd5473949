import re

import pytest

from cslib.gobjects import (
    G3DRect,
    GArc,
    GCompound,
    GLine,
    GOval,
    GRect,
    GRoundRect,
    normalize_color,
)
from cslib.gtypes import GDimension, GPoint, GRectangle


def test_normalize_color_ignores_case_spaces_and_underscores():
    assert normalize_color("Dark Gray") == normalize_color("DARK_GRAY")
    assert normalize_color("darkgray") == normalize_color("DARK_GRAY")


def test_normalize_color_format_and_hex_input():
    assert re.fullmatch(r"#[0-9a-f]{6}", normalize_color("Orange"))
    assert normalize_color("RED") == normalize_color("#FF0000")
    assert normalize_color("#AbCdEf") == "#abcdef"


@pytest.mark.parametrize("bad", ["chartreuse", "#12345", "#zzzzzz", ""])
def test_normalize_color_rejects_bad_values(bad):
    with pytest.raises(ValueError):
        normalize_color(bad)


def test_color_defaults_and_setting():
    rect = GRect(0, 0, 10, 10)
    assert rect.color == normalize_color("BLACK")
    rect.color = "blue"
    assert rect.color == normalize_color("BLUE")
    assert rect.fill_color == ""
    rect.fill_color = "yellow"
    assert rect.fill_color == normalize_color("YELLOW")
    rect.fill_color = ""
    assert rect.fill_color == ""


def test_rect_bounds_size_and_type():
    rect = GRect(10, 20, 30, 40)
    assert rect.bounds() == GRectangle(10, 20, 30, 40)
    assert rect.size == GDimension(30, 40)
    assert rect.type == "GRect"
    assert not rect.filled


def test_rect_contains_edges():
    rect = GRect(10, 20, 30, 40)
    assert rect.contains(10, 20)
    assert rect.contains(25, 30)
    assert not rect.contains(40, 60)
    assert not rect.contains(9, 30)


def test_move_and_set_bounds():
    rect = GRect(1, 2, 3, 4)
    rect.move(5, 6)
    assert rect.location == GPoint(6, 8)
    rect.set_bounds(7, 8, 9, 10)
    assert rect.bounds() == GRectangle(7, 8, 9, 10)
    rect.set_size(11, 12)
    assert rect.bounds() == GRectangle(7, 8, 11, 12)


def test_round_and_3d_rect_attributes():
    assert GRoundRect(0, 0, 10, 10, 4).corner == 4
    box = G3DRect(0, 0, 10, 10, True)
    assert box.raised is True
    assert box.bounds() == GRectangle(0, 0, 10, 10)


def test_oval_contains():
    oval = GOval(0, 0, 100, 50)
    assert oval.type == "GOval"
    assert oval.contains(50, 25)
    assert not oval.contains(1, 1)
    assert not GOval(0, 0, 0, 10).contains(0, 5)


def test_line_points_and_bounds():
    line = GLine(10, 10, 0, 0)
    assert line.bounds() == GRectangle(0, 0, 10, 10)
    assert line.start_point() == GPoint(10, 10)
    assert line.end_point() == GPoint(0, 0)


def test_line_set_points_keep_other_end():
    line = GLine(1, 2, 3, 4)
    line.set_start_point(5, 6)
    assert line.start_point() == GPoint(5, 6)
    assert line.end_point() == GPoint(3, 4)
    line.set_end_point(7, 8)
    assert line.start_point() == GPoint(5, 6)
    assert line.end_point() == GPoint(7, 8)


def test_line_contains_within_tolerance():
    line = GLine(0, 0, 10, 0)
    assert line.contains(5, 1)
    assert not line.contains(5, 3)
    assert line.contains(0, 0)


def test_full_arc_bounds_match_frame():
    arc = GArc(0, 0, 100, 100, 0, 360)
    assert arc.bounds() == arc.frame_rectangle()
    arc.set_frame_rectangle(5, 6, 7, 8)
    assert arc.frame_rectangle() == GRectangle(5, 6, 7, 8)


def test_arc_start_and_end_points_lie_on_frame_ellipse():
    arc = GArc(0, 0, 100, 100, 0, 90)
    start = arc.start_point()
    assert start.x == pytest.approx(100)
    assert start.y == pytest.approx(50)
    frame = arc.frame_rectangle()
    for point in (arc.start_point(), arc.end_point()):
        dx = (point.x - (frame.x + frame.width / 2)) / (frame.width / 2)
        dy = (point.y - (frame.y + frame.height / 2)) / (frame.height / 2)
        assert dx * dx + dy * dy == pytest.approx(1.0)


def test_filled_arc_contains_only_its_sweep():
    arc = GArc(0, 0, 100, 100, 0, 90)
    arc.filled = True
    assert arc.contains(60, 40)
    assert not arc.contains(40, 60)
    arc.filled = False
    assert not arc.contains(60, 40)
    assert arc.contains(arc.start_point().x, arc.start_point().y)


def test_compound_add_sets_parent_and_relative_hit_testing():
    comp = GCompound()
    comp.set_location(100, 100)
    rect = GRect(0, 0, 10, 10)
    comp.add(rect)
    assert rect.parent is comp
    assert comp.get_object_at(105, 105) is rect
    assert comp.get_object_at(5, 5) is None
    assert comp.bounds() == GRectangle(100, 100, 10, 10)


def test_compound_topmost_object_wins():
    comp = GCompound()
    back = GRect(0, 0, 10, 10)
    front = GRect(0, 0, 10, 10)
    comp.add(back)
    comp.add(front)
    assert comp.get_object_at(5, 5) is front
    front.send_to_back()
    assert comp.get_object_at(5, 5) is back


def test_z_order_operations():
    comp = GCompound()
    a, b, c = GRect(0, 0, 1, 1), GRect(0, 0, 1, 1), GRect(0, 0, 1, 1)
    for gobj in (a, b, c):
        comp.add(gobj)
    a.send_forward()
    assert list(comp) == [b, a, c]
    c.send_forward()
    assert list(comp) == [b, a, c]
    c.send_backward()
    assert list(comp) == [b, c, a]
    b.send_to_front()
    assert list(comp) == [c, a, b]
    b.send_to_back()
    assert list(comp) == [b, c, a]


def test_compound_remove_and_errors():
    comp = GCompound()
    rect = GRect(0, 0, 1, 1)
    with pytest.raises(ValueError):
        comp.remove(rect)
    comp.add(rect)
    comp.remove(rect)
    assert rect.parent is None
    assert len(comp) == 0
    with pytest.raises(ValueError):
        comp.add(comp)


def test_compound_add_moves_object_between_parents():
    first, second = GCompound(), GCompound()
    oval = GOval(0, 0, 4, 4)
    first.add(oval)
    second.add(oval)
    assert oval not in first
    assert oval in second
    assert oval.parent is second


def test_compound_cannot_contain_ancestor():
    outer, inner = GCompound(), GCompound()
    outer.add(inner)
    with pytest.raises(ValueError):
        inner.add(outer)