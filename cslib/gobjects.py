"""Graphical shapes positioned on a plane whose y axis points downwards.

Objects can be grouped in a ``GCompound``, whose children are placed
relative to the compound's own location.  Colours are given by name
(case, spaces and underscores ignored) or as ``#rrggbb`` and are always
reported as ``#rrggbb``.
"""

from __future__ import annotations

import math
import re
import string
from collections.abc import Iterator

from cslib.gmath import cos_degrees, sin_degrees, to_degrees
from cslib.gtypes import GDimension, GPoint, GRectangle

__all__ = [
    "normalize_color",
    "GObject",
    "GFillable",
    "GResizable",
    "GRect",
    "GRoundRect",
    "G3DRect",
    "GOval",
    "GLine",
    "GArc",
    "GCompound",
]

LINE_TOLERANCE = 1.5
ARC_TOLERANCE = 2.5

_COLORS = {
    "BLACK": 0x000000,
    "BLUE": 0x0000FF,
    "CYAN": 0x00FFFF,
    "DARKGRAY": 0x595959,
    "GRAY": 0x999999,
    "GREEN": 0x00FF00,
    "LIGHTGRAY": 0xBFBFBF,
    "MAGENTA": 0xFF00FF,
    "ORANGE": 0xFFC800,
    "PINK": 0xFFAFAF,
    "RED": 0xFF0000,
    "WHITE": 0xFFFFFF,
    "YELLOW": 0xFFFF00,
}


def normalize_color(color: str) -> str:
    """Return ``color`` in the form ``#rrggbb``; unknown colours raise ValueError."""
    text = color.strip()
    if text.startswith("#"):
        digits = text[1:]
        if len(digits) == 6 and all(ch in string.hexdigits for ch in digits):
            return "#" + digits.lower()
        raise ValueError(f"malformed color {color!r}")
    key = re.sub(r"[\s_]", "", text).upper()
    try:
        return f"#{_COLORS[key]:06x}"
    except KeyError:
        raise ValueError(f"unknown color {color!r}") from None


def _dsq(x0: float, y0: float, x1: float, y1: float) -> float:
    return (x0 - x1) ** 2 + (y0 - y1) ** 2


class GObject:
    """Base of every graphical object, located at (x, y)."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.visible = True
        self.parent: GCompound | None = None
        self._color = "#000000"

    @property
    def color(self) -> str:
        """The drawing colour as ``#rrggbb``."""
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        self._color = normalize_color(value)

    @property
    def type(self) -> str:
        """The name of the object's kind, such as ``"GOval"``."""
        return type(self).__name__

    @property
    def location(self) -> GPoint:
        return GPoint(self.x, self.y)

    @property
    def width(self) -> float:
        return self.bounds().width

    @property
    def height(self) -> float:
        return self.bounds().height

    @property
    def size(self) -> GDimension:
        box = self.bounds()
        return GDimension(box.width, box.height)

    def set_location(self, x: float, y: float) -> None:
        """Move the object to (x, y)."""
        self.x = float(x)
        self.y = float(y)

    def move(self, dx: float, dy: float) -> None:
        """Move the object by the given displacements."""
        self.x += dx
        self.y += dy

    def bounds(self) -> GRectangle:
        """Return the smallest rectangle covering the object."""
        return GRectangle(self.x, self.y, 0.0, 0.0)

    def contains(self, x: float, y: float) -> bool:
        """Return True if (x, y) lies inside the object."""
        return self.bounds().contains(GPoint(x, y))

    def _siblings(self) -> list[GObject] | None:
        return None if self.parent is None else self.parent._contents

    def send_forward(self) -> None:
        """Move one step towards the front; nothing happens at the front."""
        siblings = self._siblings()
        if siblings is None:
            return
        i = siblings.index(self)
        if i < len(siblings) - 1:
            siblings[i], siblings[i + 1] = siblings[i + 1], siblings[i]

    def send_to_front(self) -> None:
        """Move to the front of the stacking order."""
        siblings = self._siblings()
        if siblings is not None:
            siblings.remove(self)
            siblings.append(self)

    def send_backward(self) -> None:
        """Move one step towards the back; nothing happens at the back."""
        siblings = self._siblings()
        if siblings is None:
            return
        i = siblings.index(self)
        if i > 0:
            siblings[i], siblings[i - 1] = siblings[i - 1], siblings[i]

    def send_to_back(self) -> None:
        """Move to the back of the stacking order."""
        siblings = self._siblings()
        if siblings is not None:
            siblings.remove(self)
            siblings.insert(0, self)

    def __repr__(self) -> str:
        box = self.bounds()
        return (
            f"{self.type}(x={box.x!r}, y={box.y!r}, "
            f"width={box.width!r}, height={box.height!r})"
        )


class GFillable(GObject):
    """An object whose interior can be filled."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.filled = False
        self._fill_color = ""

    @property
    def fill_color(self) -> str:
        """The fill colour as ``#rrggbb``, or ``""`` if none has been set."""
        return self._fill_color

    @fill_color.setter
    def fill_color(self, value: str) -> None:
        self._fill_color = normalize_color(value) if value else ""


class GResizable(GObject):
    """An object whose size is given by a width and height."""

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        super().__init__(x, y)
        self._width = float(width)
        self._height = float(height)

    def set_size(self, width: float, height: float) -> None:
        """Change the width and height."""
        self._width = float(width)
        self._height = float(height)

    def set_bounds(self, x: float, y: float, width: float, height: float) -> None:
        """Change the location and size together."""
        self.set_location(x, y)
        self.set_size(width, height)

    def bounds(self) -> GRectangle:
        return GRectangle(self.x, self.y, self._width, self._height)


class GRect(GResizable, GFillable):
    """A rectangular box, unfilled by default."""


class GRoundRect(GRect):
    """A rectangle with rounded corners; ``corner`` is the corner arc diameter."""

    def __init__(
        self, x: float, y: float, width: float, height: float, corner: float = 10.0
    ) -> None:
        super().__init__(x, y, width, height)
        self.corner = float(corner)


class G3DRect(GRect):
    """A rectangle that appears raised or lowered."""

    def __init__(
        self, x: float, y: float, width: float, height: float, raised: bool = False
    ) -> None:
        super().__init__(x, y, width, height)
        self.raised = bool(raised)


class GOval(GResizable, GFillable):
    """An oval inscribed in its bounding box, unfilled by default."""

    def contains(self, x: float, y: float) -> bool:
        rx = self._width / 2
        ry = self._height / 2
        if rx == 0 or ry == 0:
            return False
        dx = x - (self.x + rx)
        dy = y - (self.y + ry)
        return (dx * dx) / (rx * rx) + (dy * dy) / (ry * ry) <= 1.0


class GLine(GObject):
    """A line segment from (x0, y0) to (x1, y1); its location is the start."""

    def __init__(self, x0: float, y0: float, x1: float, y1: float) -> None:
        super().__init__(x0, y0)
        self._dx = float(x1) - float(x0)
        self._dy = float(y1) - float(y0)

    def set_start_point(self, x: float, y: float) -> None:
        """Move the start point, leaving the end point where it is."""
        self._dx += self.x - x
        self._dy += self.y - y
        self.set_location(x, y)

    def set_end_point(self, x: float, y: float) -> None:
        """Move the end point, leaving the start point where it is."""
        self._dx = x - self.x
        self._dy = y - self.y

    def start_point(self) -> GPoint:
        return GPoint(self.x, self.y)

    def end_point(self) -> GPoint:
        return GPoint(self.x + self._dx, self.y + self._dy)

    def bounds(self) -> GRectangle:
        x0 = self.x + self._dx if self._dx < 0 else self.x
        y0 = self.y + self._dy if self._dy < 0 else self.y
        return GRectangle(x0, y0, abs(self._dx), abs(self._dy))

    def contains(self, x: float, y: float) -> bool:
        x0, y0 = self.x, self.y
        x1, y1 = x0 + self._dx, y0 + self._dy
        t_squared = LINE_TOLERANCE * LINE_TOLERANCE
        if _dsq(x, y, x0, y0) < t_squared or _dsq(x, y, x1, y1) < t_squared:
            return True
        if not min(x0, x1) - LINE_TOLERANCE <= x <= max(x0, x1) + LINE_TOLERANCE:
            return False
        if not min(y0, y1) - LINE_TOLERANCE <= y <= max(y0, y1) + LINE_TOLERANCE:
            return False
        length_sq = _dsq(x0, y0, x1, y1)
        if length_sq == 0:
            return False
        u = ((x - x0) * (x1 - x0) + (y - y0) * (y1 - y0)) / length_sq
        return _dsq(x, y, x0 + u * (x1 - x0), y0 + u * (y1 - y0)) < t_squared


class GArc(GFillable):
    """An elliptical arc framed by a rectangle.

    Angles are in degrees counterclockwise from the +x axis; negative
    values run clockwise.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        start: float,
        sweep: float,
    ) -> None:
        super().__init__(x, y)
        self._frame_width = float(width)
        self._frame_height = float(height)
        self.start_angle = float(start)
        self.sweep_angle = float(sweep)

    def set_frame_rectangle(
        self, x: float, y: float, width: float, height: float
    ) -> None:
        """Change the rectangle that frames the arc."""
        self.set_location(x, y)
        self._frame_width = float(width)
        self._frame_height = float(height)

    def frame_rectangle(self) -> GRectangle:
        return GRectangle(self.x, self.y, self._frame_width, self._frame_height)

    def _point_at(self, angle: float) -> GPoint:
        rx = self._frame_width / 2
        ry = self._frame_height / 2
        return GPoint(
            self.x + rx + rx * cos_degrees(angle),
            self.y + ry - ry * sin_degrees(angle),
        )

    def start_point(self) -> GPoint:
        return self._point_at(self.start_angle)

    def end_point(self) -> GPoint:
        return self._point_at(self.start_angle + self.sweep_angle)

    def _contains_angle(self, theta: float) -> bool:
        start = min(self.start_angle, self.start_angle + self.sweep_angle)
        sweep = abs(self.sweep_angle)
        if sweep >= 360:
            return True
        theta = 360 - math.fmod(-theta, 360) if theta < 0 else math.fmod(theta, 360)
        start = 360 - math.fmod(-start, 360) if start < 0 else math.fmod(start, 360)
        if start + sweep > 360:
            return theta >= start or theta <= start + sweep - 360
        return start <= theta <= start + sweep

    def bounds(self) -> GRectangle:
        rx = self._frame_width / 2
        ry = self._frame_height / 2
        cx = self.x + rx
        cy = self.y + ry
        p1 = self.start_point()
        p2 = self.end_point()
        x_min, x_max = min(p1.x, p2.x), max(p1.x, p2.x)
        y_min, y_max = min(p1.y, p2.y), max(p1.y, p2.y)
        if self._contains_angle(0):
            x_max = cx + rx
        if self._contains_angle(90):
            y_min = cy - ry
        if self._contains_angle(180):
            x_min = cx - rx
        if self._contains_angle(270):
            y_max = cy + ry
        if self.filled:
            x_min, y_min = min(x_min, cx), min(y_min, cy)
            x_max, y_max = max(x_max, cx), max(y_max, cy)
        return GRectangle(x_min, y_min, x_max - x_min, y_max - y_min)

    def contains(self, x: float, y: float) -> bool:
        rx = self._frame_width / 2
        ry = self._frame_height / 2
        if rx == 0 or ry == 0:
            return False
        dx = x - (self.x + rx)
        dy = y - (self.y + ry)
        r = (dx * dx) / (rx * rx) + (dy * dy) / (ry * ry)
        if self.filled:
            if r > 1.0:
                return False
        elif abs(1.0 - r) > ARC_TOLERANCE / ((rx + ry) / 2):
            return False
        return self._contains_angle(to_degrees(math.atan2(-dy, dx)))


class GCompound(GObject):
    """A group of objects drawn relative to the compound's location.

    Points passed to ``contains`` and ``get_object_at`` are in the frame
    the compound itself is placed in.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self._contents: list[GObject] = []

    def add(self, gobj: GObject) -> None:
        """Add ``gobj`` at the front, taking it from any previous parent."""
        ancestor: GObject | None = self
        while ancestor is not None:
            if ancestor is gobj:
                raise ValueError("add: a compound cannot contain itself")
            ancestor = ancestor.parent
        if gobj.parent is not None:
            gobj.parent.remove(gobj)
        self._contents.append(gobj)
        gobj.parent = self

    def remove(self, gobj: GObject) -> None:
        """Remove ``gobj``; raises ValueError if it is not a child."""
        if gobj not in self._contents:
            raise ValueError("remove: object is not in this compound")
        self._contents.remove(gobj)
        gobj.parent = None

    def get_object_at(self, x: float, y: float) -> GObject | None:
        """Return the topmost child covering (x, y), or None."""
        lx, ly = x - self.x, y - self.y
        for gobj in reversed(self._contents):
            if gobj.contains(lx, ly):
                return gobj
        return None

    def contains(self, x: float, y: float) -> bool:
        return self.get_object_at(x, y) is not None

    def bounds(self) -> GRectangle:
        if not self._contents:
            return GRectangle(self.x, self.y, 0.0, 0.0)
        boxes = [gobj.bounds() for gobj in self._contents]
        x_min = min(b.x for b in boxes)
        y_min = min(b.y for b in boxes)
        x_max = max(b.x + b.width for b in boxes)
        y_max = max(b.y + b.height for b in boxes)
        return GRectangle(
            self.x + x_min, self.y + y_min, x_max - x_min, y_max - y_min
        )

    def clear(self) -> None:
        """Remove every child."""
        for gobj in self._contents:
            gobj.parent = None
        self._contents.clear()

    def __iter__(self) -> Iterator[GObject]:
        """Iterate over the children from back to front."""
        return iter(list(self._contents))

    def __len__(self) -> int:
        return len(self._contents)

    def __contains__(self, gobj: object) -> bool:
        return gobj in self._contents