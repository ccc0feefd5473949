"""A graphics window model with a background layer and a foreground layer.

The background layer holds snapshots of shapes drawn with the ``draw_*`` and
``fill_*`` methods.  Later changes to the drawn object do not alter them.
The foreground layer is a ``GCompound`` aligned with the window.  Objects
added there stay live and can be moved, restacked or removed.  Interactors
and labels can also be placed in the control strips along the four sides.

Example::

    gw = GWindow(800, 600)
    gw.color = "ORANGE"
    gw.fill_oval(100, 150, 200, 200)
"""

from __future__ import annotations

import copy
import time

from cslib.gevents import EventQueue, EventType, GWindowEvent, default_queue
from cslib.gfigures import GLabel
from cslib.ginteractors import GInteractor
from cslib.gmath import cos_degrees, sin_degrees
from cslib.gobjects import GCompound, GFillable, GLine, GObject, GOval, GRect, normalize_color
from cslib.gtypes import GDimension, GPoint

__all__ = ["GWindow", "pause", "REGIONS", "ALIGNMENTS"]

REGIONS = ("NORTH", "EAST", "SOUTH", "WEST")
ALIGNMENTS = ("LEFT", "RIGHT", "CENTER")

_focused: GWindow | None = None


def _region_name(region: str) -> str:
    name = region.strip().upper()
    if name not in REGIONS:
        raise ValueError(f"unknown region {region!r}")
    return name


def _snapshot(gobj: GObject) -> GObject:
    parent = gobj.parent
    gobj.parent = None
    try:
        return copy.deepcopy(gobj)
    finally:
        gobj.parent = parent


class GWindow:
    """A graphics window of a fixed size."""

    def __init__(
        self,
        width: float = 500.0,
        height: float = 300.0,
        title: str = "Graphics Window",
        queue: EventQueue | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("window dimensions must be positive")
        self._width = float(width)
        self._height = float(height)
        self.title = title
        self.visible = True
        self.queue = queue if queue is not None else default_queue
        self._color = "#000000"
        self._closed = False
        self._top = GCompound()
        self._background: list[GObject] = []
        self._regions: dict[str, list[GObject]] = {name: [] for name in REGIONS}
        self._alignments: dict[str, str] = {name: "CENTER" for name in REGIONS}

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def size(self) -> GDimension:
        return GDimension(self._width, self._height)

    @property
    def color(self) -> str:
        """The drawing colour as ``#rrggbb``."""
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        self._color = normalize_color(value)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def has_focus(self) -> bool:
        """True if this window holds the keyboard focus."""
        return _focused is self

    @property
    def contents(self) -> list[GObject]:
        """The foreground objects from back to front."""
        return list(self._top)

    @property
    def background(self) -> list[GObject]:
        """The shapes drawn on the background layer, oldest first."""
        return list(self._background)

    def region_contents(self, region: str) -> list[GObject]:
        """The objects in a side region, in the order they were added."""
        return list(self._regions[_region_name(region)])

    def region_alignment(self, region: str) -> str:
        """The alignment of a side region."""
        return self._alignments[_region_name(region)]

    def _check_open(self, where: str) -> None:
        if self._closed:
            raise RuntimeError(f"{where}: window is closed")

    def close(self) -> None:
        """Close the window and post a window-closed event once."""
        global _focused
        if self._closed:
            return
        self._closed = True
        self.visible = False
        if _focused is self:
            _focused = None
        self.queue.post(GWindowEvent(EventType.WINDOW_CLOSED, self))

    def request_focus(self) -> None:
        """Give this window the keyboard focus."""
        global _focused
        self._check_open("request_focus")
        _focused = self

    def clear(self) -> None:
        """Erase the background and remove every foreground object."""
        self._background.clear()
        self._top.clear()

    def repaint(self) -> list[GObject]:
        """Return the display list: background first, then visible foreground."""
        return self._background + [gobj for gobj in self._top if gobj.visible]

    def _draw_shape(self, shape: GObject, filled: bool = False) -> None:
        shape.color = self._color
        if filled and isinstance(shape, GFillable):
            shape.filled = True
        self.draw(shape)

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Draw a line on the background."""
        self._draw_shape(GLine(x0, y0, x1, y1))

    def draw_polar_line(self, x: float, y: float, r: float, theta: float) -> GPoint:
        """Draw a line of length ``r`` at ``theta`` degrees and return its end."""
        x1 = x + r * cos_degrees(theta)
        y1 = y - r * sin_degrees(theta)
        self.draw_line(x, y, x1, y1)
        return GPoint(x1, y1)

    def draw_oval(self, x: float, y: float, width: float, height: float) -> None:
        """Draw the outline of an oval on the background."""
        self._draw_shape(GOval(x, y, width, height))

    def fill_oval(self, x: float, y: float, width: float, height: float) -> None:
        """Draw a filled oval on the background."""
        self._draw_shape(GOval(x, y, width, height), filled=True)

    def draw_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Draw the outline of a rectangle on the background."""
        self._draw_shape(GRect(x, y, width, height))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Draw a filled rectangle on the background."""
        self._draw_shape(GRect(x, y, width, height), filled=True)

    def draw(self, gobj: GObject) -> None:
        """Draw a snapshot of ``gobj`` on the background layer."""
        self._check_open("draw")
        self._background.append(_snapshot(gobj))

    def draw_at(self, gobj: GObject, x: float, y: float) -> None:
        """Move ``gobj`` to (x, y) and draw it on the background."""
        gobj.set_location(x, y)
        self.draw(gobj)

    def _detach(self, gobj: GObject) -> None:
        for objects in self._regions.values():
            for i, other in enumerate(objects):
                if other is gobj:
                    del objects[i]
                    return
        if gobj.parent is not None:
            gobj.parent.remove(gobj)

    def add(self, gobj: GObject) -> None:
        """Add ``gobj`` to the front of the foreground layer."""
        self._check_open("add")
        self._detach(gobj)
        self._top.add(gobj)

    def add_at(self, gobj: GObject, x: float, y: float) -> None:
        """Move ``gobj`` to (x, y) and add it to the foreground."""
        gobj.set_location(x, y)
        self.add(gobj)

    def add_to_region(self, gobj: GObject, region: str) -> None:
        """Place an interactor or label in a side control strip."""
        self._check_open("add_to_region")
        name = _region_name(region)
        if not isinstance(gobj, (GInteractor, GLabel)):
            raise TypeError("add_to_region: only interactors and labels may go in a region")
        self._detach(gobj)
        self._regions[name].append(gobj)

    def remove(self, gobj: GObject) -> None:
        """Remove ``gobj`` from the foreground or from its region."""
        for objects in self._regions.values():
            for i, other in enumerate(objects):
                if other is gobj:
                    del objects[i]
                    return
        if gobj.parent is self._top:
            self._top.remove(gobj)
            return
        raise ValueError("remove: object is not in this window")

    def get_object_at(self, x: float, y: float) -> GObject | None:
        """Return the topmost foreground object covering (x, y), or None."""
        return self._top.get_object_at(x, y)

    def set_region_alignment(self, region: str, align: str) -> None:
        """Set a side region's alignment to LEFT, RIGHT or CENTER."""
        name = _region_name(region)
        alignment = align.strip().upper()
        if alignment not in ALIGNMENTS:
            raise ValueError(f"unknown alignment {align!r}")
        self._alignments[name] = alignment

    def __enter__(self) -> GWindow:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"GWindow({self._width!r}, {self._height!r}, title={self.title!r}, "
            f"closed={self._closed})"
        )


def pause(milliseconds: float) -> None:
    """Sleep for the given number of milliseconds."""
    if milliseconds < 0:
        raise ValueError("pause: time must not be negative")
    time.sleep(milliseconds / 1000.0)