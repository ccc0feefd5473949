"""Labels, images and polygons for the graphics library.

A ``GLabel`` is located at the origin of its baseline.  A ``GImage`` takes
its size from an image file.  The vertices of a ``GPolygon`` are given
relative to the polygon's own location.
"""

from __future__ import annotations

import os

from PIL import Image

from cslib.gmath import cos_degrees, sin_degrees
from cslib.gobjects import GFillable, GObject, GResizable
from cslib.gtypes import GPoint, GRectangle

__all__ = ["GLabel", "GImage", "GPolygon"]

DEFAULT_FONT_FAMILY = "Dialog"
DEFAULT_FONT_STYLE = "PLAIN"
DEFAULT_FONT_SIZE = 13.0

_STYLES = ("PLAIN", "BOLD", "ITALIC", "BOLDITALIC")

# Nominal metrics, as fractions of the point size, used to lay out text
# without a rendering back end.
_ASCENT_RATIO = 0.8
_DESCENT_RATIO = 0.2
_CHAR_WIDTH_RATIO = 0.6

_IMAGE_DIRECTORY = "images"


def _parse_size(text: str, font: str) -> float:
    try:
        size = float(text)
    except ValueError:
        raise ValueError(f"bad font size in {font!r}") from None
    if size <= 0:
        raise ValueError(f"font size must be positive in {font!r}")
    return size


def _parse_style(text: str, font: str) -> str:
    style = text.upper()
    if style not in _STYLES:
        raise ValueError(f"unknown font style in {font!r}")
    return style


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


class GLabel(GObject):
    """A text string drawn with its baseline origin at (x, y)."""

    def __init__(self, label: str = "", x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.label = str(label)
        self._family = DEFAULT_FONT_FAMILY
        self._style = DEFAULT_FONT_STYLE
        self._size = DEFAULT_FONT_SIZE

    @property
    def font(self) -> str:
        """The font as ``family-style-size``."""
        return f"{self._family}-{self._style}-{self._size:g}"

    @font.setter
    def font(self, value: str) -> None:
        self.set_font(value)

    def set_font(self, font: str) -> None:
        """Change the font given as ``family-style-size``.

        Style and size are optional; a missing part or ``*`` keeps the
        current value.  With two parts, a numeric second part is the size.
        """
        parts = font.strip().split("-")
        if len(parts) > 3 or not parts[0]:
            raise ValueError(f"malformed font {font!r}")
        family, style, size = self._family, self._style, self._size
        if parts[0] != "*":
            family = parts[0]
        if len(parts) == 2:
            second = parts[1]
            if second not in ("", "*"):
                if _is_number(second):
                    size = _parse_size(second, font)
                else:
                    style = _parse_style(second, font)
        elif len(parts) == 3:
            if parts[1] not in ("", "*"):
                style = _parse_style(parts[1], font)
            if parts[2] not in ("", "*"):
                size = _parse_size(parts[2], font)
        self._family, self._style, self._size = family, style, size

    def font_ascent(self) -> float:
        """The distance characters in this font extend above the baseline."""
        return self._size * _ASCENT_RATIO

    def font_descent(self) -> float:
        """The distance characters in this font extend below the baseline."""
        return self._size * _DESCENT_RATIO

    def bounds(self) -> GRectangle:
        ascent = self.font_ascent()
        return GRectangle(
            self.x,
            self.y - ascent,
            len(self.label) * self._size * _CHAR_WIDTH_RATIO,
            ascent + self.font_descent(),
        )

    def __repr__(self) -> str:
        return f"GLabel({self.label!r}, x={self.x!r}, y={self.y!r}, font={self.font!r})"


def _find_image(filename: str) -> str:
    candidates = [filename]
    if not os.path.isabs(filename):
        candidates.append(os.path.join(_IMAGE_DIRECTORY, filename))
    for candidate in candidates:
        if os.path.isfile(candidate):
            return candidate
    raise FileNotFoundError(f"cannot find image file {filename!r}")


class GImage(GResizable):
    """An image loaded from a file in the current or ``images`` directory."""

    def __init__(self, filename: str, x: float = 0.0, y: float = 0.0) -> None:
        path = _find_image(filename)
        with Image.open(path) as image:
            width, height = image.size
        super().__init__(x, y, width, height)
        self.filename = filename
        self.path = path

    def __repr__(self) -> str:
        return f"GImage({self.filename!r}, x={self.x!r}, y={self.y!r})"


class GPolygon(GFillable):
    """A polygon whose vertices are relative to its location."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self._vertices: list[GPoint] = []
        self._cx = 0.0
        self._cy = 0.0

    def add_vertex(self, x: float, y: float) -> None:
        """Add a vertex at (x, y) relative to the polygon's origin."""
        self._cx = float(x)
        self._cy = float(y)
        self._vertices.append(GPoint(self._cx, self._cy))

    def add_edge(self, dx: float, dy: float) -> None:
        """Add a vertex displaced by (dx, dy) from the last one."""
        self.add_vertex(self._cx + dx, self._cy + dy)

    def add_polar_edge(self, r: float, theta: float) -> None:
        """Add an edge of length ``r`` at ``theta`` degrees counterclockwise."""
        self.add_edge(r * cos_degrees(theta), -r * sin_degrees(theta))

    def vertices(self) -> list[GPoint]:
        """Return the vertices in the order they were added."""
        return list(self._vertices)

    def bounds(self) -> GRectangle:
        if not self._vertices:
            return GRectangle(self.x, self.y, 0.0, 0.0)
        xs = [p.x for p in self._vertices]
        ys = [p.y for p in self._vertices]
        return GRectangle(
            self.x + min(xs), self.y + min(ys), max(xs) - min(xs), max(ys) - min(ys)
        )

    def contains(self, x: float, y: float) -> bool:
        """Return True if (x, y) is inside, using the even-odd rule."""
        points = self._vertices
        if len(points) < 3:
            return False
        px, py = x - self.x, y - self.y
        inside = False
        for prev, cur in zip(points[-1:] + points[:-1], points):
            if (cur.y > py) != (prev.y > py):
                crossing = prev.x + (py - prev.y) * (cur.x - prev.x) / (cur.y - prev.y)
                if px < crossing:
                    inside = not inside
        return inside

    def __len__(self) -> int:
        return len(self._vertices)