"""Value types for points, dimensions and rectangles."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["GPoint", "GDimension", "GRectangle"]


@dataclass(frozen=True)
class GPoint:
    """A location on the graphics plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class GDimension:
    """The size of a graphical object."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class GRectangle:
    """A bounding box given by its corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def is_empty(self) -> bool:
        """Return True if the rectangle covers no area."""
        return self.width <= 0 or self.height <= 0

    def contains(self, point: GPoint) -> bool:
        """Return True if the point lies inside the rectangle.

        The left and top edges are inside, the right and bottom edges are not.
        """
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def __contains__(self, point: GPoint) -> bool:
        return self.contains(point)

    @property
    def location(self) -> GPoint:
        """The upper-left corner of the rectangle."""
        return GPoint(self.x, self.y)

    @property
    def size(self) -> GDimension:
        """The width and height of the rectangle."""
        return GDimension(self.width, self.height)