"""Angle-based helpers for graphical geometry."""

import math

PI = 3.14159265358979323846
E = 2.71828182845904523536

__all__ = [
    "PI",
    "E",
    "sin_degrees",
    "cos_degrees",
    "tan_degrees",
    "to_degrees",
    "to_radians",
    "vector_distance",
    "vector_angle",
]


def sin_degrees(angle: float) -> float:
    """Return the sine of an angle given in degrees."""
    return math.sin(to_radians(angle))


def cos_degrees(angle: float) -> float:
    """Return the cosine of an angle given in degrees."""
    return math.cos(to_radians(angle))


def tan_degrees(angle: float) -> float:
    """Return the tangent of an angle given in degrees."""
    return math.tan(to_radians(angle))


def to_degrees(radians: float) -> float:
    """Convert an angle from radians to degrees."""
    return radians * 180 / PI


def to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return degrees * PI / 180


def vector_distance(x: float, y: float) -> float:
    """Return the distance from the origin to the point (x, y)."""
    return math.hypot(x, y)


def vector_angle(x: float, y: float) -> float:
    """Return the angle in degrees from the origin to (x, y).

    The y axis points downwards, as in graphics coordinates, so a point
    above the origin (negative y) lies at a positive angle.
    """
    if x == 0 and y == 0:
        return 0.0
    return to_degrees(math.atan2(-y, x))