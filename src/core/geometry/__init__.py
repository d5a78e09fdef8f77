"""
Geometry primitives on exact coordinates.

Contains Point, Vector and the axis-aligned Rectangle used for positions
and collision checks.
"""

from src.core.geometry.point import (
    COMPONENT_SEPARATOR,
    VECTOR_TRIM_CHARS,
    GeometryParseError,
    Point,
    Vector,
)
from src.core.geometry.rectangle import (
    CORNER_COUNT,
    RECTANGLE_POINT_SEPARATOR,
    Rectangle,
)

__all__ = [
    # Point & Vector
    "COMPONENT_SEPARATOR",
    "VECTOR_TRIM_CHARS",
    "GeometryParseError",
    "Point",
    "Vector",
    # Rectangle
    "CORNER_COUNT",
    "RECTANGLE_POINT_SEPARATOR",
    "Rectangle",
]
