"""Foundational 2D value types: points, sizes and axis-aligned rectangles."""

from vectorgfx.geometry.point import Point
from vectorgfx.geometry.rectangle import NAN_RECTANGLE, Rectangle
from vectorgfx.geometry.size import Size

__all__ = ["NAN_RECTANGLE", "Point", "Rectangle", "Size"]
