"""Axis-aligned rectangle value type and bounds algebra."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from typing import ClassVar

from vectorgfx.geometry.numeric import nan_max, nan_min
from vectorgfx.geometry.point import Point
from vectorgfx.geometry.size import Size
from vectorgfx.runtime.logging import get_logger

_LOG = get_logger("geometry")


def _span(values: Iterable[float]) -> tuple[float, float]:
    extremes = tuple(values)
    return reduce(nan_min, extremes), reduce(nan_max, extremes)


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle given by its top-left ``location`` and its ``size``.

    ``Rectangle.NAN`` (all four numbers NaN) stands for "no rectangle" and is
    what empty unions and empty intersections return.
    """

    location: Point
    size: Size

    NAN: ClassVar[Rectangle]

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rectangle:
        return cls(Point(x, y), Size(width, height))

    @classmethod
    def from_corners(cls, top_left: Point, bottom_right: Point) -> Rectangle:
        """Build from two corners; inverted corners give a negative size."""
        return cls(
            top_left,
            Size(bottom_right.x - top_left.x, bottom_right.y - top_left.y),
        )

    @property
    def centre(self) -> Point:
        return Point(
            self.location.x + 0.5 * self.size.width,
            self.location.y + 0.5 * self.size.height,
        )

    @property
    def bottom_right(self) -> Point:
        return Point(self.location.x + self.size.width, self.location.y + self.size.height)

    def is_nan(self) -> bool:
        """Return whether every coordinate and dimension is NaN."""
        return (
            math.isnan(self.location.x)
            and math.isnan(self.location.y)
            and math.isnan(self.size.width)
            and math.isnan(self.size.height)
        )

    def contains(self, point: Point) -> bool:
        """Return whether a point lies inside the rectangle, edges included."""
        x, y = self.location.x, self.location.y
        return x <= point.x <= x + self.size.width and y <= point.y <= y + self.size.height

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.location.x, self.location.y, self.size.width, self.size.height)

    @staticmethod
    def union(rectangle1: Rectangle, rectangle2: Rectangle) -> Rectangle:
        """Return the bounds of both rectangles.

        Both corners of each rectangle are considered, so inputs with negative
        sizes still produce a result with non-negative size.
        """
        min_x, max_x = _span(
            (
                rectangle1.location.x,
                rectangle1.location.x + rectangle1.size.width,
                rectangle2.location.x,
                rectangle2.location.x + rectangle2.size.width,
            )
        )
        min_y, max_y = _span(
            (
                rectangle1.location.y,
                rectangle1.location.y + rectangle1.size.height,
                rectangle2.location.y,
                rectangle2.location.y + rectangle2.size.height,
            )
        )
        return Rectangle.from_xywh(min_x, min_y, max_x - min_x, max_y - min_y)

    @staticmethod
    def union_all(rectangles: Iterable[Rectangle]) -> Rectangle:
        """Fold ``union`` over the input in one pass; empty input gives ``Rectangle.NAN``."""
        iterator = iter(rectangles)
        result = next(iterator, None)
        if result is None:
            _LOG.debug("union_empty_input")
            return Rectangle.NAN
        for rectangle in iterator:
            result = Rectangle.union(result, rectangle)
        return result

    @staticmethod
    def union_of(*rectangles: Rectangle) -> Rectangle:
        """Variadic form of ``union_all``."""
        return Rectangle.union_all(rectangles)

    @staticmethod
    def intersection(rectangle1: Rectangle, rectangle2: Rectangle) -> Rectangle:
        """Return the overlap of two rectangles, or ``Rectangle.NAN`` if they are disjoint.

        Sizes are taken as non-negative; a rectangle with a negative size is
        not flipped first, unlike in ``union``.
        """
        x0 = nan_max(rectangle1.location.x, rectangle2.location.x)
        x1 = nan_min(
            rectangle1.location.x + rectangle1.size.width,
            rectangle2.location.x + rectangle2.size.width,
        )
        y0 = nan_max(rectangle1.location.y, rectangle2.location.y)
        y1 = nan_min(
            rectangle1.location.y + rectangle1.size.height,
            rectangle2.location.y + rectangle2.size.height,
        )
        if x1 >= x0 and y1 >= y0:
            return Rectangle.from_xywh(x0, y0, x1 - x0, y1 - y0)
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug(
                "intersection_empty first=%s second=%s",
                rectangle1.as_tuple(),
                rectangle2.as_tuple(),
            )
        return Rectangle.NAN


Rectangle.NAN = Rectangle.from_xywh(math.nan, math.nan, math.nan, math.nan)
NAN_RECTANGLE = Rectangle.NAN


__all__ = ["NAN_RECTANGLE", "Rectangle"]
