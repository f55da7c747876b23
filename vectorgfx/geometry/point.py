"""Two-component point/vector value type."""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from vectorgfx.geometry.numeric import NAN, ieee_divide, nan_max, nan_min, tolerant_equal
from vectorgfx.runtime.config import get_geometry_config
from vectorgfx.runtime.errors import ArrayLengthError, ArrayValueError, NullArgumentError
from vectorgfx.runtime.logging import get_logger

if TYPE_CHECKING:
    from vectorgfx.geometry.rectangle import Rectangle

_LOG = get_logger("geometry")


@dataclass(frozen=True, slots=True)
class Point:
    """Offset from a top-left origin; ``y`` grows downward.

    Points are immutable and read like a two-element sequence: ``p[0]`` is
    ``x`` and ``p[1]`` is ``y``. NaN and infinite coordinates are valid and
    are used as sentinels by the aggregate operations.
    """

    x: float
    y: float

    # numpy scalars defer to __rmul__ instead of broadcasting over the point.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"point index out of range: {index!r}")

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Point:
        if not isinstance(scale, numbers.Real):
            return NotImplemented
        return Point(scale * self.x, scale * self.y)

    __rmul__ = __mul__

    def modulus(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Point:
        """Return the unit vector; a zero-length vector yields ``Point(nan, nan)``."""
        modulus = self.modulus()
        if modulus == 0 and _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("normalize_zero_length point=(%r,%r)", self.x, self.y)
        return Point(ieee_divide(self.x, modulus), ieee_divide(self.y, modulus))

    def is_equal(self, other: Point, tolerance: float | None = None) -> bool:
        """Return whether both axes match within ``tolerance``.

        Each axis passes on either an absolute difference at most ``tolerance``
        or a relative difference ``|(b - a) / (b + a)|`` at most half of it.
        Without an explicit tolerance the configured ``equality_tolerance`` is
        used.
        """
        if tolerance is None:
            tolerance = get_geometry_config().equality_tolerance
        return tolerant_equal(self.x, other.x, tolerance) and tolerant_equal(
            self.y, other.y, tolerance
        )

    @staticmethod
    def min(p1: Point, p2: Point) -> Point:
        """Component-wise minimum (top-left corner of the box spanned by both)."""
        return Point(nan_min(p1.x, p2.x), nan_min(p1.y, p2.y))

    @staticmethod
    def max(p1: Point, p2: Point) -> Point:
        """Component-wise maximum (bottom-right corner of the box spanned by both)."""
        return Point(nan_max(p1.x, p2.x), nan_max(p1.y, p2.y))

    @staticmethod
    def bounds(points: Iterable[Point]) -> Rectangle:
        """Return the smallest rectangle containing every point.

        The input is consumed in a single pass. An empty input gives a
        rectangle whose corners are both ``(nan, nan)``.
        """
        from vectorgfx.geometry.rectangle import Rectangle

        iterator = iter(points)
        first = next(iterator, None)
        if first is None:
            _LOG.debug("bounds_empty_input")
            return Rectangle.from_corners(Point(NAN, NAN), Point(NAN, NAN))

        min_x = max_x = first.x
        min_y = max_y = first.y
        for point in iterator:
            min_x = nan_min(min_x, point.x)
            min_y = nan_min(min_y, point.y)
            max_x = nan_max(max_x, point.x)
            max_y = nan_max(max_y, point.y)
        return Rectangle.from_corners(Point(min_x, min_y), Point(max_x, max_y))

    @staticmethod
    def bounds_of(*points: Point) -> Rectangle:
        """Variadic form of ``bounds``: ``Point.bounds_of(p1, p2, p3)``."""
        return Point.bounds(points)

    @classmethod
    def from_tuple(cls, pair: tuple[float, float]) -> Point:
        x, y = pair
        return cls(x, y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_array(cls, values: npt.ArrayLike | None) -> Point:
        """Build a point from a one-dimensional array-like of exactly two real numbers.

        Strings, booleans, complex values and ragged nesting raise
        ``ArrayValueError``; any other shape raises ``ArrayLengthError``.
        """
        if values is None:
            _LOG.debug("point_from_array_rejected reason=null")
            raise NullArgumentError("values")
        try:
            array = np.asarray(values)
        except (TypeError, ValueError) as exc:
            _LOG.debug("point_from_array_rejected reason=ragged")
            raise ArrayValueError("ragged input") from exc
        if array.dtype.kind not in "iuf":
            _LOG.debug("point_from_array_rejected reason=dtype dtype=%s", array.dtype)
            raise ArrayValueError(f"dtype {array.dtype}")
        if array.ndim != 1 or array.shape[0] != 2:
            length = int(array.shape[0]) if array.ndim >= 1 else 0
            _LOG.debug("point_from_array_rejected reason=length shape=%s", array.shape)
            raise ArrayLengthError(length, ndim=array.ndim)
        return cls(float(array[0]), float(array[1]))

    def to_array(self) -> np.ndarray:
        """Return ``[x, y]`` as a float64 array of shape ``(2,)``."""
        return np.array((self.x, self.y), dtype=np.float64)


__all__ = ["Point"]
