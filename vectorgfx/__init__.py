"""2D geometry core for vector graphics."""

from vectorgfx.geometry import NAN_RECTANGLE, Point, Rectangle, Size
from vectorgfx.runtime.errors import (
    ArrayLengthError,
    ArrayValueError,
    GeometryError,
    NullArgumentError,
    PointConversionError,
)

__version__ = "0.1.0"

__all__ = [
    "ArrayLengthError",
    "ArrayValueError",
    "GeometryError",
    "NAN_RECTANGLE",
    "NullArgumentError",
    "Point",
    "PointConversionError",
    "Rectangle",
    "Size",
]
