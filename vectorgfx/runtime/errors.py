"""Error taxonomy for geometry value conversions."""

from __future__ import annotations


class GeometryError(Exception):
    """Base error raised by vectorgfx."""


class PointConversionError(GeometryError):
    """Array-like input could not be converted to a point."""


class NullArgumentError(PointConversionError, TypeError):
    """Conversion input was ``None``."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class ArrayLengthError(PointConversionError, ValueError):
    """Conversion input did not hold exactly two elements along one axis."""

    def __init__(self, length: int, *, expected: int = 2, ndim: int = 1) -> None:
        if ndim != 1:
            message = f"expected a one-dimensional array of length {expected}, got {ndim} dimensions"
        else:
            message = f"expected an array of length {expected}, got length {length}"
        super().__init__(message)
        self.length = length
        self.expected = expected
        self.ndim = ndim


class ArrayValueError(PointConversionError, ValueError):
    """Conversion input was ragged or held non-numeric elements."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"expected two real numbers, got {reason}")
        self.reason = reason


__all__ = [
    "ArrayLengthError",
    "ArrayValueError",
    "GeometryError",
    "NullArgumentError",
    "PointConversionError",
]
