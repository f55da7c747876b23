"""Scalar helpers that keep IEEE 754 semantics for NaN and division by zero."""

from __future__ import annotations

import math

NAN = math.nan


def nan_min(a: float, b: float) -> float:
    """Return the smaller operand, or NaN when either operand is NaN."""
    if math.isnan(a) or math.isnan(b):
        return NAN
    return a if a <= b else b


def nan_max(a: float, b: float) -> float:
    """Return the larger operand, or NaN when either operand is NaN."""
    if math.isnan(a) or math.isnan(b):
        return NAN
    return a if a >= b else b


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE 754 hardware: ``x/0`` is signed infinity and ``0/0`` is NaN."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return NAN
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def tolerant_equal(a: float, b: float, tolerance: float) -> bool:
    """Compare one axis with an absolute check, then a relative one.

    The relative term is ``|(b - a) / (b + a)| <= tolerance / 2``. It is kept
    exactly in this form; a zero sum makes the quotient NaN or infinite, so
    only the absolute check can pass there.
    """
    difference = b - a
    if abs(difference) <= tolerance:
        return True
    return abs(ieee_divide(difference, b + a)) <= tolerance * 0.5


__all__ = ["NAN", "ieee_divide", "nan_max", "nan_min", "tolerant_equal"]
