from __future__ import annotations

import math

import pytest

from vectorgfx.geometry import Point, Rectangle
from vectorgfx.runtime.config import reset_geometry_config


@pytest.fixture(autouse=True)
def _isolated_geometry_config(monkeypatch):
    for name in (
        "VECTORGFX_EQUALITY_TOLERANCE",
        "VECTORGFX_LOG_LEVEL",
        "VECTORGFX_LOG_FORMAT",
        "VECTORGFX_LOG_FILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_geometry_config()
    yield
    reset_geometry_config()


def assert_rect(rect: Rectangle, x: float, y: float, w: float, h: float) -> None:
    assert rect.as_tuple() == pytest.approx((x, y, w, h))


def is_nan_point(point: Point) -> bool:
    return math.isnan(point.x) and math.isnan(point.y)


SAMPLE_RECTS: tuple[Rectangle, ...] = (
    Rectangle.from_xywh(0, 0, 2, 2),
    Rectangle.from_xywh(3, 3, 2, 2),
    Rectangle.from_xywh(-4, 1.5, 10, 0.25),
    Rectangle.from_xywh(1, -7, 0, 3),
    Rectangle.from_xywh(2.5, 2.5, 1, 1),
)
