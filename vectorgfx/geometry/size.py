"""Width/height extent value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Size:
    """Extent of an object; negative dimensions are stored as given."""

    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))

    def as_tuple(self) -> tuple[float, float]:
        return (self.width, self.height)


__all__ = ["Size"]
