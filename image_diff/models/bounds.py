from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """
    Rectangle covered by an image: (x0, y0) inclusive, (x1, y1) exclusive.
    Decoded images always start at the origin.
    """
    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def from_size(cls, width: int, height: int) -> Bounds:
        return cls(0, 0, width, height)

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0
