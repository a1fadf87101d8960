"""Integer rectangle value type used for areas and grid cells."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle on an integer grid, origin at top-left."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return max(self.width, 0) * max(self.height, 0)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersection(self, other: Rect) -> Rect:
        """
        Return the overlapping region of two rectangles.

        Disjoint rectangles yield a zero-size rectangle positioned at the
        clamped corner, so callers can rely on ``area == 0``.
        """
        x0 = max(self.left, other.left)
        y0 = max(self.top, other.top)
        x1 = min(self.right, other.right)
        y1 = min(self.bottom, other.bottom)
        return Rect(x0, y0, max(x1 - x0, 0), max(y1 - y0, 0))

    def intersects(self, other: Rect) -> bool:
        return self.intersection(other).area > 0

    def contains(self, other: Rect) -> bool:
        return (
            other.left >= self.left
            and other.top >= self.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )
