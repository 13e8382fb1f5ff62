"""Axis-aligned bounding boxes in two dimensions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class AABB2D:
    """An axis-aligned 2D box described by its minimum and maximum corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_min_max(cls, min, max) -> AABB2D:
        """Build a box from its (x, y) minimum and maximum corners."""
        return cls(min[0], min[1], max[0], max[1])

    @classmethod
    def from_pos_size(cls, pos, size) -> AABB2D:
        """Build a box from its (x, y) position and (width, height) size."""
        return cls(pos[0], pos[1], pos[0] + size[0], pos[1] + size[1])

    @property
    def min(self) -> tuple[float, float]:
        return (self.min_x, self.min_y)

    @property
    def max(self) -> tuple[float, float]:
        return (self.max_x, self.max_y)

    def intersects(self, other: AABB2D) -> bool:
        """True if the two boxes overlap or touch."""
        return (
            self.min_x <= other.max_x
            and self.max_x >= other.min_x
            and self.min_y <= other.max_y
            and self.max_y >= other.min_y
        )

    def contains(self, other: AABB2D) -> bool:
        """True if ``other`` lies entirely within this box."""
        return (
            self.min_x <= other.min_x
            and self.max_x >= other.max_x
            and self.min_y <= other.min_y
            and self.max_y >= other.max_y
        )

    def contains_point(self, point) -> bool:
        """True if the (x, y) point lies within this box, edges included."""
        x, y = point
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def slide(self, mov, others: Iterable[AABB2D]) -> bool:
        """Move by ``mov``, stopping against ``others``; vertical first, then horizontal.

        Returns True if the movement was shortened by a collision.
        """
        dx, dy = mov
        if dx == 0 and dy == 0:
            return False
        others = list(others)
        blocked = False

        if dy < 0:
            for other in others:
                if self.max_x > other.min_x and self.min_x < other.max_x and other.max_y <= self.min_y:
                    limit = other.max_y - self.min_y
                    if limit > dy:
                        blocked = True
                        dy = limit
        elif dy > 0:
            for other in others:
                if self.max_x > other.min_x and self.min_x < other.max_x and other.min_y >= self.max_y:
                    limit = other.min_y - self.max_y
                    if limit < dy:
                        blocked = True
                        dy = limit

        self.min_y += dy
        self.max_y += dy

        if dx < 0:
            for other in others:
                if self.max_y > other.min_y and self.min_y < other.max_y and other.max_x <= self.min_x:
                    limit = other.max_x - self.min_x
                    if limit > dx:
                        blocked = True
                        dx = limit
        elif dx > 0:
            for other in others:
                if self.max_y > other.min_y and self.min_y < other.max_y and other.min_x >= self.max_x:
                    limit = other.min_x - self.max_x
                    if limit < dx:
                        blocked = True
                        dx = limit

        self.min_x += dx
        self.max_x += dx
        return blocked