"""Rectangle packing with the skyline algorithm."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle at (x, y) with width ``w`` and height ``h``."""

    x: int
    y: int
    w: int
    h: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        """The last column inside the rectangle."""
        return self.x + self.w - 1

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        """The last row inside the rectangle."""
        return self.y + self.h - 1

    def contains(self, other: Rect) -> bool:
        """True if ``other`` lies entirely within this rectangle."""
        return (
            self.left <= other.left
            and self.right >= other.right
            and self.top <= other.top
            and self.bottom >= other.bottom
        )


@dataclass
class _Skyline:
    x: int
    y: int
    w: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.w - 1


class Packer:
    """Packs rectangles into a fixed canvas, keeping placements low and snug."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("packer width and height must be positive")
        self._border = Rect(0, 0, width, height)
        self._skylines: list[_Skyline] = [_Skyline(0, 0, width)]

    @property
    def width(self) -> int:
        return self._border.w

    @property
    def height(self) -> int:
        return self._border.h

    def clear(self) -> None:
        """Forget every packed rectangle."""
        self._skylines = [_Skyline(0, 0, self._border.w)]

    def pack(self, width: int, height: int) -> Rect | None:
        """Place a width x height rectangle; None if it does not fit."""
        if width <= 0 or height <= 0:
            raise ValueError("rectangle width and height must be positive")
        found = self._find_skyline(width, height)
        if found is None:
            return None
        index, rect = found
        self._split(index, rect)
        self._merge()
        return rect

    def _can_put(self, index: int, w: int, h: int) -> Rect | None:
        x = self._skylines[index].x
        y = 0
        width_left = w
        for skyline in self._skylines[index:]:
            y = max(y, skyline.y)
            rect = Rect(x, y, w, h)
            if not self._border.contains(rect):
                return None
            if skyline.w >= width_left:
                return rect
            width_left -= skyline.w
        raise AssertionError("skylines do not cover the packer width")

    def _find_skyline(self, w: int, h: int) -> tuple[int, Rect] | None:
        best: tuple[int, Rect] | None = None
        best_bottom = best_width = None
        for index, skyline in enumerate(self._skylines):
            rect = self._can_put(index, w, h)
            if rect is None:
                continue
            if best is None or rect.bottom < best_bottom or (
                rect.bottom == best_bottom and skyline.w < best_width
            ):
                best = (index, rect)
                best_bottom = rect.bottom
                best_width = skyline.w
        return best

    def _split(self, index: int, rect: Rect) -> None:
        skyline = _Skyline(rect.left, rect.bottom + 1, rect.w)
        assert skyline.right <= self._border.right
        assert skyline.y <= self._border.bottom
        self._skylines.insert(index, skyline)

        i = index + 1
        while i < len(self._skylines):
            previous, current = self._skylines[i - 1], self._skylines[i]
            assert previous.left <= current.left
            if current.left > previous.right:
                break
            shrink = previous.right - current.left + 1
            if current.w <= shrink:
                del self._skylines[i]
            else:
                current.x += shrink
                current.w -= shrink
                break

    def _merge(self) -> None:
        merged: list[_Skyline] = []
        for skyline in self._skylines:
            if merged and merged[-1].y == skyline.y:
                merged[-1].w += skyline.w
            else:
                merged.append(skyline)
        self._skylines = merged