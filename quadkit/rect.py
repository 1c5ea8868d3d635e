"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .vector import Vec2


@dataclass
class Rect:
    """A 2D rectangle defined by its top-left corner, width and height."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def point(self) -> Vec2:
        """Top-left corner."""
        return Vec2(self.x, self.y)

    def size(self) -> Vec2:
        return Vec2(self.w, self.h)

    def center(self) -> Vec2:
        return Vec2(self.x + self.w * 0.5, self.y + self.h * 0.5)

    def left(self) -> float:
        return self.x

    def right(self) -> float:
        return self.x + self.w

    def top(self) -> float:
        return self.y

    def bottom(self) -> float:
        return self.y + self.h

    def move_to(self, destination: Vec2) -> None:
        """Move the origin to the given point."""
        self.x = destination.x
        self.y = destination.y

    def scale(self, sx: float, sy: float) -> None:
        """Scale width and height, keeping the origin fixed."""
        self.w *= sx
        self.h *= sy

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside; right and bottom edges are exclusive."""
        return (
            self.left() <= point.x < self.right()
            and self.top() <= point.y < self.bottom()
        )

    def overlaps(self, other: Rect) -> bool:
        return (
            self.left() <= other.right()
            and self.right() >= other.left()
            and self.top() <= other.bottom()
            and self.bottom() >= other.top()
        )

    def combine_with(self, other: Rect) -> Rect:
        """Smallest rectangle holding both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        w = max(self.right(), other.right()) - x
        h = max(self.bottom(), other.bottom()) - y
        return Rect(x, y, w, h)

    def intersect(self, other: Rect) -> Optional[Rect]:
        """Intersection of both rectangles, or None when they are apart."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right(), other.right())
        bottom = min(self.bottom(), other.bottom())
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def offset(self, offset: Vec2) -> Rect:
        """A copy translated by the given vector."""
        return Rect(self.x + offset.x, self.y + offset.y, self.w, self.h)


@dataclass
class RectOffset:
    """Margins on each side of a rectangle."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0