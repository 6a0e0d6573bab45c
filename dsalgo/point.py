"""A mutable two-dimensional integer point."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Point2D"]


def _axis(index: object) -> str:
    if index in (0, "x") and not isinstance(index, bool):
        return "x"
    if index in (1, "y") and not isinstance(index, bool):
        return "y"
    raise IndexError("index must be 0, 1, 'x' or 'y'")


@dataclass
class Point2D:
    """A point with integer coordinates that can be shifted in place."""

    x: int = 0
    y: int = 0

    def __add__(self, other: "Point2D") -> "Point2D":
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2D") -> "Point2D":
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x - other.x, self.y - other.y)

    def increment(self) -> "Point2D":
        """Add one to both coordinates and return this point."""
        self.x += 1
        self.y += 1
        return self

    def decrement(self) -> "Point2D":
        """Subtract one from both coordinates and return this point."""
        self.x -= 1
        self.y -= 1
        return self

    def __getitem__(self, index: int | str) -> int:
        return getattr(self, _axis(index))

    def __setitem__(self, index: int | str, value: int) -> None:
        setattr(self, _axis(index), value)

    def __abs__(self) -> float:
        """Distance from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def __float__(self) -> float:
        return abs(self)

    def __call__(self, *args: int) -> None:
        """With no arguments move to the origin; with two, move to (x, y)."""
        if not args:
            self.x = self.y = 0
        elif len(args) == 2:
            self.x, self.y = args
        else:
            raise TypeError("expected no arguments or exactly two coordinates")

    def __str__(self) -> str:
        return f"( {self.x} , {self.y} )"