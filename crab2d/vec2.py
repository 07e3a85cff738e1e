"""Two-dimensional vector with numeric components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


def _divide(a: Number, b: Number) -> Number:
    """Divide like fixed-width arithmetic: integers truncate toward zero."""
    if isinstance(a, int) and isinstance(b, int):
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


@dataclass(frozen=True)
class Vec2:
    """A 2D vector; arithmetic returns new vectors."""

    x: Number
    y: Number

    @classmethod
    def splat(cls, n: Number) -> "Vec2":
        """A vector with both components set to ``n``."""
        return cls(n, n)

    def dot(self, rhs: "Vec2") -> Number:
        """Dot product."""
        return self.x * rhs.x + self.y * rhs.y

    def cross(self, rhs: "Vec2") -> Number:
        """Cross term ``self.x * rhs.y - rhs.x * rhs.y``."""
        return self.x * rhs.y - rhs.x * rhs.y

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __add__(self, rhs: "Vec2") -> "Vec2":
        if not isinstance(rhs, Vec2):
            return NotImplemented
        return Vec2(self.x + rhs.x, self.y + rhs.y)

    def __sub__(self, rhs: "Vec2") -> "Vec2":
        if not isinstance(rhs, Vec2):
            return NotImplemented
        return Vec2(self.x - rhs.x, self.y - rhs.y)

    def __mul__(self, rhs: Number) -> "Vec2":
        if isinstance(rhs, Vec2) or not isinstance(rhs, (int, float)):
            return NotImplemented
        return Vec2(self.x * rhs, self.y * rhs)

    def __truediv__(self, rhs: Number) -> "Vec2":
        if isinstance(rhs, Vec2) or not isinstance(rhs, (int, float)):
            return NotImplemented
        return Vec2(_divide(self.x, rhs), _divide(self.y, rhs))