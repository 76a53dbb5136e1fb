"""Immutable three-component vectors used throughout the flock."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 0.0001


@dataclass(frozen=True)
class Vec3:
    """A point or direction in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length_sqr(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sqr())

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; a zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return self
        return self * (1.0 / length)

    def distance_sqr(self, other: Vec3) -> float:
        """Squared distance to another point."""
        return (self - other).length_sqr()

    def limited(self, max_length: float) -> Vec3:
        """Return this vector scaled down so its length is at most ``max_length``."""
        length_sq = self.length_sqr()
        if length_sq > max_length * max_length and length_sq > EPSILON:
            return self * (max_length / math.sqrt(length_sq))
        return self