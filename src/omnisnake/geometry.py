# geometry.py
from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Tuple


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector used for positions and headings."""
    x: float
    y: float

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Vector2:
        return Vector2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def rotated(self, degrees: float) -> Vector2:
        """
        Standard 2D rotation. The result is not renormalized, so repeated
        rotation should only be applied to unit headings.
        """
        rad = math.radians(degrees)
        c, s = math.cos(rad), math.sin(rad)
        return Vector2(self.x * c - self.y * s, self.x * s + self.y * c)

    def distance_sq(self, other: Vector2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: Vector2) -> float:
        return math.sqrt(self.distance_sq(other))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def of(cls, xy: Tuple[float, float]) -> Vector2:
        return cls(float(xy[0]), float(xy[1]))
