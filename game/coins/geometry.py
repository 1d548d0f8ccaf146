"""
Small immutable geometry types shared by the game objects
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec:
    """Immutable 2D vector used for positions and velocities"""
    x: float = 0.0
    y: float = 0.0

    def plus(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def times(self, scalar: float) -> Vec:
        return Vec(self.x * scalar, self.y * scalar)

    def __add__(self, other: Vec) -> Vec:
        return self.plus(other)

    def __mul__(self, scalar: float) -> Vec:
        return self.times(scalar)

    def __rmul__(self, scalar: float) -> Vec:
        return self.times(scalar)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, top-left origin"""
    x: float
    y: float
    width: float
    height: float
