"""Small 2D vector and matrix helpers used by the rigid body solver."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from numbers import Real

PI = math.pi
GRAVITY = -9.8


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(scalar * self.x, scalar * self.y)

    def __rmul__(self, scalar: float) -> Vec2:
        return self.__mul__(scalar)

    def __abs__(self) -> Vec2:
        return Vec2(abs(self.x), abs(self.y))


@dataclass(frozen=True, slots=True)
class Mat22:
    """Immutable 2x2 matrix stored as two columns."""

    col1: Vec2 = Vec2()
    col2: Vec2 = Vec2()

    @classmethod
    def from_angle(cls, angle: float) -> Mat22:
        """Rotation matrix for ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return cls(Vec2(c, s), Vec2(-s, c))

    def transpose(self) -> Mat22:
        return Mat22(Vec2(self.col1.x, self.col2.x), Vec2(self.col1.y, self.col2.y))

    def invert(self) -> Mat22:
        """Return the inverse; raise ValueError for a singular matrix."""
        a, b = self.col1.x, self.col2.x
        c, d = self.col1.y, self.col2.y
        det = a * d - b * c
        if det == 0.0:
            raise ValueError("matrix is singular")
        inv = 1.0 / det
        return Mat22(Vec2(inv * d, -inv * c), Vec2(-inv * b, inv * a))

    def __add__(self, other: Mat22) -> Mat22:
        if not isinstance(other, Mat22):
            return NotImplemented
        return Mat22(self.col1 + other.col1, self.col2 + other.col2)

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(
                self.col1.x * other.x + self.col2.x * other.y,
                self.col1.y * other.x + self.col2.y * other.y,
            )
        if isinstance(other, Mat22):
            return Mat22(self * other.col1, self * other.col2)
        return NotImplemented

    def __abs__(self) -> Mat22:
        return Mat22(abs(self.col1), abs(self.col2))


def dot(a: Vec2, b: Vec2) -> float:
    return a.x * b.x + a.y * b.y


def cross(a, b):
    """2D cross product.

    Vector x vector gives a scalar; vector x scalar and scalar x vector
    give the perpendicular vectors used for angular terms.
    """
    if isinstance(a, Vec2) and isinstance(b, Vec2):
        return a.x * b.y - a.y * b.x
    if isinstance(a, Vec2) and isinstance(b, Real):
        return Vec2(b * a.y, -b * a.x)
    if isinstance(b, Vec2) and isinstance(a, Real):
        return Vec2(-a * b.y, a * b.x)
    raise TypeError("cross needs at least one Vec2 and otherwise a number")


def sign(x: float) -> float:
    """Return -1.0 for a negative ``x`` and 1.0 otherwise; zero counts as positive."""
    if x < 0.0:
        return -1.0
    return 1.0


def clamp(a: float, low: float, high: float) -> float:
    return max(low, min(a, high))


def random_unit() -> float:
    """Random number in [-1, 1]."""
    return random.uniform(-1.0, 1.0)


def random_range(lo: float, hi: float) -> float:
    """Random number between ``lo`` and ``hi``."""
    return random.uniform(lo, hi)