"""Value types shared by the simulation: vectors, groups, particles, bonds and settings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

X_EXTENTS = 1280.0
Y_EXTENTS = 720.0
FRICTION = 0.01


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; NaN components for the zero vector."""
        length = self.length()
        if length == 0.0:
            return Vec2(math.nan, math.nan)
        return self / length

    def clamp_length_max(self, maximum: float) -> Vec2:
        """This vector, shortened to ``maximum`` if it is longer."""
        length_sq = self.length_squared()
        if length_sq > maximum * maximum:
            return self * (maximum / math.sqrt(length_sq))
        return self

    def to_angle(self) -> float:
        """Angle in radians from the positive x axis."""
        return math.atan2(self.y, self.x)

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def distance_squared(self, other: Vec2) -> float:
        return (self - other).length_squared()

    def midpoint(self, other: Vec2) -> Vec2:
        return Vec2((self.x + other.x) * 0.5, (self.y + other.y) * 0.5)


@dataclass
class Group:
    """A family of particles sharing an interaction radius."""

    name: str
    radius: float
    charge: int


@dataclass
class Particle:
    """A charged point body; ``group`` and ``bonds`` hold entity ids."""

    group: int
    charge: int
    position: Vec2 = Vec2()
    velocity: Vec2 = Vec2()
    mass: int = 0
    rotation: int = 0
    vibration: int = 0
    positive: bool = False
    bonds: list[int] = field(default_factory=list)


@dataclass
class Bond:
    """A spring-like link between two particles, with its drawn placement."""

    particle_a: int
    particle_b: int
    charge: int
    position: Vec2 = Vec2()
    length: float = 1.0
    angle: float = 0.0


@dataclass(frozen=True)
class Settings:
    """World size and the friction applied to moving particles."""

    extents: Vec2 = Vec2(X_EXTENTS, Y_EXTENTS)
    friction: float = FRICTION