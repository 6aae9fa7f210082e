"""Rays with an origin, a direction and a time."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Point3, Vec3


@dataclass(frozen=True)
class Ray:
    """A half-line P(t) = origin + t * direction, carrying a shutter time."""

    origin: Point3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)
    time: float = 0.0

    def at(self, t: float) -> Point3:
        return self.origin + t * self.direction