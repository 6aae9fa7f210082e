"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .mathutil import Interval
from .ray import Ray
from .vec3 import Point3, Vec3

_AXES = ("x", "y", "z")
_MIN_SIDE = 0.0001


@dataclass(frozen=True)
class AABB:
    """A box given by one interval per axis; no side is narrower than a small delta."""

    x: Interval = Interval.EMPTY
    y: Interval = Interval.EMPTY
    z: Interval = Interval.EMPTY

    EMPTY: ClassVar[AABB]
    UNIVERSE: ClassVar[AABB]

    def __post_init__(self) -> None:
        for name in _AXES:
            side = getattr(self, name)
            if side.size() < _MIN_SIDE:
                object.__setattr__(self, name, side.expand(_MIN_SIDE))

    @classmethod
    def from_points(cls, a: Point3, b: Point3) -> AABB:
        """Return the box with ``a`` and ``b`` as extrema, in any coordinate order."""
        sides = (
            Interval(p, q) if p <= q else Interval(q, p)
            for p, q in zip(a, b)
        )
        return cls(*sides)

    @classmethod
    def surrounding(cls, box0: AABB, box1: AABB) -> AABB:
        """Return the smallest box enclosing both boxes."""
        return cls(box0.x.hull(box1.x), box0.y.hull(box1.y), box0.z.hull(box1.z))

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, r: Ray, ray_t: Interval) -> bool:
        """Return True if the ray passes through the box within ``ray_t``."""
        t_min, t_max = ray_t.min, ray_t.max
        for axis, (side, orig, direction) in enumerate(
            zip((self.x, self.y, self.z), r.origin, r.direction)
        ):
            adinv = 1.0 / direction if direction != 0 else math.copysign(math.inf, direction)
            t0 = (side.min - orig) * adinv
            t1 = (side.max - orig) * adinv
            if t0 < t1:
                if t0 > t_min:
                    t_min = t0
                if t1 < t_max:
                    t_max = t1
            else:
                if t1 > t_min:
                    t_min = t1
                if t0 < t_max:
                    t_max = t0
            if t_max <= t_min:
                return False
        return True

    def longest_axis(self) -> int:
        """Return the index of the longest side."""
        xs, ys, zs = self.x.size(), self.y.size(), self.z.size()
        if xs > ys:
            return 0 if xs > zs else 2
        return 1 if ys > zs else 2

    def area(self) -> float:
        """Return the surface area of the box."""
        a, b, c = self.x.size(), self.y.size(), self.z.size()
        return 2 * (a * b + b * c + c * a)

    def __add__(self, offset: Vec3) -> AABB:
        if not isinstance(offset, Vec3):
            return NotImplemented
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    __radd__ = __add__


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)