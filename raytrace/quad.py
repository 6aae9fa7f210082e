"""Planar parallelograms and boxes built from them."""

from __future__ import annotations

from typing import Optional

from .aabb import AABB
from .hittable import HitRecord, Hittable, HittableList
from .material import Material
from .mathutil import INFINITY, Interval, random_double
from .ray import Ray
from .vec3 import Point3, Vec3, cross, dot, unit_vector

_UNIT_INTERVAL = Interval(0, 1)


class Quad(Hittable):
    """The parallelogram with corner ``q`` and edge vectors ``u`` and ``v``."""

    def __init__(self, q: Point3, u: Vec3, v: Vec3, material: Optional[Material] = None) -> None:
        n = cross(u, v)
        n_squared = dot(n, n)
        if n_squared == 0:
            raise ValueError("quad edge vectors must not be parallel or zero")

        self.q = q
        self.u = u
        self.v = v
        self.material = material
        self.normal = unit_vector(n)
        self.d = dot(self.normal, q)
        self.w = n / n_squared
        self.area = n.length()

        diagonal1 = AABB.from_points(q, q + u + v)
        diagonal2 = AABB.from_points(q + u, q + v)
        self._bbox = AABB.surrounding(diagonal1, diagonal2)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = dot(self.normal, r.direction)
        if abs(denom) < 1e-8:
            return None

        t = (self.d - dot(self.normal, r.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = r.at(t)
        planar_hitpt_vector = intersection - self.q
        alpha = dot(self.w, cross(planar_hitpt_vector, self.v))
        beta = dot(self.w, cross(self.u, planar_hitpt_vector))

        if not self.is_interior(alpha, beta):
            return None

        rec = HitRecord(p=intersection, mat=self.material, t=t, u=alpha, v=beta)
        rec.set_face_normal(r, self.normal)
        return rec

    def is_interior(self, a: float, b: float) -> bool:
        """Return True if plane coordinates (a, b) lie inside the shape."""
        return _UNIT_INTERVAL.contains(a) and _UNIT_INTERVAL.contains(b)

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """Return the density of ``direction`` among directions towards the quad."""
        rec = self.hit(Ray(origin, direction), Interval(0.001, INFINITY))
        if rec is None:
            return 0.0

        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(dot(direction, self.normal) / direction.length())
        return distance_squared / (cosine * self.area)

    def random(self, origin: Point3) -> Vec3:
        """Return the direction from ``origin`` to a random point on the quad."""
        p = self.q + (random_double() * self.u) + (random_double() * self.v)
        return p - origin


def box(a: Point3, b: Point3, material: Optional[Material] = None) -> HittableList:
    """Return the six sides of the box with opposite vertices ``a`` and ``b``."""
    low = Point3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    high = Point3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vec3(high.x - low.x, 0, 0)
    dy = Vec3(0, high.y - low.y, 0)
    dz = Vec3(0, 0, high.z - low.z)

    return HittableList(
        Quad(Point3(low.x, low.y, high.z), dx, dy, material),   # front
        Quad(Point3(high.x, low.y, high.z), -dz, dy, material),  # right
        Quad(Point3(high.x, low.y, low.z), -dx, dy, material),   # back
        Quad(Point3(low.x, low.y, low.z), dz, dy, material),     # left
        Quad(Point3(low.x, high.y, high.z), dx, -dz, material),  # top
        Quad(Point3(low.x, low.y, low.z), dx, dz, material),     # bottom
    )