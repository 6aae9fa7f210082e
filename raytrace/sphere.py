"""Spheres, stationary or moving linearly over the shutter interval."""

from __future__ import annotations

import math
from typing import Optional

from .aabb import AABB
from .hittable import HitRecord, Hittable
from .material import Material
from .mathutil import INFINITY, PI, Interval
from .pdf import ONB, random_to_sphere
from .ray import Ray
from .vec3 import Point3, Vec3, dot


def get_sphere_uv(p: Point3) -> tuple[float, float]:
    """Return the (u, v) texture coordinates of a point on the unit sphere.

    u is the angle around the y axis from x=-1, v the angle from y=-1 to y=+1,
    both scaled to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + PI
    return phi / (2 * PI), theta / PI


class Sphere(Hittable):
    """A sphere; with ``center2`` given it moves from ``center`` at time 0 to ``center2`` at 1."""

    def __init__(
        self,
        center: Point3,
        radius: float,
        material: Optional[Material] = None,
        *,
        center2: Optional[Point3] = None,
    ) -> None:
        self.center = center
        self.radius = max(0.0, radius)
        self.material = material
        self.is_moving = center2 is not None

        rvec = Vec3(radius, radius, radius)
        box = AABB.from_points(center - rvec, center + rvec)
        if center2 is None:
            self.center_vec = Vec3()
            self._bbox = box
        else:
            self.center_vec = center2 - center
            box2 = AABB.from_points(center2 - rvec, center2 + rvec)
            self._bbox = AABB.surrounding(box, box2)

    def center_at(self, time: float) -> Point3:
        """Return the centre at ``time``: the first centre at 0, the second at 1."""
        if not self.is_moving:
            return self.center
        return self.center + time * self.center_vec

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if self.radius == 0:
            return None

        center = self.center_at(r.time)
        oc = center - r.origin
        a = r.direction.length_squared()
        h = dot(r.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        outward_normal = (p - center) / self.radius
        u, v = get_sphere_uv(outward_normal)
        rec = HitRecord(p=p, mat=self.material, t=root, u=u, v=v)
        rec.set_face_normal(r, outward_normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """Return the density of ``direction`` among directions towards the sphere.

        Only meaningful for stationary spheres.
        """
        if self.hit(Ray(origin, direction), Interval(0.001, INFINITY)) is None:
            return 0.0

        remainder = 1 - self.radius * self.radius / (self.center - origin).length_squared()
        if remainder < 0:
            return math.nan
        cos_theta_max = math.sqrt(remainder)
        solid_angle = 2 * PI * (1 - cos_theta_max)
        return 1 / solid_angle

    def random(self, origin: Point3) -> Vec3:
        """Return a random direction from ``origin`` towards the sphere."""
        direction = self.center - origin
        distance_squared = direction.length_squared()
        uvw = ONB.from_w(direction)
        return uvw.local(random_to_sphere(self.radius, distance_squared))