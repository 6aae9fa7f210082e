"""Objects a ray can hit, lists of them, and instance transforms."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

from .aabb import AABB
from .mathutil import INFINITY, Interval, degrees_to_radians, random_int
from .ray import Ray
from .vec3 import Point3, Vec3, dot


@dataclass
class HitRecord:
    """Details of a ray-object intersection."""

    p: Point3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    mat: Any = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Store the normal facing against the ray; ``outward_normal`` must be unit length."""
        self.front_face = dot(r.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Something a ray can intersect."""

    @abstractmethod
    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Return the nearest hit within ``ray_t``, or None."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """Return a box enclosing the object."""

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        return 0.0

    def random(self, origin: Point3) -> Vec3:
        return Vec3(1, 0, 0)


class HittableList(Hittable):
    """A collection of hittables treated as one."""

    def __init__(self, *objects: Hittable) -> None:
        self.objects: list[Hittable] = []
        self._bbox = AABB.EMPTY
        for obj in objects:
            self.add(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)
        self._bbox = AABB.surrounding(self._bbox, obj.bounding_box())

    def extend(self, objects: Iterable[Hittable]) -> None:
        for obj in objects:
            self.add(obj)

    def clear(self) -> None:
        self.objects.clear()
        self._bbox = AABB.EMPTY

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        closest = ray_t.max
        result: Optional[HitRecord] = None
        for obj in self.objects:
            rec = obj.hit(r, Interval(ray_t.min, closest))
            if rec is not None:
                closest = rec.t
                result = rec
        return result

    def bounding_box(self) -> AABB:
        return self._bbox

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Point3) -> Vec3:
        if not self.objects:
            raise ValueError("cannot sample a direction from an empty list")
        return self.objects[random_int(0, len(self.objects) - 1)].random(origin)


class Translate(Hittable):
    """An object moved by a fixed offset."""

    def __init__(self, obj: Hittable, offset: Vec3) -> None:
        self.object = obj
        self.offset = offset
        self._bbox = obj.bounding_box() + offset

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        offset_r = Ray(r.origin - self.offset, r.direction, r.time)
        rec = self.object.hit(offset_r, ray_t)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox


class RotateY(Hittable):
    """An object rotated about the y axis by an angle in degrees."""

    def __init__(self, obj: Hittable, angle: float) -> None:
        self.object = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        box = obj.bounding_box()

        low = [INFINITY, INFINITY, INFINITY]
        high = [-INFINITY, -INFINITY, -INFINITY]
        for x, y, z in itertools.product(
            (box.x.min, box.x.max), (box.y.min, box.y.max), (box.z.min, box.z.max)
        ):
            tester = self._to_world(Vec3(x, y, z))
            low = [min(a, b) for a, b in zip(low, tester)]
            high = [max(a, b) for a, b in zip(high, tester)]

        self._bbox = AABB.from_points(Vec3(*low), Vec3(*high))

    def _to_object(self, v: Vec3) -> Vec3:
        c, s = self.cos_theta, self.sin_theta
        return Vec3(c * v.x - s * v.z, v.y, s * v.x + c * v.z)

    def _to_world(self, v: Vec3) -> Vec3:
        c, s = self.cos_theta, self.sin_theta
        return Vec3(c * v.x + s * v.z, v.y, -s * v.x + c * v.z)

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rotated_r = Ray(self._to_object(r.origin), self._to_object(r.direction), r.time)
        rec = self.object.hit(rotated_r, ray_t)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox


class FlipFace(Hittable):
    """An object whose hits report the opposite face."""

    def __init__(self, obj: Hittable) -> None:
        self.object = obj

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rec = self.object.hit(r, ray_t)
        if rec is None:
            return None
        rec.front_face = not rec.front_face
        return rec

    def bounding_box(self) -> AABB:
        return self.object.bounding_box()

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        return self.object.pdf_value(origin, direction)

    def random(self, origin: Point3) -> Vec3:
        return self.object.random(origin)