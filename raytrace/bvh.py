"""Bounding volume hierarchy for fast ray queries over many objects."""

from __future__ import annotations

from typing import Iterable, Optional

from .aabb import AABB
from .hittable import HitRecord, Hittable
from .mathutil import Interval, random_int
from .ray import Ray


class BVHNode(Hittable):
    """A binary tree of bounding boxes, split along a randomly chosen axis."""

    def __init__(self, objects: Iterable[Hittable]) -> None:
        items = list(objects)
        if not items:
            raise ValueError("cannot build a bounding volume hierarchy from no objects")

        axis = random_int(0, 2)

        def key(obj: Hittable) -> float:
            return obj.bounding_box().axis_interval(axis).min

        self.left: Hittable
        self.right: Hittable
        if len(items) == 1:
            self.left = self.right = items[0]
        elif len(items) == 2:
            first, second = items
            if key(first) < key(second):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            items.sort(key=key)
            mid = len(items) // 2
            self.left = BVHNode(items[:mid])
            self.right = BVHNode(items[mid:])

        self._bbox = AABB.surrounding(self.left.bounding_box(), self.right.bounding_box())

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self._bbox.hit(r, ray_t):
            return None

        left_rec = self.left.hit(r, ray_t)
        right_max = left_rec.t if left_rec is not None else ray_t.max
        right_rec = self.right.hit(r, Interval(ray_t.min, right_max))
        return right_rec if right_rec is not None else left_rec

    def bounding_box(self) -> AABB:
        return self._bbox