"""Probability density functions over directions, and the basis they sample in."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .hittable import Hittable
from .mathutil import PI, random_double
from .vec3 import Point3, Vec3, cross, dot, random_unit_vector, unit_vector


def random_cosine_direction() -> Vec3:
    """Return a random unit direction about +z with density proportional to cos(theta)."""
    r1 = random_double()
    r2 = random_double()
    z = math.sqrt(1 - r2)

    phi = 2 * PI * r1
    x = math.cos(phi) * math.sqrt(r2)
    y = math.sin(phi) * math.sqrt(r2)

    return Vec3(x, y, z)


def random_to_sphere(radius: float, distance_squared: float) -> Vec3:
    """Return a random unit direction about +z inside the cone subtended by a sphere."""
    r1 = random_double()
    r2 = random_double()
    z = 1 + r2 * (math.sqrt(1 - radius * radius / distance_squared) - 1)

    phi = 2 * PI * r1
    x = math.cos(phi) * math.sqrt(1 - z * z)
    y = math.sin(phi) * math.sqrt(1 - z * z)

    return Vec3(x, y, z)


@dataclass(frozen=True)
class ONB:
    """An orthonormal basis u, v, w."""

    u: Vec3
    v: Vec3
    w: Vec3

    @classmethod
    def from_w(cls, w: Vec3) -> ONB:
        """Build a basis whose w axis points along ``w``."""
        unit_w = unit_vector(w)
        a = Vec3(0, 1, 0) if abs(unit_w.x) > 0.9 else Vec3(1, 0, 0)
        v = unit_vector(cross(unit_w, a))
        u = cross(unit_w, v)
        return cls(u, v, unit_w)

    def local(self, a: Vec3) -> Vec3:
        """Express basis coordinates ``a`` in world coordinates."""
        return a.x * self.u + a.y * self.v + a.z * self.w


class Pdf(ABC):
    """A density over directions that can also be sampled."""

    @abstractmethod
    def value(self, direction: Vec3) -> float:
        """Return the density at ``direction``."""

    @abstractmethod
    def generate(self) -> Vec3:
        """Return a random direction distributed by this density."""


class CosinePdf(Pdf):
    """Cosine-weighted density about a normal."""

    def __init__(self, w: Vec3) -> None:
        self.uvw = ONB.from_w(w)

    def value(self, direction: Vec3) -> float:
        cosine = dot(unit_vector(direction), self.uvw.w)
        return 0.0 if cosine <= 0 else cosine / PI

    def generate(self) -> Vec3:
        return self.uvw.local(random_cosine_direction())


class SpherePdf(Pdf):
    """Uniform density over the whole sphere of directions."""

    def value(self, direction: Vec3) -> float:
        return 1 / (4 * PI)

    def generate(self) -> Vec3:
        return random_unit_vector()


class HittablePdf(Pdf):
    """Density of directions from a point towards an object."""

    def __init__(self, objects: Hittable, origin: Point3) -> None:
        self.objects = objects
        self.origin = origin

    def value(self, direction: Vec3) -> float:
        return self.objects.pdf_value(self.origin, direction)

    def generate(self) -> Vec3:
        return self.objects.random(self.origin)


class MixturePdf(Pdf):
    """Equal-weight mixture of two densities."""

    def __init__(self, p0: Pdf, p1: Pdf) -> None:
        self.p = (p0, p1)

    def value(self, direction: Vec3) -> float:
        return 0.5 * self.p[0].value(direction) + 0.5 * self.p[1].value(direction)

    def generate(self) -> Vec3:
        if random_double() < 0.5:
            return self.p[0].generate()
        return self.p[1].generate()