"""Textures: solid colours, checkers, Perlin noise and images."""

from __future__ import annotations

import itertools
import math
import sys
from abc import ABC, abstractmethod
from os import PathLike
from typing import Union

from PIL import Image

from .mathutil import clamp, random_int
from .vec3 import Color, Point3, Vec3, dot, random_vector, unit_vector

_POINT_COUNT = 256


def _generate_perm() -> list[int]:
    perm = list(range(_POINT_COUNT))
    for i in range(_POINT_COUNT - 1, 0, -1):
        target = random_int(0, i)
        perm[i], perm[target] = perm[target], perm[i]
    return perm


class Perlin:
    """Gradient noise on a randomly permuted 256-point lattice."""

    def __init__(self) -> None:
        self._ranvec = [unit_vector(random_vector(-1, 1)) for _ in range(_POINT_COUNT)]
        self._perm_x = _generate_perm()
        self._perm_y = _generate_perm()
        self._perm_z = _generate_perm()

    def noise(self, p: Point3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di, dj, dk in itertools.product((0, 1), repeat=3):
            gradient = self._ranvec[
                self._perm_x[(i + di) & 255]
                ^ self._perm_y[(j + dj) & 255]
                ^ self._perm_z[(k + dk) & 255]
            ]
            weight_v = Vec3(u - di, v - dj, w - dk)
            accum += (
                (di * uu + (1 - di) * (1 - uu))
                * (dj * vv + (1 - dj) * (1 - vv))
                * (dk * ww + (1 - dk) * (1 - ww))
                * dot(gradient, weight_v)
            )
        return accum

    def turb(self, p: Point3, depth: int = 7) -> float:
        """Return the absolute sum of ``depth`` octaves of noise."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = 2 * temp_p
        return abs(accum)


class Texture(ABC):
    """A colour that varies over surface coordinates and space."""

    @abstractmethod
    def value(self, u: float, v: float, p: Point3) -> Color:
        """Return the colour at surface coordinates (u, v) and point ``p``."""


class SolidColor(Texture):
    """The same colour everywhere."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.albedo


def _as_texture(value: Union[Texture, Color]) -> Texture:
    return value if isinstance(value, Texture) else SolidColor(value)


class CheckerTexture(Texture):
    """A 3D checker pattern alternating between two textures."""

    def __init__(self, even: Union[Texture, Color], odd: Union[Texture, Color]) -> None:
        self.even = _as_texture(even)
        self.odd = _as_texture(odd)

    def value(self, u: float, v: float, p: Point3) -> Color:
        sines = math.sin(10 * p.x) * math.sin(10 * p.y) * math.sin(10 * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class NoiseTexture(Texture):
    """A marble-like pattern driven by Perlin turbulence."""

    def __init__(self, scale: float = 1.0) -> None:
        self.noise = Perlin()
        self.scale = scale

    def value(self, u: float, v: float, p: Point3) -> Color:
        return Color(1, 1, 1) * 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))


class ImageTexture(Texture):
    """A texture sampled from an image file; solid cyan if the file cannot be read."""

    BYTES_PER_PIXEL = 3

    def __init__(self, filename: Union[str, PathLike]) -> None:
        self.filename = str(filename)
        self._data: bytes | None = None
        self.width = 0
        self.height = 0
        try:
            with Image.open(filename) as img:
                rgb = img.convert("RGB")
                self.width, self.height = rgb.size
                self._data = rgb.tobytes()
        except (OSError, ValueError):
            print(f"ERROR: Could not load texture image file '{self.filename}'.", file=sys.stderr)
            self.width = self.height = 0
        self._bytes_per_scanline = self.BYTES_PER_PIXEL * self.width

    def value(self, u: float, v: float, p: Point3) -> Color:
        if self._data is None:
            return Color(0, 1, 1)

        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        scale = 1.0 / 255.0
        start = j * self._bytes_per_scanline + i * self.BYTES_PER_PIXEL
        r, g, b = self._data[start:start + self.BYTES_PER_PIXEL]
        return Color(scale * r, scale * g, scale * b)