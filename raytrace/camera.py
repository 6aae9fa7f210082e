"""A positionable pinhole or thin-lens camera that renders a scene to PPM text."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .color import write_color
from .hittable import Hittable
from .material import Material
from .mathutil import INFINITY, Interval, degrees_to_radians, random_double
from .pdf import HittablePdf, MixturePdf
from .ray import Ray
from .vec3 import Color, Point3, Vec3, cross, random_in_unit_disk, unit_vector

_NO_MATERIAL = Material()


@dataclass
class Camera:
    """Camera settings; derived geometry is computed by :meth:`initialize`."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10
    background: Color = field(default_factory=Color)

    vfov: float = 90.0
    lookfrom: Point3 = field(default_factory=lambda: Point3(0, 0, 0))
    lookat: Point3 = field(default_factory=lambda: Point3(0, 0, -1))
    vup: Vec3 = field(default_factory=lambda: Vec3(0, 1, 0))

    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    image_height: int = field(default=1, init=False)
    _initialized: bool = field(default=False, init=False, repr=False)

    def initialize(self) -> None:
        """Compute the image height, viewport and lens geometry from the settings."""
        if self.image_width < 1:
            raise ValueError("image width must be at least 1")
        if self.samples_per_pixel < 1:
            raise ValueError("samples per pixel must be at least 1")

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self._pixel_samples_scale = 1.0 / self.samples_per_pixel
        self._center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        w = unit_vector(self.lookfrom - self.lookat)
        u = unit_vector(cross(self.vup, w))
        v = cross(w, u)
        self._u, self._v, self._w = u, v, w

        viewport_u = viewport_width * u
        viewport_v = viewport_height * -v

        self._pixel_delta_u = viewport_u / self.image_width
        self._pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self._center - (self.focus_dist * w) - viewport_u / 2 - viewport_v / 2
        )
        self._pixel00_loc = viewport_upper_left + 0.5 * (
            self._pixel_delta_u + self._pixel_delta_v
        )

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self._defocus_disk_u = u * defocus_radius
        self._defocus_disk_v = v * defocus_radius
        self._initialized = True

    def get_ray(self, i: int, j: int) -> Ray:
        """Return a ray from the lens towards a random point around pixel (i, j)."""
        if not self._initialized:
            self.initialize()

        offset_x = random_double() - 0.5
        offset_y = random_double() - 0.5
        pixel_sample = (
            self._pixel00_loc
            + ((i + offset_x) * self._pixel_delta_u)
            + ((j + offset_y) * self._pixel_delta_v)
        )

        ray_origin = self._center if self.defocus_angle <= 0 else self._defocus_disk_sample()
        ray_direction = pixel_sample - ray_origin
        return Ray(ray_origin, ray_direction, random_double())

    def _defocus_disk_sample(self) -> Point3:
        p = random_in_unit_disk()
        return self._center + (p.x * self._defocus_disk_u) + (p.y * self._defocus_disk_v)

    def ray_color(
        self, r: Ray, depth: int, world: Hittable, lights: Optional[Hittable] = None
    ) -> Color:
        """Return the light gathered along ``r`` after at most ``depth`` bounces.

        When ``lights`` is given, diffuse bounces sample towards it half of the time.
        """
        if depth <= 0:
            return Color(0, 0, 0)

        rec = world.hit(r, Interval(0.001, INFINITY))
        if rec is None:
            return self.background

        mat = rec.mat if rec.mat is not None else _NO_MATERIAL
        emission = mat.emitted(r, rec, rec.u, rec.v, rec.p)

        srec = mat.scatter(r, rec)
        if srec is None:
            return emission

        if srec.skip_pdf:
            return srec.attenuation * self.ray_color(srec.skip_pdf_ray, depth - 1, world, lights)

        pdf = srec.pdf
        if lights is not None:
            pdf = MixturePdf(HittablePdf(lights, rec.p), srec.pdf)

        scattered = Ray(rec.p, pdf.generate(), r.time)
        pdf_value = pdf.value(scattered.direction)
        scattering_pdf = mat.scattering_pdf(r, rec, scattered)

        sample_color = self.ray_color(scattered, depth - 1, world, lights)
        if pdf_value == 0:
            # A zero density yields an undefined sample; the pixel writer discards it.
            return emission + Color(math.nan, math.nan, math.nan)
        return emission + (srec.attenuation * scattering_pdf * sample_color) / pdf_value

    def render(
        self,
        world: Hittable,
        out: Optional[TextIO] = None,
        lights: Optional[Hittable] = None,
        log: Optional[TextIO] = None,
    ) -> None:
        """Render ``world`` as a plain PPM image to ``out``, reporting progress to ``log``."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log
        self.initialize()

        out.write(f"P3\n{self.image_width} {self.image_height}\n255\n")

        for j in range(self.image_height):
            log.write(f"\rScanlines remaining: {self.image_height - j} ")
            log.flush()
            for i in range(self.image_width):
                pixel_color = Color(0, 0, 0)
                for _ in range(self.samples_per_pixel):
                    pixel_color = pixel_color + self.ray_color(
                        self.get_ray(i, j), self.max_depth, world, lights
                    )
                write_color(out, self._pixel_samples_scale * pixel_color)

        log.write("\rDone.                 \n")