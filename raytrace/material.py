"""Surface and volume materials: how light is emitted and scattered."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Union

from .hittable import HitRecord
from .mathutil import PI, random_double
from .pdf import CosinePdf, Pdf, SpherePdf
from .ray import Ray
from .texture import SolidColor, Texture
from .vec3 import Color, Point3, dot, random_unit_vector, reflect, refract, unit_vector


def _as_texture(value: Union[Texture, Color]) -> Texture:
    return value if isinstance(value, Texture) else SolidColor(value)


@dataclass
class ScatterRecord:
    """Result of a scattering event.

    With ``skip_pdf`` set the material chose ``skip_pdf_ray`` itself; otherwise
    ``pdf`` describes the scattered directions.
    """

    attenuation: Color = field(default_factory=Color)
    pdf: Optional[Pdf] = None
    skip_pdf: bool = False
    skip_pdf_ray: Optional[Ray] = None


class Material:
    """A material that neither emits nor scatters."""

    def emitted(self, r_in: Ray, rec: HitRecord, u: float, v: float, p: Point3) -> Color:
        return Color(0, 0, 0)

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        """Return how the ray scatters, or None if it is absorbed."""
        return None

    def scattering_pdf(self, r_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 0.0


class Lambertian(Material):
    """Ideal diffuse reflector."""

    def __init__(self, albedo: Union[Texture, Color]) -> None:
        self.tex = _as_texture(albedo)

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        return ScatterRecord(
            attenuation=self.tex.value(rec.u, rec.v, rec.p),
            pdf=CosinePdf(rec.normal),
            skip_pdf=False,
        )

    def scattering_pdf(self, r_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        cos_theta = dot(rec.normal, unit_vector(scattered.direction))
        return 0.0 if cos_theta < 0 else cos_theta / PI


class Metal(Material):
    """Mirror-like reflector with optional fuzz (capped at 1)."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        reflected = reflect(r_in.direction, rec.normal)
        reflected = unit_vector(reflected) + self.fuzz * random_unit_vector()
        return ScatterRecord(
            attenuation=self.albedo,
            pdf=None,
            skip_pdf=True,
            skip_pdf_ray=Ray(rec.p, reflected, r_in.time),
        )


class Dielectric(Material):
    """Clear material that refracts or reflects, by Schlick's approximation."""

    def __init__(self, refraction_index: float) -> None:
        self.refraction_index = refraction_index

    @staticmethod
    def _reflectance(cosine: float, refraction_index: float) -> float:
        r0 = (1 - refraction_index) / (1 + refraction_index)
        r0 = r0 * r0
        return r0 + (1 - r0) * (1 - cosine) ** 5

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        ri = (1.0 / self.refraction_index) if rec.front_face else self.refraction_index

        unit_direction = unit_vector(r_in.direction)
        cos_theta = min(dot(-unit_direction, rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or self._reflectance(cos_theta, ri) > random_double():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return ScatterRecord(
            attenuation=Color(1.0, 1.0, 1.0),
            pdf=None,
            skip_pdf=True,
            skip_pdf_ray=Ray(rec.p, direction, r_in.time),
        )


class DiffuseLight(Material):
    """A light source emitting from its front face."""

    def __init__(self, emit: Union[Texture, Color]) -> None:
        self.tex = _as_texture(emit)

    def emitted(self, r_in: Ray, rec: HitRecord, u: float, v: float, p: Point3) -> Color:
        if not rec.front_face:
            return Color(0, 0, 0)
        return self.tex.value(u, v, p)


class Isotropic(Material):
    """Scatters uniformly in all directions; used for participating media."""

    def __init__(self, albedo: Union[Texture, Color]) -> None:
        self.tex = _as_texture(albedo)

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        return ScatterRecord(
            attenuation=self.tex.value(rec.u, rec.v, rec.p),
            pdf=SpherePdf(),
            skip_pdf=False,
        )

    def scattering_pdf(self, r_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 1 / (4 * PI)