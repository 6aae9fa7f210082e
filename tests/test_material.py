import random

import pytest

from raytrace.hittable import HitRecord
from raytrace.material import (
    Dielectric,
    DiffuseLight,
    Isotropic,
    Lambertian,
    Material,
    Metal,
    ScatterRecord,
)
from raytrace.mathutil import PI
from raytrace.pdf import CosinePdf, SpherePdf
from raytrace.ray import Ray
from raytrace.texture import SolidColor
from raytrace.vec3 import Color, Vec3, reflect, unit_vector


def _record(front_face=True):
    return HitRecord(
        p=Vec3(1, 0, 0), normal=Vec3(0, 1, 0), t=1.0, u=0.3, v=0.6, front_face=front_face
    )


def test_base_material_does_nothing():
    mat = Material()
    rec = _record()
    r = Ray(Vec3(0, 1, 0), Vec3(0, -1, 0))
    assert mat.emitted(r, rec, 0.1, 0.2, rec.p) == Color(0, 0, 0)
    assert mat.scatter(r, rec) is None
    assert mat.scattering_pdf(r, rec, r) == 0.0


def test_lambertian_scatter_record():
    albedo = Color(0.5, 0.4, 0.3)
    rec = _record()
    srec = Lambertian(albedo).scatter(Ray(Vec3(0, 1, 0), Vec3(0, -1, 0)), rec)
    assert isinstance(srec, ScatterRecord)
    assert srec.attenuation == albedo
    assert isinstance(srec.pdf, CosinePdf)
    assert srec.skip_pdf is False


def test_lambertian_accepts_texture():
    tex = SolidColor(Color(0.1, 0.2, 0.3))
    srec = Lambertian(tex).scatter(Ray(), _record())
    assert srec.attenuation == Color(0.1, 0.2, 0.3)


def test_lambertian_scattering_pdf():
    mat = Lambertian(Color(1, 1, 1))
    rec = _record()
    r_in = Ray(Vec3(0, 1, 0), Vec3(0, -1, 0))
    assert mat.scattering_pdf(r_in, rec, Ray(rec.p, Vec3(0, 3, 0))) == pytest.approx(1 / PI)
    assert mat.scattering_pdf(r_in, rec, Ray(rec.p, Vec3(0, -3, 0))) == 0.0


def test_metal_fuzz_is_capped():
    assert Metal(Color(1, 1, 1), 5.0).fuzz == 1.0
    assert Metal(Color(1, 1, 1), 0.3).fuzz == 0.3


def test_metal_mirror_reflection():
    albedo = Color(0.8, 0.8, 0.8)
    rec = _record()
    r_in = Ray(Vec3(0, 1, 0), Vec3(1, -1, 0), 0.75)
    srec = Metal(albedo, 0.0).scatter(r_in, rec)
    assert srec.skip_pdf is True
    assert srec.pdf is None
    assert srec.attenuation == albedo
    assert srec.skip_pdf_ray.origin == rec.p
    assert srec.skip_pdf_ray.time == 0.75
    expected = unit_vector(Vec3(1, 1, 0))
    assert tuple(srec.skip_pdf_ray.direction) == pytest.approx(tuple(expected))


def test_dielectric_total_internal_reflection():
    rec = _record(front_face=False)
    r_in = Ray(Vec3(0, 1, 0), Vec3(1, -0.1, 0), 0.5)
    srec = Dielectric(1.5).scatter(r_in, rec)
    assert srec.attenuation == Color(1.0, 1.0, 1.0)
    assert srec.skip_pdf is True
    assert srec.skip_pdf_ray.time == 0.5
    expected = reflect(unit_vector(r_in.direction), rec.normal)
    assert tuple(srec.skip_pdf_ray.direction) == pytest.approx(tuple(expected))


def test_dielectric_normal_incidence_refracts_or_reflects():
    random.seed(21)
    mat = Dielectric(1.5)
    rec = _record()
    r_in = Ray(Vec3(1, 1, 0), Vec3(0, -1, 0))
    seen = set()
    for _ in range(400):
        d = mat.scatter(r_in, rec).skip_pdf_ray.direction
        if d.y > 0:
            assert tuple(d) == pytest.approx((0, 1, 0))
            seen.add("reflect")
        else:
            assert tuple(d) == pytest.approx((0, -1, 0))
            seen.add("refract")
    assert seen == {"reflect", "refract"}


def test_diffuse_light_emits_from_front_only():
    light = DiffuseLight(Color(4, 4, 4))
    r = Ray(Vec3(0, 1, 0), Vec3(0, -1, 0))
    front = _record(front_face=True)
    back = _record(front_face=False)
    assert light.emitted(r, front, 0, 0, front.p) == Color(4, 4, 4)
    assert light.emitted(r, back, 0, 0, back.p) == Color(0, 0, 0)
    assert light.scatter(r, front) is None


def test_isotropic():
    albedo = Color(0.2, 0.4, 0.9)
    mat = Isotropic(albedo)
    rec = _record()
    r = Ray(Vec3(0, 1, 0), Vec3(0, -1, 0))
    srec = mat.scatter(r, rec)
    assert srec.attenuation == albedo
    assert isinstance(srec.pdf, SpherePdf)
    assert srec.skip_pdf is False
    assert mat.scattering_pdf(r, rec, Ray(rec.p, Vec3(0, 0, 1))) == pytest.approx(1 / (4 * PI))