import math
import random

import pytest

from raytrace.aabb import AABB
from raytrace.hittable import Hittable
from raytrace.mathutil import PI
from raytrace.pdf import (
    ONB,
    CosinePdf,
    HittablePdf,
    MixturePdf,
    Pdf,
    SpherePdf,
    random_cosine_direction,
    random_to_sphere,
)
from raytrace.vec3 import Vec3, dot, unit_vector


class _FixedPdf(Pdf):
    def __init__(self, density, direction):
        self.density = density
        self.direction = direction

    def value(self, direction):
        return self.density

    def generate(self):
        return self.direction


class _Target(Hittable):
    def __init__(self):
        self.origins = []

    def hit(self, r, ray_t):
        return None

    def bounding_box(self):
        return AABB.EMPTY

    def pdf_value(self, origin, direction):
        self.origins.append(origin)
        return 0.25

    def random(self, origin):
        self.origins.append(origin)
        return Vec3(0, 0, 5)


@pytest.mark.parametrize("w", [Vec3(0, 0, 3), Vec3(1, 2, 3), Vec3(5, 0.1, 0), Vec3(-1, -1, 0)])
def test_onb_is_orthonormal(w):
    basis = ONB.from_w(w)
    for axis in (basis.u, basis.v, basis.w):
        assert axis.length() == pytest.approx(1.0)
    assert dot(basis.u, basis.v) == pytest.approx(0.0, abs=1e-12)
    assert dot(basis.v, basis.w) == pytest.approx(0.0, abs=1e-12)
    assert dot(basis.u, basis.w) == pytest.approx(0.0, abs=1e-12)
    assert tuple(basis.w) == pytest.approx(tuple(unit_vector(w)))


def test_onb_local_maps_z_to_w():
    basis = ONB.from_w(Vec3(1, 2, 3))
    assert tuple(basis.local(Vec3(0, 0, 1))) == pytest.approx(tuple(basis.w))
    assert tuple(basis.local(Vec3(1, 0, 0))) == pytest.approx(tuple(basis.u))


def test_random_cosine_direction_is_unit_upper_hemisphere():
    random.seed(1)
    for _ in range(200):
        d = random_cosine_direction()
        assert d.length() == pytest.approx(1.0)
        assert d.z >= 0


def test_random_to_sphere_stays_in_cone():
    random.seed(2)
    radius, distance_squared = 1.0, 16.0
    cos_max = math.sqrt(1 - radius * radius / distance_squared)
    for _ in range(200):
        d = random_to_sphere(radius, distance_squared)
        assert d.length() == pytest.approx(1.0)
        assert d.z >= cos_max - 1e-12


def test_cosine_pdf_values():
    pdf = CosinePdf(Vec3(0, 2, 0))
    assert pdf.value(Vec3(0, 7, 0)) == pytest.approx(1 / PI)
    assert pdf.value(Vec3(0, -1, 0)) == 0.0
    assert pdf.value(Vec3(1, 0, 0)) == 0.0


def test_cosine_pdf_generates_in_hemisphere():
    random.seed(3)
    normal = Vec3(1, 1, 0)
    pdf = CosinePdf(normal)
    for _ in range(100):
        assert dot(pdf.generate(), normal) >= -1e-12


def test_sphere_pdf():
    random.seed(4)
    pdf = SpherePdf()
    assert pdf.value(Vec3(3, -2, 1)) == pytest.approx(1 / (4 * PI))
    assert pdf.generate().length() == pytest.approx(1.0)


def test_hittable_pdf_delegates_with_origin():
    target = _Target()
    origin = Vec3(1, 2, 3)
    pdf = HittablePdf(target, origin)
    assert pdf.value(Vec3(0, 1, 0)) == 0.25
    assert pdf.generate() == Vec3(0, 0, 5)
    assert target.origins == [origin, origin]


def test_mixture_pdf_value_is_average():
    mix = MixturePdf(_FixedPdf(0.2, Vec3(1, 0, 0)), _FixedPdf(0.6, Vec3(0, 1, 0)))
    assert mix.value(Vec3(0, 0, 1)) == pytest.approx(0.4)


def test_mixture_pdf_generates_from_both():
    random.seed(5)
    a, b = Vec3(1, 0, 0), Vec3(0, 1, 0)
    mix = MixturePdf(_FixedPdf(1.0, a), _FixedPdf(1.0, b))
    samples = {mix.generate() for _ in range(100)}
    assert samples == {a, b}


def test_pdf_is_abstract():
    with pytest.raises(TypeError):
        Pdf()