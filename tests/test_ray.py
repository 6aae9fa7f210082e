import pytest

from raytrace.ray import Ray
from raytrace.vec3 import Vec3

ORIGIN = Vec3(1.0, 2.0, 3.0)
DIRECTION = Vec3(0.5, -1.0, 2.0)


def test_at_zero_is_origin():
    assert Ray(ORIGIN, DIRECTION).at(0) == ORIGIN


def test_at_one_is_origin_plus_direction():
    assert Ray(ORIGIN, DIRECTION).at(1) == ORIGIN + DIRECTION


def test_at_is_linear():
    r = Ray(ORIGIN, DIRECTION)
    midpoint = r.at(0.5)
    expected = (r.at(0) + r.at(1)) / 2
    for got, want in zip(midpoint, expected):
        assert got == pytest.approx(want)


def test_default_time_is_zero():
    assert Ray(ORIGIN, DIRECTION).time == 0.0


def test_time_is_kept():
    r = Ray(ORIGIN, DIRECTION, 0.75)
    assert r.time == 0.75
    assert r.origin == ORIGIN and r.direction == DIRECTION


def test_default_ray_is_at_origin():
    r = Ray()
    assert r.at(5.0) == Vec3()