import pytest

from raytrace.aabb import AABB
from raytrace.mathutil import INFINITY, Interval
from raytrace.ray import Ray
from raytrace.vec3 import Vec3


def _unit_box():
    return AABB.from_points(Vec3(0, 0, 0), Vec3(1, 1, 1))


def test_from_points_is_order_independent():
    a = Vec3(3, -1, 2)
    b = Vec3(-2, 4, 7)
    assert AABB.from_points(a, b) == AABB.from_points(b, a)
    box = AABB.from_points(a, b)
    assert box.x == Interval(-2, 3)
    assert box.y == Interval(-1, 4)
    assert box.z == Interval(2, 7)


def test_flat_side_is_padded_to_minimum():
    box = AABB.from_points(Vec3(0, 0, 5), Vec3(1, 1, 5))
    assert box.z.size() == pytest.approx(0.0001)
    assert box.z.contains(5)
    assert box.x == Interval(0, 1)


def test_empty_box_stays_empty():
    assert AABB().x == Interval.EMPTY
    assert AABB.EMPTY.y == Interval.EMPTY
    assert AABB.UNIVERSE.z == Interval.UNIVERSE


def test_axis_interval_selects_axis():
    box = AABB(Interval(0, 1), Interval(2, 3), Interval(4, 5))
    assert box.axis_interval(0) == Interval(0, 1)
    assert box.axis_interval(1) == Interval(2, 3)
    assert box.axis_interval(2) == Interval(4, 5)


def test_surrounding_encloses_both():
    b0 = AABB.from_points(Vec3(0, 0, 0), Vec3(1, 1, 1))
    b1 = AABB.from_points(Vec3(-2, 0.5, 3), Vec3(0.5, 4, 6))
    both = AABB.surrounding(b0, b1)
    assert both.x == Interval(-2, 1)
    assert both.y == Interval(0, 4)
    assert both.z == Interval(0, 6)
    assert AABB.surrounding(b0, AABB.EMPTY) == b0


def test_hit_along_axis():
    r = Ray(Vec3(0.5, 0.5, -5), Vec3(0, 0, 1))
    assert _unit_box().hit(r, Interval(0, INFINITY))


def test_miss_beside_box():
    r = Ray(Vec3(5, 5, -5), Vec3(0, 0, 1))
    assert not _unit_box().hit(r, Interval(0, INFINITY))


def test_miss_when_pointing_away():
    r = Ray(Vec3(0.5, 0.5, -5), Vec3(0, 0, -1))
    assert not _unit_box().hit(r, Interval(0, INFINITY))


def test_miss_when_interval_ends_before_box():
    r = Ray(Vec3(0.5, 0.5, -5), Vec3(0, 0, 1))
    assert not _unit_box().hit(r, Interval(0, 1))


def test_diagonal_hit():
    r = Ray(Vec3(-1, -1, -1), Vec3(1, 1, 1))
    assert _unit_box().hit(r, Interval(0, INFINITY))


def test_longest_axis():
    box = AABB(Interval(0, 1), Interval(0, 5), Interval(0, 2))
    assert box.longest_axis() == 1
    box = AABB(Interval(0, 9), Interval(0, 5), Interval(0, 2))
    assert box.longest_axis() == 0


def test_area_scales_quadratically():
    small = AABB.from_points(Vec3(0, 0, 0), Vec3(1, 2, 3))
    large = AABB.from_points(Vec3(0, 0, 0), Vec3(2, 4, 6))
    assert large.area() == pytest.approx(4 * small.area())


def test_add_offset_moves_box():
    box = _unit_box()
    offset = Vec3(10, -2, 3)
    moved = box + offset
    assert moved.x == Interval(10, 11)
    assert moved.y == Interval(-2, -1)
    assert moved.z == Interval(3, 4)
    assert offset + box == moved