import io
import math

import pytest

from raytrace.color import linear_to_gamma, to_bytes, write_color
from raytrace.vec3 import Color


def test_linear_to_gamma_is_square_root():
    assert linear_to_gamma(0.25) == pytest.approx(math.sqrt(0.25))


def test_linear_to_gamma_non_positive_is_zero():
    assert linear_to_gamma(0.0) == 0
    assert linear_to_gamma(-1.0) == 0


def test_black_and_white_bytes():
    assert to_bytes(Color(0, 0, 0)) == (0, 0, 0)
    assert to_bytes(Color(1, 1, 1)) == (255, 255, 255)


def test_values_above_one_are_clamped():
    assert to_bytes(Color(50, 2, 1.5)) == to_bytes(Color(1, 1, 1))


def test_nan_components_become_zero():
    assert to_bytes(Color(math.nan, 1, math.nan)) == (0, 255, 0)


def test_bytes_are_monotonic():
    levels = [i / 20 for i in range(21)]
    values = [to_bytes(Color(x, x, x))[0] for x in levels]
    assert values == sorted(values)
    assert all(0 <= v <= 255 for v in values)


def test_write_color_writes_one_line():
    out = io.StringIO()
    write_color(out, Color(1, 0, 1))
    write_color(out, Color(0, 0, 0))
    assert out.getvalue() == "255 0 255\n0 0 0\n"


def test_write_color_matches_to_bytes():
    out = io.StringIO()
    c = Color(0.3, 0.6, 0.1)
    write_color(out, c)
    assert out.getvalue().split() == [str(v) for v in to_bytes(c)]