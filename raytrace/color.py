"""Conversion of linear colours to gamma-corrected 8-bit pixel values."""

from __future__ import annotations

import math
from typing import TextIO

from .mathutil import Interval
from .vec3 import Color

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Apply the gamma-2 transform; non-positive values map to zero."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def to_bytes(pixel_color: Color) -> tuple[int, int, int]:
    """Return the gamma-corrected byte values (0-255) of a linear colour."""
    components = (0.0 if math.isnan(c) else c for c in pixel_color)
    r, g, b = (int(256 * _INTENSITY.clamp(linear_to_gamma(c))) for c in components)
    return r, g, b


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write one pixel as a PPM text line."""
    r, g, b = to_bytes(pixel_color)
    out.write(f"{r} {g} {b}\n")