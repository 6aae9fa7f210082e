"""Numeric helpers shared by the renderer: constants, random numbers and intervals."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import ClassVar

INFINITY = math.inf
PI = 3.1415926535897932385


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random real in [low, high)."""
    return low + (high - low) * random.random()


def random_int(low: int, high: int) -> int:
    """Return a random integer in [low, high]."""
    return int(random_double(low, high + 1))


def clamp(x: float, low: float, high: float) -> float:
    """Limit ``x`` to the closed range [low, high]."""
    if x < low:
        return low
    if x > high:
        return high
    return x


@dataclass(frozen=True)
class Interval:
    """A closed real interval; the default interval is empty."""

    min: float = INFINITY
    max: float = -INFINITY

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        return clamp(x, self.min, self.max)

    def expand(self, delta: float) -> Interval:
        """Return the interval widened by ``delta`` in total, half on each side."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def hull(self, other: Interval) -> Interval:
        """Return the tightest interval enclosing both intervals."""
        low = self.min if self.min <= other.min else other.min
        high = self.max if self.max >= other.max else other.max
        return Interval(low, high)

    def __add__(self, offset: float) -> Interval:
        if not isinstance(offset, (int, float)):
            return NotImplemented
        return Interval(self.min + offset, self.max + offset)

    __radd__ = __add__


Interval.EMPTY = Interval(INFINITY, -INFINITY)
Interval.UNIVERSE = Interval(-INFINITY, INFINITY)