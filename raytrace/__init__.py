"""A Monte Carlo path tracer with BVH acceleration, textures, light sampling and PPM output."""

__version__ = "0.1.0"