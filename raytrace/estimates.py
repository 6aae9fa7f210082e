"""Monte Carlo estimates of pi and of simple integrals over the sphere."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterator, Optional, Sequence

from .mathutil import PI, random_double
from .pdf import random_cosine_direction
from .vec3 import Vec3, random_unit_vector


def _require_positive(n: int) -> None:
    if n <= 0:
        raise ValueError("the sample count must be positive")


def estimate_pi(sqrt_n: int = 10000) -> tuple[float, float]:
    """Return (plain, stratified) estimates of pi from ``sqrt_n`` squared samples each."""
    _require_positive(sqrt_n)
    inside_circle = 0
    inside_circle_stratified = 0
    for i in range(sqrt_n):
        for j in range(sqrt_n):
            x = random_double(-1, 1)
            y = random_double(-1, 1)
            if x * x + y * y < 1:
                inside_circle += 1

            x = 2 * ((i + random_double()) / sqrt_n) - 1
            y = 2 * ((j + random_double()) / sqrt_n) - 1
            if x * x + y * y < 1:
                inside_circle_stratified += 1

    total = sqrt_n * sqrt_n
    return 4 * inside_circle / total, 4 * inside_circle_stratified / total


def _x_squared_pdf(x: float) -> float:
    return 3 * x * x / 8


def integrate_x_squared(n: int = 1) -> float:
    """Estimate the integral of x^2 over [0, 2] by importance sampling with pdf 3x^2/8."""
    _require_positive(n)
    total = 0.0
    for _ in range(n):
        x = random_double(0, 8) ** (1.0 / 3.0)
        total += x * x / _x_squared_pdf(x)
    return total / n


def cos_cubed_uniform(n: int = 1000000) -> float:
    """Estimate the hemisphere integral of cos^3 with uniform hemisphere sampling."""
    _require_positive(n)
    total = 0.0
    for _ in range(n):
        z = 1 - random_double()
        total += z * z * z / (1.0 / (2.0 * PI))
    return total / n


def cos_cubed_importance(n: int = 1000000) -> float:
    """Estimate the hemisphere integral of cos^3 with cosine-weighted sampling."""
    _require_positive(n)
    total = 0.0
    for _ in range(n):
        z = random_cosine_direction().z
        total += z * z * z / (z / PI)
    return total / n


def sphere_importance(n: int = 1000000) -> float:
    """Estimate the integral of cos^2 over the whole sphere with uniform sampling."""
    _require_positive(n)
    density = 1.0 / (4.0 * PI)
    total = 0.0
    for _ in range(n):
        d = random_unit_vector()
        total += d.z * d.z / density
    return total / n


def sphere_plot_points(count: int = 2000) -> Iterator[Vec3]:
    """Yield ``count`` points uniformly distributed on the unit sphere."""
    if count < 0:
        raise ValueError("the point count must not be negative")
    for _ in range(count):
        r1 = random_double()
        r2 = random_double()
        radial = 2 * math.sqrt(r2 * (1 - r2))
        yield Vec3(math.cos(2 * PI * r1) * radial, math.sin(2 * PI * r1) * radial, 1 - 2 * r2)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Monte Carlo estimation experiments.")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, default, help_text in (
        ("pi", 10000, "estimate pi; N is the side of the sample grid"),
        ("integrate-x-sq", 1, "integrate x^2 over [0, 2]"),
        ("cos-cubed", 1000000, "integrate cos^3 with uniform sampling"),
        ("cos-density", 1000000, "integrate cos^3 with cosine sampling"),
        ("sphere-importance", 1000000, "integrate cos^2 over the sphere"),
        ("sphere-plot", 2000, "print random points on the unit sphere"),
    ):
        command = sub.add_parser(name, help=help_text)
        command.add_argument("-n", type=int, default=default, help=f"sample count (default {default})")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one experiment and print its result."""
    args = _build_parser().parse_args(argv)
    n = args.n
    out = sys.stdout
    try:
        if args.command == "pi":
            regular, stratified = estimate_pi(n)
            out.write(f"Regular    Estimate of Pi = {regular:.12f}\n")
            out.write(f"Stratified Estimate of Pi = {stratified:.12f}\n")
        elif args.command == "integrate-x-sq":
            out.write(f"I = {integrate_x_squared(n):.12f}\n")
        elif args.command == "cos-cubed":
            out.write(f"PI/2 = {PI / 2:.12f}\n")
            out.write(f"Estimate = {cos_cubed_uniform(n):.12f}\n")
        elif args.command == "cos-density":
            out.write(f"PI/2 = {PI / 2:.12f}\n")
            out.write(f"Estimate = {cos_cubed_importance(n):.12f}\n")
        elif args.command == "sphere-importance":
            out.write(f"I = {sphere_importance(n):.12f}\n")
        else:
            for p in sphere_plot_points(n):
                out.write(f"{p.x:g} {p.y:g} {p.z:g}\n")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())