"""Example scenes and a command that renders one of them as a PPM image."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from os import PathLike
from typing import Optional, Sequence, Union

from .bvh import BVHNode
from .camera import Camera
from .hittable import Hittable, HittableList, RotateY, Translate
from .material import Dielectric, DiffuseLight, Lambertian, Material, Metal
from .mathutil import random_double
from .quad import Quad, box
from .sphere import Sphere
from .texture import CheckerTexture, ImageTexture, NoiseTexture
from .vec3 import Color, Point3, Vec3, random_vector

DEFAULT_SCENE = 6
IMPORTANCE_SCENE = 9
_SKY = Color(0.70, 0.80, 1.00)
_EARTH_IMAGE = "earthmap.jpg"


@dataclass
class Scene:
    """A world to render, the camera that sees it, and optional lights to sample."""

    world: Hittable
    camera: Camera
    lights: Optional[Hittable] = None


def _xy_rect(x0: float, x1: float, y0: float, y1: float, k: float,
             material: Optional[Material]) -> Quad:
    return Quad(Point3(x0, y0, k), Vec3(x1 - x0, 0, 0), Vec3(0, y1 - y0, 0), material)


def _xz_rect(x0: float, x1: float, z0: float, z1: float, k: float,
             material: Optional[Material]) -> Quad:
    return Quad(Point3(x0, k, z0), Vec3(x1 - x0, 0, 0), Vec3(0, 0, z1 - z0), material)


def _yz_rect(y0: float, y1: float, z0: float, z1: float, k: float,
             material: Optional[Material]) -> Quad:
    return Quad(Point3(k, y0, z0), Vec3(0, y1 - y0, 0), Vec3(0, 0, z1 - z0), material)


def _camera(
    *,
    lookfrom: Point3,
    lookat: Point3,
    vfov: float = 40.0,
    aperture: float = 0.0,
    aspect_ratio: float = 16.0 / 9.0,
    image_width: int = 400,
    samples_per_pixel: int = 100,
    background: Color = Color(0, 0, 0),
) -> Camera:
    focus_dist = 10.0
    defocus_angle = 2 * math.degrees(math.atan((aperture / 2) / focus_dist))
    return Camera(
        aspect_ratio=aspect_ratio,
        image_width=image_width,
        samples_per_pixel=samples_per_pixel,
        max_depth=50,
        background=background,
        vfov=vfov,
        lookfrom=lookfrom,
        lookat=lookat,
        vup=Vec3(0, 1, 0),
        defocus_angle=defocus_angle,
        focus_dist=focus_dist,
    )


def random_scene() -> HittableList:
    """Return the many-small-spheres scene, gathered into a bounding volume hierarchy."""
    world = HittableList()

    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Point3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())

            if (center - Vec3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector() * random_vector()
                center2 = center + Vec3(0, random_double(0, 0.5), 0)
                world.add(Sphere(center, 0.2, Lambertian(albedo), center2=center2))
            elif choose_mat < 0.95:
                albedo = random_vector(0.5, 1)
                fuzz = random_double(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    return HittableList(BVHNode(world))


def two_spheres() -> HittableList:
    """Return two large checkered spheres touching at the origin."""
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    return HittableList(
        Sphere(Point3(0, -10, 0), 10, Lambertian(checker)),
        Sphere(Point3(0, 10, 0), 10, Lambertian(checker)),
    )


def two_perlin_spheres() -> HittableList:
    """Return a marble ground and a marble sphere."""
    pertext = NoiseTexture(4)
    return HittableList(
        Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)),
        Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)),
    )


def earth(path: Union[str, PathLike] = _EARTH_IMAGE) -> HittableList:
    """Return a globe textured with the image at ``path``."""
    surface = Lambertian(ImageTexture(path))
    return HittableList(Sphere(Point3(0, 0, 0), 2, surface))


def simple_light() -> HittableList:
    """Return the marble spheres lit by a spherical and a rectangular light."""
    pertext = NoiseTexture(4)
    difflight = DiffuseLight(Color(4, 4, 4))
    return HittableList(
        Sphere(Point3(0, -1000, 0), 1000, Lambertian(pertext)),
        Sphere(Point3(0, 2, 0), 2, Lambertian(pertext)),
        Sphere(Point3(0, 7, 0), 2, difflight),
        _xy_rect(3, 5, 1, 3, -2, difflight),
    )


def _cornell_walls(light: Material) -> HittableList:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    return HittableList(
        _yz_rect(0, 555, 0, 555, 555, green),
        _yz_rect(0, 555, 0, 555, 0, red),
        _xz_rect(213, 343, 227, 332, 554, light),
        _xz_rect(0, 555, 0, 555, 555, white),
        _xz_rect(0, 555, 0, 555, 0, white),
        _xy_rect(0, 555, 0, 555, 555, white),
    )


def cornell_box() -> HittableList:
    """Return the Cornell box with two rotated white blocks."""
    objects = _cornell_walls(DiffuseLight(Color(15, 15, 15)))
    white = Lambertian(Color(0.73, 0.73, 0.73))

    box1: Hittable = box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    box1 = Translate(RotateY(box1, 15), Vec3(265, 0, 295))
    objects.add(box1)

    box2: Hittable = box(Point3(0, 0, 0), Point3(165, 165, 165), white)
    box2 = Translate(RotateY(box2, -18), Vec3(130, 0, 65))
    objects.add(box2)

    return objects


def cornell_box_with_lights() -> tuple[HittableList, HittableList]:
    """Return the Cornell box with an aluminium block and a glass ball, and its lights.

    The second list holds the shapes that diffuse bounces sample towards.
    """
    objects = _cornell_walls(DiffuseLight(Color(15, 15, 15)))

    aluminum = Metal(Color(0.8, 0.85, 0.88), 0.0)
    box1: Hittable = box(Point3(0, 0, 0), Point3(165, 330, 165), aluminum)
    box1 = Translate(RotateY(box1, 15), Vec3(265, 0, 295))
    objects.add(box1)

    objects.add(Sphere(Point3(190, 90, 190), 90, Dielectric(1.5)))

    lights = HittableList(
        _xz_rect(213, 343, 227, 332, 554, None),
        Sphere(Point3(190, 90, 190), 90, None),
    )
    return objects, lights


def _build(number: int, earth_path: Union[str, PathLike]) -> Scene:
    if number == 1:
        return Scene(random_scene(), _camera(
            lookfrom=Point3(13, 2, 3), lookat=Point3(0, 0, 0), vfov=20.0,
            aperture=0.1, background=_SKY))
    if number == 2:
        return Scene(two_spheres(), _camera(
            lookfrom=Point3(13, 2, 3), lookat=Point3(0, 0, 0), vfov=20.0, background=_SKY))
    if number == 3:
        return Scene(two_perlin_spheres(), _camera(
            lookfrom=Point3(13, 2, 3), lookat=Point3(0, 0, 0), vfov=20.0, background=_SKY))
    if number == 4:
        return Scene(earth(earth_path), _camera(
            lookfrom=Point3(0, 0, 12), lookat=Point3(0, 0, 0), vfov=20.0, background=_SKY))
    if number == 5:
        return Scene(simple_light(), _camera(
            lookfrom=Point3(26, 3, 6), lookat=Point3(0, 2, 0), vfov=20.0,
            samples_per_pixel=400))
    if number == IMPORTANCE_SCENE:
        world, lights = cornell_box_with_lights()
        return Scene(world, _camera(
            lookfrom=Point3(278, 278, -800), lookat=Point3(278, 278, 0), vfov=40.0,
            aspect_ratio=1.0, image_width=600, samples_per_pixel=100), lights)
    return Scene(cornell_box(), _camera(
        lookfrom=Point3(278, 278, -800), lookat=Point3(278, 278, 0), vfov=40.0,
        aspect_ratio=1.0, image_width=600, samples_per_pixel=200))


def build_scene(number: int = DEFAULT_SCENE) -> Scene:
    """Return scene ``number`` with its camera; unknown numbers give the Cornell box."""
    return _build(number, _EARTH_IMAGE)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an example scene as a plain PPM image.")
    parser.add_argument("--scene", type=int, default=DEFAULT_SCENE,
                        help="1 random spheres, 2 checkered spheres, 3 marble, 4 earth, "
                             "5 simple light, 6 Cornell box, 9 Cornell box with light sampling")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--depth", type=int, help="maximum number of bounces")
    parser.add_argument("--earth", default=_EARTH_IMAGE, help="texture image for scene 4")
    parser.add_argument("-o", "--output", help="output file (default standard output)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the chosen scene; return 0 on success and 2 on bad settings."""
    args = _build_parser().parse_args(argv)
    scene = _build(args.scene, args.earth)
    cam = scene.camera
    if args.width is not None:
        cam.image_width = args.width
    if args.samples is not None:
        cam.samples_per_pixel = args.samples
    if args.depth is not None:
        cam.max_depth = args.depth

    try:
        if args.output is None:
            cam.render(scene.world, sys.stdout, scene.lights)
        else:
            with open(args.output, "w", encoding="ascii") as out:
                cam.render(scene.world, out, scene.lights)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())