# raytrace

A compact Monte Carlo path tracer. It renders scenes built from spheres
(stationary, or moving between two centres for motion blur), quads and
six-sided boxes, grouped in bounding volume hierarchies, with diffuse,
metal, glass, emissive and isotropic materials. Textures include solid
colours, 3D checkers, Perlin-noise marble and image maps. Diffuse bounces
can sample towards a list of lights through a mixture of probability
density functions.

Images are written as plain-text PPM (`P3`), with progress reported on
standard error.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Rendering from the command line

```
raytrace-render > image.ppm
```

Options:

- `--scene N` — which bundled scene to render (default 6):
  1 random small spheres in a BVH with depth of field,
  2 two checkered spheres,
  3 Perlin marble spheres,
  4 an image-textured globe,
  5 marble spheres lit by a sphere and a rectangle,
  6 the Cornell box with two rotated blocks,
  9 the Cornell box with an aluminium block and a glass ball, rendered with
  light sampling. Any other number gives scene 6.
- `--width`, `--samples`, `--depth` — override the scene's image width,
  samples per pixel and maximum bounce count.
- `--earth PATH` — texture image for scene 4 (default `earthmap.jpg`). If
  the image cannot be read, an error is printed and the globe is solid cyan.
- `-o FILE`, `--output FILE` — write the image to a file instead of
  standard output.

Invalid settings (for example a width below 1) print an error and exit
with status 2. Rendering in pure Python is slow; the default scenes at
their full sizes and sample counts take a long time, so `--width` and
`--samples` are useful for quick previews.

The scenes are also available as functions in `raytrace.scenes`:
`random_scene`, `two_spheres`, `two_perlin_spheres`, `earth`,
`simple_light`, `cornell_box`, `cornell_box_with_lights` (which returns the
world and its lights), and `build_scene(number)`, which returns a `Scene`
holding `world`, `camera` and `lights`.

## Monte Carlo experiments

```
raytrace-estimate pi
raytrace-estimate integrate-x-sq
raytrace-estimate cos-cubed
raytrace-estimate cos-density
raytrace-estimate sphere-importance
raytrace-estimate sphere-plot
```

Each subcommand takes `-n` for the sample count:

- `pi` — plain and stratified estimates of π over an N×N grid (default 10000).
- `integrate-x-sq` — ∫₀² x² dx by importance sampling with pdf 3x²/8 (default 1).
- `cos-cubed` — ∫ cos³θ over the hemisphere with uniform samples (default 1000000).
- `cos-density` — the same integral with cosine-weighted samples (default 1000000).
- `sphere-importance` — ∫ cos²θ over the sphere with uniform samples (default 1000000).
- `sphere-plot` — prints N points uniformly distributed on the unit sphere (default 2000).

The same experiments are functions in `raytrace.estimates`:
`estimate_pi`, `integrate_x_squared`, `cos_cubed_uniform`,
`cos_cubed_importance`, `sphere_importance` and `sphere_plot_points`.

## Using the library

```python
import sys

from raytrace.camera import Camera
from raytrace.hittable import HittableList
from raytrace.material import Lambertian
from raytrace.sphere import Sphere
from raytrace.vec3 import Vec3

world = HittableList()
world.add(Sphere(Vec3(0, -100.5, -1), 100, Lambertian(Vec3(0.5, 0.5, 0.5))))
world.add(Sphere(Vec3(0, 0, -1), 0.5, Lambertian(Vec3(0.1, 0.2, 0.5))))

cam = Camera()
cam.image_width = 200
cam.samples_per_pixel = 20
cam.background = Vec3(0.7, 0.8, 1.0)

cam.render(world, sys.stdout)
```

`Camera.render(world, out, lights, log)` also accepts a hittable of lights
to sample towards and a stream for progress messages.

Main building blocks:

- `raytrace.vec3` — `Vec3` and vector helpers (`dot`, `cross`,
  `unit_vector`, `reflect`, `refract`, random sampling functions).
- `raytrace.ray` — `Ray` with origin, direction and time.
- `raytrace.mathutil` — `Interval`, `clamp`, `degrees_to_radians` and
  random number helpers.
- `raytrace.aabb` — axis-aligned bounding boxes (`AABB`).
- `raytrace.hittable` — `HitRecord`, `Hittable`, `HittableList`, and the
  instance wrappers `Translate`, `RotateY` and `FlipFace`.
- `raytrace.sphere`, `raytrace.quad` — `Sphere` and `Quad`, plus `box`
  for six-sided boxes.
- `raytrace.bvh` — `BVHNode` acceleration structure.
- `raytrace.texture` — `SolidColor`, `CheckerTexture`, `NoiseTexture`
  (backed by `Perlin`) and `ImageTexture`.
- `raytrace.material` — `Lambertian`, `Metal`, `Dielectric`,
  `DiffuseLight` and `Isotropic`.
- `raytrace.pdf` — `ONB`, `CosinePdf`, `SpherePdf`, `HittablePdf` and
  `MixturePdf` for importance sampling.
- `raytrace.camera` — `Camera`, with field of view, look-at framing,
  defocus blur and a configurable bounce depth.
- `raytrace.color` — gamma correction and PPM pixel output.

## What it does not do

- There is no volume shape for smoke or fog: `Isotropic` is a material
  only, and no scene uses a participating medium.
- Output is plain-text PPM only; no other image formats are written.
- Rendering runs in a single process, with no parallelism.