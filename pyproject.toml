[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "raytrace"
version = "0.1.0"
description = "A small Monte Carlo path tracer with spheres, quads, BVH acceleration, textures and light importance sampling."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "ray tracing",
    "path tracing",
    "rendering",
    "graphics",
    "monte carlo",
    "bvh",
    "perlin noise",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raytrace-render = "raytrace.scenes:main"
raytrace-estimate = "raytrace.estimates:main"

[tool.setuptools.packages.find]
include = ["raytrace*"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
