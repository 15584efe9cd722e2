[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olio"
version = "0.1.0"
description = "A small ray tracer that renders a sphere or a triangle from a plain-text scene file."
requires-python = ">=3.10"
keywords = ["ray tracing", "rendering", "graphics", "camera", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pillow",
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rtbasic = "olio.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["olio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
