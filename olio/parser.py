"""Reader for the simple Raytra scene format."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np

from olio.camera import Camera
from olio.sphere import Sphere
from olio.surface import Surface
from olio.triangle import Triangle
from olio.types import EPSILON, RAD_TO_DEG, Vec3, vec3

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when a scene file cannot be read or is invalid."""


@dataclass
class ParsedScene:
    """Result of parsing a scene: its surface, camera and image size."""

    scene: Optional[Surface]
    camera: Camera
    image_size: tuple[int, int]


def _divide(a: float, b: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(a) / np.float64(b))


def _is_approx(a: Vec3, b: Vec3, precision: float = 1e-12) -> bool:
    difference = float(np.linalg.norm(a - b))
    return difference <= precision * min(float(np.linalg.norm(a)), float(np.linalg.norm(b)))


def _numbers(fields: list[str], count: int, line: str) -> list[float]:
    if len(fields) < count:
        raise ParseError(f"expected {count} numbers in line: {line!r}")
    try:
        return [float(value) for value in fields[:count]]
    except ValueError as exc:
        raise ParseError(f"invalid number in line: {line!r}") from exc


def _parse_camera(values: list[float]) -> tuple[Camera, tuple[int, int]]:
    x, y, z, vx, vy, vz, focal_length, vp_width, vp_height, px_width, px_height = values
    eye = vec3(x, y, z)
    view = vec3(vx, vy, vz)
    length = float(np.linalg.norm(view))
    if length > 0:
        view = view / length
    target = eye + view
    up = vec3(0, 1, 0)
    if _is_approx(view, up):
        up = vec3(0, 0, 1)
    fovy = 2 * math.atan2(vp_height * 0.5, focal_length) * RAD_TO_DEG

    viewport_aspect = _divide(vp_width, vp_height)
    if not math.isfinite(viewport_aspect) or viewport_aspect <= 0:
        raise ParseError(f"Camera has bad viewport_aspect ratio: {viewport_aspect}")
    if viewport_aspect > 20000:
        logger.warning("Camera has very large viewport_aspect ratio: %s", viewport_aspect)
    image_aspect = _divide(px_width, px_height)
    if not abs(viewport_aspect - image_aspect) <= EPSILON:
        logger.warning(
            "Camera viewport has a different aspect ratio than output image "
            "(viewport_aspect: %s vs image_aspect: %s)",
            viewport_aspect,
            image_aspect,
        )
        logger.warning("Output image width will be adjusted to match the viewport aspect ratio")

    camera = Camera(eye, target, up, fovy, viewport_aspect)
    return camera, (int(px_width), int(px_height))


def parse_lines(lines: Iterable[str]) -> ParsedScene:
    """Parse scene lines holding exactly one camera and at most one surface."""
    scene: Optional[Surface] = None
    camera: Optional[Camera] = None
    image_size = (0, 0)
    camera_count = 0
    surface_count = 0

    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("/"):
            continue
        command, fields = line[0], line[1:].split()
        if command == "s":
            x, y, z, r = _numbers(fields, 4, line)
            scene = Sphere(vec3(x, y, z), r)
            surface_count += 1
        elif command == "c":
            camera, image_size = _parse_camera(_numbers(fields, 11, line))
            camera_count += 1
        elif command == "t":
            ax, ay, az, bx, by, bz, cx, cy, cz = _numbers(fields, 9, line)
            scene = Triangle(vec3(ax, ay, az), vec3(bx, by, bz), vec3(cx, cy, cz))
            surface_count += 1

    if camera_count != 1 or camera is None:
        raise ParseError("scene file should contain only one camera")
    if surface_count > 1:
        raise ParseError("scene file currently can only contain one surface")
    return ParsedScene(scene=scene, camera=camera, image_size=image_size)


def parse_file(filename: Union[str, Path]) -> ParsedScene:
    """Parse the scene file at filename."""
    path = Path(filename)
    if not path.exists():
        raise ParseError(f"file {filename} does not exist")
    try:
        with path.open("r", encoding="utf-8") as stream:
            return parse_lines(stream)
    except OSError as exc:
        raise ParseError(f"could not open file {filename} for reading") from exc