"""Primary-ray renderer producing an RGB image of a scene."""

from __future__ import annotations

import itertools
import logging
import struct
import time
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image
from tqdm import tqdm

from olio.camera import Camera
from olio.ray import Ray
from olio.surface import Surface
from olio.types import INFINITY, Vec3, vec3, zeros3

logger = logging.getLogger(__name__)

_HIT_COLOR = (1.0, 0.0, 0.0)
_EXR_MAGIC = b"\x76\x2f\x31\x01"
_EXR_FLOAT = 2


def gamma_correct_image(image: np.ndarray, gamma: float) -> np.ndarray:
    """Raise every channel of a float RGB image to the power 1 / gamma."""
    source = np.asarray(image, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np.power(source, 1.0 / gamma)


def rgb_to_bgr_uint8(image: np.ndarray) -> np.ndarray:
    """Convert a float RGB image in [0, 1] to an 8-bit BGR image."""
    source = np.asarray(image, dtype=np.float64)
    scaled = np.clip(source * 255 + 0.5, 0, 255)
    return scaled[..., ::-1].astype(np.uint8)


def rgb_to_bgr_float32(image: np.ndarray) -> np.ndarray:
    """Convert a float RGB image to a single-precision BGR image."""
    source = np.asarray(image, dtype=np.float64)
    return np.ascontiguousarray(source[..., ::-1], dtype=np.float32)


def _exr_attribute(name: str, type_name: str, payload: bytes) -> bytes:
    return (
        name.encode("ascii")
        + b"\0"
        + type_name.encode("ascii")
        + b"\0"
        + struct.pack("<i", len(payload))
        + payload
    )


def _write_exr(path: Path, bgr: np.ndarray) -> None:
    """Write a float32 BGR image as an uncompressed scanline OpenEXR file."""
    height, width = bgr.shape[:2]
    channels = (
        b"".join(
            name.encode("ascii") + b"\0" + struct.pack("<iB3xii", _EXR_FLOAT, 0, 1, 1)
            for name in "BGR"
        )
        + b"\0"
    )
    window = struct.pack("<4i", 0, 0, width - 1, height - 1)
    header = b"".join(
        [
            _EXR_MAGIC,
            struct.pack("<I", 2),
            _exr_attribute("channels", "chlist", channels),
            _exr_attribute("compression", "compression", b"\0"),
            _exr_attribute("dataWindow", "box2i", window),
            _exr_attribute("displayWindow", "box2i", window),
            _exr_attribute("lineOrder", "lineOrder", b"\0"),
            _exr_attribute("pixelAspectRatio", "float", struct.pack("<f", 1.0)),
            _exr_attribute("screenWindowCenter", "v2f", struct.pack("<2f", 0.0, 0.0)),
            _exr_attribute("screenWindowWidth", "float", struct.pack("<f", 1.0)),
            b"\0",
        ]
    )
    row_bytes = width * 3 * 4
    block_size = 8 + row_bytes
    first_block = len(header) + 8 * height
    offsets = struct.pack(
        f"<{height}Q", *(first_block + row * block_size for row in range(height))
    )
    with path.open("wb") as stream:
        stream.write(header)
        stream.write(offsets)
        for row, pixels in enumerate(bgr):
            stream.write(struct.pack("<ii", row, row_bytes))
            stream.write(np.ascontiguousarray(pixels.T, dtype="<f4").tobytes())


class RayTracer:
    """Renders a scene by shooting one ray through the center of each pixel."""

    def __init__(self, image_height: int = 180) -> None:
        self.image_height = image_height
        self.rendered_image: Optional[np.ndarray] = None

    def ray_color(self, ray: Ray, scene: Surface) -> tuple[Vec3, bool]:
        """Return the ray's color and whether it hit the scene.

        A hit is colored red; a miss is black.
        """
        if scene.hit(ray, 0, INFINITY) is not None:
            return vec3(*_HIT_COLOR), True
        return zeros3(), False

    def render(self, scene: Optional[Surface], camera: Optional[Camera]) -> np.ndarray:
        """Render scene as seen by camera; returns the float RGB image.

        The image width follows from the camera's aspect ratio.
        """
        if scene is None or camera is None:
            raise ValueError("RayTracer: both a scene and a camera are needed")

        start = time.perf_counter()
        height = int(self.image_height)
        width = int(camera.aspect_ratio * height + 0.5)
        if height <= 0 or width <= 0:
            raise ValueError("RayTracer: invalid image dimensions")

        image = np.zeros((height, width, 3), dtype=np.float64)
        logger.info("Rendering...")
        with tqdm(total=height * width) as progress:
            for y, x in itertools.product(range(height), range(width)):
                s = (x + 0.5) / width
                t = (height - y - 0.5) / height
                color, _ = self.ray_color(camera.get_ray(s, t), scene)
                image[y, x] = color
                progress.update(1)

        self.rendered_image = image
        logger.info("Total render time: %s", time.perf_counter() - start)
        return image

    def write_image(self, image_name: Union[str, Path], gamma: float = 1.0) -> None:
        """Write the rendered image; .exr files are written without gamma."""
        if self.rendered_image is None:
            raise RuntimeError("no rendered image to write")
        path = Path(image_name)
        if path.suffix == ".exr":
            _write_exr(path, rgb_to_bgr_float32(self.rendered_image))
            return
        image = self.rendered_image
        if gamma != 1:
            image = gamma_correct_image(image, gamma)
        bgr = rgb_to_bgr_uint8(image)
        Image.fromarray(np.ascontiguousarray(bgr[..., ::-1])).save(path)