"""Look-at camera that generates primary rays through a viewport."""

from __future__ import annotations

import math
from typing import ClassVar, Optional

import numpy as np
import numpy.typing as npt

from olio.node import Node
from olio.ray import Ray
from olio.types import Real, Vec3, as_vec3, vec3, zeros3


def _normalized(vector: Vec3) -> Vec3:
    length = float(np.linalg.norm(vector))
    return vector / length if length > 0 else vector


class Camera(Node):
    """Camera node described by eye, target and up vector.

    ``camera_xform`` holds the camera's u, v, w axes in its first three
    columns and the eye position in the fourth.
    """

    default_name: ClassVar[str] = "Camera"

    def __init__(
        self,
        eye: Optional[npt.ArrayLike] = None,
        target: Optional[npt.ArrayLike] = None,
        up: Optional[npt.ArrayLike] = None,
        fovy: Real = 60.0,
        aspect: Real = 1.77778,
        name: str = "",
    ) -> None:
        super().__init__(name)
        self._eye = zeros3()
        self._target = zeros3()
        self._up = vec3(0, 1, 0)
        self._camera_xform = np.identity(4, dtype=np.float64)
        self._fovy = float(fovy)
        self._aspect = float(aspect)
        self._lower_left_corner = vec3(-1.0264, -0.5774, -1.0)
        self._horizontal = vec3(2.0528, 0.0, 0.0)
        self._vertical = vec3(0.0, 1.1547, 0.0)

        given = (eye is not None, target is not None, up is not None)
        if any(given):
            if not all(given):
                raise ValueError("eye, target and up must be given together")
            self.look_at(eye, target, up, True)

    def look_at(
        self,
        eye: npt.ArrayLike,
        target: npt.ArrayLike,
        up: npt.ArrayLike,
        update_viewport: bool = True,
    ) -> None:
        """Orient the camera at eye, looking towards target."""
        self._eye = as_vec3(eye)
        self._target = as_vec3(target)
        self._up = as_vec3(up)

        w = _normalized(self._eye - self._target)
        u = _normalized(np.cross(self._up, w))
        v = np.cross(w, u)

        self._camera_xform[:3, 0] = u
        self._camera_xform[:3, 1] = v
        self._camera_xform[:3, 2] = w
        self._camera_xform[:3, 3] = self._eye

        if update_viewport:
            self.update_viewport()

    def set_fovy(self, fovy: Real, update_viewport: bool = True) -> None:
        """Set the vertical field of view in degrees."""
        self._fovy = float(fovy)
        if update_viewport:
            self.update_viewport()

    def set_aspect(self, aspect: Real, update_viewport: bool = True) -> None:
        """Set the viewport aspect ratio."""
        self._aspect = float(aspect)
        if update_viewport:
            self.update_viewport()

    def update_viewport(self) -> None:
        """Recompute the viewport from the camera axes, fovy and aspect."""
        height = 2 * math.tan(self._fovy * math.pi / 360)
        width = self._aspect * height
        u = self._camera_xform[:3, 0]
        v = self._camera_xform[:3, 1]
        w = self._camera_xform[:3, 2]
        e = self._camera_xform[:3, 3]

        self._horizontal = u * width
        self._vertical = v * height
        self._lower_left_corner = e - w - 0.5 * (self._horizontal + self._vertical)

    def get_ray(self, s: Real, t: Real) -> Ray:
        """Ray from the eye through viewport point (s, t), both in [0, 1]."""
        point = self._lower_left_corner + s * self._horizontal + t * self._vertical
        return Ray(self._eye.copy(), point - self._eye)

    @property
    def eye(self) -> Vec3:
        """Eye (center of projection) position."""
        return self._eye.copy()

    @property
    def target(self) -> Vec3:
        """Point the camera looks at."""
        return self._target.copy()

    @property
    def up(self) -> Vec3:
        """Up vector."""
        return self._up.copy()

    @property
    def camera_xform(self) -> np.ndarray:
        """4x4 matrix of the camera axes and eye position."""
        return self._camera_xform.copy()

    @property
    def fovy(self) -> Real:
        """Vertical field of view in degrees."""
        return self._fovy

    @property
    def aspect_ratio(self) -> Real:
        """Viewport aspect ratio."""
        return self._aspect

    @property
    def lower_left_corner(self) -> Vec3:
        """Lower left corner of the viewport."""
        return self._lower_left_corner.copy()

    @property
    def horizontal(self) -> Vec3:
        """Viewport horizontal axis, as long as the viewport is wide."""
        return self._horizontal.copy()

    @property
    def vertical(self) -> Vec3:
        """Viewport vertical axis, as long as the viewport is high."""
        return self._vertical.copy()