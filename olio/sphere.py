"""Sphere surface."""

from __future__ import annotations

import math
from typing import ClassVar, Optional

import numpy as np
import numpy.typing as npt

from olio.ray import HitRecord, Ray
from olio.surface import Surface
from olio.types import Real, as_vec3, zeros3


class Sphere(Surface):
    """Sphere given by its center and radius."""

    default_name: ClassVar[str] = "Sphere"

    def __init__(
        self,
        center: Optional[npt.ArrayLike] = None,
        radius: Real = 0.0,
        name: str = "",
    ) -> None:
        super().__init__(name)
        self.center = zeros3() if center is None else as_vec3(center)
        self.radius = float(radius)

    @property
    def center(self) -> np.ndarray:
        """Sphere position."""
        return self._center

    @center.setter
    def center(self, value: npt.ArrayLike) -> None:
        self._center = as_vec3(value)

    def hit(self, ray: Ray, tmin: Real, tmax: Real) -> Optional[HitRecord]:
        """Return the nearest hit with t strictly inside (tmin, tmax), or None."""
        direction = ray.direction
        q = ray.origin - self._center
        d_dot_q = float(np.dot(direction, q))
        d_dot_d = float(np.dot(direction, direction))
        discriminant = d_dot_q**2 - d_dot_d * (float(np.dot(q, q)) - self.radius * self.radius)
        if discriminant < 0:
            return None

        root = math.sqrt(discriminant)
        t1 = (-d_dot_q - root) / d_dot_d
        t2 = (-d_dot_q + root) / d_dot_d

        if t2 < tmin:
            return None
        if tmin < t1 < tmax:
            ray_t = t1
        elif tmin < t2 < tmax:
            ray_t = t2
        else:
            return None

        point = ray.at(ray_t)
        with np.errstate(divide="ignore", invalid="ignore"):
            face_normal = (point - self._center) / self.radius
        record = HitRecord.from_ray(ray, ray_t, point, face_normal)
        record.surface = self
        return record