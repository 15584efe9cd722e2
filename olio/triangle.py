"""Triangle surface and ray/triangle intersection."""

from __future__ import annotations

from typing import ClassVar, Optional

import numpy as np
import numpy.typing as npt

from olio.ray import HitRecord, Ray
from olio.surface import Surface
from olio.types import Real, Vec3, as_vec3, zeros3


def ray_triangle_hit(
    p0: npt.ArrayLike,
    p1: npt.ArrayLike,
    p2: npt.ArrayLike,
    ray: Ray,
    tmin: Real,
    tmax: Real,
) -> Optional[tuple[Real, tuple[Real, Real]]]:
    """Intersect ray with triangle (p0, p1, p2).

    Returns ``(t, (u, v))`` where the hit point has barycentric
    coordinates ``(1 - u - v, u, v)``, or None when there is no hit with
    t in [tmin, tmax]. A ray parallel to the triangle's plane never hits.
    """
    a = as_vec3(p0)
    ux, uy, uz = (as_vec3(p1) - a).tolist()
    vx, vy, vz = (as_vec3(p2) - a).tolist()
    dx, dy, dz = ray.direction.tolist()
    qx, qy, qz = (ray.origin - a).tolist()

    ei_hf = dy * vz - vy * dz
    gf_di = vx * dz - dx * vz
    dh_eg = vy * dx - vx * dy
    ak_jb = ux * qy - qx * uy
    jc_al = qx * uz - ux * qz
    bl_kc = uy * qz - qy * uz

    m = ux * ei_hf + uy * gf_di + uz * dh_eg
    if m == 0:
        return None

    t = -(vz * ak_jb + vy * jc_al + vx * bl_kc) / m
    if t < tmin or t > tmax:
        return None
    gamma = (-dz * ak_jb - dy * jc_al - dx * bl_kc) / m
    if gamma < 0 or gamma > 1:
        return None
    beta = (qx * ei_hf + qy * gf_di + qz * dh_eg) / m
    if beta < 0 or beta > 1 - gamma:
        return None
    return t, (beta, gamma)


def _normalized(vector: Vec3) -> Vec3:
    length = float(np.linalg.norm(vector))
    return vector / length if length > 0 else vector


class Triangle(Surface):
    """Triangle whose points run counterclockwise around its normal."""

    default_name: ClassVar[str] = "Triangle"

    def __init__(
        self,
        point0: Optional[npt.ArrayLike] = None,
        point1: Optional[npt.ArrayLike] = None,
        point2: Optional[npt.ArrayLike] = None,
        name: str = "",
    ) -> None:
        super().__init__(name)
        self.set_points(
            zeros3() if point0 is None else point0,
            zeros3() if point1 is None else point1,
            zeros3() if point2 is None else point2,
        )

    def set_points(
        self, point0: npt.ArrayLike, point1: npt.ArrayLike, point2: npt.ArrayLike
    ) -> None:
        """Replace the three points and recompute the normal."""
        self._points = (as_vec3(point0), as_vec3(point1), as_vec3(point2))
        a, b, c = self._points
        self._normal = _normalized(np.cross(b - a, c - a))

    @property
    def points(self) -> tuple[Vec3, Vec3, Vec3]:
        """The three triangle points."""
        return tuple(p.copy() for p in self._points)  # type: ignore[return-value]

    @property
    def normal(self) -> Vec3:
        """Unit face normal."""
        return self._normal.copy()

    def hit(self, ray: Ray, tmin: Real, tmax: Real) -> Optional[HitRecord]:
        """Return the hit record for ray within [tmin, tmax], or None."""
        p0, p1, p2 = self._points
        result = ray_triangle_hit(p0, p1, p2, ray, tmin, tmax)
        if result is None:
            return None
        t, (u, v) = result
        point = (1 - u - v) * p0 + u * p1 + v * p2
        record = HitRecord.from_ray(ray, t, point, self._normal)
        record.surface = self
        return record