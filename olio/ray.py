"""Rays and the record of a ray hitting a surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np
import numpy.typing as npt

from olio.types import Real, Vec3, as_vec3, zeros3

if TYPE_CHECKING:
    from olio.node import Node


@dataclass(eq=False)
class Ray:
    """Half-line origin + t * direction."""

    origin: Vec3 = field(default_factory=zeros3)
    direction: Vec3 = field(default_factory=zeros3)

    def __post_init__(self) -> None:
        self.origin = as_vec3(self.origin)
        self.direction = as_vec3(self.direction)

    def at(self, t: Real) -> Vec3:
        """Point at fractional distance t along the ray."""
        return self.origin + t * self.direction


@dataclass(eq=False)
class HitRecord:
    """Where and how a ray met a surface.

    The stored normal always faces against the ray; ``front_face`` tells
    whether the original surface normal already did.
    """

    ray_t: Real = 0.0
    point: Vec3 = field(default_factory=zeros3)
    normal: Vec3 = field(default_factory=zeros3)
    front_face: bool = True
    surface: Optional["Node"] = None

    def __post_init__(self) -> None:
        self.point = as_vec3(self.point)
        self.normal = as_vec3(self.normal)

    @classmethod
    def from_ray(
        cls,
        ray: Ray,
        ray_t: Real,
        point: npt.ArrayLike,
        face_normal: npt.ArrayLike,
    ) -> "HitRecord":
        """Build a record, orienting the normal against the ray."""
        record = cls(ray_t=ray_t, point=as_vec3(point))
        record.set_normal(ray, face_normal)
        return record

    def set_normal(self, ray: Ray, face_normal: npt.ArrayLike) -> None:
        """Store face_normal, flipped if it points along the ray."""
        normal = as_vec3(face_normal)
        # A grazing hit (dot == 0) counts as front facing.
        front_face = not float(np.dot(normal, ray.direction)) > 0
        self.set_oriented_normal(normal, front_face)

    def set_oriented_normal(self, face_normal: npt.ArrayLike, front_face: bool) -> None:
        """Store face_normal, flipped when front_face is false."""
        normal = as_vec3(face_normal)
        self.front_face = bool(front_face)
        self.normal = normal if self.front_face else -normal