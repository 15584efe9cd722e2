"""Abstract hittable surface."""

from __future__ import annotations

from typing import ClassVar, Optional

from olio.node import Node
from olio.ray import HitRecord, Ray
from olio.types import Real


class Surface(Node):
    """A node that rays can be intersected with.

    The base surface is empty: no ray ever hits it.
    """

    default_name: ClassVar[str] = "Surface"

    def __init__(self, name: str = "") -> None:
        super().__init__(name)

    def hit(self, ray: Ray, tmin: Real, tmax: Real) -> Optional[HitRecord]:
        """Return the hit record for ray within (tmin, tmax), or None."""
        return None