"""Numeric precision, shared constants and small vector helpers."""

from __future__ import annotations

import sys
from typing import TypeVar

import numpy as np
import numpy.typing as npt

Real = float
Vec3 = npt.NDArray[np.float64]

EPSILON: Real = 1e-8
EPSILON2: Real = 1e-14
PI: Real = 3.14159265359
TWO_PI: Real = 6.28318530718
PI2: Real = 9.86960440108935861906
DEG_TO_RAD: Real = 0.017453292519944
RAD_TO_DEG: Real = 57.29577951307855
INFINITY: Real = sys.float_info.max

_T = TypeVar("_T")


def vec3(x: float, y: float, z: float) -> Vec3:
    """Return a 3-component double-precision vector."""
    return np.array([x, y, z], dtype=np.float64)


def zeros3() -> Vec3:
    """Return the zero 3-vector."""
    return np.zeros(3, dtype=np.float64)


def as_vec3(value: npt.ArrayLike) -> Vec3:
    """Convert any 3-element sequence to a fresh double-precision vector."""
    array = np.array(value, dtype=np.float64).reshape(-1)
    if array.shape != (3,):
        raise ValueError(f"expected 3 components, got {array.shape[0]}")
    return array


def clamp(value: _T, low: _T, high: _T) -> _T:
    """Clamp value to [low, high]; the upper bound is checked first."""
    if value > high:  # type: ignore[operator]
        return high
    if value < low:  # type: ignore[operator]
        return low
    return value