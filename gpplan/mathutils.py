"""Angle arithmetic, random draws and planar curve curvature."""

from __future__ import annotations

import math
import random

__all__ = [
    "normalize_angle",
    "interpolate_angle",
    "random_int",
    "random_double",
    "curvature",
    "curvature_derivative",
]

_TWO_PI = 2.0 * math.pi


def normalize_angle(angle: float) -> float:
    """Wrap an angle into the half-open interval [-pi, pi)."""
    a = math.fmod(angle + math.pi, _TWO_PI)
    if a < 0.0:
        a += _TWO_PI
    return a - math.pi


def interpolate_angle(a0: float, t0: float, a1: float, t1: float, t: float) -> float:
    """Linearly interpolate between two angles along the shorter arc."""
    if abs(t1 - t0) <= 1e-6:
        return normalize_angle(a0)
    a0_n = normalize_angle(a0)
    a1_n = normalize_angle(a1)
    d = a1_n - a0_n
    if d > math.pi:
        d -= _TWO_PI
    elif d < -math.pi:
        d += _TWO_PI
    ratio = (t - t0) / (t1 - t0)
    return normalize_angle(a0_n + d * ratio)


def random_int(size: int) -> int:
    """Return a uniformly drawn integer in ``range(size)``."""
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    return random.randrange(size)


def random_double(lb: float, ub: float) -> float:
    """Return a uniformly drawn float between ``lb`` and ``ub``."""
    if lb > ub:
        raise ValueError(f"lower bound {lb} exceeds upper bound {ub}")
    return lb + (ub - lb) * random.random()


def curvature(dx: float, d2x: float, dy: float, d2y: float) -> float:
    """Signed curvature of a parametric planar curve from its derivatives."""
    a = dx * d2y - dy * d2x
    norm_square = dx * dx + dy * dy
    return a / (math.sqrt(norm_square) * norm_square)


def curvature_derivative(
    dx: float, d2x: float, d3x: float, dy: float, d2y: float, d3y: float
) -> float:
    """Derivative of curvature for a parametric planar curve."""
    a = dx * d2y - dy * d2x
    b = dx * d3y - dy * d3x
    c = dx * d2x + dy * d2y
    d = dx * dx + dy * dy
    return (b * d - 3.0 * a * c) / (d * d * d)