"""Penalty functions for soft limits on a scalar value.

Each evaluation returns ``(cost, gradient)`` with the gradient taken with
respect to the value.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["PenaltyFunction", "BoundedPenaltyFunction"]

_BOUNDED_SCALE = 1000.0


def _cubic_penalty(value: float, limit: float, eps: float) -> tuple[float, float]:
    """Cubic near the limit, quadratic beyond ``limit + eps``, zero inside."""
    limit1 = limit
    limit2 = limit + eps
    a2 = 3.0 * eps
    b2 = 3.0 * eps * eps - 2.0 * a2 * limit2
    c2 = eps**3 - a2 * limit2 * limit2 - b2 * limit2
    a1 = 3.0 * eps
    b1 = -3.0 * eps * eps + 2.0 * a1 * limit2
    c1 = eps**3 - a1 * limit2 * limit2 + b1 * limit2

    if abs(value) < limit1:
        return 0.0, 0.0
    if limit1 <= value < limit2:
        error = value - limit1
        return error**3, 3.0 * error * error
    if limit2 <= value:
        return a2 * value * value + b2 * value + c2, 2.0 * a2 * value + b2
    if -limit2 < value <= -limit1:
        error = -limit1 - value
        return error**3, -3.0 * error * error
    return a1 * value * value + b1 * value + c1, 2.0 * a1 * value + b1


@dataclass(frozen=True)
class PenaltyFunction:
    """Penalises values whose magnitude exceeds ``limit``."""

    limit: float = 0.0
    alpha: float = 1.0

    def evaluate_hinge(self, value: float) -> tuple[float, float]:
        """Linear penalty on the excess over the limit."""
        if value > self.limit:
            return value - self.limit, 1.0
        if value < -self.limit:
            return -self.limit - value, -1.0
        return 0.0, 0.0

    def evaluate_poly(self, value: float) -> tuple[float, float]:
        """Quadratic penalty on the excess over the limit."""
        if value > self.limit:
            diff = value - self.limit
            return diff * diff, 2.0 * diff
        if value < -self.limit:
            diff = -self.limit - value
            return diff * diff, -2.0 * diff
        return 0.0, 0.0

    def evaluate_cubic(self, value: float, eps: float) -> tuple[float, float]:
        """Cubic penalty within ``eps`` of the limit, quadratic further out."""
        return _cubic_penalty(value, self.limit, eps)


class BoundedPenaltyFunction:
    """Cubic-then-quadratic penalty, scaled by 1000."""

    def __init__(self, limit: float = 0.0, eps: float = 0.0) -> None:
        self.limit = limit
        self.eps = eps

    def penalty_and_gradient(self, value: float) -> tuple[float, float]:
        """Return the scaled cost and gradient at ``value``."""
        cost, grad = _cubic_penalty(value, self.limit, self.eps)
        return cost * _BOUNDED_SCALE, grad * _BOUNDED_SCALE