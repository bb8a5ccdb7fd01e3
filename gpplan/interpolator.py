"""Gaussian-process interpolation between two support states."""

from __future__ import annotations

import numpy as np

from gpplan.motion_models import const_velocity_lambda_and_psi, jerk_lambda_and_psi

__all__ = ["GPInterpolator", "interpolate_jerk", "interpolate_const_velocity"]


class GPInterpolator:
    """Interpolator for a fixed offset ``tau`` into an interval of length ``interval``.

    Uses the white-noise-on-jerk prior. The Jacobians of the interpolated state
    with respect to the two support states are ``lambda_`` and ``psi``.
    """

    def __init__(self, qc: float, interval: float, tau: float) -> None:
        self.qc = qc
        self.interval = interval
        self.tau = tau
        self.lambda_, self.psi = jerk_lambda_and_psi(qc, interval, tau)

    def interpolate(self, x1, x2) -> np.ndarray:
        """Interpolated state between support states ``x1`` and ``x2``."""
        return self.lambda_ @ np.asarray(x1, dtype=float) + self.psi @ np.asarray(
            x2, dtype=float
        )


def interpolate_jerk(x1, x2, qc: float, interval: float, tau: float) -> np.ndarray:
    """Interpolate 3-D states under the white-noise-on-jerk prior."""
    lam, psi = jerk_lambda_and_psi(qc, interval, tau)
    return lam @ np.asarray(x1, dtype=float) + psi @ np.asarray(x2, dtype=float)


def interpolate_const_velocity(
    x1, x2, qc: float, interval: float, tau: float
) -> np.ndarray:
    """Interpolate 2-D states under the constant-velocity prior."""
    lam, psi = const_velocity_lambda_and_psi(qc, interval, tau)
    return lam @ np.asarray(x1, dtype=float) + psi @ np.asarray(x2, dtype=float)