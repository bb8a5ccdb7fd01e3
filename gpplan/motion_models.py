"""Transition and covariance matrices of 1-D Gaussian-process motion priors.

Two models are provided: white noise on jerk, with state (position, velocity,
acceleration), and white noise on acceleration (constant velocity), with state
(position, velocity).
"""

from __future__ import annotations

import numpy as np

__all__ = [
    "jerk_q",
    "jerk_phi",
    "jerk_q_inverse",
    "jerk_lambda_and_psi",
    "const_velocity_q",
    "const_velocity_phi",
    "const_velocity_q_inverse",
    "const_velocity_lambda_and_psi",
]


def _require_nonzero(qc: float, tau: float) -> None:
    if qc == 0 or tau == 0:
        raise ValueError(f"qc and tau must be non-zero, got qc={qc}, tau={tau}")


def jerk_q(qc: float, tau: float) -> np.ndarray:
    """Process noise covariance of the white-noise-on-jerk model over ``tau``."""
    p0 = tau * qc
    p1 = tau * p0
    p2 = tau * p1
    p3 = tau * p2
    p4 = tau * p3
    return np.array(
        [
            [0.05 * p4, 0.125 * p3, p2 / 6.0],
            [0.125 * p3, p2 / 3.0, 0.5 * p1],
            [p2 / 6.0, 0.5 * p1, p0],
        ]
    )


def jerk_phi(tau: float) -> np.ndarray:
    """State transition matrix of the white-noise-on-jerk model."""
    return np.array(
        [
            [1.0, tau, 0.5 * tau * tau],
            [0.0, 1.0, tau],
            [0.0, 0.0, 1.0],
        ]
    )


def jerk_q_inverse(qc: float, tau: float) -> np.ndarray:
    """Closed-form inverse of :func:`jerk_q`."""
    _require_nonzero(qc, tau)
    tau_inv = 1.0 / tau
    p0 = tau_inv / qc
    p1 = tau_inv * p0
    p2 = tau_inv * p1
    p3 = tau_inv * p2
    p4 = tau_inv * p3
    return np.array(
        [
            [720.0 * p4, -360.0 * p3, 60.0 * p2],
            [-360.0 * p3, 192.0 * p2, -36.0 * p1],
            [60.0 * p2, -36.0 * p1, 9.0 * p0],
        ]
    )


def jerk_lambda_and_psi(qc: float, delta: float, tau: float) -> tuple[np.ndarray, np.ndarray]:
    """Interpolation matrices for a point ``tau`` into an interval of ``delta``.

    The interpolated state is ``lambda @ x1 + psi @ x2``.
    """
    psi = jerk_q(qc, tau) @ jerk_phi(delta - tau).T @ jerk_q_inverse(qc, delta)
    lam = jerk_phi(tau) - psi @ jerk_phi(delta)
    return lam, psi


def const_velocity_q(qc: float, tau: float) -> np.ndarray:
    """Process noise covariance of the constant-velocity model over ``tau``."""
    off_diagonal = 0.5 * tau**2 * qc
    return np.array(
        [
            [tau**3 * qc / 3.0, off_diagonal],
            [off_diagonal, tau * qc],
        ]
    )


def const_velocity_phi(tau: float) -> np.ndarray:
    """State transition matrix of the constant-velocity model."""
    return np.array([[1.0, tau], [0.0, 1.0]])


def const_velocity_q_inverse(qc: float, tau: float) -> np.ndarray:
    """Closed-form inverse of :func:`const_velocity_q`."""
    _require_nonzero(qc, tau)
    qc_inv = 1.0 / qc
    off_diagonal = -6.0 * tau**-2 * qc_inv
    return np.array(
        [
            [12.0 * tau**-3 * qc_inv, off_diagonal],
            [off_diagonal, 4.0 / tau * qc_inv],
        ]
    )


def const_velocity_lambda_and_psi(
    qc: float, delta: float, tau: float
) -> tuple[np.ndarray, np.ndarray]:
    """Interpolation matrices of the constant-velocity model."""
    psi = (
        const_velocity_q(qc, tau)
        @ const_velocity_phi(delta - tau).T
        @ const_velocity_q_inverse(qc, delta)
    )
    lam = const_velocity_phi(tau) - psi @ const_velocity_phi(delta)
    return lam, psi