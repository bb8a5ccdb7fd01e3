# gpplan

Numerical building blocks for planning a path as a one-dimensional Gaussian
process: motion-prior matrices, interpolation between support states, soft
limit penalties, planar polynomial spline segments and a few small utilities.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `gpplan.motion_models`: matrices of two Gaussian-process priors.
  - White noise on jerk, state `(position, velocity, acceleration)`:
    `jerk_q(qc, tau)`, `jerk_phi(tau)`, `jerk_q_inverse(qc, tau)` and
    `jerk_lambda_and_psi(qc, delta, tau)`.
  - Constant velocity, state `(position, velocity)`: `const_velocity_q`,
    `const_velocity_phi`, `const_velocity_q_inverse` and
    `const_velocity_lambda_and_psi`.
  - The `*_q_inverse` functions raise `ValueError` when `qc` or `tau` is zero.
- `gpplan.interpolator`: `GPInterpolator(qc, interval, tau)` precomputes the
  matrices `lambda_` and `psi` for a fixed offset `tau` into an interval, and
  `interpolate(x1, x2)` returns `lambda_ @ x1 + psi @ x2`. The one-shot helpers
  `interpolate_jerk` and `interpolate_const_velocity` do the same for 3-D and
  2-D states.
- `gpplan.penalty`: `PenaltyFunction(limit, alpha)` with `evaluate_hinge`,
  `evaluate_poly` and `evaluate_cubic(value, eps)`, and
  `BoundedPenaltyFunction(limit, eps)` with `penalty_and_gradient`, whose
  cubic-then-quadratic cost and gradient are scaled by 1000. Every evaluation
  returns a `(cost, gradient)` tuple; values within `[-limit, limit]` cost
  nothing.
- `gpplan.spline2d_seg`: `Spline2dSeg(x_params, y_params)`, a segment
  `(x(t), y(t))` with coefficients in ascending powers of `t`. Calling it
  returns the point; `x`, `y`, `derivative_x`, `derivative_y`,
  `second_derivative_x`, `second_derivative_y`, `third_derivative_x` and
  `third_derivative_y` evaluate the coordinates and their derivatives.
  `Spline2dSeg.zeros(order)` builds an all-zero segment and `set_params`
  replaces both polynomials, raising `ValueError` if their lengths differ.
- `gpplan.mathutils`: `normalize_angle` (into `[-pi, pi)`),
  `interpolate_angle` (along the shorter arc), `curvature` and
  `curvature_derivative` of a parametric planar curve, and the random draws
  `random_int(size)` and `random_double(lb, ub)`.
- `gpplan.colors`: the `Color` enumeration of named colours, the frozen
  `ColorRGBA` dataclass, and `color_at(color, alpha)`.
- `gpplan.timer`: `Timer(timeout)`, a millisecond stopwatch with `start`,
  `elapsed_ms`, `lap_ms` (elapsed time, then restart) and `timed_out`, plus the
  `ANSI_*` terminal colour codes.
- `gpplan.textfmt`: `dot_log(stream, *args)` writes each value followed by a
  comma and ends the line; `format_fixed(value, precision)` formats in
  fixed-point notation.
- `gpplan.sparse`: `dense_to_csc(matrix)` converts a dense 2-D matrix to a
  `CscMatrix` (`data`, `indices`, `indptr`, `shape`), dropping entries whose
  magnitude is below `1e-9`; `CscMatrix.to_dense()` expands it again.

## Example

```python
import numpy as np

from gpplan.interpolator import GPInterpolator
from gpplan.penalty import PenaltyFunction
from gpplan.spline2d_seg import Spline2dSeg

interp = GPInterpolator(qc=0.1, interval=5.0, tau=2.5)
x1 = np.array([0.0, 0.0, 0.0])
x2 = np.array([1.0, 0.2, 0.0])
mid = interp.interpolate(x1, x2)

cost, grad = PenaltyFunction(0.5).evaluate_poly(mid[0])

seg = Spline2dSeg([0.0, 1.0], [0.0, 0.0, 1.0])
point = seg(2.0)                 # (2.0, 4.0)
slope = seg.derivative_y(2.0)    # 4.0
```

## What it does not do

The package provides the matrices, interpolation, penalties and spline pieces
on their own. It has no curvature model for states along a reference line, no
obstacle or clearance costs, no factor graph or nonlinear optimiser, and no
planner that assembles these into a path or trajectory. There is no command to
run; everything is used as a library.