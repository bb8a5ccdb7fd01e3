"""One segment of a planar spline, given by polynomials for x and y."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["Spline2dSeg"]


def _coefficients(params: Iterable[float]) -> tuple[float, ...]:
    return tuple(float(p) for p in params)


def _derived(coefficients: Sequence[float]) -> tuple[float, ...]:
    """Coefficients of the derivative; a constant derives to the zero polynomial."""
    if len(coefficients) <= 1:
        return (0.0,)
    return tuple(power * c for power, c in enumerate(coefficients) if power > 0)


def _evaluate(coefficients: Sequence[float], t: float) -> float:
    result = 0.0
    for c in reversed(coefficients):
        result = result * t + c
    return result


class Spline2dSeg:
    """Polynomial segment ``(x(t), y(t))`` with derivatives up to third order.

    Coefficients are in ascending powers of ``t``.
    """

    def __init__(self, x_params: Iterable[float], y_params: Iterable[float]) -> None:
        self._assign(_coefficients(x_params), _coefficients(y_params))

    @classmethod
    def zeros(cls, order: int) -> "Spline2dSeg":
        """Segment with ``order`` zero coefficients in each coordinate."""
        if order < 0:
            raise ValueError(f"order must be non-negative, got {order}")
        return cls([0.0] * order, [0.0] * order)

    def _assign(self, x: tuple[float, ...], y: tuple[float, ...]) -> None:
        self._x = (x,)
        self._y = (y,)
        for _ in range(3):
            self._x += (_derived(self._x[-1]),)
            self._y += (_derived(self._y[-1]),)

    def set_params(self, x_params: Iterable[float], y_params: Iterable[float]) -> None:
        """Replace both polynomials; they must have the same number of coefficients."""
        x = _coefficients(x_params)
        y = _coefficients(y_params)
        if len(x) != len(y):
            raise ValueError(
                f"x and y need the same number of parameters, got {len(x)} and {len(y)}"
            )
        self._assign(x, y)

    @property
    def x_coefficients(self) -> tuple[float, ...]:
        """Coefficients of x(t)."""
        return self._x[0]

    @property
    def y_coefficients(self) -> tuple[float, ...]:
        """Coefficients of y(t)."""
        return self._y[0]

    def __call__(self, t: float) -> tuple[float, float]:
        return self.x(t), self.y(t)

    def x(self, t: float) -> float:
        return _evaluate(self._x[0], t)

    def y(self, t: float) -> float:
        return _evaluate(self._y[0], t)

    def derivative_x(self, t: float) -> float:
        return _evaluate(self._x[1], t)

    def derivative_y(self, t: float) -> float:
        return _evaluate(self._y[1], t)

    def second_derivative_x(self, t: float) -> float:
        return _evaluate(self._x[2], t)

    def second_derivative_y(self, t: float) -> float:
        return _evaluate(self._y[2], t)

    def third_derivative_x(self, t: float) -> float:
        return _evaluate(self._x[3], t)

    def third_derivative_y(self, t: float) -> float:
        return _evaluate(self._y[3], t)