import pytest

from gpplan.penalty import BoundedPenaltyFunction, PenaltyFunction


def _numeric_derivative(fn, value, h=1e-6):
    return (fn(value + h)[0] - fn(value - h)[0]) / (2 * h)


@pytest.mark.parametrize("value", [-1.5, 0.0, 0.9, 1.5])
def test_hinge_zero_inside_limit(value):
    penalty = PenaltyFunction(2.0)
    assert penalty.evaluate_hinge(value) == (0.0, 0.0)
    assert penalty.evaluate_poly(value) == (0.0, 0.0)
    assert penalty.evaluate_cubic(value, 0.5) == (0.0, 0.0)


def test_hinge_above_limit():
    cost, grad = PenaltyFunction(2.0).evaluate_hinge(3.5)
    assert cost == pytest.approx(1.5)
    assert grad == 1.0


@pytest.mark.parametrize("value", [2.5, 3.0, 7.25])
def test_hinge_is_symmetric(value):
    penalty = PenaltyFunction(2.0)
    cost_pos, grad_pos = penalty.evaluate_hinge(value)
    cost_neg, grad_neg = penalty.evaluate_hinge(-value)
    assert cost_pos == pytest.approx(cost_neg)
    assert grad_pos == -grad_neg


@pytest.mark.parametrize("value", [-6.0, -2.5, 2.5, 6.0])
def test_poly_is_square_of_hinge(value):
    penalty = PenaltyFunction(2.0)
    hinge_cost, hinge_grad = penalty.evaluate_hinge(value)
    poly_cost, poly_grad = penalty.evaluate_poly(value)
    assert poly_cost == pytest.approx(hinge_cost**2)
    assert poly_grad == pytest.approx(2 * hinge_cost * hinge_grad)


@pytest.mark.parametrize("value", [-6.0, -2.5, 2.5, 6.0])
def test_poly_gradient_matches_numeric(value):
    penalty = PenaltyFunction(2.0)
    _, grad = penalty.evaluate_poly(value)
    assert grad == pytest.approx(_numeric_derivative(penalty.evaluate_poly, value), rel=1e-5)


@pytest.mark.parametrize("value", [-5.0, -2.7, -2.2, 2.2, 2.7, 5.0])
def test_cubic_gradient_matches_numeric(value):
    penalty = PenaltyFunction(2.0)

    def fn(v):
        return penalty.evaluate_cubic(v, 0.5)

    _, grad = fn(value)
    assert grad == pytest.approx(_numeric_derivative(fn, value), rel=1e-5)


@pytest.mark.parametrize("boundary", [2.5, -2.5])
def test_cubic_is_continuous_at_outer_limit(boundary):
    penalty = PenaltyFunction(2.0)
    inside = penalty.evaluate_cubic(boundary * (1 - 1e-9), 0.5)
    outside = penalty.evaluate_cubic(boundary * (1 + 1e-9), 0.5)
    assert inside[0] == pytest.approx(outside[0], rel=1e-6)
    assert inside[1] == pytest.approx(outside[1], rel=1e-6)


@pytest.mark.parametrize("value", [2.3, 4.0, 9.0])
def test_cubic_is_symmetric(value):
    penalty = PenaltyFunction(2.0)
    cost_pos, grad_pos = penalty.evaluate_cubic(value, 0.5)
    cost_neg, grad_neg = penalty.evaluate_cubic(-value, 0.5)
    assert cost_pos == pytest.approx(cost_neg)
    assert grad_pos == pytest.approx(-grad_neg)


@pytest.mark.parametrize("value", [-4.0, -0.1, 0.5, 0.25, 3.0])
def test_bounded_is_scaled_cubic(value):
    bounded = BoundedPenaltyFunction(0.2, 0.1)
    cubic = PenaltyFunction(0.2).evaluate_cubic(value, 0.1)
    cost, grad = bounded.penalty_and_gradient(value)
    assert cost == pytest.approx(1000 * cubic[0])
    assert grad == pytest.approx(1000 * cubic[1])


def test_bounded_zero_inside_limit():
    assert BoundedPenaltyFunction(0.2, 0.1).penalty_and_gradient(0.1) == (0.0, 0.0)