import math

import pytest

from flock3d.vector import EPSILON, Vec3


def test_add_then_subtract_round_trips():
    a = Vec3(1.5, -2.0, 7.25)
    b = Vec3(-3.0, 4.5, 0.5)
    assert (a + b) - b == a


def test_subtract_self_is_zero():
    a = Vec3(3.0, -1.0, 2.0)
    assert (a - a).length_sqr() == 0.0


def test_scalar_multiplication_both_sides():
    a = Vec3(1.0, -2.0, 0.5)
    assert a * 2.0 == 2.0 * a
    assert (a * 2.0).length() == pytest.approx(2.0 * a.length())


def test_multiply_by_vector_is_rejected():
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) * Vec3(1, 2, 3)


def test_length_of_three_four_triangle():
    assert Vec3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_length_squared_matches_length():
    v = Vec3(2.0, -3.0, 6.5)
    assert v.length() ** 2 == pytest.approx(v.length_sqr())


def test_normalized_has_unit_length_and_same_direction():
    v = Vec3(4.0, -2.0, 9.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert (n * v.length()).distance_sqr(v) == pytest.approx(0.0, abs=1e-9)


def test_normalizing_zero_returns_zero():
    assert Vec3().normalized() == Vec3()


def test_distance_sqr_is_symmetric_and_matches_difference():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 10.0)
    assert a.distance_sqr(b) == pytest.approx(b.distance_sqr(a))
    assert a.distance_sqr(b) == pytest.approx((a - b).length_sqr())


def test_limited_shrinks_long_vector_to_max():
    v = Vec3(10.0, -20.0, 5.0)
    limited = v.limited(3.0)
    assert limited.length() == pytest.approx(3.0)
    assert limited.normalized().distance_sqr(v.normalized()) == pytest.approx(0.0, abs=1e-12)


def test_limited_keeps_short_vector():
    v = Vec3(0.1, 0.2, -0.1)
    assert v.limited(3.0) == v


def test_limited_leaves_tiny_vector_when_limit_is_zero():
    v = Vec3(EPSILON / 10, 0.0, 0.0)
    assert v.limited(0.0) == v


def test_iteration_yields_components():
    assert tuple(Vec3(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)
    assert math.isclose(sum(Vec3(0.5, 0.25, 0.25)), 1.0)