import math

import numpy as np
import pytest

from gravsim.body import Body
from gravsim.constants import FIXED_TAG, RADIUS_OFFSET, radius
from gravsim.errors import InvalidBodyError


def test_force_obeys_newtons_third_law():
    a = Body.at_rest(-12.5, 40.0, 7.0)
    b = Body.at_rest(33.0, -8.25, 120.0)
    assert np.allclose(a.force_from(b), -b.force_from(a))


def test_force_points_toward_other_with_inverse_square_magnitude():
    a = Body.at_rest(0.0, 0.0, 1000.0)
    b = Body.at_rest(500.0, 0.0, 300.0)
    fx, fy = a.force_from(b, gravitational_constant=20.0)
    assert fx == pytest.approx(20.0 * 1000.0 * 300.0 / 500.0**2)
    assert fy == 0.0


def test_force_between_coincident_bodies_is_undefined():
    a = Body.at_rest(1.0, 1.0, 5.0)
    b = Body.at_rest(1.0, 1.0, 5.0)
    with pytest.raises(ZeroDivisionError):
        a.force_from(b)


def test_integrate_uses_previous_position():
    body = Body.launched(0.0, 0.0, 1.0, 2.0, 0.0)
    body.integrate(np.array([0.0, 1.0]), 0.5)
    assert body.x == 4.0
    assert body.y == 0.25
    assert (body.prev_x, body.prev_y) == (2.0, 0.0)


def test_at_rest_has_zero_velocity():
    body = Body.at_rest(3.0, 4.0, 2.0)
    assert np.array_equal(body.velocity(0.1), np.zeros(2))


def test_radius_mapping():
    assert radius(100.0) == 10.0 + RADIUS_OFFSET
    assert Body.at_rest(0.0, 0.0, 9.0).radius == 3.0 + RADIUS_OFFSET


def test_fixed_body_is_stationary():
    body = Body.launched(0.0, 0.0, 50.0, 1.0, 1.0, fixed=True)
    assert body.fixed
    assert np.array_equal(body.position, body.previous)


def test_display_tag_does_not_change_physics():
    body = Body.launched(0.0, 0.0, 50.0, 1.0, 1.0, display_tag=FIXED_TAG)
    assert not body.fixed
    assert (body.prev_x, body.prev_y) == (0.0, 0.0)


@pytest.mark.parametrize("mass", [0.0, -1.0, math.nan, math.inf])
def test_rejects_bad_mass(mass):
    with pytest.raises(InvalidBodyError):
        Body.at_rest(0.0, 0.0, mass)


def test_rejects_non_finite_coordinates():
    with pytest.raises(InvalidBodyError):
        Body(1.0, (math.nan, 0.0))
    with pytest.raises(InvalidBodyError):
        Body(1.0, (0.0, 0.0), previous=(math.inf, 0.0))


def test_copy_is_independent():
    body = Body.at_rest(1.0, 2.0, 3.0, display_tag=2)
    clone = body.copy()
    assert clone == body
    clone.integrate(np.array([1.0, 0.0]), 1.0)
    assert clone != body
    assert body.x == 1.0


def test_contains_point():
    body = Body.at_rest(10.0, 10.0, 16.0)
    assert body.contains_point(15.0, 10.0)
    assert not body.contains_point(17.0, 10.0)
