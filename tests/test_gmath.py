import math

import pytest

from cslib.gmath import (
    PI,
    cos_degrees,
    sin_degrees,
    tan_degrees,
    to_degrees,
    to_radians,
    vector_angle,
    vector_distance,
)


def test_to_radians_of_half_turn_is_pi():
    assert to_radians(180) == pytest.approx(PI)


def test_to_degrees_of_pi_is_half_turn():
    assert to_degrees(PI) == pytest.approx(180)


@pytest.mark.parametrize("angle", [-720.5, -45.0, 0.0, 12.25, 90.0, 359.0])
def test_degree_radian_round_trip(angle):
    assert to_degrees(to_radians(angle)) == pytest.approx(angle)


@pytest.mark.parametrize("angle", [0.0, 17.0, 45.0, 123.0, 270.0, -33.0])
def test_pythagorean_identity(angle):
    assert sin_degrees(angle) ** 2 + cos_degrees(angle) ** 2 == pytest.approx(1.0)


@pytest.mark.parametrize("angle", [10.0, 30.0, 60.0, 135.0, -20.0])
def test_tangent_is_sine_over_cosine(angle):
    assert tan_degrees(angle) == pytest.approx(sin_degrees(angle) / cos_degrees(angle))


def test_sine_matches_cosine_of_complement():
    assert sin_degrees(25.0) == pytest.approx(cos_degrees(65.0))


def test_vector_distance_of_three_four():
    assert vector_distance(3, 4) == pytest.approx(5)


def test_vector_distance_is_symmetric():
    assert vector_distance(-7.5, 2.0) == pytest.approx(vector_distance(2.0, 7.5))


def test_vector_angle_of_origin():
    assert vector_angle(0, 0) == 0


@pytest.mark.parametrize("x,y", [(3.0, -4.0), (-2.0, -1.0), (5.0, 5.0), (-1.0, 6.0), (0.0, -9.0)])
def test_vector_angle_reconstructs_point_with_flipped_y(x, y):
    r = vector_distance(x, y)
    angle = vector_angle(x, y)
    assert r * cos_degrees(angle) == pytest.approx(x, abs=1e-9)
    assert -r * sin_degrees(angle) == pytest.approx(y, abs=1e-9)


def test_vector_angle_above_origin_is_positive():
    assert vector_angle(0.0, -3.0) > 0
    assert vector_angle(0.0, 3.0) < 0