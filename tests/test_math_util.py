import math

import pytest

from robomath.math_util import (
    angle_modulus,
    apply_deadband,
    input_modulus,
    interpolate,
    is_near,
    is_near_min_max,
)


def test_deadband_zeroes_small_values():
    assert apply_deadband(0.05, 0.1) == 0.0
    assert apply_deadband(-0.1, 0.1, 1.0) == 0.0


def test_deadband_keeps_extremes():
    assert apply_deadband(1.0, 0.1, 1.0) == 1.0
    assert apply_deadband(-1.0, 0.1, 1.0) == -1.0


@pytest.mark.parametrize("value", [0.2, 0.5, 0.75, 0.99])
def test_deadband_is_odd_and_shrinks(value):
    out = apply_deadband(value, 0.1)
    assert apply_deadband(-value, 0.1) == -out
    assert 0.0 < out < value


def test_deadband_huge_magnitude_only_shifts():
    assert apply_deadband(0.5, 1e-13, 1.0) == 0.5 - 1e-13
    assert apply_deadband(-0.5, 1e-13, 1.0) == -0.5 + 1e-13


def test_angle_modulus_wraps():
    assert angle_modulus(3 * math.pi / 2) == pytest.approx(-math.pi / 2)
    assert angle_modulus(-3 * math.pi / 2) == pytest.approx(math.pi / 2)


@pytest.mark.parametrize("angle", [0.0, 0.5, -1.0, 3.0, -3.0])
def test_angle_modulus_keeps_values_in_range(angle):
    assert angle_modulus(angle) == angle


@pytest.mark.parametrize("value", [-725.0, -181.0, 0.0, 200.0, 900.0])
def test_input_modulus_lands_in_range_and_is_congruent(value):
    out = input_modulus(value, -180.0, 180.0)
    assert -180.0 <= out <= 180.0
    assert (value - out) % 360.0 == pytest.approx(0.0, abs=1e-9)


def test_interpolate_clamps_t():
    assert interpolate(0.0, 10.0, 2.0) == 10.0
    assert interpolate(0.0, 10.0, -1.0) == 0.0
    assert interpolate(2.0, 4.0, 0.5) == 3.0


def test_is_near():
    assert is_near(1.0, 1.05, 0.1)
    assert not is_near(1.0, 1.2, 0.1)


def test_is_near_rejects_negative_tolerance():
    with pytest.raises(ValueError):
        is_near(1.0, 1.0, -0.1)
    with pytest.raises(ValueError):
        is_near_min_max(1.0, 1.0, -0.1, 0.0, 360.0)


def test_is_near_min_max_wraps_around():
    assert is_near_min_max(359.0, 1.0, 5.0, 0.0, 360.0)
    assert not is_near_min_max(90.0, 270.0, 5.0, 0.0, 360.0)