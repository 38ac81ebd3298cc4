"""Small numeric helpers: deadbands, wrapping, interpolation and tolerance checks."""

from __future__ import annotations

import math

__all__ = [
    "apply_deadband",
    "input_modulus",
    "angle_modulus",
    "interpolate",
    "is_near",
    "is_near_min_max",
]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def apply_deadband(value: float, deadband: float, max_magnitude: float = 1.0) -> float:
    """Zero ``value`` inside the deadband and rescale the rest to ``max_magnitude``.

    When ``max_magnitude`` is enormous compared with the deadband, the value is
    only shifted toward zero by the deadband instead of being rescaled.
    """
    if abs(value) <= deadband:
        return 0.0
    if deadband == 0.0 or max_magnitude / deadband > 1.0e12:
        return value - deadband if value > 0.0 else value + deadband
    if value > 0.0:
        return max_magnitude * (value - deadband) / (max_magnitude - deadband)
    return max_magnitude * (value + deadband) / (max_magnitude - deadband)


def input_modulus(value: float, minimum_input: float, maximum_input: float) -> float:
    """Wrap ``value`` into the range between ``minimum_input`` and ``maximum_input``."""
    modulus = maximum_input - minimum_input
    if modulus == 0.0:
        return value
    value -= int((value - minimum_input) / modulus) * modulus
    value -= int((value - maximum_input) / modulus) * modulus
    return value


def angle_modulus(angle_radians: float) -> float:
    """Wrap an angle in radians into the range from -pi to pi."""
    return input_modulus(angle_radians, -math.pi, math.pi)


def interpolate(start_value: float, end_value: float, t: float) -> float:
    """Linear interpolation with ``t`` clamped to [0, 1]."""
    return start_value + (end_value - start_value) * _clamp(t, 0.0, 1.0)


def _check_tolerance(tolerance: float) -> None:
    if tolerance < 0.0:
        raise ValueError("Tolerance must be a non-negative number greater than 0!")


def is_near(expected: float, actual: float, tolerance: float) -> bool:
    """Whether ``actual`` lies strictly within ``tolerance`` of ``expected``."""
    _check_tolerance(tolerance)
    return abs(expected - actual) < tolerance


def is_near_min_max(
    expected: float,
    actual: float,
    tolerance: float,
    min_value: float,
    max_value: float,
) -> bool:
    """Like :func:`is_near`, for a continuous input that wraps at ``min_value``/``max_value``."""
    _check_tolerance(tolerance)
    # The largest possible error is half the span of the range.
    error_bound = (max_value - min_value) / 2.0
    error = input_modulus(expected - actual, -error_bound, error_bound)
    return abs(error) < tolerance