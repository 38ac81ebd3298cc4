"""Feedforward models for simple motors, elevators and arms.

Velocities and accelerations are in radians per second (squared) unless a
unit quantity is passed; voltages are in volts.  The sign of a zero velocity
is taken as positive, so static friction is applied at rest.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from robomath.units import (
    Radian,
    RadianPerSecond,
    RadianPerSecondSquared,
    Unit,
    Volt,
    value_in,
)

__all__ = [
    "SimpleFeedforward",
    "StaticFeedforward",
    "ElevatorFeedforward",
    "ArmFeedforward",
]

Quantity = Union[int, float, Unit]


def _signum(value: float) -> float:
    if math.isnan(value):
        return value
    return math.copysign(1.0, value)


def _velocity(value: Quantity) -> float:
    return float(value_in(value, RadianPerSecond))


def _acceleration(value: Quantity) -> float:
    return float(value_in(value, RadianPerSecondSquared))


def _volts(value: Quantity) -> float:
    return float(value_in(value, Volt))


def _angle(value: Quantity) -> float:
    return float(value_in(value, Radian))


@dataclass(frozen=True)
class SimpleFeedforward:
    """Static friction, velocity and acceleration gains."""

    k_s: float
    k_v: float
    k_a: float

    def calculate(self, velocity: Quantity, acceleration: Quantity = 0.0) -> float:
        v = _velocity(velocity)
        a = _acceleration(acceleration)
        return self.k_a * a + (self.k_s * _signum(v) + self.k_v * v)

    def max_velocity(self, max_voltage: Quantity, acceleration: Quantity) -> float:
        a = _acceleration(acceleration)
        return (self.k_a * -a + (_volts(max_voltage) - self.k_s)) / self.k_v

    def max_acceleration(self, max_voltage: Quantity, velocity: Quantity) -> float:
        v = _velocity(velocity)
        return (v * -self.k_v + (self.k_s * -_signum(v) + _volts(max_voltage))) / self.k_a

    def min_acceleration(self, max_voltage: Quantity, velocity: Quantity) -> float:
        return self.max_acceleration(-_volts(max_voltage), velocity)


@dataclass(frozen=True)
class StaticFeedforward:
    """Velocity and acceleration gains only."""

    k_v: float
    k_a: float

    def calculate(self, velocity: Quantity, acceleration: Quantity = 0.0) -> float:
        v = _velocity(velocity)
        a = _acceleration(acceleration)
        return self.k_v * v + self.k_a * a

    def max_velocity(self, max_voltage: Quantity, acceleration: Quantity) -> float:
        a = _acceleration(acceleration)
        return (self.k_a * -a + _volts(max_voltage)) / self.k_v

    def max_acceleration(self, max_voltage: Quantity, velocity: Quantity) -> float:
        v = _velocity(velocity)
        return (_volts(max_voltage) * _signum(v) + -v * self.k_v) / self.k_a

    def min_acceleration(self, max_voltage: Quantity, velocity: Quantity) -> float:
        return self.max_acceleration(-_volts(max_voltage), velocity)


@dataclass(frozen=True)
class ElevatorFeedforward:
    """Static friction, gravity, velocity and acceleration gains."""

    k_s: float
    k_g: float
    k_v: float
    k_a: float

    def calculate(self, velocity: Quantity, acceleration: Quantity = 0.0) -> float:
        v = _velocity(velocity)
        a = _acceleration(acceleration)
        return self.k_a * a + (self.k_v * v + (self.k_s * _signum(v) + self.k_g))

    def max_velocity(self, max_voltage: Quantity, acceleration: Quantity) -> float:
        a = _acceleration(acceleration)
        return (
            self.k_a * -a + (_volts(max_voltage) - self.k_s - self.k_g)
        ) / self.k_v

    def min_velocity(self, max_voltage: Quantity, acceleration: Quantity) -> float:
        a = _acceleration(acceleration)
        return (
            self.k_a * -a + (-_volts(max_voltage) + self.k_s - self.k_g)
        ) / self.k_v

    def max_acceleration(self, max_voltage: Quantity, velocity: Quantity) -> float:
        v = _velocity(velocity)
        return (
            v * -self.k_v
            + (self.k_s * -_signum(v) + _volts(max_voltage) - self.k_g)
        ) / self.k_a

    def min_acceleration(self, max_voltage: Quantity, velocity: Quantity) -> float:
        return self.max_acceleration(-_volts(max_voltage), velocity)


@dataclass(frozen=True)
class ArmFeedforward:
    """Static friction, gravity (scaled by the arm angle's cosine), velocity and acceleration gains."""

    k_s: float
    k_g: float
    k_v: float
    k_a: float

    def calculate(
        self, position: Quantity, velocity: Quantity, acceleration: Quantity = 0.0
    ) -> float:
        g_cos = math.cos(_angle(position)) * self.k_g
        v = _velocity(velocity)
        a = _acceleration(acceleration)
        return self.k_a * a + (self.k_v * v + (self.k_s * _signum(v) + g_cos))

    def max_velocity(
        self, max_voltage: Quantity, angle: Quantity, acceleration: Quantity
    ) -> float:
        a = _acceleration(acceleration)
        cos = math.cos(_angle(angle))
        return (
            a * -self.k_a + (cos * -self.k_g + (_volts(max_voltage) - self.k_s))
        ) / self.k_v

    def min_velocity(
        self, max_voltage: Quantity, angle: Quantity, acceleration: Quantity
    ) -> float:
        a = _acceleration(acceleration)
        cos = math.cos(_angle(angle))
        return (
            a * -self.k_a + (cos * -self.k_g + (-_volts(max_voltage) + self.k_s))
        ) / self.k_v

    def max_acceleration(
        self, max_voltage: Quantity, angle: Quantity, velocity: Quantity
    ) -> float:
        v = _velocity(velocity)
        cos = math.cos(_angle(angle))
        return (
            v * -self.k_v
            + (cos * -self.k_g + (self.k_s * -_signum(v) + _volts(max_voltage)))
        ) / self.k_a

    def min_acceleration(
        self, max_voltage: Quantity, angle: Quantity, velocity: Quantity
    ) -> float:
        return self.max_acceleration(-_volts(max_voltage), angle, velocity)