"""Feedback controllers: bang-bang and PID."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Union

from robomath.units import Millisecond, Unit, value_in

__all__ = ["Controller", "BangBangController", "PIDController"]

Period = Union[int, float, Unit]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Controller(ABC):
    """A controller with a set point, an enabled flag and input/output limits.

    Concrete controllers carry ``set_point``, ``enabled``, ``min_input``,
    ``max_input``, ``min_output`` and ``max_output`` attributes.
    """

    set_point: float
    enabled: bool
    min_input: float
    max_input: float
    min_output: float
    max_output: float

    @abstractmethod
    def calculate(self, measurement: float, period: Period) -> float:
        """Return the control output; ``period`` is in milliseconds."""

    @abstractmethod
    def set_limits(
        self, min_input: float, max_input: float, min_output: float, max_output: float
    ) -> None:
        """Set the input and output limits."""

    @abstractmethod
    def reset(self) -> None:
        """Reset the controller's state."""

    @property
    def limits(self) -> tuple[float, float, float, float]:
        """``(min_input, max_input, min_output, max_output)``."""
        return (self.min_input, self.max_input, self.min_output, self.max_output)


@dataclass
class BangBangController(Controller):
    """Outputs ``max_output`` below the set point and ``min_output`` otherwise."""

    min_input: float = -1.0
    max_input: float = 1.0
    min_output: float = -1.0
    max_output: float = 1.0
    set_point: float = 0.0
    tolerance: float = 0.0
    enabled: bool = True

    def calculate(self, measurement: float, period: Period = 0.0) -> float:
        if not self.enabled:
            return 0.0
        if _clamp(measurement, self.min_input, self.max_input) < self.set_point:
            return self.max_output
        return self.min_output

    def set_limits(
        self, min_input: float, max_input: float, min_output: float, max_output: float
    ) -> None:
        self.min_input = min_input
        self.max_input = max_input
        self.min_output = min_output
        self.max_output = max_output

    def reset(self) -> None:
        self.set_point = 0.0


@dataclass
class PIDController(Controller):
    """Proportional-integral-derivative controller with a clamped integral."""

    k_p: float
    k_i: float
    k_d: float
    i_min: float = -1.0
    i_max: float = 1.0
    min_input: float = -1.0
    max_input: float = 1.0
    min_output: float = -1.0
    max_output: float = 1.0
    set_point: float = 0.0
    enabled: bool = True
    _prev_error: float = field(default=0.0, init=False, repr=False)
    _total_error: float = field(default=0.0, init=False, repr=False)

    def calculate(self, measurement: float, period: Period) -> float:
        period_ms = float(value_in(period, Millisecond))
        if not self.enabled:
            return 0.0
        error = self.set_point - measurement
        self._total_error = _clamp(
            self._total_error + error * period_ms, self.i_min, self.i_max
        )
        d_error = (error - self._prev_error) / period_ms
        self._prev_error = error
        p = self.k_p * error
        i = self.k_i * self._total_error
        d = self.k_d * d_error
        return _clamp(p + i + d, self.min_output, self.max_output)

    def set_limits(
        self, min_input: float, max_input: float, min_output: float, max_output: float
    ) -> None:
        self.min_input = min_input
        self.max_input = max_input
        self.min_output = min_output
        self.max_output = max_output

    def set_i_zone(self, i_min: float, i_max: float) -> None:
        """Set the range the accumulated error is clamped to."""
        self.i_min = i_min
        self.i_max = i_max

    def reset(self) -> None:
        self._prev_error = 0.0
        self._total_error = 0.0