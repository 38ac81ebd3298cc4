"""Signal filters: a boolean debouncer and a slew-rate limiter."""

from __future__ import annotations

import enum
import time
from typing import Callable, Union

from robomath.units import Second, Unit, value_in

__all__ = ["DebounceType", "Debouncer", "SlewRateLimiter"]

Duration = Union[int, float, Unit]


class DebounceType(enum.Enum):
    RISING = "rising"
    FALLING = "falling"
    BOTH = "both"


class Debouncer:
    """Holds a boolean at its base value until a change has lasted long enough.

    Time is measured from ``previous_time`` (in seconds) to zero; it starts at
    zero and is moved by :meth:`reset`.  Once the debounce time has elapsed,
    the input is returned and becomes the new base value.
    """

    def __init__(
        self,
        debounce_time: Duration,
        debounce_type: DebounceType = DebounceType.RISING,
        base_value: bool = False,
    ) -> None:
        self.debounce_time = float(value_in(debounce_time, Second))
        self.debounce_type = debounce_type
        self.base_value = base_value
        self.previous_time = 0.0

    def __repr__(self) -> str:
        return (
            f"Debouncer(debounce_time={self.debounce_time!r}, "
            f"debounce_type={self.debounce_type}, base_value={self.base_value!r})"
        )

    def reset_timer(self) -> None:
        """Restart the debounce timer."""
        self.previous_time = 0.0

    def _has_elapsed(self) -> bool:
        return 0.0 - self.previous_time >= self.debounce_time

    def calculate(self, value: bool) -> bool:
        """Feed one input sample and return the debounced value."""
        if value == self.base_value:
            self.reset_timer()
        if self._has_elapsed():
            self.base_value = value
            self.reset_timer()
            return value
        return self.base_value

    def reset(self, value: bool, current_time: Duration) -> None:
        """Set a new base value and move the timer's start."""
        self.base_value = value
        self.previous_time = float(value_in(current_time, Second))


class SlewRateLimiter:
    """Limits how fast a value may rise or fall, in units per second."""

    def __init__(
        self,
        positive_rate_limit: float,
        negative_rate_limit: float,
        initial_value: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.positive_rate_limit = positive_rate_limit
        self.negative_rate_limit = negative_rate_limit
        self.last_value = initial_value
        self._clock = clock
        self.previous_timestamp = clock()

    def __repr__(self) -> str:
        return (
            f"SlewRateLimiter(positive_rate_limit={self.positive_rate_limit!r}, "
            f"negative_rate_limit={self.negative_rate_limit!r}, "
            f"last_value={self.last_value!r})"
        )

    def calculate(self, value: float) -> float:
        """Move toward ``value`` no faster than the rate limits allow."""
        timestamp = self._clock()
        elapsed = timestamp - self.previous_timestamp
        low = -self.negative_rate_limit * elapsed
        high = self.positive_rate_limit * elapsed
        self.last_value += max(low, min(value - self.last_value, high))
        self.previous_timestamp = timestamp
        return self.last_value

    def reset(self, value: float) -> None:
        """Jump to ``value`` and restart timing from now."""
        self.last_value = value
        self.previous_timestamp = self._clock()