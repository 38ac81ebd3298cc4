import itertools

import pytest

from robomath.filters import DebounceType, Debouncer, SlewRateLimiter
from robomath.units import Millisecond


def _ticking_clock(step):
    return itertools.count(0.0, step).__next__


def test_debouncer_holds_base_value_before_time_elapses():
    debouncer = Debouncer(1.0, DebounceType.RISING, False)
    assert debouncer.calculate(True) is False
    assert debouncer.base_value is False


def test_debouncer_with_zero_time_passes_input_through():
    debouncer = Debouncer(0.0, DebounceType.BOTH, False)
    assert debouncer.calculate(True) is True
    assert debouncer.base_value is True
    assert debouncer.calculate(False) is False


def test_debouncer_reset_moves_timer():
    debouncer = Debouncer(1.0, DebounceType.FALLING, False)
    debouncer.reset(False, -2.0)
    assert debouncer.previous_time == -2.0
    assert debouncer.calculate(True) is True
    assert debouncer.base_value is True
    assert debouncer.previous_time == 0.0


def test_debouncer_matching_input_resets_timer():
    debouncer = Debouncer(1.0, DebounceType.RISING, False)
    debouncer.reset(False, -5.0)
    assert debouncer.calculate(False) is False
    assert debouncer.previous_time == 0.0
    assert debouncer.calculate(True) is False


def test_debouncer_accepts_time_units():
    debouncer = Debouncer(Millisecond(500.0))
    assert debouncer.debounce_time == 0.5
    debouncer.reset(True, Millisecond(-250.0))
    assert debouncer.previous_time == -0.25


@pytest.mark.parametrize("target", [10.0, -10.0, 0.5, -0.2])
def test_slew_rate_limiter_respects_limits(target):
    limiter = SlewRateLimiter(2.0, 3.0, 0.0, clock=_ticking_clock(1.0))
    previous = limiter.last_value
    for _ in range(5):
        out = limiter.calculate(target)
        assert -3.0 <= out - previous <= 2.0
        assert abs(target - out) <= abs(target - previous)
        previous = out


def test_slew_rate_limiter_reaches_target():
    limiter = SlewRateLimiter(2.0, 3.0, 0.0, clock=_ticking_clock(1.0))
    results = [limiter.calculate(4.0) for _ in range(4)]
    assert results[-1] == 4.0
    assert results == sorted(results)


def test_slew_rate_limiter_no_time_no_change():
    limiter = SlewRateLimiter(2.0, 3.0, 1.5, clock=lambda: 7.0)
    assert limiter.calculate(100.0) == 1.5


def test_slew_rate_limiter_reset_jumps():
    limiter = SlewRateLimiter(1.0, 1.0, 0.0, clock=_ticking_clock(1.0))
    limiter.reset(5.0)
    assert limiter.last_value == 5.0
    out = limiter.calculate(5.0)
    assert out == 5.0


def test_slew_rate_limiter_real_clock_starts_at_initial_value():
    limiter = SlewRateLimiter(1.0, 1.0, 3.0)
    out = limiter.calculate(3.0)
    assert out == 3.0