import pytest

from robomath.controllers import BangBangController, Controller, PIDController
from robomath.units import Millisecond, Second


def test_bang_bang():
    controller = BangBangController()
    controller.set_point = 0.3
    assert controller.calculate(0.2, 0.0) == 1.0


def test_bang_bang_above_set_point_gives_min_output():
    controller = BangBangController()
    controller.set_point = 0.3
    assert controller.calculate(0.5, 0.0) == -1.0


def test_bang_bang_clamps_measurement_to_input_range():
    controller = BangBangController()
    controller.set_limits(0.0, 0.2, -2.0, 2.0)
    controller.set_point = 0.3
    assert controller.calculate(5.0) == 2.0
    assert controller.limits == (0.0, 0.2, -2.0, 2.0)


def test_bang_bang_disabled_and_reset():
    controller = BangBangController()
    controller.set_point = 0.3
    controller.enabled = False
    assert controller.calculate(0.2, 0.0) == 0.0
    controller.reset()
    assert controller.set_point == 0.0


def test_pid():
    controller = PIDController(0.1, 0.2, 0.3)
    controller.set_point = 0.3
    assert controller.calculate(0.2, 20) == 0.21150000000000002


@pytest.mark.parametrize("period", [Millisecond(20.0), Second(0.02)])
def test_pid_accepts_period_units(period):
    controller = PIDController(0.1, 0.2, 0.3)
    controller.set_point = 0.3
    assert controller.calculate(0.2, period) == 0.21150000000000002


def test_pid_reset_restores_first_output():
    controller = PIDController(0.1, 0.2, 0.3)
    controller.set_point = 0.3
    first = controller.calculate(0.2, 20)
    second = controller.calculate(0.2, 20)
    assert second != first
    controller.reset()
    assert controller.calculate(0.2, 20) == first


def test_pid_output_is_clamped():
    controller = PIDController(100.0, 0.0, 0.0)
    controller.set_limits(-1.0, 1.0, -0.5, 0.5)
    controller.set_point = 1.0
    assert controller.calculate(0.0, 20) == 0.5
    assert controller.limits == (-1.0, 1.0, -0.5, 0.5)


def test_pid_disabled_returns_zero():
    controller = PIDController(1.0, 1.0, 1.0)
    controller.set_point = 1.0
    controller.enabled = False
    assert controller.calculate(0.0, 20) == 0.0


def test_pid_i_zone_limits_integral():
    controller = PIDController(0.0, 1.0, 0.0)
    controller.set_i_zone(-0.25, 0.25)
    controller.set_point = 1.0
    controller.calculate(0.0, 20)
    assert controller.calculate(1.0, 20) == 0.25


def test_controller_is_abstract():
    with pytest.raises(TypeError):
        Controller()