import pytest

from robomath.robots import RobotCore, RobotMode, UserRobot, run_robot, set_periodic_time


class _Stop(Exception):
    pass


class RecordingRobot(UserRobot):
    def __init__(self, stop_after=None):
        self.calls = []
        self.stop_after = stop_after
        self.periodic_count = 0

    def robot_init(self):
        self.calls.append("robot_init")

    def robot_periodic(self):
        self.calls.append("robot_periodic")
        self.periodic_count += 1
        if self.stop_after is not None and self.periodic_count >= self.stop_after:
            raise _Stop()

    def robot_end(self):
        self.calls.append("robot_end")

    def robot_disabled_init(self):
        self.calls.append("robot_disabled_init")

    def robot_disabled_periodic(self):
        self.calls.append("robot_disabled_periodic")

    def robot_disabled_end(self):
        self.calls.append("robot_disabled_end")

    def robot_autonomous_init(self):
        self.calls.append("robot_autonomous_init")

    def robot_autonomous_periodic(self):
        self.calls.append("robot_autonomous_periodic")

    def robot_autonomous_end(self):
        self.calls.append("robot_autonomous_end")

    def robot_teleop_init(self):
        self.calls.append("robot_teleop_init")

    def robot_teleop_periodic(self):
        self.calls.append("robot_teleop_periodic")

    def robot_teleop_end(self):
        self.calls.append("robot_teleop_end")

    def robot_test_init(self):
        self.calls.append("robot_test_init")

    def robot_test_periodic(self):
        self.calls.append("robot_test_periodic")

    def robot_test_end(self):
        self.calls.append("robot_test_end")

    def sim_init(self):
        self.calls.append("sim_init")

    def sim_periodic(self):
        self.calls.append("sim_periodic")


@pytest.fixture(autouse=True)
def _restore_periodic_time():
    yield
    set_periodic_time(0.02)


def test_robot_mode_values_and_predicates():
    assert [m.value for m in RobotMode] == [0, 1, 2, 3]
    teleop_core = RobotCore(RecordingRobot(), lambda: RobotMode.TELEOP)
    assert teleop_core.mode.is_teleop
    assert not teleop_core.mode.is_disabled
    auto_core = RobotCore(RecordingRobot(), lambda: RobotMode.AUTONOMOUS)
    assert auto_core.mode.is_autonomous
    test_core = RobotCore(RecordingRobot(), lambda: RobotMode.TEST)
    assert test_core.mode.is_test
    assert not test_core.mode.is_autonomous
    disabled_core = RobotCore(RecordingRobot(), lambda: RobotMode.DISABLED)
    assert disabled_core.mode.is_disabled
    assert not disabled_core.mode.is_teleop


def test_default_mode_is_disabled():
    core = RobotCore(RecordingRobot())
    assert core.mode is RobotMode.DISABLED


def test_step_without_mode_change_runs_periodic_hooks():
    robot = RecordingRobot()
    core = RobotCore(robot)
    core.step()
    assert robot.calls == ["robot_disabled_periodic", "robot_periodic"]


def test_step_on_mode_change_inits_new_then_ends_old():
    robot = RecordingRobot()
    current = [RobotMode.DISABLED]
    core = RobotCore(robot, lambda: current[0])
    core.step()
    robot.calls.clear()
    current[0] = RobotMode.TELEOP
    core.step()
    assert robot.calls == [
        "robot_teleop_init",
        "robot_disabled_end",
        "robot_teleop_periodic",
        "robot_periodic",
    ]


def test_step_autonomous_to_test():
    robot = RecordingRobot()
    current = [RobotMode.AUTONOMOUS]
    core = RobotCore(robot, lambda: current[0])
    core.step()
    robot.calls.clear()
    current[0] = RobotMode.TEST
    core.step()
    assert robot.calls[:3] == [
        "robot_test_init",
        "robot_autonomous_end",
        "robot_test_periodic",
    ]


def test_simulation_calls_sim_periodic():
    robot = RecordingRobot()
    core = RobotCore(robot, simulation=True)
    core.step()
    assert robot.calls[-1] == "sim_periodic"


def test_start_runs_init_and_loops_until_hook_raises():
    robot = RecordingRobot(stop_after=3)
    sleeps = []
    core = RobotCore(robot, simulation=True, sleep=sleeps.append, clock=lambda: 0.0)
    with pytest.raises(_Stop):
        core.start()
    assert robot.calls[:2] == ["robot_init", "sim_init"]
    assert robot.periodic_count == 3
    assert len(sleeps) == 2
    assert all(s >= 0.0 for s in sleeps)


def test_set_periodic_time_controls_sleep():
    set_periodic_time(0.05)
    robot = RecordingRobot(stop_after=2)
    sleeps = []
    core = RobotCore(robot, sleep=sleeps.append, clock=lambda: 1.0)
    with pytest.raises(_Stop):
        core.start()
    assert sleeps == [pytest.approx(0.05)]


def test_sleep_never_negative_when_iteration_overruns():
    set_periodic_time(0.01)
    robot = RecordingRobot(stop_after=2)
    sleeps = []
    ticks = iter(range(100))
    core = RobotCore(robot, sleep=sleeps.append, clock=lambda: float(next(ticks)))
    with pytest.raises(_Stop):
        core.start()
    assert sleeps == [0.0]


def test_user_robot_requires_core_hooks():
    class Incomplete(UserRobot):
        def robot_init(self):
            pass

    with pytest.raises(TypeError):
        RobotCore(Incomplete())

    class Minimal(UserRobot):
        def __init__(self):
            self.periodic = 0

        def robot_init(self):
            pass

        def robot_periodic(self):
            self.periodic += 1

        def robot_end(self):
            pass

    robot = Minimal()
    core = RobotCore(robot)
    core.step()
    core.step()
    assert robot.periodic == 2


def test_run_robot_propagates_and_initialises():
    robot = RecordingRobot(stop_after=1)
    with pytest.raises(_Stop):
        run_robot(robot)
    assert robot.calls == ["robot_init", "robot_disabled_periodic", "robot_periodic"]