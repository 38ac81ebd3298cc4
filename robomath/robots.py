"""The robot main loop: mode tracking and dispatch to user-defined hooks."""

from __future__ import annotations

import enum
import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

from robomath.units import Second, Unit, value_in

__all__ = ["RobotMode", "UserRobot", "RobotCore", "set_periodic_time", "run_robot"]

logger = logging.getLogger(__name__)

_periodic_lock = threading.Lock()
_periodic_time = 0.02


def set_periodic_time(seconds: Union[int, float, Unit]) -> None:
    """Set the target length of one loop iteration, in seconds."""
    global _periodic_time
    with _periodic_lock:
        _periodic_time = float(value_in(seconds, Second))


def _current_periodic_time() -> float:
    with _periodic_lock:
        return _periodic_time


class RobotMode(enum.Enum):
    DISABLED = 0
    TELEOP = 1
    AUTONOMOUS = 2
    TEST = 3

    @property
    def is_disabled(self) -> bool:
        return self is RobotMode.DISABLED

    @property
    def is_autonomous(self) -> bool:
        return self is RobotMode.AUTONOMOUS

    @property
    def is_teleop(self) -> bool:
        return self is RobotMode.TELEOP

    @property
    def is_test(self) -> bool:
        return self is RobotMode.TEST


class UserRobot(ABC):
    """User code driven by the robot loop.

    The three ``robot_*`` hooks without a mode in their name must be
    provided.  A subclass may also define any of the optional hooks
    ``robot_<mode>_init``, ``robot_<mode>_periodic`` and
    ``robot_<mode>_end`` for the modes disabled, autonomous, teleop and
    test, and ``sim_init`` and ``sim_periodic``; a hook that is not
    defined is skipped.
    """

    @abstractmethod
    def robot_init(self) -> None:
        """Called once before the loop starts."""

    @abstractmethod
    def robot_periodic(self) -> None:
        """Called on every loop iteration, in every mode."""

    @abstractmethod
    def robot_end(self) -> None:
        """Called when the robot shuts down."""


def _call_hook(robot: UserRobot, name: str) -> None:
    hook = getattr(robot, name, None)
    if hook is not None:
        hook()


def _call_mode_hook(robot: UserRobot, mode: RobotMode, phase: str) -> None:
    _call_hook(robot, f"robot_{mode.name.lower()}_{phase}")


class RobotCore:
    """Runs a :class:`UserRobot`, calling its hooks as the mode changes.

    ``mode_source`` reports the current mode; without one the robot is
    always disabled.  ``simulation`` turns on the ``sim_*`` hooks and
    ``on_athena`` says whether the code runs on the official controller.
    """

    def __init__(
        self,
        user_robot: UserRobot,
        mode_source: Optional[Callable[[], RobotMode]] = None,
        *,
        simulation: bool = False,
        on_athena: bool = False,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.user_robot = user_robot
        self._mode_source = mode_source
        self.simulation = simulation
        self.on_athena = on_athena
        self._sleep = sleep
        self._clock = clock
        self._last_mode: Optional[RobotMode] = None

    def __repr__(self) -> str:
        return "RobotCore()"

    @property
    def mode(self) -> RobotMode:
        """The mode the robot is in now."""
        if self._mode_source is None:
            return RobotMode.DISABLED
        return self._mode_source()

    def start(self) -> None:
        """Initialise the robot and run the loop until a hook raises."""
        if not self.on_athena:
            logger.warning(
                "Running on non-Athena hardware. This is not officially supported."
            )
        self.user_robot.robot_init()
        if self.simulation:
            _call_hook(self.user_robot, "sim_init")
        self._last_mode = self.mode
        while True:
            started = self._clock()
            self.step()
            elapsed = self._clock() - started
            self._sleep(max(0.0, _current_periodic_time() - elapsed))

    def step(self) -> None:
        """Run one iteration of the loop without waiting."""
        mode = self.mode
        last_mode = self._last_mode if self._last_mode is not None else mode
        if mode is not last_mode:
            _call_mode_hook(self.user_robot, mode, "init")
            _call_mode_hook(self.user_robot, last_mode, "end")
        _call_mode_hook(self.user_robot, mode, "periodic")
        self._last_mode = mode
        self.user_robot.robot_periodic()
        if self.simulation:
            _call_hook(self.user_robot, "sim_periodic")

    def end(self) -> None:
        """Shut the core down; there is nothing to release."""


def run_robot(user_robot: UserRobot) -> None:
    """Run ``user_robot`` in a new core until its loop stops."""
    robot = RobotCore(user_robot)
    try:
        robot.start()
    finally:
        logger.info("Robot exited")
        robot.end()