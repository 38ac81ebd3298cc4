# robomath

Building blocks for robot control code, in plain Python with no third-party
dependencies.

| Module | What it holds |
| --- | --- |
| `robomath.units` | `Unit` and its subclasses (`Meter`, `Feet`, `Second`, `Degree`, `Radian`, `MeterPerSecond`, `Volt`, `Watt`, `Kilogram`, `Celsius`, `NewtonMeter`, `Byte`, ...), `value_in`, and plain conversion functions such as `meter_to_feet` or `celsius_to_kelvin` |
| `robomath.math_util` | `apply_deadband`, `input_modulus`, `angle_modulus`, `interpolate`, `is_near`, `is_near_min_max` |
| `robomath.controllers` | `Controller`, `BangBangController`, `PIDController` |
| `robomath.feed_forward` | `SimpleFeedforward`, `StaticFeedforward`, `ElevatorFeedforward`, `ArmFeedforward` |
| `robomath.filters` | `DebounceType`, `Debouncer`, `SlewRateLimiter` |
| `robomath.geometry2d` | `Rotation2d`, `Translation2d`, `Transform2d`, `Twist2d`, `Pose2d` |
| `robomath.geometry3d` | `Quaternion`, `Rotation3d`, `Translation3d`, `Transform3d`, `Twist3d`, `Pose3d` |
| `robomath.robots` | `RobotMode`, `UserRobot`, `RobotCore`, `set_periodic_time`, `run_robot` |

## Installation

```
pip install .
```

## Units

Each quantity is an instance of a `Unit` subclass holding a `value`.
Quantities of the same dimension compare, add and subtract across units; the
result keeps the unit of the left operand. `to()` re-expresses a quantity in
another unit, and `value_in()` gives the bare number (plain numbers are taken
to be in the requested unit already). Converting between dimensions raises
`TypeError`.

```python
from robomath.units import Celsius, Fahrenheit, Feet, Meter, MeterPerSecond, Second

assert Feet(3.28084) == Meter(1.0)
assert Feet(3.28084) + Meter(1.0) == Meter(2.0)
assert Celsius(100.0).to(Fahrenheit) == Fahrenheit(212.0)
assert Meter(1.0) / Second(1.0) == MeterPerSecond(1.0)
```

A few products and quotients across dimensions are known: angular velocity
times time gives an angle, `Volt * Amp` gives `Watt`, `Watt * Second` gives
`Joule`, and `Meter / Second` or `Feet / Second` give a linear velocity.
`Microsecond` holds whole numbers; conversions into it truncate toward zero.

## Controllers and feedforward

```python
from robomath.controllers import BangBangController, PIDController

pid = PIDController(0.1, 0.2, 0.3)
pid.set_point = 0.3
output = pid.calculate(0.2, 20)  # period in milliseconds

bang = BangBangController()
bang.set_point = 0.3
assert bang.calculate(0.2) == 1.0
```

Both controllers clamp their output to `min_output`/`max_output`, return
`0.0` while `enabled` is false, and report `limits` as
`(min_input, max_input, min_output, max_output)`. `PIDController.set_i_zone`
bounds the accumulated error.

The feedforward classes are frozen dataclasses built from their gains
(`k_s`, `k_g`, `k_v`, `k_a` as each needs) with `calculate` and
`max_*`/`min_*` helpers. Velocities and accelerations are in radians per
second (squared) unless a unit quantity is passed; voltages are in volts.

```python
from robomath.feed_forward import ArmFeedforward

arm = ArmFeedforward(k_s=0.1, k_g=0.5, k_v=1.0, k_a=0.05)
volts = arm.calculate(0.0, 1.0)
```

## Filters

`SlewRateLimiter(positive_rate_limit, negative_rate_limit, initial_value=0.0,
clock=time.monotonic)` limits how fast its output rises or falls per second;
pass your own `clock` to drive it deterministically. `Debouncer(debounce_time,
debounce_type, base_value)` holds a boolean at its base value until
`calculate` decides the change may pass; `reset(value, current_time)` sets a
new base value and timer start.

## Geometry

Distances are in meters and angles in radians; constructors also accept unit
quantities such as `Degree` or `Feet`. All geometry classes are immutable and
support `+`, `-`, unary `-`, and multiplication and division by a scalar
where that makes sense.

```python
from robomath.geometry2d import Pose2d, Rotation2d, Translation2d
from robomath.units import Degree

start = Pose2d(Translation2d(0.0, 0.0), Rotation2d(0.0))
end = Pose2d(Translation2d(1.0, 1.0), Rotation2d(Degree(90.0)))
halfway = start.interpolate(end, 0.5)
twist = start.log(end)
assert start.exp(twist).translation.distance(end.translation) < 1e-9
```

`Pose2d` offers `transform_by`, `relative_to`, `exp`, `log`, `nearest` and
`interpolate`. In space, `Rotation3d` is built from roll, pitch and yaw, or
with `from_quaternion`, `from_rotation_vector`, `from_axis_angle`,
`from_rotation_matrix`, `from_vectors` and `from_rotation2d`; its `x`, `y`,
`z`, `axis` and `angle` properties read it back. `Translation3d`,
`Transform3d`, `Twist3d` and `Pose3d` convert to and from their planar
counterparts.

## The robot loop

Subclass `UserRobot`, providing `robot_init`, `robot_periodic` and
`robot_end`. Optional hooks named `robot_<mode>_init`,
`robot_<mode>_periodic` and `robot_<mode>_end` (modes `disabled`,
`autonomous`, `teleop`, `test`) and `sim_init`/`sim_periodic` are called when
defined and skipped otherwise.

```python
from robomath.robots import RobotCore, RobotMode, UserRobot

class Robot(UserRobot):
    def robot_init(self): ...
    def robot_periodic(self): ...
    def robot_end(self): ...
    def robot_teleop_periodic(self):
        print("driving")

core = RobotCore(Robot(), mode_source=lambda: RobotMode.TELEOP)
core.step()  # one iteration, no waiting
```

On a mode change, the new mode's `init` hook runs before the old mode's `end`
hook. `RobotCore.start()` calls `robot_init` and then loops forever, sleeping
so that each iteration lasts the periodic time (0.02 s by default, changed
with `set_periodic_time`), until a hook raises. `run_robot(user_robot)` runs a
core with no mode source, logs "Robot exited" and calls `end()` once the loop
stops.

## What this package does not do

- It does not talk to a driver station or any robot hardware: the current
  mode comes only from the `mode_source` callable you give `RobotCore`, and
  without one the robot is always disabled.
- It has no command scheduler; the loop only calls the hooks of your
  `UserRobot`.
- `Pose3d` has no `exp`/`log`, and `Transform3d` has no subtraction.

## Running the tests

```
pip install .[test]
pytest
```