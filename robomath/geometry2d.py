"""Planar geometry: rotations, translations, transforms, twists and poses.

Distances are in meters and angles in radians.  Constructors also accept
unit quantities such as :class:`~robomath.units.Degree` or
:class:`~robomath.units.Feet`, which are converted on the way in.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Union

from robomath.math_util import interpolate as _lerp
from robomath.units import Meter, Radian, Unit, value_in

__all__ = ["Rotation2d", "Translation2d", "Transform2d", "Twist2d", "Pose2d"]

Quantity = Union[int, float, Unit]


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Rotation2d:
    """An angle together with its sine and cosine."""

    value: float = 0.0
    sin: float = field(init=False)
    cos: float = field(init=False)

    def __post_init__(self) -> None:
        angle = float(value_in(self.value, Radian))
        object.__setattr__(self, "value", angle)
        object.__setattr__(self, "sin", math.sin(angle))
        object.__setattr__(self, "cos", math.cos(angle))

    @classmethod
    def from_xy(cls, x: Quantity, y: Quantity) -> Rotation2d:
        """The direction of the vector (x, y); a zero vector gives angle zero."""
        fx = float(value_in(x, Meter))
        fy = float(value_in(y, Meter))
        magnitude = math.hypot(fx, fy)
        if magnitude > 1e-6:
            sin, cos = fy / magnitude, fx / magnitude
        else:
            sin, cos = 0.0, 1.0
        rotation = cls(math.atan2(sin, cos))
        object.__setattr__(rotation, "sin", sin)
        object.__setattr__(rotation, "cos", cos)
        return rotation

    @property
    def tan(self) -> float:
        return self.sin / self.cos

    def rotate_by(self, other: Rotation2d) -> Rotation2d:
        """Add the angle of ``other`` to this one."""
        return Rotation2d(self.value + other.value)

    def interpolate(self, end_value: Rotation2d, t: float) -> Rotation2d:
        """Move toward ``end_value`` by the fraction ``t``, clamped to [0, 1]."""
        return self + (end_value - self) * _clamp(t, 0.0, 1.0)

    def __add__(self, other: object) -> Rotation2d:
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return self.rotate_by(other)

    def __sub__(self, other: object) -> Rotation2d:
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return self.rotate_by(-other)

    def __neg__(self) -> Rotation2d:
        return Rotation2d(-self.value)

    def __mul__(self, scalar: object) -> Rotation2d:
        if not _is_scalar(scalar):
            return NotImplemented
        return Rotation2d(self.value * scalar)  # type: ignore[operator]

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Rotation2d:
        if not _is_scalar(scalar):
            return NotImplemented
        return self * (1.0 / scalar)  # type: ignore[operator]

    def __str__(self) -> str:
        return f"{self.value} rad"


@dataclass(frozen=True)
class Translation2d:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(value_in(self.x, Meter)))
        object.__setattr__(self, "y", float(value_in(self.y, Meter)))

    @classmethod
    def from_polar(cls, distance: Quantity, angle: Rotation2d) -> Translation2d:
        """The vector of length ``distance`` pointing along ``angle``."""
        d = float(value_in(distance, Meter))
        return cls(d * angle.cos, d * angle.sin)

    def distance(self, other: Translation2d) -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(other.x - self.x, other.y - self.y)

    @property
    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> Rotation2d:
        return Rotation2d.from_xy(self.x, self.y)

    def rotate_by(self, rotation: Rotation2d) -> Translation2d:
        """Rotate this vector about the origin."""
        return Translation2d(
            self.x * rotation.cos - self.y * rotation.sin,
            self.x * rotation.sin + self.y * rotation.cos,
        )

    def nearest(self, translations: Iterable[Translation2d]) -> Translation2d:
        """The first of ``translations`` closest to this one."""
        candidates = list(translations)
        if not candidates:
            raise ValueError("nearest() needs at least one translation")
        return min(candidates, key=self.distance)

    def interpolate(self, other: Translation2d, t: float) -> Translation2d:
        """Linear interpolation toward ``other`` with ``t`` clamped to [0, 1]."""
        return Translation2d(_lerp(self.x, other.x, t), _lerp(self.y, other.y, t))

    def __add__(self, other: object) -> Translation2d:
        if not isinstance(other, Translation2d):
            return NotImplemented
        return Translation2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Translation2d:
        if not isinstance(other, Translation2d):
            return NotImplemented
        return Translation2d(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Translation2d:
        return Translation2d(-self.x, -self.y)

    def __mul__(self, scalar: object) -> Translation2d:
        if not _is_scalar(scalar):
            return NotImplemented
        return Translation2d(self.x * scalar, self.y * scalar)  # type: ignore[operator]

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Translation2d:
        if not _is_scalar(scalar):
            return NotImplemented
        return Translation2d(self.x / scalar, self.y / scalar)  # type: ignore[operator]


@dataclass(frozen=True)
class Transform2d:
    """A change of pose: a translation followed by a rotation."""

    translation: Translation2d = field(default_factory=Translation2d)
    rotation: Rotation2d = field(default_factory=Rotation2d)

    @classmethod
    def between(cls, initial: Pose2d, last: Pose2d) -> Transform2d:
        """The transform that takes ``initial`` to ``last``."""
        translation = (last.translation - initial.translation).rotate_by(
            -initial.rotation
        )
        return cls(translation, last.rotation - initial.rotation)

    def inverse(self) -> Transform2d:
        """The transform that undoes this one."""
        return Transform2d(
            (-self.translation).rotate_by(-self.rotation), -self.rotation
        )

    def __add__(self, other: object) -> Transform2d:
        if not isinstance(other, Transform2d):
            return NotImplemented
        origin = Pose2d()
        return Transform2d.between(origin, origin.transform_by(self).transform_by(other))

    def __sub__(self, other: object) -> Transform2d:
        if not isinstance(other, Transform2d):
            return NotImplemented
        return self + other.inverse()

    def __neg__(self) -> Transform2d:
        return self.inverse()

    def __mul__(self, scalar: object) -> Transform2d:
        if not _is_scalar(scalar):
            return NotImplemented
        return Transform2d(self.translation * scalar, self.rotation * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Transform2d:
        if not _is_scalar(scalar):
            return NotImplemented
        return self * (1.0 / scalar)  # type: ignore[operator]


@dataclass(frozen=True)
class Twist2d:
    """A change along an arc: forward, sideways and heading deltas."""

    dx: float = 0.0
    dy: float = 0.0
    dtheta: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "dx", float(value_in(self.dx, Meter)))
        object.__setattr__(self, "dy", float(value_in(self.dy, Meter)))
        object.__setattr__(self, "dtheta", float(value_in(self.dtheta, Radian)))


@dataclass(frozen=True)
class Pose2d:
    """A position and heading in the plane."""

    translation: Translation2d = field(default_factory=Translation2d)
    rotation: Rotation2d = field(default_factory=Rotation2d)

    @classmethod
    def from_xy(cls, x: Quantity, y: Quantity, rotation: Rotation2d) -> Pose2d:
        return cls(Translation2d(x, y), rotation)

    def transform_by(self, other: Transform2d) -> Pose2d:
        """Apply ``other`` in this pose's own frame."""
        return Pose2d(
            self.translation + other.translation.rotate_by(self.rotation),
            other.rotation + self.rotation,
        )

    def relative_to(self, other: Pose2d) -> Pose2d:
        """This pose expressed in the frame of ``other``."""
        transform = Transform2d.between(other, self)
        return Pose2d(transform.translation, transform.rotation)

    def exp(self, twist: Twist2d) -> Pose2d:
        """The pose reached by following ``twist`` along a constant-curvature arc."""
        dx, dy, dtheta = twist.dx, twist.dy, twist.dtheta
        sin_theta = math.sin(dtheta)
        cos_theta = math.cos(dtheta)
        if abs(dtheta) < 1e-9:
            s = 1.0 - 1.0 / 6.0 * dtheta * dtheta
            c = 0.5 * dtheta
        else:
            s = sin_theta / dtheta
            c = (1.0 - cos_theta) / dtheta
        transform = Transform2d(
            Translation2d(dx * s - dy * c, dx * c + dy * s),
            Rotation2d.from_xy(cos_theta, sin_theta),
        )
        return self.transform_by(transform)

    def log(self, end: Pose2d) -> Twist2d:
        """The twist that :meth:`exp` turns into ``end``."""
        transform = end.relative_to(self)
        dtheta = transform.rotation.value
        half_dtheta = dtheta / 2.0
        cos_minus_one = transform.rotation.cos - 1.0
        if abs(cos_minus_one) < 1e-9:
            half_theta_by_tan = 1.0 - dtheta * dtheta / 12.0
        else:
            half_theta_by_tan = -(half_dtheta * transform.rotation.sin) / cos_minus_one
        part = transform.translation.rotate_by(
            Rotation2d.from_xy(half_theta_by_tan, -half_dtheta)
        ) * math.hypot(half_theta_by_tan, half_dtheta)
        return Twist2d(part.x, part.y, dtheta)

    def nearest(self, poses: Iterable[Pose2d]) -> Pose2d:
        """The first of ``poses`` whose position is closest to this one."""
        candidates = list(poses)
        if not candidates:
            raise ValueError("nearest() needs at least one pose")
        return min(candidates, key=lambda pose: self.translation.distance(pose.translation))

    def interpolate(self, end_value: Pose2d, t: float) -> Pose2d:
        """Move along the twist toward ``end_value`` by the fraction ``t``."""
        if t < 0.0:
            return self
        if t >= 1.0:
            return end_value
        twist = self.log(end_value)
        return self.exp(Twist2d(twist.dx * t, twist.dy * t, twist.dtheta * t))

    def __add__(self, other: object) -> Pose2d:
        if not isinstance(other, Transform2d):
            return NotImplemented
        return self.transform_by(other)

    def __sub__(self, other: object) -> Transform2d:
        if not isinstance(other, Pose2d):
            return NotImplemented
        pose = self.relative_to(other)
        return Transform2d(pose.translation, pose.rotation)

    def __mul__(self, scalar: object) -> Pose2d:
        if not _is_scalar(scalar):
            return NotImplemented
        return Pose2d(self.translation * scalar, self.rotation * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Pose2d:
        if not _is_scalar(scalar):
            return NotImplemented
        return self * (1.0 / scalar)  # type: ignore[operator]