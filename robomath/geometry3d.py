"""Spatial geometry: quaternions, rotations, translations, transforms, twists and poses.

Distances are in meters and angles in radians.  Constructors also accept
unit quantities such as :class:`~robomath.units.Degree` or
:class:`~robomath.units.Feet`, which are converted on the way in.  Vectors
are given and returned as 3-tuples of floats.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Union

from robomath.geometry2d import Pose2d, Rotation2d, Transform2d, Translation2d, Twist2d
from robomath.math_util import interpolate as _lerp
from robomath.units import Meter, Radian, Unit, value_in

__all__ = [
    "Quaternion",
    "Rotation3d",
    "Translation3d",
    "Transform3d",
    "Twist3d",
    "Pose3d",
]

Quantity = Union[int, float, Unit]
Vector = Sequence[float]


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _vector(values: Vector) -> tuple[float, float, float]:
    items = tuple(float(v) for v in values)
    if len(items) != 3:
        raise ValueError(f"expected 3 components, got {len(items)}")
    return items  # type: ignore[return-value]


def _dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vector, b: Vector) -> tuple[float, float, float]:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _length(a: Vector) -> float:
    return math.sqrt(_dot(a, a))


@dataclass(frozen=True)
class Quaternion:
    """A quaternion ``w + xi + yj + zk``."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def norm(self) -> float:
        """The Euclidean length of the four components."""
        return math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Quaternion:
        """This quaternion scaled to unit length."""
        n = self.norm()
        if n == 0.0:
            raise ValueError("cannot normalize a zero quaternion")
        return Quaternion(self.w / n, self.x / n, self.y / n, self.z / n)

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        """The multiplicative inverse."""
        n2 = self.w**2 + self.x**2 + self.y**2 + self.z**2
        if n2 == 0.0:
            raise ValueError("a zero quaternion has no inverse")
        c = self.conjugate()
        return Quaternion(c.w / n2, c.x / n2, c.y / n2, c.z / n2)

    @property
    def vector(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __mul__(self, other: object) -> Quaternion:
        if isinstance(other, Quaternion):
            a, b = self, other
            return Quaternion(
                a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
                a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
                a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
                a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
            )
        if _is_scalar(other):
            s = float(other)  # type: ignore[arg-type]
            return Quaternion(self.w * s, self.x * s, self.y * s, self.z * s)
        return NotImplemented

    def __rmul__(self, other: object) -> Quaternion:
        if _is_scalar(other):
            return self * other
        return NotImplemented

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.w, -self.x, -self.y, -self.z)


def _euler_quaternion(roll: float, pitch: float, yaw: float) -> Quaternion:
    sr, cr = math.sin(roll * 0.5), math.cos(roll * 0.5)
    sp, cp = math.sin(pitch * 0.5), math.cos(pitch * 0.5)
    sy, cy = math.sin(yaw * 0.5), math.cos(yaw * 0.5)
    return Quaternion(
        cr * cp * cy + sr * sp * sy,
        sr * cp * cy - cr * sp * sy,
        cr * sp * cy + sr * cp * sy,
        cr * cp * sy - sr * sp * cy,
    )


@dataclass(frozen=True, init=False)
class Rotation3d:
    """A rotation in space, stored as a unit quaternion ``q``."""

    q: Quaternion

    def __init__(
        self, roll: Quantity = 0.0, pitch: Quantity = 0.0, yaw: Quantity = 0.0
    ) -> None:
        q = _euler_quaternion(
            float(value_in(roll, Radian)),
            float(value_in(pitch, Radian)),
            float(value_in(yaw, Radian)),
        )
        object.__setattr__(self, "q", q)

    @classmethod
    def _of(cls, q: Quaternion) -> Rotation3d:
        rotation = cls.__new__(cls)
        object.__setattr__(rotation, "q", q)
        return rotation

    @classmethod
    def from_quaternion(cls, q: Quaternion) -> Rotation3d:
        """The rotation of ``q`` scaled to unit length."""
        return cls._of(q.normalized())

    @classmethod
    def from_rotation_vector(cls, rvec: Vector) -> Rotation3d:
        """The rotation about ``rvec`` by an angle equal to its length."""
        v = _vector(rvec)
        return cls.from_axis_angle(v, _length(v))

    @classmethod
    def from_axis_angle(cls, axis: Vector, angle: Quantity) -> Rotation3d:
        """The rotation by ``angle`` about ``axis``; a zero axis gives no rotation."""
        v = _vector(axis)
        n = _length(v)
        if n == 0.0:
            return cls()
        half = float(value_in(angle, Radian)) / 2.0
        s = math.sin(half) / n
        return cls._of(Quaternion(math.cos(half), v[0] * s, v[1] * s, v[2] * s))

    @classmethod
    def from_rotation_matrix(cls, matrix: Sequence[Sequence[float]]) -> Rotation3d:
        """The rotation described by a 3x3 rotation matrix (rows first)."""
        rows = [_vector(row) for row in matrix]
        if len(rows) != 3:
            raise ValueError("a rotation matrix must have 3 rows")
        (m00, m01, m02), (m10, m11, m12), (m20, m21, m22) = rows
        trace = m00 + m11 + m22
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            q = Quaternion(0.25 * s, (m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s)
        elif m00 > m11 and m00 > m22:
            s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
            q = Quaternion((m21 - m12) / s, 0.25 * s, (m01 + m10) / s, (m02 + m20) / s)
        elif m11 > m22:
            s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
            q = Quaternion((m02 - m20) / s, (m01 + m10) / s, 0.25 * s, (m12 + m21) / s)
        else:
            s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
            q = Quaternion((m10 - m01) / s, (m02 + m20) / s, (m12 + m21) / s, 0.25 * s)
        return cls.from_quaternion(q)

    @classmethod
    def from_vectors(cls, initial: Vector, last: Vector) -> Rotation3d:
        """The shortest rotation that turns the direction of ``initial`` into ``last``."""
        a = _vector(initial)
        b = _vector(last)
        dot = _dot(a, b)
        norm_product = _length(a) * _length(b)
        if norm_product == 0.0:
            raise ValueError("cannot find a rotation between zero-length vectors")
        dot_norm = dot / norm_product
        if dot_norm > 1.0 - 1e-9:
            return cls()
        if dot_norm < -1.0 + 1e-9:
            # Half a turn about any axis perpendicular to the initial vector.
            helper = min(
                ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
                key=lambda basis: abs(_dot(basis, a)),
            )
            return cls.from_axis_angle(_cross(a, helper), math.pi)
        axis = _cross(a, b)
        return cls.from_quaternion(Quaternion(norm_product + dot, *axis))

    @classmethod
    def from_rotation2d(cls, rotation: Rotation2d) -> Rotation3d:
        """A rotation about the z axis by the planar angle."""
        return cls(0.0, 0.0, rotation.value)

    def to_rotation2d(self) -> Rotation2d:
        """The planar rotation given by the yaw angle."""
        return Rotation2d(self.z)

    @property
    def x(self) -> float:
        """Roll: the angle about the x axis."""
        q = self.q
        return math.atan2(
            2.0 * (q.w * q.x + q.y * q.z), 1.0 - 2.0 * (q.x * q.x + q.y * q.y)
        )

    @property
    def y(self) -> float:
        """Pitch: the angle about the y axis."""
        q = self.q
        ratio = 2.0 * (q.w * q.y - q.z * q.x)
        if abs(ratio) >= 1.0:
            return math.copysign(math.pi / 2.0, ratio)
        return math.asin(ratio)

    @property
    def z(self) -> float:
        """Yaw: the angle about the z axis."""
        q = self.q
        return math.atan2(
            2.0 * (q.w * q.z + q.x * q.y), 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
        )

    @property
    def axis(self) -> tuple[float, float, float]:
        """The unit rotation axis, or zeros for no rotation."""
        v = self.q.vector
        if self.q.w < 0.0:
            v = (-v[0], -v[1], -v[2])
        n = _length(v)
        if n == 0.0:
            return (0.0, 0.0, 0.0)
        return (v[0] / n, v[1] / n, v[2] / n)

    @property
    def angle(self) -> float:
        """The rotation angle in [0, 2*pi]."""
        w = abs(self.q.w)
        if w > 1.0:
            return 0.0
        return 2.0 * math.acos(w)

    def rotate_by(self, other: Rotation3d) -> Rotation3d:
        """Compose this rotation with ``other``."""
        return Rotation3d._of(self.q * other.q)

    def interpolate(self, end_value: Rotation3d, t: float) -> Rotation3d:
        """Move toward ``end_value`` by the fraction ``t``, clamped to [0, 1]."""
        return self + (end_value - self) * _clamp(t, 0.0, 1.0)

    def __add__(self, other: object) -> Rotation3d:
        if not isinstance(other, Rotation3d):
            return NotImplemented
        return self.rotate_by(other)

    def __sub__(self, other: object) -> Rotation3d:
        if not isinstance(other, Rotation3d):
            return NotImplemented
        return self.rotate_by(-other)

    def __neg__(self) -> Rotation3d:
        return Rotation3d._of(self.q.inverse())

    def __mul__(self, scalar: object) -> Rotation3d:
        if not _is_scalar(scalar):
            return NotImplemented
        q = self.q
        s = float(scalar)  # type: ignore[arg-type]
        if q.w >= 0.0:
            axis = (q.x, q.y, q.z)
            w = q.w
        else:
            axis = (-q.x, -q.y, -q.z)
            w = -q.w
        return Rotation3d.from_axis_angle(axis, 2.0 * s * math.acos(_clamp(w, -1.0, 1.0)))

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Rotation3d:
        if not _is_scalar(scalar):
            return NotImplemented
        return self * (1.0 / scalar)  # type: ignore[operator]


@dataclass(frozen=True)
class Translation3d:
    """A point or vector in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(value_in(self.x, Meter)))
        object.__setattr__(self, "y", float(value_in(self.y, Meter)))
        object.__setattr__(self, "z", float(value_in(self.z, Meter)))

    @classmethod
    def from_polar(cls, distance: Quantity, angle: Rotation3d) -> Translation3d:
        """The vector of length ``distance`` along the x axis turned by ``angle``."""
        return cls(distance, 0.0, 0.0).rotate_by(angle)

    @classmethod
    def from_translation2d(cls, translation: Translation2d) -> Translation3d:
        return cls(translation.x, translation.y, 0.0)

    def to_translation2d(self) -> Translation2d:
        """Drop the z component."""
        return Translation2d(self.x, self.y)

    def distance(self, other: Translation3d) -> float:
        """Euclidean distance to ``other``."""
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    @property
    def norm(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def rotate_by(self, rotation: Rotation3d) -> Translation3d:
        """Rotate this vector about the origin."""
        q = rotation.q
        result = q * Quaternion(0.0, self.x, self.y, self.z) * q.inverse()
        return Translation3d(result.x, result.y, result.z)

    def interpolate(self, end_value: Translation3d, t: float) -> Translation3d:
        """Linear interpolation toward ``end_value`` with ``t`` clamped to [0, 1]."""
        return Translation3d(
            _lerp(self.x, end_value.x, t),
            _lerp(self.y, end_value.y, t),
            _lerp(self.z, end_value.z, t),
        )

    def __add__(self, other: object) -> Translation3d:
        if not isinstance(other, Translation3d):
            return NotImplemented
        return Translation3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Translation3d:
        if not isinstance(other, Translation3d):
            return NotImplemented
        return Translation3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Translation3d:
        return Translation3d(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: object) -> Translation3d:
        if not _is_scalar(scalar):
            return NotImplemented
        s = float(scalar)  # type: ignore[arg-type]
        return Translation3d(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Translation3d:
        if not _is_scalar(scalar):
            return NotImplemented
        return self * (1.0 / scalar)  # type: ignore[operator]


@dataclass(frozen=True)
class Transform3d:
    """A change of pose in space: a translation followed by a rotation."""

    translation: Translation3d = field(default_factory=Translation3d)
    rotation: Rotation3d = field(default_factory=Rotation3d)

    @classmethod
    def between(cls, initial: Pose3d, last: Pose3d) -> Transform3d:
        """The transform that takes ``initial`` to ``last``."""
        translation = (last.translation - initial.translation).rotate_by(
            -initial.rotation
        )
        return cls(translation, last.rotation - initial.rotation)

    @classmethod
    def from_transform2d(cls, transform: Transform2d) -> Transform3d:
        return cls(
            Translation3d.from_translation2d(transform.translation),
            Rotation3d.from_rotation2d(transform.rotation),
        )

    def to_transform2d(self) -> Transform2d:
        """The planar part of this transform."""
        return Transform2d(
            self.translation.to_translation2d(), self.rotation.to_rotation2d()
        )

    def inverse(self) -> Transform3d:
        """The transform that undoes this one."""
        return Transform3d(
            (-self.translation).rotate_by(-self.rotation), -self.rotation
        )

    def __add__(self, other: object) -> Transform3d:
        if not isinstance(other, Transform3d):
            return NotImplemented
        origin = Pose3d()
        return Transform3d.between(origin, origin.transform_by(self).transform_by(other))

    def __mul__(self, scalar: object) -> Transform3d:
        if not _is_scalar(scalar):
            return NotImplemented
        return Transform3d(self.translation * scalar, self.rotation * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Transform3d:
        if not _is_scalar(scalar):
            return NotImplemented
        return self * (1.0 / scalar)  # type: ignore[operator]


@dataclass(frozen=True)
class Twist3d:
    """Translation deltas and rotation-vector deltas in space."""

    dx: float = 0.0
    dy: float = 0.0
    dz: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0

    def __post_init__(self) -> None:
        for name in ("dx", "dy", "dz"):
            object.__setattr__(self, name, float(value_in(getattr(self, name), Meter)))
        for name in ("rx", "ry", "rz"):
            object.__setattr__(self, name, float(value_in(getattr(self, name), Radian)))

    @classmethod
    def from_twist2d(cls, twist: Twist2d) -> Twist3d:
        return cls(twist.dx, twist.dy, 0.0, 0.0, 0.0, twist.dtheta)

    def to_twist2d(self) -> Twist2d:
        """The planar part: dx, dy and the rotation about z."""
        return Twist2d(self.dx, self.dy, self.rz)


@dataclass(frozen=True)
class Pose3d:
    """A position and orientation in space."""

    translation: Translation3d = field(default_factory=Translation3d)
    rotation: Rotation3d = field(default_factory=Rotation3d)

    @classmethod
    def from_xyz(
        cls, x: Quantity, y: Quantity, z: Quantity, rotation: Rotation3d
    ) -> Pose3d:
        return cls(Translation3d(x, y, z), rotation)

    @classmethod
    def from_pose2d(cls, pose: Pose2d) -> Pose3d:
        return cls(
            Translation3d.from_translation2d(pose.translation),
            Rotation3d.from_rotation2d(pose.rotation),
        )

    def to_pose2d(self) -> Pose2d:
        """The planar part of this pose."""
        return Pose2d(self.translation.to_translation2d(), self.rotation.to_rotation2d())

    def transform_by(self, other: Transform3d) -> Pose3d:
        """Apply ``other`` in this pose's own frame."""
        return Pose3d(
            self.translation + other.translation.rotate_by(self.rotation),
            other.rotation + self.rotation,
        )

    def relative_to(self, other: Pose3d) -> Pose3d:
        """This pose expressed in the frame of ``other``."""
        transform = Transform3d.between(other, self)
        return Pose3d(transform.translation, transform.rotation)

    def __add__(self, other: object) -> Pose3d:
        if not isinstance(other, Transform3d):
            return NotImplemented
        return self.transform_by(other)

    def __sub__(self, other: object) -> Transform3d:
        if not isinstance(other, Pose3d):
            return NotImplemented
        pose = self.relative_to(other)
        return Transform3d(pose.translation, pose.rotation)

    def __mul__(self, scalar: object) -> Pose3d:
        if not _is_scalar(scalar):
            return NotImplemented
        return Pose3d(self.translation * scalar, self.rotation * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Pose3d:
        if not _is_scalar(scalar):
            return NotImplemented
        return self * (1.0 / scalar)  # type: ignore[operator]