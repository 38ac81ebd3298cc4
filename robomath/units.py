"""Physical quantities tagged with their unit, and conversions between them.

Every quantity is an instance of a :class:`Unit` subclass such as
:class:`Meter` or :class:`Second`.  Quantities of the same dimension convert
into each other, compare and add regardless of the unit they are stored in;
the result of an addition keeps the unit of the left operand.  A few products
and quotients between dimensions are known (``Meter / Second`` gives
:class:`MeterPerSecond`, ``Volt * Amp`` gives :class:`Watt`, ...).
"""

from __future__ import annotations

import math
from typing import Callable, ClassVar, Union

Number = Union[int, float]


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Unit:
    """A numeric value in a specific unit of a dimension."""

    __slots__ = ("value",)
    __hash__ = None  # type: ignore[assignment]

    dimension: ClassVar[str] = ""
    # Values in this unit are (base value) * _mul / _div.
    _mul: ClassVar[float] = 1.0
    _div: ClassVar[float] = 1.0

    def __init__(self, value: Union[Number, "Unit"] = 0.0) -> None:
        if isinstance(value, Unit):
            self.value = value._value_as(type(self))
        elif _is_number(value):
            self.value = self._coerce(value)
        else:
            raise TypeError(f"cannot build {type(self).__name__} from {value!r}")

    # --- conversion machinery -------------------------------------------

    @classmethod
    def _coerce(cls, value: Number) -> Number:
        return float(value)

    @classmethod
    def _to_base(cls, value: Number) -> float:
        return value * cls._div / cls._mul

    @classmethod
    def _from_base(cls, value: float) -> float:
        return value * cls._mul / cls._div

    def _value_as(self, target: type[Unit]) -> Number:
        source = type(self)
        if source is target:
            return self.value
        if source.dimension != target.dimension or not source.dimension:
            raise TypeError(f"cannot convert {source.__name__} to {target.__name__}")
        direct = _DIRECT.get((source, target))
        if direct is not None:
            return target._coerce(direct(self.value))
        return target._coerce(target._from_base(source._to_base(self.value)))

    def to(self, unit: type[Unit]) -> Unit:
        """Return this quantity expressed in ``unit``."""
        return unit(self._value_as(unit))

    def _operand(self, other: object) -> Number | None:
        if isinstance(other, Unit):
            return other._value_as(type(self))
        if _is_number(other):
            return other  # type: ignore[return-value]
        return None

    # --- arithmetic -----------------------------------------------------

    def __add__(self, other: object) -> Unit:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return type(self)(self.value + value)

    def __radd__(self, other: object) -> Unit:
        if not _is_number(other):
            return NotImplemented
        return type(self)(other + self.value)  # type: ignore[operator]

    def __sub__(self, other: object) -> Unit:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return type(self)(self.value - value)

    def __rsub__(self, other: object) -> Unit:
        if not _is_number(other):
            return NotImplemented
        return type(self)(other - self.value)  # type: ignore[operator]

    def __neg__(self) -> Unit:
        return type(self)(-self.value)

    def __pos__(self) -> Unit:
        return type(self)(self.value)

    def __abs__(self) -> Unit:
        return type(self)(abs(self.value))

    def __mul__(self, other: object) -> Unit:
        if _is_number(other):
            return type(self)(self.value * other)  # type: ignore[operator]
        if isinstance(other, Unit):
            return _multiply(self, other)
        return NotImplemented

    def __rmul__(self, other: object) -> Unit:
        if _is_number(other):
            return type(self)(other * self.value)  # type: ignore[operator]
        return NotImplemented

    def __truediv__(self, other: object) -> Union[Unit, float]:
        if _is_number(other):
            return type(self)(self.value / other)  # type: ignore[operator]
        if isinstance(other, Unit):
            return _divide(self, other)
        return NotImplemented

    # --- comparison -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        try:
            value = self._operand(other)
        except TypeError:
            return False
        if value is None:
            return NotImplemented
        return self.value == value

    def _compare_value(self, other: object) -> Number:
        value = self._operand(other)
        if value is None:
            raise TypeError(f"cannot compare {type(self).__name__} with {other!r}")
        return value

    def __lt__(self, other: object) -> bool:
        return self.value < self._compare_value(other)

    def __le__(self, other: object) -> bool:
        return self.value <= self._compare_value(other)

    def __gt__(self, other: object) -> bool:
        return self.value > self._compare_value(other)

    def __ge__(self, other: object) -> bool:
        return self.value >= self._compare_value(other)

    # --- representation -------------------------------------------------

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


def value_in(quantity: Union[Number, Unit], unit: type[Unit]) -> Number:
    """Return the number that ``quantity`` amounts to in ``unit``.

    Plain numbers are taken to be in ``unit`` already.
    """
    if isinstance(quantity, Unit):
        return quantity._value_as(unit)
    if _is_number(quantity):
        return unit._coerce(quantity)
    raise TypeError(f"expected a number or a unit, got {quantity!r}")


# --- angle ------------------------------------------------------------------


class Radian(Unit):
    __slots__ = ()
    dimension = "angle"

    def per_second(self, seconds: Union[Second, Number]) -> RadianPerSecond:
        return RadianPerSecond(self.value * value_in(seconds, Second))


class Degree(Unit):
    __slots__ = ()
    dimension = "angle"

    @classmethod
    def _to_base(cls, value: Number) -> float:
        return math.radians(value)

    @classmethod
    def _from_base(cls, value: float) -> float:
        return math.degrees(value)

    def per_second(self, seconds: Union[Second, Number]) -> DegreePerSecond:
        return DegreePerSecond(self.value * value_in(seconds, Second))


class Rotation(Unit):
    __slots__ = ()
    dimension = "angle"

    @classmethod
    def _to_base(cls, value: Number) -> float:
        return math.radians(value * 360.0)

    @classmethod
    def _from_base(cls, value: float) -> float:
        return math.degrees(value) / 360.0

    def per_minute(self, minutes: Union[Second, Number]) -> RotationPerMinute:
        return RotationPerMinute(self.value * value_in(minutes, Second))

    def per_second(self, seconds: Union[Second, Number]) -> RotationPerSecond:
        return RotationPerSecond(self.value * value_in(seconds, Second))


def degree_to_radian(degree: float) -> float:
    return math.radians(degree)


def degree_to_rotation(degree: float) -> float:
    return degree / 360.0


def radian_to_rotation(radian: float) -> float:
    return degree_to_rotation(math.degrees(radian))


# --- angular acceleration ---------------------------------------------------


class _RadianBased(Unit):
    """Angular units stored as a degree-based multiple of the radian base."""

    __slots__ = ()
    _deg_mul: ClassVar[float] = 1.0
    _deg_div: ClassVar[float] = 1.0

    @classmethod
    def _to_base(cls, value: Number) -> float:
        return math.radians(value * cls._deg_div / cls._deg_mul)

    @classmethod
    def _from_base(cls, value: float) -> float:
        return math.degrees(value) / cls._deg_div * cls._deg_mul


class RadianPerSecondSquared(Unit):
    __slots__ = ()
    dimension = "angular_acceleration"


class DegreePerSecondSquared(Unit):
    __slots__ = ()
    dimension = "angular_acceleration"

    @classmethod
    def _to_base(cls, value: Number) -> float:
        return math.radians(value)

    @classmethod
    def _from_base(cls, value: float) -> float:
        return math.degrees(value)


class RotationPerSecondSquared(_RadianBased):
    __slots__ = ()
    dimension = "angular_acceleration"
    _deg_div = 360.0


class RotationPerMinuteSquared(_RadianBased):
    __slots__ = ()
    dimension = "angular_acceleration"
    _deg_div = 360.0
    _deg_mul = 60.0


def degree_per_second_squared_to_radian_per_second_squared(value: float) -> float:
    return math.radians(value)


def degree_per_second_squared_to_rotation_per_second_squared(value: float) -> float:
    return value / 360.0


def degree_per_second_squared_to_rotation_per_minute_squared(value: float) -> float:
    return value / 360.0 * 60.0


def radian_per_second_squared_to_rotation_per_second_squared(value: float) -> float:
    return degree_per_second_squared_to_rotation_per_second_squared(math.degrees(value))


def radian_per_second_squared_to_rotation_per_minute_squared(value: float) -> float:
    return degree_per_second_squared_to_rotation_per_minute_squared(math.degrees(value))


def rotation_per_second_squared_to_rotation_per_minute_squared(value: float) -> float:
    return value * 60.0


# --- angular velocity -------------------------------------------------------


class RadianPerSecond(Unit):
    __slots__ = ()
    dimension = "angular_velocity"


class DegreePerSecond(Unit):
    __slots__ = ()
    dimension = "angular_velocity"

    @classmethod
    def _to_base(cls, value: Number) -> float:
        return math.radians(value)

    @classmethod
    def _from_base(cls, value: float) -> float:
        return math.degrees(value)


class RotationPerSecond(_RadianBased):
    __slots__ = ()
    dimension = "angular_velocity"
    _deg_div = 360.0


class RotationPerMinute(_RadianBased):
    __slots__ = ()
    dimension = "angular_velocity"
    _deg_div = 360.0
    _deg_mul = 60.0


def degree_per_second_to_radian_per_second(value: float) -> float:
    return math.radians(value)


def degree_per_second_to_rotation_per_second(value: float) -> float:
    return value / 360.0


def degree_per_second_to_rotation_per_minute(value: float) -> float:
    return value / 360.0 * 60.0


def radian_per_second_to_rotation_per_second(value: float) -> float:
    return degree_per_second_to_rotation_per_second(math.degrees(value))


def radian_per_second_to_rotation_per_minute(value: float) -> float:
    return degree_per_second_to_rotation_per_minute(math.degrees(value))


def rotation_per_second_to_rotation_per_minute(value: float) -> float:
    return value * 60.0


# --- data -------------------------------------------------------------------


class Byte(Unit):
    __slots__ = ()
    dimension = "data"

    def per_second(self, seconds: Union[Second, Number]) -> BytesPerSecond:
        return BytesPerSecond(self.value * value_in(seconds, Second))


class Kilobyte(Unit):
    __slots__ = ()
    dimension = "data"
    _div = 1000.0

    def per_second(self, seconds: Union[Second, Number]) -> KilobytesPerSecond:
        return KilobytesPerSecond(self.value * value_in(seconds, Second))


class Megabyte(Unit):
    __slots__ = ()
    dimension = "data"
    _div = 1_000_000.0

    def per_second(self, seconds: Union[Second, Number]) -> MegabytesPerSecond:
        return MegabytesPerSecond(self.value * value_in(seconds, Second))


class Gigabyte(Unit):
    __slots__ = ()
    dimension = "data"
    _div = 1_000_000_000.0

    def per_hour(self, seconds: Union[Second, Number]) -> GigabytesPerHour:
        return GigabytesPerHour(self.value * value_in(seconds, Second) * 3600.0)


def byte_to_kilobyte(byte: float) -> float:
    return byte / 1000.0


def byte_to_megabyte(byte: float) -> float:
    return byte / 1_000_000.0


def byte_to_gigabyte(byte: float) -> float:
    return byte / 1_000_000_000.0


def kilobyte_to_megabyte(kilobyte: float) -> float:
    return kilobyte / 1000.0


def kilobyte_to_gigabyte(kilobyte: float) -> float:
    return kilobyte / 1_000_000.0


def megabyte_to_gigabyte(megabyte: float) -> float:
    return megabyte / 1000.0


# --- data rate --------------------------------------------------------------


class BytesPerSecond(Unit):
    __slots__ = ()
    dimension = "data_rate"

    def to_byte(self, seconds: Union[Second, Number]) -> Byte:
        return Byte(self.value * value_in(seconds, Second))


class KilobytesPerSecond(Unit):
    __slots__ = ()
    dimension = "data_rate"
    _div = 1000.0

    def to_kilobyte(self, seconds: Union[Second, Number]) -> Kilobyte:
        return Kilobyte(self.value * value_in(seconds, Second))


class MegabytesPerSecond(Unit):
    __slots__ = ()
    dimension = "data_rate"
    _div = 1_000_000.0

    def to_megabyte(self, seconds: Union[Second, Number]) -> Megabyte:
        return Megabyte(self.value * value_in(seconds, Second))


class GigabytesPerHour(Unit):
    __slots__ = ()
    dimension = "data_rate"
    _mul = 0.000_036

    def to_gigabyte(self, seconds: Union[Second, Number]) -> Gigabyte:
        return Gigabyte(self.value / (3600.0 / value_in(seconds, Second)))


def byte_per_second_to_kilobyte_per_second(value: float) -> float:
    return value / 1000.0


def byte_per_second_to_megabyte_per_second(value: float) -> float:
    return value / 1_000_000.0


def byte_per_second_to_gigabyte_per_hour(value: float) -> float:
    return value * 0.000_036


def kilobyte_per_second_to_megabyte_per_second(value: float) -> float:
    return value / 1000.0


def kilobyte_per_second_to_gigabyte_per_hour(value: float) -> float:
    return value * 3600.0 / 1_000_000.0


def megabyte_per_second_to_gigabyte_per_hour(value: float) -> float:
    return value * 3600.0 / 1000.0


# --- distance ---------------------------------------------------------------


class Meter(Unit):
    __slots__ = ()
    dimension = "distance"

    def per_second(self, seconds: Union[Second, Number]) -> MeterPerSecond:
        return MeterPerSecond(self.value * value_in(seconds, Second))


class Feet(Unit):
    __slots__ = ()
    dimension = "distance"
    _mul = 3.28084

    def per_second(self, seconds: Union[Second, Number]) -> FeetPerSecond:
        return FeetPerSecond(self.value * value_in(seconds, Second))


class Inch(Unit):
    __slots__ = ()
    dimension = "distance"
    _mul = 3.28084 * 12.0

    def to_feet_per_second(self, seconds: Union[Second, Number]) -> FeetPerSecond:
        return FeetPerSecond(self.value * value_in(seconds, Second) / 12.0)


class Centimeter(Unit):
    __slots__ = ()
    dimension = "distance"
    _mul = 100.0

    def to_meter_per_second(self, seconds: Union[Second, Number]) -> MeterPerSecond:
        return MeterPerSecond(self.value * value_in(seconds, Second) / 100.0)


def meter_to_feet(meter: float) -> float:
    return meter * 3.28084


def meter_to_inch(meter: float) -> float:
    return meter * 3.28084 * 12.0


def foot_to_inch(foot: float) -> float:
    return foot * 12.0


def meter_to_centimeter(meter: float) -> float:
    return meter * 100.0


def centimeter_to_foot(centimeter: float) -> float:
    return meter_to_feet(centimeter / 100.0)


def centimeter_to_inch(centimeter: float) -> float:
    return meter_to_inch(centimeter / 100.0)


# --- energy and electricity -------------------------------------------------


class Joule(Unit):
    __slots__ = ()
    dimension = "energy"


class WattHour(Unit):
    __slots__ = ()
    dimension = "energy"
    _div = 3600.0

    def to_watt(self, seconds: Union[Second, Number]) -> Watt:
        return Watt(self.value * (3600.0 / value_in(seconds, Second)))


class Volt(Unit):
    __slots__ = ()
    dimension = "voltage"


class Amp(Unit):
    __slots__ = ()
    dimension = "current"


class Watt(Unit):
    __slots__ = ()
    dimension = "power"

    def to_watt_hour(self, seconds: Union[Second, Number]) -> WattHour:
        return WattHour(self.value / (3600.0 / value_in(seconds, Second)))


class Ohm(Unit):
    __slots__ = ()
    dimension = "resistance"


def joule_to_watt_hour(joule: float) -> float:
    return joule / 3600.0


# --- linear velocity --------------------------------------------------------


class MeterPerSecond(Unit):
    __slots__ = ()
    dimension = "linear_velocity"


class KilometerPerHour(Unit):
    __slots__ = ()
    dimension = "linear_velocity"
    _mul = 3.6

    def to_meters(self, seconds: Union[Second, Number]) -> Meter:
        return Meter(MeterPerSecond(self).value * value_in(seconds, Second))


class MilePerHour(Unit):
    __slots__ = ()
    dimension = "linear_velocity"
    _mul = 2.23694

    def to_feet(self, seconds: Union[Second, Number]) -> Feet:
        return Feet(FeetPerSecond(self).value * value_in(seconds, Second))


class FeetPerSecond(Unit):
    __slots__ = ()
    dimension = "linear_velocity"
    _mul = 3.28084


def meter_per_second_to_kilometer_per_hour(value: float) -> float:
    return value * 3.6


def meter_per_second_to_mile_per_hour(value: float) -> float:
    return value * 2.23694


def meter_per_second_to_feet_per_second(value: float) -> float:
    return value * 3.28084


def feet_per_second_to_mile_per_hour(value: float) -> float:
    return meter_per_second_to_mile_per_hour(value / 3.28084)


def feet_per_second_to_kilometer_per_hour(value: float) -> float:
    return meter_per_second_to_kilometer_per_hour(value / 3.28084)


def mile_per_hour_to_kilometer_per_hour(value: float) -> float:
    return meter_per_second_to_kilometer_per_hour(value / 2.23694)


# --- mass -------------------------------------------------------------------


class Kilogram(Unit):
    __slots__ = ()
    dimension = "mass"


class Gram(Unit):
    __slots__ = ()
    dimension = "mass"
    _mul = 1000.0


class Pound(Unit):
    __slots__ = ()
    dimension = "mass"
    _mul = 2.20462


class Ounce(Unit):
    __slots__ = ()
    dimension = "mass"
    _mul = 35.274


def kilogram_to_gram(kilogram: float) -> float:
    return kilogram * 1000.0


def kilogram_to_pound(kilogram: float) -> float:
    return kilogram * 2.20462


def kilogram_to_ounce(kilogram: float) -> float:
    return kilogram * 35.274


def gram_to_pound(gram: float) -> float:
    return kilogram_to_pound(gram / 1000.0)


def gram_to_ounce(gram: float) -> float:
    return kilogram_to_ounce(gram / 1000.0)


def pound_to_ounce(pound: float) -> float:
    return kilogram_to_ounce(pound / 2.20462)


# --- moment of inertia ------------------------------------------------------


class KilogramSquareMeter(Unit):
    __slots__ = ()
    dimension = "moment_of_inertia"


class PoundSquareFoot(Unit):
    __slots__ = ()
    dimension = "moment_of_inertia"
    _mul = 0.2048161436225


def kilogram_square_meter_to_pound_square_foot(value: float) -> float:
    return value * 0.2048161436225


# --- temperature ------------------------------------------------------------


class Kelvin(Unit):
    __slots__ = ()
    dimension = "temperature"


class Celsius(Unit):
    __slots__ = ()
    dimension = "temperature"

    @classmethod
    def _to_base(cls, value: Number) -> float:
        return value + 273.15

    @classmethod
    def _from_base(cls, value: float) -> float:
        return value - 273.15


class Fahrenheit(Unit):
    __slots__ = ()
    dimension = "temperature"

    @classmethod
    def _to_base(cls, value: Number) -> float:
        return (value + 459.67) * 5.0 / 9.0

    @classmethod
    def _from_base(cls, value: float) -> float:
        return value * 9.0 / 5.0 - 459.67


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32.0


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + 273.15


def fahrenheit_to_kelvin(fahrenheit: float) -> float:
    return (fahrenheit + 459.67) * 5.0 / 9.0


# --- time -------------------------------------------------------------------


class Second(Unit):
    __slots__ = ()
    dimension = "time"


class Hour(Unit):
    __slots__ = ()
    dimension = "time"
    _div = 3600.0


class Minute(Unit):
    __slots__ = ()
    dimension = "time"
    _div = 60.0


class Millisecond(Unit):
    __slots__ = ()
    dimension = "time"
    _mul = 1000.0


class Microsecond(Unit):
    """Whole microseconds; conversions into this unit truncate toward zero."""

    __slots__ = ()
    dimension = "time"
    _mul = 1_000_000.0

    @classmethod
    def _coerce(cls, value: Number) -> int:
        return int(value)


def second_to_millisecond(second: float) -> float:
    return second * 1000.0


def second_to_microsecond(second: float) -> int:
    return int(second * 1_000_000.0)


def millisecond_to_microsecond(millisecond: float) -> int:
    return int(millisecond * 1000.0)


def hour_to_second(hour: float) -> float:
    return hour * 3600.0


def minute_to_second(minute: float) -> float:
    return minute * 60.0


def hour_to_minute(hour: float) -> float:
    return hour * 60.0


def minute_to_millisecond(minute: float) -> float:
    return minute * 60000.0


def minute_to_microsecond(minute: float) -> int:
    return int(minute * 60_000_000.0)


# --- torque -----------------------------------------------------------------


class NewtonMeter(Unit):
    __slots__ = ()
    dimension = "torque"


class NewtonCentimeter(Unit):
    __slots__ = ()
    dimension = "torque"
    _mul = 100.0


class KilogramMeter(Unit):
    __slots__ = ()
    dimension = "torque"
    _mul = 0.101_972


class FootPound(Unit):
    __slots__ = ()
    dimension = "torque"
    _mul = 0.737_562


class InchPound(Unit):
    __slots__ = ()
    dimension = "torque"
    _mul = 8.85075


def newton_meter_to_newton_centimeter(value: float) -> float:
    return value * 100.0


def newton_meter_to_kilogram_meter(value: float) -> float:
    return value * 0.101_972


def newton_meter_to_foot_pound(value: float) -> float:
    return value * 0.737_562


def newton_meter_to_inch_pound(value: float) -> float:
    return value * 8.85075


def newton_centimeter_to_kilogram_meter(value: float) -> float:
    return newton_meter_to_kilogram_meter(value / 100.0)


def newton_centimeter_to_foot_pound(value: float) -> float:
    return newton_meter_to_foot_pound(value / 100.0)


def newton_centimeter_to_inch_pound(value: float) -> float:
    return newton_meter_to_inch_pound(value / 100.0)


def kilogram_meter_to_foot_pound(value: float) -> float:
    return value * 7.23301


# --- conversion and dimension tables ----------------------------------------

_DIRECT: dict[tuple[type[Unit], type[Unit]], Callable[[float], Number]] = {
    (Degree, Radian): degree_to_radian,
    (Degree, Rotation): degree_to_rotation,
    (Radian, Rotation): radian_to_rotation,
    (DegreePerSecondSquared, RadianPerSecondSquared):
        degree_per_second_squared_to_radian_per_second_squared,
    (DegreePerSecondSquared, RotationPerSecondSquared):
        degree_per_second_squared_to_rotation_per_second_squared,
    (DegreePerSecondSquared, RotationPerMinuteSquared):
        degree_per_second_squared_to_rotation_per_minute_squared,
    (RadianPerSecondSquared, RotationPerSecondSquared):
        radian_per_second_squared_to_rotation_per_second_squared,
    (RadianPerSecondSquared, RotationPerMinuteSquared):
        radian_per_second_squared_to_rotation_per_minute_squared,
    (RotationPerSecondSquared, RotationPerMinuteSquared):
        rotation_per_second_squared_to_rotation_per_minute_squared,
    (DegreePerSecond, RadianPerSecond): degree_per_second_to_radian_per_second,
    (DegreePerSecond, RotationPerSecond): degree_per_second_to_rotation_per_second,
    (DegreePerSecond, RotationPerMinute): degree_per_second_to_rotation_per_minute,
    (RadianPerSecond, RotationPerSecond): radian_per_second_to_rotation_per_second,
    (RadianPerSecond, RotationPerMinute): radian_per_second_to_rotation_per_minute,
    (RotationPerSecond, RotationPerMinute): rotation_per_second_to_rotation_per_minute,
    (Byte, Kilobyte): byte_to_kilobyte,
    (Byte, Megabyte): byte_to_megabyte,
    (Byte, Gigabyte): byte_to_gigabyte,
    (Kilobyte, Megabyte): kilobyte_to_megabyte,
    (Kilobyte, Gigabyte): kilobyte_to_gigabyte,
    (Megabyte, Gigabyte): megabyte_to_gigabyte,
    (BytesPerSecond, KilobytesPerSecond): byte_per_second_to_kilobyte_per_second,
    (BytesPerSecond, MegabytesPerSecond): byte_per_second_to_megabyte_per_second,
    (BytesPerSecond, GigabytesPerHour): byte_per_second_to_gigabyte_per_hour,
    (KilobytesPerSecond, MegabytesPerSecond): kilobyte_per_second_to_megabyte_per_second,
    (KilobytesPerSecond, GigabytesPerHour): kilobyte_per_second_to_gigabyte_per_hour,
    (Meter, Feet): meter_to_feet,
    (Meter, Inch): meter_to_inch,
    (Feet, Inch): foot_to_inch,
    (Meter, Centimeter): meter_to_centimeter,
    (Centimeter, Feet): centimeter_to_foot,
    (Centimeter, Inch): centimeter_to_inch,
    (Joule, WattHour): joule_to_watt_hour,
    (MeterPerSecond, KilometerPerHour): meter_per_second_to_kilometer_per_hour,
    (MeterPerSecond, MilePerHour): meter_per_second_to_mile_per_hour,
    (MeterPerSecond, FeetPerSecond): meter_per_second_to_feet_per_second,
    (FeetPerSecond, MilePerHour): feet_per_second_to_mile_per_hour,
    (FeetPerSecond, KilometerPerHour): feet_per_second_to_kilometer_per_hour,
    (MilePerHour, KilometerPerHour): mile_per_hour_to_kilometer_per_hour,
    (Kilogram, Gram): kilogram_to_gram,
    (Kilogram, Pound): kilogram_to_pound,
    (Kilogram, Ounce): kilogram_to_ounce,
    (Gram, Pound): gram_to_pound,
    (Gram, Ounce): gram_to_ounce,
    (Pound, Ounce): pound_to_ounce,
    (KilogramSquareMeter, PoundSquareFoot): kilogram_square_meter_to_pound_square_foot,
    (Celsius, Fahrenheit): celsius_to_fahrenheit,
    (Celsius, Kelvin): celsius_to_kelvin,
    (Fahrenheit, Kelvin): fahrenheit_to_kelvin,
    (Second, Millisecond): second_to_millisecond,
    (Second, Microsecond): second_to_microsecond,
    (Millisecond, Microsecond): millisecond_to_microsecond,
    (Hour, Second): hour_to_second,
    (Minute, Second): minute_to_second,
    (Hour, Minute): hour_to_minute,
    (Minute, Millisecond): minute_to_millisecond,
    (Minute, Microsecond): minute_to_microsecond,
    (NewtonMeter, NewtonCentimeter): newton_meter_to_newton_centimeter,
    (NewtonMeter, KilogramMeter): newton_meter_to_kilogram_meter,
    (NewtonMeter, FootPound): newton_meter_to_foot_pound,
    (NewtonMeter, InchPound): newton_meter_to_inch_pound,
    (NewtonCentimeter, KilogramMeter): newton_centimeter_to_kilogram_meter,
    (NewtonCentimeter, FootPound): newton_centimeter_to_foot_pound,
    (NewtonCentimeter, InchPound): newton_centimeter_to_inch_pound,
    (KilogramMeter, FootPound): kilogram_meter_to_foot_pound,
}

# Each entry (a, b, c) means a * b = c, and hence c / a = b and c / b = a.
_PRODUCTS: tuple[tuple[type[Unit], type[Unit], type[Unit]], ...] = (
    (DegreePerSecond, Second, Degree),
    (RadianPerSecond, Second, Radian),
    (RotationPerSecond, Second, Rotation),
    (RotationPerMinute, Minute, Rotation),
    (Volt, Amp, Watt),
    (Watt, Second, Joule),
    (MeterPerSecond, Second, Meter),
    (FeetPerSecond, Second, Feet),
)


def _fits(quantity: Unit, unit: type[Unit], exact: bool) -> bool:
    if exact:
        return type(quantity) is unit
    return quantity.dimension == unit.dimension


def _multiply(left: Unit, right: Unit) -> Unit:
    for exact in (True, False):
        for a, b, c in _PRODUCTS:
            if _fits(left, a, exact) and _fits(right, b, exact):
                return c(left._value_as(a) * right._value_as(b))
            if _fits(left, b, exact) and _fits(right, a, exact):
                return c(left._value_as(b) * right._value_as(a))
    raise TypeError(
        f"cannot multiply {type(left).__name__} by {type(right).__name__}"
    )


def _divide(left: Unit, right: Unit) -> Union[Unit, float]:
    for exact in (True, False):
        for a, b, c in _PRODUCTS:
            if _fits(left, c, exact) and _fits(right, a, exact):
                return b(left._value_as(c) / right._value_as(a))
            if _fits(left, c, exact) and _fits(right, b, exact):
                return a(left._value_as(c) / right._value_as(b))
    if left.dimension == right.dimension and left.dimension:
        return left.value / right._value_as(type(left))
    raise TypeError(f"cannot divide {type(left).__name__} by {type(right).__name__}")