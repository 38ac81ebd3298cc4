import math

import pytest

from robomath.units import (
    Amp,
    Byte,
    BytesPerSecond,
    Celsius,
    Centimeter,
    Degree,
    DegreePerSecond,
    Fahrenheit,
    Feet,
    FeetPerSecond,
    Gigabyte,
    GigabytesPerHour,
    Hour,
    Inch,
    Joule,
    Kelvin,
    Kilogram,
    Meter,
    MeterPerSecond,
    Microsecond,
    Millisecond,
    Minute,
    Radian,
    Rotation,
    RotationPerMinute,
    Second,
    Volt,
    Watt,
    WattHour,
    byte_per_second_to_gigabyte_per_hour,
    byte_to_kilobyte,
    celsius_to_kelvin,
    degree_to_rotation,
    hour_to_minute,
    joule_to_watt_hour,
    kilogram_meter_to_foot_pound,
    kilogram_to_gram,
    meter_to_feet,
    minute_to_microsecond,
    newton_meter_to_newton_centimeter,
    rotation_per_second_to_rotation_per_minute,
    second_to_microsecond,
    value_in,
)


def test_conversion():
    meter = Meter(1.0)
    feet = Feet(3.28084)
    assert feet == meter
    assert meter == feet
    combined = feet + meter
    assert isinstance(combined, Feet)
    assert combined == Feet(6.56168)
    assert combined == Meter(2.0)
    assert combined > feet


def test_dim_analysis():
    meter_per_second = Meter(1.0) / Second(1.0)
    assert isinstance(meter_per_second, MeterPerSecond)
    assert meter_per_second == MeterPerSecond(1.0)


def test_reverse_dimensional_analysis():
    distance = MeterPerSecond(2.0) * Second(3.0)
    assert isinstance(distance, Meter)
    assert distance.value == 6.0
    duration = Meter(6.0) / MeterPerSecond(2.0)
    assert isinstance(duration, Second)
    assert duration.value == 3.0


def test_electrical_products():
    power = Volt(12.0) * Amp(2.0)
    assert isinstance(power, Watt)
    assert power.value == 24.0
    current = Watt(24.0) / Volt(12.0)
    assert isinstance(current, Amp)
    assert current.value == 2.0
    energy = Second(2.0) * Watt(5.0)
    assert isinstance(energy, Joule)
    assert energy.value == 10.0


def test_angle_times_time():
    angle = DegreePerSecond(90.0) * Second(2.0)
    assert isinstance(angle, Degree)
    assert angle.value == 180.0
    turns = RotationPerMinute(3.0) * Minute(2.0)
    assert isinstance(turns, Rotation)
    assert turns.value == 6.0


def test_incompatible_operations_raise():
    with pytest.raises(TypeError):
        Meter(1.0) + Second(1.0)
    with pytest.raises(TypeError):
        Meter(1.0) * Meter(1.0)
    with pytest.raises(TypeError):
        Meter(1.0) < Second(1.0)
    with pytest.raises(TypeError):
        Meter(Second(1.0))


def test_different_dimensions_are_not_equal():
    assert (Meter(1.0) == Second(1.0)) is False


def test_same_dimension_division_gives_ratio():
    assert Meter(2.0) / Centimeter(100.0) == 2.0


def test_scalar_arithmetic():
    assert Meter(2.0) * 3 == Meter(6.0)
    assert 3 * Meter(2.0) == Meter(6.0)
    assert Meter(3.0) / 2 == Meter(1.5)
    assert -Meter(1.0) == Meter(-1.0)
    assert sum([Meter(1.0), Meter(2.0)]) == Meter(3.0)


def test_angle_conversion():
    assert Radian(Degree(180.0)).value == pytest.approx(math.pi)
    assert Degree(90.0).to(Rotation).value == 0.25
    assert Rotation(1.0).to(Degree).value == pytest.approx(360.0)


def test_temperature_conversion():
    assert Celsius(100.0).to(Fahrenheit).value == pytest.approx(212.0)
    assert Celsius(0.0).to(Kelvin).value == pytest.approx(273.15)
    assert Fahrenheit(212.0).to(Celsius).value == pytest.approx(100.0)


def test_time_conversion():
    assert Hour(1.0).to(Second).value == 3600.0
    assert Second(2.0).to(Millisecond).value == 2000.0
    micro = Second(1.5).to(Microsecond)
    assert micro.value == 1_500_000
    assert isinstance(micro.value, int)
    assert Microsecond(2_000_000).to(Second).value == pytest.approx(2.0)


def test_round_trip_distance():
    assert Meter(Inch(Meter(1.7))).value == pytest.approx(1.7)
    assert Feet(Centimeter(30.48)).value == pytest.approx(1.0, rel=1e-5)


def test_value_in():
    assert value_in(Feet(3.28084), Meter) == 1.0
    assert value_in(20, Millisecond) == 20.0
    assert value_in(1.9, Microsecond) == 1
    with pytest.raises(TypeError):
        value_in("one", Meter)


def test_rate_helpers():
    assert Meter(2.0).per_second(Second(3.0)) == MeterPerSecond(6.0)
    assert Byte(10.0).per_second(2.0) == BytesPerSecond(20.0)
    assert BytesPerSecond(10.0).to_byte(Second(2.0)) == Byte(20.0)
    assert Gigabyte(1.0).per_hour(Second(2.0)).value == 7200.0
    assert GigabytesPerHour(7200.0).to_gigabyte(Second(1.0)) == Gigabyte(2.0)
    assert Inch(24.0).to_feet_per_second(Second(1.0)) == FeetPerSecond(2.0)
    assert Centimeter(200.0).to_meter_per_second(1.0) == MeterPerSecond(2.0)


def test_energy_helpers():
    assert Watt(3600.0).to_watt_hour(Second(1.0)) == WattHour(1.0)
    assert WattHour(1.0).to_watt(Second(1.0)) == Watt(3600.0)
    assert Joule(3600.0).to(WattHour).value == 1.0


def test_mass_conversion():
    assert Kilogram(2.0).to_value_check if False else Kilogram(2.0).to(
        Kilogram
    ).value == 2.0
    assert value_in(Kilogram(2.0), Kilogram) == 2.0


def test_conversion_functions():
    assert meter_to_feet(1.0) == 3.28084
    assert celsius_to_kelvin(0.0) == 273.15
    assert second_to_microsecond(1.5) == 1_500_000
    assert second_to_microsecond(-1.5) == -1_500_000
    assert minute_to_microsecond(1.0) == 60_000_000
    assert byte_to_kilobyte(1500.0) == 1.5
    assert joule_to_watt_hour(3600.0) == 1.0
    assert kilogram_to_gram(2.0) == 2000.0
    assert hour_to_minute(2.0) == 120.0
    assert degree_to_rotation(180.0) == 0.5
    assert rotation_per_second_to_rotation_per_minute(2.0) == 120.0
    assert newton_meter_to_newton_centimeter(3.0) == 300.0
    assert kilogram_meter_to_foot_pound(1.0) == 7.23301
    assert byte_per_second_to_gigabyte_per_hour(1.0) == 0.000_036


def test_ordering():
    assert Meter(1.0) < Feet(4.0)
    assert Meter(1.0) >= Feet(3.0)
    assert Meter(1.0) <= 1.0
    assert Meter(2.0) > 1.0