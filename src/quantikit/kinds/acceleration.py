from __future__ import annotations

from enum import Enum

from quantikit.core.dimensions import LENGTH, TIME
from quantikit.core.kind import BaseUnits
from quantikit.core.quantity import Quantity
from quantikit.kinds._builder import UnitSpec, define_kind


class AccelerationUnit(Enum):
    METER_PER_SECOND_SQUARED = "MeterPerSecondSquared"
    CENTIMETER_PER_SECOND_SQUARED = "CentimeterPerSecondSquared"
    MILLIMETER_PER_SECOND_SQUARED = "MillimeterPerSecondSquared"
    KILOMETER_PER_SECOND_SQUARED = "KilometerPerSecondSquared"
    FOOT_PER_SECOND_SQUARED = "FootPerSecondSquared"
    INCH_PER_SECOND_SQUARED = "InchPerSecondSquared"
    KNOT_PER_SECOND = "KnotPerSecond"
    KNOT_PER_MINUTE = "KnotPerMinute"
    KNOT_PER_HOUR = "KnotPerHour"
    STANDARD_GRAVITY = "StandardGravity"
    MILLISTANDARD_GRAVITY = "MillistandardGravity"


class Acceleration(Quantity[AccelerationUnit]):
    __slots__ = ()
    unit_type = AccelerationUnit


_U = AccelerationUnit
_KNOT = 0.5144444444444

ACCELERATION_INFO = define_kind(
    "Acceleration",
    Acceleration,
    _U.METER_PER_SECOND_SQUARED,
    LENGTH / TIME ** 2,
    [
        UnitSpec(_U.METER_PER_SECOND_SQUARED,      "MetersPerSecondSquared",      "1",      ("m/s²",),  BaseUnits(length="METER", time="SECOND")),
        UnitSpec(_U.CENTIMETER_PER_SECOND_SQUARED, "CentimetersPerSecondSquared", "0.01",   ("cm/s²",), BaseUnits(length="CENTIMETER", time="SECOND")),
        UnitSpec(_U.MILLIMETER_PER_SECOND_SQUARED, "MillimetersPerSecondSquared", "0.001",  ("mm/s²",), BaseUnits(length="MILLIMETER", time="SECOND")),
        UnitSpec(_U.KILOMETER_PER_SECOND_SQUARED,  "KilometersPerSecondSquared",  "1000",   ("km/s²",), BaseUnits(length="KILOMETER", time="SECOND")),
        UnitSpec(_U.FOOT_PER_SECOND_SQUARED,       "FeetPerSecondSquared",        "0.3048", ("ft/s²",), BaseUnits(length="FOOT", time="SECOND")),
        UnitSpec(_U.INCH_PER_SECOND_SQUARED,       "InchesPerSecondSquared",      "0.0254", ("in/s²",), BaseUnits(length="INCH", time="SECOND")),
        UnitSpec(_U.KNOT_PER_SECOND,               "KnotsPerSecond",              _KNOT,        ("kn/s",)),
        UnitSpec(_U.KNOT_PER_MINUTE,               "KnotsPerMinute",              _KNOT / 60,   ("kn/min",)),
        UnitSpec(_U.KNOT_PER_HOUR,                 "KnotsPerHour",                _KNOT / 3600, ("kn/h",)),
        # "g" and "mg" are shared with the gram and the milligram
        UnitSpec(_U.STANDARD_GRAVITY,              "StandardGravity",             "9.80665",    ("g",)),
        UnitSpec(_U.MILLISTANDARD_GRAVITY,         "MillistandardGravity",        "0.00980665", ("mg",)),
    ],
    localized={
        "ru-RU": {
            _U.METER_PER_SECOND_SQUARED: ("м/с²",),
            _U.CENTIMETER_PER_SECOND_SQUARED: ("см/с²",),
            _U.MILLIMETER_PER_SECOND_SQUARED: ("мм/с²",),
            _U.KILOMETER_PER_SECOND_SQUARED: ("км/с²",),
        },
    },
)
