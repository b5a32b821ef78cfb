from __future__ import annotations

from enum import Enum

from quantikit.core.dimensions import LENGTH
from quantikit.core.kind import BaseUnits
from quantikit.core.quantity import Quantity
from quantikit.kinds._builder import UnitSpec, define_kind


class LengthUnit(Enum):
    METER = "Meter"
    CENTIMETER = "Centimeter"
    MILLIMETER = "Millimeter"
    MICROMETER = "Micrometer"
    KILOMETER = "Kilometer"
    INCH = "Inch"
    FOOT = "Foot"
    YARD = "Yard"
    MILE = "Mile"
    MIL = "Mil"
    NAUTICAL_MILE = "NauticalMile"


class Length(Quantity[LengthUnit]):
    __slots__ = ()
    unit_type = LengthUnit


_U = LengthUnit

LENGTH_INFO = define_kind(
    "Length",
    Length,
    _U.METER,
    LENGTH,
    [
        UnitSpec(_U.METER,         "Meters",        "1",        ("m",),              BaseUnits(length="METER")),
        UnitSpec(_U.CENTIMETER,    "Centimeters",   "0.01",     ("cm",),             BaseUnits(length="CENTIMETER")),
        UnitSpec(_U.MILLIMETER,    "Millimeters",   "0.001",    ("mm",),             BaseUnits(length="MILLIMETER")),
        UnitSpec(_U.MICROMETER,    "Micrometers",   "1e-6",     ("µm",),             BaseUnits(length="MICROMETER")),
        UnitSpec(_U.KILOMETER,     "Kilometers",    "1000",     ("km",),             BaseUnits(length="KILOMETER")),
        UnitSpec(_U.INCH,          "Inches",        "0.0254",   ("in", "\"", "″"),   BaseUnits(length="INCH")),
        UnitSpec(_U.FOOT,          "Feet",          "0.3048",   ("ft", "'", "′"),    BaseUnits(length="FOOT")),
        UnitSpec(_U.YARD,          "Yards",         "0.9144",   ("yd",),             BaseUnits(length="YARD")),
        UnitSpec(_U.MILE,          "Miles",         "1609.344", ("mi",),             BaseUnits(length="MILE")),
        # thousandth of an inch; "mil" is also the NATO angular mil
        UnitSpec(_U.MIL,           "Mils",          "2.54e-5",  ("mil",),            BaseUnits(length="MIL")),
        UnitSpec(_U.NAUTICAL_MILE, "NauticalMiles", "1852",     ("NM", "nmi"),       BaseUnits(length="NAUTICAL_MILE")),
    ],
    localized={
        "ru-RU": {
            _U.METER: ("м",),
            _U.CENTIMETER: ("см",),
            _U.MILLIMETER: ("мм",),
            _U.MICROMETER: ("мкм",),
            _U.KILOMETER: ("км",),
            _U.INCH: ("дюйм",),
            _U.FOOT: ("фут",),
            _U.MILE: ("миля",),
        },
    },
)
