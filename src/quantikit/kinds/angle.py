from __future__ import annotations

import math
from enum import Enum

from quantikit.core.dimensions import DIMENSIONLESS
from quantikit.core.quantity import Quantity
from quantikit.kinds._builder import UnitSpec, define_kind


class AngleUnit(Enum):
    RADIAN = "Radian"
    MILLIRADIAN = "Milliradian"
    DEGREE = "Degree"
    ARCMINUTE = "Arcminute"
    ARCSECOND = "Arcsecond"
    GRADIAN = "Gradian"
    MIL = "Mil"
    REVOLUTION = "Revolution"


class Angle(Quantity[AngleUnit]):
    __slots__ = ()
    unit_type = AngleUnit


_U = AngleUnit

ANGLE_INFO = define_kind(
    "Angle",
    Angle,
    _U.RADIAN,
    DIMENSIONLESS,
    [
        UnitSpec(_U.RADIAN,      "Radians",      "1",                    ("rad",)),
        UnitSpec(_U.MILLIRADIAN, "Milliradians", "0.001",                ("mrad",)),
        UnitSpec(_U.DEGREE,      "Degrees",      math.pi / 180,          ("°", "deg")),
        UnitSpec(_U.ARCMINUTE,   "Arcminutes",   math.pi / (180 * 60),   ("arcmin", "amin")),
        UnitSpec(_U.ARCSECOND,   "Arcseconds",   math.pi / (180 * 3600), ("arcsec", "asec")),
        UnitSpec(_U.GRADIAN,     "Gradians",     math.pi / 200,          ("grad", "gon")),
        # NATO mil, 6400 per revolution
        UnitSpec(_U.MIL,         "Mils",         math.pi / 3200,         ("mil",)),
        UnitSpec(_U.REVOLUTION,  "Revolutions",  2 * math.pi,            ("r", "rev")),
    ],
    localized={
        "ru-RU": {
            _U.RADIAN: ("рад",),
            _U.DEGREE: ("°",),
            _U.GRADIAN: ("град",),
        },
    },
)
