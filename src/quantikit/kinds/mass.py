from __future__ import annotations

from enum import Enum

from quantikit.core.dimensions import MASS
from quantikit.core.kind import BaseUnits
from quantikit.core.quantity import Quantity
from quantikit.kinds._builder import UnitSpec, define_kind


class MassUnit(Enum):
    KILOGRAM = "Kilogram"
    GRAM = "Gram"
    MILLIGRAM = "Milligram"
    MICROGRAM = "Microgram"
    TONNE = "Tonne"
    POUND = "Pound"
    OUNCE = "Ounce"
    STONE = "Stone"


class Mass(Quantity[MassUnit]):
    __slots__ = ()
    unit_type = MassUnit


_U = MassUnit

MASS_INFO = define_kind(
    "Mass",
    Mass,
    _U.KILOGRAM,
    MASS,
    [
        UnitSpec(_U.KILOGRAM,  "Kilograms",  "1",              ("kg",),               BaseUnits(mass="KILOGRAM")),
        UnitSpec(_U.GRAM,      "Grams",      "0.001",          ("g",),                BaseUnits(mass="GRAM")),
        UnitSpec(_U.MILLIGRAM, "Milligrams", "1e-6",           ("mg",),               BaseUnits(mass="MILLIGRAM")),
        UnitSpec(_U.MICROGRAM, "Micrograms", "1e-9",           ("µg",),               BaseUnits(mass="MICROGRAM")),
        UnitSpec(_U.TONNE,     "Tonnes",     "1000",           ("t",),                BaseUnits(mass="TONNE")),
        UnitSpec(_U.POUND,     "Pounds",     "0.45359237",     ("lb", "lbs", "lbm"),  BaseUnits(mass="POUND")),
        UnitSpec(_U.OUNCE,     "Ounces",     "0.028349523125", ("oz",),               BaseUnits(mass="OUNCE")),
        UnitSpec(_U.STONE,     "Stone",      "6.35029318",     ("st",),               BaseUnits(mass="STONE")),
    ],
    localized={
        "ru-RU": {
            _U.KILOGRAM: ("кг",),
            _U.GRAM: ("г",),
            _U.MILLIGRAM: ("мг",),
            _U.MICROGRAM: ("мкг",),
            _U.TONNE: ("т",),
            _U.POUND: ("фунт",),
        },
    },
)
