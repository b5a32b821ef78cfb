"""Temperature: Kelvin-based, with offset scales installed as conversion overrides."""

from __future__ import annotations

from enum import Enum

from quantikit.core.dimensions import TEMPERATURE
from quantikit.core.kind import BaseUnits
from quantikit.core.quantity import Quantity
from quantikit.kinds._builder import UnitSpec, define_kind

_CELSIUS_OFFSET = 273.15
_RANKINE_OFFSET = 459.67


class TemperatureUnit(Enum):
    KELVIN = "Kelvin"
    DEGREE_CELSIUS = "DegreeCelsius"
    DEGREE_FAHRENHEIT = "DegreeFahrenheit"
    DEGREE_RANKINE = "DegreeRankine"


class Temperature(Quantity[TemperatureUnit]):
    __slots__ = ()
    unit_type = TemperatureUnit


def celsius_to_kelvin(c: float) -> float:
    return c + _CELSIUS_OFFSET


def kelvin_to_celsius(k: float) -> float:
    return k - _CELSIUS_OFFSET


def fahrenheit_to_kelvin(f: float) -> float:
    return (f + _RANKINE_OFFSET) * 5.0 / 9.0


def kelvin_to_fahrenheit(k: float) -> float:
    return k * 9.0 / 5.0 - _RANKINE_OFFSET


_U = TemperatureUnit

TEMPERATURE_INFO = define_kind(
    "Temperature",
    Temperature,
    _U.KELVIN,
    TEMPERATURE,
    [
        UnitSpec(_U.KELVIN, "Kelvins", "1", ("K",), BaseUnits(temperature="KELVIN")),
        UnitSpec(
            _U.DEGREE_CELSIUS, "DegreesCelsius", None, ("°C",), BaseUnits(temperature="DEGREE_CELSIUS"),
            to_base=celsius_to_kelvin, from_base=kelvin_to_celsius,
        ),
        UnitSpec(
            _U.DEGREE_FAHRENHEIT, "DegreesFahrenheit", None, ("°F",), BaseUnits(temperature="DEGREE_FAHRENHEIT"),
            to_base=fahrenheit_to_kelvin, from_base=kelvin_to_fahrenheit,
        ),
        UnitSpec(_U.DEGREE_RANKINE, "DegreesRankine", 5 / 9, ("°R",), BaseUnits(temperature="DEGREE_RANKINE")),
    ],
)
