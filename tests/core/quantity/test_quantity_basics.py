from decimal import Decimal
import math

import pytest

from quantikit.core.errors import InvalidUnitError, NonFiniteValueError
from quantikit.core.kind import UnitSystem
from quantikit.core.quantity import IQuantity, Quantity
from quantikit.kinds import (
    Acceleration,
    AccelerationUnit,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    Temperature,
    TemperatureUnit,
)
from quantikit.kinds.length import LENGTH_INFO


# -------------------------------
# Construction
# -------------------------------

def test_value_and_unit_are_kept():
    q = Length(1.5, LengthUnit.FOOT)
    assert q.value == 1.5
    assert q.unit is LengthUnit.FOOT


def test_int_is_stored_as_float():
    q = Mass(2, MassUnit.KILOGRAM)
    assert isinstance(q.value, float)
    assert q.value == 2.0


def test_decimal_is_kept():
    q = Length(Decimal("0.1"), LengthUnit.METER)
    assert isinstance(q.value, Decimal)
    assert q.value == Decimal("0.1")


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, Decimal("NaN"), Decimal("Infinity")])
def test_non_finite_values_rejected(bad):
    with pytest.raises(NonFiniteValueError):
        Length(bad, LengthUnit.METER)


@pytest.mark.parametrize("bad", ["1.0", None, True])
def test_non_numbers_rejected(bad):
    with pytest.raises(TypeError):
        Length(bad, LengthUnit.METER)


def test_unit_from_another_kind_rejected():
    with pytest.raises(InvalidUnitError):
        Length(1.0, MassUnit.GRAM)


def test_quantities_are_immutable():
    q = Length(1.0, LengthUnit.METER)
    with pytest.raises(AttributeError):
        q.value = 2.0  # type: ignore[misc]


# -------------------------------
# Kind metadata
# -------------------------------

def test_quantity_info_and_zero():
    q = Length(3.0, LengthUnit.MILE)
    assert q.quantity_info is LENGTH_INFO
    assert Length.zero() is LENGTH_INFO.zero
    assert Length.zero().value == 0.0
    assert Length.base_unit() is LengthUnit.METER


def test_untyped_quantity_resolves_kind_through_default_registry(patched_default):
    q = Quantity(1.0, LengthUnit.KILOMETER)
    assert q.quantity_info.name == "Length"
    assert q.as_unit(LengthUnit.METER) == 1000.0


def test_satisfies_iquantity_protocol():
    q = Temperature(20.0, TemperatureUnit.DEGREE_CELSIUS)
    assert isinstance(q, IQuantity)


# -------------------------------
# Conversion
# -------------------------------

def test_as_unit_linear(patched_default):
    assert Length(1.0, LengthUnit.KILOMETER).as_unit(LengthUnit.METER) == 1000.0
    assert Length(1.0, LengthUnit.FOOT).as_unit(LengthUnit.INCH) == pytest.approx(12.0, rel=1e-12)


def test_as_unit_with_explicit_converter(reg):
    q = Mass(1.0, MassUnit.POUND)
    assert q.as_unit(MassUnit.KILOGRAM, reg.converter) == pytest.approx(0.45359237, rel=1e-15)


def test_to_unit_returns_same_kind(patched_default):
    q = Length(1.0, LengthUnit.MILE).to_unit(LengthUnit.KILOMETER)
    assert isinstance(q, Length)
    assert q.unit is LengthUnit.KILOMETER
    assert q.value == pytest.approx(1.609344, rel=1e-12)


def test_to_unit_same_unit_returns_self():
    q = Length(1.0, LengthUnit.MILE)
    assert q.to_unit(LengthUnit.MILE) is q


def test_as_base(patched_default):
    assert Temperature(0.0, TemperatureUnit.DEGREE_CELSIUS).as_base() == pytest.approx(273.15)


def test_as_unit_system_picks_si_unit(patched_default):
    q = Acceleration(1.0, AccelerationUnit.FOOT_PER_SECOND_SQUARED)
    assert q.as_unit_system(UnitSystem.SI) == pytest.approx(0.3048, rel=1e-12)


def test_repr():
    assert repr(Length(1.5, LengthUnit.METER)) == "Length(1.5, LengthUnit.METER)"
