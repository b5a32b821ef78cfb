from decimal import Decimal

import pytest

from quantikit.kinds import (
    Duration,
    DurationUnit,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
)


# -------------------------------
# Same-kind addition / subtraction
# -------------------------------

def test_add_same_unit(patched_default):
    q = Length(1.0, LengthUnit.METER) + Length(2.0, LengthUnit.METER)
    assert isinstance(q, Length)
    assert q.value == 3.0 and q.unit is LengthUnit.METER


def test_add_keeps_left_unit(patched_default):
    q = Length(1.0, LengthUnit.METER) + Length(50.0, LengthUnit.CENTIMETER)
    assert q.unit is LengthUnit.METER
    assert q.value == pytest.approx(1.5)


def test_sub_across_units(patched_default):
    q = Duration(1.0, DurationUnit.HOUR) - Duration(30.0, DurationUnit.MINUTE)
    assert q.unit is DurationUnit.HOUR
    assert q.value == pytest.approx(0.5)


def test_add_different_kinds_raises(patched_default):
    with pytest.raises(TypeError):
        Length(1.0, LengthUnit.METER) + Mass(1.0, MassUnit.KILOGRAM)
    with pytest.raises(TypeError):
        Length(1.0, LengthUnit.METER) - 1.0


# -------------------------------
# Unary
# -------------------------------

def test_unary_ops():
    q = Length(-2.0, LengthUnit.FOOT)
    assert (-q).value == 2.0
    assert (+q) is q
    assert abs(q).value == 2.0
    assert abs(q).unit is LengthUnit.FOOT


# -------------------------------
# Scalars
# -------------------------------

def test_scalar_mul_and_div():
    q = Length(3.0, LengthUnit.FOOT)
    assert (q * 2).value == 6.0
    assert (2 * q).value == 6.0
    assert (q / 2).value == 1.5
    assert (q * 2).unit is LengthUnit.FOOT


def test_quantity_mul_quantity_is_unsupported():
    with pytest.raises(TypeError):
        Length(1.0, LengthUnit.METER) * Length(1.0, LengthUnit.METER)


def test_quantity_ratio_is_plain_float(patched_default):
    ratio = Length(1.0, LengthUnit.KILOMETER) / Length(500.0, LengthUnit.METER)
    assert isinstance(ratio, float)
    assert ratio == pytest.approx(2.0)


def test_ratio_across_kinds_raises(patched_default):
    with pytest.raises(TypeError):
        Length(1.0, LengthUnit.METER) / Mass(1.0, MassUnit.KILOGRAM)


def test_bool_scalar_rejected():
    with pytest.raises(TypeError):
        Length(1.0, LengthUnit.METER) * True


# -------------------------------
# Decimal values
# -------------------------------

def test_decimal_arithmetic_stays_decimal(patched_default):
    q = Length(Decimal("0.1"), LengthUnit.METER) + Length(0.2, LengthUnit.METER)
    assert isinstance(q.value, Decimal)
    assert q.value == Decimal("0.3")
    assert (q * 0.5).value == Decimal("0.15")


def test_float_left_operand_absorbs_decimal(patched_default):
    q = Length(1.0, LengthUnit.METER) + Length(Decimal("1"), LengthUnit.METER)
    assert isinstance(q.value, float)
    assert q.value == 2.0
