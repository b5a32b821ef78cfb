from __future__ import annotations

import pytest

from quantikit.kinds import Length, LengthUnit, Mass, MassUnit


def test_quantities_are_unhashable():
    with pytest.raises(TypeError):
        hash(Length(1.0, LengthUnit.METER))
    with pytest.raises(TypeError):
        {Length(1.0, LengthUnit.METER)}


def test_as_key_basic(patched_default):
    """Keys are (kind name, value in the base unit)."""
    assert Length(100.0, LengthUnit.CENTIMETER).as_key() == ("Length", 1.0)
    assert Mass(5.5, MassUnit.GRAM).as_key() == ("Mass", 0.0055)


def test_as_key_default_precision_grouping(patched_default):
    """
    Quantities that are "fuzzy equal" at the default precision (12)
    produce the same key.
    """
    q1 = Length(1.0, LengthUnit.METER)
    q2 = Length(1.0 + 1e-13, LengthUnit.METER)
    q3 = Length(1.0 - 1e-13, LengthUnit.METER)
    assert q1.as_key() == q2.as_key() == q3.as_key()


def test_as_key_custom_precision_separation(patched_default):
    q1 = Length(1.0, LengthUnit.METER)
    q2 = Length(1.001, LengthUnit.METER)
    assert q1.as_key(precision=2) == q2.as_key(precision=2)
    assert q1.as_key(precision=6) != q2.as_key(precision=6)


def test_as_key_equal_across_units(patched_default):
    assert Length(1.0, LengthUnit.KILOMETER).as_key() == Length(1000.0, LengthUnit.METER).as_key()


def test_as_key_separates_kinds(patched_default):
    assert Length(1.0, LengthUnit.METER).as_key() != Mass(1.0, MassUnit.KILOGRAM).as_key()


@pytest.mark.regression(reason="-0.0 and 0.0 must share a key")
def test_as_key_negative_zero(patched_default):
    assert Length(-0.0, LengthUnit.METER).as_key() == Length(0.0, LengthUnit.METER).as_key()


def test_as_key_usable_in_dict(patched_default):
    seen = {Length(100.0, LengthUnit.CENTIMETER).as_key(): "one meter"}
    assert seen[Length(1.0, LengthUnit.METER).as_key()] == "one meter"
