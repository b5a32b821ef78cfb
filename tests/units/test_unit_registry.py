# pytest tests for quantikit.units.registry
#
# These tests exercise lookups, catalog replacement, the lazily built indices,
# thread-safety, and the process-wide default registry. They use an isolated
# registry instance and monkeypatch the module default where needed.

from enum import Enum, IntEnum
import threading

import pytest

import quantikit.units.registry as regmod
from quantikit.core.dimensions import DIMENSIONLESS, LENGTH, MASS, TIME
from quantikit.core.errors import (
    KindNotFoundError,
    UnitNotFoundError,
    UnknownUnitError,
    UnregisteredUnitTypeError,
    UnsupportedConversionError,
)
from quantikit.core.quantity import Quantity
from quantikit.kinds import BUILTIN_KINDS, DurationUnit, LengthUnit, MassUnit
from quantikit.kinds._builder import UnitSpec, define_kind
from quantikit.kinds.length import LENGTH_INFO
from quantikit.kinds.mass import MASS_INFO
from quantikit.units.registry import Catalog, Registry


class _Foreign(Enum):
    THING = 1


# ---------------------------------------------------------------------------
# Inspection & lookups
# ---------------------------------------------------------------------------

def test_builtin_kinds_in_order(reg):
    assert reg.names == (
        "Length", "Mass", "Duration", "Temperature", "Acceleration", "Angle", "Turbidity",
    )
    assert len(reg) == 7
    assert [info.name for info in reg] == list(reg.names)
    assert reg.infos == BUILTIN_KINDS


def test_contains_and_has(reg):
    assert "Length" in reg
    assert reg.has("Mass")
    assert "length" not in reg  # names are case-sensitive
    assert not reg.has(["unhashable"])


def test_lookup_by_name(reg):
    assert reg.lookup_by_name("Length") is LENGTH_INFO
    assert reg.get("Mass") is MASS_INFO
    with pytest.raises(KindNotFoundError):
        reg.lookup_by_name("Parsec")
    with pytest.raises(KeyError):
        reg.get("Parsec")


def test_all_is_a_copy(reg):
    snapshot = reg.all()
    snapshot.clear()
    assert reg.has("Length")


def test_lookup_by_unit_type(reg):
    assert reg.lookup_by_unit_type(LengthUnit) is LENGTH_INFO
    with pytest.raises(UnregisteredUnitTypeError):
        reg.lookup_by_unit_type(_Foreign)


def test_lookup_unit(reg):
    info = reg.lookup_unit(LengthUnit, "FOOT")
    assert info.value is LengthUnit.FOOT
    assert info.plural_name == "Feet"
    with pytest.raises(UnitNotFoundError):
        reg.lookup_unit(LengthUnit, "foot")
    with pytest.raises(UnitNotFoundError):
        reg.lookup_unit(_Foreign, "THING")


def test_unit_info_lookups(reg):
    assert reg.get_unit_info(MassUnit.GRAM).plural_name == "Grams"
    assert reg.try_get_unit_info(MassUnit.GRAM).name == "GRAM"
    assert reg.try_get_unit_info(_Foreign.THING) is None
    assert reg.try_get_unit_info("GRAM") is None
    with pytest.raises(UnregisteredUnitTypeError):
        reg.get_unit_info(_Foreign.THING)


def test_kinds_with_base_dimensions(reg):
    assert [i.name for i in reg.kinds_with_base_dimensions(DIMENSIONLESS)] == ["Angle", "Turbidity"]
    assert [i.name for i in reg.kinds_with_base_dimensions(LENGTH / TIME ** 2)] == ["Acceleration"]
    assert [i.name for i in reg.kinds_with_base_dimensions((0, 1, 0, 0, 0, 0, 0))] == ["Mass"]
    assert reg.kinds_with_base_dimensions(MASS * LENGTH) == []


def test_repr(reg):
    assert repr(Registry([LENGTH_INFO])) == "Registry(kinds=['Length'])"


def test_empty_registry():
    empty = Registry()
    assert len(empty) == 0
    with pytest.raises(KindNotFoundError):
        empty.lookup_by_name("Length")
    with pytest.raises(UnknownUnitError):
        empty.parse("1 m")


# ---------------------------------------------------------------------------
# Conversion entry points
# ---------------------------------------------------------------------------

def test_convert_resolves_kind_from_unit(reg):
    assert reg.convert(1.0, LengthUnit.FOOT, LengthUnit.METER) == pytest.approx(0.3048)
    with pytest.raises(UnsupportedConversionError):
        reg.convert(1.0, LengthUnit.FOOT, MassUnit.GRAM)
    with pytest.raises(UnregisteredUnitTypeError):
        reg.convert(1.0, _Foreign.THING, LengthUnit.METER)


def test_convert_error_carries_the_unit(reg):
    with pytest.raises(UnregisteredUnitTypeError) as excinfo:
        reg.convert(1.0, _Foreign.THING, LengthUnit.METER)
    assert excinfo.value.unit is _Foreign.THING
    assert excinfo.value.unit_type is _Foreign


def test_convert_by_name(reg):
    assert reg.convert_by_name(1.0, "Length", "FOOT", "INCH") == pytest.approx(12.0)
    with pytest.raises(KindNotFoundError):
        reg.convert_by_name(1.0, "Nope", "FOOT", "INCH")
    with pytest.raises(UnitNotFoundError):
        reg.convert_by_name(1.0, "Length", "FOOT", "GRAM")


def test_convert_by_abbreviation(reg):
    assert reg.convert_by_abbreviation(1.0, "Length", "ft", "in") == pytest.approx(12.0)
    # the kind scopes the lookup, so "m" means minute here
    assert reg.convert_by_abbreviation(1.0, "Duration", "m", "s") == pytest.approx(60.0)
    assert reg.convert_by_abbreviation(2.0, "Length", "км", "м", culture="ru-RU") == pytest.approx(2000.0)
    with pytest.raises(UnknownUnitError):
        reg.convert_by_abbreviation(1.0, "Length", "kg", "m")


# ---------------------------------------------------------------------------
# Catalog replacement
# ---------------------------------------------------------------------------

def test_register_replaces_catalog(reg):
    old = reg.catalog
    reg.register([LENGTH_INFO])
    assert reg.catalog is not old
    assert reg.names == ("Length",)
    with pytest.raises(KindNotFoundError):
        reg.lookup_by_name("Mass")
    # a held snapshot is untouched
    assert old.lookup_by_name("Mass") is MASS_INFO


def test_register_rejects_duplicate_names(reg):
    old = reg.catalog
    with pytest.raises(ValueError):
        reg.register([LENGTH_INFO, LENGTH_INFO])
    assert reg.catalog is old


def test_register_rejects_non_kind_info(reg):
    with pytest.raises(TypeError):
        reg.register([LENGTH_INFO, "Mass"])


def test_register_rejects_shared_unit_type(reg):
    from dataclasses import replace

    twin = replace(LENGTH_INFO, name="Distance")
    with pytest.raises(ValueError, match="unit type"):
        reg.register([LENGTH_INFO, twin])


def test_register_runs_callbacks_in_order():
    calls = []

    def tracking(info):
        from dataclasses import replace

        def conv(c):
            calls.append(("conv", info.name))
            info.configure_conversions(c)

        def abbr(a):
            calls.append(("abbr", info.name))
            info.configure_abbreviations(a)

        return replace(info, configure_conversions=conv, configure_abbreviations=abbr)

    Registry([tracking(LENGTH_INFO), tracking(MASS_INFO)])
    assert calls == [("conv", "Length"), ("abbr", "Length"), ("conv", "Mass"), ("abbr", "Mass")]


def test_runtime_abbreviations_do_not_survive_register(reg):
    reg.abbreviations.add(None, LengthUnit.FOOT, "feet")
    assert reg.parse_unit("feet") is LengthUnit.FOOT
    reg.register(BUILTIN_KINDS)
    assert reg.try_parse_unit("feet") is None


def test_indices_are_built_lazily():
    catalog = Catalog.build(BUILTIN_KINDS)
    assert "by_name" not in vars(catalog)
    assert "by_unit_type_and_name" not in vars(catalog)
    catalog.lookup_by_name("Length")
    assert "by_name" in vars(catalog)
    assert "by_unit_type_and_name" not in vars(catalog)
    catalog.lookup_unit(LengthUnit, "METER")
    assert "by_unit_type_and_name" in vars(catalog)


def test_swapped_catalog_is_visible_to_services(reg):
    reg.register([MASS_INFO])
    assert reg.try_parse("1 ft") is None
    assert reg.parse("1 kg").unit is MassUnit.KILOGRAM
    assert reg.try_from(1.0, LengthUnit.METER) is None


def test_concurrent_readers_during_swaps(reg):
    errors = []
    stop = threading.Event()

    def reader():
        while not stop.is_set():
            try:
                # "ft" and "kg" exist in both catalogs below
                assert reg.parse("3 ft").unit is LengthUnit.FOOT
                assert reg.lookup_by_unit_type(MassUnit).name == "Mass"
                assert reg.parse_unit("s", kind="Duration") is DurationUnit.SECOND
            except Exception as e:  # pragma: no cover - reported below
                errors.append(e)

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for th in readers:
        th.start()
    small = [info for info in BUILTIN_KINDS if info.name in ("Length", "Mass", "Duration")]
    for i in range(50):
        reg.register(small if i % 2 else BUILTIN_KINDS)
    stop.set()
    for th in readers:
        th.join()

    assert errors == []


# ---------------------------------------------------------------------------
# Default registry
# ---------------------------------------------------------------------------

def test_default_registry_is_bootstrapped_once(monkeypatch):
    monkeypatch.setattr(regmod, "_DEFAULT_REGISTRY", None)
    first = regmod.get_default_registry()
    assert first.names == tuple(info.name for info in BUILTIN_KINDS)
    assert regmod.get_default_registry() is first


def test_set_default_registry(monkeypatch, reg):
    monkeypatch.setattr(regmod, "_DEFAULT_REGISTRY", None)
    regmod.set_default_registry(reg)
    assert regmod.get_default_registry() is reg
    regmod.set_default_registry(None)
    fresh = regmod.get_default_registry()
    assert fresh is not reg
    with pytest.raises(TypeError):
        regmod.set_default_registry("registry")  # type: ignore[arg-type]


def test_patched_default_fixture(patched_default):
    assert regmod.get_default_registry() is patched_default


# ---------------------------------------------------------------------------
# Integer-valued unit enums
# ---------------------------------------------------------------------------

class _AUnit(IntEnum):
    BASE = 0
    BIG = 1


class _BUnit(IntEnum):
    BASE = 0
    BIG = 1


class _AQuantity(Quantity[_AUnit]):
    __slots__ = ()
    unit_type = _AUnit


class _BQuantity(Quantity[_BUnit]):
    __slots__ = ()
    unit_type = _BUnit


_A_INFO = define_kind("A", _AQuantity, _AUnit.BASE, DIMENSIONLESS, [
    UnitSpec(_AUnit.BASE, "A-bases", "1", ("a0",)),
    UnitSpec(_AUnit.BIG, "A-bigs", "10", ("a1",)),
])
_B_INFO = define_kind("B", _BQuantity, _BUnit.BASE, DIMENSIONLESS, [
    UnitSpec(_BUnit.BASE, "B-bases", "1", ("b0",)),
    UnitSpec(_BUnit.BIG, "B-bigs", "1000", ("b1",)),
])


@pytest.mark.regression(reason="IntEnum tags of different kinds compare equal but must stay apart")
def test_int_enum_kinds_do_not_collide():
    reg = Registry([_A_INFO, _B_INFO])
    assert _AUnit.BIG == _BUnit.BIG  # equal across kinds

    assert reg.convert(1.0, _AUnit.BIG, _AUnit.BASE) == pytest.approx(10.0)
    assert reg.convert(1.0, _BUnit.BIG, _BUnit.BASE) == pytest.approx(1000.0)
    assert reg.converter.get_conversion_factor(_AUnit.BIG) == 10
    with pytest.raises(UnsupportedConversionError):
        reg.convert(1.0, _AUnit.BIG, _BUnit.BASE)

    assert reg.abbreviations.get_default_abbreviation(_AUnit.BIG) == "a1"
    assert reg.abbreviations.get_default_abbreviation(_BUnit.BIG) == "b1"
    assert reg.parse_unit("a1") is _AUnit.BIG
    assert reg.parse_unit("b1") is _BUnit.BIG

    assert not _A_INFO.has_unit(_BUnit.BIG)
    assert reg.lookup_by_unit_type(_BUnit) is _B_INFO
    q = reg.from_value(2, _BUnit.BIG)
    assert isinstance(q, _BQuantity)
    assert q == reg.parse("2000 b0")
