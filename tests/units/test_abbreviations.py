import threading

import pytest

from quantikit.core.errors import UnknownUnitError
from quantikit.kinds import DurationUnit, LengthUnit, MassUnit, TurbidityUnit
from quantikit.units.abbreviations import FALLBACK_CULTURE, UnitAbbreviations
from quantikit.units.cultures import get_culture


@pytest.fixture()
def table():
    t = UnitAbbreviations()
    t.map_unit(LengthUnit.METER, "m")
    t.map_unit(LengthUnit.FOOT, "ft", "'")
    t.map_unit(LengthUnit.METER, "м", culture="ru-RU")
    t.map_unit(DurationUnit.MINUTE, "m", "min")
    return t


# -------------------------------
# Defaults & fallback
# -------------------------------

def test_fallback_culture_is_en_us():
    assert FALLBACK_CULTURE == "en-US"


def test_default_abbreviation_is_first_mapped(table):
    assert table.get_default_abbreviation(LengthUnit.FOOT) == "ft"


def test_culture_specific_default(table):
    assert table.get_default_abbreviation(LengthUnit.METER, "ru-RU") == "м"
    assert table.get_default_abbreviation(LengthUnit.METER, get_culture("ru-RU")) == "м"


def test_missing_culture_falls_back(table):
    assert table.get_default_abbreviation(LengthUnit.FOOT, "ru-RU") == "ft"
    assert table.get_default_abbreviation(LengthUnit.FOOT, "de-DE") == "ft"


def test_invariant_culture_uses_fallback(table):
    assert table.get_default_abbreviation(LengthUnit.METER, "") == "m"


def test_no_abbreviation_raises(table):
    with pytest.raises(UnknownUnitError):
        table.get_default_abbreviation(TurbidityUnit.NTU)


def test_get_abbreviations_lists_own_then_fallback(table):
    assert table.get_abbreviations(LengthUnit.METER, "ru-RU") == ["м", "m"]
    assert table.get_abbreviations(LengthUnit.FOOT) == ["ft", "'"]


# -------------------------------
# Adding at runtime
# -------------------------------

def test_add_appends_and_keeps_default(table):
    table.add(None, LengthUnit.FOOT, "feet")
    assert table.get_abbreviations(LengthUnit.FOOT) == ["ft", "'", "feet"]
    assert table.get_default_abbreviation(LengthUnit.FOOT) == "ft"
    assert table.find_units("feet") == [LengthUnit.FOOT]


def test_add_duplicate_is_noop(table):
    table.add("en-US", LengthUnit.FOOT, " ft ")
    assert table.get_abbreviations(LengthUnit.FOOT) == ["ft", "'"]


def test_add_empty_rejected(table):
    with pytest.raises(ValueError):
        table.add(None, LengthUnit.FOOT, "   ")


def test_add_unknown_culture_rejected(table):
    with pytest.raises(ValueError):
        table.add("xx-XX", LengthUnit.FOOT, "fut")


# -------------------------------
# Reverse lookup
# -------------------------------

def test_find_units_is_case_sensitive():
    t = UnitAbbreviations()
    t.map_unit(MassUnit.MILLIGRAM, "mg")
    assert t.find_units("mg") == [MassUnit.MILLIGRAM]
    assert t.find_units("Mg") == []
    assert t.find_units("MG") == []


def test_find_units_trims_input(table):
    assert table.find_units("  ft ") == [LengthUnit.FOOT]


def test_find_units_reports_every_owner(table):
    assert set(table.find_units("m")) == {LengthUnit.METER, DurationUnit.MINUTE}


def test_find_units_scoped_by_type(table):
    assert table.find_units("m", unit_types=(DurationUnit,)) == [DurationUnit.MINUTE]


def test_find_units_searches_culture_then_fallback(table):
    assert table.find_units("м", "ru-RU") == [LengthUnit.METER]
    assert table.find_units("ft", "ru-RU") == [LengthUnit.FOOT]
    # culture-specific entries are not visible from other cultures
    assert table.find_units("м") == []


def test_find_units_empty_text(table):
    assert table.find_units("") == []
    assert table.find_units("   ") == []


def test_index_sees_additions_after_first_lookup(table):
    assert table.find_units("yd") == []
    table.add(None, LengthUnit.YARD, "yd")
    assert table.find_units("yd") == [LengthUnit.YARD]


def test_concurrent_adds_are_all_kept():
    t = UnitAbbreviations()
    names = [f"u{i}" for i in range(200)]

    def worker(chunk):
        for n in chunk:
            t.add(None, LengthUnit.METER, n)
            t.find_units(n)

    threads = [threading.Thread(target=worker, args=(names[i::4],)) for i in range(4)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert sorted(t.get_abbreviations(LengthUnit.METER)) == sorted(names)
    assert all(t.find_units(n) == [LengthUnit.METER] for n in names)
