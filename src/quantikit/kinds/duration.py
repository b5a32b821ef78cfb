from __future__ import annotations

from enum import Enum

from quantikit.core.dimensions import TIME
from quantikit.core.kind import BaseUnits
from quantikit.core.quantity import Quantity
from quantikit.kinds._builder import UnitSpec, define_kind


class DurationUnit(Enum):
    SECOND = "Second"
    MILLISECOND = "Millisecond"
    MICROSECOND = "Microsecond"
    MINUTE = "Minute"
    HOUR = "Hour"
    DAY = "Day"
    WEEK = "Week"


class Duration(Quantity[DurationUnit]):
    __slots__ = ()
    unit_type = DurationUnit


_U = DurationUnit

DURATION_INFO = define_kind(
    "Duration",
    Duration,
    _U.SECOND,
    TIME,
    [
        UnitSpec(_U.SECOND,      "Seconds",      "1",      ("s", "sec", "secs", "second", "seconds"), BaseUnits(time="SECOND")),
        UnitSpec(_U.MILLISECOND, "Milliseconds", "0.001",  ("ms", "msec"),                            BaseUnits(time="MILLISECOND")),
        UnitSpec(_U.MICROSECOND, "Microseconds", "1e-6",   ("µs", "µsec"),                            BaseUnits(time="MICROSECOND")),
        # "m" is shared with the meter
        UnitSpec(_U.MINUTE,      "Minutes",      "60",     ("m", "min", "minute", "minutes"),         BaseUnits(time="MINUTE")),
        UnitSpec(_U.HOUR,        "Hours",        "3600",   ("h", "hr", "hrs", "hour", "hours"),       BaseUnits(time="HOUR")),
        UnitSpec(_U.DAY,         "Days",         "86400",  ("d", "day", "days"),                      BaseUnits(time="DAY")),
        UnitSpec(_U.WEEK,        "Weeks",        "604800", ("wk", "week", "weeks"),                   BaseUnits(time="WEEK")),
    ],
    localized={
        "ru-RU": {
            _U.SECOND: ("с", "сек"),
            _U.MILLISECOND: ("мс", "мсек"),
            _U.MICROSECOND: ("мкс", "мксек"),
            _U.MINUTE: ("мин",),
            _U.HOUR: ("ч",),
            _U.DAY: ("сут", "д"),
            _U.WEEK: ("нед",),
        },
    },
)
