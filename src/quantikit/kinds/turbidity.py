from __future__ import annotations

from enum import Enum

from quantikit.core.dimensions import DIMENSIONLESS
from quantikit.core.quantity import Quantity
from quantikit.kinds._builder import UnitSpec, define_kind


class TurbidityUnit(Enum):
    NTU = "NTU"


class Turbidity(Quantity[TurbidityUnit]):
    __slots__ = ()
    unit_type = TurbidityUnit


TURBIDITY_INFO = define_kind(
    "Turbidity",
    Turbidity,
    TurbidityUnit.NTU,
    DIMENSIONLESS,
    [UnitSpec(TurbidityUnit.NTU, "NTU", "1", ("NTU",))],
)
