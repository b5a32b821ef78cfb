"""Turn a table of unit rows into a ``KindInfo``.

Each built-in kind module declares its unit enum, its ``Quantity`` subclass
and one ``UnitSpec`` per unit; :func:`define_kind` derives the unit metadata,
the zero value and both configuration callbacks from that table.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Type, Union

from quantikit.core.dimensions import BaseDimensions
from quantikit.core.kind import BaseUnits, KindInfo, UnitInfo
from quantikit.core.quantity import Quantity
from quantikit.units.abbreviations import UnitAbbreviations
from quantikit.units.converter import UnitConverter


@dataclass(frozen=True)
class UnitSpec:
    unit: Enum
    plural_name: str
    # base units per one of this unit; None when to_base/from_base are given
    factor: Optional[Union[int, float, Decimal, str]] = None
    abbreviations: Tuple[str, ...] = ()
    base_units: BaseUnits = BaseUnits.UNDEFINED
    to_base: Optional[Callable[[float], float]] = None
    from_base: Optional[Callable[[float], float]] = None

    def __post_init__(self) -> None:
        functions = sum(f is not None for f in (self.to_base, self.from_base))
        if self.factor is None and functions == 2:
            return
        if self.factor is not None and functions == 0:
            return
        raise ValueError(
            f"{self.unit!r}: give either a factor or both to_base and from_base, never a mix."
        )


def define_kind(
    name: str,
    quantity_type: Type[Quantity[Any]],
    base_unit: Enum,
    base_dimensions: BaseDimensions,
    specs: Sequence[UnitSpec],
    localized: Optional[Mapping[str, Mapping[Enum, Sequence[str]]]] = None,
) -> KindInfo[Any]:
    """Build the ``KindInfo`` for ``quantity_type`` and attach it as ``quantity_type.info``."""
    specs = tuple(specs)
    localized = dict(localized or {})

    def configure_conversions(converter: UnitConverter) -> None:
        for spec in specs:
            if spec.factor is None:
                converter.set_conversion_function(name, spec.unit, spec.to_base, spec.from_base)
            else:
                factor = Decimal(spec.factor) if isinstance(spec.factor, str) else spec.factor
                converter.set_conversion_factor(name, spec.unit, factor)

    def configure_abbreviations(abbreviations: UnitAbbreviations) -> None:
        for spec in specs:
            abbreviations.map_unit(spec.unit, *spec.abbreviations)
        for culture, table in localized.items():
            for unit, texts in table.items():
                abbreviations.map_unit(unit, *texts, culture=culture)

    info: KindInfo[Any] = KindInfo(
        name=name,
        quantity_type=quantity_type,
        unit_type=quantity_type.unit_type,
        units=tuple(UnitInfo(s.unit, s.plural_name, s.base_units) for s in specs),
        base_unit=base_unit,
        zero=quantity_type(0.0, base_unit),
        base_dimensions=base_dimensions,
        create=quantity_type,
        configure_conversions=configure_conversions,
        configure_abbreviations=configure_abbreviations,
    )
    quantity_type.info = info
    return info
