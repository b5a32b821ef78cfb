"""
quantikit.units.factory
=======================

Dynamic construction of quantities when the kind is only known at runtime:
given a value and a unit tag, find the kind that owns the tag's type and call
its construction function.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from quantikit.core.errors import InvalidUnitError, NonFiniteValueError
from quantikit.core.quantity import Number, Quantity
from quantikit.core.utils import is_finite_number

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from quantikit.core.kind import KindInfo
    from quantikit.units.registry import Catalog, Registry

logger = logging.getLogger(__name__)


class QuantityFactory:
    def __init__(self, registry: "Registry") -> None:
        self._registry = registry

    def _owning_kind(self, catalog: "Catalog", unit: Any) -> "KindInfo[Any]":
        # Raises UnregisteredUnitTypeError for tag types from outside the catalog.
        info = catalog.lookup_kind_of(unit)
        if catalog.try_get_unit_info(unit) is None:
            raise InvalidUnitError(unit, f"Unit {unit!r} is not declared by kind {info.name!r}.")
        return info

    def from_value(self, value: Number, unit: Enum) -> Quantity[Any]:
        """Construct a quantity of whichever kind owns ``unit``.

        Non-finite floats and decimals are rejected with ``NonFiniteValueError``
        before any lookup happens.
        """
        if isinstance(value, (float, Decimal)) and not is_finite_number(value):
            raise NonFiniteValueError(value)
        catalog = self._registry.catalog
        info = self._owning_kind(catalog, unit)
        return catalog.create(info, value, unit)

    def try_from(self, value: Number, unit: Enum) -> Optional[Quantity[Any]]:
        """Like :meth:`from_value`, but returns ``None`` instead of raising."""
        try:
            return self.from_value(value, unit)
        except Exception as e:
            logger.debug("try_from(%r, %r) failed: %s", value, unit, e)
            return None

    def from_name(self, value: Number, kind_name: str, unit_name: str) -> Quantity[Any]:
        """Construct from kind and unit names, e.g. ``(3, "Length", "FOOT")``."""
        catalog = self._registry.catalog
        info = catalog.lookup_by_name(kind_name)
        unit_info = catalog.lookup_unit(info.unit_type, unit_name)
        return self.from_value(value, unit_info.value)

    def zero(self, kind_name: str) -> Quantity[Any]:
        return self._registry.catalog.lookup_by_name(kind_name).zero


__all__ = ["QuantityFactory"]
