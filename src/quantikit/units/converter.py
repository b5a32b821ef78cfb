"""
quantikit.units.converter
=========================

The conversion engine. Every unit of a kind is described relative to the
kind's base unit, either by a linear factor (how many base units one unit is
worth) or by an override function pair for units whose relation to the base
unit is not a pure scale (temperature scales with an offset, logarithmic
units). A conversion always routes ``from -> base -> to``.

Linear legs run in ``decimal.Decimal`` with 34 significant digits when the
value is an ``int``, ``float`` or ``Decimal``; the intermediate base value is
kept as a ``Decimal`` so chained legs do not compound binary rounding. Other
numeric types fall back to plain float arithmetic.
"""

from __future__ import annotations

import logging
from decimal import Context, Decimal, InvalidOperation, localcontext
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, NamedTuple, Optional, Tuple, Union

from quantikit.core.errors import UnsupportedConversionError
from quantikit.core.utils import is_finite_number

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from quantikit.core.kind import KindInfo

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]
KindRef = Union[str, "KindInfo[Any]"]

# IEEE 754 decimal128 precision
_CONTEXT = Context(prec=34)


class ConversionFunctions(NamedTuple):
    """Override pair for one unit: value -> base value, base value -> value."""

    to_base: Callable[[float], float]
    from_base: Callable[[float], float]


def _kind_name(kind: KindRef) -> str:
    return kind if isinstance(kind, str) else kind.name


def _key(unit: Any) -> Tuple[type, Any]:
    # IntEnum members of different kinds compare equal; the type keeps them apart
    return (type(unit), unit)


def _as_decimal(value: Any) -> Optional[Decimal]:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # shortest repr keeps 0.1 as 0.1 rather than its binary expansion
        return Decimal(repr(float(value)))
    return None


def _as_factor(factor: Number) -> Decimal:
    if isinstance(factor, bool) or not isinstance(factor, (int, float, Decimal)):
        raise TypeError(f"Conversion factor must be a number, got {type(factor).__name__}")
    if not is_finite_number(factor) or factor <= 0:
        raise ValueError(f"Conversion factor must be a positive, finite number, got {factor!r}")
    d = _as_decimal(factor)
    assert d is not None
    return d


class UnitConverter:
    """Converts values between the units of one kind via its base unit.

    Populated by each kind's ``configure_conversions`` callback when a catalog
    is installed in a :class:`~quantikit.units.registry.Registry`; callers may
    install further overrides at runtime with :meth:`set_conversion_function`.
    """

    def __init__(self) -> None:
        self._kinds: Dict[Tuple[type, Enum], str] = {}
        self._factors: Dict[Tuple[type, Enum], Decimal] = {}
        self._overrides: Dict[Tuple[type, Enum], ConversionFunctions] = {}

    # -------------------------- configuration -------------------------------
    def set_conversion_factor(self, kind: KindRef, unit: Enum, factor: Number) -> None:
        """Declare ``unit`` as worth ``factor`` base units of ``kind``."""
        self._kinds[_key(unit)] = _kind_name(kind)
        self._factors[_key(unit)] = _as_factor(factor)

    def set_conversion_function(
        self,
        kind: KindRef,
        unit: Enum,
        to_base: Callable[[float], float],
        from_base: Callable[[float], float],
    ) -> None:
        """Install an override pair for ``unit``; it replaces the linear factor for both legs."""
        if not callable(to_base) or not callable(from_base):
            raise TypeError("to_base and from_base must be callable")
        self._kinds[_key(unit)] = _kind_name(kind)
        self._overrides[_key(unit)] = ConversionFunctions(to_base, from_base)
        logger.debug("Installed conversion override for %s (%s)", unit, _kind_name(kind))

    def has_override(self, unit: Enum) -> bool:
        try:
            return _key(unit) in self._overrides
        except TypeError:
            return False

    def get_conversion_factor(self, unit: Enum) -> Decimal:
        try:
            return self._factors[_key(unit)]
        except KeyError:
            raise UnsupportedConversionError(self._kinds.get(_key(unit), "?"), unit) from None
        except TypeError:
            raise UnsupportedConversionError("?", unit) from None

    def supports(self, unit: Any, kind: KindRef) -> bool:
        try:
            return self._kinds.get(_key(unit)) == _kind_name(kind)
        except TypeError:
            return False

    # -------------------------- conversion ----------------------------------
    def convert(self, value: Number, from_unit: Enum, to_unit: Enum, kind: KindRef) -> Number:
        """Convert ``value`` from ``from_unit`` to ``to_unit`` within ``kind``.

        Identical units return ``value`` itself, untouched. The result is a
        ``Decimal`` for ``Decimal`` input and a ``float`` otherwise.
        """
        name = _kind_name(kind)
        self._require(name, from_unit, kind)
        if from_unit is to_unit:
            return value
        self._require(name, to_unit, kind)

        exact = _as_decimal(value)
        if exact is None:
            return self._convert_float(float(value), from_unit, to_unit)

        base = self._to_base(exact, from_unit)
        result = self._from_base(base, to_unit)
        return result if isinstance(value, Decimal) else float(result)

    def try_convert(self, value: Number, from_unit: Enum, to_unit: Enum, kind: KindRef) -> Optional[Number]:
        try:
            return self.convert(value, from_unit, to_unit, kind)
        except Exception as e:
            logger.debug("try_convert(%r, %r, %r) failed: %s", value, from_unit, to_unit, e)
            return None

    # ------------------------- internals -----------------------------------
    def _require(self, name: str, unit: Any, kind: KindRef) -> None:
        if not isinstance(kind, str) and not kind.has_unit(unit):
            raise UnsupportedConversionError(name, unit)
        if not self.supports(unit, name):
            raise UnsupportedConversionError(name, unit)

    def _to_base(self, value: Decimal, unit: Enum) -> Decimal:
        override = self._overrides.get(_key(unit))
        if override is not None:
            return _from_float(override.to_base(float(value)))
        with localcontext(_CONTEXT):
            return value * self._factors[_key(unit)]

    def _from_base(self, base: Decimal, unit: Enum) -> Decimal:
        override = self._overrides.get(_key(unit))
        if override is not None:
            return _from_float(override.from_base(float(base)))
        with localcontext(_CONTEXT):
            return base / self._factors[_key(unit)]

    def _convert_float(self, value: float, from_unit: Enum, to_unit: Enum) -> float:
        override = self._overrides.get(_key(from_unit))
        base = override.to_base(value) if override else value * float(self._factors[_key(from_unit)])
        override = self._overrides.get(_key(to_unit))
        return override.from_base(base) if override else base / float(self._factors[_key(to_unit)])


def _from_float(x: Any) -> Decimal:
    try:
        return x if isinstance(x, Decimal) else Decimal(repr(float(x)))
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Conversion function returned a non-numeric value: {x!r}") from e


__all__ = ["UnitConverter", "ConversionFunctions"]
