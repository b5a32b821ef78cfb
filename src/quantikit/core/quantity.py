"""
quantikit.core.quantity
=======================

Defines the immutable ``Quantity`` value (a number tagged with a unit) and the
``IQuantity`` capability protocol used when the concrete kind is only known at
runtime.

Concrete kinds subclass ``Quantity`` with their unit enum as the type
parameter::

    class Length(Quantity[LengthUnit]):
        __slots__ = ()
        unit_type = LengthUnit

and the kind's ``KindInfo`` is attached as ``Length.info`` when the kind is
defined. Code that knows the unit type statically works with ``Length`` (or
``Quantity[LengthUnit]``); code that does not works through ``IQuantity``.

Equality and ordering compare through the kind's base unit, so
``Length(1, KILOMETER) == Length(1000, METER)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from math import isclose
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Generic,
    Optional,
    Protocol,
    Type,
    TypeVar,
    Union,
    runtime_checkable,
)

from quantikit.core.errors import InvalidUnitError, NonFiniteValueError
from quantikit.core.utils import is_finite_number

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from quantikit.core.kind import KindInfo, UnitSystem
    from quantikit.units.converter import UnitConverter

Number = Union[int, float, Decimal]
U = TypeVar("U", bound=Enum)
Q = TypeVar("Q", bound="Quantity[Any]")

_REL_TOL = 1e-12


def _converter_for(info: "KindInfo[Any]") -> "UnitConverter":
    # Import here to avoid circular imports; the registry imports the kinds.
    from quantikit.units.registry import get_default_registry

    catalog = get_default_registry().catalog
    if catalog.owns(info):
        return catalog.converter
    return info.converter


def attach_converter(quantity: Q, converter: "UnitConverter") -> Q:
    """Make ``quantity`` convert with ``converter`` unless told otherwise.

    Registries call this on every quantity they create, so values keep using
    the catalog they came from.
    """
    if isinstance(quantity, Quantity):
        object.__setattr__(quantity, "_converter", converter)
    return quantity


@runtime_checkable
class IQuantity(Protocol):
    """Type-erased view of a quantity: value, unit tag and kind metadata."""

    @property
    def value(self) -> Number: ...

    @property
    def unit(self) -> Enum: ...

    @property
    def quantity_info(self) -> "KindInfo[Any]": ...

    def as_unit(self, unit: Any, converter: Optional["UnitConverter"] = None) -> Number: ...

    def to_unit(self, unit: Any, converter: Optional["UnitConverter"] = None) -> "IQuantity": ...


@dataclass(frozen=True, slots=True, eq=False)
class Quantity(Generic[U]):
    """
    A numeric value tagged with a unit of one kind.

    Attributes
    ----------
    value : float | Decimal
        The magnitude, expressed in ``unit``. Integers are stored as floats;
        ``Decimal`` values are kept as ``Decimal``.
    unit : enum member
        The unit tag, a member of the kind's unit enum.
    """

    value: Number
    unit: U
    _converter: Optional["UnitConverter"] = field(default=None, init=False, repr=False, compare=False)

    unit_type: ClassVar[Type[Enum]]
    info: ClassVar["KindInfo[Any]"]

    def __post_init__(self) -> None:
        value = self.value
        if not is_finite_number(value):
            if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
                raise TypeError(f"Quantity value must be a real number, got {type(value).__name__}")
            raise NonFiniteValueError(value)
        if not isinstance(value, Decimal):
            object.__setattr__(self, "value", float(value))

        unit_type = getattr(type(self), "unit_type", None)
        if unit_type is not None and not isinstance(self.unit, unit_type):
            raise InvalidUnitError(
                self.unit,
                f"{type(self).__name__} requires a {unit_type.__qualname__} unit, got {self.unit!r}.",
            )

    # --- Kind metadata ---
    @property
    def quantity_info(self) -> "KindInfo[U]":
        info = getattr(type(self), "info", None)
        if info is not None:
            return info
        # Untyped Quantity: resolve the kind from the unit tag's type.
        from quantikit.units.registry import get_default_registry

        return get_default_registry().lookup_by_unit_type(type(self.unit))

    @classmethod
    def zero(cls: Type[Q]) -> Q:
        return cls.info.zero  # type: ignore[return-value]

    @classmethod
    def base_unit(cls) -> Enum:
        return cls.info.base_unit

    # --- Conversion ---
    def _resolve_converter(self) -> "UnitConverter":
        if self._converter is not None:
            return self._converter
        return _converter_for(self.quantity_info)

    def as_unit(self, unit: U, converter: Optional["UnitConverter"] = None) -> Number:
        """Return the value converted to ``unit``.

        ``converter`` defaults to the one of the registry that created this
        quantity; a quantity constructed directly uses the default registry
        when it carries this kind, and the kind's own converter otherwise.
        """
        conv = converter if converter is not None else self._resolve_converter()
        return conv.convert(self.value, self.unit, unit, self.quantity_info)

    def to_unit(self, unit: U, converter: Optional["UnitConverter"] = None) -> "Quantity[U]":
        """Return an equal quantity expressed in ``unit``."""
        if unit is self.unit:
            return self
        conv = converter if converter is not None else self._resolve_converter()
        return attach_converter(self.quantity_info.create(self.as_unit(unit, conv), unit), conv)

    def as_base(self, converter: Optional["UnitConverter"] = None) -> Number:
        return self.as_unit(self.quantity_info.base_unit, converter)

    def as_unit_system(self, system: "UnitSystem", converter: Optional["UnitConverter"] = None) -> Number:
        """Return the value in the first unit of this kind matching ``system``'s base units."""
        unit_info = self.quantity_info.get_unit_info_for(system.base_units)
        return self.as_unit(unit_info.value, converter)

    # --- Comparison ---
    def _same_kind(self, other: "Quantity[Any]") -> bool:
        return self.quantity_info.name == other.quantity_info.name

    def _check_comparable(self, other: object) -> "Quantity[Any]":
        if not isinstance(other, Quantity):
            raise TypeError(f"Cannot compare {type(self).__name__} with type {type(other).__name__}")
        if not self._same_kind(other):
            raise TypeError(
                f"Cannot compare quantities of different kinds: "
                f"{self.quantity_info.name!r} and {other.quantity_info.name!r}"
            )
        return other

    def _is_close(self, other: "Quantity[Any]") -> bool:
        return isclose(float(self.as_base()), float(other.as_base()), rel_tol=_REL_TOL, abs_tol=0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if not self._same_kind(other):
            return False
        return self._is_close(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        o = self._check_comparable(other)
        return float(self.as_base()) < float(o.as_base()) and not self._is_close(o)

    def __le__(self, other: object) -> bool:
        o = self._check_comparable(other)
        return float(self.as_base()) < float(o.as_base()) or self._is_close(o)

    def __gt__(self, other: object) -> bool:
        o = self._check_comparable(other)
        return float(self.as_base()) > float(o.as_base()) and not self._is_close(o)

    def __ge__(self, other: object) -> bool:
        o = self._check_comparable(other)
        return float(self.as_base()) > float(o.as_base()) or self._is_close(o)

    __hash__ = None  # type: ignore[assignment]

    def as_key(self, precision: int = 12) -> tuple:
        """
        Return a hashable, discretized key for this quantity.

        ``__eq__`` is tolerance-based, so ``__hash__`` is disabled; use this key
        for dicts and sets. The key is ``(kind name, base value rounded to
        `precision` decimal places)``.
        """
        rounded = round(float(self.as_base()), precision)
        if rounded == 0.0:
            # -0.0 and 0.0 must share a key
            rounded = 0.0
        return (self.quantity_info.name, rounded)

    # --- Same-kind arithmetic ---
    def _require_same_kind(self, other: object, op: str) -> "Quantity[Any]":
        if not isinstance(other, Quantity) or not self._same_kind(other):
            raise TypeError(f"{op} requires two quantities of the same kind")
        return other

    def _coerce(self, other: "Quantity[Any]") -> Number:
        value = other.as_unit(self.unit)
        if isinstance(self.value, Decimal) and not isinstance(value, Decimal):
            return Decimal(repr(value))
        if isinstance(value, Decimal) and not isinstance(self.value, Decimal):
            return float(value)
        return value

    def _new(self, value: Number) -> "Quantity[U]":
        q = self.quantity_info.create(value, self.unit)
        return attach_converter(q, self._converter) if self._converter is not None else q

    def __add__(self, other: "Quantity[U]") -> "Quantity[U]":
        o = self._require_same_kind(other, "Add")
        # return in left operand's unit
        return self._new(self.value + self._coerce(o))

    def __sub__(self, other: "Quantity[U]") -> "Quantity[U]":
        o = self._require_same_kind(other, "Sub")
        return self._new(self.value - self._coerce(o))

    def __neg__(self) -> "Quantity[U]":
        return self._new(-self.value)

    def __pos__(self) -> "Quantity[U]":
        return self

    def __abs__(self) -> "Quantity[U]":
        return self._new(abs(self.value))

    def __mul__(self, other: Number) -> "Quantity[U]":
        if isinstance(other, bool) or not isinstance(other, (int, float, Decimal)):
            return NotImplemented
        if isinstance(self.value, Decimal) and isinstance(other, float):
            other = Decimal(repr(other))
        elif isinstance(other, Decimal) and not isinstance(self.value, Decimal):
            other = float(other)
        return self._new(self.value * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Number, "Quantity[U]"]) -> Any:
        if isinstance(other, Quantity):
            o = self._require_same_kind(other, "Div")
            return float(self.value) / float(self._coerce(o))
        if isinstance(other, bool) or not isinstance(other, (int, float, Decimal)):
            return NotImplemented
        if isinstance(self.value, Decimal) and isinstance(other, float):
            other = Decimal(repr(other))
        elif isinstance(other, Decimal) and not isinstance(self.value, Decimal):
            other = float(other)
        return self._new(self.value / other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, {self.unit!s})"


__all__ = ["IQuantity", "Quantity", "Number", "attach_converter"]
