"""
quantikit.core.kind
===================

Static description of a quantity kind: its name, its closed set of unit tags
(an ``enum.Enum``), the designated base unit, the zero value, the
base-dimension vector, and the callbacks the registry invokes to configure
conversions and abbreviations.

Unit tags stay plain enum members; everything the library needs to know about
a tag lives in the side tables built here (``UnitInfo``) and in the registry's
derived indices.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Dict,
    Generic,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from quantikit.core.dimensions import BaseDimensions
from quantikit.core.errors import InvalidUnitError

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from quantikit.core.quantity import Quantity
    from quantikit.units.abbreviations import UnitAbbreviations
    from quantikit.units.converter import UnitConverter

U = TypeVar("U", bound=Enum)


@dataclass(frozen=True, slots=True)
class BaseUnits:
    """The base-dimension-relative descriptor of a unit.

    Each field names the unit (by its tag name, e.g. ``"FOOT"``) used for that
    base dimension. ``FOOT_PER_SECOND_SQUARED`` is ``BaseUnits(length="FOOT",
    time="SECOND")``. Units that cannot be expressed this way (NTU, standard
    gravity, angles) use :attr:`UNDEFINED`.
    """

    length: Optional[str] = None
    mass: Optional[str] = None
    time: Optional[str] = None
    current: Optional[str] = None
    temperature: Optional[str] = None
    amount: Optional[str] = None
    luminous_intensity: Optional[str] = None

    UNDEFINED: ClassVar["BaseUnits"]

    @property
    def is_undefined(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def is_subset_of(self, other: "BaseUnits") -> bool:
        """True if every base unit set here is set to the same unit in ``other``."""
        for f in fields(self):
            mine = getattr(self, f.name)
            if mine is not None and mine != getattr(other, f.name):
                return False
        return True


BaseUnits.UNDEFINED = BaseUnits()


@dataclass(frozen=True, slots=True)
class UnitSystem:
    """A named set of base units, e.g. :attr:`SI`."""

    name: str
    base_units: BaseUnits

    SI: ClassVar["UnitSystem"]


UnitSystem.SI = UnitSystem(
    "SI",
    BaseUnits(
        length="METER",
        mass="KILOGRAM",
        time="SECOND",
        current="AMPERE",
        temperature="KELVIN",
        amount="MOLE",
        luminous_intensity="CANDELA",
    ),
)


@dataclass(frozen=True, slots=True)
class UnitInfo(Generic[U]):
    """Metadata for one unit tag of a kind."""

    value: U
    plural_name: str
    base_units: BaseUnits = BaseUnits.UNDEFINED

    @property
    def name(self) -> str:
        return self.value.name


@dataclass(frozen=True, eq=False)
class KindInfo(Generic[U]):
    """Everything the registry knows about one quantity kind.

    ``create`` is the construction function ``(value, unit) -> quantity``.
    ``configure_conversions`` and ``configure_abbreviations`` are called once
    by the registry each time a catalog containing this kind is installed.
    """

    name: str
    quantity_type: Type["Quantity[Any]"]
    unit_type: Type[U]
    units: Tuple[UnitInfo[U], ...]
    base_unit: U
    zero: "Quantity[U]"
    base_dimensions: BaseDimensions
    create: Callable[[Any, U], "Quantity[U]"]
    configure_conversions: Callable[["UnitConverter"], None]
    configure_abbreviations: Callable[["UnitAbbreviations"], None]

    _by_unit: Dict[U, UnitInfo[U]] = field(init=False, repr=False)
    _converter: Optional["UnitConverter"] = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Kind name must be a non-empty string.")
        if not self.units:
            raise ValueError(f"Kind {self.name!r} must declare at least one unit.")

        by_unit: Dict[U, UnitInfo[U]] = {}
        for info in self.units:
            if not isinstance(info.value, self.unit_type):
                raise ValueError(
                    f"Kind {self.name!r}: unit {info.value!r} is not a member of "
                    f"{self.unit_type.__qualname__}."
                )
            if info.value in by_unit:
                raise ValueError(f"Kind {self.name!r}: unit {info.value!r} is declared twice.")
            by_unit[info.value] = info

        if type(self.base_unit) is not self.unit_type or self.base_unit not in by_unit:
            raise ValueError(
                f"Kind {self.name!r}: base unit {self.base_unit!r} is not among its declared units."
            )
        object.__setattr__(self, "base_dimensions", BaseDimensions(self.base_dimensions))
        object.__setattr__(self, "_by_unit", by_unit)

    # --- Derived views ---
    @property
    def base_unit_info(self) -> UnitInfo[U]:
        return self._by_unit[self.base_unit]

    @property
    def unit_names(self) -> Tuple[str, ...]:
        return tuple(info.name for info in self.units)

    @property
    def value_type(self) -> type:
        return type(self.zero.value)

    @property
    def converter(self) -> "UnitConverter":
        """A converter holding only this kind's conversions.

        Built from ``configure_conversions`` on first use. Quantities that were
        not created through a registry convert with it when the default
        registry does not carry this kind.
        """
        conv = self._converter
        if conv is None:
            from quantikit.units.converter import UnitConverter

            conv = UnitConverter()
            self.configure_conversions(conv)
            # concurrent first callers may each build one; any of them is complete
            object.__setattr__(self, "_converter", conv)
        return conv

    def has_unit(self, unit: Any) -> bool:
        # IntEnum members of another kind compare equal to ours
        return type(unit) is self.unit_type and unit in self._by_unit

    def get_unit_info(self, unit: U) -> UnitInfo[U]:
        if not self.has_unit(unit):
            raise InvalidUnitError(unit, f"Unit {unit!r} is not declared by kind {self.name!r}.")
        return self._by_unit[unit]

    def get_unit_infos_for(self, base_units: BaseUnits) -> List[UnitInfo[U]]:
        """All units whose base units are defined and a subset of ``base_units``."""
        if base_units is None:
            raise TypeError("base_units must not be None")
        return [
            info
            for info in self.units
            if not info.base_units.is_undefined and info.base_units.is_subset_of(base_units)
        ]

    def get_unit_info_for(self, base_units: BaseUnits) -> UnitInfo[U]:
        """The unit matching ``base_units``: an exact match if any, else the first subset match."""
        matches = self.get_unit_infos_for(base_units)
        for info in matches:
            if info.base_units == base_units:
                return info
        if matches:
            return matches[0]
        raise ValueError(f"No unit of kind {self.name!r} matches base units {base_units!r}.")

    def __repr__(self) -> str:
        return f"KindInfo({self.name!r}, units={len(self.units)}, base_unit={self.base_unit!r})"


__all__ = ["BaseUnits", "UnitSystem", "UnitInfo", "KindInfo"]
