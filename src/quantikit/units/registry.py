"""
quantikit.units.registry
========================

The registry of quantity kinds.

A ``Registry`` owns one immutable ``Catalog`` snapshot: the ordered kinds, a
``UnitConverter`` and a ``UnitAbbreviations`` table populated by the kinds'
configuration callbacks, and the lookup indices derived from them.

- ``register`` builds a complete new snapshot (callbacks included) and
  installs it with a single assignment; readers see either the old catalog or
  the new one, never a mix.
- Derived indices (by name, by unit type, by ``(unit type, unit name)``) are
  built lazily on first use of a snapshot and cached on it. Two threads may
  build the same index at once; both results are identical and complete.
- A process-wide default registry is available through
  ``get_default_registry`` / ``set_default_registry``. Replacing it is a single
  assignment as well.
"""
from __future__ import annotations

import logging
from enum import Enum
from functools import cached_property
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from quantikit.core.dimensions import BaseDimensions, DimLike
from quantikit.core.errors import (
    KindNotFoundError,
    UnitNotFoundError,
    UnregisteredUnitTypeError,
)
from quantikit.core.kind import KindInfo, UnitInfo
from quantikit.core.quantity import Number, Quantity, attach_converter
from quantikit.units.abbreviations import UnitAbbreviations
from quantikit.units.converter import UnitConverter
from quantikit.units.cultures import Culture, CultureLike, get_culture
from quantikit.units.factory import QuantityFactory
from quantikit.units.parser import KindHint, QuantityParser, UnitParser

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=Enum)


# ---------------------------------------------------------------------------
# Catalog snapshot
# ---------------------------------------------------------------------------
class Catalog:
    """One immutable generation of the registry's contents."""

    def __init__(
        self,
        kinds: Tuple[KindInfo[Any], ...],
        converter: UnitConverter,
        abbreviations: UnitAbbreviations,
    ) -> None:
        self.kinds = kinds
        self.converter = converter
        self.abbreviations = abbreviations

    @classmethod
    def build(cls, kinds: Iterable[KindInfo[Any]]) -> "Catalog":
        """Validate ``kinds`` and run every configuration callback once, in order."""
        kinds = tuple(kinds)
        names: Dict[str, KindInfo[Any]] = {}
        unit_types: Dict[type, KindInfo[Any]] = {}
        for info in kinds:
            if not isinstance(info, KindInfo):
                raise TypeError(f"Expected KindInfo, got {type(info).__name__}")
            if info.name in names:
                raise ValueError(f"Cannot register kind {info.name!r}: the name is used twice.")
            if info.unit_type in unit_types:
                raise ValueError(
                    f"Cannot register kind {info.name!r}: unit type "
                    f"{info.unit_type.__qualname__} already belongs to {unit_types[info.unit_type].name!r}."
                )
            names[info.name] = info
            unit_types[info.unit_type] = info

        converter = UnitConverter()
        abbreviations = UnitAbbreviations()
        for info in kinds:
            info.configure_conversions(converter)
            info.configure_abbreviations(abbreviations)
        return cls(kinds, converter, abbreviations)

    # ------------------------- derived indices -------------------------------
    @cached_property
    def by_name(self) -> Dict[str, KindInfo[Any]]:
        logger.debug("Building name index for %d kinds", len(self.kinds))
        return {info.name: info for info in self.kinds}

    @cached_property
    def by_unit_type(self) -> Dict[type, KindInfo[Any]]:
        logger.debug("Building unit-type index for %d kinds", len(self.kinds))
        return {info.unit_type: info for info in self.kinds}

    @cached_property
    def by_unit_type_and_name(self) -> Dict[Tuple[type, str], UnitInfo[Any]]:
        logger.debug("Building unit index for %d kinds", len(self.kinds))
        return {
            (info.unit_type, unit_info.name): unit_info
            for info in self.kinds
            for unit_info in info.units
        }

    @cached_property
    def names(self) -> Tuple[str, ...]:
        return tuple(info.name for info in self.kinds)

    # ------------------------- lookups ---------------------------------------
    def lookup_by_name(self, name: str) -> KindInfo[Any]:
        try:
            return self.by_name[name]
        except (KeyError, TypeError):
            raise KindNotFoundError(name) from None

    def lookup_by_unit_type(self, unit_type: type) -> KindInfo[Any]:
        try:
            return self.by_unit_type[unit_type]
        except (KeyError, TypeError):
            raise UnregisteredUnitTypeError(unit_type) from None

    def lookup_kind_of(self, unit: Any) -> KindInfo[Any]:
        """The kind owning ``unit``'s type; the error carries the tag itself."""
        try:
            return self.by_unit_type[type(unit)]
        except KeyError:
            raise UnregisteredUnitTypeError(type(unit), unit) from None

    def lookup_unit(self, unit_type: type, name: str) -> UnitInfo[Any]:
        try:
            return self.by_unit_type_and_name[(unit_type, name)]
        except (KeyError, TypeError):
            raise UnitNotFoundError(unit_type, name) from None

    def try_get_unit_info(self, unit: Any) -> Optional[UnitInfo[Any]]:
        name = getattr(unit, "name", None)
        if not isinstance(unit, Enum) or name is None:
            return None
        return self.by_unit_type_and_name.get((type(unit), name))

    def owns(self, info: KindInfo[Any]) -> bool:
        return self.by_unit_type.get(info.unit_type) is info

    def create(self, info: KindInfo[Any], value: Number, unit: Enum) -> Quantity[Any]:
        """Call ``info.create`` and bind the result to this catalog's converter."""
        q = info.create(value, unit)
        if getattr(type(q), "info", None) is info:
            attach_converter(q, self.converter)
        return q


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
class Registry:
    """Owns the active catalog of kinds and the services built on it.

    Example
    -------
    >>> from quantikit.kinds import BUILTIN_KINDS
    >>> reg = Registry(BUILTIN_KINDS)
    >>> reg.parse("1.5 kg").value
    1.5
    """

    def __init__(
        self,
        kinds: Iterable[KindInfo[Any]] = (),
        *,
        default_culture: CultureLike = None,
    ) -> None:
        self.default_culture: Culture = get_culture(default_culture)
        self._catalog: Catalog = Catalog.build(kinds)
        self.factory = QuantityFactory(self)
        self.unit_parser = UnitParser(self)
        self.parser = QuantityParser(self)

    # -------------------------- catalog -------------------------------------
    @property
    def catalog(self) -> Catalog:
        """The current snapshot. Hold on to it to read several things consistently."""
        return self._catalog

    def register(self, kinds: Iterable[KindInfo[Any]]) -> None:
        """Replace the whole catalog with ``kinds``.

        The new snapshot, including its converter and abbreviation table, is
        fully built before it becomes visible. Abbreviations or conversion
        overrides added at runtime to the previous snapshot are not carried
        over.
        """
        catalog = Catalog.build(kinds)
        self._catalog = catalog
        logger.debug("Installed catalog with kinds: %s", ", ".join(catalog.names))

    @property
    def converter(self) -> UnitConverter:
        return self._catalog.converter

    @property
    def abbreviations(self) -> UnitAbbreviations:
        return self._catalog.abbreviations

    # -------------------------- inspection ----------------------------------
    @property
    def names(self) -> Tuple[str, ...]:
        return self._catalog.names

    @property
    def infos(self) -> Tuple[KindInfo[Any], ...]:
        return self._catalog.kinds

    def all(self) -> Mapping[str, KindInfo[Any]]:
        return dict(self._catalog.by_name)

    def __iter__(self) -> Iterator[KindInfo[Any]]:
        return iter(self._catalog.kinds)

    def __len__(self) -> int:
        return len(self._catalog.kinds)

    def __contains__(self, name: object) -> bool:
        return self.has(name)

    def has(self, name: object) -> bool:
        try:
            return name in self._catalog.by_name
        except TypeError:
            return False

    def lookup_by_name(self, name: str) -> KindInfo[Any]:
        return self._catalog.lookup_by_name(name)

    get = lookup_by_name

    def lookup_by_unit_type(self, unit_type: Type[U]) -> KindInfo[U]:
        return self._catalog.lookup_by_unit_type(unit_type)

    def lookup_unit(self, unit_type: Type[U], name: str) -> UnitInfo[U]:
        return self._catalog.lookup_unit(unit_type, name)

    def try_get_unit_info(self, unit: U) -> Optional[UnitInfo[U]]:
        return self._catalog.try_get_unit_info(unit)

    def get_unit_info(self, unit: U) -> UnitInfo[U]:
        catalog = self._catalog
        catalog.lookup_kind_of(unit)
        return catalog.lookup_unit(type(unit), unit.name)

    def kinds_with_base_dimensions(self, dimensions: DimLike) -> List[KindInfo[Any]]:
        dims = BaseDimensions(dimensions)
        return [info for info in self._catalog.kinds if info.base_dimensions == dims]

    # -------------------------- services ------------------------------------
    def from_value(self, value: Number, unit: Enum) -> Quantity[Any]:
        return self.factory.from_value(value, unit)

    def try_from(self, value: Number, unit: Enum) -> Optional[Quantity[Any]]:
        return self.factory.try_from(value, unit)

    def parse(self, text: str, culture: CultureLike = None, kind: KindHint = None) -> Quantity[Any]:
        return self.parser.parse(text, culture, kind)

    def try_parse(self, text: str, culture: CultureLike = None, kind: KindHint = None) -> Optional[Quantity[Any]]:
        return self.parser.try_parse(text, culture, kind)

    def parse_unit(self, text: str, kind: KindHint = None, culture: CultureLike = None) -> Enum:
        return self.unit_parser.parse_unit(text, kind, culture)

    def try_parse_unit(self, text: str, kind: KindHint = None, culture: CultureLike = None) -> Optional[Enum]:
        return self.unit_parser.try_parse_unit(text, kind, culture)

    def convert(self, value: Number, from_unit: Enum, to_unit: Enum) -> Number:
        """Convert between two units; the kind is resolved from ``from_unit``'s type."""
        catalog = self._catalog
        info = catalog.lookup_kind_of(from_unit)
        return catalog.converter.convert(value, from_unit, to_unit, info)

    def convert_by_name(self, value: Number, kind_name: str, from_name: str, to_name: str) -> Number:
        """Convert using kind and unit names, e.g. ``("Length", "FOOT", "METER")``."""
        catalog = self._catalog
        info = catalog.lookup_by_name(kind_name)
        from_unit = catalog.lookup_unit(info.unit_type, from_name).value
        to_unit = catalog.lookup_unit(info.unit_type, to_name).value
        return catalog.converter.convert(value, from_unit, to_unit, info)

    def convert_by_abbreviation(
        self,
        value: Number,
        kind_name: str,
        from_abbreviation: str,
        to_abbreviation: str,
        culture: CultureLike = None,
    ) -> Number:
        """Convert using abbreviations, e.g. ``("Length", "ft", "m")``."""
        catalog = self._catalog
        info = catalog.lookup_by_name(kind_name)
        from_unit = self.unit_parser.parse_unit(from_abbreviation, info, culture)
        to_unit = self.unit_parser.parse_unit(to_abbreviation, info, culture)
        return catalog.converter.convert(value, from_unit, to_unit, info)

    def __repr__(self) -> str:
        return f"Registry(kinds={list(self.names)!r})"


# ---------------------------------------------------------------------------
# Process-wide default registry
# ---------------------------------------------------------------------------
_DEFAULT_REGISTRY: Optional[Registry] = None


def _bootstrap_default_registry() -> Registry:
    from quantikit.kinds import BUILTIN_KINDS  # local import: kinds import core only

    return Registry(BUILTIN_KINDS)


def get_default_registry() -> Registry:
    """Return the process-wide registry, building it with the built-in kinds on first use."""
    global _DEFAULT_REGISTRY
    reg = _DEFAULT_REGISTRY
    if reg is None:
        # concurrent first callers may each build one; whichever lands is complete
        reg = _bootstrap_default_registry()
        _DEFAULT_REGISTRY = reg
    return reg


def set_default_registry(registry: Optional[Registry]) -> None:
    """Replace the process-wide registry. ``None`` rebuilds the built-in one on next use."""
    global _DEFAULT_REGISTRY
    if registry is not None and not isinstance(registry, Registry):
        raise TypeError(f"Expected Registry, got {type(registry).__name__}")
    _DEFAULT_REGISTRY = registry


__all__ = [
    "Catalog",
    "Registry",
    "get_default_registry",
    "set_default_registry",
]
