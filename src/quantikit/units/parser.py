"""
quantikit.units.parser
======================

Parsing of quantity strings such as ``"1.5 kg"`` or ``"-3,2e3 м"``.

Grammar::

    input  := ws* number ws+ unit ws*
    number := culture-specific float (sign, grouping, decimal separator, exponent)
    unit   := everything after the first whitespace run, trimmed

The split point is always the *first* whitespace run. There is no
backtracking, so numbers written with whitespace digit grouping ("1 000 m")
are not supported here even though :func:`~quantikit.units.cultures.parse_number`
accepts them.

Unit text is resolved against the abbreviation table:

* with a kind hint, only that kind's units are searched;
* without one, every kind is searched and a token that belongs to more than
  one kind raises :class:`~quantikit.core.errors.AmbiguousUnitError` listing
  the candidates. Matches inside a single kind resolve to its first declared
  matching unit.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Union

from quantikit.core.errors import (
    AmbiguousUnitError,
    MalformedNumberError,
    UnknownUnitError,
)
from quantikit.core.kind import KindInfo
from quantikit.core.quantity import Quantity
from quantikit.core.utils import normalize_abbreviation
from quantikit.units.cultures import CultureLike, get_culture, parse_number

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from quantikit.units.registry import Catalog, Registry

logger = logging.getLogger(__name__)

# A kind name, a KindInfo, or a quantity type such as Length.
KindHint = Union[str, KindInfo[Any], type, None]

_WS_RE = re.compile(r"\s+")


def split_quantity_text(text: str) -> Tuple[str, str]:
    """Split ``text`` at its first whitespace run into ``(number, unit)``."""
    if not isinstance(text, str):
        raise TypeError(f"Quantity text must be a str, got {type(text).__name__}")
    stripped = text.strip()
    if not stripped:
        raise MalformedNumberError(text)
    m = _WS_RE.search(stripped)
    if m is None:
        raise UnknownUnitError("", message=f"Missing unit text in {text!r}.")
    return stripped[: m.start()], stripped[m.end():].strip()


def _resolve_kind(catalog: "Catalog", kind: KindHint) -> KindInfo[Any]:
    if isinstance(kind, KindInfo):
        return kind
    if isinstance(kind, str):
        return catalog.lookup_by_name(kind)
    if isinstance(kind, type) and issubclass(kind, Quantity):
        info = getattr(kind, "info", None)
        if info is not None:
            return info
        return catalog.lookup_by_unit_type(kind.unit_type)
    raise TypeError(f"Kind hint must be a kind name, KindInfo or quantity type, got {kind!r}")


class UnitParser:
    """Resolves unit abbreviations to unit tags."""

    def __init__(self, registry: "Registry") -> None:
        self._registry = registry

    def resolve(
        self,
        text: str,
        kind: KindHint = None,
        culture: CultureLike = None,
        catalog: Optional["Catalog"] = None,
    ) -> Tuple[KindInfo[Any], Enum]:
        """Return ``(kind, unit)`` for the abbreviation ``text``."""
        catalog = catalog if catalog is not None else self._registry.catalog
        if culture is None:
            culture = self._registry.default_culture
        if not isinstance(text, str):
            raise TypeError(f"Unit text must be a str, got {type(text).__name__}")
        token = normalize_abbreviation(text)

        if kind is not None:
            info = _resolve_kind(catalog, kind)
            if not token:
                raise UnknownUnitError(text, info.name)
            found = catalog.abbreviations.find_units(token, culture, unit_types=(info.unit_type,))
            units = [u for u in found if info.has_unit(u)]
            if not units:
                raise UnknownUnitError(text, info.name)
            return info, _first_declared(info, units)

        if not token:
            raise UnknownUnitError(text)
        matches: Dict[str, Tuple[KindInfo[Any], List[Enum]]] = {}
        for unit in catalog.abbreviations.find_units(token, culture):
            owner = catalog.by_unit_type.get(type(unit))
            if owner is None or not owner.has_unit(unit):
                continue
            matches.setdefault(owner.name, (owner, []))[1].append(unit)

        if not matches:
            raise UnknownUnitError(text)
        if len(matches) > 1:
            raise AmbiguousUnitError(text, matches.keys())
        ((info, units),) = matches.values()
        return info, _first_declared(info, units)

    def parse_unit(self, text: str, kind: KindHint = None, culture: CultureLike = None) -> Enum:
        return self.resolve(text, kind, culture)[1]

    def try_parse_unit(self, text: str, kind: KindHint = None, culture: CultureLike = None) -> Optional[Enum]:
        try:
            return self.parse_unit(text, kind, culture)
        except Exception as e:
            logger.debug("try_parse_unit(%r, kind=%r) failed: %s", text, kind, e)
            return None


def _first_declared(info: KindInfo[Any], units: List[Enum]) -> Enum:
    if len(units) == 1:
        return units[0]
    wanted = set(units)
    for unit_info in info.units:
        if unit_info.value in wanted:
            return unit_info.value
    return units[0]


class QuantityParser:
    """Parses ``"<number> <unit>"`` strings into quantities."""

    def __init__(self, registry: "Registry") -> None:
        self._registry = registry

    def parse(self, text: str, culture: CultureLike = None, kind: KindHint = None) -> Quantity[Any]:
        """Parse ``text`` into a quantity.

        Raises
        ------
        MalformedNumberError
            Empty input or a numeric part that does not parse in ``culture``.
        UnknownUnitError
            Missing unit text, or no unit (of ``kind``, if given) matches it.
        AmbiguousUnitError
            No ``kind`` given and the unit text belongs to several kinds.
        """
        catalog = self._registry.catalog
        number_text, unit_text = split_quantity_text(text)
        value = parse_number(number_text, get_culture(culture, self._registry.default_culture))
        info, unit = self._registry.unit_parser.resolve(unit_text, kind, culture, catalog)
        return catalog.create(info, value, unit)

    def try_parse(self, text: str, culture: CultureLike = None, kind: KindHint = None) -> Optional[Quantity[Any]]:
        try:
            return self.parse(text, culture, kind)
        except Exception as e:
            logger.debug("try_parse(%r, kind=%r) failed: %s", text, kind, e)
            return None


__all__ = ["KindHint", "QuantityParser", "UnitParser", "split_quantity_text"]
