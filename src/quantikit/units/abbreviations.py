"""
quantikit.units.abbreviations
=============================

Per-culture abbreviation table: for each ``(culture, unit)`` an ordered list
of strings, the first being the default. Kinds populate it through their
``configure_abbreviations`` callback; callers may append entries at runtime.

Lookups in a culture that has no entry for a unit fall back to the fallback
culture (``en-US``), both for default abbreviations and for parsing.

All matching is case-sensitive ("mg" is not "Mg") after Unicode NFC
normalisation and trimming of surrounding whitespace.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Collection, Dict, List, Optional, Tuple

from quantikit.core.errors import UnknownUnitError
from quantikit.core.utils import normalize_abbreviation
from quantikit.units.cultures import CultureLike, culture_name

logger = logging.getLogger(__name__)

FALLBACK_CULTURE = "en-US"

# keyed by (culture, unit type, unit): IntEnum members of different kinds compare equal
_Entries = Dict[Tuple[str, type, Enum], Tuple[str, ...]]
_ReverseIndex = Dict[str, Tuple[Enum, ...]]


class UnitAbbreviations:
    """Mutable abbreviation table with a lazily rebuilt reverse index.

    The entries and the reverse-lookup cache are held together in one tuple
    that writers replace as a whole, so a reader always sees a cache that was
    built from the entries next to it.
    """

    def __init__(self, fallback_culture: str = FALLBACK_CULTURE) -> None:
        self.fallback_culture = fallback_culture
        self._write_lock = threading.Lock()
        self._state: Tuple[_Entries, Dict[str, _ReverseIndex]] = ({}, {})

    def _culture(self, culture: CultureLike) -> str:
        name = culture_name(culture)
        # the invariant culture has no entries of its own
        return name if name else self.fallback_culture

    # -------------------------- writers -------------------------------------
    def add(self, culture: CultureLike, unit: Enum, text: str) -> None:
        """Append ``text`` to ``unit``'s abbreviations in ``culture``.

        Existing entries, including the default, are kept; adding an
        abbreviation that is already present is a no-op.
        """
        key = normalize_abbreviation(text)
        if not key:
            raise ValueError("Abbreviation must be a non-empty string.")
        c = self._culture(culture)
        with self._write_lock:
            entries, _ = self._state
            current = entries.get((c, type(unit), unit), ())
            if key in current:
                return
            updated = dict(entries)
            updated[(c, type(unit), unit)] = current + (key,)
            self._state = (updated, {})

    def map_unit(self, unit: Enum, *abbreviations: str, culture: CultureLike = FALLBACK_CULTURE) -> None:
        """Map several abbreviations at once; used by kind configuration callbacks."""
        for text in abbreviations:
            self.add(culture, unit, text)

    # -------------------------- readers -------------------------------------
    def get_abbreviations(self, unit: Enum, culture: CultureLike = None) -> List[str]:
        """All abbreviations for ``unit``: the culture's own first, then fallback ones."""
        entries, _ = self._state
        c = self._culture(culture)
        own = list(entries.get((c, type(unit), unit), ()))
        if c != self.fallback_culture:
            own.extend(a for a in entries.get((self.fallback_culture, type(unit), unit), ()) if a not in own)
        return own

    def get_default_abbreviation(self, unit: Enum, culture: CultureLike = None) -> str:
        entries, _ = self._state
        c = self._culture(culture)
        own = entries.get((c, type(unit), unit)) or entries.get((self.fallback_culture, type(unit), unit))
        if not own:
            raise UnknownUnitError(
                getattr(unit, "name", str(unit)),
                message=f"No abbreviation is mapped for unit {unit!r}.",
            )
        return own[0]

    def find_units(
        self,
        text: str,
        culture: CultureLike = None,
        unit_types: Optional[Collection[type]] = None,
    ) -> List[Enum]:
        """Units whose abbreviations in ``culture`` (or the fallback) equal ``text``."""
        token = normalize_abbreviation(text)
        if not token:
            return []
        units = self._reverse_index(self._culture(culture)).get(token, ())
        if unit_types is not None:
            return [u for u in units if type(u) in unit_types]
        return list(units)

    def _reverse_index(self, culture: str) -> _ReverseIndex:
        entries, cache = self._state
        index = cache.get(culture)
        if index is None:
            index = self._build_reverse_index(entries, culture)
            # a concurrent add() installs a fresh cache; this one is then simply dropped
            cache[culture] = index
            logger.debug("Built abbreviation index for culture %r (%d entries)", culture, len(index))
        return index

    def _build_reverse_index(self, entries: _Entries, culture: str) -> _ReverseIndex:
        collected: Dict[str, List[Enum]] = {}
        cultures = (culture,) if culture == self.fallback_culture else (culture, self.fallback_culture)
        for wanted in cultures:
            for (c, _, unit), texts in entries.items():
                if c != wanted:
                    continue
                for text in texts:
                    bucket = collected.setdefault(text, [])
                    if not any(u is unit for u in bucket):
                        bucket.append(unit)
        return {text: tuple(units) for text, units in collected.items()}


__all__ = ["UnitAbbreviations", "FALLBACK_CULTURE"]
