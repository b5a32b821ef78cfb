"""
quantikit.units.cultures
========================

Number formats per culture and the culture-aware number parser used for the
numeric part of quantity strings.

A culture only describes what the parser needs: its decimal separator and its
digit-group separator. Cultures are looked up by name ("de-DE"); a bare
language ("de") resolves to the first registered culture of that language.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Optional, Pattern, Union

from quantikit.core.errors import MalformedNumberError


@dataclass(frozen=True)
class Culture:
    """Number-format description of one culture."""

    name: str
    decimal_separator: str = "."
    group_separator: str = ","

    def __post_init__(self) -> None:
        if not self.decimal_separator:
            raise ValueError("decimal_separator must be non-empty")
        if self.decimal_separator == self.group_separator:
            raise ValueError("decimal_separator and group_separator must differ")

    @cached_property
    def number_pattern(self) -> Pattern[str]:
        d = re.escape(self.decimal_separator)
        g = re.escape(self.group_separator) if self.group_separator else None
        integer = rf"(?:\d{{1,3}}(?:{g}\d{{3}})+|\d+)" if g else r"\d+"
        return re.compile(
            rf"[+-]?(?:{integer}(?:{d}\d*)?|{d}\d+)(?:[eE][+-]?\d+)?",
            re.ASCII,
        )

    @property
    def language(self) -> str:
        return self.name.split("-", 1)[0]

    def __str__(self) -> str:
        return self.name or "invariant"


# ---------------------------------------------------------------------------
# Known cultures
# ---------------------------------------------------------------------------
INVARIANT = Culture("", ".", ",")

_CULTURES: Dict[str, Culture] = {
    c.name: c
    for c in (
        INVARIANT,
        Culture("en-US", ".", ","),
        Culture("en-GB", ".", ","),
        Culture("de-DE", ",", "."),
        Culture("fr-FR", ",", " "),
        Culture("nb-NO", ",", " "),
        Culture("sv-SE", ",", " "),
        Culture("ru-RU", ",", " "),
    )
}

CultureLike = Union[Culture, str, None]


def register_culture(culture: Culture, replace: bool = False) -> None:
    """Add a culture to the table of known cultures."""
    if culture.name in _CULTURES and not replace:
        raise ValueError(f"Culture {culture.name!r} is already registered.")
    _CULTURES[culture.name] = culture


def get_culture(culture: CultureLike, default: Culture = INVARIANT) -> Culture:
    """Resolve a culture name (or ``Culture``) to a ``Culture``.

    ``None`` selects ``default``. Unknown names raise ``ValueError``.
    """
    if culture is None:
        return default
    if isinstance(culture, Culture):
        return culture
    if not isinstance(culture, str):
        raise TypeError(f"culture must be a Culture, a str or None, got {type(culture).__name__}")

    found = _CULTURES.get(culture)
    if found is not None:
        return found
    # bare language ("de") or differently-cased tag ("de-de")
    folded = culture.casefold()
    for c in _CULTURES.values():
        if c.name.casefold() == folded:
            return c
    for c in _CULTURES.values():
        if c.name and c.language.casefold() == folded:
            return c
    raise ValueError(f"Unknown culture: {culture!r}")


def culture_name(culture: CultureLike) -> Optional[str]:
    """The name used to key abbreviations, or ``None`` for "use the default"."""
    if culture is None:
        return None
    if isinstance(culture, Culture):
        return culture.name
    return get_culture(culture).name


# ---------------------------------------------------------------------------
# Number parsing
# ---------------------------------------------------------------------------
def parse_number(text: str, culture: CultureLike = None) -> float:
    """Parse ``text`` as a float using ``culture``'s separators.

    Accepts an optional sign, digits with optional 3-digit grouping, the
    culture's decimal separator and an optional exponent. Rejects anything
    else, including values that overflow to infinity.
    """
    c = get_culture(culture)
    if not isinstance(text, str):
        raise MalformedNumberError(repr(text), c.name)
    s = text.strip()
    if not s or c.number_pattern.fullmatch(s) is None:
        raise MalformedNumberError(text, c.name)

    if c.group_separator:
        s = s.replace(c.group_separator, "")
    s = s.replace(c.decimal_separator, ".")
    value = float(s)
    if not math.isfinite(value):
        raise MalformedNumberError(text, c.name)
    return value


def try_parse_number(text: str, culture: CultureLike = None) -> Optional[float]:
    try:
        return parse_number(text, culture)
    except (MalformedNumberError, ValueError, TypeError):
        return None


__all__ = [
    "Culture",
    "INVARIANT",
    "register_culture",
    "get_culture",
    "culture_name",
    "parse_number",
    "try_parse_number",
]
