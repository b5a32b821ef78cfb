"""
Quantikit: a registry-driven library of strongly-typed physical quantities.

Each quantity kind (Length, Mass, Temperature, ...) is a ``Quantity`` subclass
tagged with its own unit enum. A ``Registry`` knows every kind, converts
between the units of a kind, and parses culture-aware strings such as
``"1,5 кг"``. This module exposes a small, stable API delegating to the
process-wide default registry, which is built lazily on first use.
"""

import logging
from importlib import metadata as _metadata


__author__ = "Quantikit Developers"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("quantikit")
except _metadata.PackageNotFoundError:
    import tomllib
    try:
        with open("pyproject.toml", "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except FileNotFoundError:
        __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from enum import Enum

    from quantikit.core.dimensions import DimLike
    from quantikit.core.kind import KindInfo
    from quantikit.core.quantity import Number, Quantity
    from quantikit.units.cultures import CultureLike
    from quantikit.units.parser import KindHint
    from quantikit.units.registry import Registry

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "from_value",
    "try_from",
    "parse",
    "try_parse",
    "parse_unit",
    "try_parse_unit",
    "convert",
    "kind_names",
    "kind_infos",
    "kinds_with_base_dimensions",
    "get_default_registry",
    "set_default_registry",
]

# Lazy access helpers -------------------------------------------------------

def get_default_registry() -> "Registry":
    # Import here to avoid import-time side-effects / circular imports.
    from quantikit.units.registry import get_default_registry as _get  # local import
    return _get()


def set_default_registry(registry: Optional["Registry"]) -> None:
    from quantikit.units.registry import set_default_registry as _set
    _set(registry)


def from_value(value: "Number", unit: "Enum") -> "Quantity[Any]":
    """Construct a quantity of whichever registered kind owns ``unit``."""
    return get_default_registry().from_value(value, unit)


def try_from(value: "Number", unit: "Enum") -> Optional["Quantity[Any]"]:
    return get_default_registry().try_from(value, unit)


def parse(text: str, culture: "CultureLike" = None, kind: "KindHint" = None) -> "Quantity[Any]":
    """Parse ``"<number> <unit>"``, e.g. ``parse("1,5 kg", culture="de-DE")``."""
    return get_default_registry().parse(text, culture, kind)


def try_parse(text: str, culture: "CultureLike" = None, kind: "KindHint" = None) -> Optional["Quantity[Any]"]:
    return get_default_registry().try_parse(text, culture, kind)


def parse_unit(text: str, kind: "KindHint" = None, culture: "CultureLike" = None) -> "Enum":
    return get_default_registry().parse_unit(text, kind, culture)


def try_parse_unit(text: str, kind: "KindHint" = None, culture: "CultureLike" = None) -> Optional["Enum"]:
    return get_default_registry().try_parse_unit(text, kind, culture)


def convert(value: "Number", from_unit: "Enum", to_unit: "Enum") -> "Number":
    return get_default_registry().convert(value, from_unit, to_unit)


def kind_names() -> List[str]:
    return list(get_default_registry().names)


def kind_infos() -> List["KindInfo[Any]"]:
    return list(get_default_registry().infos)


def kinds_with_base_dimensions(dimensions: "DimLike") -> List["KindInfo[Any]"]:
    return get_default_registry().kinds_with_base_dimensions(dimensions)


_LAZY_KINDS = (
    "Length", "LengthUnit",
    "Mass", "MassUnit",
    "Duration", "DurationUnit",
    "Temperature", "TemperatureUnit",
    "Acceleration", "AccelerationUnit",
    "Angle", "AngleUnit",
    "Turbidity", "TurbidityUnit",
)


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. The built-in quantity types (``Length``,
    ``LengthUnit``, ...) are imported from :mod:`quantikit.kinds` on first use.
    """
    if name in _LAZY_KINDS:
        import quantikit.kinds as kinds
        return getattr(kinds, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_LAZY_KINDS))
