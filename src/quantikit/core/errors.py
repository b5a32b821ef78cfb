"""
quantikit.core.errors
=====================

Exception hierarchy for the registry, converter, factory and parser.

Every error derives from :class:`QuantityError`, which is a ``ValueError`` so
callers catching ``ValueError`` around unit lookups keep working. Each error
keeps the offending input on the instance for programmatic inspection.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple


class QuantityError(ValueError):
    """Base class for all quantikit errors."""


class InvalidUnitError(QuantityError):
    """The unit tag is not recognised, or not declared by its kind."""

    def __init__(self, unit: Any, message: Optional[str] = None) -> None:
        self.unit = unit
        super().__init__(message or f"Unit {unit!r} is not a known unit of any registered kind.")


class UnregisteredUnitTypeError(InvalidUnitError):
    """The unit tag's type belongs to no registered kind at all."""

    def __init__(self, unit_type: type, unit: Any = None) -> None:
        self.unit_type = unit_type
        name = getattr(unit_type, "__qualname__", repr(unit_type))
        super().__init__(
            unit,
            f"Unit type {name} is not registered. Expected an enum type such as "
            "LengthUnit; did you pass a unit enum defined outside the registry?",
        )


class UnsupportedConversionError(QuantityError):
    """The unit is not declared for the kind being converted."""

    def __init__(self, kind: str, unit: Any, message: Optional[str] = None) -> None:
        self.kind = kind
        self.unit = unit
        super().__init__(message or f"No conversion for unit {unit!r} of kind {kind!r}.")


class MalformedNumberError(QuantityError):
    """The numeric portion could not be parsed under the requested culture."""

    def __init__(self, text: str, culture: str = "") -> None:
        self.text = text
        self.culture = culture
        where = f" for culture {culture!r}" if culture else ""
        super().__init__(f"Could not parse number from {text!r}{where}.")


class UnknownUnitError(QuantityError):
    """The abbreviation token matches nothing."""

    def __init__(self, text: str, kind: Optional[str] = None, message: Optional[str] = None) -> None:
        self.text = text
        self.kind = kind
        if message is None:
            scope = f" of kind {kind!r}" if kind else ""
            message = f"No unit{scope} found for abbreviation {text!r}."
        super().__init__(message)


class AmbiguousUnitError(QuantityError):
    """A kind-less lookup matched units of several kinds."""

    def __init__(self, text: str, candidates: Iterable[str]) -> None:
        self.text = text
        self.candidates: Tuple[str, ...] = tuple(sorted(candidates))
        super().__init__(
            f"Abbreviation {text!r} is ambiguous between kinds "
            f"{', '.join(self.candidates)}; pass a kind to disambiguate."
        )


class NonFiniteValueError(QuantityError):
    """NaN or ±Infinity supplied where a finite value is required."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Value must be finite, got {value!r}.")


class KindNotFoundError(QuantityError, KeyError):
    """No kind is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No kind registered under the name {name!r}.")

    def __str__(self) -> str:
        # KeyError would otherwise quote the message again
        return str(self.args[0])


class UnitNotFoundError(QuantityError):
    """No unit of the given type carries the requested name."""

    def __init__(self, unit_type: type, name: str) -> None:
        self.unit_type = unit_type
        self.name = name
        type_name = getattr(unit_type, "__qualname__", repr(unit_type))
        super().__init__(f"{type_name} has no registered unit named {name!r}.")


__all__ = [
    "QuantityError",
    "InvalidUnitError",
    "UnregisteredUnitTypeError",
    "UnsupportedConversionError",
    "MalformedNumberError",
    "UnknownUnitError",
    "AmbiguousUnitError",
    "NonFiniteValueError",
    "KindNotFoundError",
    "UnitNotFoundError",
]
