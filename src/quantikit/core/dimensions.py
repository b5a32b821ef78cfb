# quantikit.core.dimensions

from __future__ import annotations
from typing import Any, Iterable, Tuple, TypeAlias, Union

# --- Public typing -----------------------------------------------------------
DimTuple = Tuple[int, int, int, int, int, int, int]
DimLike: TypeAlias = Union["BaseDimensions", DimTuple, Iterable[int]]

_NAMES = ("L", "M", "T", "I", "Θ", "N", "J")

# --- Core object -------------------------------------------------------------

class BaseDimensions(tuple):
    """
    Immutable 7-length vector of integer exponents for the SI base dimensions
    (L, M, T, I, Θ, N, J).

    Every kind carries one of these. Two kinds with equal vectors describe the
    same physical dimension (e.g. ``Angle`` and ``Turbidity`` are both
    dimensionless), which is what ``Registry.kinds_with_base_dimensions``
    groups on.

    Tuple subclass => hashable, comparable, usable as dict keys.
    """

    __slots__ = ()

    def __new__(cls, data: DimLike = (0, 0, 0, 0, 0, 0, 0)) -> "BaseDimensions":
        if isinstance(data, BaseDimensions):
            return tuple.__new__(cls, data)

        t = tuple(data)
        if len(t) != 7:
            raise ValueError("BaseDimensions must have length 7 (L, M, T, I, Θ, N, J).")
        for x in t:
            if isinstance(x, bool) or not isinstance(x, int):
                raise TypeError(f"Dimension exponents must be int, got {type(x).__name__}")
        return tuple.__new__(cls, t)

    @classmethod
    def of(
        cls,
        *,
        length: int = 0,
        mass: int = 0,
        time: int = 0,
        current: int = 0,
        temperature: int = 0,
        amount: int = 0,
        luminous_intensity: int = 0,
    ) -> "BaseDimensions":
        return cls((length, mass, time, current, temperature, amount, luminous_intensity))

    # --- Algebra ---
    def __mul__(self, other: DimLike) -> "BaseDimensions":  # type: ignore[override]
        o = BaseDimensions(other)
        return BaseDimensions(x + y for x, y in zip(self, o, strict=True))

    def __truediv__(self, other: DimLike) -> "BaseDimensions":
        o = BaseDimensions(other)
        return BaseDimensions(x - y for x, y in zip(self, o, strict=True))

    def __pow__(self, n: int, modulo: Any | None = None) -> "BaseDimensions":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for BaseDimensions.")
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Exponent must be int, got {type(n).__name__}")
        return BaseDimensions(e * n for e in self)

    def __rmul__(self, other: Any) -> "BaseDimensions":
        """Prevent (int * BaseDimensions) from falling back to tuple repetition."""
        return NotImplemented

    def __add__(self, other: Any) -> "BaseDimensions":
        """Block tuple concatenation."""
        return NotImplemented

    def __radd__(self, other: Any) -> "BaseDimensions":
        return NotImplemented

    # --- Named accessors ---
    @property
    def length(self) -> int:
        return self[0]

    @property
    def mass(self) -> int:
        return self[1]

    @property
    def time(self) -> int:
        return self[2]

    @property
    def current(self) -> int:
        return self[3]

    @property
    def temperature(self) -> int:
        return self[4]

    @property
    def amount(self) -> int:
        return self[5]

    @property
    def luminous_intensity(self) -> int:
        return self[6]

    @property
    def is_dimensionless(self) -> bool:
        return all(x == 0 for x in self)

    def as_tuple(self) -> DimTuple:
        return tuple(self)  # type: ignore[return-value]

    def __repr__(self) -> str:
        parts = "".join(f"[{n}^{v}]" for n, v in zip(_NAMES, self, strict=True) if v != 0)
        return f"BaseDimensions({parts or 'dimensionless'})"

    def __str__(self) -> str:
        from quantikit.core.utils import format_dim

        return format_dim(self)


# --- Public constants --------------------------------------------------------

DIMENSIONLESS = BaseDimensions((0, 0, 0, 0, 0, 0, 0))
LENGTH        = BaseDimensions((1, 0, 0, 0, 0, 0, 0))
MASS          = BaseDimensions((0, 1, 0, 0, 0, 0, 0))
TIME          = BaseDimensions((0, 0, 1, 0, 0, 0, 0))
CURRENT       = BaseDimensions((0, 0, 0, 1, 0, 0, 0))
TEMPERATURE   = BaseDimensions((0, 0, 0, 0, 1, 0, 0))
AMOUNT        = BaseDimensions((0, 0, 0, 0, 0, 1, 0))
LUMINOUS      = BaseDimensions((0, 0, 0, 0, 0, 0, 1))
