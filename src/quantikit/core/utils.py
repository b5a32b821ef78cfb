"""
quantikit.core.utils
====================

Small helpers shared by the registry, converter and parser: finiteness checks
for numeric input, normalisation of abbreviation text, and a compact
'kg·m/s²'-style rendering of base-dimension vectors.
"""

from __future__ import annotations

import math
import unicodedata
from decimal import Decimal
from typing import Any, List, Sequence

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def is_finite_number(value: Any) -> bool:
    """True for real numbers that are neither NaN nor ±Infinity.

    ``Decimal`` is checked with its own ``is_finite``; anything else that can be
    turned into a float is checked with :func:`math.isfinite`.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, int):
        return True
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def normalize_abbreviation(text: str) -> str:
    """Normalize abbreviation text for lookup.

    Rules:
    - Unicode normalize to NFC (composed forms like "µ", "°").
    - Strip surrounding whitespace.
    - Case is preserved; matching is case-sensitive everywhere.
    """
    if not text:
        return text
    return unicodedata.normalize("NFC", text.strip())


def format_dim(dim: Sequence[int]) -> str:
    """
    Turn a dimension vector (L,M,T,I,Θ,N,J) into 'kg·m/s²' style.
    Conventional order: M, L, T, I, Θ, N, J.
    """
    # indices: L=0 M=1 T=2 I=3 Θ=4 N=5 J=6
    labels: List[str] = ["m", "kg", "s", "A", "K", "mol", "cd"]
    order: List[int] = [1, 0, 2, 3, 4, 5, 6]

    num: List[str] = []
    den: List[str] = []
    for i in order:
        e = dim[i]
        if e > 0:
            num.append(labels[i] + _sup(e))
        elif e < 0:
            den.append(labels[i] + _sup(-e))

    numerator = "·".join(num) if num else "1"
    denominator = "·".join(den)
    return f"{numerator}/{denominator}" if denominator else numerator
