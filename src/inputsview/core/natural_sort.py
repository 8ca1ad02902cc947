"""Natural ("human") ordering of strings.

Digit runs compare by numeric value and letters compare case-insensitively,
so ``"input2"`` sorts before ``"Input10"``.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any

from natsort import natsort_keygen, ns

# int() refuses longer digit strings (sys.get_int_max_str_digits)
MAX_DIGITS = 4000

_LONG_RUN = re.compile(r"\d{%d,}" % (MAX_DIGITS + 1))
_natsort_key = natsort_keygen(alg=ns.IGNORECASE)


def _significant(run: str) -> str:
    return run.lstrip("0") or "0"


def _clamp(match: re.Match[str]) -> str:
    digits = _significant(match.group())
    return digits if len(digits) <= MAX_DIGITS else "9" * MAX_DIGITS


def natural_key(text: str) -> tuple[Any, ...]:
    # runs too long to convert are clamped for natsort and then ordered
    # exactly by (length, digits) as a tie-breaker
    overflow = tuple(
        (len(digits), digits)
        for digits in map(_significant, _LONG_RUN.findall(text))
        if len(digits) > MAX_DIGITS
    )
    return _natsort_key(_LONG_RUN.sub(_clamp, text)), overflow


def natural_sorted[T](items: Iterable[T], key: Callable[[T], str]) -> list[T]:
    """Stable: items with equal keys keep their incoming order."""
    return sorted(items, key=lambda item: natural_key(key(item)))
