"""Parity, NaN and finiteness predicates."""

from __future__ import annotations

import math


def is_odd(x: int) -> bool:
    """True when the integer ``x`` is odd."""
    return (x & 1) != 0


def is_even(x: int) -> bool:
    """True when the integer ``x`` is even."""
    return not is_odd(x)


def is_nan(x: float) -> bool:
    """True when ``x`` is NaN."""
    return x != x


def _require_values(args: tuple) -> None:
    if not args:
        raise TypeError("at least one value is required")


def any_nan(*args: float) -> bool:
    """True when at least one of the values is NaN."""
    _require_values(args)
    return any(is_nan(x) for x in args)


def all_nan(*args: float) -> bool:
    """True when every one of the values is NaN."""
    _require_values(args)
    return all(is_nan(x) for x in args)


def is_finite(x: float) -> bool:
    """True when ``x`` is neither NaN nor infinite."""
    return not is_nan(x) and not math.isinf(x)


def any_finite(*args: float) -> bool:
    """True when at least one of the values is finite."""
    _require_values(args)
    return any(is_finite(x) for x in args)


def all_finite(*args: float) -> bool:
    """True when every one of the values is finite."""
    _require_values(args)
    return all(is_finite(x) for x in args)