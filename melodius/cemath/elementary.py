"""Arctangent, tangent, hyperbolic sine, log1p and integral powers.

The functions use series and continued-fraction expansions rather than the
platform's math library, and never raise on overflow: they return infinities
or NaN the way IEEE arithmetic would.
"""

from __future__ import annotations

import math
import sys

from melodius.cemath.checks import is_finite, is_nan, is_odd

_EPSILON = sys.float_info.epsilon
_PI = 3.141592653589793238462643383279502884197
_HALF_PI = 1.570796326794896619231321691639751442099
_NAN = float("nan")
_INF = float("inf")

_LLINT_MIN = -(2**63)
_LLINT_MAX = 2**63 - 1


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return _INF


def _log(x: float) -> float:
    if is_nan(x) or x < 0:
        return _NAN
    if x == 0:
        return -_INF
    return math.log(x)


def _floor(x: float) -> float:
    if not is_finite(x):
        return x
    return float(math.floor(x))


# ---------------------------------------------------------------------------
# Integral powers


def pow_integral(base, exponent):
    """``base`` raised to an integral power, by repeated squaring.

    A non-integral exponent is truncated toward zero first.
    """
    if not isinstance(exponent, int):
        exponent = int(exponent)
    return _pow_integral_compute(base, exponent)


def _pow_integral_compute(base, exponent: int):
    if exponent == 3:
        return base * base * base
    if exponent == 2:
        return base * base
    if exponent == 1:
        return base
    if exponent == 0:
        return 1 if isinstance(base, int) else 1.0
    if exponent == _LLINT_MIN:
        return 0.0
    if exponent == _LLINT_MAX:
        return _INF
    if exponent < 0:
        denominator = _pow_integral_compute(base, -exponent)
        if denominator == 0:
            return _INF
        return 1.0 / denominator
    return _pow_by_squaring(base, exponent)


def _pow_by_squaring(base, exponent: int):
    value = 1 if isinstance(base, int) else 1.0
    while exponent > 1:
        if is_odd(exponent):
            value = value * base
        base = base * base
        exponent //= 2
    return value * base if exponent == 1 else value


# ---------------------------------------------------------------------------
# Arctangent


def _atan_series(x: float, max_order: int) -> float:
    xx = x * x
    x_pow = x**3
    terms = []
    for order in range(2, max_order + 1):
        terms.append(
            1.0 / ((4 * (order - 1) - 1) * x_pow) - 1.0 / ((4 * (order - 1) + 1) * x_pow * xx)
        )
        x_pow = x_pow * xx * xx
    tail = 0.0
    for term in reversed(terms):
        tail = term + tail
    return _HALF_PI - 1.0 / x + tail


_ATAN_SERIES_ORDERS = (
    (3.0, 10),
    (4.0, 9),
    (5.0, 8),
    (7.0, 7),
    (11.0, 6),
    (25.0, 5),
    (100.0, 4),
    (1000.0, 3),
)


def _atan_series_main(x: float) -> float:
    max_order = next((order for limit, order in _ATAN_SERIES_ORDERS if x < limit), 2)
    return _atan_series(x, max_order)


def _atan_cf(xx: float, max_depth: int) -> float:
    value = float(2 * max_depth - 1)
    for depth in range(max_depth - 1, 0, -1):
        value = (2 * depth - 1) + depth * depth * xx / value
    return value


def _atan_cf_main(x: float) -> float:
    if x < 0.5:
        depth = 15
    elif x < 1.0:
        depth = 25
    elif x < 1.5:
        depth = 35
    elif x < 2.0:
        depth = 45
    else:
        depth = 52
    return x / _atan_cf(x * x, depth)


def _atan_begin(x: float) -> float:
    return _atan_series_main(x) if x > 2.5 else _atan_cf_main(x)


def atan(x: float) -> float:
    """Arctangent of ``x`` in radians."""
    x = float(x)
    if is_nan(x):
        return _NAN
    if _EPSILON > abs(x):
        return 0.0
    if x < 0:
        return -_atan_begin(-x)
    return _atan_begin(x)


# ---------------------------------------------------------------------------
# Tangent


def _tan_series_exp_long(z: float) -> float:
    return -1 / z + (
        z / 3
        + (
            pow_integral(z, 3) / 45
            + (2 * pow_integral(z, 5) / 945 + pow_integral(z, 7) / 4725)
        )
    )


def _tan_series_exp(x: float) -> float:
    if _EPSILON > abs(x - _HALF_PI):
        # Conventional value of tan at the floating-point pi/2.
        return 1.633124e16
    return _tan_series_exp_long(x - _HALF_PI)


def _tan_cf(xx: float, max_depth: int) -> float:
    value = float(2 * max_depth - 1)
    for depth in range(max_depth - 1, 0, -1):
        value = (2 * depth - 1) - xx / value
    return value


def _tan_cf_main(x: float) -> float:
    if 1.55 < x < 1.60:
        return _tan_series_exp(x)
    if x > 1.4:
        return x / _tan_cf(x * x, 45)
    if x > 1.0:
        return x / _tan_cf(x * x, 35)
    return x / _tan_cf(x * x, 25)


def _tan_begin(x: float) -> float:
    count = 0
    while x > _PI:
        if count > 1:
            return _NAN
        x = x - _PI * _floor(x / _PI)
        count += 1
    return _tan_cf_main(x)


def tan(x: float) -> float:
    """Tangent of ``x`` (radians)."""
    x = float(x)
    if is_nan(x):
        return _NAN
    if _EPSILON > abs(x):
        return 0.0
    if x < 0:
        return -_tan_begin(-x)
    return _tan_begin(x)


# ---------------------------------------------------------------------------
# Hyperbolic sine and log1p


def sinh(x: float) -> float:
    """Hyperbolic sine of ``x``."""
    x = float(x)
    if is_nan(x):
        return _NAN
    if _EPSILON > abs(x):
        return 0.0
    return (_exp(x) - _exp(-x)) / 2.0


def _log1p_series(x: float) -> float:
    return x + x * (-x / 2.0 + x * (x / 3.0 + x * (-x / 4.0 + x * x / 5.0)))


def log1p(x: float) -> float:
    """Natural logarithm of ``1 + x``, with a series near zero."""
    x = float(x)
    if is_nan(x):
        return _NAN
    if abs(x) > 1e-04:
        return _log(1.0 + x)
    return _log1p_series(x)