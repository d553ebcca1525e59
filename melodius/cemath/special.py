"""Inverse error function, beta functions, binomial coefficients and LCM.

Like the elementary functions, these never raise on overflow or on NaN
input. They return NaN or infinities instead.
"""

from __future__ import annotations

import math
import sys

from melodius.cemath.checks import any_nan, is_nan, is_odd

_EPSILON = sys.float_info.epsilon
_NAN = float("nan")
_INF = float("inf")

ERF_INV_MAX_ITER = 60
INCOMPLETE_BETA_TOL = 1e-15
INCOMPLETE_BETA_MAX_ITER = 205

# Polynomial coefficients of the initial guess for erf_inv, highest order first.
_ERF_INV_COEFS_SMALL = (
    2.81022636e-08,
    3.43273939e-07,
    -3.5233877e-06,
    -4.39150654e-06,
    0.00021858087,
    -0.00125372503,
    -0.004177681640,
    0.24664072700,
    1.50140941000,
)
_ERF_INV_COEFS_LARGE = (
    -0.000200214257,
    0.000100950558,
    0.00134934322,
    -0.003673428440,
    0.005739507730,
    -0.00762246130,
    0.009438870470,
    1.001674060000,
    2.83297682000,
)


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


def _lgamma(x: float) -> float:
    if is_nan(x):
        return _NAN
    try:
        return math.lgamma(x)
    except (ValueError, OverflowError):
        # Poles at non-positive integers, and overflow for huge arguments.
        return _INF


def _lbeta(a: float, b: float) -> float:
    return (_lgamma(a) + _lgamma(b)) - _lgamma(a + b)


# ---------------------------------------------------------------------------
# Inverse error function


def _horner(coefs: tuple[float, ...], a: float) -> float:
    result = 0.0
    for coef in coefs:
        result = coef + a * result
    return result


def _erf_inv_initial_val(x: float) -> float:
    a = -_log((1.0 - x) * (1.0 + x))
    if a < 5.0:
        guess = _horner(_ERF_INV_COEFS_SMALL, a - 2.5)
    else:
        guess = _horner(_ERF_INV_COEFS_LARGE, math.sqrt(a) - 3.0)
    return x * guess


def _erf_inv_halley(value: float, p: float, deriv_1: float) -> float:
    ratio_1 = (math.erf(value) - p) / deriv_1
    ratio_2 = (deriv_1 * (-2.0 * value)) / deriv_1
    return ratio_1 / max(0.8, min(1.2, 1.0 - 0.5 * ratio_1 * ratio_2))


def erf_inv(p: float) -> float:
    """Value ``x`` with ``erf(x) == p``, found by Halley's method."""
    p = float(p)
    if is_nan(p) or abs(p) > 1.0:
        return _NAN
    if _EPSILON > abs(1.0 - p):
        return _INF
    if _EPSILON > abs(1.0 + p):
        return -_INF

    value = _erf_inv_initial_val(p)
    deriv_1 = _exp(-value * value)
    iteration = 1
    while True:
        step = _erf_inv_halley(value, p, deriv_1)
        if iteration >= ERF_INV_MAX_ITER:
            return value - step
        # The derivative used on the next step is taken at the current point.
        deriv_1 = _exp(-value * value)
        value = value - step
        iteration += 1


# ---------------------------------------------------------------------------
# Beta functions


def beta(a: float, b: float) -> float:
    """Beta function ``Gamma(a) Gamma(b) / Gamma(a + b)``."""
    return _exp(_lbeta(float(a), float(b)))


def _incomplete_beta_coef(a: float, b: float, z: float, depth: int) -> float:
    if not is_odd(depth):
        k = depth // 2
        return -z * (a + k) * (a + b + k) / ((a + 2 * k) * (a + 2 * k + 1.0))
    k = (depth + 1) // 2
    return z * k * (b - k) / ((a + 2 * k - 1.0) * (a + 2 * k))


def _incomplete_beta_d_update(a: float, b: float, z: float, d_j: float, depth: int) -> float:
    return 1.0 / (1.0 + _incomplete_beta_coef(a, b, z, depth) * d_j)


def _incomplete_beta_cf(a: float, b: float, z: float) -> float:
    """Continued fraction evaluated with the modified Lentz method."""
    c_j = 1.0
    d_j = _incomplete_beta_d_update(a, b, z, 1.0, 0)
    f_j = d_j
    depth = 1
    while True:
        coef = _incomplete_beta_coef(a, b, z, depth)
        c_j = 1.0 + coef / c_j
        d_j = 1.0 / (1.0 + coef * d_j)
        f_j = f_j * c_j * d_j
        if abs(c_j * d_j - 1.0) < INCOMPLETE_BETA_TOL or depth >= INCOMPLETE_BETA_MAX_ITER:
            return f_j
        depth += 1


def _incomplete_beta_begin(a: float, b: float, z: float) -> float:
    prefactor = _exp(a * _log(z) + b * _log(1.0 - z) - _lbeta(a, b)) / a
    return prefactor * _incomplete_beta_cf(a, b, z)


def incomplete_beta(a: float, b: float, z: float) -> float:
    """Regularized incomplete beta function ``I_z(a, b)``."""
    a, b, z = float(a), float(b), float(z)
    if any_nan(a, b, z):
        return _NAN
    if _EPSILON > z:
        return 0.0
    if (a + 1.0) / (a + b + 2.0) > z:
        return _incomplete_beta_begin(a, b, z)
    return 1.0 - _incomplete_beta_begin(b, a, 1.0 - z)


# ---------------------------------------------------------------------------
# Binomial coefficients


def _binomial_int(n: int, k: int) -> int:
    if k == 0 or n == k:
        return 1
    if n < 0:
        raise ValueError(f"binomial coefficient needs a non-negative n, got {n}")
    if k < 0 or k > n:
        return 0
    return math.comb(n, k)


def binomial_coef(n, k):
    """``n`` choose ``k``; zero when ``k`` lies outside ``0..n``.

    Float arguments are truncated to integers and give a float result.
    """
    if isinstance(n, float) or isinstance(k, float):
        if any_nan(float(n), float(k)):
            return _NAN
        n_int, k_int = int(n), int(k)
        if n_int < 0:
            raise ValueError(f"binomial coefficient needs a non-negative n, got {n}")
        if k_int < 0:
            # A negative k wraps to a huge unsigned value, larger than n.
            return 0.0
        return float(_binomial_int(n_int, k_int))
    return _binomial_int(int(n), int(k))


def log_binomial_coef(n: float, k: float) -> float:
    """Natural logarithm of ``n`` choose ``k``, through log-gamma."""
    n, k = float(n), float(k)
    return _lgamma(n + 1.0) - (_lgamma(k + 1.0) + _lgamma(n - k + 1.0))


# ---------------------------------------------------------------------------
# Least common multiple


def lcm(a: int, b: int) -> int:
    """Least common multiple ``|a * b| / gcd(a, b)`` of two integers."""
    divisor = math.gcd(a, b)
    if divisor == 0:
        raise ValueError("least common multiple of 0 and 0 is undefined")
    return abs(a * (b // divisor))