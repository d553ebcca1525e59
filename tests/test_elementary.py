import math

import pytest

from melodius.cemath.elementary import atan, log1p, pow_integral, sinh, tan

NAN = float("nan")
INF = float("inf")


@pytest.mark.parametrize("x", [0.3, 0.9, 1.3, 1.9, 2.4, 3.5, 6.0, 12.0, 150.0, 5000.0])
def test_atan_matches_reference(x):
    assert atan(x) == pytest.approx(math.atan(x), abs=1e-8)


@pytest.mark.parametrize("x", [0.2, 1.7, 4.0, 800.0])
def test_atan_is_odd(x):
    assert atan(-x) == -atan(x)


def test_atan_special_values():
    assert math.isnan(atan(NAN))
    assert atan(1e-20) == 0.0
    assert atan(INF) == pytest.approx(math.pi / 2)
    assert atan(3) == pytest.approx(math.atan(3), abs=1e-8)


@pytest.mark.parametrize("x", [0.1, 0.5, 0.9, 1.2, 1.5, 1.56, 1.58, 2.0, 3.0, 4.0, 10.0])
def test_tan_matches_reference(x):
    assert tan(x) == pytest.approx(math.tan(x), rel=1e-7)


@pytest.mark.parametrize("x", [0.3, 1.2, 2.5])
def test_tan_is_odd(x):
    assert tan(-x) == -tan(x)


def test_tan_at_half_pi_uses_conventional_value():
    assert tan(math.pi / 2) == 1.633124e16


def test_tan_special_values():
    assert math.isnan(tan(NAN))
    assert tan(1e-20) == 0.0
    assert math.isnan(tan(INF))


@pytest.mark.parametrize("x", [-5.0, -1.0, 0.25, 1.0, 3.0, 20.0])
def test_sinh_matches_reference(x):
    assert sinh(x) == pytest.approx(math.sinh(x), rel=1e-12)


def test_sinh_special_values():
    assert math.isnan(sinh(NAN))
    assert sinh(1e-20) == 0.0
    assert sinh(1000.0) == INF
    assert sinh(-1000.0) == -INF


@pytest.mark.parametrize("x", [1e-7, -5e-5, 9e-5, 0.5, 2.0, -0.9, 100.0])
def test_log1p_matches_reference(x):
    assert log1p(x) == pytest.approx(math.log1p(x), rel=1e-12)


def test_log1p_special_values():
    assert math.isnan(log1p(NAN))
    assert log1p(-1.0) == -INF
    assert math.isnan(log1p(-2.0))
    assert log1p(0.0) == 0.0


@pytest.mark.parametrize("base", [2, 3, -3, 7])
@pytest.mark.parametrize("exponent", [0, 1, 2, 3, 4, 5, 10, 17])
def test_pow_integral_integers(base, exponent):
    assert pow_integral(base, exponent) == base**exponent


@pytest.mark.parametrize("base", [1.5, -0.5, 2.0])
@pytest.mark.parametrize("exponent", [6, 9, 12])
def test_pow_integral_floats(base, exponent):
    assert pow_integral(base, exponent) == pytest.approx(base**exponent, rel=1e-15)


@pytest.mark.parametrize("exponent", [-1, -2, -5, -8])
def test_pow_integral_negative_exponent_is_reciprocal(exponent):
    assert pow_integral(2.0, exponent) * pow_integral(2.0, -exponent) == pytest.approx(1.0)


def test_pow_integral_truncates_non_integral_exponent():
    assert pow_integral(2.0, 3.7) == pow_integral(2.0, 3)
    assert pow_integral(3.0, -2.9) == pow_integral(3.0, -2)


def test_pow_integral_limits():
    assert pow_integral(3.0, 2**63 - 1) == INF
    assert pow_integral(3.0, -(2**63)) == 0.0


def test_pow_integral_overflow_gives_infinity():
    assert pow_integral(10.0, 400) == INF