import math

import pytest

from melodius.cemath.checks import (
    all_finite,
    all_nan,
    any_finite,
    any_nan,
    is_even,
    is_finite,
    is_nan,
    is_odd,
)

NAN = float("nan")
INF = float("inf")


@pytest.mark.parametrize("k", range(-6, 7))
def test_parity_of_constructed_integers(k):
    assert is_odd(2 * k + 1)
    assert not is_odd(2 * k)
    assert is_even(2 * k)
    assert not is_even(2 * k + 1)


@pytest.mark.parametrize("x", [0, 1, -1, 7, -8, 2**63 - 1, -(2**63)])
def test_even_is_complement_of_odd(x):
    assert is_even(x) == (not is_odd(x))


def test_is_nan():
    assert is_nan(NAN)
    assert not is_nan(1.0)
    assert not is_nan(INF)
    assert not is_nan(0)


def test_any_and_all_nan_two_values():
    assert any_nan(NAN, 1.0)
    assert not all_nan(NAN, 1.0)
    assert all_nan(NAN, NAN)
    assert not any_nan(1.0, 2.0)


def test_any_and_all_nan_three_values():
    assert any_nan(1.0, 2.0, NAN)
    assert not any_nan(1.0, 2.0, 3.0)
    assert all_nan(NAN, NAN, NAN)
    assert not all_nan(NAN, NAN, 0.0)


@pytest.mark.parametrize("x", [0.0, -3.5, 1e308, 5])
def test_finite_values(x):
    assert is_finite(x)


@pytest.mark.parametrize("x", [NAN, INF, -INF])
def test_non_finite_values(x):
    assert not is_finite(x)


def test_any_and_all_finite():
    assert any_finite(INF, 1.0)
    assert not all_finite(INF, 1.0)
    assert all_finite(1.0, 2.0, 3.0)
    assert not any_finite(NAN, INF, -INF)
    assert any_finite(NAN, INF, math.pi)


@pytest.mark.parametrize("func", [any_nan, all_nan, any_finite, all_finite])
def test_no_values_is_an_error(func):
    with pytest.raises(TypeError):
        func()