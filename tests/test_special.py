import math

import numpy as np
import pytest
import scipy.special as sc

from probviz.special import (
    beta_function,
    combination,
    erf,
    factorial,
    gamma,
    log_combination,
    log_gamma,
    regularized_incomplete_beta,
    regularized_lower_gamma,
)


# ------------------------------- gamma --------------------------------

def test_gamma_reference_values():
    assert gamma(5) == pytest.approx(24.0, rel=1e-10)
    assert gamma(0.5) == pytest.approx(1.7724539, rel=1e-7)
    assert gamma(0.5) == pytest.approx(math.sqrt(math.pi), rel=1e-12)


@pytest.mark.parametrize("n", range(1, 15))
def test_gamma_matches_factorial_on_integers(n):
    assert gamma(n) == pytest.approx(math.factorial(n - 1), rel=1e-6)


def test_gamma_reflection_for_small_arguments():
    # Γ(-1/2) = -2√π
    assert gamma(-0.5) == pytest.approx(-2.0 * math.sqrt(math.pi), rel=1e-10)
    assert gamma(0.1) == pytest.approx(sc.gamma(0.1), rel=1e-10)


@pytest.mark.parametrize("z", [0.0, -1.0, -3.0])
def test_gamma_poles_are_infinite(z):
    assert math.isinf(gamma(z))


def test_gamma_overflow_is_infinite():
    assert gamma(500.0) == math.inf


@pytest.mark.parametrize("z", [0.1, 0.5, 1.0, 2.5, 10.0, 150.0])
def test_log_gamma_matches_scipy(z):
    assert log_gamma(z) == pytest.approx(sc.gammaln(z), rel=1e-10, abs=1e-12)


def test_log_gamma_rejects_non_positive():
    with pytest.raises(ValueError):
        log_gamma(0.0)


# ------------------------------ erf ------------------------------------

def test_erf_reference_values():
    assert erf(0.0) == pytest.approx(0.0, abs=1e-8)
    assert erf(1.0) == pytest.approx(0.8427007929, abs=2e-7)
    assert erf(5.0) == pytest.approx(1.0, abs=1e-7)


def test_erf_is_odd_and_vectorised():
    x = np.linspace(-3, 3, 61)
    y = erf(x)
    assert isinstance(y, np.ndarray)
    assert y.shape == x.shape
    np.testing.assert_allclose(erf(-x), -y, atol=1e-8)
    np.testing.assert_allclose(y, sc.erf(x), atol=1.5e-7)


def test_erf_scalar_returns_float():
    assert isinstance(erf(0.3), float)


# -------------------------- factorial / C(n,k) --------------------------

def test_factorial():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(5) == 120
    assert factorial(171) == math.inf


def test_combination_reference_values():
    assert combination(5, 2) == 10
    assert combination(0, 0) == 1
    assert combination(5, 7) == 0
    assert combination(5, -1) == 0
    assert combination(7, 7) == 1
    assert combination(10, 3) == pytest.approx(120.0)


def test_combination_large_n_does_not_overflow():
    assert combination(1000, 3) == pytest.approx(1000 * 999 * 998 / 6, rel=1e-12)


def test_log_combination_matches_combination():
    for n, k in ((5, 2), (10, 3), (7, 7), (0, 0), (1000, 3)):
        assert log_combination(n, k) == pytest.approx(math.log(combination(n, k)), abs=1e-10)


def test_log_combination_stays_finite_for_large_n():
    value = log_combination(2000, 1000)
    assert math.isfinite(value)
    assert value == pytest.approx(sc.gammaln(2001) - 2 * sc.gammaln(1001), rel=1e-12)
    assert math.isinf(combination(2000, 1000))


def test_log_combination_outside_range():
    assert log_combination(5, 7) == -math.inf
    assert log_combination(5, -1) == -math.inf
    np.testing.assert_allclose(
        log_combination(10, np.array([0.0, 1.0, 2.0])),
        np.log([1.0, 10.0, 45.0]),
    )


def test_beta_function():
    assert beta_function(2, 3) == pytest.approx(1.0 / 12.0, rel=1e-12)
    assert beta_function(0.5, 0.5) == pytest.approx(math.pi, rel=1e-10)


# ------------------------- incomplete integrals -------------------------

@pytest.mark.parametrize("a", [0.3, 1.0, 2.0, 7.5, 20.0])
@pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 3.0, 10.0, 60.0])
def test_regularized_lower_gamma_matches_scipy(a, x):
    assert regularized_lower_gamma(a, x) == pytest.approx(sc.gammainc(a, x), abs=1e-7)


def test_regularized_lower_gamma_bounds():
    assert regularized_lower_gamma(2.0, 0.0) == 0.0
    assert regularized_lower_gamma(2.0, -1.0) == 0.0
    assert regularized_lower_gamma(2.0, math.inf) == 1.0


def test_regularized_lower_gamma_exponential_case():
    # P(1, x) = 1 - e^{-x}
    for x in (0.2, 1.0, 4.0):
        assert regularized_lower_gamma(1.0, x) == pytest.approx(1.0 - math.exp(-x), abs=1e-9)


@pytest.mark.parametrize("a,b", [(0.5, 0.5), (2.0, 5.0), (1.0, 1.0), (8.0, 2.0)])
@pytest.mark.parametrize("x", [0.001, 0.2, 0.5, 0.8, 0.999])
def test_regularized_incomplete_beta_matches_scipy(a, b, x):
    assert regularized_incomplete_beta(a, b, x) == pytest.approx(sc.betainc(a, b, x), abs=1e-8)


def test_regularized_incomplete_beta_bounds():
    assert regularized_incomplete_beta(2.0, 3.0, 0.0) == 0.0
    assert regularized_incomplete_beta(2.0, 3.0, 1.0) == 1.0
    assert regularized_incomplete_beta(2.0, 3.0, -0.5) == 0.0


def test_incomplete_integrals_accept_arrays():
    x = np.array([-1.0, 0.0, 0.5, 2.0, np.inf])
    np.testing.assert_allclose(
        regularized_lower_gamma(2.0, x),
        [0.0, 0.0, sc.gammainc(2.0, 0.5), sc.gammainc(2.0, 2.0), 1.0],
    )
    np.testing.assert_allclose(
        regularized_incomplete_beta(2.0, 3.0, np.array([-1.0, 0.25, 2.0])),
        [0.0, sc.betainc(2.0, 3.0, 0.25), 1.0],
    )
    assert isinstance(regularized_lower_gamma(2.0, 1.0), float)
