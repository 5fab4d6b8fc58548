import numpy as np
import pytest

from probviz.diagnostics import approximation_error, reference_distribution
from probviz.distributions import make_distribution


def test_defaults_agree_with_reference(default_distribution):
    rng = default_distribution.x_range()
    x = np.linspace(rng.min, rng.max, 97)
    if default_distribution.is_discrete:
        x = np.arange(np.floor(rng.min), np.ceil(rng.max) + 1)
    errors = approximation_error(default_distribution, x)
    assert set(errors) == {"density", "cdf"}
    assert errors["density"] <= 1e-6
    assert errors["cdf"] <= 1e-6


def test_normal_cdf_error_reflects_erf_approximation():
    dist = make_distribution("Normal", {"mu": 0.0, "sigma": 1.0})
    errors = approximation_error(dist, np.linspace(-4, 4, 81))
    assert 0.0 < errors["cdf"] < 1e-6


def test_poles_are_ignored():
    dist = make_distribution("Beta", {"alpha": 0.5, "beta": 0.5})
    errors = approximation_error(dist, np.linspace(0.0, 1.0, 21))
    assert np.isfinite(errors["density"])
    assert errors["density"] < 1e-6


@pytest.mark.parametrize("kind,params,mean", [
    ("Negative Binomial", {"r": 3, "p": 0.5}, 6.0),
    ("Hypergeometric", {"N": 50, "K": 10, "n": 5}, 1.0),
    ("Uniform (discrete)", {"a": 2, "b": 6}, 4.0),
    ("Pareto", {"xm": 1.0, "alpha": 3.0}, 1.5),
])
def test_reference_parameterisation(kind, params, mean):
    ref = reference_distribution(make_distribution(kind, params))
    assert ref.mean() == pytest.approx(mean)
