import pytest

from probviz.distributions import (
    DISTRIBUTIONS,
    SPECS,
    DistributionKind,
    Normal,
    distribution_class,
    make_distribution,
    resolve_kind,
)
from probviz.exceptions import UnknownDistribution


def test_every_kind_has_metadata_and_a_class():
    assert set(SPECS) == set(DistributionKind)
    assert set(DISTRIBUTIONS) == set(DistributionKind)
    for kind, cls in DISTRIBUTIONS.items():
        assert cls.kind is kind


def test_discreteness_matches_class_hierarchy(default_distribution):
    assert default_distribution.is_discrete == SPECS[default_distribution.kind].is_discrete


def test_slider_defaults_are_valid(default_distribution):
    spec = default_distribution.spec
    for p in spec.params:
        assert p.minimum <= p.default <= p.maximum


def test_param_names_keep_declaration_order():
    assert SPECS[DistributionKind.HYPERGEOMETRIC].param_names == ("N", "K", "n")
    assert SPECS[DistributionKind.PARETO].param_names == ("xm", "alpha")


def test_slider_presets():
    gamma = SPECS[DistributionKind.GAMMA]
    assert (gamma.parameter("alpha").minimum, gamma.parameter("alpha").default) == (0.1, 2.0)
    binom = SPECS[DistributionKind.BINOMIAL]
    assert binom.parameter("n").integer and binom.parameter("n").step == 1
    assert SPECS[DistributionKind.BERNOULLI].default_params() == {"p": 0.5}
    assert SPECS[DistributionKind.UNIFORM_DISCRETE].default_params() == {"a": 0, "b": 10}
    with pytest.raises(KeyError):
        gamma.parameter("sigma")


def test_formulas_for_continuous_families():
    assert "\\sigma" in SPECS[DistributionKind.NORMAL].formula
    assert SPECS[DistributionKind.PARETO].formula is None
    assert SPECS[DistributionKind.POISSON].formula is None


def test_display_names():
    assert DistributionKind.UNIFORM_CONTINUOUS.display_name == "Uniform"
    assert DistributionKind.UNIFORM_DISCRETE.display_name == "Uniform"
    assert DistributionKind.NEGATIVE_BINOMIAL.display_name == "Negative Binomial"


@pytest.mark.parametrize("name", ["Normal", "NORMAL", DistributionKind.NORMAL])
def test_resolve_kind(name):
    assert resolve_kind(name) is DistributionKind.NORMAL
    assert distribution_class(name) is Normal


def test_unknown_kind():
    with pytest.raises(UnknownDistribution):
        resolve_kind("Cauchy")
    with pytest.raises(KeyError):
        make_distribution("Cauchy", {})


def test_make_distribution():
    d = make_distribution("Negative Binomial", {"r": 3, "p": 0.5})
    assert d.kind is DistributionKind.NEGATIVE_BINOMIAL
    assert d.params["r"] == 3.0
