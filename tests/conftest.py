import numpy as np
import pytest

from probviz.distributions import SPECS, make_distribution


@pytest.fixture
def standard_normal():
    return make_distribution("Normal", {"mu": 0.0, "sigma": 1.0})


@pytest.fixture
def poisson4():
    return make_distribution("Poisson", {"lambda": 4.0})


@pytest.fixture
def grid():
    return np.linspace(-5.0, 25.0, 601)


@pytest.fixture(params=sorted(SPECS, key=lambda k: k.value), ids=lambda k: k.value)
def default_distribution(request):
    """Every family at its slider defaults."""
    kind = request.param
    return make_distribution(kind, SPECS[kind].default_params())
