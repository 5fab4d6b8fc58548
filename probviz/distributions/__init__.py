from types import MappingProxyType
from typing import Mapping, Type, Union

from ..custom_types import ParameterSet
from ..exceptions import UnknownDistribution
from .kinds import DistributionKind, DistributionSpec, ParameterSpec, SPECS, resolve_kind
from .distribution import Distribution, ContinuousDistribution, DiscreteDistribution
from .continuous import Normal, Exponential, Gamma, Beta, Pareto, UniformContinuous
from .discrete import (
    UniformDiscrete,
    Bernoulli,
    Binomial,
    Geometric,
    NegativeBinomial,
    Poisson,
    Hypergeometric,
)

DISTRIBUTIONS: Mapping[DistributionKind, Type[Distribution]] = MappingProxyType({
    cls.kind: cls
    for cls in (
        Normal, Exponential, Gamma, Beta, Pareto, UniformContinuous,
        UniformDiscrete, Bernoulli, Binomial, Geometric, NegativeBinomial,
        Poisson, Hypergeometric,
    )
})

# every kind must have an implementation
_unmapped = set(DistributionKind) - set(DISTRIBUTIONS)
if _unmapped:
    raise ImportError(f"No distribution class registered for: {sorted(k.value for k in _unmapped)}")


def distribution_class(kind: Union[DistributionKind, str]) -> Type[Distribution]:
    kind = resolve_kind(kind)
    try:
        return DISTRIBUTIONS[kind]
    except KeyError:
        raise UnknownDistribution(kind) from None


def make_distribution(kind: Union[DistributionKind, str], params: ParameterSet) -> Distribution:
    """Instantiate the family ``kind`` with ``params``.

    Raises:
        ParameterDomainError: If any parameter is outside its domain.
        UnknownDistribution: If ``kind`` is not in the catalogue.
    """
    return distribution_class(kind)(**dict(params))


__all__ = [
    "DistributionKind",
    "DistributionSpec",
    "ParameterSpec",
    "SPECS",
    "DISTRIBUTIONS",
    "resolve_kind",
    "distribution_class",
    "make_distribution",
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    "Normal",
    "Exponential",
    "Gamma",
    "Beta",
    "Pareto",
    "UniformContinuous",
    "UniformDiscrete",
    "Bernoulli",
    "Binomial",
    "Geometric",
    "NegativeBinomial",
    "Poisson",
    "Hypergeometric",
]
