# distributions/kinds.py
"""
Catalogue of the supported distribution families.

Each family is a member of the closed :class:`DistributionKind` enum and owns
one immutable :class:`DistributionSpec` describing its parameters (with the
slider bounds the UI offers) and, for some continuous families, the LaTeX
formula shown next to the chart.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from ..exceptions import UnknownDistribution

__all__ = [
    "DistributionKind",
    "ParameterSpec",
    "DistributionSpec",
    "SPECS",
    "resolve_kind",
]


class DistributionKind(Enum):
    NORMAL = "Normal"
    EXPONENTIAL = "Exponential"
    GAMMA = "Gamma"
    BETA = "Beta"
    PARETO = "Pareto"
    UNIFORM_CONTINUOUS = "Uniform (continuous)"
    UNIFORM_DISCRETE = "Uniform (discrete)"
    BERNOULLI = "Bernoulli"
    BINOMIAL = "Binomial"
    GEOMETRIC = "Geometric"
    NEGATIVE_BINOMIAL = "Negative Binomial"
    POISSON = "Poisson"
    HYPERGEOMETRIC = "Hypergeometric"

    @property
    def display_name(self) -> str:
        """Name shown in the selector; both uniforms display as "Uniform"."""
        return self.value.split(" (")[0]


@dataclass(frozen=True)
class ParameterSpec:
    """Slider description for one parameter.

    Attributes:
        name: Parameter name as used in a ParameterSet.
        minimum: Lowest slider value.
        maximum: Highest slider value.
        step: Slider increment.
        default: Initial value.
        integer: Whether the parameter is a count.
    """
    name: str
    minimum: float = 0.01
    maximum: float = 20.0
    step: float = 0.01
    default: float = 1.0
    integer: bool = False


@dataclass(frozen=True)
class DistributionSpec:
    kind: DistributionKind
    is_discrete: bool
    params: Tuple[ParameterSpec, ...]
    formula: Optional[str] = None

    @property
    def param_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.params)

    def parameter(self, name: str) -> ParameterSpec:
        for p in self.params:
            if p.name == name:
                return p
        raise KeyError(name)

    def default_params(self) -> Dict[str, float]:
        return {p.name: p.default for p in self.params}


# ------------------------- Slider presets -------------------------

def _real(name: str) -> ParameterSpec:
    return ParameterSpec(name)

def _count(name: str) -> ParameterSpec:
    return ParameterSpec(name, minimum=1, maximum=100, step=1, default=10, integer=True)

def _prob(name: str = "p") -> ParameterSpec:
    return ParameterSpec(name, minimum=0.01, maximum=1.0, step=0.01, default=0.5)

def _shape(name: str) -> ParameterSpec:
    # Gamma/Beta shapes stay above 0.1 for stability
    return ParameterSpec(name, minimum=0.1, maximum=10.0, step=0.01, default=2.0)

_UNIFORM_PARAMS = (
    ParameterSpec("a", minimum=0, maximum=10, step=1, default=0),
    ParameterSpec("b", minimum=1, maximum=20, step=1, default=10),
)


_FORMULAS = {
    DistributionKind.NORMAL: (
        "f(x) = \\frac{1}{\\sigma \\sqrt{2\\pi}} "
        "\\exp\\left(-\\frac{1}{2} \\left(\\frac{x-\\mu}{\\sigma}\\right)^2\\right)"
    ),
    DistributionKind.EXPONENTIAL: "f(x) = \\lambda \\exp(-\\lambda x),\\quad x \\geq 0",
    DistributionKind.GAMMA: (
        "f(x) = \\frac{\\beta^{\\alpha} x^{\\alpha-1} e^{-\\beta x}}{\\Gamma(\\alpha)}"
    ),
    DistributionKind.BETA: "f(x) = \\frac{x^{\\alpha-1}(1-x)^{\\beta-1}}{B(\\alpha,\\beta)}",
    DistributionKind.UNIFORM_CONTINUOUS: "f(x) = \\frac{1}{b-a},\\quad a \\leq x \\leq b",
}


def _spec(kind: DistributionKind, is_discrete: bool, *params: ParameterSpec) -> DistributionSpec:
    return DistributionSpec(kind, is_discrete, tuple(params), _FORMULAS.get(kind))


_K = DistributionKind

SPECS: Mapping[DistributionKind, DistributionSpec] = MappingProxyType({
    _K.NORMAL: _spec(_K.NORMAL, False, _real("mu"), _real("sigma")),
    _K.EXPONENTIAL: _spec(_K.EXPONENTIAL, False, _real("lambda")),
    _K.GAMMA: _spec(_K.GAMMA, False, _shape("alpha"), _shape("beta")),
    _K.BETA: _spec(_K.BETA, False, _shape("alpha"), _shape("beta")),
    _K.PARETO: _spec(_K.PARETO, False, _real("xm"), _real("alpha")),
    _K.UNIFORM_CONTINUOUS: _spec(_K.UNIFORM_CONTINUOUS, False, *_UNIFORM_PARAMS),
    _K.UNIFORM_DISCRETE: _spec(_K.UNIFORM_DISCRETE, True, *_UNIFORM_PARAMS),
    _K.BERNOULLI: _spec(_K.BERNOULLI, True, _prob()),
    _K.BINOMIAL: _spec(_K.BINOMIAL, True, _count("n"), _prob()),
    _K.GEOMETRIC: _spec(_K.GEOMETRIC, True, _prob()),
    _K.NEGATIVE_BINOMIAL: _spec(_K.NEGATIVE_BINOMIAL, True, _count("r"), _prob()),
    _K.POISSON: _spec(_K.POISSON, True, _real("lambda")),
    _K.HYPERGEOMETRIC: _spec(_K.HYPERGEOMETRIC, True, _count("N"), _count("K"), _count("n")),
})

if set(SPECS) != set(DistributionKind):
    raise RuntimeError(f"SPECS is missing kinds: {set(DistributionKind) - set(SPECS)}")


def resolve_kind(kind: Union[DistributionKind, str]) -> DistributionKind:
    """Accept an enum member, its value ("Negative Binomial") or its name."""
    if isinstance(kind, DistributionKind):
        return kind
    if isinstance(kind, str):
        for member in DistributionKind:
            if kind in (member.value, member.name):
                return member
    raise UnknownDistribution(kind)
