# diagnostics.py
"""
Cross-check the hand-written evaluators against scipy.stats.

Useful for showing how far the rational/series approximations drift from a
reference implementation.
"""
from __future__ import annotations

import math
from typing import Dict

import numpy as np
import scipy.stats as sp

from .custom_types import ArrayLike
from .distributions import Distribution, DistributionKind

__all__ = ["reference_distribution", "approximation_error"]


def reference_distribution(dist: Distribution):
    """Frozen scipy.stats distribution equivalent to ``dist``."""
    k = DistributionKind
    p = dist.params
    kind = dist.kind
    if kind is k.NORMAL:
        return sp.norm(loc=p["mu"], scale=p["sigma"])
    if kind is k.EXPONENTIAL:
        return sp.expon(scale=1.0 / p["lambda"])
    if kind is k.GAMMA:
        return sp.gamma(a=p["alpha"], scale=1.0 / p["beta"])
    if kind is k.BETA:
        return sp.beta(a=p["alpha"], b=p["beta"])
    if kind is k.PARETO:
        return sp.pareto(b=p["alpha"], scale=p["xm"])
    if kind is k.UNIFORM_CONTINUOUS:
        return sp.uniform(loc=p["a"], scale=p["b"] - p["a"])
    if kind is k.UNIFORM_DISCRETE:
        a, b = math.floor(p["a"]), math.floor(p["b"])
        return sp.randint(low=a, high=b + 1)
    if kind is k.BERNOULLI:
        return sp.bernoulli(p=p["p"])
    if kind is k.BINOMIAL:
        return sp.binom(n=int(p["n"]), p=p["p"])
    if kind is k.GEOMETRIC:
        return sp.geom(p=p["p"])
    if kind is k.NEGATIVE_BINOMIAL:
        # scipy counts failures before the r-th success; shift to trial count
        r = int(p["r"])
        return sp.nbinom(n=r, p=p["p"], loc=r)
    if kind is k.POISSON:
        return sp.poisson(mu=p["lambda"])
    if kind is k.HYPERGEOMETRIC:
        return sp.hypergeom(M=int(p["N"]), n=int(p["K"]), N=int(p["n"]))
    raise NotImplementedError(f"no scipy reference for {kind.value}")


def approximation_error(dist: Distribution, x: ArrayLike) -> Dict[str, float]:
    """Maximum absolute density and CDF deviation from scipy on ``x``.

    Points where either side is non-finite (e.g. a Beta density pole) are
    ignored.
    """
    x = np.asarray(x, dtype=float)
    ref = reference_distribution(dist)
    ref_density = ref.pmf(x) if dist.is_discrete else ref.pdf(x)
    out = {}
    for name, ours, theirs in (
        ("density", dist.density(x), ref_density),
        ("cdf", dist.cdf(x), ref.cdf(x)),
    ):
        ok = np.isfinite(ours) & np.isfinite(theirs)
        out[name] = float(np.max(np.abs(ours[ok] - theirs[ok]))) if ok.any() else 0.0
    return out
