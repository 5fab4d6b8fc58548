# distributions/continuous.py
from __future__ import annotations

import math
from typing import Dict, List, Tuple

import numpy as np

from ..custom_types import Array
from ..ranges import Range, checked_range
from ..special import beta_function, erf, log_gamma, regularized_incomplete_beta, regularized_lower_gamma
from .dist_utils import _clip_unit_interval
from .distribution import ContinuousDistribution
from .kinds import DistributionKind

__all__ = [
    "Normal",
    "Exponential",
    "Gamma",
    "Beta",
    "Pareto",
    "UniformContinuous",
]

_SQRT_2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)

# x-axis windows never reach past this for the unbounded continuous families
_AXIS_LIMIT = 100.0


class Normal(ContinuousDistribution):
    """
    Univariate Normal N(μ, σ²).

    The CDF goes through the rational ``erf`` approximation, so it carries
    an absolute error of about 1e-7.
    """

    kind = DistributionKind.NORMAL
    POSITIVE = ("sigma",)

    @property
    def mu(self) -> float:
        return self._params["mu"]

    @property
    def sigma(self) -> float:
        return self._params["sigma"]

    def _pdf(self, x: Array) -> Array:
        z = (x - self.mu) / self.sigma
        return np.exp(-0.5 * z * z) / (self.sigma * _SQRT_2PI)

    def _cdf(self, x: Array) -> Array:
        return 0.5 * (1.0 + erf((x - self.mu) / (self.sigma * _SQRT_2)))

    def support(self) -> Tuple[float, float]:
        return (-math.inf, math.inf)

    def x_range(self) -> Range:
        # μ ± 4σ, each end clamped separately
        lo = max(self.mu - 4 * self.sigma, -_AXIS_LIMIT)
        hi = min(self.mu + 4 * self.sigma, _AXIS_LIMIT)
        return checked_range(lo, hi)

    def mean(self) -> float:
        return self.mu

    def var(self) -> float:
        return self.sigma ** 2


class Exponential(ContinuousDistribution):
    kind = DistributionKind.EXPONENTIAL
    POSITIVE = ("lambda",)

    @property
    def rate(self) -> float:
        return self._params["lambda"]

    def _pdf(self, x: Array) -> Array:
        return np.where(x >= 0, self.rate * np.exp(-self.rate * x), 0.0)

    def _cdf(self, x: Array) -> Array:
        return np.where(x >= 0, -np.expm1(-self.rate * np.maximum(x, 0.0)), 0.0)

    def support(self) -> Tuple[float, float]:
        return (0.0, math.inf)

    def x_range(self) -> Range:
        return checked_range(0.0, min(8.0 / self.rate, _AXIS_LIMIT))

    def mean(self) -> float:
        return 1.0 / self.rate

    def var(self) -> float:
        return 1.0 / self.rate ** 2


class Gamma(ContinuousDistribution):
    """
    Gamma(α, β) with shape α and rate β.

    The density is evaluated in log space so large shapes do not overflow
    Γ(α). The CDF is the regularized lower incomplete gamma P(α, βx).
    """

    kind = DistributionKind.GAMMA
    POSITIVE = ("alpha", "beta")

    @property
    def alpha(self) -> float:
        return self._params["alpha"]

    @property
    def beta(self) -> float:
        return self._params["beta"]

    def _pdf(self, x: Array) -> Array:
        a, b = self.alpha, self.beta
        pos = x > 0
        safe = np.where(pos, x, 1.0)
        log_p = a * math.log(b) + (a - 1.0) * np.log(safe) - b * safe - log_gamma(a)
        return np.where(pos, np.exp(log_p), 0.0)

    def _cdf(self, x: Array) -> Array:
        a, b = self.alpha, self.beta
        return regularized_lower_gamma(a, b * x)

    def support(self) -> Tuple[float, float]:
        return (0.0, math.inf)

    def x_range(self) -> Range:
        hi = max(8.0, 4.0 * self.alpha / self.beta)
        return checked_range(0.0, min(hi, _AXIS_LIMIT))

    def mean(self) -> float:
        return self.alpha / self.beta

    def var(self) -> float:
        return self.alpha / self.beta ** 2


class Beta(ContinuousDistribution):
    """
    Beta(α, β) on [0, 1].

    For α < 1 (or β < 1) the density is unbounded at the matching end point;
    those points come back as ``inf`` and are left to the caller.
    """

    kind = DistributionKind.BETA
    POSITIVE = ("alpha", "beta")

    @property
    def alpha(self) -> float:
        return self._params["alpha"]

    @property
    def beta(self) -> float:
        return self._params["beta"]

    def _pdf(self, x: Array) -> Array:
        a, b = self.alpha, self.beta
        inside = (x >= 0) & (x <= 1)
        safe = np.where(inside, x, 0.5)
        vals = np.power(safe, a - 1.0) * np.power(1.0 - safe, b - 1.0) / beta_function(a, b)
        return np.where(inside, vals, 0.0)

    def _cdf(self, x: Array) -> Array:
        a, b = self.alpha, self.beta
        return regularized_incomplete_beta(a, b, x)

    def support(self) -> Tuple[float, float]:
        return (0.0, 1.0)

    def x_range(self) -> Range:
        return Range(0.0, 1.0)

    def mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    def var(self) -> float:
        s = self.alpha + self.beta
        return self.alpha * self.beta / (s * s * (s + 1.0))


class Pareto(ContinuousDistribution):
    kind = DistributionKind.PARETO
    POSITIVE = ("xm", "alpha")

    @property
    def xm(self) -> float:
        return self._params["xm"]

    @property
    def alpha(self) -> float:
        return self._params["alpha"]

    def _pdf(self, x: Array) -> Array:
        # α xm^α / x^(α+1), written with the ratio xm/x <= 1 on the support
        inside = x >= self.xm
        safe = np.where(inside, x, self.xm)
        return np.where(inside, self.alpha / safe * np.power(self.xm / safe, self.alpha), 0.0)

    def _cdf(self, x: Array) -> Array:
        inside = x >= self.xm
        safe = np.where(inside, x, self.xm)
        return np.where(inside, 1.0 - np.power(self.xm / safe, self.alpha), 0.0)

    def support(self) -> Tuple[float, float]:
        return (self.xm, math.inf)

    def x_range(self) -> Range:
        return checked_range(self.xm, min(self.xm + 8.0 * self.xm, _AXIS_LIMIT))

    def mean(self) -> float:
        if self.alpha <= 1:
            return math.inf
        return self.alpha * self.xm / (self.alpha - 1.0)

    def var(self) -> float:
        if self.alpha <= 2:
            return math.inf
        a = self.alpha
        return self.xm ** 2 * a / ((a - 1.0) ** 2 * (a - 2.0))


class UniformContinuous(ContinuousDistribution):
    kind = DistributionKind.UNIFORM_CONTINUOUS

    @classmethod
    def _family_errors(cls, values: Dict[str, float]) -> List[str]:
        if "a" in values and "b" in values and values["a"] >= values["b"]:
            return ["a must be less than b"]
        return []

    @property
    def a(self) -> float:
        return self._params["a"]

    @property
    def b(self) -> float:
        return self._params["b"]

    def _pdf(self, x: Array) -> Array:
        return np.where((x >= self.a) & (x <= self.b), 1.0 / (self.b - self.a), 0.0)

    def _cdf(self, x: Array) -> Array:
        return _clip_unit_interval((x - self.a) / (self.b - self.a))

    def support(self) -> Tuple[float, float]:
        return (self.a, self.b)

    def x_range(self) -> Range:
        lo, hi = sorted((self.a, self.b))
        return checked_range(lo, hi)

    def mean(self) -> float:
        return 0.5 * (self.a + self.b)

    def var(self) -> float:
        return (self.b - self.a) ** 2 / 12.0
