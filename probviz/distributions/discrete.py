# distributions/discrete.py
from __future__ import annotations

import math
from typing import Dict, List, Tuple

import numpy as np
import scipy.special as sc

from ..custom_types import Array, ArrayLike
from ..ranges import Range, checked_range
from ..special import log_combination
from .distribution import DiscreteDistribution
from .kinds import DistributionKind

__all__ = [
    "UniformDiscrete",
    "Bernoulli",
    "Binomial",
    "Geometric",
    "NegativeBinomial",
    "Poisson",
    "Hypergeometric",
]


class UniformDiscrete(DiscreteDistribution):
    """
    Uniform on the integers floor(a)..floor(b).
    """

    kind = DistributionKind.UNIFORM_DISCRETE

    @classmethod
    def _family_errors(cls, values: Dict[str, float]) -> List[str]:
        if "a" in values and "b" in values and values["a"] >= values["b"]:
            return ["a must be less than b"]
        return []

    @property
    def a(self) -> int:
        return math.floor(self._params["a"])

    @property
    def b(self) -> int:
        return math.floor(self._params["b"])

    @property
    def _count(self) -> int:
        return self.b - self.a + 1

    def pmf(self, k: int) -> float:
        if k < self.a or k > self.b:
            return 0.0
        return 1.0 / self._count

    def cdf(self, values: ArrayLike) -> Array:
        x = np.asarray(values, dtype=float)
        with np.errstate(invalid="ignore"):
            ramp = (np.floor(x) - self.a + 1) / self._count
        return np.where(x < self.a, 0.0, np.where(x >= self.b, 1.0, ramp))

    def support(self) -> Tuple[float, float]:
        return (float(self.a), float(self.b))

    def x_range(self) -> Range:
        lo, hi = sorted((self.a, self.b))
        return checked_range(lo, hi)

    def mean(self) -> float:
        return 0.5 * (self.a + self.b)

    def var(self) -> float:
        return (self._count ** 2 - 1) / 12.0


class Bernoulli(DiscreteDistribution):
    kind = DistributionKind.BERNOULLI
    PROBABILITIES = ("p",)

    @property
    def p(self) -> float:
        return self._params["p"]

    def pmf(self, k: int) -> float:
        if k == 0:
            return 1.0 - self.p
        if k == 1:
            return self.p
        return 0.0

    def cdf(self, values: ArrayLike) -> Array:
        x = np.asarray(values, dtype=float)
        return np.where(x < 0, 0.0, np.where(x < 1, 1.0 - self.p, 1.0))

    def support(self) -> Tuple[float, float]:
        return (0.0, 1.0)

    def x_range(self) -> Range:
        return Range(0.0, 1.0)

    def mean(self) -> float:
        return self.p

    def var(self) -> float:
        return self.p * (1.0 - self.p)


class Binomial(DiscreteDistribution):
    kind = DistributionKind.BINOMIAL
    PROBABILITIES = ("p",)

    @property
    def n(self) -> int:
        return int(self._params["n"])

    @property
    def p(self) -> float:
        return self._params["p"]

    def pmf(self, k: int) -> float:
        if k < 0 or k > self.n:
            return 0.0
        n, p = self.n, self.p
        return math.exp(log_combination(n, k) + sc.xlogy(k, p) + sc.xlog1py(n - k, -p))

    def support(self) -> Tuple[float, float]:
        return (0.0, float(self.n))

    def x_range(self) -> Range:
        return checked_range(0, max(1, self.n))

    def mean(self) -> float:
        return self.n * self.p

    def var(self) -> float:
        return self.n * self.p * (1.0 - self.p)


class Geometric(DiscreteDistribution):
    """
    Number of trials up to and including the first success, k = 1, 2, ...
    """

    kind = DistributionKind.GEOMETRIC
    PROBABILITIES = ("p",)

    @property
    def p(self) -> float:
        return self._params["p"]

    def pmf(self, k: int) -> float:
        if k < 1:
            return 0.0
        return (1.0 - self.p) ** (k - 1) * self.p

    def cdf(self, values: ArrayLike) -> Array:
        x = np.asarray(values, dtype=float)
        with np.errstate(invalid="ignore"):
            tail = np.power(1.0 - self.p, np.floor(np.where(x < 1, 1.0, x)))
        return np.where(x < 1, 0.0, 1.0 - tail)

    def support(self) -> Tuple[float, float]:
        return (1.0, math.inf)

    def x_range(self) -> Range:
        return Range(1.0, 20.0)

    def mean(self) -> float:
        return 1.0 / self.p

    def var(self) -> float:
        return (1.0 - self.p) / self.p ** 2


class NegativeBinomial(DiscreteDistribution):
    """
    Number of trials needed for the r-th success, k = r, r+1, ...
    """

    kind = DistributionKind.NEGATIVE_BINOMIAL
    PROBABILITIES = ("p",)

    @property
    def r(self) -> int:
        return int(self._params["r"])

    @property
    def p(self) -> float:
        return self._params["p"]

    def pmf(self, k: int) -> float:
        r, p = self.r, self.p
        if k < r:
            return 0.0
        return math.exp(log_combination(k - 1, r - 1) + sc.xlogy(r, p) + sc.xlog1py(k - r, -p))

    def support(self) -> Tuple[float, float]:
        return (float(self.r), math.inf)

    def x_range(self) -> Range:
        lo = max(1, self.r)
        hi = math.ceil(self.mean() + 4 * self.std())
        if hi < lo:
            hi = lo + 20
        return checked_range(lo, hi)

    def mean(self) -> float:
        return self.r / self.p

    def var(self) -> float:
        return self.r * (1.0 - self.p) / self.p ** 2


class Poisson(DiscreteDistribution):
    """
    Poisson(λ). The PMF is evaluated in log space,
    p(k) = exp(k log λ − λ − log k!), so e^−λ never underflows on its own.
    """

    kind = DistributionKind.POISSON
    POSITIVE = ("lambda",)

    @property
    def rate(self) -> float:
        return self._params["lambda"]

    def _pmf_table(self, lo: int, hi: int) -> Array:
        k = np.arange(lo, hi + 1, dtype=float)
        lam = self.rate
        return np.exp(sc.xlogy(k, lam) - lam - sc.gammaln(k + 1.0))

    def pmf(self, k: int) -> float:
        if k < 0:
            return 0.0
        return float(self._pmf_table(k, k)[0])

    def support(self) -> Tuple[float, float]:
        return (0.0, math.inf)

    def x_range(self) -> Range:
        lam = self.rate
        return checked_range(0, math.ceil(lam + 4 * math.sqrt(lam)))

    def mean(self) -> float:
        return self.rate

    def var(self) -> float:
        return self.rate


class Hypergeometric(DiscreteDistribution):
    """
    Successes in n draws without replacement from N items of which K are
    successes.
    """

    kind = DistributionKind.HYPERGEOMETRIC

    @classmethod
    def _family_errors(cls, values: Dict[str, float]) -> List[str]:
        errors = []
        if "N" in values:
            for name in ("K", "n"):
                if name in values and values[name] > values["N"]:
                    errors.append(f"{name} must be <= N")
        return errors

    @property
    def N(self) -> int:
        return int(self._params["N"])

    @property
    def K(self) -> int:
        return int(self._params["K"])

    @property
    def n(self) -> int:
        return int(self._params["n"])

    def pmf(self, k: int) -> float:
        N, K, n = self.N, self.K, self.n
        if k < max(0, n - (N - K)) or k > K or k > n or n > N:
            return 0.0
        log_p = log_combination(K, k) + log_combination(N - K, n - k) - log_combination(N, n)
        return math.exp(log_p)

    def support(self) -> Tuple[float, float]:
        return (0.0, float(min(self.K, self.n)))

    def x_range(self) -> Range:
        return checked_range(0, min(self.K, self.n))

    def mean(self) -> float:
        return self.n * self.K / self.N

    def var(self) -> float:
        N, K, n = self.N, self.K, self.n
        if N <= 1:
            return 0.0
        return n * (K / N) * ((N - K) / N) * ((N - n) / (N - 1))
