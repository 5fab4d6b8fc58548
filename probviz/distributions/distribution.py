# distributions/distribution.py
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, ClassVar, Dict, List, Mapping, Tuple

import numpy as np

from ..custom_types import Array, ArrayLike, ParameterSet
from ..exceptions import ParameterDomainError
from ..ranges import Range
from .dist_utils import _finite_or_zero, _integer_mask
from .kinds import DistributionKind, DistributionSpec, SPECS

__all__ = [
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
]

# -------------------------- Abstract Classes ----------------------------


class Distribution(ABC):
    """
    Abstract base class for any univariate distribution shown by probviz.

    Subclasses bind a :class:`DistributionKind` and implement the density,
    the CDF, the support and the plotting window. Parameters are validated at
    construction; every violation is reported at once through
    :class:`ParameterDomainError`.

    Class attributes used by the default parameter rules:
        kind: The family this class implements.
        POSITIVE: Parameters that must be strictly positive.
        PROBABILITIES: Parameters that must lie in (0, 1].
    Count parameters (n, N, K, r) are taken from ``ParameterSpec.integer``.
    """

    kind: ClassVar[DistributionKind]
    POSITIVE: ClassVar[Tuple[str, ...]] = ()
    PROBABILITIES: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, **params: float):
        errors = self.parameter_errors(params)
        if errors:
            raise ParameterDomainError(errors)
        self._params = MappingProxyType(
            {name: float(params[name]) for name in self.spec.param_names}
        )

    # ------------------- catalogue -------------------

    @property
    def spec(self) -> DistributionSpec:
        return SPECS[self.kind]

    @property
    def is_discrete(self) -> bool:
        return self.spec.is_discrete

    @property
    def params(self) -> Mapping[str, float]:
        """Read-only view of the parameter values."""
        return self._params

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v:g}" for k, v in self._params.items())
        return f"{type(self).__name__}({args})"

    # ------------------- parameter rules -------------------

    @classmethod
    def parameter_errors(cls, params: ParameterSet) -> List[str]:
        """Collect every domain violation in ``params``.

        Returns:
            List[str]: Human-readable messages, empty when the set is valid.
        """
        spec = SPECS[cls.kind]
        errors: List[str] = []

        for name in params:
            if name not in spec.param_names:
                errors.append(f"unknown parameter {name}")

        values: Dict[str, float] = {}
        for name in spec.param_names:
            if name not in params:
                errors.append(f"parameter {name} is missing")
                continue
            try:
                v = float(params[name])
            except (TypeError, ValueError):
                errors.append(f"parameter {name} is not a number")
                continue
            if math.isnan(v):
                errors.append(f"parameter {name} is not a number")
            elif math.isinf(v):
                errors.append(f"parameter {name} must be finite")
            else:
                values[name] = v

        for name in cls.POSITIVE:
            if name in values and values[name] <= 0:
                errors.append(f"{name} must be > 0")

        for p in spec.params:
            if p.integer and p.name in values:
                v = values[p.name]
                if v < 1:
                    errors.append(f"{p.name} must be >= 1")
                elif v != math.floor(v):
                    errors.append(f"{p.name} must be an integer")

        for name in cls.PROBABILITIES:
            if name in values and not (0.0 < values[name] <= 1.0):
                errors.append(f"{name} must be in (0, 1]")

        errors.extend(cls._family_errors(values))
        return errors

    @classmethod
    def _family_errors(cls, values: Dict[str, float]) -> List[str]:
        """Family-specific rules on the finite values present in ``values``."""
        return []

    # ------------------- evaluation -------------------

    @abstractmethod
    def density(self, values: ArrayLike) -> Array:
        """
        PDF (continuous) or PMF (discrete) at ``values``.

        Accepts a scalar or an array and returns a float array of the same
        shape. Points outside the support evaluate to 0.
        """
        raise NotImplementedError

    @abstractmethod
    def cdf(self, values: ArrayLike) -> Array:
        """
        P[X <= x] at ``values``, shaped like the input.
        """
        raise NotImplementedError

    @abstractmethod
    def support(self) -> Tuple[float, float]:
        """Closed bounds of the support; unbounded ends are ±inf."""
        raise NotImplementedError

    @abstractmethod
    def x_range(self) -> Range:
        """
        Finite plotting window for the current parameters.

        Raises:
            UnsupportedRange: If no finite, non-empty window exists.
        """
        raise NotImplementedError

    # ------------------- summaries -------------------

    @abstractmethod
    def mean(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def var(self) -> float:
        raise NotImplementedError

    def std(self) -> float:
        return math.sqrt(max(self.var(), 0.0))


class ContinuousDistribution(Distribution):
    """
    Continuous family: subclasses implement ``_pdf`` and ``_cdf`` on float
    arrays. Overflow and invalid-operation warnings are silenced here; the
    sampler decides what to do with non-finite values.
    """

    @abstractmethod
    def _pdf(self, x: Array) -> Array:
        raise NotImplementedError

    @abstractmethod
    def _cdf(self, x: Array) -> Array:
        raise NotImplementedError

    def density(self, values: ArrayLike) -> Array:
        x = np.asarray(values, dtype=float)
        with np.errstate(all="ignore"):
            return np.asarray(self._pdf(x), dtype=float)

    def cdf(self, values: ArrayLike) -> Array:
        x = np.asarray(values, dtype=float)
        with np.errstate(all="ignore"):
            return np.asarray(self._cdf(x), dtype=float)


class DiscreteDistribution(Distribution):
    """
    Integer-supported family.

    Subclasses implement the scalar ``pmf(k)``. The vectorised ``density`` and
    ``cdf`` build one PMF table over the integers they need and read from it,
    so ``cdf`` is exactly the cumulative sum of ``density`` over the support.
    The PMF is 0 at non-integer points and the CDF is evaluated at floor(x).

    Unbounded families stop the table at ``TABLE_LIMIT`` integers past the
    lower end of the support.
    """

    TABLE_LIMIT: ClassVar[int] = 10_000

    @abstractmethod
    def pmf(self, k: int) -> float:
        raise NotImplementedError

    def _pmf_table(self, lo: int, hi: int) -> Array:
        """PMF at k = lo..hi (inclusive); non-finite entries become 0."""
        table = np.array([self.pmf(k) for k in range(lo, hi + 1)], dtype=float)
        return _finite_or_zero(table)

    def _int_support(self) -> Tuple[int, float]:
        lo, hi = self.support()
        return int(lo), hi

    def _table_bounds(self, k_max: int) -> Tuple[int, int]:
        lo, hi = self._int_support()
        top = k_max if math.isinf(hi) else min(k_max, int(hi))
        return lo, min(top, lo + self.TABLE_LIMIT)

    def density(self, values: ArrayLike) -> Array:
        x = np.asarray(values, dtype=float)
        out = np.zeros(x.shape, dtype=float)
        lo, hi = self._int_support()
        mask = _integer_mask(x)
        mask &= (np.where(mask, x, lo) >= lo) & (np.where(mask, x, lo) <= hi)
        if not mask.any():
            return out
        ks = x[mask].astype(np.int64)
        t_lo, t_hi = self._table_bounds(int(ks.max()))
        table = self._pmf_table(t_lo, t_hi)
        vals = np.zeros(ks.shape, dtype=float)
        inside = ks <= t_hi
        vals[inside] = table[ks[inside] - t_lo]
        out[mask] = vals
        return out

    def cdf(self, values: ArrayLike) -> Array:
        x = np.asarray(values, dtype=float)
        out = np.zeros(x.shape, dtype=float)
        lo, hi = self._int_support()
        out[np.isposinf(x)] = 1.0
        finite = np.isfinite(x)
        floor = np.floor(np.where(finite, x, lo - 1))
        mask = finite & (floor >= lo)
        if not mask.any():
            return out
        ks = floor[mask]
        if not math.isinf(hi):
            ks = np.minimum(ks, hi)
        ks = ks.astype(np.int64)
        t_lo, t_hi = self._table_bounds(int(ks.max()))
        cumulative = np.cumsum(self._pmf_table(t_lo, t_hi))
        out[mask] = cumulative[np.minimum(ks, t_hi) - t_lo]
        return out
