# sampling.py
"""
Shared-grid curve sampling and the overlap (error-region) estimate.

The pipeline is: validate both sides, union their x-ranges, build one grid
that serves continuous and discrete families alike, evaluate each side's
density and CDF on it, then take the pointwise minimum of the two densities
and integrate it with a left Riemann sum.

The integral of min(p1, p2) is the overlap of two class-conditional
densities. With equal priors it is the quantity the visualizer labels as the
Bayes error region; it is exact (up to sampling) only when both sides are
continuous. For discrete or mixed pairs it is a visual heuristic.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, Union

import numpy as np

from .config import DEFAULT_CONFIG, GridConfig
from .custom_types import Array, ParameterSet
from .distributions import Distribution, DistributionKind, make_distribution
from .exceptions import NumericalDegeneracy
from .ranges import Range, union_range
from .validation import validate_pair

__all__ = [
    "Selection",
    "SampleGrid",
    "CurveResult",
    "OverlapResult",
    "Comparison",
    "grid_step",
    "build_grid",
    "evaluate_curve",
    "compute_overlap",
    "compare",
]

logger = logging.getLogger(__name__)


def _frozen(values) -> Array:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


class Selection(NamedTuple):
    """One side of a comparison: a family and its parameter values."""
    kind: Union[DistributionKind, str]
    params: ParameterSet


@dataclass(frozen=True)
class SampleGrid:
    """Strictly increasing x-values plus the Riemann width used on them."""
    x: Array
    step: float

    def __len__(self) -> int:
        return int(self.x.shape[0])


@dataclass(frozen=True)
class CurveResult:
    pdf: Array
    cdf: Array
    degenerate_points: int = 0


@dataclass(frozen=True)
class OverlapResult:
    min_curve: Array
    error_estimate: float

    def formatted(self) -> str:
        return f"{self.error_estimate:.4f}"


@dataclass(frozen=True)
class Comparison:
    """Everything one evaluation pass hands to the renderer."""
    first_distribution: Distribution
    second_distribution: Distribution
    x_range: Range
    grid: SampleGrid
    first: CurveResult
    second: CurveResult
    overlap: OverlapResult
    warnings: Tuple[str, ...] = ()


# ---------------------------- grid ----------------------------

def grid_step(first: Distribution, second: Distribution, config: Optional[GridConfig] = None) -> float:
    """Riemann width for the pair.

    The fine continuous step (finer again when a Beta is involved) whenever
    either side is continuous, otherwise the unit integer spacing.
    """
    config = config or DEFAULT_CONFIG
    if first.is_discrete and second.is_discrete:
        return 1.0
    if DistributionKind.BETA in (first.kind, second.kind):
        return config.beta_step
    return config.fine_step


def build_grid(
    first: Distribution,
    second: Distribution,
    x_range: Range,
    config: Optional[GridConfig] = None,
) -> SampleGrid:
    """Shared x-grid for two distributions over ``x_range``.

    A continuous side contributes ``min + i * step`` up to and including
    ``max`` (rounded so that whole numbers coincide with the integer points);
    a discrete side contributes every integer in range. The union is sorted
    and deduplicated.
    """
    config = config or DEFAULT_CONFIG
    step = grid_step(first, second, config)
    parts = []

    if not (first.is_discrete and second.is_discrete):
        n = int(math.floor(x_range.width / step + 1e-9))
        fine = x_range.min + np.arange(n + 1) * step
        parts.append(np.round(fine, config.decimals))

    if first.is_discrete or second.is_discrete:
        lo, hi = math.ceil(x_range.min), math.floor(x_range.max)
        parts.append(np.arange(lo, hi + 1, dtype=float))

    x = np.unique(np.concatenate(parts)) if parts else np.empty(0)
    logger.debug("built grid of %d points over [%g, %g] (step %g)", x.size, x_range.min, x_range.max, step)
    return SampleGrid(_frozen(x), step)


# ------------------------- evaluation -------------------------

def _sanitize(values: Array, label: str, strict: bool) -> Tuple[Array, int]:
    bad = ~np.isfinite(values)
    count = int(bad.sum())
    if count:
        if strict:
            raise NumericalDegeneracy(f"{label}: {count} non-finite values")
        logger.debug("%s: coerced %d non-finite values to 0", label, count)
        values = np.where(bad, 0.0, values)
    return values, count


def evaluate_curve(distribution: Distribution, grid: SampleGrid, *, strict: bool = False) -> CurveResult:
    """Density and CDF of ``distribution`` at every grid point.

    NaN and infinite values are replaced by 0 and counted in
    ``degenerate_points``.

    Raises:
        NumericalDegeneracy: Only with ``strict=True``, instead of coercing.
    """
    pdf, bad_pdf = _sanitize(distribution.density(grid.x), f"{distribution!r} density", strict)
    cdf, bad_cdf = _sanitize(distribution.cdf(grid.x), f"{distribution!r} cdf", strict)
    return CurveResult(_frozen(pdf), _frozen(cdf), bad_pdf + bad_cdf)


def compute_overlap(first: CurveResult, second: CurveResult, grid: SampleGrid) -> OverlapResult:
    """Pointwise minimum of the two densities and its left Riemann sum."""
    if not (first.pdf.shape == second.pdf.shape == grid.x.shape):
        raise ValueError("curves and grid must have the same length")
    min_curve = np.minimum(first.pdf, second.pdf)
    return OverlapResult(_frozen(min_curve), float(min_curve.sum() * grid.step))


def compare(
    first: Tuple[Union[DistributionKind, str], ParameterSet],
    second: Tuple[Union[DistributionKind, str], ParameterSet],
    config: Optional[GridConfig] = None,
    *,
    strict: bool = False,
) -> Comparison:
    """Run the full evaluation pass for two (kind, params) selections.

    Raises:
        ParameterDomainError: Listing every violation on either side; nothing
            is evaluated in that case.
    """
    first, second = Selection(*first), Selection(*second)
    validate_pair(first, second).raise_for_errors()

    dist1 = make_distribution(first.kind, first.params)
    dist2 = make_distribution(second.kind, second.params)

    x_range, warnings = union_range(dist1, dist2, config)
    grid = build_grid(dist1, dist2, x_range, config)
    curve1 = evaluate_curve(dist1, grid, strict=strict)
    curve2 = evaluate_curve(dist2, grid, strict=strict)
    overlap = compute_overlap(curve1, curve2, grid)

    return Comparison(
        first_distribution=dist1,
        second_distribution=dist2,
        x_range=x_range,
        grid=grid,
        first=curve1,
        second=curve2,
        overlap=overlap,
        warnings=warnings,
    )
