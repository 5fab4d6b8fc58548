# bayes.py
"""
Two-class Bayes error demo: a Normal class-conditional density against a
Gamma one on a fixed grid over [0, 10].
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .distributions import Gamma, Normal
from .sampling import CurveResult, OverlapResult, SampleGrid, compute_overlap, evaluate_curve

__all__ = ["BayesDemo", "normal_vs_gamma"]


@dataclass(frozen=True)
class BayesDemo:
    grid: SampleGrid
    normal: CurveResult
    gamma: CurveResult
    overlap: OverlapResult

    @property
    def error_rate(self) -> float:
        return self.overlap.error_estimate


def normal_vs_gamma(
    mu: float,
    sigma: float,
    alpha: float,
    beta: float,
    *,
    step: float = 0.05,
    points: int = 201,
) -> BayesDemo:
    """Overlap of N(mu, sigma²) and Gamma(alpha, beta) on x_i = i * step.

    Grid points are rounded to two decimals; with the defaults the grid is
    0, 0.05, ..., 10.

    Raises:
        ParameterDomainError: If either parameter pair is invalid.
    """
    x = np.round(np.arange(points) * step, 2)
    x.setflags(write=False)
    grid = SampleGrid(x, step)
    normal = evaluate_curve(Normal(mu=mu, sigma=sigma), grid)
    gamma = evaluate_curve(Gamma(alpha=alpha, beta=beta), grid)
    return BayesDemo(grid, normal, gamma, compute_overlap(normal, gamma, grid))
