# presentation.py
"""
Renderer hand-off.

Turns a :class:`~probviz.sampling.Comparison` into plain series descriptions
a chart library can draw: continuous densities as filled lines, discrete
masses as bars, discrete CDFs as stepped lines. Nothing here touches a chart
object; the renderer owns its own update logic.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .custom_types import Array
from .distributions import Distribution
from .sampling import Comparison

__all__ = [
    "PlotSeries",
    "series_name",
    "pdf_series",
    "cdf_series",
    "overlap_series",
    "format_tick",
    "format_error_rate",
]


@dataclass(frozen=True)
class PlotSeries:
    label: str
    values: Array
    style: str  # "line" or "bar"
    stepped: bool = False
    fill: bool = False


def series_name(distribution: Distribution) -> str:
    return distribution.kind.display_name


def _names(comparison: Comparison, names: Optional[Sequence[str]]) -> Sequence[str]:
    if names is None:
        return (
            series_name(comparison.first_distribution),
            series_name(comparison.second_distribution),
        )
    if len(names) != 2:
        raise ValueError("names must hold exactly two labels")
    return names


def pdf_series(comparison: Comparison, names: Optional[Sequence[str]] = None) -> List[PlotSeries]:
    out = []
    dists = (comparison.first_distribution, comparison.second_distribution)
    curves = (comparison.first, comparison.second)
    for name, dist, curve in zip(_names(comparison, names), dists, curves):
        if dist.is_discrete:
            out.append(PlotSeries(f"{name} PMF", curve.pdf, "bar"))
        else:
            out.append(PlotSeries(f"{name} PDF", curve.pdf, "line", fill=True))
    return out


def cdf_series(comparison: Comparison, names: Optional[Sequence[str]] = None) -> List[PlotSeries]:
    dists = (comparison.first_distribution, comparison.second_distribution)
    curves = (comparison.first, comparison.second)
    return [
        PlotSeries(f"{name} CDF", curve.cdf, "line", stepped=dist.is_discrete, fill=True)
        for name, dist, curve in zip(_names(comparison, names), dists, curves)
    ]


def overlap_series(comparison: Comparison) -> PlotSeries:
    return PlotSeries("Overlap (Error Region)", comparison.overlap.min_curve, "line", fill=True)


def format_tick(value: float) -> str:
    """Whole numbers as integers, everything else with two decimals."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.2f}"


def format_error_rate(value: float) -> str:
    return f"Bayes Error Rate: {value:.4f}"
