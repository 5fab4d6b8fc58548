# ranges.py
"""
x-axis window selection.

Each distribution proposes its own window through ``x_range()``; this module
holds the :class:`Range` value type and the logic that unions two windows
into the shared plotting range.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from .config import DEFAULT_CONFIG, GridConfig
from .exceptions import UnsupportedRange

if TYPE_CHECKING:
    from .distributions.distribution import Distribution

__all__ = [
    "Range",
    "checked_range",
    "union_range",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Range:
    """Closed interval [min, max] on the x-axis."""
    min: float
    max: float

    @property
    def width(self) -> float:
        return self.max - self.min

    def union(self, other: Range) -> Range:
        return Range(min(self.min, other.min), max(self.max, other.max))

    def clamp(self, lo: float, hi: float) -> Range:
        return Range(max(self.min, lo), min(self.max, hi))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.min, self.max)


def checked_range(lo: float, hi: float) -> Range:
    """Build a Range, refusing non-finite or inverted bounds.

    Raises:
        UnsupportedRange: If either bound is not finite or ``lo > hi``.
    """
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise UnsupportedRange(f"non-finite range [{lo}, {hi}]")
    if lo > hi:
        raise UnsupportedRange(f"empty range [{lo}, {hi}]")
    return Range(float(lo), float(hi))


def union_range(
    first: Distribution,
    second: Distribution,
    config: Optional[GridConfig] = None,
) -> Tuple[Range, Tuple[str, ...]]:
    """Shared window for two distributions.

    The two windows are unioned (min of minimums, max of maximums) and then
    clamped to the configured hard bounds. A side whose window cannot be
    computed falls back to ``config.default_range``; the fallback is logged
    and its message returned alongside the range.

    Returns:
        Tuple[Range, Tuple[str, ...]]: The clamped range and any warnings.
    """
    config = config or DEFAULT_CONFIG
    warnings = []
    ranges = []
    for index, dist in enumerate((first, second), start=1):
        try:
            ranges.append(dist.x_range())
        except UnsupportedRange as exc:
            msg = f"Distribution {index}: {exc}; using default range {config.default_range}"
            logger.warning(msg)
            warnings.append(msg)
            ranges.append(Range(*config.default_range))

    combined = ranges[0].union(ranges[1]).clamp(config.hard_min, config.hard_max)
    if combined.min > combined.max:
        # both sides sat entirely outside the hard bounds
        msg = f"range {combined.as_tuple()} lies outside the hard bounds; using default range"
        logger.warning(msg)
        warnings.append(msg)
        combined = Range(*config.default_range)
    return combined, tuple(warnings)
