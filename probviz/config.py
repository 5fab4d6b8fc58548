# config.py
"""
Grid configuration for the sampling pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GridConfig:
    # continuous sampling step, and the finer one used whenever Beta is shown
    fine_step: float = 0.1
    beta_step: float = 0.01

    # hard bounds on the unioned x-range
    hard_min: float = -100.0
    hard_max: float = 1000.0

    # window used for a side whose range cannot be computed
    default_range: Tuple[float, float] = (0.0, 10.0)

    # decimals kept on fine-grid points so they line up with the integers
    decimals: int = 5

    def __post_init__(self):
        if self.fine_step <= 0 or self.beta_step <= 0:
            raise ValueError("grid steps must be > 0")
        if self.hard_min >= self.hard_max:
            raise ValueError("hard_min must be less than hard_max")
        lo, hi = self.default_range
        if lo >= hi:
            raise ValueError("default_range must be an increasing pair")


DEFAULT_CONFIG = GridConfig()
