# exceptions.py
from __future__ import annotations

from typing import Iterable, Tuple

__all__ = [
    "ProbVizError",
    "ParameterDomainError",
    "NumericalDegeneracy",
    "UnsupportedRange",
    "UnknownDistribution",
]


class ProbVizError(Exception):
    """Base class for every error raised by probviz."""


class ParameterDomainError(ProbVizError, ValueError):
    """One or more parameters lie outside a distribution's valid domain.

    All violations are carried at once in :pyattr:`messages` so a caller can
    show the complete list instead of the first failure only.
    """

    def __init__(self, messages: Iterable[str]):
        self.messages: Tuple[str, ...] = tuple(messages)
        super().__init__("; ".join(self.messages) or "invalid parameters")


class NumericalDegeneracy(ProbVizError, ArithmeticError):
    """An evaluator produced NaN or an infinite value."""


class UnsupportedRange(ProbVizError, ValueError):
    """No finite, non-empty x-axis window exists for the given parameters."""


class UnknownDistribution(ProbVizError, KeyError):
    """The requested distribution kind is not part of the catalogue."""
