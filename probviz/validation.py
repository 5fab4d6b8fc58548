# validation.py
"""
Parameter validation ahead of evaluation.

Validation is all-errors-at-once: every violation of every distribution is
collected so the caller can show the complete list, and evaluation is
skipped entirely whenever the list is non-empty.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

from .custom_types import ParameterSet
from .distributions import DistributionKind, distribution_class
from .exceptions import ParameterDomainError

__all__ = [
    "ValidationResult",
    "validate_parameters",
    "validate_pair",
]


@dataclass(frozen=True)
class ValidationResult:
    """Verdict plus every violation message (empty when valid)."""
    messages: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        return not self.messages

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_errors(self) -> None:
        """
        Raises:
            ParameterDomainError: Carrying all messages, if any.
        """
        if self.messages:
            raise ParameterDomainError(self.messages)


def validate_parameters(kind: Union[DistributionKind, str], params: ParameterSet) -> ValidationResult:
    """Check ``params`` against the domain rules of ``kind``."""
    return ValidationResult(tuple(distribution_class(kind).parameter_errors(params)))


def validate_pair(
    first: Tuple[Union[DistributionKind, str], ParameterSet],
    second: Tuple[Union[DistributionKind, str], ParameterSet],
) -> ValidationResult:
    """Validate both sides of a comparison.

    Each message is prefixed with ``"Distribution 1: "`` or
    ``"Distribution 2: "``.
    """
    messages = []
    for index, (kind, params) in enumerate((first, second), start=1):
        for msg in validate_parameters(kind, params).messages:
            messages.append(f"Distribution {index}: {msg}")
    return ValidationResult(tuple(messages))
