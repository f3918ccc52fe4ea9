"""Shared types: ContractViolation."""

from __future__ import annotations


class ContractViolation(AssertionError):
    """Raised when a relative fraction lies outside [0, 1].

    This is a programmer error, not a recoverable condition. It subclasses
    AssertionError so that callers treat it like a failed assertion rather
    than catching it alongside input-validation errors.
    """

    def __init__(self, fraction: float) -> None:
        self.fraction = fraction
        super().__init__(
            f"fraction should be in the range [0, 1], but was {fraction}"
        )


def check_fraction(fraction: float) -> None:
    """Raise ContractViolation unless 0 <= fraction <= 1 (NaN fails)."""
    if not (0.0 <= fraction <= 1.0):
        raise ContractViolation(fraction)
