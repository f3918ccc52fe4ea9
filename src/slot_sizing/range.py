"""Boundary: Range, the inclusive [min, max] bound used to clamp lengths."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


@dataclass
class Range:
    """Inclusive length bound. Mutable so a policy can narrow it in place.

    min <= max is assumed, not checked. Whoever supplies the bound is
    responsible for it.
    """

    min: float
    max: float

    @classmethod
    def point(cls, value: float) -> Range:
        """Degenerate range [value, value]."""
        return cls(value, value)

    @classmethod
    def non_negative(cls) -> Range:
        """[0, inf): any non-negative length."""
        return cls(0.0, math.inf)

    @property
    def span(self) -> float:
        return self.max - self.min

    def clamp(self, value: float) -> float:
        """Restrict value into [min, max]."""
        if value < self.min:
            return self.min
        if value > self.max:
            return self.max
        return value

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def copy(self) -> Range:
        return replace(self)
