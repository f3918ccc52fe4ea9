"""Layer 1: SizePolicy, how one slot wants to be sized.

Three variants share a `range` field:

    Absolute(initial, range)   fixed size; range bounds interactive resizing
    Relative(fraction, range)  fraction of the total length, clamped to range
    Remainder(range)           even share of the leftover, clamped to range

Build policies with the static builders on SizePolicy and narrow them with
at_least / at_most / with_range, which mutate and return the same object:

    SizePolicy.remainder().at_least(20)
    SizePolicy.relative(0.5).at_least(10).at_most(200)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from slot_sizing.range import Range
from slot_sizing.types import check_fraction


class SizePolicy:
    """Common interface of the three sizing variants."""

    range: Range

    # -- builders ---------------------------------------------------------

    @staticmethod
    def exact(points: float) -> Absolute:
        """Exactly this big, with no room for resize."""
        return Absolute(points, Range.point(points))

    @staticmethod
    def initial(points: float) -> Absolute:
        """Initially this big, but can resize."""
        return Absolute(points, Range.non_negative())

    @staticmethod
    def relative(fraction: float) -> Relative:
        """This fraction of all available space. Must be in [0, 1].

        Checked here only in debug mode; Sizing.compute always re-checks.
        """
        if __debug__:
            check_fraction(fraction)
        return Relative(fraction, Range.non_negative())

    @staticmethod
    def remainder() -> Remainder:
        """Multiple remainders each get the same space."""
        return Remainder(Range.non_negative())

    # -- range narrowing --------------------------------------------------

    def at_least(self, minimum: float):
        """Won't shrink below this size."""
        self.range.min = minimum
        return self

    def at_most(self, maximum: float):
        """Won't grow above this size."""
        self.range.max = maximum
        return self

    def with_range(self, range_: Range):
        """Replace the range with a copy of range_."""
        self.range = range_.copy()
        return self

    def allowed_range(self) -> Range:
        """Allowed range of lengths (a copy)."""
        return self.range.copy()

    def range_mut(self) -> Range:
        """The live range; changes to it change this policy."""
        return self.range

    # -- classification ---------------------------------------------------

    def is_absolute(self) -> bool:
        return isinstance(self, Absolute)

    def is_relative(self) -> bool:
        return isinstance(self, Relative)

    def is_remainder(self) -> bool:
        return isinstance(self, Remainder)


@dataclass
class Absolute(SizePolicy):
    initial: float
    range: Range = field(default_factory=Range.non_negative)


@dataclass
class Relative(SizePolicy):
    fraction: float
    range: Range = field(default_factory=Range.non_negative)


@dataclass
class Remainder(SizePolicy):
    range: Range = field(default_factory=Range.non_negative)
