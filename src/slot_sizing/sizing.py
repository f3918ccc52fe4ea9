"""Layer 2: Sizing, turning an ordered list of SizePolicy into concrete lengths.

compute() runs one pass over the policies plus a single exclusion sweep for
remainder slots whose minimum is above the naive even share. The sweep is not
iterated to a fixed point, so some pathological minimum combinations can
over-allocate the total. Callers rely on that exact output.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from slot_sizing.size import Absolute, Relative, Remainder, SizePolicy
from slot_sizing.types import check_fraction

logger = logging.getLogger(__name__)


@dataclass
class Sizing:
    """Ordered slot policies for one layout pass.

    Rebuilt by the caller on every pass; add() is the only mutation.
    """

    sizes: list[SizePolicy] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.sizes = list(self.sizes)

    def __len__(self) -> int:
        return len(self.sizes)

    def add(self, size: SizePolicy) -> None:
        self.sizes.append(size)

    def compute(self, total_length: float, spacing: float) -> list[float]:
        """Lengths for every slot, in insertion order.

        Args:
            total_length: Space available for all slots, spacing included.
            spacing: Gap between each pair of adjacent slots.

        Returns:
            One length per slot. Empty if there are no slots.

        Raises:
            ContractViolation: If a Relative fraction is outside [0, 1].

        Degenerate inputs (negative totals, spacing larger than the total,
        an exhausted remainder budget) never raise; each slot is clamped to
        its own range instead.
        """
        if not self.sizes:
            return []

        num_remainders = 0
        sum_non_remainder = 0.0
        for size in self.sizes:
            if isinstance(size, Absolute):
                sum_non_remainder += size.initial
            elif isinstance(size, Relative):
                check_fraction(size.fraction)
                sum_non_remainder += size.range.clamp(total_length * size.fraction)
            else:
                num_remainders += 1
        sum_non_remainder += spacing * (len(self.sizes) - 1)

        avg_remainder_length = 0.0
        if num_remainders > 0:
            avg_remainder_length = _remainder_share(
                self.sizes, total_length - sum_non_remainder, num_remainders
            )

        lengths: list[float] = []
        for size in self.sizes:
            if isinstance(size, Absolute):
                lengths.append(size.initial)
            elif isinstance(size, Relative):
                lengths.append(size.range.clamp(total_length * size.fraction))
            else:
                lengths.append(size.range.clamp(avg_remainder_length))
        return lengths


def _remainder_share(
    sizes: list[SizePolicy],
    remainder_length: float,
    num_remainders: int,
) -> float:
    """Even share for remainder slots after one exclusion sweep.

    Every slot is compared against the floored pre-sweep average. Slots whose
    minimum is above it are taken out of the split and their minimum is
    charged against the budget.
    """
    if remainder_length < 0:
        logger.debug("Remainder budget is negative: %s", remainder_length)

    avg = float(math.floor(max(0.0, remainder_length / num_remainders)))
    logger.debug(
        "Remainder budget %s over %d slots, naive share %s",
        remainder_length, num_remainders, avg,
    )

    for index, size in enumerate(sizes):
        if isinstance(size, Remainder) and avg < size.range.min:
            logger.debug(
                "Slot %d excluded from even split (min %s > share %s)",
                index, size.range.min, avg,
            )
            remainder_length -= size.range.min
            num_remainders -= 1

    if num_remainders == 0:
        return 0.0
    return max(0.0, remainder_length / num_remainders)
