"""Reference placement: turn computed lengths into slot offsets.

Sizing only produces lengths. Positioning is the caller's job, and this module
shows the bookkeeping a caller does with them. Treat it as a usage guide. It
is not a renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

from slot_sizing.sizing import Sizing


@dataclass(frozen=True)
class SlotSpan:
    """Half-open extent [begin, end) of one slot along the layout axis."""

    index: int
    begin: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.begin


def place(
    lengths: list[float],
    spacing: float,
    origin: float = 0.0,
) -> list[SlotSpan]:
    """Lay lengths out end to end from origin with spacing between them."""
    spans: list[SlotSpan] = []
    cursor = origin
    for index, length in enumerate(lengths):
        if index > 0:
            cursor += spacing
        spans.append(SlotSpan(index=index, begin=cursor, end=cursor + length))
        cursor += length
    return spans


def layout(
    sizing: Sizing,
    total_length: float,
    spacing: float,
    origin: float = 0.0,
) -> list[SlotSpan]:
    """Compute lengths for total_length and place them from origin.

    Raises:
        ContractViolation: If a Relative fraction is outside [0, 1].
    """
    return place(sizing.compute(total_length, spacing), spacing, origin)
