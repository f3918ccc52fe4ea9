"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

import math


def _chars(length: float, scale: float) -> int:
    """Whole chars for a finite length; non-finite lengths draw nothing."""
    if not math.isfinite(length * scale):
        return 0
    return max(0, round(length * scale))


def show_strip(
    lengths: list[float],
    spacing: float,
    scale: float = 1.0,
) -> str:
    """Print an ASCII view of slots laid out along one axis.

    Slot i is drawn with letter 'A' + i, gaps with '.'. Each char is
    1/scale points; lengths are rounded to whole chars. A slot whose
    length is infinite or NaN is drawn as its letter followed by '~'.
    Returns the string and also prints to stdout.

    Args:
        lengths: Slot lengths, as returned by Sizing.compute
        spacing: Gap between adjacent slots
        scale: Characters per point
    """
    label_chars = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    row: list[str] = []
    for i, length in enumerate(lengths):
        label = label_chars[i % len(label_chars)]
        if i > 0:
            row.append("." * _chars(spacing, scale))
        if math.isfinite(length * scale):
            row.append(label * _chars(length, scale))
        else:
            row.append(f"{label}~")

    legend = ", ".join(
        f"{label_chars[i % len(label_chars)]}={length:g}"
        for i, length in enumerate(lengths)
    )

    result = "|" + "".join(row) + "|"
    if legend:
        result += f"\n{legend}"
    print(result)
    return result
