#!/usr/bin/env python
"""Visual verification report for slot-sizing.

Run:  uv run python scripts/verify.py

Produces a formatted report showing:
  1. Strip declarations from layouts.json (slot policies as tables)
  2. Each strip computed at several total lengths  -- length tables + ASCII strip
  3. Sizing scenarios  -- input/output tables, flagging any mismatch
"""

from __future__ import annotations

import json
import math
import sys
from datetime import datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from slot_sizing.debug import show_strip
from slot_sizing.loaders import load_strips_json, sizing_from_declarations


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


# Totals each strip is shown at
TOTALS = [0, 150, 300, 600, 1000]
# Characters per point in the ASCII strips
SCALE = 0.1

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _fmt_len(value: float) -> str:
    return "inf" if math.isinf(value) else f"{value:g}"


def _describe(policy) -> list[str]:
    """Kind, request and range of one policy as table cells."""
    if policy.is_absolute():
        kind, request = "absolute", _fmt_len(policy.initial)
    elif policy.is_relative():
        kind, request = "relative", f"{policy.fraction:.0%}"
    else:
        kind, request = "remainder", "-"
    rng = policy.allowed_range()
    return [kind, request, f"[{_fmt_len(rng.min)}, {_fmt_len(rng.max)}]"]


# ---------------------------------------------------------------------------
# Section 1 + 2: Strips
# ---------------------------------------------------------------------------
def section_strips():
    banner("STRIP DECLARATIONS")

    strips = load_strips_json(FIXTURES / "layouts.json")
    for strip_id, strip in strips.items():
        heading(f"Strip: {strip_id}  (spacing {strip.spacing:g})")
        rows = [
            [chr(ord("A") + i)] + _describe(policy)
            for i, policy in enumerate(strip.sizing.sizes)
        ]
        table(["Slot", "Kind", "Request", "Range"], rows)

        print()
        rows = []
        for total in TOTALS:
            lengths = strip.compute(total)
            used = sum(lengths) + strip.spacing * max(0, len(lengths) - 1)
            rows.append(
                [_fmt_len(total)]
                + [_fmt_len(round(v, 2)) for v in lengths]
                + [_fmt_len(round(used, 2))]
            )
        slot_headers = [chr(ord("A") + i) for i in range(len(strip.sizing))]
        table(["Total"] + slot_headers + ["Used"], rows)

        for total in TOTALS[-2:]:
            print(f"\n    total={total}")
            show_strip(strip.compute(total), strip.spacing, scale=SCALE)


# ---------------------------------------------------------------------------
# Section 3: Scenarios
# ---------------------------------------------------------------------------
def section_scenarios():
    banner("SIZING SCENARIOS")

    data = _load(SCENARIOS / "sizing.json")
    failures = 0

    for spec in data["compute"]:
        heading(f"Scenario: {spec['id']}")
        sizing = sizing_from_declarations(spec["slots"])
        rows = []
        for total, spacing, expected in spec["cases"]:
            actual = sizing.compute(total, spacing)
            ok = len(actual) == len(expected) and all(
                math.isclose(a, e, abs_tol=1e-9) for a, e in zip(actual, expected)
            )
            failures += not ok
            rows.append([
                _fmt_len(total), _fmt_len(spacing),
                str([round(v, 2) for v in actual]),
                "ok" if ok else f"MISMATCH (expected {expected})",
            ])
        table(["Total", "Spacing", "Lengths", "Check"], rows)

    print(f"\n    {failures} mismatching case(s)")
    return failures


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    banner("SLOT-SIZING   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_strips()
    failures = section_scenarios()

    banner("END OF REPORT")
    print()
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
