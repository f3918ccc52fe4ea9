"""Data loading utilities for strip declarations."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path

from slot_sizing.range import Range
from slot_sizing.schema import validate_slots, validate_strip
from slot_sizing.size import SizePolicy
from slot_sizing.sizing import Sizing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StripDeclaration:
    """A loaded strip: its policies and the spacing between slots."""

    strip_id: str
    sizing: Sizing
    spacing: float

    def compute(self, total_length: float) -> list[float]:
        return self.sizing.compute(total_length, self.spacing)


def _bound(value: float | None) -> float:
    return math.inf if value is None else float(value)


def policy_from_declaration(decl: dict) -> SizePolicy:
    """Build one SizePolicy from an already-validated declaration.

    Applied in order: builder, range, at_least, at_most.
    """
    kind = decl["kind"]
    if kind == "exact":
        policy = SizePolicy.exact(float(decl["points"]))
    elif kind == "initial":
        policy = SizePolicy.initial(float(decl["points"]))
    elif kind == "relative":
        policy = SizePolicy.relative(float(decl["fraction"]))
    else:
        policy = SizePolicy.remainder()

    if "range" in decl:
        low, high = decl["range"]
        policy.with_range(Range(float(low), _bound(high)))
    if "at_least" in decl:
        policy.at_least(float(decl["at_least"]))
    if "at_most" in decl:
        policy.at_most(_bound(decl["at_most"]))
    return policy


def sizing_from_declarations(slots: list[dict]) -> Sizing:
    """Validate slot declarations and build a Sizing.

    Raises ValueError listing every problem if validation fails.
    """
    errors = validate_slots(slots)
    if errors:
        raise ValueError(
            "Validation errors in slot declarations:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )
    return Sizing([policy_from_declaration(d) for d in slots])


def _strip_from_data(strip_id: str, data: dict) -> StripDeclaration:
    return StripDeclaration(
        strip_id=strip_id,
        sizing=Sizing([policy_from_declaration(d) for d in data["slots"]]),
        spacing=float(data.get("spacing", 0)),
    )


def load_strip_json(path: str | Path) -> StripDeclaration:
    """Load one strip declaration from a JSON file.

    The JSON file has the form:
    {
        "id": "...",
        "spacing": 4,
        "slots": [ {"kind": "exact", "points": 40}, {"kind": "remainder"} ]
    }

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    errors = validate_strip(data)
    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    strip_id = data.get("id", path.stem)
    logger.debug("Loaded strip %r from %s", strip_id, path)
    return _strip_from_data(strip_id, data)


def load_strips_json(path: str | Path) -> dict[str, StripDeclaration]:
    """Load several named strips from a JSON file.

    The JSON must have the form:
    {
        "strips": {
            "toolbar": { "spacing": 4, "slots": [...] },
            ...
        }
    }
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict) or not isinstance(data.get("strips"), dict):
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            f"  - missing or invalid 'strips'"
        )

    strips: dict[str, StripDeclaration] = {}
    for strip_id, strip_data in data["strips"].items():
        errors = validate_strip(strip_data)
        if errors:
            raise ValueError(
                f"Validation errors for {strip_id} in {path.name}:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )
        strips[strip_id] = _strip_from_data(strip_id, strip_data)

    logger.debug("Loaded %d strips from %s", len(strips), path)
    return strips
