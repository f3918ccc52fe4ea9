"""slot-sizing: Length allocation for table columns and strip cells."""

from slot_sizing.loaders import (
    StripDeclaration,
    load_strip_json,
    load_strips_json,
    sizing_from_declarations,
)
from slot_sizing.placement import SlotSpan, layout, place
from slot_sizing.range import Range
from slot_sizing.size import Absolute, Relative, Remainder, SizePolicy
from slot_sizing.sizing import Sizing
from slot_sizing.types import ContractViolation

__all__ = [
    "Absolute",
    "ContractViolation",
    "Range",
    "Relative",
    "Remainder",
    "SizePolicy",
    "Sizing",
    "SlotSpan",
    "StripDeclaration",
    "layout",
    "load_strip_json",
    "load_strips_json",
    "place",
    "sizing_from_declarations",
]
