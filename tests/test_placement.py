"""Tests for the reference placement composer.

Test data loaded from: data/fixtures/scenarios/placement.json
"""

from __future__ import annotations

import pytest

from conftest import load_scenarios

_data = load_scenarios("placement")


class TestPlace:
    """place() turns lengths into cumulative offsets."""

    @pytest.mark.parametrize("spec", _data["place"], ids=lambda s: s["id"])
    def test_offsets(self, spec):
        from slot_sizing.placement import place

        spans = place(spec["lengths"], spec["spacing"], spec["origin"])
        assert [(s.begin, s.end) for s in spans] == [tuple(e) for e in spec["expected"]]
        assert [s.index for s in spans] == list(range(len(spec["lengths"])))

    @pytest.mark.parametrize("spec", _data["place"], ids=lambda s: s["id"])
    def test_lengths_preserved(self, spec):
        from slot_sizing.placement import place

        spans = place(spec["lengths"], spec["spacing"], spec["origin"])
        assert [s.length for s in spans] == spec["lengths"]

    def test_span_is_frozen(self):
        from slot_sizing.placement import SlotSpan

        span = SlotSpan(index=0, begin=0.0, end=10.0)
        with pytest.raises(AttributeError):
            span.end = 20.0  # type: ignore[misc]


class TestLayout:
    """layout() composes Sizing.compute and place()."""

    def test_toolbar_fills_total(self, toolbar):
        from slot_sizing.placement import layout

        sizing, spacing = toolbar
        spans = layout(sizing, 200, spacing, origin=10)
        assert spans[0].begin == 10
        assert spans[-1].end == 210
        assert [s.length for s in spans] == [32, 32, 98, 32]

    def test_gaps_equal_spacing(self, split_view):
        from slot_sizing.placement import layout

        sizing, spacing = split_view
        spans = layout(sizing, 400, spacing)
        for prev, curr in zip(spans, spans[1:]):
            assert curr.begin - prev.end == spacing

    def test_contract_violation_propagates(self):
        from slot_sizing.placement import layout
        from slot_sizing.range import Range
        from slot_sizing.size import Relative
        from slot_sizing.sizing import Sizing
        from slot_sizing.types import ContractViolation

        with pytest.raises(ContractViolation):
            layout(Sizing([Relative(3.0, Range.non_negative())]), 100, 0)
