"""Tests for declaration validation.

Test data loaded from: data/fixtures/scenarios/schema.json
"""

from __future__ import annotations

import pytest

from conftest import load_scenarios

_data = load_scenarios("schema")


class TestValidateSlots:

    @pytest.mark.parametrize("spec", _data["valid"], ids=lambda s: s["id"])
    def test_valid(self, spec):
        from slot_sizing.schema import validate_slots

        assert validate_slots(spec["slots"]) == []

    @pytest.mark.parametrize("spec", _data["invalid"], ids=lambda s: s["id"])
    def test_invalid(self, spec):
        from slot_sizing.schema import validate_slots

        errors = validate_slots(spec["slots"])
        assert errors, "expected at least one error"
        joined = "\n".join(errors)
        for fragment in spec["error_contains"]:
            assert fragment in joined, f"{fragment!r} not in {errors}"
        if "error_count" in spec:
            assert len(errors) == spec["error_count"]

    def test_not_a_list(self):
        from slot_sizing.schema import validate_slots

        errors = validate_slots({"kind": "remainder"})
        assert errors == ["slots must be a list, got dict"]


class TestValidateStrip:

    @pytest.mark.parametrize("spec", _data["strips"], ids=lambda s: s["id"])
    def test_error_count(self, spec):
        from slot_sizing.schema import validate_strip

        errors = validate_strip(spec["strip"])
        assert len(errors) == spec["error_count"], errors

    def test_not_an_object(self):
        from slot_sizing.schema import validate_strip

        assert validate_strip([]) == ["strip must be an object, got list"]
