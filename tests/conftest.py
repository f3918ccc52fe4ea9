"""Shared test fixtures and data loading for slot-sizing.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Slots in fixtures use the declaration format understood by
slot_sizing.loaders (kind / points / fraction / at_least / at_most / range).
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
LAYOUTS_PATH = FIXTURES_DIR / "layouts.json"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_layouts = _load_json(LAYOUTS_PATH)


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def make_range(pair: list):
    """Convert [min, max] (max may be null) to a Range."""
    from slot_sizing.range import Range

    low, high = pair
    return Range(float(low), float("inf") if high is None else float(high))


def make_sizing_from_slots(slots: list[dict]):
    """Build a Sizing from a list of slot declarations."""
    from slot_sizing.loaders import sizing_from_declarations

    return sizing_from_declarations(slots)


# ---------------------------------------------------------------------------
# Layout factory
# ---------------------------------------------------------------------------
def make_sizing(name: str):
    """Build (Sizing, spacing) for a named strip in layouts.json."""
    strip = _layouts["strips"][name]
    return make_sizing_from_slots(strip["slots"]), float(strip["spacing"])


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def layouts_path() -> Path:
    return LAYOUTS_PATH


@pytest.fixture
def file_table():
    """Icon, name (remainder >= 120), size (initial 80), date (20%)."""
    return make_sizing("file_table")


@pytest.fixture
def toolbar():
    """Three 32-point buttons around a stretching remainder."""
    return make_sizing("toolbar")


@pytest.fixture
def split_view():
    """30% sidebar (>= 150) next to a remainder (>= 200)."""
    return make_sizing("split_view")
