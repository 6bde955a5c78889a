"""Shared test fixtures for camo tracker tests."""

import json
import sys
from pathlib import Path

import pytest

# Ensure the package is importable without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from camo_tracker.schema import ChecklistEntry
from camo_tracker.store import ItemStore


@pytest.fixture
def seed_file(tmp_path):
    """Seed dataset with two categories (no done flags)."""
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([
        {"name": "Desert Eagle", "category": "Pistols"},
        {"name": "M4", "category": "Rifles"},
    ], indent=2), encoding="utf-8")
    return path


@pytest.fixture
def state_file(tmp_path):
    """Path for the progress file (not created)."""
    return tmp_path / "state" / "camos.json"


@pytest.fixture
def store(state_file, seed_file):
    """Loaded store seeded from seed_file."""
    s = ItemStore(str(state_file), str(seed_file))
    s.load()
    return s


@pytest.fixture
def entries():
    return [
        ChecklistEntry("A", "X"),
        ChecklistEntry("B", "Y", done=True),
        ChecklistEntry("C", "X"),
    ]
