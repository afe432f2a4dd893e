"""Shared test fixtures and data loading for timecodec.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference instant: Wed 2017-03-01 12:34:56.789123 UTC (ISO week 2017-09).
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
CODECS_JSON = FIXTURES_DIR / "codecs.json"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
EPOCH = datetime.fromisoformat(_reference["epoch"])
INSTANT = datetime.fromisoformat(_reference["instant"])
INSTANT_UNIX_SECONDS = _reference["instant_unix_seconds"]
INSTANT_UNIX_MILLIS = _reference["instant_unix_millis"]
INSTANT_ISO_WEEK = _reference["instant_iso_week"]


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def dt(s: str) -> datetime:
    """Datetime from an ISO 8601 string.

    >>> dt("2017-03-01T12:00:00+00:00")
    datetime.datetime(2017, 3, 1, 12, 0, tzinfo=datetime.timezone.utc)
    """
    return datetime.fromisoformat(s)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def codecs_json() -> Path:
    return CODECS_JSON
