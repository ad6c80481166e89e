"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

# Reference envelope for {"hello": "world"} produced by an independent encoder.
HELLO_WORLD_BLOB = "0KLUv/QBoiQAAeyJoZWxsbyI6IndvcmxkIn0="


@pytest.fixture
def hello_world() -> dict[str, str]:
    """Simple object with a known-good envelope."""
    return {"hello": "world"}


@pytest.fixture
def hello_world_blob() -> str:
    """Known-good envelope for the hello_world fixture."""
    return HELLO_WORLD_BLOB


@pytest.fixture
def sample_document() -> dict:
    """Nested document exercising every JSON type."""
    return {
        "id": 1312,
        "name": "Zöe ✓",
        "ratio": 0.25,
        "negative": -17,
        "big": 2**70,
        "active": True,
        "deleted": False,
        "parent": None,
        "tags": ["a", "b", "c"],
        "empty_list": [],
        "empty_obj": {},
        "nested": {"level": {"deeper": [1, [2, [3, {"x": "y"}]]]}},
    }
