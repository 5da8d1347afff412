"""Shared fixtures for the Wonders API tests."""

import json
import random

import pytest

from wonders_api.app.core.store import WonderRecord, WonderStore


PYRAMIDS = {
    "name": "Pyramids of Giza",
    "country": "Egypt",
    "era": "Ancient",
    "type": "Tomb",
    "description": "One of the Seven Wonders of the Ancient World.",
    "discoveryYear": -2560,
}


@pytest.fixture
def pyramids_payload():
    """Wire payload for the Great Pyramid."""
    return dict(PYRAMIDS)


@pytest.fixture
def pyramids_record():
    return WonderRecord(
        name="Pyramids of Giza",
        country="Egypt",
        era="Ancient",
        type="Tomb",
        description="One of the Seven Wonders of the Ancient World.",
        discovery_year=-2560,
    )


@pytest.fixture
def store():
    """Empty store with a fixed random seed."""
    return WonderStore(rng=random.Random(1234))


@pytest.fixture
def write_seed(tmp_path):
    """Write a seed file and return its path."""

    def _write(content, name="seed-data.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
