"""
Unit tests for seed data loading.

Tests cover:
- Parsing with case-insensitive keys and field defaults
- Missing and malformed files
- Seeding only an empty store
"""

import pytest

from wonders_api.app.core.errors import SeedFileNotFoundError, SeedParseError
from wonders_api.app.core.store import WonderRecord
from wonders_api.app.services.seed_service import SeedService


THREE_WONDERS = [
    {"name": "Petra", "country": "Jordan", "era": "Ancient", "type": "City", "description": "", "discoveryYear": -312},
    {"name": "Colosseum", "country": "Italy", "era": "Classical", "type": "Amphitheatre", "description": "", "discoveryYear": 80},
    {"name": "Taj Mahal", "country": "India", "era": "Early Modern", "type": "Mausoleum", "description": "", "discoveryYear": 1632},
]


class TestLoadFrom:
    """Tests for SeedService.load_from."""

    def test_loads_records_in_source_order(self, write_seed):
        path = write_seed(THREE_WONDERS)

        records = SeedService.load_from(path)

        assert [r.name for r in records] == ["Petra", "Colosseum", "Taj Mahal"]
        assert records[0].discovery_year == -312

    def test_field_names_are_case_insensitive(self, write_seed):
        path = write_seed([{"NAME": "Petra", "Country": "Jordan", "discoveryyear": -312, "TYPE": "City"}])

        [record] = SeedService.load_from(path)

        assert record == WonderRecord(name="Petra", country="Jordan", type="City", discovery_year=-312)

    def test_missing_fields_take_defaults(self, write_seed):
        path = write_seed([{"name": "Petra"}, {"name": "Colosseum", "country": None}])

        records = SeedService.load_from(path)

        assert records[0] == WonderRecord(name="Petra")
        assert records[1].country == ""
        assert records[1].discovery_year == 0

    def test_ids_in_file_are_ignored(self, write_seed):
        path = write_seed([{"id": 40, "name": "Petra"}])

        [record] = SeedService.load_from(path)

        assert record.id == 0

    def test_null_document_is_empty(self, write_seed):
        assert SeedService.load_from(write_seed("null")) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedFileNotFoundError):
            SeedService.load_from(tmp_path / "missing.json")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SeedService.load_from(tmp_path)

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            '{"name": "Petra"}',
            '["Petra"]',
            '[{"country": "Jordan"}]',
            '[{"name": "   "}]',
            '[{"name": "Petra", "discoveryYear": "long ago"}]',
        ],
    )
    def test_malformed_content(self, write_seed, content):
        with pytest.raises(SeedParseError):
            SeedService.load_from(write_seed(content))

    def test_parse_error_is_a_value_error(self, write_seed):
        with pytest.raises(ValueError):
            SeedService.load_from(write_seed("[1, 2]"))


class TestSeedIfEmpty:
    """Tests for SeedService.seed_if_empty."""

    def test_seeds_empty_store(self, store, write_seed):
        inserted = SeedService.seed_if_empty(store, write_seed(THREE_WONDERS))

        assert inserted == 3
        assert store.count() == 3
        ids = [r.id for r in store.list()]
        assert len(set(ids)) == 3
        assert all(i > 0 for i in ids)
        assert [r.name for r in store.list()] == ["Petra", "Colosseum", "Taj Mahal"]

    def test_skips_populated_store(self, store, write_seed, pyramids_record):
        store.insert(pyramids_record)

        inserted = SeedService.seed_if_empty(store, write_seed(THREE_WONDERS))

        assert inserted == 0
        assert [r.name for r in store.list()] == ["Pyramids of Giza"]

    def test_second_call_is_noop(self, store, write_seed):
        path = write_seed(THREE_WONDERS)
        SeedService.seed_if_empty(store, path)

        assert SeedService.seed_if_empty(store, path) == 0
        assert store.count() == 3

    def test_missing_file_is_not_fatal(self, store, tmp_path, caplog):
        with caplog.at_level("WARNING"):
            inserted = SeedService.seed_if_empty(store, tmp_path / "missing.json")

        assert inserted == 0
        assert store.is_empty()
        assert "No data was seeded" in caplog.text

    def test_malformed_file_is_not_fatal(self, store, write_seed):
        assert SeedService.seed_if_empty(store, write_seed("[{")) == 0
        assert store.is_empty()

    def test_api_ids_continue_after_seed(self, store, write_seed, pyramids_record):
        SeedService.seed_if_empty(store, write_seed(THREE_WONDERS))

        assert store.insert(pyramids_record) == 4
