"""
Seed data loading.

At startup the application populates an empty ``WonderStore`` from a
JSON file containing an array of wonder objects.  Entries are validated
with the ``WonderIn`` schema, so field names are matched
case-insensitively and missing optional fields take their documented
defaults.  Ids present in the file are ignored; the store assigns them.

Seeding is best effort: a missing or malformed file is logged and the
application starts with an empty catalog.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from wonders_api.app.core.errors import SeedFileNotFoundError, SeedParseError
from wonders_api.app.core.store import WonderRecord, WonderStore
from wonders_api.app.schemas.wonder import WonderIn, describe_validation_error


logger = logging.getLogger(__name__)


class SeedService:
    """Load wonders from a JSON file and insert them into a store."""

    @classmethod
    def load_from(cls, path: Union[str, Path]) -> List[WonderRecord]:
        """Parse a seed file into store records, preserving source order.

        Raises ``SeedFileNotFoundError`` if ``path`` is not an existing
        file and ``SeedParseError`` if the content is not a JSON array
        of valid wonder objects.  A file containing ``null`` yields an
        empty list.
        """
        seed_path = Path(path)
        if not seed_path.is_file():
            raise SeedFileNotFoundError(f"The seed data file was not found at path: {seed_path}")
        try:
            data = json.loads(seed_path.read_text(encoding="utf-8-sig"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SeedParseError(f"Seed data file {seed_path} is not valid JSON: {exc}") from exc
        if data is None:
            return []
        if not isinstance(data, list):
            raise SeedParseError(f"Seed data file {seed_path} must contain a JSON array of wonders")

        records: List[WonderRecord] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise SeedParseError(f"Seed entry {index} in {seed_path} is not a JSON object")
            try:
                wonder = WonderIn.model_validate(item)
            except ValidationError as exc:
                raise SeedParseError(
                    f"Seed entry {index} in {seed_path} is invalid: {describe_validation_error(exc)}"
                ) from exc
            records.append(wonder.to_record())
        return records

    @classmethod
    def seed_if_empty(cls, store: WonderStore, path: Union[str, Path]) -> int:
        """Populate ``store`` from ``path`` if it holds no wonders.

        Returns the number of wonders inserted.  A store that already
        has records is left untouched.  Missing or malformed seed files
        are logged and treated as "no seed data available".
        """
        if not store.is_empty():
            logger.info("Store already holds %d wonders; skipping seed", store.count())
            return 0
        try:
            records = cls.load_from(path)
        except SeedFileNotFoundError:
            logger.warning("%s not found. No data was seeded.", path)
            return 0
        except SeedParseError as exc:
            logger.warning("Could not parse seed data: %s. No data was seeded.", exc)
            return 0
        for record in records:
            store.insert(record)
        logger.info("Seeded %d wonders from %s", len(records), path)
        return len(records)
