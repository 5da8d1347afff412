"""
Business logic for wonders.

``WonderService`` validates raw request input, translates between the
wire schemas and store records and delegates to a ``WonderStore``.  It
is constructed around an explicit store instance, so the application
and the tests decide which store it works on.

Every method either returns a result or raises a ``CatalogError``
subclass.  Unexpected failures inside the store are logged and
reported as ``InternalError`` so callers never see a raw exception.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Any, Callable, List, TypeVar

from pydantic import ValidationError

from wonders_api.app.core.errors import (
    ConflictingIdentifierError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
)
from wonders_api.app.core.store import WonderStore
from wonders_api.app.schemas.wonder import INT32_MAX, INT32_MIN, WonderIn, WonderRead, describe_validation_error


logger = logging.getLogger(__name__)

T = TypeVar("T")

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_wonder_id(raw_id: Any) -> int:
    """Convert a route identifier to an int or raise ``InvalidArgumentError``."""
    if isinstance(raw_id, bool):
        raise InvalidArgumentError(f"Invalid wonder id '{raw_id}': must be an integer")
    if isinstance(raw_id, int):
        value = raw_id
    else:
        text = str(raw_id).strip()
        if not _ID_PATTERN.fullmatch(text):
            raise InvalidArgumentError(f"Invalid wonder id '{raw_id}': must be an integer")
        value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidArgumentError(f"Invalid wonder id '{raw_id}': out of range")
    return value


def parse_wonder_payload(payload: Any) -> WonderIn:
    """Validate a request body against ``WonderIn``."""
    if payload is None or payload == {}:
        raise InvalidArgumentError("Request body is required")
    if not isinstance(payload, dict):
        raise InvalidArgumentError("Request body must be a JSON object")
    try:
        return WonderIn.model_validate(payload)
    except ValidationError as exc:
        raise InvalidArgumentError(describe_validation_error(exc)) from exc


class WonderService:
    """Catalog operations over a single ``WonderStore``."""

    def __init__(self, store: WonderStore) -> None:
        self.store = store

    def _call(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        """Run a store call, converting unexpected failures into ``InternalError``."""
        try:
            return func(*args)
        except Exception as exc:
            logger.exception("Store failure during %s %s", operation, args)
            raise InternalError() from exc

    async def list_wonders(self) -> List[WonderRead]:
        records = self._call("list", self.store.list)
        logger.info("Fetched %d wonders from store", len(records))
        return [WonderRead.from_record(record) for record in records]

    async def count_wonders(self) -> int:
        return self._call("count", self.store.count)

    async def get_wonder(self, raw_id: Any) -> WonderRead:
        """Return a single wonder.

        Raises ``InvalidArgumentError`` for a non-integer id and
        ``NotFoundError`` if no wonder has that id.
        """
        wonder_id = parse_wonder_id(raw_id)
        record = self._call("get", self.store.get, wonder_id)
        if record is None:
            raise NotFoundError(f"Wonder with ID {wonder_id} not found")
        return WonderRead.from_record(record)

    async def create_wonder(self, payload: Any) -> WonderRead:
        """Validate and store a new wonder.

        Any id supplied by the client is ignored; the stored record,
        including its assigned id, is returned.
        """
        data = parse_wonder_payload(payload)
        record = data.to_record()
        wonder_id = self._call("insert", self.store.insert, record)
        logger.info("Created new wonder: %s", data.name)
        return WonderRead.from_record(replace(record, id=wonder_id))

    async def update_wonder(self, raw_id: Any, payload: Any) -> None:
        """Replace every mutable field of an existing wonder.

        A non-zero id in the payload must equal the route id, otherwise
        ``ConflictingIdentifierError`` is raised before the store is
        touched.
        """
        wonder_id = parse_wonder_id(raw_id)
        data = parse_wonder_payload(payload)
        if data.id and data.id != wonder_id:
            raise ConflictingIdentifierError(
                f"Wonder id {data.id} in the body does not match id {wonder_id} in the path"
            )
        if not self._call("update", self.store.update, wonder_id, data.to_record()):
            raise NotFoundError(f"Wonder with ID {wonder_id} not found")
        logger.info("Updated wonder with ID %s", wonder_id)

    async def delete_wonder(self, raw_id: Any) -> None:
        wonder_id = parse_wonder_id(raw_id)
        if not self._call("delete", self.store.delete, wonder_id):
            raise NotFoundError(f"Wonder with ID {wonder_id} not found")
        logger.info("Deleted wonder with ID %s", wonder_id)

    async def random_wonder(self) -> WonderRead:
        record = self._call("random", self.store.pick_random)
        if record is None:
            raise NotFoundError("No records available")
        logger.info("Returned random wonder: %s", record.name)
        return WonderRead.from_record(record)
