"""
Pydantic models for wonder data.

``WonderIn`` is the schema for request bodies and seed file entries.
Field names are matched case-insensitively (``Name``, ``DISCOVERYYEAR``
and ``discoveryYear`` are all accepted), unknown keys are ignored and
``null`` values fall back to the field default:

=================  ========  =======
field              type      default
=================  ========  =======
``id``             int       ``0``
``name``           str       required, non-blank
``country``        str       ``""``
``era``            str       ``""``
``type``           str       ``""``
``description``    str       ``""``
``discoveryYear``  int       ``0``
=================  ========  =======

``WonderRead`` is the response schema and always serialises
``discoveryYear`` in camel case.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from wonders_api.app.core.store import WonderRecord


WIRE_FIELDS = ("id", "name", "country", "era", "type", "description", "discoveryYear")
_WIRE_LOOKUP = {name.lower(): name for name in WIRE_FIELDS}

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def normalise_keys(data: Dict[Any, Any]) -> Dict[str, Any]:
    """Map keys onto their canonical wire spelling, dropping unknown and null entries."""
    normalised: Dict[str, Any] = {}
    for key, value in data.items():
        canonical = _WIRE_LOOKUP.get(str(key).lower())
        if canonical is None or value is None:
            continue
        normalised[canonical] = value
    return normalised


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into a single readable sentence."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "body"
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}")
    return "; ".join(parts)


class WonderIn(BaseModel):
    """Schema for creating or replacing a wonder."""

    # Strict: no coercion of "1" or true into integers, nor numbers into text.
    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    id: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Ignored on create; must match the route id on update if non-zero")
    name: str = Field(..., examples=["Pyramids of Giza"])
    country: str = Field("", examples=["Egypt"])
    era: str = Field("", examples=["Ancient"])
    type: str = Field("", examples=["Tomb"])
    description: str = Field("", examples=["One of the Seven Wonders of the Ancient World."])
    discovery_year: int = Field(0, ge=INT32_MIN, le=INT32_MAX, alias="discoveryYear", examples=[-2560])

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return normalise_keys(data)
        return data

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required")
        return v

    def to_record(self) -> WonderRecord:
        """Build a store record; the id is left for the store to assign."""
        return WonderRecord(
            name=self.name,
            country=self.country,
            era=self.era,
            type=self.type,
            description=self.description,
            discovery_year=self.discovery_year,
        )


class WonderRead(BaseModel):
    """Schema for reading a wonder from the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    country: str
    era: str
    type: str
    description: str
    discovery_year: int = Field(..., alias="discoveryYear")

    @classmethod
    def from_record(cls, record: WonderRecord) -> "WonderRead":
        return cls(
            id=record.id,
            name=record.name,
            country=record.country,
            era=record.era,
            type=record.type,
            description=record.description,
            discovery_year=record.discovery_year,
        )
