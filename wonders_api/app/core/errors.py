"""
Error types raised by the Wonders API service layer.

Catalog errors carry the HTTP status code they map to so that the
endpoint modules can translate them into ``HTTPException`` instances
without a lookup table.  Seed errors are raised by the seed loader and
are handled at application startup; they never reach an HTTP client.
"""


class CatalogError(Exception):
    """Base class for errors surfaced by ``WonderService``."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(CatalogError):
    """Malformed identifier, missing body or field validation failure."""

    status_code = 400


class ConflictingIdentifierError(CatalogError):
    """The id in an update payload disagrees with the id in the route."""

    status_code = 400


class NotFoundError(CatalogError):
    """No wonder exists with the requested id, or the catalog is empty."""

    status_code = 404


class InternalError(CatalogError):
    """An unexpected failure inside the store."""

    status_code = 500

    def __init__(self, message: str = "An unexpected error occurred") -> None:
        super().__init__(message)


class SeedError(Exception):
    """Base class for seed loading failures."""


class SeedFileNotFoundError(SeedError, FileNotFoundError):
    """The seed data path does not point at an existing file."""


class SeedParseError(SeedError, ValueError):
    """The seed data file is not a JSON array of wonder objects."""
