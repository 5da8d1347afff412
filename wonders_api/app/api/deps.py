"""Request dependencies and error translation shared by the endpoint modules."""

from fastapi import HTTPException, Request

from wonders_api.app.core.errors import CatalogError
from wonders_api.app.services.wonder_service import WonderService


def get_wonder_service(request: Request) -> WonderService:
    """Bind a ``WonderService`` to the store owned by the running application."""
    return WonderService(request.app.state.store)


def http_error(exc: CatalogError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)
