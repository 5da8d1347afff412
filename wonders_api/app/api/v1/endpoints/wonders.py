"""
Wonder endpoints for API v1.

These routes provide CRUD operations plus random selection for
wonders.  Path identifiers are accepted as plain strings and request
bodies as raw JSON so that ``WonderService`` performs all validation;
its errors are translated into ``HTTPException`` here.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from wonders_api.app.api.deps import get_wonder_service, http_error
from wonders_api.app.core.errors import CatalogError
from wonders_api.app.schemas.wonder import WonderRead
from wonders_api.app.services.wonder_service import WonderService


router = APIRouter()

WONDER_EXAMPLE = {
    "name": "Pyramids of Giza",
    "country": "Egypt",
    "era": "Ancient",
    "type": "Tomb",
    "description": "One of the Seven Wonders of the Ancient World.",
    "discoveryYear": -2560,
}


@router.get("", response_model=List[WonderRead])
@router.get("/", response_model=List[WonderRead], include_in_schema=False)
async def list_wonders(service: WonderService = Depends(get_wonder_service)) -> List[WonderRead]:
    """Return every wonder in the catalog.

    An empty catalog yields an empty list rather than an error.
    """
    try:
        return await service.list_wonders()
    except CatalogError as e:
        raise http_error(e) from e


@router.get("/random", response_model=WonderRead)
async def random_wonder(service: WonderService = Depends(get_wonder_service)) -> WonderRead:
    """Return a randomly selected wonder.

    Raises 404 if the catalog is empty.
    """
    try:
        return await service.random_wonder()
    except CatalogError as e:
        raise http_error(e) from e


@router.get("/{wonder_id}", response_model=WonderRead)
async def get_wonder(wonder_id: str, service: WonderService = Depends(get_wonder_service)) -> WonderRead:
    """Retrieve a single wonder by its ID.

    Raises 400 if the ID is not an integer and 404 if the wonder does
    not exist.
    """
    try:
        return await service.get_wonder(wonder_id)
    except CatalogError as e:
        raise http_error(e) from e


@router.post("", response_model=WonderRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=WonderRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_wonder(
    request: Request,
    response: Response,
    payload: Any = Body(None, examples=[WONDER_EXAMPLE]),
    service: WonderService = Depends(get_wonder_service),
) -> WonderRead:
    """Create a new wonder.

    Any ``id`` in the body is ignored.  The response carries the stored
    wonder and a ``Location`` header pointing at it.
    """
    try:
        created = await service.create_wonder(payload)
    except CatalogError as e:
        raise http_error(e) from e
    response.headers["Location"] = str(request.url_for("get_wonder", wonder_id=str(created.id)))
    return created


@router.put("/{wonder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_wonder(
    wonder_id: str,
    payload: Any = Body(None, examples=[WONDER_EXAMPLE]),
    service: WonderService = Depends(get_wonder_service),
) -> None:
    """Replace every field of an existing wonder.

    A non-zero ``id`` in the body must match the path; otherwise the
    request is rejected with 400.
    """
    try:
        await service.update_wonder(wonder_id, payload)
    except CatalogError as e:
        raise http_error(e) from e
    return None


@router.delete("/{wonder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_wonder(wonder_id: str, service: WonderService = Depends(get_wonder_service)) -> None:
    """Delete a wonder.  Its ID is never reassigned."""
    try:
        await service.delete_wonder(wonder_id)
    except CatalogError as e:
        raise http_error(e) from e
    return None
