"""
Information endpoint for API v1.

Returns the service name and version together with the number of
wonders currently in the catalog.  Useful as a liveness check and to
confirm that seeding ran at startup.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from wonders_api.app.api.deps import get_wonder_service, http_error
from wonders_api.app.core.errors import CatalogError
from wonders_api.app.services.wonder_service import WonderService

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
@router.get("/", response_model=Dict[str, Any], include_in_schema=False)
async def get_info(request: Request, service: WonderService = Depends(get_wonder_service)) -> Dict[str, Any]:
    settings = request.app.state.settings
    try:
        count = await service.count_wonders()
    except CatalogError as e:
        raise http_error(e) from e
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "wonders": count,
    }
