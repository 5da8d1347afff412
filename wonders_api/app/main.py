"""
Main entrypoint for the Wonders API.

This module assembles the FastAPI application, sets up logging, owns
the ``WonderStore`` and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn wonders_api.app.main:app --reload

The store is seeded from ``Settings.seed_data_path`` during the
application lifespan, before the first request is served.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.logging_config import setup_logging
from .core.store import WonderStore
from .services.seed_service import SeedService


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed the store once, then serve requests."""
    settings: Settings = app.state.settings
    SeedService.seed_if_empty(app.state.store, settings.seed_data_path)
    logger.info(
        "%s started successfully with %d wonders",
        settings.project_name,
        app.state.store.count(),
    )
    yield


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable request bodies as 400 rather than 422."""
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Request body is not valid JSON"},
    )


def create_app(settings: Optional[Settings] = None, store: Optional[WonderStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Read from the environment if omitted.
    store : Optional[WonderStore]
        Store to serve.  A new empty store is created if omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings()
    setup_logging(settings.log_level, settings.log_file or None, settings.json_log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else WonderStore()

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
