"""
Main entrypoint for the portfolio site.

This module assembles the FastAPI application, sets up logging,
includes the versioned JSON API and the server‑rendered pages.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn portfolio_site.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import StorageError
from .api.v1.router import router as v1_router
from .web.pages import router as pages_router

STORAGE_UNAVAILABLE = "Storage unavailable"


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that the routers below can log during setup.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix=settings.api_prefix)
    app.include_router(pages_router)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        # The store already logged the cause; file names stay out of the response.
        logging.getLogger(__name__).error("Storage unavailable for %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": STORAGE_UNAVAILABLE},
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
