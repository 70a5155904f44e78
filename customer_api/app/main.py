"""
Main entrypoint for the Customer API.

This module assembles the FastAPI application: it sets up logging,
creates the process‑wide customer store and service, registers
exception handlers and includes the versioned routers.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app`` so it can be served directly, e.g.::

    uvicorn customer_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import CustomerServiceError
from .core.logging_config import setup_logging
from .core.store import create_store
from .services.customer_service import CustomerService


logger = logging.getLogger(__name__)


async def customer_service_exception_handler(request: Request, exc: CustomerServiceError) -> JSONResponse:
    """Answer a classified service error with the status code it carries."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests as 400 instead of FastAPI's default 422."""
    logger.warning("Rejected malformed request %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Malformed request", "errors": jsonable_encoder(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unclassified exceptions; returns 500."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    debug = request.app.state.settings.debug
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc) if debug else "An unexpected error occurred."},
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "%s %s started with %d customer(s)",
        app.state.settings.project_name,
        app.state.settings.api_version,
        app.state.customer_service.count(),
    )
    yield
    logger.info("%s stopped", app.state.settings.project_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured application with its own, freshly created store.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file, access_log=settings.access_log)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    # The store lives exactly as long as the application.
    app.state.settings = settings
    app.state.customer_service = CustomerService(create_store(seed=settings.seed_customers), settings)

    if settings.enable_compression:
        app.add_middleware(GZipMiddleware, minimum_size=settings.compression_minimum_size)

    app.add_exception_handler(CustomerServiceError, customer_service_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
