"""
Main entrypoint for the Practice Data API.

This module assembles the FastAPI application, sets up logging,
registers the envelope-producing exception handlers and mounts the
resource routers.  ``create_app`` builds and configures the app, which
is then instantiated at module import time as ``app``::

    uvicorn practice_api.app.main:app --reload

The application title, version and API prefix are provided via
``Settings`` from ``core.config``.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .api.router import router as resource_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .schemas.envelope import message_response


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application with the cities, countries and
        languages routers mounted under ``settings.api_prefix``.
    """
    # Logging first so that anything below may log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    register_exception_handlers(app)
    app.include_router(resource_router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    async def health() -> JSONResponse:
        return message_response("ok")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
