"""
Main entrypoint for the Assignment API.

This module assembles the FastAPI application: it sets up logging,
CORS and the error envelope, includes the versioned router and wires
the MongoDB client and Firebase Admin SDK into the startup and
shutdown events.  The app is instantiated at import time as ``app``
so it can be served directly, e.g.::

    uvicorn assignment_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .core.errors import register_error_handlers
from .core.db import init_db, close_db
from .core.security import init_firebase
from .api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # Browsers send the Firebase token in the Authorization header, so
    # credentials are only allowed together with explicit origins.
    allow_all = settings.cors_origins == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()
        init_firebase()
        logger.info("%s %s started", settings.project_name, settings.api_version)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
