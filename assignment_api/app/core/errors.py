"""
Error types and global exception handlers.

Services raise ``ValueError`` subclasses and endpoints translate them
into ``HTTPException`` with the matching status code:

* ``NotFoundError`` -> 404
* ``PermissionDeniedError`` -> 403
* any other ``ValueError`` -> 400

Whatever escapes a service otherwise is reported as a 500 carrying the
exception text.  The handlers registered here render every error in
the envelope the web client understands::

    {"success": false, "message": "Assignment not found"}
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class NotFoundError(ValueError):
    """The requested document does not exist."""


class PermissionDeniedError(ValueError):
    """The caller may not act on the requested document."""


def error_body(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


def register_error_handlers(app: FastAPI) -> None:
    """Register the global exception handlers on ``app``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        body = error_body("Invalid request data")
        body["errors"] = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
            }
            for e in exc.errors()
        ]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)
