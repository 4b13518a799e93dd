"""
Error types and their HTTP rendering.

Route handlers raise :class:`RouterError` for expected failures; the
exception handlers registered by :func:`register_exception_handlers`
turn them into ``{"error": <message>}`` JSON bodies.  Anything else
that escapes a handler (storage failures included) is logged and
reported as a generic 500.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RouterError(Exception):
    """An error raised from route logic with a status code and short message."""

    def __init__(self, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR, message: str = "InternalError", data: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.data = data


class RegistryError(Exception):
    """Invalid model registration.  Raised at startup and never handled."""


def router_error_response(exc: RouterError) -> JSONResponse:
    """Render a :class:`RouterError` as a JSON response."""
    content = {"error": exc.message}
    if exc.data is not None:
        content["data"] = exc.data
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_router_error(request: Request, exc: RouterError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return router_error_response(exc)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "InternalError"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application's exception handlers to ``app``."""
    app.add_exception_handler(RouterError, handle_router_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
