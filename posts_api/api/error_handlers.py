"""
Error Handlers
==============

Translate domain errors into the HTTP bodies the frontend expects:

- NotFoundError → 404 ``{"message": "<resource> with id <id> not found"}``
- UpstreamError or any unexpected exception → 500
  ``{"error": "request processing failed"}``
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from posts_api.domain.exceptions import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "request processing failed"


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": exc.message},
    )


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR_MESSAGE},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} failed unexpectedly")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR_MESSAGE},
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Attach the domain error handlers to an application."""
    application.add_exception_handler(NotFoundError, not_found_handler)
    application.add_exception_handler(UpstreamError, upstream_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)
