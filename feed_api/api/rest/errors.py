"""Exception handlers turning application errors into `{message, data}` responses"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...core.errors import FeedError

logger = logging.getLogger(__name__)


async def feed_error_handler(request: Request, exc: FeedError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.debug(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "data": exc.data},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies, forms and query parameters use the same shape as ValidationError"""
    errors = exc.errors()
    logger.debug(f"{request.method} {request.url.path} -> 422: {len(errors)} request error(s)")
    return JSONResponse(
        status_code=422,
        content={
            "message": "Invalid input.",
            "data": [{"message": error.get("msg", "Invalid value.")} for error in errors],
        },
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail, "data": None},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "An unexpected error occurred.", "data": None},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(FeedError, feed_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_handler)
    application.add_exception_handler(StarletteHTTPException, http_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)
