"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.errors import (
    DECODE_ERROR,
    INTERNAL_ERROR,
    NOT_FOUND,
    DomainValidationError,
    GeometryDecodeError,
    NotFoundError,
)
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def domain_validation_error_handler(
    _request: Request, exc: DomainValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        exc.code,
    )


def geometry_decode_error_handler(
    _request: Request, exc: GeometryDecodeError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        DECODE_ERROR,
    )


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        str(exc),
        NOT_FOUND,
    )


def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Store failures stay opaque to clients.
    logger.error(
        "Store error while handling %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal error",
        INTERNAL_ERROR,
    )


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(GeometryDecodeError, geometry_decode_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
