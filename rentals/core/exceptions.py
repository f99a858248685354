"""Exception hierarchy and the HTTP handlers that render it."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class RentalsError(Exception):
    """Base exception for all rentals errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class NotFoundError(RentalsError):
    """Raised when an entity or a composite result is absent or empty."""

    status_code = status.HTTP_404_NOT_FOUND


class BadRequestError(RentalsError):
    """Raised when a required identifier or value is missing or invalid."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(RentalsError):
    """Raised when an entity with the same key already exists."""

    status_code = status.HTTP_409_CONFLICT


class PaymentGatewayError(RentalsError):
    """Raised when the payment gateway rejects or fails a request."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(
        self,
        detail: str,
        upstream_status: int | None = None,
        response: dict | None = None,
    ) -> None:
        super().__init__(detail)
        self.upstream_status = upstream_status
        self.response = response


async def rentals_error_handler(request: Request, exc: RentalsError) -> JSONResponse:
    """Render a domain error as a JSON response with its status code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    else:
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Render a database uniqueness/foreign key violation as a conflict."""
    logger.warning("%s %s -> 409: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Duplicate key error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain and database error handlers to an application."""
    app.add_exception_handler(RentalsError, rentals_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]
