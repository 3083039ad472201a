"""
Error types raised by controllers and services.

Every error is terminal for the request and rendered as ``{"error": message}``
with the status code carried by the exception.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from recruitment.core.logging import get_logger

logger = get_logger("recruitment.errors")


class RecruitmentError(Exception):
    """Base class for errors surfaced to the API caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(RecruitmentError):
    """Missing or invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST


class PermissionDeniedError(RecruitmentError):
    """The referenced user does not hold the required role."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(RecruitmentError):
    status_code = status.HTTP_404_NOT_FOUND


class MethodNotAllowedError(RecruitmentError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED


class StoreError(RecruitmentError):
    """A statement failed inside the database."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def format_validation_error(exc: ValidationError | RequestValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(
            str(item) for item in error.get("loc", ()) if item not in ("body", "query")
        )
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def error_response(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def recruitment_error_handler(request: Request, exc: RecruitmentError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url} -> {exc.status_code}: {exc.message}")
    return error_response(exc.message, exc.status_code)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = format_validation_error(exc)
    logger.warning(f"{request.method} {request.url} -> 400: {message}")
    return error_response(message, status.HTTP_400_BAD_REQUEST)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    message = str(getattr(exc, "orig", None) or exc)
    logger.error(f"{request.method} {request.url}: {message}")
    return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors raised by the framework (unknown URL, unsupported method)."""
    logger.warning(f"{request.method} {request.url} -> {exc.status_code}: {exc.detail}")
    return error_response(str(exc.detail), exc.status_code, getattr(exc, "headers", None))
