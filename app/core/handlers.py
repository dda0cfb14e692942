"""Exception handlers producing the uniform ``ErrorResponse`` body.

Business errors are mapped through ``BUSINESS_ERROR_STATUS``, which covers
every ``BusinessErrorCode`` member.  Storage integrity failures, request
validation, routing errors and unexpected exceptions each get their own
handler.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from app.core.errors import BusinessError, DataIntegrityError
from app.models.enums import BusinessErrorCode
from app.models.error import ErrorResponse

logger = logging.getLogger(__name__)

BUSINESS_ERROR_STATUS: dict[BusinessErrorCode, int] = {
    BusinessErrorCode.invalid_date: HTTPStatus.BAD_REQUEST,
    BusinessErrorCode.invalid_age: HTTPStatus.BAD_REQUEST,
    BusinessErrorCode.age_mismatch: HTTPStatus.CONFLICT,
    BusinessErrorCode.no_data: HTTPStatus.NOT_FOUND,
}

INTERNAL_ERROR_MESSAGE = "Internal server error. Please contact the administrator."


def error_response(
    status_code: int,
    message: str,
    *,
    code: BusinessErrorCode | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a ``JSONResponse`` carrying an ``ErrorResponse`` body."""
    status_code = int(status_code)
    body = ErrorResponse(
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        code=code,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


def _format_validation_error(error: dict[str, Any]) -> str:
    # Drop the leading "body"/"query" segment from the location
    loc = [str(part) for part in error.get("loc", ())[1:]]
    field = ".".join(loc) if loc else "request"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def business_error_handler(request: Request, exc: BusinessError) -> JSONResponse:
    status_code = BUSINESS_ERROR_STATUS[exc.code]
    logger.warning(
        "business_rule_violation",
        extra={"code": exc.code.value, "path": request.url.path, "error_message": exc.message},
    )
    return error_response(status_code, exc.message, code=exc.code)


async def data_integrity_handler(request: Request, exc: DataIntegrityError) -> JSONResponse:
    logger.warning(
        "data_integrity_violation",
        extra={"db_code": exc.db_code, "path": request.url.path},
    )
    return error_response(HTTPStatus.UNPROCESSABLE_ENTITY, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        message = "Invalid JSON payload"
    else:
        message = "Validation errors: " + ", ".join(
            _format_validation_error(err) for err in errors
        )
    logger.warning("request_validation_failed", extra={"path": request.url.path})
    return error_response(HTTPStatus.BAD_REQUEST, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == HTTPStatus.NOT_FOUND:
        message = "Endpoint does not exist"
    elif exc.status_code == HTTPStatus.METHOD_NOT_ALLOWED:
        message = f"Method {request.method} not allowed"
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception",
        extra={"path": request.url.path},
        exc_info=exc,
    )
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(application: FastAPI) -> None:
    """Attach every handler in this module to *application*."""
    application.add_exception_handler(BusinessError, business_error_handler)  # type: ignore[arg-type]
    application.add_exception_handler(DataIntegrityError, data_integrity_handler)  # type: ignore[arg-type]
    application.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    application.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    application.add_exception_handler(Exception, unhandled_error_handler)
