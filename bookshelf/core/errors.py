"""
Problem-style error responses

Every error body is {type, title, status}; validation failures add an
`errors` map of field name to messages.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookshelf.exceptions import (
    BadRequestError,
    ErrorMap,
    RecordNotFoundError,
    UpstreamServiceError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

NOT_FOUND_TYPE = "https://example.com/not-found"
VALIDATION_ERROR_TYPE = "https://example.com/validation-error"
SERVER_ERROR_TYPE = "https://example.com/server-error"


def problem_response(type_: str, title: str, status: int, errors: Optional[ErrorMap] = None) -> JSONResponse:
    body: Dict[str, Any] = {"type": type_, "title": title, "status": status}
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status, content=body)


def _request_errors(exc: RequestValidationError) -> ErrorMap:
    """Flatten FastAPI's request errors into an ErrorMap keyed by the offending field"""
    errors: ErrorMap = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location) or "body"
        errors.setdefault(field, []).append(error.get("msg", "is invalid"))
    return errors


async def not_found_handler(request: Request, exc: RecordNotFoundError):
    return problem_response(NOT_FOUND_TYPE, exc.title, 404)


async def validation_failed_handler(request: Request, exc: ValidationFailedError):
    status = 400 if isinstance(exc, BadRequestError) else 422
    return problem_response(VALIDATION_ERROR_TYPE, "Validation failed", status, exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return problem_response(VALIDATION_ERROR_TYPE, "Validation failed", 400, _request_errors(exc))


async def upstream_error_handler(request: Request, exc: UpstreamServiceError):
    logger.error(f"Search provider failure on {request.url.path}: {exc}")
    return problem_response(SERVER_ERROR_TYPE, "Internal server error", 500)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return problem_response(SERVER_ERROR_TYPE, "Internal server error", 500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordNotFoundError, not_found_handler)
    app.add_exception_handler(ValidationFailedError, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(UpstreamServiceError, upstream_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
