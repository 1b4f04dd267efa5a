"""
Error types and handlers - every failure leaves the API as {"status": "error", "message": ...}.
"""

import enum
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resident_api.schemas.system import ErrorResponse

logger = logging.getLogger(__name__)

RESIDENT_NOT_FOUND = "Resident not found"


class ValidationReason(enum.Enum):
    """Why a create request was rejected. Value is the user-facing message."""

    NAME_REQUIRED = 'Field "name" is required'
    AGE_INVALID = 'Field "age" must be a non-negative number'


class ResidentValidationError(Exception):
    """Raised by the parse step before any registry mutation."""

    def __init__(self, reason: ValidationReason):
        super().__init__(reason.value)
        self.reason = reason


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


async def resident_validation_error_handler(request: Request, exc: ResidentValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.reason.name)
    return error_response(status.HTTP_400_BAD_REQUEST, exc.reason.value)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Reshape HTTPException (ours and the router's 404/405) into the error payload."""
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResidentValidationError, resident_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
