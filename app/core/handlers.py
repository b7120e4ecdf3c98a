"""
Exception handlers rendering every failure as an ApiResponse envelope.
"""
import logging
import uuid
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import AppException
from app.schema.common import ApiResponse

logger = logging.getLogger(__name__)


def _envelope(status_code: int, body: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.error(f"{exc.__class__.__name__}: {exc.message}")
    return _envelope(exc.status_code, ApiResponse.error(exc.message, path=request.url.path))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Field -> message map; several errors on one field are joined with '; '."""
    field_errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        message = error.get("msg", "Invalid value")
        if field in field_errors:
            field_errors[field] = f"{field_errors[field]}; {message}"
        else:
            field_errors[field] = message
        logger.debug(f"Field error - {field}: {message}")

    logger.error(f"Validation failed: {len(field_errors)} error(s)")
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        ApiResponse.error(
            "Validation failed for one or more fields",
            path=request.url.path,
            errors=field_errors,
        ),
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the full error internally; return a generic message with an error id."""
    error_id = str(uuid.uuid4())
    logger.error(
        f"Unhandled exception (error_id={error_id}) on {request.method} {request.url.path}",
        exc_info=exc,
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ApiResponse.error(
            f"An unexpected error occurred. Reference error_id {error_id}.",
            path=request.url.path,
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
