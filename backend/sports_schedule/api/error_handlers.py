"""Error Handlers — every failure leaves the API as one {"error": {...}} envelope.

Invariants:
    - ScheduleError -> its own http_status and to_response() envelope
    - RequestValidationError -> 400 VALIDATION_ERROR listing the offending camelCase fields
    - Any other Exception -> 500 INTERNAL_ERROR with no internal detail
    - 5xx are logged at error level, 4xx at warning
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sports_schedule.core.errors import ErrorCategory, ErrorSeverity, ScheduleError

logger = logging.getLogger(__name__)

# request sections FastAPI prefixes onto error locations
_LOCATION_SECTIONS = {"body", "query", "path", "header"}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ScheduleError, handle_schedule_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_schedule_error(request: Request, exc: ScheduleError) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        exc.message,
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "entity": exc.context.entity,
            "entity_id": exc.context.entity_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [_describe(error) for error in exc.errors()]
    logger.warning(
        f"Rejected request body: {[d['field'] for d in details]}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _describe(error: dict) -> dict:
    """One validation failure as {field, message, type}; field is the wire name."""
    location = [str(part) for part in error.get("loc", ())]
    if location and location[0] in _LOCATION_SECTIONS:
        location = location[1:]
    return {
        "field": ".".join(location) or "body",
        "message": error["msg"],
        "type": error["type"],
    }


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> dict:
    body = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        body["details"] = details
    return {"error": body}
