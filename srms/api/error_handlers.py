"""Error Handlers: global exception handlers for the record API.

Invariants:
    - SrmsError -> structured JSON with error code, message, severity
    - RequestValidationError -> 400 naming each rejected field (marks.1, roll_number)
    - Exception (catch-all) -> never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from srms.core.errors import SrmsError, ErrorSeverity

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "query", "path")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_srms_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_srms_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SrmsError)
    async def srms_error_handler(request: Request, exc: SrmsError):
        """Handle all record store domain/storage errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"SrmsError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "roll_number": exc.context.roll_number,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Reject malformed record, paging or subject input before the store is touched."""
        fields = _rejected_fields(exc)
        logger.warning(
            f"Rejected input on {request.url.path}: {', '.join(fields)}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc, fields),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": f"Unexpected error while handling {request.url.path}",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _field_name(loc) -> str:
    """Dotted path of the offending field, e.g. ("body", "marks", 1) -> marks.1."""
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts)


def _rejected_fields(exc: RequestValidationError) -> list[str]:
    fields: list[str] = []
    for e in exc.errors():
        name = _field_name(e["loc"])
        if name not in fields:
            fields.append(name)
    return fields


def _build_validation_error_response(
    exc: RequestValidationError, fields: list[str],
) -> dict:
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": f"Invalid value for {', '.join(fields)}",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": _field_name(e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
