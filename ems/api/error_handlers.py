"""Error Handlers — every failure leaves the API in the {"error": {...}} envelope.

Invariants:
    - EmsError → its own http_status and to_response() body
    - RequestValidationError (bad JSON, path id out of range, missing field)
      → 400 VALIDATION_ERROR with one `details` entry per failing field
    - Any other exception → 500 INTERNAL_ERROR; the body never carries the
      exception text, only the log does
    - Client errors (4xx) log at WARNING, server errors at ERROR

Design Decisions:
    - Validation and internal bodies carry the same keys as EmsError.to_response()
      (code, message, category, severity, timestamp, context) so clients parse
      one shape
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from ems.core.errors import EmsError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    _register_ems_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_ems_error_handler(app: FastAPI) -> None:

    @app.exception_handler(EmsError)
    async def ems_error_handler(request: Request, exc: EmsError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level, f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.code, "path": request.url.path,
                "employee_id": exc.context.employee_id,
                "operation": exc.context.operation,
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
        logger.warning(
            f"Rejected request body or path on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        body = _envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
        )
        body["error"]["details"] = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "context": {"employee_id": None, "operation": None},
        },
    }
