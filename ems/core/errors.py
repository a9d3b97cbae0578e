"""Error Hierarchy — typed, categorized exceptions for all EMS failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EmsError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Authorization denials on reads are NotFoundError, denials on gated mutations are
      ForbiddenError: callers cannot discover foreign records through get/set_rating
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: int | None = None
    operation: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class EmsError(Exception):
    """Base exception for all EMS errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "employee_id": self.context.employee_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotFoundError(EmsError):
    """Record or result set absent, or read access denied."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class ForbiddenError(EmsError):
    """Ownership-gated or transferable-gated mutation denied."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.ERROR, context, 403,
        )


class InvalidTypeError(EmsError):
    """Value outside an enumerated set (e.g. rating)."""
    def __init__(
        self, message: str, accepted: list[str], context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.accepted = accepted


class InvalidInputError(EmsError):
    """Required field empty."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class UnauthenticatedError(EmsError):
    """Host did not supply a usable caller principal."""
    def __init__(
        self, header: str, reason: str = "Missing caller identity",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{reason} (header '{header}')",
            "UNAUTHENTICATED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.header = header


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EmsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
