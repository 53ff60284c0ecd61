"""Error Hierarchy: typed, categorized exceptions for every record store failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() produces the REST envelope used by the API error handlers
    - Nothing is retried automatically; errors propagate to the caller as-is

Design Decisions:
    - Single hierarchy with SrmsError base: one global handler catches all
    - ErrorContext as dataclass: carries roll number / operation for logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    roll_number: int | None = None
    operation: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class SrmsError(Exception):
    """Base exception for all student record store errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "roll_number": self.context.roll_number,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidInputError(SrmsError):
    """A value handed to the core is out of range or malformed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class DuplicateKeyError(SrmsError):
    """Insert rejected: the roll number is already present in the store."""
    def __init__(self, roll_number: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.roll_number = roll_number
        super().__init__(
            f"Roll number {roll_number} already exists",
            "DUPLICATE_KEY", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.roll_number = roll_number


class RecordNotFoundError(SrmsError):
    """No record in the store carries the requested roll number."""
    def __init__(self, roll_number: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.roll_number = roll_number
        super().__init__(
            f"Roll number {roll_number} not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.roll_number = roll_number


# ─── Storage Errors (500-level) ─────────────────────────────────

class StoreIOError(SrmsError):
    """File open/read/write/rename failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Store {operation} failed: {message}",
            "IO_FAILURE", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation


class CorruptRecordError(StoreIOError):
    """A full-width block could not be decoded into a record."""
    def __init__(self, message: str, offset: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"offset": offset}
        super().__init__(message, "decode", ctx)
        self.code = "CORRUPT_RECORD"
        self.offset = offset
