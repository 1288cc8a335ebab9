"""Error Hierarchy — typed, categorized exceptions for all Stoneboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Resolution/validation errors are 400-level; storage errors are 500-level
    - to_response() produces the REST envelope; the message passed in is the
      user-facing one, internal detail stays in logs

Design Decisions:
    - Single hierarchy with StoneboardError base: FastAPI global handler catches all
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
    RESOLUTION = "resolution"
    VALIDATION = "validation"
    REFERENCE = "reference"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    stone_id: str | None = None
    host: str | None = None
    debug_info: dict[str, Any] | None = None


class StoneboardError(Exception):
    """Base exception for all Stoneboard errors."""

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

    def to_response(self, message: str | None = None) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "stone_id": self.context.stone_id,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class StoneResolutionError(StoneboardError):
    """No stone id could be derived from the host or the explicit override."""
    def __init__(self, host: str | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.host = host
        super().__init__(
            f"Could not resolve a stone id from host '{host}'",
            "STONE_UNRESOLVED", ErrorCategory.RESOLUTION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class PostValidationError(StoneboardError):
    """Post input failed validation (e.g. empty nickname)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


# ─── Storage Errors (500-level) ─────────────────────────────────

class StoneReferenceError(StoneboardError):
    """A post referenced a stone that does not exist (ensure_stone was skipped)."""
    def __init__(self, stone_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.stone_id = stone_id
        super().__init__(
            f"Stone '{stone_id}' does not exist",
            "STONE_NOT_FOUND", ErrorCategory.REFERENCE,
            ErrorSeverity.ERROR, ctx, 500,
        )
        self.stone_id = stone_id


class DatabaseError(StoneboardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
