"""Error Hierarchy — typed, categorized exceptions for all EduCenter failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by the global handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EduCenterError base: FastAPI global handler catches all
    - Typed exceptions are the error values of the allocator: callers catch
      CapacityExhaustedError explicitly instead of a generic failure
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"
    CAPACITY = "capacity"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    edu_center_id: str | None = None
    resource_id: str | None = None
    attempts: int | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class EduCenterError(Exception):
    """Base exception for all EduCenter errors."""

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
                    "edu_center_id": self.context.edu_center_id,
                    "resource_id": self.context.resource_id,
                    "attempts": self.context.attempts,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(EduCenterError):
    """Request passed schema validation but violates a domain rule."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(EduCenterError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type


class IdentifierConflictError(EduCenterError):
    """Store rejected an identifier that another writer persisted first."""
    def __init__(self, identifier: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_id = identifier
        super().__init__(
            f"Identifier '{identifier}' is already taken",
            "IDENTIFIER_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.identifier = identifier


# ─── Infrastructure Errors (500-level) ──────────────────────────

class CapacityExhaustedError(EduCenterError):
    """No unique identifier found within the attempt bound."""
    def __init__(self, attempts: int, stage: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.attempts = attempts
        ctx.user_message = "Could not allocate a unique identifier, try again"
        super().__init__(
            f"Identifier allocation exhausted after {attempts} {stage} attempt(s)",
            "IDENTIFIER_CAPACITY_EXHAUSTED", ErrorCategory.CAPACITY,
            ErrorSeverity.ERROR, ctx, 503,
        )
        self.attempts = attempts
        self.stage = stage


class DatabaseError(EduCenterError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
