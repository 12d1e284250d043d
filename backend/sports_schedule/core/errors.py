"""Error Hierarchy — typed, categorized exceptions for all schedule failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are raised before any store mutation
    - Integrity and store errors (500-level) never carry internal details to the client
    - to_response() produces the REST envelope used by every error handler

Design Decisions:
    - Single hierarchy with ScheduleError base: one FastAPI handler catches all
    - ErrorContext as dataclass: entity/field context travels with the error, not the log call
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTEGRITY = "integrity"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for the response envelope and logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: str | None = None
    field: str | None = None

    def describe(self) -> dict[str, str]:
        """Populated context fields, keyed by their camelCase wire names."""
        wire = {"entity": self.entity, "entityId": self.entity_id, "field": self.field}
        return {key: value for key, value in wire.items() if value is not None}


class ScheduleError(Exception):
    """Base exception for all schedule errors."""

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
        """The {"error": {...}} envelope; context appears only when something is known."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        described = self.context.describe()
        if described:
            body["context"] = described
        return {"error": body}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(ScheduleError):
    """Identifier does not have the store reference format."""
    def __init__(self, value: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            f"Invalid {field} format: '{value}'",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.value = value
        self.field = field


class InvalidDateError(ScheduleError):
    """Date string could not be parsed."""
    def __init__(self, value: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            f"Invalid date format for {field}: '{value}'",
            "INVALID_DATE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.value = value
        self.field = field


class InvalidQueryError(ScheduleError):
    """Query parameter has a value outside its allowed set."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "INVALID_QUERY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field = field


class DuplicateUsernameError(ScheduleError):
    """Username is already registered."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            "Username already exists",
            "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.username = username


class AuthenticationError(ScheduleError):
    """Credentials missing or wrong."""
    def __init__(
        self,
        message: str = "Access denied",
        code: str = "AUTHENTICATION_REQUIRED",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthorizationError(ScheduleError):
    """Credentials present but not sufficient."""
    def __init__(
        self,
        message: str = "Admin access required",
        code: str = "ADMIN_REQUIRED",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(ScheduleError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = resource_type
        ctx.entity_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Server Errors (500-level) ──────────────────────────────────

class IntegrityTransactionError(ScheduleError):
    """A cascade or null-out unit failed and was rolled back."""
    def __init__(self, plan_name: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Could not complete {plan_name}; no changes were applied",
            "INTEGRITY_TRANSACTION_FAILED", ErrorCategory.INTEGRITY,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.plan_name = plan_name
        self.reason = reason


class DatabaseError(ScheduleError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
